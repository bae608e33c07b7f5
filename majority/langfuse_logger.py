"""Langfuse observability for majority-check runs. Every helper is a no-op without a client."""
from __future__ import annotations

from typing import Any, Optional

DEFAULT_HOST = "https://cloud.langfuse.com"


def maybe_create_langfuse(public_key: Optional[str], secret_key: Optional[str], host: Optional[str] = None):
    """Return a Langfuse client if credentials are available, else None."""
    if not (public_key and secret_key):
        return None
    from langfuse import Langfuse
    return Langfuse(public_key=public_key, secret_key=secret_key, host=host or DEFAULT_HOST)


def start_trace(client, name: str, metadata: Optional[dict] = None, tags: Optional[list[str]] = None):
    if client is None:
        return None
    return client.trace(name=name, metadata=metadata or {}, tags=tags or [])


def log_span(trace, name: str, input_payload: Any, output_payload: Any) -> None:
    if trace is None:
        return
    trace.span(name=name, input=input_payload, output=output_payload)


def log_score(trace, name: str, value: float, comment: Optional[str] = None) -> None:
    if trace is None:
        return
    trace.score(name=name, value=value, comment=comment)


def flush(client) -> None:
    if client is None:
        return
    client.flush()
