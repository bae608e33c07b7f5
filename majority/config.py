from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"", "0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    langfuse_public_key: str | None
    langfuse_secret_key: str | None
    langfuse_host: str | None
    check_sorted: bool


def _env_flag(name: str) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(f"{name} must be one of 1/0, true/false, yes/no, on/off (got {raw!r}).")


def check_sorted_enabled() -> bool:
    return _env_flag("MAJORITY_CHECK_SORTED")


def load_settings() -> Settings:
    # nothing is required; entry points call load_dotenv() first
    return Settings(
        langfuse_public_key=os.getenv("LANGFUSE_PUBLIC_KEY") or None,
        langfuse_secret_key=os.getenv("LANGFUSE_SECRET_KEY") or None,
        langfuse_host=os.getenv("LANGFUSE_HOST") or None,
        check_sorted=check_sorted_enabled(),
    )
