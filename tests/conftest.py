"""Shared pytest configuration — adds project root to sys.path."""
import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path so `from majority.xxx import` works
# regardless of where pytest is invoked from.
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("LANGFUSE_PUBLIC_KEY", "LANGFUSE_SECRET_KEY", "LANGFUSE_HOST", "MAJORITY_CHECK_SORTED"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
