"""Ensure project root is on sys.path for test imports."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from argflags.config import END_OF_OPTIONS_ENV, LOG_LEVEL_ENV, NUMERIC_MODE_ENV, reload_config  # noqa: E402


@pytest.fixture(autouse=True)
def _argflags_env_defaults(monkeypatch):
    """Run every test against the default configuration."""

    for key in (NUMERIC_MODE_ENV, END_OF_OPTIONS_ENV, LOG_LEVEL_ENV, "FORCE_COLOR"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    reload_config()
    yield
    reload_config()
