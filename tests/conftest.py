"""Shared fixtures for cal-speech tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import date

import pytest


@pytest.fixture()
def reference_date() -> date:
    """Fixed "today" so relative dates are deterministic."""
    return date(2025, 6, 10)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all cal-speech environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("cal_speech.config.load_dotenv", lambda *_a, **_kw: None)
    for key in ("LOG_LEVEL", "TIMEZONE"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root logger after each test to prevent handler leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
