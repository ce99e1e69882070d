"""Configuration loading for cal-speech.

Reads settings from environment variables (with .env support via
python-dotenv).  Every setting is optional; invalid values raise
:class:`ConfigError`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        log_level: Logging level (default ``"INFO"``).
        timezone: IANA timezone used to decide what "today" is when no
            reference date is given (default ``"Asia/Shanghai"``).
    """

    log_level: str = "INFO"
    timezone: str = "Asia/Shanghai"

    def today(self) -> date:
        """Return the current date in the configured timezone."""
        return datetime.now(ZoneInfo(self.timezone)).date()


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the project root
    is picked up automatically.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If ``LOG_LEVEL`` is not a logging level name or
            ``TIMEZONE`` is not a known IANA timezone.
    """
    load_dotenv()

    values: dict[str, str] = {}

    log_level = os.environ.get("LOG_LEVEL", "").strip()
    if log_level:
        if not isinstance(logging.getLevelName(log_level.upper()), int):
            raise ConfigError(f"Invalid LOG_LEVEL: {log_level!r}")
        values["log_level"] = log_level.upper()

    timezone = os.environ.get("TIMEZONE", "").strip()
    if timezone:
        try:
            ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ConfigError(f"Invalid TIMEZONE: {timezone!r}") from exc
        values["timezone"] = timezone

    return Settings(**values)
