"""Logging setup for cal-speech.

The pipeline modules log through ``logging.getLogger(__name__)``: each
correcting stage reports its correction count at DEBUG and the
orchestrator writes a one-line INFO summary per transcript.  The CLI calls
:func:`setup_logging` once, at ``LOG_LEVEL`` or at DEBUG with ``-v``, so
those records reach stderr while stdout stays free for the rendered result
or the JSON payload.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Marks the handler installed here so repeated calls reuse it and leave
# externally added handlers alone.
_HANDLER_ATTR = "_cal_speech_log_handler"


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Route pipeline log records to *stream* at *level*.

    Safe to call repeatedly: the second call only updates the level.

    Args:
        level: A standard logging level name (e.g. ``"DEBUG"``).
        stream: Where to write; defaults to :data:`sys.stderr`.

    Raises:
        ValueError: If *level* is not a recognised logging level string.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    root = logging.getLogger()
    root.setLevel(numeric_level)

    existing = [h for h in root.handlers if getattr(h, _HANDLER_ATTR, False)]
    if existing:
        for handler in existing:
            handler.setLevel(numeric_level)
        return

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a cal-speech module, e.g. ``"cal_speech.pipeline"``."""
    return logging.getLogger(name)
