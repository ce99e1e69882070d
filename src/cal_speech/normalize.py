"""Whitespace and punctuation hygiene for raw transcripts.

Normalization is not tracked as a correction: it only removes noise the
recogniser adds around the content.
"""

from __future__ import annotations

import re

from cal_speech.tables import ZH_CN_TABLES, SpeechTables

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str, tables: SpeechTables = ZH_CN_TABLES) -> str:
    """Clean up a raw transcript.

    Trims the text, collapses whitespace runs to a single space, removes
    the table's punctuation marks, and drops spaces around time/date unit
    particles (``"3 点"`` becomes ``"3点"``).

    Args:
        text: Raw recogniser output.  May be empty.
        tables: Tables providing punctuation and unit particles.

    Returns:
        The normalized text; empty input yields ``""``.
    """
    if not text or not text.strip():
        return ""

    cleaned = _WHITESPACE_RE.sub(" ", text.strip())
    cleaned = tables.punctuation_re.sub("", cleaned)
    cleaned = tables.particle_spacing_re.sub(r"\1", cleaned)
    # Removing a trailing mark can expose a trailing space.
    return cleaned.strip()
