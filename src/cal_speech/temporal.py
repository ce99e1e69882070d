"""Clock-time standardization and relative-date resolution.

:func:`standardize_time_expressions` rewrites every recognised clock time
into canonical zero-padded 24-hour ``HH:MM``.  It runs three passes in
order:

1. Hour and minute (``3:5``, ``3点30分``) become ``HH:MM``.
2. Hour only (``3点``) becomes ``HH:00``.
3. A period-of-day word in front of ``HH:MM`` (``下午03:00``) is folded
   into the hour (``15:00``).

Hours outside ``0-23`` and minutes outside ``0-59`` never match, so
malformed tokens pass through untouched.

:func:`resolve_relative_dates` records the absolute date each relative
keyword refers to.  It does not rewrite the text.
"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass
from datetime import date, timedelta

from cal_speech.corrections import StageResult
from cal_speech.models.speech import SpeechCorrection
from cal_speech.tables import ZH_CN_TABLES, PeriodRule, SpeechTables

logger = logging.getLogger(__name__)

CLOCK_CONFIDENCE = 0.9
HOUR_ONLY_CONFIDENCE = 0.85
PERIOD_CONFIDENCE = 0.9
DATE_CONFIDENCE = 0.95

_HOUR = r"(?<!\d)([01]?\d|2[0-3])"
_MINUTE = r"([0-5]?\d)(?!\d)"


@dataclass(frozen=True)
class _TimePatterns:
    clock: re.Pattern[str]
    hour_only: re.Pattern[str]
    period: re.Pattern[str]


@functools.lru_cache(maxsize=8)
def _time_patterns(tables: SpeechTables) -> _TimePatterns:
    separators = re.escape(tables.hour_separators)
    suffix = f"(?:{re.escape(tables.minute_suffix)})?" if tables.minute_suffix else ""
    periods = "|".join(re.escape(word) for word, _ in tables.periods) or "(?!)"
    return _TimePatterns(
        clock=re.compile(rf"{_HOUR}[{separators}]{_MINUTE}{suffix}"),
        # The lookahead keeps a colon that already heads a minute out of
        # this pass, so ``03:30`` is never read as ``03:`` + ``30``.
        hour_only=re.compile(rf"{_HOUR}[{separators}](?!\d)"),
        period=re.compile(rf"({periods})\s*([01]\d|2[0-3]):([0-5]\d)(?!\d)"),
    )


def to_24_hour(hour: int, rule: PeriodRule) -> int:
    """Apply a period-of-day rule to a clock hour.

    Afternoon and evening add 12 to hours below 12, morning maps 12 to 0,
    and noon lifts hours below 12 to 12.
    """
    if rule == "afternoon" and hour < 12:
        return hour + 12
    if rule == "morning" and hour == 12:
        return 0
    if rule == "noon" and hour < 12:
        return 12
    return hour


def standardize_time_expressions(
    text: str, tables: SpeechTables = ZH_CN_TABLES
) -> StageResult:
    """Rewrite clock-time expressions into canonical ``HH:MM``.

    Args:
        text: Transcript after numeral correction (numerals are digits).
        tables: Tables providing separators, minute suffix, and periods.

    Returns:
        The rewritten text and its ``"time"`` corrections.  Passes 1 and 2
        only record a correction when the canonical form differs from the
        matched text; pass 3 always records one because the period word is
        consumed.
    """
    patterns = _time_patterns(tables)
    corrections: list[SpeechCorrection] = []

    def _record(original: str, corrected: str, confidence: float) -> None:
        corrections.append(
            SpeechCorrection(
                original=original, corrected=corrected, type="time", confidence=confidence
            )
        )

    def _clock(match: re.Match[str]) -> str:
        canonical = f"{int(match.group(1)):02d}:{int(match.group(2)):02d}"
        if match.group(0) != canonical:
            _record(match.group(0), canonical, CLOCK_CONFIDENCE)
        return canonical

    def _hour_only(match: re.Match[str]) -> str:
        canonical = f"{int(match.group(1)):02d}:00"
        if match.group(0) != canonical:
            _record(match.group(0), canonical, HOUR_ONLY_CONFIDENCE)
        return canonical

    def _period(match: re.Match[str]) -> str:
        rule = tables.period_rules[match.group(1)]
        hour = to_24_hour(int(match.group(2)), rule)
        canonical = f"{hour:02d}:{match.group(3)}"
        _record(match.group(0), canonical, PERIOD_CONFIDENCE)
        return canonical

    text = patterns.clock.sub(_clock, text)
    text = patterns.hour_only.sub(_hour_only, text)
    text = patterns.period.sub(_period, text)

    logger.debug("Time stage applied %d correction(s)", len(corrections))
    return text, corrections


def shift_date(reference_date: date, days: int) -> date:
    """Return *reference_date* moved by *days*, clamped to the calendar range.

    >>> shift_date(date(9999, 12, 31), 1)
    datetime.date(9999, 12, 31)
    """
    try:
        return reference_date + timedelta(days=days)
    except OverflowError:
        return date.max if days > 0 else date.min


def resolve_relative_dates(
    text: str,
    reference_date: date,
    tables: SpeechTables = ZH_CN_TABLES,
) -> StageResult:
    """Resolve relative date keywords against *reference_date*.

    Every keyword present anywhere in *text* yields a ``"date"``
    correction pairing the keyword with its ``YYYY-MM-DD`` date.  A
    keyword embedded in a longer one (``后天`` inside ``大后天``) is
    resolved too.

    Args:
        text: Transcript after time standardization.
        reference_date: The "today" the offsets are added to.
        tables: Tables providing the keyword offsets.

    Returns:
        *text* unchanged, and the date corrections.
    """
    corrections = [
        SpeechCorrection(
            original=keyword,
            corrected=shift_date(reference_date, offset).isoformat(),
            type="date",
            confidence=DATE_CONFIDENCE,
        )
        for keyword, offset in tables.relative_dates
        if keyword in text
    ]
    logger.debug("Date stage resolved %d keyword(s)", len(corrections))
    return text, corrections
