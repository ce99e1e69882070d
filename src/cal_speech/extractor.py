"""Best-effort event extraction from a corrected transcript.

The extractor only proposes an event when the text carries at least one
temporal signal (a canonical time or a date keyword); purely
conversational text never yields an event.
"""

from __future__ import annotations

import logging
import re
from datetime import date

from cal_speech.models.speech import EventColor, ExtractedEventInfo
from cal_speech.tables import ZH_CN_TABLES, SpeechTables
from cal_speech.temporal import shift_date

logger = logging.getLogger(__name__)

DEFAULT_START_TIME = "09:00"
BASE_CONFIDENCE = 0.5
CATEGORY_BONUS = 0.2

_CANONICAL_TIME_RE = re.compile(r"(?<!\d)(?:[01]\d|2[0-3]):[0-5]\d(?!\d)")
_LAST_MINUTE = "23:59"


def add_one_hour(start_time: str) -> str:
    """Return *start_time* plus one hour, clamped to ``23:59``.

    >>> add_one_hour("09:30")
    '10:30'
    >>> add_one_hour("23:15")
    '23:59'
    """
    hour, minute = (int(part) for part in start_time.split(":"))
    if hour >= 23:
        return _LAST_MINUTE
    return f"{hour + 1:02d}:{minute:02d}"


def find_times(text: str) -> list[str]:
    """Return every canonical ``HH:MM`` token in *text*, in order."""
    return _CANONICAL_TIME_RE.findall(text)


def has_date_signal(text: str, tables: SpeechTables = ZH_CN_TABLES) -> bool:
    """Whether *text* mentions a date keyword or an ISO date literal."""
    return tables.date_trigger_re.search(text) is not None


def detect_category(
    text: str, tables: SpeechTables = ZH_CN_TABLES
) -> tuple[str, EventColor] | None:
    """Return ``(label, color)`` of the first category matching *text*.

    Categories are tried in priority order, regardless of where in the
    text their keywords appear.
    """
    for category in tables.categories:
        if category.pattern.search(text):
            return category.label, category.color
    return None


def resolve_event_date(
    text: str, reference_date: date, tables: SpeechTables = ZH_CN_TABLES
) -> str:
    """Pick the event date from the first matching keyword, else today."""
    for keyword, offset in tables.event_date_offsets:
        if keyword in text:
            return shift_date(reference_date, offset).isoformat()
    return reference_date.isoformat()


def extract_event_info(
    text: str,
    reference_date: date,
    tables: SpeechTables = ZH_CN_TABLES,
) -> ExtractedEventInfo | None:
    """Build an event proposal from corrected text.

    Args:
        text: Fully corrected transcript.
        reference_date: The "today" used to resolve the event date.
        tables: Tables providing date keywords and event categories.

    Returns:
        An :class:`ExtractedEventInfo`, or ``None`` when *text* contains
        neither a canonical time nor a date token.
    """
    times = find_times(text)
    dated = has_date_signal(text, tables)

    title = tables.default_title
    color: EventColor = "blue"
    confidence = BASE_CONFIDENCE

    category = detect_category(text, tables)
    if category is not None:
        title, color = category
        confidence += CATEGORY_BONUS

    if not times and not dated:
        logger.debug("No time or date token found, no event extracted")
        return None

    start_time = times[0] if times else DEFAULT_START_TIME
    end_time = times[1] if len(times) > 1 else add_one_hour(start_time)

    return ExtractedEventInfo(
        title=title,
        date=resolve_event_date(text, reference_date, tables),
        start_time=start_time,
        end_time=end_time,
        description=tables.description_template.format(text=text),
        confidence=min(confidence, 1.0),
        color=color,
    )
