"""Console rendering of a processed transcript.

Shows the original and corrected text, the confidence with a
high/medium/low label, every correction, and the event proposal so the
user can confirm it before anything is created.

The primary entry point is :func:`format_processed_result`, which returns
the formatted string.  :func:`print_processed_result` writes it to stdout.
"""

from __future__ import annotations

import sys

from cal_speech.models.speech import (
    CorrectionType,
    ExtractedEventInfo,
    ProcessedSpeechResult,
    SpeechCorrection,
)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_BANNER_WIDTH = 60
_SEPARATOR = "=" * _BANNER_WIDTH

_TYPE_LABELS: dict[CorrectionType, str] = {
    "time": "TIME",
    "date": "DATE",
    "number": "NUMBER",
    "event_type": "EVENT",
    "common_word": "WORD",
}

HIGH_CONFIDENCE = 0.9
MEDIUM_CONFIDENCE = 0.7


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def confidence_level(confidence: float) -> str:
    """Bucket a confidence score as ``"high"``, ``"medium"``, or ``"low"``."""
    if confidence >= HIGH_CONFIDENCE:
        return "high"
    if confidence >= MEDIUM_CONFIDENCE:
        return "medium"
    return "low"


def format_percent(confidence: float) -> str:
    """Render a score as a whole percentage, e.g. ``"85%"``."""
    return f"{round(confidence * 100)}%"


def format_processed_result(result: ProcessedSpeechResult) -> str:
    """Render a :class:`ProcessedSpeechResult` for the console.

    Args:
        result: The pipeline result to format.

    Returns:
        A multi-line string ready for display.
    """
    lines: list[str] = [_SEPARATOR, "  SPEECH POST-PROCESSING", _SEPARATOR]

    lines.append(f"  Original:  {result.original_text}")
    lines.append(f"  Corrected: {result.corrected_text}")
    lines.append(
        f"  Confidence: {format_percent(result.confidence)}"
        f" ({confidence_level(result.confidence)})"
    )

    _append_corrections(lines, result.corrections)
    _append_event(lines, result.event_info)

    lines.append(_SEPARATOR)
    return "\n".join(lines)


def print_processed_result(result: ProcessedSpeechResult) -> None:
    """Format and print a :class:`ProcessedSpeechResult` to stdout."""
    sys.stdout.write(format_processed_result(result) + "\n")


# ---------------------------------------------------------------------------
# Internal formatters
# ---------------------------------------------------------------------------


def _append_corrections(lines: list[str], corrections: tuple[SpeechCorrection, ...]) -> None:
    lines.append("")
    if not corrections:
        lines.append("--- Corrections: none ---")
        return

    lines.append(f"--- Corrections ({len(corrections)}) ---")
    for correction in corrections:
        lines.append(
            f"  [{_TYPE_LABELS[correction.type]}] "
            f"{correction.original} -> {correction.corrected} "
            f"({format_percent(correction.confidence)})"
        )


def _append_event(lines: list[str], event: ExtractedEventInfo | None) -> None:
    lines.append("")
    if event is None:
        lines.append("--- Event: none detected ---")
        return

    lines.append("--- Event proposal (confirm before saving) ---")
    lines.append(f"  Title: {event.title}")
    lines.append(f"  When:  {event.date} {event.start_time} - {event.end_time}")
    lines.append(f"  Color: {event.color}")
    lines.append(f"  Confidence: {format_percent(event.confidence)}")
    lines.append(f"  Description: {event.description}")
