"""Pipeline orchestrator for speech post-processing.

Wires the stages together, strictly left to right:

1. **Normalize** -- whitespace and punctuation hygiene.
2. **Lexical** -- known mis-recognitions and synonyms.
3. **Numerals** -- spelled-out numerals to digits.
4. **Times** -- clock expressions to canonical ``HH:MM``.
5. **Dates** -- relative keywords resolved (recorded, not substituted).
6. **Extract** -- best-effort event proposal.
7. **Score** -- final confidence.

The pipeline is pure: it performs no I/O and shares no mutable state, so
one :class:`SpeechPostProcessor` can serve concurrent callers.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from cal_speech.confidence import DEFAULT_WEIGHTS, ConfidenceWeights, recalculate_confidence
from cal_speech.corrections import apply_lexical_corrections, apply_numeral_corrections
from cal_speech.extractor import extract_event_info
from cal_speech.models.speech import ProcessedSpeechResult, SpeechCorrection
from cal_speech.normalize import normalize_text
from cal_speech.tables import ZH_CN_TABLES, SpeechTables
from cal_speech.temporal import resolve_relative_dates, standardize_time_expressions

logger = logging.getLogger(__name__)


def _as_date(reference: date | datetime | None) -> date:
    if reference is None:
        return date.today()
    if isinstance(reference, datetime):
        return reference.date()
    return reference


class SpeechPostProcessor:
    """Turns a raw transcript into a :class:`ProcessedSpeechResult`.

    Args:
        tables: Localized correction and pattern tables.
        weights: Confidence scoring constants.
    """

    def __init__(
        self,
        tables: SpeechTables = ZH_CN_TABLES,
        weights: ConfidenceWeights = DEFAULT_WEIGHTS,
    ) -> None:
        self.tables = tables
        self.weights = weights

    def process(
        self,
        transcript: str,
        recognizer_confidence: float,
        reference_date: date | datetime | None = None,
    ) -> ProcessedSpeechResult:
        """Run every stage on *transcript*.

        Args:
            transcript: Raw recogniser output.  May be empty.
            recognizer_confidence: Recogniser confidence, expected in
                ``[0, 1]`` but not validated here.
            reference_date: The "today" used for relative dates.  Defaults
                to the wall clock.

        Returns:
            The processed result.  ``event_info`` is ``None`` when the text
            carries no time or date token.
        """
        today = _as_date(reference_date)
        corrections: list[SpeechCorrection] = []

        text = normalize_text(transcript, self.tables)

        text, found = apply_lexical_corrections(text, self.tables)
        corrections.extend(found)

        text, found = apply_numeral_corrections(text, self.tables)
        corrections.extend(found)

        text, found = standardize_time_expressions(text, self.tables)
        corrections.extend(found)

        text, found = resolve_relative_dates(text, today, self.tables)
        corrections.extend(found)

        event_info = extract_event_info(text, today, self.tables)
        confidence = recalculate_confidence(
            recognizer_confidence, corrections, event_info, self.weights
        )

        logger.info(
            "Processed transcript: %d correction(s), event=%s, confidence=%.2f",
            len(corrections),
            "yes" if event_info is not None else "no",
            confidence,
        )

        return ProcessedSpeechResult(
            original_text=transcript,
            corrected_text=text,
            confidence=confidence,
            corrections=tuple(corrections),
            event_info=event_info,
        )


_default_processor = SpeechPostProcessor()


def process(
    transcript: str,
    recognizer_confidence: float,
    reference_date: date | datetime | None = None,
) -> ProcessedSpeechResult:
    """Process *transcript* with the bundled Simplified Chinese tables.

    See :meth:`SpeechPostProcessor.process`.
    """
    return _default_processor.process(transcript, recognizer_confidence, reference_date)
