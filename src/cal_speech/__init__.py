"""cal-speech: speech post-processing for a voice calendar assistant.

Corrects noisy speech-recognition transcripts with deterministic rules and
proposes a calendar event when the text carries a time or a date.
"""

from __future__ import annotations

from cal_speech.confidence import ConfidenceWeights, recalculate_confidence
from cal_speech.exceptions import TableConfigurationError, TableOrderError
from cal_speech.models.speech import (
    ExtractedEventInfo,
    ProcessedSpeechResult,
    SpeechCorrection,
)
from cal_speech.pipeline import SpeechPostProcessor, process
from cal_speech.tables import ZH_CN_TABLES, EventCategory, SpeechTables

__version__ = "0.1.0"

__all__ = [
    "ConfidenceWeights",
    "EventCategory",
    "ExtractedEventInfo",
    "ProcessedSpeechResult",
    "SpeechCorrection",
    "SpeechPostProcessor",
    "SpeechTables",
    "TableConfigurationError",
    "TableOrderError",
    "ZH_CN_TABLES",
    "process",
    "recalculate_confidence",
]
