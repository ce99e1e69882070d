"""Data models for cal-speech."""

from __future__ import annotations

from cal_speech.models.speech import (
    CorrectionType,
    EventColor,
    ExtractedEventInfo,
    ProcessedSpeechResult,
    SpeechCorrection,
)

__all__ = [
    "CorrectionType",
    "EventColor",
    "ExtractedEventInfo",
    "ProcessedSpeechResult",
    "SpeechCorrection",
]
