"""Pydantic models for speech post-processing results.

Defines the value objects produced by the pipeline:

- :class:`SpeechCorrection` -- one atomic rewrite applied to a transcript.
- :class:`ExtractedEventInfo` -- best-effort event proposal built from the
  corrected transcript.
- :class:`ProcessedSpeechResult` -- the single output of a pipeline run.

All models are frozen and serialise with camelCase aliases
(``model_dump(by_alias=True)``) so the payload matches what the calendar
front end consumes.  Snake_case field names are accepted on input too.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CorrectionType = Literal["time", "date", "number", "common_word", "event_type"]
EventColor = Literal["blue", "green", "red", "purple", "orange", "pink"]

_TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"
_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


# ---------------------------------------------------------------------------
# SpeechCorrection
# ---------------------------------------------------------------------------


class SpeechCorrection(BaseModel):
    """A single rewrite applied to the transcript.

    Corrections are recorded in the order of the stage that produced them,
    not by position in the text.

    Attributes:
        original: Substring before the rewrite (never empty).
        corrected: Substring after the rewrite.
        type: Why the rewrite happened.
        confidence: Fixed per-rule confidence in ``[0, 1]``.
    """

    model_config = _MODEL_CONFIG

    original: str = Field(min_length=1)
    corrected: str
    type: CorrectionType
    confidence: float = Field(ge=0.0, le=1.0)


# ---------------------------------------------------------------------------
# ExtractedEventInfo
# ---------------------------------------------------------------------------


class ExtractedEventInfo(BaseModel):
    """A best-effort calendar event proposal.

    Only built when the corrected text carries a time or a date token.
    Callers must treat it as a proposal and ask the user to confirm it.

    Attributes:
        title: Category label, or a generic placeholder.
        date: ``YYYY-MM-DD``.
        start_time: ``HH:MM`` (24-hour).
        end_time: ``HH:MM`` (24-hour).
        description: Free text embedding the corrected transcript.
        confidence: Extraction confidence in ``[0, 1]``, independent of
            the overall result confidence.
        color: Colour tag of the detected category.
    """

    model_config = _MODEL_CONFIG

    title: str
    date: str = Field(pattern=_DATE_PATTERN)
    start_time: str = Field(pattern=_TIME_PATTERN)
    end_time: str = Field(pattern=_TIME_PATTERN)
    description: str
    confidence: float = Field(ge=0.0, le=1.0)
    color: EventColor = "blue"

    def to_event_form(self) -> dict[str, str]:
        """Return the payload for the calendar's event creation form."""
        return {
            "title": self.title,
            "description": self.description,
            "date": self.date,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "color": self.color,
        }


# ---------------------------------------------------------------------------
# ProcessedSpeechResult
# ---------------------------------------------------------------------------


class ProcessedSpeechResult(BaseModel):
    """Output of one pipeline run.

    Attributes:
        original_text: The untouched input transcript.
        corrected_text: Text after every correcting stage.
        confidence: Recalculated confidence in ``[0.1, 1.0]``.
        corrections: Corrections in stage order (may be empty).
        event_info: Event proposal, or ``None`` when the text carries no
            time or date token.
    """

    model_config = _MODEL_CONFIG

    original_text: str
    corrected_text: str
    confidence: float = Field(ge=0.0, le=1.0)
    corrections: tuple[SpeechCorrection, ...] = ()
    event_info: ExtractedEventInfo | None = None

    @property
    def has_event(self) -> bool:
        """Whether an event proposal was extracted."""
        return self.event_info is not None
