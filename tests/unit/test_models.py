"""Tests for the speech result Pydantic models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cal_speech.models.speech import (
    ExtractedEventInfo,
    ProcessedSpeechResult,
    SpeechCorrection,
)


def _event_kwargs() -> dict:
    """Return kwargs for a valid ExtractedEventInfo."""
    return {
        "title": "会议",
        "date": "2025-06-11",
        "start_time": "03:00",
        "end_time": "04:00",
        "description": "基于语音识别创建：明天03:00会议",
        "confidence": 0.7,
    }


class TestSpeechCorrection:
    """Field validation."""

    def test_valid(self) -> None:
        correction = SpeechCorrection(
            original="3点", corrected="03:00", type="time", confidence=0.85
        )

        assert correction.type == "time"

    def test_empty_original_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SpeechCorrection(original="", corrected="x", type="time", confidence=0.9)

    def test_unknown_type_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SpeechCorrection(original="a", corrected="b", type="slang", confidence=0.9)

    @pytest.mark.parametrize("confidence", [-0.1, 1.5])
    def test_confidence_out_of_range_is_rejected(self, confidence: float) -> None:
        with pytest.raises(ValidationError):
            SpeechCorrection(original="a", corrected="b", type="time", confidence=confidence)

    def test_frozen(self) -> None:
        correction = SpeechCorrection(original="a", corrected="b", type="time", confidence=0.9)

        with pytest.raises(ValidationError):
            correction.corrected = "c"  # type: ignore[misc]


class TestExtractedEventInfo:
    """Event proposal validation and form payload."""

    def test_default_color(self) -> None:
        assert ExtractedEventInfo(**_event_kwargs()).color == "blue"

    @pytest.mark.parametrize("field", ["start_time", "end_time"])
    def test_non_canonical_time_is_rejected(self, field: str) -> None:
        kwargs = _event_kwargs()
        kwargs[field] = "3:00"

        with pytest.raises(ValidationError):
            ExtractedEventInfo(**kwargs)

    def test_bad_date_is_rejected(self) -> None:
        kwargs = _event_kwargs()
        kwargs["date"] = "June 11"

        with pytest.raises(ValidationError):
            ExtractedEventInfo(**kwargs)

    def test_accepts_camel_case_input(self) -> None:
        kwargs = _event_kwargs()
        kwargs["startTime"] = kwargs.pop("start_time")
        kwargs["endTime"] = kwargs.pop("end_time")

        event = ExtractedEventInfo(**kwargs)

        assert event.start_time == "03:00"

    def test_to_event_form(self) -> None:
        event = ExtractedEventInfo(**_event_kwargs(), color="green")

        assert event.to_event_form() == {
            "title": "会议",
            "description": "基于语音识别创建：明天03:00会议",
            "date": "2025-06-11",
            "startTime": "03:00",
            "endTime": "04:00",
            "color": "green",
        }


class TestProcessedSpeechResult:
    """Serialisation for the front end."""

    def test_dump_uses_camel_case(self) -> None:
        result = ProcessedSpeechResult(
            original_text="明天3点开会",
            corrected_text="明天03:00会议",
            confidence=0.7,
            corrections=(
                SpeechCorrection(original="3点", corrected="03:00", type="time", confidence=0.85),
            ),
            event_info=ExtractedEventInfo(**_event_kwargs()),
        )

        payload = result.model_dump(mode="json", by_alias=True)

        assert set(payload) == {
            "originalText",
            "correctedText",
            "confidence",
            "corrections",
            "eventInfo",
        }
        assert payload["eventInfo"]["startTime"] == "03:00"
        assert payload["corrections"][0]["type"] == "time"

    def test_defaults(self) -> None:
        result = ProcessedSpeechResult(original_text="", corrected_text="", confidence=0.5)

        assert result.corrections == ()
        assert result.event_info is None
        assert result.has_event is False
