"""Tests for best-effort event extraction."""

from __future__ import annotations

from datetime import date

import pytest

from cal_speech.extractor import (
    add_one_hour,
    detect_category,
    extract_event_info,
    find_times,
    has_date_signal,
    resolve_event_date,
)


class TestHelpers:
    """Time arithmetic and token scans."""

    @pytest.mark.parametrize(
        ("start", "expected"),
        [("09:30", "10:30"), ("00:00", "01:00"), ("22:45", "23:45"), ("23:15", "23:59")],
    )
    def test_add_one_hour(self, start: str, expected: str) -> None:
        assert add_one_hour(start) == expected

    def test_find_times_in_order(self) -> None:
        assert find_times("03:00到05:30") == ["03:00", "05:30"]

    def test_find_times_ignores_malformed(self) -> None:
        assert find_times("3:75 and 123:45") == []

    def test_iso_date_is_a_date_signal(self) -> None:
        assert has_date_signal("2025-07-01会议")

    def test_next_week_is_a_date_signal(self) -> None:
        assert has_date_signal("下周旅行")

    def test_plain_text_has_no_date_signal(self) -> None:
        assert not has_date_signal("你好")

    def test_detect_category_by_priority(self) -> None:
        """Meeting outranks dining regardless of position in the text."""
        assert detect_category("聚餐然后会议") == ("会议", "blue")

    def test_detect_category_none(self) -> None:
        assert detect_category("你好") is None

    def test_event_date_lookup(self, reference_date: date) -> None:
        assert resolve_event_date("明天", reference_date) == "2025-06-11"
        assert resolve_event_date("后天", reference_date) == "2025-06-12"
        assert resolve_event_date("今天", reference_date) == "2025-06-10"

    def test_event_date_lookup_matches_inside_longer_keyword(
        self, reference_date: date
    ) -> None:
        """``大后天`` contains ``后天``, so the lookup yields two days ahead."""
        assert resolve_event_date("大后天跑步", reference_date) == "2025-06-12"


class TestExtractEventInfo:
    """Assembly of the event proposal."""

    def test_categorised_event_with_time_and_date(self, reference_date: date) -> None:
        event = extract_event_info("明天03:00会议", reference_date)

        assert event is not None
        assert event.title == "会议"
        assert event.date == "2025-06-11"
        assert event.start_time == "03:00"
        assert event.end_time == "04:00"
        assert event.color == "blue"
        assert event.confidence == pytest.approx(0.7)
        assert event.description == "基于语音识别创建：明天03:00会议"

    def test_time_only_gets_placeholder_title(self, reference_date: date) -> None:
        event = extract_event_info("15:00", reference_date)

        assert event is not None
        assert event.title == "新事件"
        assert event.date == "2025-06-10"
        assert event.end_time == "16:00"
        assert event.confidence == pytest.approx(0.5)

    def test_date_only_defaults_to_nine(self, reference_date: date) -> None:
        event = extract_event_info("明天会议", reference_date)

        assert event is not None
        assert event.start_time == "09:00"
        assert event.end_time == "10:00"

    def test_second_time_is_end_time(self, reference_date: date) -> None:
        event = extract_event_info("14:00到16:00会议", reference_date)

        assert event is not None
        assert event.start_time == "14:00"
        assert event.end_time == "16:00"

    def test_category_colour(self, reference_date: date) -> None:
        event = extract_event_info("后天面试", reference_date)

        assert event is not None
        assert event.title == "面试"
        assert event.color == "pink"
        assert event.date == "2025-06-12"

    @pytest.mark.parametrize(
        ("text", "title", "color"),
        [
            ("明天会议", "会议", "blue"),
            ("明天约会", "约会", "green"),
            ("明天聚餐", "聚餐", "orange"),
            ("明天看病", "医疗预约", "red"),
            ("明天健身", "运动", "red"),
            ("明天培训", "课程", "purple"),
            ("明天购物", "购物", "pink"),
            ("明天出差", "旅行", "pink"),
        ],
    )
    def test_colour_follows_event_kind(
        self, text: str, title: str, color: str, reference_date: date
    ) -> None:
        """Work blue, social green, dining orange, health red, study purple, else pink."""
        event = extract_event_info(text, reference_date)

        assert event is not None
        assert event.title == title
        assert event.color == color

    def test_iso_literal_triggers_but_date_comes_from_lookup(
        self, reference_date: date
    ) -> None:
        event = extract_event_info("2025-07-01会议", reference_date)

        assert event is not None
        assert event.date == "2025-06-10"

    def test_no_temporal_signal_yields_none(self, reference_date: date) -> None:
        assert extract_event_info("你好", reference_date) is None

    def test_category_without_temporal_signal_yields_none(
        self, reference_date: date
    ) -> None:
        assert extract_event_info("我们去健身", reference_date) is None

    def test_empty_text_yields_none(self, reference_date: date) -> None:
        assert extract_event_info("", reference_date) is None
