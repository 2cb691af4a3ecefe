"""Tests for lesson duration arithmetic."""

import pytest

from src.lesson_time.duration import (
    DURATION_OPTIONS,
    DURATION_VALUES,
    add_duration,
    duration_between,
    duration_label,
    format_duration,
    match_duration_option,
)
from src.lesson_time.lesson_form import build_lesson_slot
from src.lesson_time.models import ClockTime


def _t(hour: int, minute: int = 0) -> ClockTime:
    return ClockTime(hour=hour, minute=minute)


class TestAddDuration:
    @pytest.mark.parametrize(
        ("start", "hours", "expected"),
        [
            (_t(9), 1, _t(10)),
            (_t(9), 1.5, _t(10, 30)),
            (_t(9, 45), 0.5, _t(10, 15)),
            (_t(14), 2, _t(16)),
            (_t(11, 30), 0.5, _t(12)),
        ],
    )
    def test_same_day(self, start: ClockTime, hours: float, expected: ClockTime) -> None:
        assert add_duration(start, hours) == expected

    def test_wraps_past_midnight(self) -> None:
        assert add_duration(_t(23), 2) == _t(1)
        assert add_duration(_t(23, 45), 0.5) == _t(0, 15)
        assert add_duration(_t(22, 30), 1.5) == _t(0)

    def test_returns_new_value(self) -> None:
        start = _t(9)
        add_duration(start, 1)

        assert start == _t(9)


class TestDurationBetween:
    def test_recovers_half_hours(self) -> None:
        assert duration_between(_t(14), _t(15, 30)) == 1.5
        assert duration_between(_t(9, 45), _t(10, 15)) == 0.5

    def test_no_wraparound_correction(self) -> None:
        assert duration_between(_t(23), _t(1)) == -22

    @pytest.mark.parametrize("hours", DURATION_VALUES)
    def test_inverse_of_add_duration(self, hours: float) -> None:
        start = _t(8, 30)

        assert duration_between(start, add_duration(start, hours)) == hours


class TestDurationOptions:
    def test_options_are_half_hour_steps(self) -> None:
        assert DURATION_VALUES == (0.5, 1, 1.5, 2)
        assert [label for _, label in DURATION_OPTIONS] == [
            "30 minutes",
            "1 hour",
            "1.5 hours",
            "2 hours",
        ]

    def test_match_duration_option(self) -> None:
        assert match_duration_option(1.5) == 1.5
        assert match_duration_option(2.0) == 2
        assert match_duration_option(0.75) is None
        assert match_duration_option(-22) is None

    def test_duration_label(self) -> None:
        assert duration_label(0.5) == "30 minutes"
        assert duration_label(3) is None


class TestFormatDuration:
    @pytest.mark.parametrize(
        ("start", "end", "expected"),
        [
            ("09:00", "10:30", "1h 30m"),
            ("14:00:00", "16:00:00", "2h"),
            ("09:15", "10:00", "45m"),
            ("", "10:00", ""),
            ("09:00", "", ""),
            ("23:00", "00:30", "1h 30m"),
            ("23:00", "01:00", "2h"),
            ("23:45", "00:15", "30m"),
        ],
    )
    def test_card_label(self, start: str, end: str, expected: str) -> None:
        assert format_duration(start, end) == expected

    def test_label_matches_late_lesson_from_form(self) -> None:
        slot = build_lesson_slot("12/31/2025", "11:00 PM", 1.5)

        assert slot.end_time == "00:30"
        assert format_duration(slot.start_time, slot.end_time) == "1h 30m"
