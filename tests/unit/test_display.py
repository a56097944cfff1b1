"""Unit tests for display formatting."""

import pytest

from quicklog.display import (
    format_duration,
    format_duration_long,
    format_time_display,
    get_time_of_day,
)
from quicklog.errors import InvalidTimeError


class TestFormatDuration:
    """Tests for duration formatting."""

    @pytest.mark.parametrize(
        "minutes,expected",
        [(0, "0m"), (-5, "0m"), (45, "45m"), (60, "1h"), (90, "1h 30m"), (120, "2h")],
    )
    def test_compact(self, minutes: int, expected: str) -> None:
        """Test compact form."""
        assert format_duration(minutes) == expected

    @pytest.mark.parametrize(
        "minutes,expected",
        [
            (0, "0 minutes"),
            (1, "1 minute"),
            (45, "45 minutes"),
            (60, "1 hour"),
            (61, "1 hour 1 minute"),
            (150, "2 hours 30 minutes"),
        ],
    )
    def test_long(self, minutes: int, expected: str) -> None:
        """Test long form with plurals."""
        assert format_duration_long(minutes) == expected


class TestFormatTimeDisplay:
    """Tests for 12-hour display."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("00:00", "12:00 AM"),
            ("09:05", "9:05 AM"),
            ("12:00", "12:00 PM"),
            ("14:30", "2:30 PM"),
            ("23:59", "11:59 PM"),
            (None, ""),
        ],
    )
    def test_display(self, value: str | None, expected: str) -> None:
        """Test HH:MM renders as 12-hour time."""
        assert format_time_display(value) == expected

    def test_invalid(self) -> None:
        """Test malformed times raise."""
        with pytest.raises(InvalidTimeError):
            format_time_display("7pm")


class TestGetTimeOfDay:
    """Tests for time-of-day descriptions."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("05:00", "early morning"),
            ("08:30", "morning"),
            ("10:00", "late morning"),
            ("12:30", "around midday"),
            ("15:00", "afternoon"),
            ("18:00", "evening"),
            ("22:00", "night"),
            (None, "sometime today"),
        ],
    )
    def test_periods(self, value: str | None, expected: str) -> None:
        """Test each period boundary."""
        assert get_time_of_day(value) == expected
