"""Unit tests for numeric and clock-time normalization."""

import pytest

from quicklog.errors import InvalidTimeError
from quicklog.parser.normalize import (
    add_minutes_to_time,
    and_a_half_to_minutes,
    calculate_duration,
    format_time,
    hours_to_minutes,
    infer_bare_hour,
    minutes_to_time,
    parse_minutes,
    subtract_minutes_from_time,
    time_to_minutes,
    to_24_hour,
)


class TestMinutesAndTime:
    """Tests for HH:MM <-> minutes conversion."""

    def test_format_time_pads(self) -> None:
        """Test hours and minutes are zero-padded."""
        assert format_time(9, 5) == "09:05"
        assert format_time(14) == "14:00"

    @pytest.mark.parametrize(
        "value,expected",
        [("00:00", 0), ("09:30", 570), ("9:30", 570), ("23:59", 1439)],
    )
    def test_time_to_minutes(self, value: str, expected: int) -> None:
        """Test HH:MM converts to minutes since midnight."""
        assert time_to_minutes(value) == expected

    @pytest.mark.parametrize("value", ["", "noon", "24:00", "12:60", "1230", "12:3"])
    def test_time_to_minutes_invalid(self, value: str) -> None:
        """Test malformed times raise InvalidTimeError."""
        with pytest.raises(InvalidTimeError):
            time_to_minutes(value)

    def test_invalid_time_is_value_error(self) -> None:
        """Test InvalidTimeError can be caught as ValueError."""
        with pytest.raises(ValueError):
            time_to_minutes("25:00")

    def test_minutes_to_time_wraps(self) -> None:
        """Test minutes wrap modulo 24 hours in both directions."""
        assert minutes_to_time(570) == "09:30"
        assert minutes_to_time(1440) == "00:00"
        assert minutes_to_time(1500) == "01:00"
        assert minutes_to_time(-30) == "23:30"

    def test_add_minutes_past_midnight(self) -> None:
        """Test adding minutes wraps past 23:59."""
        assert add_minutes_to_time("14:30", 45) == "15:15"
        assert add_minutes_to_time("23:30", 60) == "00:30"

    def test_subtract_minutes_before_midnight(self) -> None:
        """Test subtracting minutes wraps before 00:00."""
        assert subtract_minutes_from_time("14:00", 120) == "12:00"
        assert subtract_minutes_from_time("00:30", 60) == "23:30"

    def test_calculate_duration(self) -> None:
        """Test duration between times, crossing midnight."""
        assert calculate_duration("09:00", "17:00") == 480
        assert calculate_duration("23:00", "01:00") == 120


class TestMeridiem:
    """Tests for AM/PM resolution."""

    @pytest.mark.parametrize(
        "hour,meridiem,expected",
        [
            (12, "am", 0),
            (12, "pm", 12),
            (1, "pm", 13),
            (11, "pm", 23),
            (9, "am", 9),
            (2, "PM", 14),
            (2, "Am", 2),
            (7, "p.m.", 19),
        ],
    )
    def test_to_24_hour(self, hour: int, meridiem: str, expected: int) -> None:
        """Test 12-hour values resolve to 24-hour values."""
        assert to_24_hour(hour, meridiem) == expected

    @pytest.mark.parametrize("hour", [0, 13, 24])
    def test_to_24_hour_out_of_range(self, hour: int) -> None:
        """Test hours outside 1-12 are rejected."""
        with pytest.raises(InvalidTimeError):
            to_24_hour(hour, "pm")

    @pytest.mark.parametrize(
        "hour,expected",
        [(1, 13), (3, 15), (7, 19), (8, 8), (9, 9), (11, 11), (12, 12)],
    )
    def test_infer_bare_hour(self, hour: int, expected: int) -> None:
        """Test business-hours heuristic: 8-12 morning/noon, 1-7 afternoon."""
        assert infer_bare_hour(hour) == expected

    def test_infer_bare_hour_out_of_range(self) -> None:
        """Test bare hours outside 1-12 are rejected."""
        with pytest.raises(InvalidTimeError):
            infer_bare_hour(13)


class TestDurationPhrases:
    """Tests for duration phrase conversion."""

    @pytest.mark.parametrize(
        "hours,expected",
        [("2", 120), ("1.5", 90), ("2.5", 150), ("0.25", 15), (0.01, 1)],
    )
    def test_hours_to_minutes(self, hours: str, expected: int) -> None:
        """Test hour counts round to whole minutes."""
        assert hours_to_minutes(hours) == expected

    def test_hours_round_half_up(self) -> None:
        """Test half minutes round up, not to even."""
        assert parse_minutes("2.5") == 3
        assert parse_minutes("0.5") == 1

    def test_parse_minutes(self) -> None:
        """Test minute counts pass through."""
        assert parse_minutes("45") == 45

    def test_and_a_half(self) -> None:
        """Test "X and a half" adds thirty minutes."""
        assert and_a_half_to_minutes("2") == 150
        assert and_a_half_to_minutes(1) == 90
