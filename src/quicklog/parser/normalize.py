"""Numeric and clock-time normalization.

Pure conversions shared by the detectors and the composer:
- HH:MM strings to minutes since midnight and back (wrapping at 24h)
- Meridiem resolution for 12-hour clock values
- Business-hours inference for bare hours with no AM/PM
- Duration phrases (hours, minutes, named fractions) to whole minutes
"""

import math
import re

from ..errors import InvalidTimeError

MINUTES_PER_DAY = 24 * 60
HALF_DAY_MINUTES = 12 * 60
NOON_MINUTES = HALF_DAY_MINUTES

HALF_HOUR_MINUTES = 30
QUARTER_HOUR_MINUTES = 15

# Bare hours up to this value read as afternoon ("at 3" -> 15:00)
LATEST_PM_BARE_HOUR = 7

_HHMM_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def format_time(hours: int, minutes: int = 0) -> str:
    """Format hours and minutes as zero-padded HH:MM."""
    return f"{hours:02d}:{minutes:02d}"


def time_to_minutes(value: str) -> int:
    """Convert an HH:MM string to minutes since midnight.

    Args:
        value: Time string such as "09:30" or "9:30".

    Returns:
        Minutes since midnight.

    Raises:
        InvalidTimeError: If the string is not a valid 24-hour time.
    """
    match = _HHMM_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise InvalidTimeError(f"Invalid time: {value!r}", value)

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidTimeError(f"Time out of range: {value!r}", value)
    return hours * 60 + minutes


def minutes_to_time(total_minutes: int) -> str:
    """Convert minutes since midnight to HH:MM, wrapping modulo 24 hours."""
    total_minutes %= MINUTES_PER_DAY
    return format_time(total_minutes // 60, total_minutes % 60)


def add_minutes_to_time(value: str, minutes: int) -> str:
    """Add minutes to an HH:MM time.

    Examples:
        >>> add_minutes_to_time("14:30", 45)
        '15:15'
        >>> add_minutes_to_time("23:30", 60)
        '00:30'
    """
    return minutes_to_time(time_to_minutes(value) + minutes)


def subtract_minutes_from_time(value: str, minutes: int) -> str:
    """Subtract minutes from an HH:MM time, wrapping before midnight."""
    return minutes_to_time(time_to_minutes(value) - minutes)


def calculate_duration(start: str, end: str) -> int:
    """Minutes from start to end, crossing midnight when end is not after start.

    Examples:
        >>> calculate_duration("09:00", "17:00")
        480
        >>> calculate_duration("23:00", "01:00")
        120
    """
    start_minutes = time_to_minutes(start)
    end_minutes = time_to_minutes(end)
    if end_minutes <= start_minutes:
        end_minutes += MINUTES_PER_DAY
    return end_minutes - start_minutes


def to_24_hour(hour: int, meridiem: str) -> int:
    """Resolve a 12-hour clock hour with an explicit AM/PM.

    12 AM is midnight (0), 12 PM is noon (12), other PM hours add 12.

    Raises:
        InvalidTimeError: If the hour is outside 1-12 or meridiem is unknown.
    """
    meridiem = meridiem.lower().replace(".", "")
    if not 1 <= hour <= 12 or meridiem not in ("am", "pm"):
        raise InvalidTimeError(f"Invalid 12-hour time: {hour} {meridiem}", hour)

    if meridiem == "pm":
        return hour if hour == 12 else hour + 12
    return 0 if hour == 12 else hour


def infer_bare_hour(hour: int) -> int:
    """Infer a 24-hour value for a bare hour with no AM/PM.

    Business-hours heuristic: 8-12 stay as morning/noon, 1-7 become
    afternoon/evening.

    Raises:
        InvalidTimeError: If the hour is outside 1-12.
    """
    if not 1 <= hour <= 12:
        raise InvalidTimeError(f"Bare hour out of range: {hour}", hour)
    if hour <= LATEST_PM_BARE_HOUR:
        return hour + 12
    return hour


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def hours_to_minutes(hours: str | float) -> int:
    """Convert an hour count ("2", "1.5", 2.5) to whole minutes."""
    return round_half_up(float(hours) * 60)


def parse_minutes(minutes: str | float) -> int:
    """Convert a minute count ("30", "1.5") to whole minutes."""
    return round_half_up(float(minutes))


def and_a_half_to_minutes(hours: str | int) -> int:
    """Minutes for "X and a half hours"."""
    return int(hours) * 60 + HALF_HOUR_MINUTES


__all__ = [
    "HALF_DAY_MINUTES",
    "HALF_HOUR_MINUTES",
    "MINUTES_PER_DAY",
    "NOON_MINUTES",
    "QUARTER_HOUR_MINUTES",
    "add_minutes_to_time",
    "and_a_half_to_minutes",
    "calculate_duration",
    "format_time",
    "hours_to_minutes",
    "infer_bare_hour",
    "minutes_to_time",
    "parse_minutes",
    "round_half_up",
    "subtract_minutes_from_time",
    "time_to_minutes",
    "to_24_hour",
]
