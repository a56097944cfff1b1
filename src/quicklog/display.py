"""Human-readable formatting for times and durations."""

from .parser.normalize import time_to_minutes


def format_duration(minutes: int) -> str:
    """Format a duration compactly.

    Examples:
        >>> format_duration(90)
        '1h 30m'
        >>> format_duration(45)
        '45m'
        >>> format_duration(120)
        '2h'
    """
    if minutes <= 0:
        return "0m"
    if minutes < 60:
        return f"{minutes}m"
    hours, mins = divmod(minutes, 60)
    return f"{hours}h {mins}m" if mins else f"{hours}h"


def format_duration_long(minutes: int) -> str:
    """Format a duration with full words, e.g. "1 hour 30 minutes"."""
    if minutes <= 0:
        return "0 minutes"
    if minutes < 60:
        return f"{minutes} minute{'s' if minutes != 1 else ''}"
    hours, mins = divmod(minutes, 60)
    hour_str = f"{hours} hour{'s' if hours != 1 else ''}"
    if mins == 0:
        return hour_str
    return f"{hour_str} {mins} minute{'s' if mins != 1 else ''}"


def format_time_display(value: str | None) -> str:
    """Format an HH:MM time in 12-hour form, e.g. "14:30" -> "2:30 PM"."""
    if not value:
        return ""
    hours, minutes = divmod(time_to_minutes(value), 60)
    period = "PM" if hours >= 12 else "AM"
    return f"{hours % 12 or 12}:{minutes:02d} {period}"


def get_time_of_day(value: str | None) -> str:
    """Describe roughly when an HH:MM time falls in the day."""
    if not value:
        return "sometime today"
    hour = time_to_minutes(value) // 60
    if hour < 6:
        return "early morning"
    if hour < 9:
        return "morning"
    if hour < 12:
        return "late morning"
    if hour < 14:
        return "around midday"
    if hour < 17:
        return "afternoon"
    if hour < 20:
        return "evening"
    return "night"


__all__ = [
    "format_duration",
    "format_duration_long",
    "format_time_display",
    "get_time_of_day",
]
