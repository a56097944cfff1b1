"""Default durations inferred from activity keywords.

Used when a start time is known but neither an end time nor a duration
was written, e.g. "standup at 9" or "coding this afternoon".
"""

import re

# (keywords, minutes), checked in order; the first matching group wins
ACTIVITY_DURATIONS: list[tuple[str, int]] = [
    (
        r"standup|stand-up|daily|huddle|check-in|checkin|scrum|debrief|recap|catchup|catch-up",
        15,
    ),
    (
        r"call|chat|sync|1:1|one-on-one|coffee|break|phone|video|demo|walkthrough|review"
        r"|feedback|pairing|pair\s*programming",
        30,
    ),
    (
        r"interview|screening|planning|sprint|grooming|refinement|brainstorm|brainstorming"
        r"|retro|retrospective",
        45,
    ),
    (r"lecture|class|seminar|training|course|lesson|tutorial", 90),
    (
        r"workshop|deep\s*work|focus\s*time|focus\s*session|coding|programming|development"
        r"|study|studying|learning|writing|drafting|research|analysis|design|prototyping"
        r"|exam|test|assessment|project|building|creating",
        120,
    ),
    (r"offsite|bootcamp|hackathon|marathon", 180),
]

_ACTIVITY_PATTERNS = [
    (re.compile(rf"\b(?:{keywords})\b", re.IGNORECASE), minutes)
    for keywords, minutes in ACTIVITY_DURATIONS
]


def infer_default_duration(text: str, fallback: int = 60) -> int:
    """Guess how long an activity lasts from its description.

    Args:
        text: Activity text.
        fallback: Minutes to use when no keyword matches.

    Returns:
        Duration in minutes.

    Examples:
        >>> infer_default_duration("daily standup")
        15
        >>> infer_default_duration("team meeting")
        60
    """
    for pattern, minutes in _ACTIVITY_PATTERNS:
        if pattern.search(text):
            return minutes
    return fallback


__all__ = ["ACTIVITY_DURATIONS", "infer_default_duration"]
