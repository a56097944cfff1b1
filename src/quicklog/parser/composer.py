"""Composition of detections into a single start/end time.

Entry points used by the UI: detect_time_patterns for live highlighting
and parse_time_from_text on submit.
"""

import logging
import re

from ..config import ParserConfig
from ..errors import InvalidTimeError
from .activity import infer_default_duration
from .detectors import TimePatternDetector
from .models import Detection, DetectionType, ParsedTime
from .normalize import (
    add_minutes_to_time,
    minutes_to_time,
    subtract_minutes_from_time,
    time_to_minutes,
)
from .resolver import resolve_candidates

logger = logging.getLogger(__name__)

# Stateless after construction, shared by every call
_detector = TimePatternDetector()

_WHITESPACE_RE = re.compile(r"\s+")


def detect_time_patterns(text: str) -> list[Detection]:
    """Detect every time expression in the text.

    Args:
        text: A single line of activity text.

    Returns:
        Non-overlapping detections ordered by position.
    """
    if not text:
        return []
    return resolve_candidates(_detector.detect(text))


def has_time_pattern(text: str, min_length: int = 2) -> bool:
    """Check whether the text contains any time expression."""
    if not text or len(text.strip()) < min_length:
        return False
    return len(detect_time_patterns(text)) > 0


def remove_detections(text: str, detections: list[Detection]) -> str:
    """Cut every detected span out of the text and tidy the whitespace."""
    result = text
    # Right to left so earlier offsets stay valid
    for detection in sorted(detections, key=lambda d: d.start_index, reverse=True):
        result = result[: detection.start_index] + result[detection.end_index :]
    return _WHITESPACE_RE.sub(" ", result).strip()


def _valid_anchor(current_time: str | None) -> str | None:
    """Return the anchor if it is a valid HH:MM time, else None."""
    if current_time is None:
        return None
    try:
        time_to_minutes(current_time)
    except InvalidTimeError:
        logger.warning(f"Ignoring invalid current time: {current_time!r}")
        return None
    return minutes_to_time(time_to_minutes(current_time))


def parse_time_from_text(
    text: str,
    current_time: str | None = None,
    options: ParserConfig | None = None,
) -> ParsedTime:
    """Parse time expressions from activity text into a start/end pair.

    Args:
        text: Activity text, e.g. "coded for 2 hours".
        current_time: Optional "now" as HH:MM, used to place bare durations.
        options: Parser options; defaults apply when omitted.

    Returns:
        ParsedTime with resolved times, cleaned activity and detections.

    Examples:
        >>> parse_time_from_text("coded for 2 hours", "14:00").start_time
        '12:00'
        >>> parse_time_from_text("meeting from 2pm to 3pm").cleaned_activity
        'meeting'
    """
    options = options or ParserConfig()
    detections = detect_time_patterns(text or "")

    if not detections:
        return ParsedTime(
            start_time=None,
            end_time=None,
            cleaned_activity=text or "",
            has_time_pattern=False,
            detections=[],
        )

    start_time: str | None = None
    end_time: str | None = None
    total_duration = 0

    for detection in detections:
        if detection.type == DetectionType.RANGE:
            start_time = detection.start_time or start_time
            end_time = detection.end_time or end_time
        elif detection.type == DetectionType.TIME:
            if detection.start_time:
                start_time = detection.start_time
            if detection.end_time:
                end_time = detection.end_time
        elif detection.type == DetectionType.DURATION:
            total_duration += detection.duration_minutes or 0

    anchor = _valid_anchor(current_time)

    if total_duration > 0 and start_time is None and end_time is None:
        if anchor is not None:
            # Duration ends now
            end_time = anchor
            start_time = subtract_minutes_from_time(anchor, total_duration)
    elif total_duration > 0 and start_time is not None and end_time is None:
        end_time = add_minutes_to_time(start_time, total_duration)
    elif total_duration > 0 and start_time is None and end_time is not None:
        start_time = subtract_minutes_from_time(end_time, total_duration)

    if (
        options.infer_default_duration
        and start_time is not None
        and end_time is None
        and total_duration == 0
    ):
        minutes = infer_default_duration(text, options.default_duration_minutes)
        end_time = add_minutes_to_time(start_time, minutes)
        logger.debug(f"Inferred {minutes} minute default duration")

    logger.debug(f"Resolved {text!r} to {start_time}-{end_time}")

    return ParsedTime(
        start_time=start_time,
        end_time=end_time,
        cleaned_activity=remove_detections(text, detections),
        has_time_pattern=True,
        detections=detections,
    )


__all__ = [
    "detect_time_patterns",
    "has_time_pattern",
    "parse_time_from_text",
    "remove_detections",
]
