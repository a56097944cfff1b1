"""Time expression parsing for activity text.

Detects durations, clock times and ranges in short activity descriptions,
composes them into a start/end pair and segments the text for highlighting.
"""

from .composer import (
    detect_time_patterns,
    has_time_pattern,
    parse_time_from_text,
    remove_detections,
)
from .detectors import Candidate, DetectorKind, TimePatternDetector
from .models import Detection, DetectionType, ParsedTime, Segment
from .resolver import resolve_candidates
from .segments import get_highlighted_segments

__all__ = [
    "Candidate",
    "Detection",
    "DetectionType",
    "DetectorKind",
    "ParsedTime",
    "Segment",
    "TimePatternDetector",
    "detect_time_patterns",
    "get_highlighted_segments",
    "has_time_pattern",
    "parse_time_from_text",
    "remove_detections",
    "resolve_candidates",
]
