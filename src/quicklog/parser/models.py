"""Data models for time detection.

Defines Detection, ParsedTime and Segment, the values produced by the
detectors, the composer and the segmenter.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .normalize import calculate_duration


class DetectionType(Enum):
    """Kinds of time expressions."""

    DURATION = "duration"
    TIME = "time"
    RANGE = "range"


@dataclass(frozen=True)
class Detection:
    """A single recognized time or duration expression.

    Attributes:
        type: Kind of expression.
        matched_text: Exact substring consumed from the input.
        start_index: Offset of the first matched character.
        end_index: Offset one past the last matched character.
        duration_minutes: Length in minutes (duration detections).
        start_time: Start as zero-padded HH:MM (time and range detections).
        end_time: End as zero-padded HH:MM (range and "until" detections).
    """

    type: DetectionType
    matched_text: str
    start_index: int
    end_index: int
    duration_minutes: int | None = None
    start_time: str | None = None
    end_time: str | None = None

    @property
    def length(self) -> int:
        """Number of characters covered."""
        return self.end_index - self.start_index

    @property
    def is_end_only(self) -> bool:
        """True for "until 5pm" style detections that only fix the end."""
        return self.type == DetectionType.TIME and self.start_time is None

    def overlaps(self, other: "Detection") -> bool:
        """Check whether two detections share any character."""
        return not (self.end_index <= other.start_index or self.start_index >= other.end_index)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON shape consumed by the UI."""
        data: dict[str, Any] = {
            "type": self.type.value,
            "matchedText": self.matched_text,
            "startIndex": self.start_index,
            "endIndex": self.end_index,
        }
        if self.duration_minutes is not None:
            data["durationMinutes"] = self.duration_minutes
        if self.start_time is not None:
            data["startTime"] = self.start_time
        if self.end_time is not None:
            data["endTime"] = self.end_time
        return data


@dataclass
class ParsedTime:
    """Result of composing all detections of one line of text."""

    start_time: str | None
    end_time: str | None
    cleaned_activity: str
    has_time_pattern: bool
    detections: list[Detection] = field(default_factory=list)

    @property
    def duration_minutes(self) -> int | None:
        """Minutes between start and end, or None if either is missing."""
        if self.start_time is None or self.end_time is None:
            return None
        return calculate_duration(self.start_time, self.end_time)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON shape consumed by the UI."""
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "cleanedActivity": self.cleaned_activity,
            "hasTimePattern": self.has_time_pattern,
            "detections": [d.to_dict() for d in self.detections],
        }


@dataclass
class Segment:
    """A slice of the input text for highlighted rendering."""

    text: str
    is_highlighted: bool
    detection: Detection | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON shape consumed by the UI."""
        data: dict[str, Any] = {"text": self.text, "isHighlighted": self.is_highlighted}
        if self.detection is not None:
            data["detection"] = self.detection.to_dict()
        return data


__all__ = ["Detection", "DetectionType", "ParsedTime", "Segment"]
