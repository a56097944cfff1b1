"""Pattern detectors for time expressions in activity text.

Each detector scans the whole text independently and yields raw
candidates. Candidates may overlap; the resolver picks the survivors.
"""

import logging
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum

from .models import Detection, DetectionType
from .normalize import (
    HALF_DAY_MINUTES,
    HALF_HOUR_MINUTES,
    MINUTES_PER_DAY,
    NOON_MINUTES,
    QUARTER_HOUR_MINUTES,
    and_a_half_to_minutes,
    format_time,
    hours_to_minutes,
    infer_bare_hour,
    minutes_to_time,
    parse_minutes,
    to_24_hour,
)

logger = logging.getLogger(__name__)


class DetectorKind(Enum):
    """Which detector produced a candidate."""

    RANGE = "range"
    MODIFIER = "modifier"
    RELATIVE = "relative"
    CLOCK = "clock"
    DURATION = "duration"
    BARE_AT = "bare_at"


@dataclass(frozen=True)
class Candidate:
    """A raw detection tagged with the detector that found it."""

    detection: Detection
    kind: DetectorKind


# Numbers glued to words, "#123", decimals, clock parts or the end of "2-3" are not quantities
_NUM_GUARD = r"(?<![\w#.:])(?<!\d[-–])(?<!\d\s[-–]\s)"
# Clock numbers additionally must not continue a date like 2024-01-15
_CLOCK_GUARD = r"(?<![\w#.:/\-–])"
# A number followed by ".<digit>" is a version string, not a quantity
_NUM_END = r"(?!\.\d)"

_HOUR_UNIT = r"(?:hours?|hrs?|h)\b"
_MINUTE_UNIT = r"(?:minutes?|mins?|m)\b"
_MERIDIEM = r"(?:am|pm|a\.m\.|p\.m\.)(?!\w)"
_APPROX = r"(?:(?:\b(?:about|around|approximately|approx\.?)|~)\s*)"
_DURATION_PREFIX = rf"(?:\bfor\s+)?{_APPROX}?"


def _side(n: int) -> str:
    """Clock value for one side of a range: H, H:MM or H.MM, optional AM/PM."""
    return rf"(?P<h{n}>\d{{1,2}})(?:[:.](?P<m{n}>\d{{2}}))?(?:\s*(?P<ap{n}>{_MERIDIEM}))?"


_SIDE_END = r"(?![\w:/]|[.\-–]\d)"
_NOT_DURATION = r"(?!\s*(?:hours?|hrs?|minutes?|mins?|[hm])\b)"

# Greeting words that turn a time-of-day keyword into a salutation
GREETING_WORDS = ("good",)
_GREETING_BEFORE = re.compile(rf"\b(?:{'|'.join(GREETING_WORDS)})\s+$", re.IGNORECASE)

# Activity words that "quick"/"brief" shorten to a 15-minute slot
MODIFIER_ACTIVITY_WORDS = ("call", "meeting", "sync", "standup", "check", "review", "chat", "break")
MODIFIER_MINUTES = 15


@dataclass(frozen=True)
class _ClockValue:
    """One parsed side of a clock expression."""

    hour: int
    minute: int
    meridiem: str | None
    zero_padded: bool
    has_minutes: bool = False

    @property
    def is_ambiguous(self) -> bool:
        """True when no AM/PM is given and the hour reads as 12-hour."""
        return self.meridiem is None and not self.zero_padded and 1 <= self.hour <= 12

    @property
    def is_bare_number(self) -> bool:
        """True for a lone number outside 1-12 ("20" in "pages 10-20")."""
        return (
            self.meridiem is None
            and not self.has_minutes
            and not self.zero_padded
            and not 1 <= self.hour <= 12
        )

    def resolve(self) -> int:
        """Minutes since midnight, using the bare-hour rule when ambiguous."""
        if self.minute > 59:
            raise ValueError(f"Minute out of range: {self.minute}")
        if self.meridiem is not None:
            return to_24_hour(self.hour, self.meridiem) * 60 + self.minute
        if self.is_ambiguous:
            return infer_bare_hour(self.hour) * 60 + self.minute
        if self.hour > 23:
            raise ValueError(f"Hour out of range: {self.hour}")
        return self.hour * 60 + self.minute

    def resolve_in_half(self, pm: bool) -> int:
        """Minutes since midnight, placing an ambiguous hour in the given half."""
        if not self.is_ambiguous:
            return self.resolve()
        if self.minute > 59:
            raise ValueError(f"Minute out of range: {self.minute}")
        return to_24_hour(self.hour, "pm" if pm else "am") * 60 + self.minute


def _clock_value(match: re.Match[str], hour: str, minute: str, meridiem: str) -> _ClockValue:
    """Build a clock value from named groups of a match."""
    hour_text = match.group(hour)
    return _ClockValue(
        hour=int(hour_text),
        minute=int(match.group(minute) or 0),
        meridiem=match.groupdict().get(meridiem) or None,
        zero_padded=len(hour_text) == 2 and hour_text.startswith("0"),
        has_minutes=match.group(minute) is not None,
    )


def resolve_range(start: _ClockValue, end: _ClockValue) -> tuple[int, int]:
    """Resolve both sides of a range to minutes since midnight.

    An explicit side is taken as given. An ambiguous side is placed in the
    same half of the day as the other side, then moved 12 hours so the range
    runs forward. With both sides ambiguous the start uses the bare-hour rule.
    """
    if end.is_ambiguous:
        start_minutes = start.resolve()
        end_minutes = end.resolve_in_half(start_minutes >= NOON_MINUTES)
        if end_minutes <= start_minutes:
            end_minutes += HALF_DAY_MINUTES
        return start_minutes, end_minutes % MINUTES_PER_DAY

    end_minutes = end.resolve()
    if not start.is_ambiguous:
        return start.resolve(), end_minutes

    start_minutes = start.resolve_in_half(end_minutes >= NOON_MINUTES)
    if start_minutes >= end_minutes:
        start_minutes -= HALF_DAY_MINUTES
    return start_minutes % MINUTES_PER_DAY, end_minutes


class TimePatternDetector:
    """Rule-based detector for time and duration expressions.

    Uses pre-compiled regular expressions, one family per detector. The
    instance holds no per-call state and is safe to share between callers.
    """

    # Duration patterns, most specific first: (pattern, group -> minutes)
    DURATION_PATTERNS: list[tuple[str, Callable[[re.Match[str]], int]]] = [
        (
            rf"{_DURATION_PREFIX}{_NUM_GUARD}(?P<hours>\d+)\s*(?:hours?|hrs?|h)\s*(?:and\s+)?"
            rf"(?P<minutes>\d+)\s*{_MINUTE_UNIT}",
            lambda m: int(m.group("hours")) * 60 + int(m.group("minutes")),
        ),
        (
            rf"{_DURATION_PREFIX}{_NUM_GUARD}(?P<hours>\d+)\s*and\s+a\s+half\s*{_HOUR_UNIT}",
            lambda m: and_a_half_to_minutes(m.group("hours")),
        ),
        (
            rf"{_DURATION_PREFIX}\bhalf[\s-]*(?:an?\s+)?hour\b",
            lambda m: HALF_HOUR_MINUTES,
        ),
        (
            rf"{_DURATION_PREFIX}\bquarter[\s-]*(?:of\s+)?(?:an?\s+)?hour\b",
            lambda m: QUARTER_HOUR_MINUTES,
        ),
        (
            rf"{_DURATION_PREFIX}{_NUM_GUARD}(?P<hours>\d+(?:\.\d+)?){_NUM_END}\s*{_HOUR_UNIT}",
            lambda m: hours_to_minutes(m.group("hours")),
        ),
        (
            rf"{_DURATION_PREFIX}{_NUM_GUARD}(?P<minutes>\d+(?:\.\d+)?){_NUM_END}\s*{_MINUTE_UNIT}",
            lambda m: parse_minutes(m.group("minutes")),
        ),
    ]

    # "last hour", "past 2 hours", "last 15m"
    RELATIVE_PATTERNS: list[tuple[str, Callable[[re.Match[str]], int]]] = [
        (r"\b(?:last|past)\s+hour\b", lambda m: 60),
        (
            rf"\b(?:last|past)\s+(?P<hours>\d+(?:\.\d+)?){_NUM_END}\s*{_HOUR_UNIT}",
            lambda m: hours_to_minutes(m.group("hours")),
        ),
        (
            rf"\b(?:last|past)\s+(?P<minutes>\d+(?:\.\d+)?){_NUM_END}\s*{_MINUTE_UNIT}",
            lambda m: parse_minutes(m.group("minutes")),
        ),
    ]

    MODIFIER_PATTERN = (
        rf"\b(?:quick|brief)\s+(?:{'|'.join(MODIFIER_ACTIVITY_WORDS)})s?\b"
    )

    # Fixed keyword times
    KEYWORD_TIMES = {
        "noon": "12:00",
        "midday": "12:00",
        "midnight": "00:00",
        "morning": "09:00",
        "afternoon": "14:00",
        "evening": "18:00",
    }
    KEYWORD_PATTERNS = [
        r"(?:\bat\s+)?\b(?P<keyword>noon|midday|midnight)\b",
        r"(?:\bthis\s+)?\b(?P<keyword>morning|afternoon|evening)\b",
    ]

    # Meals imply a one-hour slot
    MEAL_RANGES = {
        "breakfast": ("07:00", "08:00"),
        "lunch": ("12:00", "13:00"),
        "dinner": ("18:00", "19:00"),
    }
    MEAL_PATTERN = r"\b(?P<meal>breakfast|lunch|dinner)\b"

    CLOCK_MERIDIEM_PATTERN = (
        rf"(?:\bat\s+)?{_CLOCK_GUARD}(?P<h1>\d{{1,2}})(?:[:.](?P<m1>\d{{2}}))?\s*(?P<ap1>{_MERIDIEM})"
    )
    CLOCK_COLON_PATTERN = (
        rf"(?:\bat\s+)?{_CLOCK_GUARD}(?P<h1>\d{{1,2}}):(?P<m1>\d{{2}})"
        rf"(?![\d:]|\.\d|\s*{_MERIDIEM})"
    )
    BARE_AT_PATTERN = rf"\bat\s+(?P<hour>\d{{1,2}})(?!\s*{_MERIDIEM})(?![\w:]|\.\d)"

    RANGE_PATTERN = (
        rf"(?:\b(?:from|at)\s+)?{_CLOCK_GUARD}{_side(1)}"
        rf"(?:\s+(?:to|until|till)\s+|\s*[-–]\s*){_side(2)}{_SIDE_END}{_NOT_DURATION}"
    )
    UNTIL_PATTERN = rf"\b(?:until|till)\s+{_side(1)}{_SIDE_END}"
    SINCE_PATTERN = rf"\b(?:since|from|starting(?:\s+at)?)\s+{_side(1)}{_SIDE_END}"

    def __init__(self) -> None:
        """Initialize the detector."""
        # Pre-compile patterns for efficiency
        self._durations = [
            (re.compile(p, re.IGNORECASE), convert) for p, convert in self.DURATION_PATTERNS
        ]
        self._relatives = [
            (re.compile(p, re.IGNORECASE), convert) for p, convert in self.RELATIVE_PATTERNS
        ]
        self._modifier = re.compile(self.MODIFIER_PATTERN, re.IGNORECASE)
        self._keywords = [re.compile(p, re.IGNORECASE) for p in self.KEYWORD_PATTERNS]
        self._meal = re.compile(self.MEAL_PATTERN, re.IGNORECASE)
        self._clock_meridiem = re.compile(self.CLOCK_MERIDIEM_PATTERN, re.IGNORECASE)
        self._clock_colon = re.compile(self.CLOCK_COLON_PATTERN, re.IGNORECASE)
        self._bare_at = re.compile(self.BARE_AT_PATTERN, re.IGNORECASE)
        self._range = re.compile(self.RANGE_PATTERN, re.IGNORECASE)
        self._until = re.compile(self.UNTIL_PATTERN, re.IGNORECASE)
        self._since = re.compile(self.SINCE_PATTERN, re.IGNORECASE)

    def detect(self, text: str) -> list[Candidate]:
        """Run every detector over the text.

        Args:
            text: A single line of activity text.

        Returns:
            All raw candidates, possibly overlapping, in detector order.
        """
        if not text:
            return []

        candidates: list[Candidate] = []
        candidates.extend(self._detect_ranges(text))
        candidates.extend(self._detect_modifiers(text))
        candidates.extend(self._detect_relative(text))
        candidates.extend(self._detect_clock_times(text))
        candidates.extend(self._detect_durations(text))
        candidates.extend(self._detect_bare_at(text))

        logger.debug(f"Found {len(candidates)} raw candidates in {text!r}")
        return candidates

    def _detect_durations(self, text: str) -> Iterator[Candidate]:
        """Duration phrases: "2 hours", "1.5h", "half an hour", "for ~30m"."""
        for pattern, convert in self._durations:
            for match in pattern.finditer(text):
                try:
                    minutes = convert(match)
                except ValueError as e:
                    logger.debug(f"Skipping duration {match.group(0)!r}: {e}")
                    continue
                yield self._duration(match, minutes, DetectorKind.DURATION)

    def _detect_relative(self, text: str) -> Iterator[Candidate]:
        """Relative spans: "last hour", "past 3 hours", "last 15m"."""
        for pattern, convert in self._relatives:
            for match in pattern.finditer(text):
                try:
                    minutes = convert(match)
                except ValueError as e:
                    logger.debug(f"Skipping relative duration {match.group(0)!r}: {e}")
                    continue
                yield self._duration(match, minutes, DetectorKind.RELATIVE)

    def _detect_modifiers(self, text: str) -> Iterator[Candidate]:
        """Duration modifiers: "quick call", "brief sync"."""
        for match in self._modifier.finditer(text):
            yield self._duration(match, MODIFIER_MINUTES, DetectorKind.MODIFIER)

    def _detect_clock_times(self, text: str) -> Iterator[Candidate]:
        """Clock times, time-of-day keywords and meals."""
        for pattern in (self._clock_meridiem, self._clock_colon):
            for match in pattern.finditer(text):
                try:
                    minutes = _clock_value(match, "h1", "m1", "ap1").resolve()
                except ValueError as e:
                    logger.debug(f"Skipping clock time {match.group(0)!r}: {e}")
                    continue
                yield self._time(match, minutes_to_time(minutes), None, DetectorKind.CLOCK)

        for pattern in self._keywords:
            for match in pattern.finditer(text):
                if _GREETING_BEFORE.search(text, 0, match.start()):
                    continue
                start_time = self.KEYWORD_TIMES[match.group("keyword").lower()]
                yield self._time(match, start_time, None, DetectorKind.CLOCK)

        for match in self._meal.finditer(text):
            start_time, end_time = self.MEAL_RANGES[match.group("meal").lower()]
            yield Candidate(
                Detection(
                    type=DetectionType.RANGE,
                    matched_text=match.group(0),
                    start_index=match.start(),
                    end_index=match.end(),
                    start_time=start_time,
                    end_time=end_time,
                ),
                DetectorKind.CLOCK,
            )

    def _detect_bare_at(self, text: str) -> Iterator[Candidate]:
        """Bare hours after "at": "at 3" -> 15:00, "at 9" -> 09:00."""
        for match in self._bare_at.finditer(text):
            try:
                hour = infer_bare_hour(int(match.group("hour")))
            except ValueError as e:
                logger.debug(f"Skipping bare hour {match.group(0)!r}: {e}")
                continue
            yield self._time(match, format_time(hour), None, DetectorKind.BARE_AT)

    def _detect_ranges(self, text: str) -> Iterator[Candidate]:
        """Ranges and one-sided range keywords (until, since, from, starting at)."""
        for match in self._range.finditer(text):
            sides = (
                _clock_value(match, "h1", "m1", "ap1"),
                _clock_value(match, "h2", "m2", "ap2"),
            )
            # Counts like "pages 10-20" are not clock ranges
            if any(side.is_bare_number for side in sides):
                logger.debug(f"Skipping numeric span {match.group(0)!r}")
                continue
            try:
                start, end = resolve_range(*sides)
            except ValueError as e:
                logger.debug(f"Skipping range {match.group(0)!r}: {e}")
                continue
            yield Candidate(
                Detection(
                    type=DetectionType.RANGE,
                    matched_text=match.group(0),
                    start_index=match.start(),
                    end_index=match.end(),
                    start_time=minutes_to_time(start),
                    end_time=minutes_to_time(end),
                ),
                DetectorKind.RANGE,
            )

        for pattern, is_end in ((self._until, True), (self._since, False)):
            for match in pattern.finditer(text):
                value = _clock_value(match, "h1", "m1", "ap1")
                # One-sided keywords need an explicit clock value, not a bare number
                if value.meridiem is None and match.group("m1") is None:
                    continue
                try:
                    clock = minutes_to_time(value.resolve())
                except ValueError as e:
                    logger.debug(f"Skipping one-sided range {match.group(0)!r}: {e}")
                    continue
                if is_end:
                    yield self._time(match, None, clock, DetectorKind.RANGE)
                else:
                    yield self._time(match, clock, None, DetectorKind.RANGE)

    @staticmethod
    def _duration(match: re.Match[str], minutes: int, kind: DetectorKind) -> Candidate:
        """Build a duration candidate from a match."""
        return Candidate(
            Detection(
                type=DetectionType.DURATION,
                matched_text=match.group(0),
                start_index=match.start(),
                end_index=match.end(),
                duration_minutes=minutes,
            ),
            kind,
        )

    @staticmethod
    def _time(
        match: re.Match[str],
        start_time: str | None,
        end_time: str | None,
        kind: DetectorKind,
    ) -> Candidate:
        """Build a time candidate carrying a start or an end."""
        return Candidate(
            Detection(
                type=DetectionType.TIME,
                matched_text=match.group(0),
                start_index=match.start(),
                end_index=match.end(),
                start_time=start_time,
                end_time=end_time,
            ),
            kind,
        )


__all__ = [
    "Candidate",
    "DetectorKind",
    "GREETING_WORDS",
    "MODIFIER_ACTIVITY_WORDS",
    "MODIFIER_MINUTES",
    "TimePatternDetector",
    "resolve_range",
]
