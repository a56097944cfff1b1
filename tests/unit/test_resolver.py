"""Unit tests for overlap resolution."""

import pytest

from quicklog.parser import Candidate, Detection, DetectionType, DetectorKind
from quicklog.parser.resolver import PRIORITY_ORDER, resolve_candidates


def candidate(
    start: int,
    end: int,
    kind: DetectorKind,
    detection_type: DetectionType = DetectionType.TIME,
) -> Candidate:
    """Build a candidate covering [start, end)."""
    return Candidate(
        Detection(
            type=detection_type,
            matched_text="x" * (end - start),
            start_index=start,
            end_index=end,
        ),
        kind,
    )


class TestResolveCandidates:
    """Tests for resolve_candidates."""

    def test_empty(self) -> None:
        """Test no candidates resolve to nothing."""
        assert resolve_candidates([]) == []

    def test_longer_span_wins(self) -> None:
        """Test the longest overlapping candidate survives regardless of priority."""
        short = candidate(0, 4, DetectorKind.RANGE)
        long = candidate(2, 12, DetectorKind.BARE_AT)
        assert resolve_candidates([short, long]) == [long.detection]

    @pytest.mark.parametrize("higher,lower", list(zip(PRIORITY_ORDER, PRIORITY_ORDER[1:])))
    def test_priority_breaks_ties(self, higher: DetectorKind, lower: DetectorKind) -> None:
        """Test equal spans fall back to detector priority."""
        a = candidate(0, 5, lower, DetectionType.DURATION)
        b = candidate(0, 5, higher, DetectionType.TIME)
        (kept,) = resolve_candidates([a, b])
        assert kept is b.detection

    def test_priority_order(self) -> None:
        """Test range first, bare "at" last."""
        assert PRIORITY_ORDER == [
            DetectorKind.RANGE,
            DetectorKind.MODIFIER,
            DetectorKind.RELATIVE,
            DetectorKind.CLOCK,
            DetectorKind.DURATION,
            DetectorKind.BARE_AT,
        ]

    def test_non_overlapping_kept(self) -> None:
        """Test disjoint candidates all survive, ordered by position."""
        first = candidate(0, 3, DetectorKind.DURATION)
        second = candidate(10, 14, DetectorKind.CLOCK)
        assert resolve_candidates([second, first]) == [first.detection, second.detection]

    def test_adjacent_spans_do_not_overlap(self) -> None:
        """Test spans touching at a boundary are both kept."""
        left = candidate(0, 5, DetectorKind.CLOCK)
        right = candidate(5, 9, DetectorKind.DURATION)
        assert len(resolve_candidates([left, right])) == 2

    def test_loser_does_not_block(self) -> None:
        """Test a dropped candidate does not suppress its other neighbours."""
        winner = candidate(0, 10, DetectorKind.RANGE)
        dropped = candidate(8, 14, DetectorKind.DURATION)
        neighbour = candidate(12, 16, DetectorKind.CLOCK)
        result = resolve_candidates([dropped, neighbour, winner])
        assert result == [winner.detection, neighbour.detection]

    def test_no_shared_characters(self) -> None:
        """Test survivors never share a character."""
        candidates = [
            candidate(0, 6, DetectorKind.RANGE),
            candidate(3, 7, DetectorKind.CLOCK),
            candidate(5, 11, DetectorKind.DURATION),
            candidate(11, 12, DetectorKind.BARE_AT),
        ]
        result = resolve_candidates(candidates)
        for i, a in enumerate(result):
            for b in result[i + 1 :]:
                assert not a.overlaps(b)
