"""Overlap resolution for raw detector candidates.

When candidates overlap, the longer span wins; equal lengths fall back to
detector priority. Non-overlapping candidates are all kept.
"""

import logging

from .detectors import Candidate, DetectorKind
from .models import Detection

logger = logging.getLogger(__name__)

# Highest priority first
PRIORITY_ORDER = [
    DetectorKind.RANGE,
    DetectorKind.MODIFIER,
    DetectorKind.RELATIVE,
    DetectorKind.CLOCK,
    DetectorKind.DURATION,
    DetectorKind.BARE_AT,
]
_PRIORITY_RANK = {kind: rank for rank, kind in enumerate(PRIORITY_ORDER)}


def resolve_candidates(candidates: list[Candidate]) -> list[Detection]:
    """Pick the final non-overlapping detections.

    Args:
        candidates: Raw candidates from every detector.

    Returns:
        Detections ordered by start offset, no two sharing a character.
    """
    ranked = sorted(
        candidates,
        key=lambda c: (
            -c.detection.length,
            _PRIORITY_RANK[c.kind],
            c.detection.start_index,
        ),
    )

    kept: list[Detection] = []
    for candidate in ranked:
        detection = candidate.detection
        if any(detection.overlaps(other) for other in kept):
            logger.debug(
                f"Dropping {candidate.kind.value} candidate {detection.matched_text!r} "
                f"at {detection.start_index}"
            )
            continue
        kept.append(detection)

    kept.sort(key=lambda d: d.start_index)
    return kept


__all__ = ["PRIORITY_ORDER", "resolve_candidates"]
