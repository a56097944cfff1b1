"""Segmentation of text into highlighted and plain runs for rendering."""

from .models import Detection, Segment


def get_highlighted_segments(text: str, detections: list[Detection]) -> list[Segment]:
    """Split text into plain and highlighted segments.

    Concatenating the segment texts always gives back the original text.

    Args:
        text: The original input text.
        detections: Detections found in that text.

    Returns:
        Ordered segments, highlighted ones carrying their detection.
    """
    if not detections:
        return [Segment(text=text, is_highlighted=False)]

    segments: list[Segment] = []
    last_end = 0

    for detection in sorted(detections, key=lambda d: d.start_index):
        # Plain text before this detection
        if detection.start_index > last_end:
            segments.append(
                Segment(text=text[last_end : detection.start_index], is_highlighted=False)
            )

        segments.append(
            Segment(
                text=text[detection.start_index : detection.end_index],
                is_highlighted=True,
                detection=detection,
            )
        )
        last_end = detection.end_index

    if last_end < len(text):
        segments.append(Segment(text=text[last_end:], is_highlighted=False))

    return segments


__all__ = ["get_highlighted_segments"]
