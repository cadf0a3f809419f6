"""Helpers for consumers of segmentation results."""

from .schema import Segment


def clamp_segments(segments: list[Segment], long_frame_count: int) -> list[Segment]:
    """Clamp grown segments to the analysed range.

    Boundary growth may push bounds before second 0 or past the last
    window, and may leave short speech segments inverted. This keeps
    every bound inside ``[0, long_frame_count - 1]`` and drops segments
    that end before they start.

    Args:
        segments: Segments as returned by the pipeline.
        long_frame_count: Number of one-second windows in the stream.

    Returns:
        New list of clamped segments.

    Examples:
        >>> clamp_segments([Segment(-3, 5, True), Segment(8, 7, False)], 10)
        [Segment(start_second=0, end_second=5, is_music=True)]
    """
    if long_frame_count <= 0:
        return []

    last = long_frame_count - 1
    result = []
    for segment in segments:
        start = min(max(segment.start_second, 0), last)
        end = min(max(segment.end_second, 0), last)
        if end < start:
            continue
        result.append(Segment(start, end, segment.is_music))

    return result
