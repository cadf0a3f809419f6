"""Segment merging logic for smoothed speech/music labels.

Turns a per-second label sequence into the segment list handed to the
rendering stage, in three steps:

1. ``detect_runs``: coalesce equal consecutive labels into raw runs.
2. ``absorb_short_runs``: fold runs shorter than ``min_segment_seconds``
   into the preceding segment and join neighbours that share a label.
   Run length counts both ends, so a run of exactly
   ``min_segment_seconds`` windows is kept; a rule based on
   ``end - start`` would absorb it.
3. ``grow_boundaries``: widen music segments and narrow speech segments
   so that speech bleeding into a transition is not clipped into music.

Example:
    >>> from segmentation.config import SegmenterConfig
    >>> from segmentation.merge import merge_labels_to_segments
    >>> labels = [True] * 20 + [False] * 30
    >>> segments = merge_labels_to_segments(labels, has_intro=False, config=SegmenterConfig())
    >>> [(s.start_second, s.end_second, s.is_music) for s in segments]
    [(-3, 19, True), (23, 46, False)]
"""

from .config import SegmenterConfig
from .schema import Segment


def merge_labels_to_segments(
    labels: list[bool],
    has_intro: bool,
    config: SegmenterConfig,
) -> list[Segment]:
    """Merge smoothed window labels into grown segments.

    Args:
        labels: Smoothed per-window labels, True meaning music.
        has_intro: Whether the recording opens with a non-music intro.
            Forces the first segment to speech and changes how its
            boundary grows.
        config: Segmentation config.

    Returns:
        Segments ordered by start second. Bounds are not clamped.
    """
    if not labels:
        return []

    runs = detect_runs(labels)
    merged = absorb_short_runs(runs, has_intro, config)
    return grow_boundaries(merged, has_intro, config)


def detect_runs(labels: list[bool]) -> list[Segment]:
    """Coalesce consecutive equal labels into raw runs.

    The first run is always labeled music, whatever its actual label:
    recordings are assumed to open in a non-speech state.

    Args:
        labels: Per-window labels.

    Returns:
        Raw runs covering every window, with inclusive end seconds.
    """
    if not labels:
        return []

    runs: list[Segment] = []
    current_label = labels[0]
    current_start = 0

    for second in range(1, len(labels)):
        if labels[second] != current_label:
            runs.append(Segment(current_start, second - 1, current_label))
            current_label = labels[second]
            current_start = second

    runs.append(Segment(current_start, len(labels) - 1, current_label))

    runs[0].is_music = True
    return runs


def absorb_short_runs(
    runs: list[Segment],
    has_intro: bool,
    config: SegmenterConfig,
) -> list[Segment]:
    """Merge raw runs into output segments.

    The first run always opens the output. A later run shorter than
    ``config.min_segment_seconds`` is absorbed into the preceding output
    segment regardless of its label. A run with the same label as the
    preceding output segment extends it; anything else starts a new
    segment.

    Args:
        runs: Raw runs from :func:`detect_runs`.
        has_intro: Whether the first segment is forced to speech.
        config: Segmentation config.

    Returns:
        New list of merged segments; the input runs are not modified.
    """
    if not runs:
        return []

    first = runs[0]
    merged = [
        Segment(
            start_second=first.start_second,
            end_second=first.end_second,
            is_music=False if has_intro else first.is_music,
        )
    ]

    for run in runs[1:]:
        previous = merged[-1]
        if run.length_seconds < config.min_segment_seconds:
            previous.end_second = run.end_second
        elif run.is_music == previous.is_music:
            previous.end_second = run.end_second
        else:
            merged.append(Segment(run.start_second, run.end_second, run.is_music))

    return merged


def grow_boundaries(
    segments: list[Segment],
    has_intro: bool,
    config: SegmenterConfig,
) -> list[Segment]:
    """Adjust segment bounds around transitions.

    The first segment has nothing before it: with an intro its end moves
    out by ``grow_after_seconds``, otherwise its start moves back by
    ``grow_before_seconds``. Every later music segment grows on both
    sides and every later speech segment shrinks on both sides.

    Results are not clamped: starts may be negative, ends may pass the
    stream, and short speech segments may come out inverted.

    Args:
        segments: Merged segments from :func:`absorb_short_runs`.
        has_intro: Whether the recording opens with a non-music intro.
        config: Segmentation config.

    Returns:
        New list of adjusted segments.
    """
    before = config.grow_before_seconds
    after = config.grow_after_seconds
    grown: list[Segment] = []

    for index, segment in enumerate(segments):
        start = segment.start_second
        end = segment.end_second

        if index == 0:
            if has_intro:
                end += after
            else:
                start -= before
        elif segment.is_music:
            start -= before
            end += after
        else:
            start += before
            end -= after

        grown.append(Segment(start, end, segment.is_music))

    return grown
