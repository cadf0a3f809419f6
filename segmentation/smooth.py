"""Majority-vote smoothing of per-window labels.

Single classification windows flip easily (a drum break in a song, a long
held vowel in speech). A centered majority filter removes those flips
before the labels are turned into segments.

With the default radius of 3 the filter spans 7 windows and a window
becomes music when at least 4 of them are music. The first ``radius``
windows are forced to music and the last ``radius`` windows to speech:
recordings are assumed to open with intro music and to end without
trailing music.

Example:
    >>> from segmentation.config import SegmenterConfig
    >>> from segmentation.smooth import smooth_labels
    >>> labels = [True, True, True, False, True, True, True, False, False, False]
    >>> smooth_labels(labels, SegmenterConfig())[3]
    True
"""

from .config import SegmenterConfig


def smooth_labels(labels: list[bool], config: SegmenterConfig) -> list[bool]:
    """Apply the majority filter to a label sequence.

    Args:
        labels: Per-window labels, True meaning music.
        config: Segmentation config (supplies the filter radius).

    Returns:
        New list of smoothed labels. The input list is not modified.
    """
    if not labels:
        return []

    n = len(labels)
    radius = config.smoothing_radius
    min_votes = radius + 1

    smoothed = list(labels)

    for i in range(radius, n - radius):
        votes = sum(1 for j in range(i - radius, i + radius + 1) if labels[j])
        smoothed[i] = votes >= min_votes

    # Forced edges; on very short sequences the trailing speech edge wins
    for i in range(min(radius, n)):
        smoothed[i] = True
    for i in range(max(n - radius, 0), n):
        smoothed[i] = False

    return smoothed
