"""Per-window speech/music classification."""

import torch

from .config import SegmenterConfig


def classify_windows(mler: torch.Tensor, config: SegmenterConfig) -> list[bool]:
    """Label each window as music (True) or speech (False).

    A window is music when its MLER is at or below
    ``config.upper_music_threshold``.

    Args:
        mler: 1-D tensor of per-window MLER values.
        config: Segmentation config.

    Returns:
        One boolean per window, True meaning music.

    Examples:
        >>> import torch
        >>> classify_windows(torch.tensor([0.0, 0.3]), SegmenterConfig())
        [True, False]
    """
    return [bool(value) for value in (mler <= config.upper_music_threshold).tolist()]
