"""Short-time energy extraction.

Reads the sample stream one RMS frame at a time and computes the frame's
energy as ``sqrt(sum(x ** 2) / rms_frame_ms)``. The divisor is the frame
duration in milliseconds, not the number of samples read, so the values
are a scaled energy rather than a textbook RMS. The MLER thresholds are
calibrated against this scaling.
"""

import torch

from audioio.source import SampleSource

from .config import FrameLayout, SegmenterConfig


def compute_rms(
    source: SampleSource,
    layout: FrameLayout,
    config: SegmenterConfig,
) -> torch.Tensor:
    """Compute the RMS frame table for a stream.

    Args:
        source: Sample source positioned at the start of the stream.
        layout: Frame layout derived for this stream.
        config: Segmentation config (supplies the RMS divisor).

    Returns:
        1-D float64 tensor of length ``layout.rms_frame_count``.

    Example:
        >>> import torch
        >>> from audioio import TensorSampleSource
        >>> source = TensorSampleSource(torch.zeros(16000), 16000)
        >>> config = SegmenterConfig()
        >>> layout = FrameLayout.from_stream(config, 16000, 16000)
        >>> compute_rms(source, layout, config).shape
        torch.Size([50])
    """
    rms = torch.zeros(layout.rms_frame_count, dtype=torch.float64)

    for rms_frame in range(layout.rms_frame_count):
        block = source.read(layout.frames_in_rms_frame)
        # A short (or empty) read at end-of-stream is still a valid frame
        energy = torch.sum(block.to(torch.float64) ** 2)
        rms[rms_frame] = torch.sqrt(energy / config.rms_frame_ms)

    return rms
