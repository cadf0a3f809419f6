"""Per-second feature extraction from RMS frames.

Each one-second window aggregates ``rms_frames_in_long_frame`` consecutive
RMS frames into four features:

- mean RMS
- variance of the RMS values
- normalized variance (variance divided by mean RMS)
- Modified Low Energy Ratio (MLER)

MLER counts how many frames fall below ``low_energy_coefficient * mean``,
weighting each frame by ``sign(threshold - rms) + 1`` (0, 1 or 2) and
normalizing by ``2 * frames``. Steady signals such as music rarely dip
below the threshold and score close to 0; speech, with its pauses between
syllables and words, scores higher.

Variance deviations are taken from the window's RMS *sum*, and each
squared deviation is accumulated twice. Only the MLER drives
classification; variance and normalized variance are reported for
diagnostics.
"""

import logging

import torch

from .config import FrameLayout, SegmenterConfig
from .schema import FeatureTable


logger = logging.getLogger(__name__)


def compute_features(
    rms: torch.Tensor,
    layout: FrameLayout,
    config: SegmenterConfig,
) -> FeatureTable:
    """Compute the per-second feature table.

    Trailing RMS frames that do not fill a whole window are ignored.

    Args:
        rms: 1-D RMS frame table from :func:`compute_rms`.
        layout: Frame layout derived for this stream.
        config: Segmentation config (supplies the low-energy coefficient).

    Returns:
        FeatureTable with ``layout.long_frame_count`` entries per feature.
    """
    window_count = layout.long_frame_count
    frames_per_window = layout.rms_frames_in_long_frame

    frames = rms[: window_count * frames_per_window].to(torch.float64)
    frames = frames.reshape(window_count, frames_per_window)

    rms_sum = frames.sum(dim=1)
    mean_rms = rms_sum / frames_per_window

    low_threshold = config.low_energy_coefficient * mean_rms
    weights = torch.sign(low_threshold.unsqueeze(1) - frames) + 1
    mler = weights.sum(dim=1) / (2 * frames_per_window)

    deviation = (frames - rms_sum.unsqueeze(1)) ** 2
    variance = (2 * deviation).sum(dim=1) / frames_per_window

    # Silent windows have no meaningful spread; report 0 instead of NaN
    safe_mean = torch.where(mean_rms == 0, torch.ones_like(mean_rms), mean_rms)
    normalized_variance = torch.where(
        mean_rms == 0,
        torch.zeros_like(variance),
        variance / safe_mean,
    )

    table = FeatureTable(
        mean_rms=mean_rms,
        variance=variance,
        normalized_variance=normalized_variance,
        mler=mler,
    )

    for second in range(window_count):
        logger.info(
            "second=%d mean=%f variance=%f normalized_variance=%f mler=%f",
            second,
            float(mean_rms[second]),
            float(variance[second]),
            float(normalized_variance[second]),
            float(mler[second]),
        )

    return table
