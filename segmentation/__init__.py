"""Speech/music segmentation of recorded audio.

This module provides:
- RMS energy extraction over short frames
- Per-second features, including the Modified Low Energy Ratio (MLER)
- MLER classification and majority smoothing
- Segment merging with boundary growth
- Full segmentation pipeline over files, bytes, or waveforms

Example:
    >>> from segmentation import SegmenterConfig, segment_file
    >>> result = segment_file("episode.wav", has_intro=True)
    >>> for segment in result.segments:
    ...     print(f"{segment.start_second}s - {segment.end_second}s: {segment.label}")
"""

from .classify import classify_windows
from .config import FrameLayout, SegmenterConfig
from .errors import SegmentationError, SegmenterConfigError
from .features import compute_features
from .generate import segment_file, segment_source, segment_waveform
from .merge import absorb_short_runs, detect_runs, grow_boundaries, merge_labels_to_segments
from .rms import compute_rms
from .schema import FeatureTable, Segment, SegmentationResult, WindowInfo
from .smooth import smooth_labels
from .utils import clamp_segments


__all__ = [
    # Main API
    "segment_file",
    "segment_source",
    "segment_waveform",
    # Config
    "SegmenterConfig",
    "FrameLayout",
    # Schema
    "Segment",
    "SegmentationResult",
    "FeatureTable",
    "WindowInfo",
    # Pipeline stages
    "compute_rms",
    "compute_features",
    "classify_windows",
    "smooth_labels",
    "merge_labels_to_segments",
    "detect_runs",
    "absorb_short_runs",
    "grow_boundaries",
    # Errors
    "SegmentationError",
    "SegmenterConfigError",
    # Utils
    "clamp_segments",
]
