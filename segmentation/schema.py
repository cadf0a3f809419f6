"""Schema definitions for segmentation output.

This module defines the data structures passed between pipeline stages
and returned to callers: per-window feature tables, labeled segments, and
the overall segmentation result.

Example:
    >>> from segmentation.schema import Segment, SegmentationResult
    >>> segment = Segment(start_second=0, end_second=41, is_music=True)
    >>> result = SegmentationResult(
    ...     sample_rate=44100,
    ...     total_frames=44100 * 600,
    ...     long_frame_count=600,
    ...     has_intro=False,
    ...     config={"rms_frame_ms": 20},
    ...     segments=[segment],
    ... )
"""

from dataclasses import dataclass, field
from typing import Any

import torch

from audioio.utils import compute_duration_sec


@dataclass
class Segment:
    """A labeled run of one-second windows.

    Bounds are in whole seconds and ``end_second`` is inclusive. After
    boundary growth a segment may start before 0, end past the stream, or
    even end before it starts; clamping is left to the consumer.

    Attributes:
        start_second: First second of the segment.
        end_second: Last second of the segment (inclusive).
        is_music: True for music, False for speech.
    """

    start_second: int
    end_second: int
    is_music: bool

    @property
    def label(self) -> str:
        """Return "music" or "speech"."""
        return "music" if self.is_music else "speech"

    @property
    def length_seconds(self) -> int:
        """Return number of seconds covered (may be <= 0 after growth)."""
        return self.end_second - self.start_second + 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "start_second": self.start_second,
            "end_second": self.end_second,
            "is_music": self.is_music,
            "label": self.label,
        }


@dataclass
class FeatureTable:
    """Per-window energy features, one entry per second of audio.

    All four tensors are 1-D float64 and share the same length.

    Attributes:
        mean_rms: Mean RMS of the window's RMS frames.
        variance: Spread of the window's RMS frames.
        normalized_variance: variance divided by mean_rms (0.0 when the
            mean is 0).
        mler: Modified Low Energy Ratio of the window.
    """

    mean_rms: torch.Tensor
    variance: torch.Tensor
    normalized_variance: torch.Tensor
    mler: torch.Tensor

    def __len__(self) -> int:
        return int(self.mean_rms.shape[0])

    def row(self, index: int) -> dict[str, float]:
        """Return the features of one window as plain floats."""
        return {
            "mean_rms": float(self.mean_rms[index]),
            "variance": float(self.variance[index]),
            "normalized_variance": float(self.normalized_variance[index]),
            "mler": float(self.mler[index]),
        }


@dataclass
class WindowInfo:
    """Diagnostic view of a single one-second window.

    Attributes:
        second: Window index (0-based), equal to its start second.
        mean_rms: Mean RMS of the window.
        variance: Variance feature.
        normalized_variance: Normalized variance feature.
        mler: Modified Low Energy Ratio.
        is_music: Label straight from the classifier.
        smoothed_is_music: Label after majority smoothing.
    """

    second: int
    mean_rms: float
    variance: float
    normalized_variance: float
    mler: float
    is_music: bool
    smoothed_is_music: bool

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "second": self.second,
            "mean_rms": round(self.mean_rms, 6),
            "variance": round(self.variance, 6),
            "normalized_variance": round(self.normalized_variance, 6),
            "mler": round(self.mler, 6),
            "is_music": self.is_music,
            "smoothed_is_music": self.smoothed_is_music,
        }


@dataclass
class SegmentationResult:
    """Complete result of segmenting one recording.

    Attributes:
        sample_rate: Sample rate of the analysed stream in Hz.
        total_frames: Number of samples in the stream.
        long_frame_count: Number of one-second windows analysed.
        has_intro: Whether the caller flagged a non-speech intro.
        config: Dictionary describing the SegmenterConfig applied.
        segments: Segments after merging and boundary growth.
        windows: Optional per-window diagnostics.
    """

    sample_rate: int
    total_frames: int
    long_frame_count: int
    has_intro: bool
    config: dict[str, Any]
    segments: list[Segment]
    windows: list[WindowInfo] | None = field(default=None)

    def to_dict(self, include_windows: bool = False) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Args:
            include_windows: Whether to include the per-window diagnostics.

        Returns:
            Dictionary representation suitable for JSON serialization.
        """
        result: dict[str, Any] = {
            "sample_rate": self.sample_rate,
            "duration_sec": round(self.duration_sec, 6),
            "long_frame_count": self.long_frame_count,
            "has_intro": self.has_intro,
            "config": self.config,
            "segment_count": self.segment_count,
            "segments": [seg.to_dict() for seg in self.segments],
        }

        if include_windows and self.windows is not None:
            result["windows"] = [w.to_dict() for w in self.windows]

        return result

    @property
    def duration_sec(self) -> float:
        """Return stream duration in seconds."""
        return compute_duration_sec(self.total_frames, self.sample_rate)

    @property
    def segment_count(self) -> int:
        """Return number of segments."""
        return len(self.segments)
