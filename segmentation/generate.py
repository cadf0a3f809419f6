"""Segmentation orchestration.

This module provides the main entry points for segmenting a recording
into speech and music. It runs the full pipeline in order:
1. RMS extraction over 20 ms frames
2. Per-second feature extraction (mean, variance, MLER)
3. MLER classification
4. Majority smoothing
5. Segment merging and boundary growth

Example:
    >>> from segmentation.generate import segment_file
    >>> result = segment_file("episode.wav", has_intro=False)
    >>> for segment in result.segments:
    ...     print(segment.start_second, segment.end_second, segment.label)
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np
import torch

from audioio.source import SampleSource, SoundFileSampleSource, TensorSampleSource

from .classify import classify_windows
from .config import FrameLayout, SegmenterConfig
from .features import compute_features
from .merge import merge_labels_to_segments
from .rms import compute_rms
from .schema import FeatureTable, SegmentationResult, WindowInfo
from .smooth import smooth_labels


logger = logging.getLogger(__name__)


def segment_source(
    source: SampleSource,
    has_intro: bool = False,
    config: SegmenterConfig | None = None,
    include_windows: bool = False,
) -> SegmentationResult:
    """Segment a sample stream into speech and music.

    Args:
        source: Sample source positioned at the start of the stream.
        has_intro: Whether the recording opens with a non-music intro.
        config: Segmentation config. If None, uses default SegmenterConfig().
        include_windows: Whether to attach per-window diagnostics to the
            result. Default False.

    Returns:
        SegmentationResult with segments ordered by start second.

    Raises:
        SegmenterConfigError: If the stream cannot be framed.
    """
    if config is None:
        config = SegmenterConfig()

    layout = FrameLayout.from_stream(config, source.sample_rate, source.frames)

    if layout.long_frame_count == 0:
        logger.warning(
            "Stream shorter than one window: total_frames=%d frames_in_long_frame=%d",
            layout.total_frames,
            layout.frames_in_long_frame,
        )

    # Step 1: RMS frames
    rms = compute_rms(source, layout, config)

    # Step 2: Per-second features
    features = compute_features(rms, layout, config)

    # Step 3: Classification
    labels = classify_windows(features.mler, config)

    # Step 4: Smoothing
    smoothed = smooth_labels(labels, config)

    # Step 5: Segments
    segments = merge_labels_to_segments(smoothed, has_intro, config)

    logger.info(
        "Segmentation complete: seconds=%d music_seconds=%d segments=%d has_intro=%s",
        layout.long_frame_count,
        sum(smoothed),
        len(segments),
        has_intro,
    )

    return SegmentationResult(
        sample_rate=layout.sample_rate,
        total_frames=layout.total_frames,
        long_frame_count=layout.long_frame_count,
        has_intro=has_intro,
        config=config.to_dict(),
        segments=segments,
        windows=_build_windows(features, labels, smoothed) if include_windows else None,
    )


def segment_waveform(
    waveform: torch.Tensor | np.ndarray,
    sample_rate: int,
    has_intro: bool = False,
    config: SegmenterConfig | None = None,
    include_windows: bool = False,
) -> SegmentationResult:
    """Segment an in-memory waveform.

    Args:
        waveform: Samples of shape [T] or [channels, T]; channels are
            averaged to mono.
        sample_rate: Sample rate in Hz.
        has_intro: Whether the recording opens with a non-music intro.
        config: Segmentation config. If None, uses default SegmenterConfig().
        include_windows: Whether to attach per-window diagnostics.

    Returns:
        SegmentationResult for the waveform.

    Raises:
        AudioValidationError: If the waveform or sample rate is invalid.
        SegmenterConfigError: If the stream cannot be framed.

    Example:
        >>> import torch
        >>> result = segment_waveform(torch.zeros(16000 * 30), 16000)
        >>> result.long_frame_count
        30
    """
    source = TensorSampleSource(waveform, sample_rate)
    return segment_source(
        source,
        has_intro=has_intro,
        config=config,
        include_windows=include_windows,
    )


def segment_file(
    path_or_bytes: Union[str, Path, bytes],
    has_intro: bool = False,
    config: SegmenterConfig | None = None,
    include_windows: bool = False,
) -> SegmentationResult:
    """Segment an audio file or the raw bytes of one.

    The file is read block by block and closed when the run ends.

    Args:
        path_or_bytes: Path to an audio file (str/Path) or raw bytes.
        has_intro: Whether the recording opens with a non-music intro.
        config: Segmentation config. If None, uses default SegmenterConfig().
        include_windows: Whether to attach per-window diagnostics.

    Returns:
        SegmentationResult for the file.

    Raises:
        AudioDecodeError: If the audio cannot be opened.
        AudioValidationError: If the file's sample rate is out of range.
        SegmenterConfigError: If the stream cannot be framed.
    """
    with SoundFileSampleSource(path_or_bytes) as source:
        logger.info(
            "Segmenting audio: source=%s sample_rate=%d frames=%d channels=%d",
            source.source,
            source.sample_rate,
            source.frames,
            source.channels,
        )
        return segment_source(
            source,
            has_intro=has_intro,
            config=config,
            include_windows=include_windows,
        )


def _build_windows(
    features: FeatureTable,
    labels: list[bool],
    smoothed: list[bool],
) -> list[WindowInfo]:
    """Zip features and labels into per-window diagnostics."""
    windows: list[WindowInfo] = []

    for second in range(len(features)):
        row = features.row(second)
        windows.append(WindowInfo(
            second=second,
            mean_rms=row["mean_rms"],
            variance=row["variance"],
            normalized_variance=row["normalized_variance"],
            mler=row["mler"],
            is_music=labels[second],
            smoothed_is_music=smoothed[second],
        ))

    return windows
