"""Tunable parameters and derived frame layout for segmentation.

``SegmenterConfig`` holds every tunable of the pipeline and is built once
per run. ``FrameLayout`` turns it into concrete frame sizes and counts for a
given stream.

Example:
    >>> from segmentation.config import FrameLayout, SegmenterConfig
    >>> config = SegmenterConfig()
    >>> layout = FrameLayout.from_stream(config, sample_rate=44100, total_frames=441000)
    >>> layout.frames_in_rms_frame, layout.long_frame_count, layout.rms_frame_count
    (882, 10, 500)
"""

from dataclasses import asdict, dataclass

from .errors import SegmenterConfigError


def _is_int(value) -> bool:
    # bool is an int subclass but never a valid count
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class SegmenterConfig:
    """Configuration for the speech/music segmentation pipeline.

    Attributes:
        rms_frame_ms: Duration of an RMS frame in milliseconds. Also the
            divisor of the RMS sum of squares. Default 20.
        long_frame_ms: Duration of a classification window in
            milliseconds. Must be a multiple of rms_frame_ms. Default 1000.
        low_energy_coefficient: Fraction of a window's mean RMS below
            which an RMS frame counts as low energy. Default 0.20.
        upper_music_threshold: Windows whose MLER is at or below this
            value are classified as music. Default 0.0.
        min_segment_seconds: Runs shorter than this many windows are
            absorbed into the preceding segment. Default 10.
        grow_before_seconds: Boundary adjustment applied at segment
            starts. Default 3.
        grow_after_seconds: Boundary adjustment applied at segment ends.
            Default 3.
        smoothing_radius: Half-width of the majority filter; the filter
            spans 2 * radius + 1 windows. Default 3.
    """

    rms_frame_ms: int = 20
    long_frame_ms: int = 1000
    low_energy_coefficient: float = 0.20
    upper_music_threshold: float = 0.0
    min_segment_seconds: int = 10
    grow_before_seconds: int = 3
    grow_after_seconds: int = 3
    smoothing_radius: int = 3

    def __post_init__(self) -> None:
        """Validate configuration on initialization."""
        self.validate()

    def validate(self) -> None:
        """Validate configuration parameters.

        Raises:
            SegmenterConfigError: If any parameter is invalid.
        """
        for name in ("rms_frame_ms", "long_frame_ms"):
            value = getattr(self, name)
            if not _is_int(value) or value <= 0:
                raise SegmenterConfigError(
                    message=f"{name} must be a positive integer, got {value!r}",
                    details={"parameter": name, "value": value},
                )

        if self.long_frame_ms % self.rms_frame_ms != 0:
            raise SegmenterConfigError(
                message=(
                    f"long_frame_ms ({self.long_frame_ms}) must be a multiple of "
                    f"rms_frame_ms ({self.rms_frame_ms})"
                ),
                details={
                    "parameter": "long_frame_ms",
                    "long_frame_ms": self.long_frame_ms,
                    "rms_frame_ms": self.rms_frame_ms,
                },
            )

        if self.low_energy_coefficient < 0:
            raise SegmenterConfigError(
                message=f"low_energy_coefficient must be >= 0, got {self.low_energy_coefficient}",
                details={"parameter": "low_energy_coefficient", "value": self.low_energy_coefficient},
            )

        if not _is_int(self.min_segment_seconds) or self.min_segment_seconds < 1:
            raise SegmenterConfigError(
                message=f"min_segment_seconds must be an integer >= 1, got {self.min_segment_seconds!r}",
                details={"parameter": "min_segment_seconds", "value": self.min_segment_seconds},
            )

        for name in ("grow_before_seconds", "grow_after_seconds", "smoothing_radius"):
            value = getattr(self, name)
            if not _is_int(value) or value < 0:
                raise SegmenterConfigError(
                    message=f"{name} must be an integer >= 0, got {value!r}",
                    details={"parameter": name, "value": value},
                )

    @property
    def rms_frames_in_long_frame(self) -> int:
        """Number of RMS frames aggregated into one classification window."""
        return self.long_frame_ms // self.rms_frame_ms

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)


@dataclass(frozen=True)
class FrameLayout:
    """Frame sizes and counts derived from a config and a stream.

    Attributes:
        sample_rate: Sample rate in Hz.
        total_frames: Number of samples in the (mono) stream.
        frames_in_rms_frame: Samples read per RMS frame.
        frames_in_long_frame: Samples spanned by one classification window.
        rms_frames_in_long_frame: RMS frames per classification window.
        long_frame_count: Number of whole classification windows.
        rms_frame_count: Number of RMS frames computed; a trailing partial
            window is never framed.
    """

    sample_rate: int
    total_frames: int
    frames_in_rms_frame: int
    frames_in_long_frame: int
    rms_frames_in_long_frame: int
    long_frame_count: int
    rms_frame_count: int

    @classmethod
    def from_stream(
        cls,
        config: SegmenterConfig,
        sample_rate: int,
        total_frames: int,
    ) -> "FrameLayout":
        """Compute the layout for a stream.

        Args:
            config: Validated segmentation config.
            sample_rate: Sample rate in Hz.
            total_frames: Number of samples in the stream.

        Returns:
            FrameLayout for the stream.

        Raises:
            SegmenterConfigError: With code INVALID_LAYOUT if the sample rate
                is not positive, the stream length is negative, or an RMS
                frame would hold less than one sample.
        """
        if not isinstance(sample_rate, int) or sample_rate <= 0:
            raise SegmenterConfigError(
                message=f"sample_rate must be a positive integer, got {sample_rate!r}",
                code="INVALID_LAYOUT",
                details={"parameter": "sample_rate", "value": sample_rate},
            )

        if total_frames < 0:
            raise SegmenterConfigError(
                message=f"total_frames must be >= 0, got {total_frames}",
                code="INVALID_LAYOUT",
                details={"parameter": "total_frames", "value": total_frames},
            )

        frames_in_rms_frame = sample_rate * config.rms_frame_ms // 1000
        frames_in_long_frame = sample_rate * config.long_frame_ms // 1000

        if frames_in_rms_frame < 1:
            raise SegmenterConfigError(
                message=(
                    f"rms_frame_ms ({config.rms_frame_ms}) holds no samples "
                    f"at {sample_rate} Hz"
                ),
                code="INVALID_LAYOUT",
                details={
                    "parameter": "rms_frame_ms",
                    "rms_frame_ms": config.rms_frame_ms,
                    "sample_rate": sample_rate,
                },
            )

        rms_frames_in_long_frame = config.rms_frames_in_long_frame
        long_frame_count = total_frames // frames_in_long_frame

        return cls(
            sample_rate=sample_rate,
            total_frames=total_frames,
            frames_in_rms_frame=frames_in_rms_frame,
            frames_in_long_frame=frames_in_long_frame,
            rms_frames_in_long_frame=rms_frames_in_long_frame,
            long_frame_count=long_frame_count,
            rms_frame_count=long_frame_count * rms_frames_in_long_frame,
        )
