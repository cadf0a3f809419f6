"""Audio I/O module for feeding samples to the segmentation core.

This module handles:
- Sequential sample sources over files, bytes, or in-memory waveforms
- Loading WAV audio from files or bytes
- Validating in-memory sample buffers

Example:
    >>> from audioio import SoundFileSampleSource
    >>> with SoundFileSampleSource("episode.wav") as source:
    ...     first_frame = source.read(882)
"""

from .errors import AudioDecodeError, AudioIOError, AudioValidationError
from .loader import load_wav, load_wav_bytes
from .source import SampleSource, SoundFileSampleSource, TensorSampleSource
from .utils import compute_duration_sec, ensure_float32_torch, to_mono
from .validate import validate_sample_rate, validate_samples


__all__ = [
    # Sources
    "SampleSource",
    "TensorSampleSource",
    "SoundFileSampleSource",
    # Errors
    "AudioIOError",
    "AudioDecodeError",
    "AudioValidationError",
    # Loader
    "load_wav",
    "load_wav_bytes",
    # Validation
    "validate_samples",
    "validate_sample_rate",
    # Utils
    "compute_duration_sec",
    "ensure_float32_torch",
    "to_mono",
]
