"""Sequential sample sources consumed by the segmentation core.

A sample source hands out mono float samples in order, a block at a time.
The core never decodes audio itself; it only asks a source for the next
``n`` samples and works with however many it got back.

Example:
    >>> import torch
    >>> from audioio.source import TensorSampleSource
    >>> source = TensorSampleSource(torch.zeros(16000), sample_rate=16000)
    >>> block = source.read(320)
    >>> block.shape
    torch.Size([320])
"""

from pathlib import Path
from typing import Protocol, Union

import numpy as np
import torch

from .errors import AudioValidationError
from .loader import open_sound_file
from .utils import ensure_float32_torch, to_mono
from .validate import validate_sample_rate, validate_samples


class SampleSource(Protocol):
    """Protocol for sequential mono sample readers.

    Attributes:
        sample_rate: Sample rate in Hz.
        frames: Total number of sample frames in the stream.
    """

    sample_rate: int
    frames: int

    def read(self, n: int) -> torch.Tensor:
        """Read up to ``n`` samples.

        Returns:
            1-D float32 tensor. Shorter than ``n`` (possibly empty) once
            the stream is exhausted.
        """
        ...


class TensorSampleSource:
    """Sample source over an in-memory waveform.

    Multi-channel input is averaged to mono on construction.

    Args:
        waveform: Samples of shape [T] or [channels, T].
        sample_rate: Sample rate in Hz.

    Raises:
        AudioValidationError: If the samples or sample rate are invalid.
    """

    def __init__(
        self,
        waveform: torch.Tensor | np.ndarray,
        sample_rate: int,
    ) -> None:
        validate_samples(waveform, sample_rate)
        self._samples = to_mono(ensure_float32_torch(waveform))
        self.sample_rate = sample_rate
        self.frames = int(self._samples.shape[0])
        self._position = 0

    def read(self, n: int) -> torch.Tensor:
        start = self._position
        end = min(start + max(n, 0), self.frames)
        self._position = end
        return self._samples[start:end]


class SoundFileSampleSource:
    """Sample source backed by ``soundfile.SoundFile``.

    Reads float32 blocks lazily and down-mixes them to mono, so long
    recordings are never fully decoded into memory. Use as a context
    manager or call :meth:`close` when done.

    Args:
        path_or_bytes: Path to an audio file or the raw bytes of one.

    Raises:
        AudioDecodeError: If the input is missing, empty or undecodable.
        AudioValidationError: If the file's sample rate is out of range.

    Example:
        >>> with SoundFileSampleSource("episode.wav") as source:
        ...     print(source.sample_rate, source.frames)
    """

    def __init__(self, path_or_bytes: Union[str, Path, bytes]) -> None:
        self._file, self.source = open_sound_file(path_or_bytes)
        self.sample_rate = int(self._file.samplerate)
        try:
            validate_sample_rate(self.sample_rate)
        except AudioValidationError:
            self._file.close()
            raise
        self.frames = int(self._file.frames)
        self.channels = int(self._file.channels)

    def read(self, n: int) -> torch.Tensor:
        # always_2d gives (samples, channels) even for mono files
        block = self._file.read(frames=max(n, 0), dtype="float32", always_2d=True)
        return torch.from_numpy(block).mean(dim=1)

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> "SoundFileSampleSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
