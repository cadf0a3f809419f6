"""Opening and whole-file decoding of audio through soundfile.

``open_sound_file`` is shared by the streaming source and the one-shot
loaders so that both map missing, empty and undecodable input to the same
``AudioDecodeError`` codes.
"""

import io
from pathlib import Path
from typing import Union

import soundfile as sf
import torch

from .errors import AudioDecodeError


def open_sound_file(path_or_bytes: Union[str, Path, bytes]) -> tuple[sf.SoundFile, str]:
    """Open audio for reading.

    Args:
        path_or_bytes: Path to an audio file or the raw bytes of one.

    Returns:
        Tuple of (open SoundFile, description of the source). The caller
        owns the handle and must close it.

    Raises:
        AudioDecodeError: FILE_NOT_FOUND, EMPTY_FILE or INVALID_WAV.
    """
    if isinstance(path_or_bytes, bytes):
        if not path_or_bytes:
            raise AudioDecodeError(
                message="Audio data is empty",
                code="EMPTY_FILE",
                details={"bytes_length": 0},
            )
        target = io.BytesIO(path_or_bytes)
        description = "bytes"
    else:
        path = Path(path_or_bytes)
        check_readable_path(path)
        target = str(path)
        description = str(path)

    try:
        return sf.SoundFile(target), description
    except Exception as e:
        raise AudioDecodeError(
            message=f"Failed to open audio: {e}",
            code="INVALID_WAV",
            details={"source": description, "error": str(e)},
        ) from e


def check_readable_path(path: Path) -> None:
    """Raise AudioDecodeError unless path names a non-empty file."""
    if not path.exists():
        raise AudioDecodeError(
            message=f"Audio file not found: {path}",
            code="FILE_NOT_FOUND",
            details={"path": str(path)},
        )

    if path.stat().st_size == 0:
        raise AudioDecodeError(
            message=f"Audio file is empty: {path}",
            code="EMPTY_FILE",
            details={"path": str(path)},
        )


def load_wav(path: str | Path) -> tuple[torch.Tensor, int]:
    """Decode a whole audio file.

    Prefer :class:`audioio.source.SoundFileSampleSource` for long
    recordings; this reads every sample into memory.

    Args:
        path: Path to the audio file.

    Returns:
        Tuple of (waveform [channels, samples] float32, sample_rate).

    Raises:
        AudioDecodeError: If the file is missing, empty or undecodable.

    Examples:
        >>> waveform, sr = load_wav("episode.wav")
        >>> waveform.shape
        torch.Size([1, 441000])
    """
    return _read_all(Path(path))


def load_wav_bytes(data: bytes) -> tuple[torch.Tensor, int]:
    """Decode audio held in memory.

    Args:
        data: Raw bytes of an audio file.

    Returns:
        Tuple of (waveform [channels, samples] float32, sample_rate).

    Raises:
        AudioDecodeError: If the bytes are empty or undecodable.
    """
    return _read_all(data)


def _read_all(path_or_bytes: Union[Path, bytes]) -> tuple[torch.Tensor, int]:
    sound_file, description = open_sound_file(path_or_bytes)
    with sound_file:
        # (samples, channels) -> (channels, samples)
        data = sound_file.read(dtype="float32", always_2d=True)
        sample_rate = int(sound_file.samplerate)

    if data.size == 0:
        raise AudioDecodeError(
            message="Audio contains no samples",
            code="EMPTY_AUDIO",
            details={"source": description},
        )

    return torch.from_numpy(data.T.copy()), sample_rate
