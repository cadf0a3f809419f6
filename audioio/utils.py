"""Utility functions for audio I/O."""

import numpy as np
import torch


def compute_duration_sec(num_samples: int, sample_rate: int) -> float:
    """Compute duration in seconds from sample count and rate.

    Args:
        num_samples: Number of audio samples.
        sample_rate: Sample rate in Hz.

    Returns:
        Duration in seconds.

    Examples:
        >>> compute_duration_sec(16000, 16000)
        1.0
        >>> compute_duration_sec(8000, 16000)
        0.5
    """
    if sample_rate <= 0:
        return 0.0
    return num_samples / sample_rate


def ensure_float32_torch(waveform: torch.Tensor | np.ndarray) -> torch.Tensor:
    """Ensure waveform is a float32 torch tensor.

    Args:
        waveform: Input tensor or numpy array (any dtype).

    Returns:
        Float32 tensor with same shape.

    Examples:
        >>> import torch
        >>> t = ensure_float32_torch(torch.zeros(1, 100, dtype=torch.int16))
        >>> t.dtype
        torch.float32
    """
    if isinstance(waveform, np.ndarray):
        waveform = torch.from_numpy(np.ascontiguousarray(waveform))
    elif not isinstance(waveform, torch.Tensor):
        waveform = torch.tensor(waveform)
    return waveform.to(dtype=torch.float32)


def to_mono(waveform: torch.Tensor) -> torch.Tensor:
    """Down-mix a waveform to a flat mono sample vector.

    Channels are averaged. The speech/music analysis never looks at
    individual channels.

    Args:
        waveform: Tensor of shape [T] or [channels, T].

    Returns:
        1-D tensor of shape [T].

    Examples:
        >>> import torch
        >>> to_mono(torch.ones(2, 4)).shape
        torch.Size([4])
    """
    if waveform.ndim == 1:
        return waveform
    if waveform.shape[0] == 1:
        return waveform[0]
    return waveform.mean(dim=0)
