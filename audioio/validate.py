"""Validation of sample buffers and stream sample rates."""

import numpy as np
import torch

from .errors import AudioValidationError


# Valid sample rate range
MIN_SAMPLE_RATE = 8000
MAX_SAMPLE_RATE = 192000


def validate_samples(
    waveform: torch.Tensor | np.ndarray,
    sample_rate: int,
) -> None:
    """Validate a sample buffer before it is handed to the analysis core.

    Empty buffers are accepted: a recording shorter than one analysis
    window simply produces no segments.

    Args:
        waveform: Samples with shape [T] or [channels, T].
        sample_rate: Sample rate in Hz.

    Raises:
        AudioValidationError: If validation fails, with appropriate code:
            - INVALID_DTYPE: Samples are not a float tensor or array.
            - INVALID_SHAPE: Samples are not 1-D or 2-D.
            - NON_FINITE: Samples contain NaN or Inf values.
            - INVALID_SAMPLE_RATE: Sample rate outside valid range.

    Examples:
        >>> import torch
        >>> validate_samples(torch.randn(16000), 16000)  # No error if valid
    """
    if isinstance(waveform, np.ndarray):
        if not np.issubdtype(waveform.dtype, np.floating):
            raise AudioValidationError(
                message=f"Samples must be floating point, got {waveform.dtype}",
                code="INVALID_DTYPE",
                details={"actual_dtype": str(waveform.dtype)},
            )
        waveform = torch.from_numpy(np.ascontiguousarray(waveform))
    elif not isinstance(waveform, torch.Tensor):
        raise AudioValidationError(
            message=f"Samples must be a torch.Tensor or numpy array, got {type(waveform).__name__}",
            code="INVALID_DTYPE",
            details={"actual_type": type(waveform).__name__},
        )
    elif not waveform.is_floating_point():
        raise AudioValidationError(
            message=f"Samples must be a float tensor, got {waveform.dtype}",
            code="INVALID_DTYPE",
            details={"actual_dtype": str(waveform.dtype)},
        )

    if waveform.ndim not in (1, 2):
        raise AudioValidationError(
            message=f"Samples must be [T] or [channels, T], got shape {list(waveform.shape)}",
            code="INVALID_SHAPE",
            details={"shape": list(waveform.shape), "ndim": waveform.ndim},
        )

    if not torch.isfinite(waveform).all():
        nan_count = int(torch.isnan(waveform).sum())
        inf_count = int(torch.isinf(waveform).sum())
        raise AudioValidationError(
            message="Samples contain non-finite values (NaN or Inf)",
            code="NON_FINITE",
            details={"nan_count": nan_count, "inf_count": inf_count},
        )

    validate_sample_rate(sample_rate)


def validate_sample_rate(sample_rate: int) -> None:
    """Reject sample rates outside the supported range.

    Applied to in-memory waveforms and to files alike, so every entry
    point accepts the same rates.

    Raises:
        AudioValidationError: With code INVALID_SAMPLE_RATE.
    """
    if not isinstance(sample_rate, int) or sample_rate < MIN_SAMPLE_RATE or sample_rate > MAX_SAMPLE_RATE:
        raise AudioValidationError(
            message=f"Sample rate must be between {MIN_SAMPLE_RATE} and {MAX_SAMPLE_RATE} Hz, got {sample_rate}",
            code="INVALID_SAMPLE_RATE",
            details={
                "sample_rate": sample_rate,
                "min_allowed": MIN_SAMPLE_RATE,
                "max_allowed": MAX_SAMPLE_RATE,
            },
        )
