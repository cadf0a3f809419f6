"""Custom exceptions for audio I/O operations."""

from typing import Any


class AudioIOError(Exception):
    """Base exception for all audio I/O errors.

    Attributes:
        message: Human-readable error description.
        code: Short error code string (e.g., "INVALID_WAV").
        details: Optional dictionary with additional context.
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize AudioIOError.

        Args:
            message: Human-readable error description.
            code: Short error code string.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"[{self.code}] {self.message} (details: {self.details})"
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        """Return repr string."""
        return f"{self.__class__.__name__}(message={self.message!r}, code={self.code!r}, details={self.details!r})"


class AudioDecodeError(AudioIOError):
    """Raised when an audio container cannot be opened or decoded.

    Common codes:
        - INVALID_WAV: File is not a readable audio file.
        - FILE_NOT_FOUND: Audio file does not exist.
        - EMPTY_FILE: File or byte buffer has zero bytes.
        - EMPTY_AUDIO: Container decoded but holds no samples.
    """
    pass


class AudioValidationError(AudioIOError):
    """Raised when in-memory samples are unusable for analysis.

    Common codes:
        - INVALID_DTYPE: Samples are not a float tensor/array.
        - INVALID_SHAPE: Samples are not [T] or [channels, T].
        - NON_FINITE: Samples contain NaN or Inf values.
        - INVALID_SAMPLE_RATE: Sample rate outside valid range.
    """
    pass
