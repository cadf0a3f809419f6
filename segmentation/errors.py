"""Custom exceptions for speech/music segmentation."""

from typing import Any


class SegmentationError(Exception):
    """Base exception for all segmentation errors.

    Attributes:
        message: Human-readable error description.
        code: Short error code string (e.g., "INVALID_CONFIG").
        details: Optional dictionary with additional context.
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize SegmentationError.

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


class SegmenterConfigError(SegmentationError):
    """Raised when tunables or the derived frame layout are unusable.

    Common codes:
        - INVALID_CONFIG: A tunable parameter is out of range.
        - INVALID_LAYOUT: Sample rate or stream length cannot be framed.
    """

    def __init__(
        self,
        message: str,
        code: str = "INVALID_CONFIG",
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize SegmenterConfigError.

        Args:
            message: Human-readable error description.
            code: Short error code string. Defaults to "INVALID_CONFIG".
            details: Optional dictionary with additional context.
        """
        super().__init__(message, code, details)
