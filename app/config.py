"""Configuration management for the segmentation tools.

This module provides centralized configuration using pydantic-settings,
loading values from environment variables (prefix ``PODSEG_``) or a
``.env`` file with sensible defaults.

Example:
    >>> from app.config import get_settings
    >>> settings = get_settings()
    >>> config = settings.segmenter_config()
    >>> config.rms_frame_ms
    20
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from segmentation.config import SegmenterConfig


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Every attribute can be overridden with an upper-case environment
    variable prefixed with ``PODSEG_`` (e.g. ``PODSEG_LOG_LEVEL=DEBUG``).

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rms_frame_ms: Default RMS frame duration in milliseconds.
        long_frame_ms: Default classification window in milliseconds.
        low_energy_coefficient: Default low-energy coefficient.
        upper_music_threshold: Default MLER music cutoff.
        min_segment_seconds: Default minimum segment length.
        grow_before_seconds: Default boundary growth at segment starts.
        grow_after_seconds: Default boundary growth at segment ends.
        smoothing_radius: Default majority filter half-width.
    """

    model_config = SettingsConfigDict(
        env_prefix="PODSEG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    # Segmentation defaults
    rms_frame_ms: int = 20
    long_frame_ms: int = 1000
    low_energy_coefficient: float = 0.20
    upper_music_threshold: float = 0.0
    min_segment_seconds: int = 10
    grow_before_seconds: int = 3
    grow_after_seconds: int = 3
    smoothing_radius: int = 3

    def segmenter_config(self, **overrides) -> SegmenterConfig:
        """Build a validated SegmenterConfig from these settings.

        Args:
            **overrides: Field values that take precedence over settings.
                None values are ignored.

        Returns:
            SegmenterConfig instance.

        Raises:
            SegmenterConfigError: If the resulting values are invalid.
        """
        values = {
            "rms_frame_ms": self.rms_frame_ms,
            "long_frame_ms": self.long_frame_ms,
            "low_energy_coefficient": self.low_energy_coefficient,
            "upper_music_threshold": self.upper_music_threshold,
            "min_segment_seconds": self.min_segment_seconds,
            "grow_before_seconds": self.grow_before_seconds,
            "grow_after_seconds": self.grow_after_seconds,
            "smoothing_radius": self.smoothing_radius,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return SegmenterConfig(**values)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.

    Returns:
        Settings instance with values from environment.
    """
    return Settings()
