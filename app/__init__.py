"""Runtime settings and logging for the segmentation tools."""

from .config import Settings, get_settings
from .logging import StructuredFormatter, run_context, setup_logging


__all__ = [
    "Settings",
    "get_settings",
    "StructuredFormatter",
    "run_context",
    "setup_logging",
]
