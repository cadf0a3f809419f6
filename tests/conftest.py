"""Pytest configuration and fixtures for the test suite."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Ensure project root is in path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from segmentation.config import SegmenterConfig
from tests.fixtures import SAMPLE_RATE, programme_samples, to_wav_bytes


@pytest.fixture
def config() -> SegmenterConfig:
    """Default segmentation config."""
    return SegmenterConfig()


@pytest.fixture
def music_then_speech() -> tuple[np.ndarray, int]:
    """20 seconds of music followed by 30 seconds of speech.

    Returns:
        Tuple of (samples, sample_rate).
    """
    return programme_samples([("music", 20), ("speech", 30)]), SAMPLE_RATE


@pytest.fixture
def speech_music_speech() -> tuple[np.ndarray, int]:
    """30 s speech, 20 s music, 30 s speech.

    Returns:
        Tuple of (samples, sample_rate).
    """
    return programme_samples([("speech", 30), ("music", 20), ("speech", 30)]), SAMPLE_RATE


@pytest.fixture
def wav_file(tmp_path, music_then_speech) -> Path:
    """Write the music-then-speech programme to a WAV file."""
    samples, sample_rate = music_then_speech
    path = tmp_path / "episode.wav"
    path.write_bytes(to_wav_bytes(samples, sample_rate))
    return path
