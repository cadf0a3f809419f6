"""Test fixtures for segmentation tests.

This module provides utilities for generating synthetic programmes in
memory. No binary files are committed; fixtures are generated
programmatically.

Two kinds of one-second blocks are used:
- "music": a steady sine tone. Every 20 ms frame carries roughly the same
  energy, so no frame falls below the low-energy threshold (MLER 0).
- "speech": a burst of white noise over the first 200 ms followed by
  silence. Most frames fall below the threshold (MLER 0.8).
"""

import io

import numpy as np
import soundfile as sf


SAMPLE_RATE = 16000


def tone_samples(
    duration_sec: float = 1.0,
    sample_rate: int = SAMPLE_RATE,
    frequency: float = 440.0,
    amplitude: float = 0.5,
) -> np.ndarray:
    """Generate a steady sine tone.

    Args:
        duration_sec: Duration in seconds.
        sample_rate: Sample rate in Hz.
        frequency: Tone frequency in Hz.
        amplitude: Peak amplitude.

    Returns:
        1-D float32 array.
    """
    num_samples = int(sample_rate * duration_sec)
    t = np.arange(num_samples, dtype=np.float64) / sample_rate
    return (amplitude * np.sin(2 * np.pi * frequency * t)).astype(np.float32)


def burst_samples(
    duration_sec: float = 1.0,
    sample_rate: int = SAMPLE_RATE,
    burst_sec: float = 0.2,
    amplitude: float = 0.5,
    seed: int = 42,
) -> np.ndarray:
    """Generate a noise burst followed by silence.

    Args:
        duration_sec: Duration in seconds.
        sample_rate: Sample rate in Hz.
        burst_sec: Length of the noise burst at the start.
        amplitude: Noise amplitude.
        seed: Random seed for reproducibility.

    Returns:
        1-D float32 array.
    """
    rng = np.random.default_rng(seed)
    num_samples = int(sample_rate * duration_sec)
    burst = int(sample_rate * burst_sec)
    signal = np.zeros(num_samples, dtype=np.float32)
    signal[:burst] = (amplitude * rng.uniform(-1, 1, burst)).astype(np.float32)
    return signal


def programme_samples(
    pattern: list[tuple[str, int]],
    sample_rate: int = SAMPLE_RATE,
) -> np.ndarray:
    """Build a programme from ("music" | "speech" | "silence", seconds) parts.

    Args:
        pattern: Ordered parts, e.g. [("music", 20), ("speech", 30)].
        sample_rate: Sample rate in Hz.

    Returns:
        1-D float32 array.
    """
    blocks = []
    for kind, seconds in pattern:
        for _ in range(seconds):
            if kind == "music":
                blocks.append(tone_samples(1.0, sample_rate))
            elif kind == "speech":
                blocks.append(burst_samples(1.0, sample_rate))
            elif kind == "silence":
                blocks.append(np.zeros(sample_rate, dtype=np.float32))
            else:
                raise ValueError(f"Unknown block kind: {kind}")
    if not blocks:
        return np.zeros(0, dtype=np.float32)
    return np.concatenate(blocks)


def to_wav_bytes(
    signal: np.ndarray,
    sample_rate: int = SAMPLE_RATE,
) -> bytes:
    """Encode samples as a float WAV file.

    Args:
        signal: Array of shape (samples,) or (samples, channels).
        sample_rate: Sample rate in Hz.

    Returns:
        WAV file as bytes.
    """
    buffer = io.BytesIO()
    sf.write(buffer, signal, sample_rate, format="WAV", subtype="FLOAT")
    buffer.seek(0)
    return buffer.read()
