"""Tests for segmentation.classify (MLER thresholding)."""

import torch

from segmentation.classify import classify_windows
from segmentation.config import SegmenterConfig


class TestClassifyWindows:
    """Tests for classify_windows."""

    def test_default_threshold(self):
        """Only windows with MLER <= 0 are music by default."""
        mler = torch.tensor([0.0, 0.01, 0.5, 0.8], dtype=torch.float64)
        assert classify_windows(mler, SegmenterConfig()) == [True, False, False, False]

    def test_threshold_is_inclusive(self):
        """A window exactly at the threshold is music."""
        config = SegmenterConfig(upper_music_threshold=0.1)
        mler = torch.tensor([0.1, 0.1000001], dtype=torch.float64)
        assert classify_windows(mler, config) == [True, False]

    def test_matches_rule_exactly(self):
        """is_music == (mler <= threshold) for every window."""
        config = SegmenterConfig(upper_music_threshold=0.25)
        mler = torch.linspace(0, 1, 41, dtype=torch.float64)

        labels = classify_windows(mler, config)

        assert labels == [float(m) <= 0.25 for m in mler]

    def test_returns_plain_bools(self):
        """Labels are Python bools, not tensors."""
        labels = classify_windows(torch.tensor([0.0, 1.0]), SegmenterConfig())
        assert all(type(label) is bool for label in labels)

    def test_empty(self):
        """No windows gives no labels."""
        assert classify_windows(torch.zeros(0), SegmenterConfig()) == []
