"""Tests for segmentation.smooth (majority smoothing)."""

import pytest

from segmentation.config import SegmenterConfig
from segmentation.smooth import smooth_labels


T, F = True, False


class TestForcedEdges:
    """Tests for the fixed first and last windows."""

    def test_first_three_forced_music(self, config):
        """The opening windows are always music."""
        result = smooth_labels([F] * 12, config)
        assert result[:3] == [T, T, T]

    def test_last_three_forced_speech(self, config):
        """The closing windows are always speech."""
        result = smooth_labels([T] * 12, config)
        assert result[-3:] == [F, F, F]

    def test_radius_controls_edges(self):
        """The number of forced windows follows the radius."""
        config = SegmenterConfig(smoothing_radius=2)
        result = smooth_labels([F] * 10, config)
        assert result[:2] == [T, T]
        assert result[2] is F
        assert result[-2:] == [F, F]


class TestUniformSequences:
    """Uniform sequences are unchanged in the interior."""

    @pytest.mark.parametrize("value", [True, False])
    def test_uniform_interior_unchanged(self, config, value):
        """All-music or all-speech stays that way between the edges."""
        labels = [value] * 30
        result = smooth_labels(labels, config)
        assert result[3:-3] == labels[3:-3]


class TestMajorityVote:
    """Tests for the 7-window vote."""

    def test_four_of_seven_is_music(self, config):
        """Four music votes out of seven make music."""
        labels = [T, T, T, T, F, F, F]
        assert smooth_labels(labels, config)[3] is True

    def test_three_of_seven_is_speech(self, config):
        """Three music votes out of seven make speech."""
        labels = [T, T, T, F, F, F, F]
        assert smooth_labels(labels, config)[3] is False

    def test_single_flip_removed(self, config):
        """An isolated speech window inside music becomes music."""
        labels = [T] * 20
        labels[10] = F
        result = smooth_labels(labels, config)
        assert result[10] is True

    def test_single_music_blip_removed(self, config):
        """An isolated music window inside speech becomes speech."""
        labels = [F] * 20
        labels[10] = T
        result = smooth_labels(labels, config)
        assert all(value is False for value in result[3:-3])

    def test_votes_use_original_labels(self, config):
        """Each vote reads the unsmoothed sequence, not earlier outputs."""
        labels = [F, F, F, T, T, T, F, F, F, F]
        result = smooth_labels(labels, config)
        # index 3 window [0..6]: three music votes -> speech
        assert result[3] is False
        # index 4 window [1..7]: three music votes -> speech
        assert result[4] is False

    def test_boundary_between_long_runs_kept(self, config):
        """A clean transition between long runs stays in place."""
        labels = [T] * 20 + [F] * 30
        result = smooth_labels(labels, config)
        assert result == labels[:-3] + [F, F, F]

    def test_radius_zero_is_identity(self):
        """Radius 0 leaves every label untouched."""
        config = SegmenterConfig(smoothing_radius=0)
        labels = [T, F, T, T, F]
        assert smooth_labels(labels, config) == labels


class TestSmoothingEdgeCases:
    """Edge-case handling."""

    def test_empty(self, config):
        """Empty input gives empty output."""
        assert smooth_labels([], config) == []

    def test_input_not_modified(self, config):
        """The input list is left untouched."""
        labels = [F] * 10
        smooth_labels(labels, config)
        assert labels == [F] * 10

    def test_short_sequence_trailing_edge_wins(self, config):
        """When edges overlap, the closing speech edge takes precedence."""
        assert smooth_labels([T, T, T, T], config) == [T, F, F, F]
        assert smooth_labels([T], config) == [F]

    def test_exactly_seven(self, config):
        """Seven windows leave a single interior window."""
        result = smooth_labels([F, F, F, T, F, F, F], config)
        assert result == [T, T, T, F, F, F, F]
