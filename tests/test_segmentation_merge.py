"""Tests for segmentation.merge (run detection, absorption, growth)."""

import random

import pytest

from segmentation.config import SegmenterConfig
from segmentation.merge import (
    absorb_short_runs,
    detect_runs,
    grow_boundaries,
    merge_labels_to_segments,
)
from segmentation.schema import Segment
from segmentation.smooth import smooth_labels


T, F = True, False


def bounds(segments: list[Segment]) -> list[tuple[int, int, bool]]:
    """Helper to compare segments as tuples."""
    return [(s.start_second, s.end_second, s.is_music) for s in segments]


def labels_from(*parts: tuple[bool, int]) -> list[bool]:
    """Helper to build a label sequence from (label, count) parts."""
    labels: list[bool] = []
    for label, count in parts:
        labels.extend([label] * count)
    return labels


class TestDetectRuns:
    """Tests for detect_runs."""

    def test_coalesces_equal_labels(self):
        """Consecutive equal labels form one run with inclusive bounds."""
        runs = detect_runs(labels_from((T, 3), (F, 4), (T, 2)))
        assert bounds(runs) == [(0, 2, T), (3, 6, F), (7, 8, T)]

    def test_first_run_forced_music(self):
        """The opening run is music whatever its label."""
        runs = detect_runs(labels_from((F, 5), (T, 5)))
        assert bounds(runs) == [(0, 4, T), (5, 9, T)]

    def test_single_run(self):
        """A uniform sequence is one run."""
        assert bounds(detect_runs([F] * 6)) == [(0, 5, T)]

    def test_empty(self):
        """No labels give no runs."""
        assert detect_runs([]) == []


class TestAbsorbShortRuns:
    """Tests for absorb_short_runs."""

    def test_short_run_absorbed_regardless_of_label(self, config):
        """A run under the minimum extends the previous segment."""
        runs = [Segment(0, 19, T), Segment(20, 24, F), Segment(25, 49, T)]
        merged = absorb_short_runs(runs, has_intro=False, config=config)
        assert bounds(merged) == [(0, 49, T)]

    def test_same_label_extends(self, config):
        """A long run with the previous label extends it."""
        runs = [Segment(0, 9, T), Segment(10, 29, T)]
        assert bounds(absorb_short_runs(runs, False, config)) == [(0, 29, T)]

    def test_different_label_starts_new_segment(self, config):
        """A long run with a new label opens a segment."""
        runs = [Segment(0, 19, T), Segment(20, 49, F)]
        assert bounds(absorb_short_runs(runs, False, config)) == [(0, 19, T), (20, 49, F)]

    def test_length_is_inclusive(self, config):
        """A run of exactly min_segment_seconds windows is kept."""
        runs = [Segment(0, 19, T), Segment(20, 29, F), Segment(30, 38, T)]
        merged = absorb_short_runs(runs, False, config)
        assert bounds(merged) == [(0, 19, T), (20, 38, F)]

    def test_short_first_run_kept(self, config):
        """The first run always opens the output, even when short."""
        runs = [Segment(0, 2, T), Segment(3, 40, F)]
        assert bounds(absorb_short_runs(runs, False, config)) == [(0, 2, T), (3, 40, F)]

    def test_intro_forces_first_segment_speech(self, config):
        """With an intro the first segment is speech."""
        runs = [Segment(0, 19, T), Segment(20, 49, F)]
        assert bounds(absorb_short_runs(runs, True, config)) == [(0, 49, F)]

    def test_runs_not_modified(self, config):
        """Input runs are left untouched."""
        runs = [Segment(0, 19, T), Segment(20, 24, F)]
        absorb_short_runs(runs, False, config)
        assert bounds(runs) == [(0, 19, T), (20, 24, F)]

    def test_custom_minimum(self):
        """The minimum length is configurable."""
        config = SegmenterConfig(min_segment_seconds=3)
        runs = [Segment(0, 2, T), Segment(3, 5, F), Segment(6, 7, T)]
        assert bounds(absorb_short_runs(runs, False, config)) == [(0, 2, T), (3, 7, F)]


class TestGrowBoundaries:
    """Tests for grow_boundaries."""

    def test_two_segment_example(self, config):
        """First segment moves its start back, speech shrinks on both sides."""
        segments = [Segment(0, 5, T), Segment(5, 10, F)]
        grown = grow_boundaries(segments, has_intro=False, config=config)
        assert bounds(grown) == [(-3, 5, T), (8, 7, F)]

    def test_inverted_segment_allowed(self, config):
        """Aggressive shrinkage may leave end < start."""
        grown = grow_boundaries([Segment(0, 5, T), Segment(5, 10, F)], False, config)
        assert grown[1].end_second < grown[1].start_second

    def test_intro_grows_first_end(self, config):
        """With an intro the first segment's end moves out."""
        grown = grow_boundaries([Segment(0, 19, F), Segment(20, 49, T)], True, config)
        assert bounds(grown) == [(0, 22, F), (17, 52, T)]

    def test_music_grows_speech_shrinks(self, config):
        """Later music segments grow, later speech segments shrink."""
        segments = [Segment(0, 9, T), Segment(10, 39, F), Segment(40, 59, T), Segment(60, 99, F)]
        grown = grow_boundaries(segments, False, config)
        assert bounds(grown) == [(-3, 9, T), (13, 36, F), (37, 62, T), (63, 96, F)]

    def test_asymmetric_amounts(self):
        """Before and after amounts apply independently."""
        config = SegmenterConfig(grow_before_seconds=1, grow_after_seconds=5)
        segments = [Segment(0, 9, T), Segment(10, 39, F), Segment(40, 59, T)]
        grown = grow_boundaries(segments, False, config)
        assert bounds(grown) == [(-1, 9, T), (11, 34, F), (39, 64, T)]

    def test_input_not_modified(self, config):
        """Growth returns new segments."""
        segments = [Segment(0, 5, T), Segment(5, 10, F)]
        grow_boundaries(segments, False, config)
        assert bounds(segments) == [(0, 5, T), (5, 10, F)]


class TestMergeLabelsToSegments:
    """Tests for the full merge step."""

    def test_ten_second_example_absorbs_music(self, config):
        """speech 3 s / music 4 s / speech 3 s collapses to one segment."""
        labels = smooth_labels(labels_from((F, 3), (T, 4), (F, 3)), config)
        runs = detect_runs(labels)
        merged = absorb_short_runs(runs, has_intro=False, config=config)

        assert len(merged) == 1
        assert (merged[0].start_second, merged[0].end_second) == (0, 9)
        # The first run is forced to music and absorbs the short speech tail
        assert merged[0].is_music is True

    def test_ten_second_example_with_intro_is_speech(self, config):
        """With an intro the single segment is speech."""
        labels = smooth_labels(labels_from((F, 3), (T, 4), (F, 3)), config)
        segments = merge_labels_to_segments(labels, has_intro=True, config=config)

        assert bounds(segments) == [(0, 12, F)]

    def test_music_then_speech(self, config):
        """Two long runs give two grown segments."""
        segments = merge_labels_to_segments(labels_from((T, 20), (F, 30)), False, config)
        assert bounds(segments) == [(-3, 19, T), (23, 46, F)]

    def test_empty(self, config):
        """No labels give no segments."""
        assert merge_labels_to_segments([], False, config) == []

    @pytest.mark.parametrize("seed", range(20))
    def test_invariants_on_random_sequences(self, config, seed):
        """Merged segments are ordered, contiguous and cover every window."""
        rng = random.Random(seed)
        n = rng.randint(1, 300)
        labels = []
        while len(labels) < n:
            labels.extend([rng.random() < 0.5] * rng.randint(1, 25))
        labels = labels[:n]

        runs = detect_runs(labels)
        merged = absorb_short_runs(runs, has_intro=bool(seed % 2), config=config)

        assert merged[0].start_second == 0
        assert merged[-1].end_second == n - 1
        for segment in merged:
            assert segment.end_second >= segment.start_second
        for previous, current in zip(merged, merged[1:]):
            assert current.start_second == previous.end_second + 1

        # No run after the first survives on its own when it is short
        starts = {segment.start_second for segment in merged}
        for run in runs[1:]:
            if run.length_seconds < config.min_segment_seconds:
                assert run.start_second not in starts

        grown = merge_labels_to_segments(labels, bool(seed % 2), config)
        assert [s.is_music for s in grown] == [s.is_music for s in merged]
