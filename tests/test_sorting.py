"""
Tests for the five sorting drivers.

Cross-driver properties run against every driver and every sample
input; exact frame sequences are pinned for small inputs.
"""

import random
import sys
from collections import deque

import pytest

from algorithms import InvalidInputError, load_driver
from algorithms.frame import NO_LINE, HighlightKind


class Tagged(float):
    """A float that remembers where it started, for stability checks."""

    def __new__(cls, value, tag):
        obj = super().__new__(cls, value)
        obj.tag = tag
        return obj


# ============= Cross-driver properties =============


class TestSortingProperties:
    """Invariants every sorting driver must honour."""

    def test_final_frame_is_sorted(self, sort_slug, sample_input, run_frames):
        frames = run_frames(sort_slug, sample_input)
        assert frames[-1].array == sorted(sample_input)

    def test_classic_example(self, sort_slug, run_frames):
        frames = run_frames(sort_slug, [64, 34, 25, 12, 22, 11, 90])
        assert frames[-1].array == [11, 12, 22, 25, 34, 64, 90]

    def test_array_length_never_changes(self, sort_slug, sample_input, run_frames):
        for frame in run_frames(sort_slug, sample_input):
            assert len(frame.array) == len(sample_input)

    def test_banners_bracket_the_run(self, sort_slug, sample_input, run_frames):
        frames = run_frames(sort_slug, sample_input)
        assert len(frames) >= 2
        assert frames[0].is_banner()
        assert frames[-1].is_banner()
        assert frames[-1].is_final
        assert not any(f.is_final for f in frames[:-1])

    def test_highlights_within_bounds(self, sort_slug, sample_input, run_frames):
        n = len(sample_input)
        for frame in run_frames(sort_slug, sample_input):
            for pos in frame.highlights.positions():
                assert 0 <= pos < n

    def test_pairs_are_distinct(self, sort_slug, sample_input, run_frames):
        for frame in run_frames(sort_slug, sample_input):
            for pair in (frame.highlights.compared, frame.highlights.swapped):
                if pair is not None:
                    assert pair[0] != pair[1]

    def test_step_numbers_are_sequential(self, sort_slug, sample_input, run_frames):
        frames = run_frames(sort_slug, sample_input)
        assert [f.step_number for f in frames] == list(range(len(frames)))

    def test_deterministic(self, sort_slug, sample_input, run_frames):
        assert run_frames(sort_slug, sample_input) == run_frames(sort_slug, sample_input)

    def test_input_is_not_mutated(self, sort_slug, run_frames):
        data = [5, 4, 3, 2, 1]
        run_frames(sort_slug, data)
        assert data == [5, 4, 3, 2, 1]

    def test_accepts_tuples(self, sort_slug, run_frames):
        frames = run_frames(sort_slug, (3, 1, 2))
        assert frames[-1].array == [1, 2, 3]

    def test_counters_are_monotonic(self, sort_slug, run_frames):
        frames = run_frames(sort_slug, [7, 3, 9, 1, 5, 3])
        for prev, cur in zip(frames, frames[1:]):
            for name, value in cur.counters.items():
                assert value >= prev.counters[name]

    def test_random_inputs(self, sort_slug, run_frames):
        rng = random.Random(1234)
        for _ in range(20):
            data = [rng.randint(-50, 50) for _ in range(rng.randint(0, 25))]
            assert run_frames(sort_slug, data)[-1].array == sorted(data)

    def test_restartable(self, sort_slug):
        driver = load_driver(sort_slug)
        first = list(driver([4, 2, 3]))
        second = list(driver([4, 2, 3]))
        assert first == second


# ============= Degenerate inputs =============


class TestDegenerateInputs:

    def test_empty_gives_only_banners(self, sort_slug, run_frames):
        frames = run_frames(sort_slug, [])
        assert len(frames) == 2
        assert frames[0].array == [] and frames[1].array == []

    def test_singleton_gives_only_banners(self, sort_slug, run_frames):
        frames = run_frames(sort_slug, [42])
        assert len(frames) == 2
        assert frames[-1].array == [42]
        assert not any(f.highlights.kind is HighlightKind.SWAPPED for f in frames)

    @pytest.mark.parametrize("bad", [
        "3,1,2",
        None,
        42,
        {"array": [1, 2]},
        [1, "two", 3],
        [1, None],
        [True, False],
    ])
    def test_invalid_input_raises_at_call(self, sort_slug, bad):
        with pytest.raises(InvalidInputError):
            load_driver(sort_slug)(bad)


# ============= Bubble sort =============


class TestBubbleSort:

    def test_frame_sequence_for_pair(self, run_frames):
        frames = run_frames("bubble-sort", [2, 1])
        assert [f.pc_line for f in frames] == [NO_LINE, 3, 4, NO_LINE]
        assert frames[1].highlights.compared == (0, 1)
        assert frames[2].highlights.swapped == (0, 1)
        assert frames[2].array == [1, 2]
        assert frames[1].explain == "Comparing 2 with 1"
        assert frames[0].explain == "Starting Bubble Sort"
        assert frames[-1].explain == "Bubble Sort completed!"

    def test_sorted_input_has_no_swaps(self, run_frames):
        frames = run_frames("bubble-sort", [1, 2, 3, 4])
        assert not any(f.highlights.kind is HighlightKind.SWAPPED for f in frames)
        assert frames[-1].counters["comparisons"] == 6

    def test_counts_on_reversed(self, run_frames):
        last = run_frames("bubble-sort", [3, 2, 1])[-1]
        assert last.counters == {"comparisons": 3, "swaps": 3, "writes": 0}


# ============= Selection sort =============


class TestSelectionSort:

    def test_frame_sequence(self, run_frames):
        frames = run_frames("selection-sort", [3, 1, 2])
        assert [f.pc_line for f in frames] == [NO_LINE, 2, 4, 5, 4, 6, 2, 4, 5, 6, NO_LINE]
        assert frames[2].highlights.compared == (0, 1)
        assert frames[3].highlights.indices == (1,)
        assert frames[5].highlights.swapped == (0, 1)
        assert frames[5].array == [1, 3, 2]

    def test_no_swap_when_minimum_in_place(self, run_frames):
        frames = run_frames("selection-sort", [1, 2, 3])
        assert not any(f.pc_line == 6 for f in frames)


# ============= Insertion sort =============


class TestInsertionSort:

    def test_frame_sequence(self, run_frames):
        frames = run_frames("insertion-sort", [2, 1])
        assert [f.pc_line for f in frames] == [NO_LINE, 2, 4, 5, 7, NO_LINE]
        assert frames[1].highlights.indices == (1,)
        assert frames[2].highlights.compared == (0, 1)
        assert frames[3].array == [2, 2]
        assert frames[4].highlights.indices == (0,)
        assert frames[4].array == [1, 2]

    def test_counts_on_reversed(self, run_frames):
        last = run_frames("insertion-sort", [3, 2, 1])[-1]
        assert last.counters == {"comparisons": 3, "swaps": 0, "writes": 5}

    def test_never_swaps(self, run_frames):
        frames = run_frames("insertion-sort", [5, 1, 4, 2, 3])
        assert not any(f.highlights.kind is HighlightKind.SWAPPED for f in frames)


# ============= Merge sort =============


class TestMergeSort:

    def test_frame_sequence_for_pair(self, run_frames):
        frames = run_frames("merge-sort", [2, 1])
        assert [f.pc_line for f in frames] == [NO_LINE, 2, 5, 8, 9, NO_LINE]
        assert frames[1].highlights.indices == (0, 0, 1)
        assert frames[2].highlights.indices == (0, 1)
        assert frames[3].array == [1, 1]
        assert frames[4].array == [1, 2]

    def test_stable_on_equal_keys(self, run_frames):
        data = [Tagged(v, i) for i, v in enumerate([3, 1, 3, 2, 1, 3, 2])]
        final = run_frames("merge-sort", data)[-1].array

        assert final == sorted(data)
        for value in (1, 2, 3):
            tags = [x.tag for x in final if x == value]
            assert tags == sorted(tags)

    def test_counts(self, run_frames):
        last = run_frames("merge-sort", [2, 1])[-1]
        assert last.counters == {"comparisons": 1, "swaps": 0, "writes": 2}


# ============= Quick sort =============


class TestQuickSort:

    def test_frame_sequence(self, run_frames):
        frames = run_frames("quick-sort", [3, 1, 2])
        assert [f.pc_line for f in frames] == [NO_LINE, 6, 8, 8, 9, 10, 2, NO_LINE]
        assert frames[1].highlights.pivot == 2
        assert frames[2].highlights.compared == (0, 2)
        assert frames[2].highlights.pivot == 2
        assert frames[4].highlights.swapped == (0, 1)
        assert frames[5].highlights.swapped == (1, 2)
        assert frames[6].highlights.kind is HighlightKind.PIVOT
        assert frames[6].explain == "Pivot 2 placed at position 1"

    def test_partition_invariant(self, run_frames):
        rng = random.Random(7)
        for _ in range(15):
            data = [rng.randint(0, 20) for _ in range(rng.randint(2, 18))]
            for frame in run_frames("quick-sort", data):
                if frame.pc_line != 2:
                    continue
                p = frame.highlights.pivot
                value = frame.array[p]
                assert all(x <= value for x in frame.array[:p])
                assert all(x >= value for x in frame.array[p + 1:])

    def test_self_swap_is_shown_as_indices(self, run_frames):
        # 1 < pivot 5 at j == i: no distinct pair to swap
        frames = run_frames("quick-sort", [1, 5])
        nine = [f for f in frames if f.pc_line == 9]
        assert len(nine) == 1
        assert nine[0].highlights.kind is HighlightKind.INDICES
        assert nine[0].highlights.pivot == 1

        # pivot already at i + 1 == high: no pivot swap either
        ten = [f for f in frames if f.pc_line == 10]
        assert len(ten) == 1
        assert ten[0].highlights.kind is HighlightKind.INDICES
        assert ten[0].highlights.indices == (1,)
        assert ten[0].explain == "Pivot 5 is already in final position 1"
        assert frames[-1].counters["swaps"] == 0

    @pytest.mark.slow
    def test_sorted_input_deeper_than_recursion_limit(self):
        data = list(range(sys.getrecursionlimit() + 100))
        last = deque(load_driver("quick-sort")(data), maxlen=1)[0]
        assert last.is_final
        assert last.array == data
