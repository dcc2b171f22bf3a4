"""
Tests for the input array generators and the custom-input parser.
"""

import pytest

from datasets import DISTRIBUTIONS, make_array, parse_custom_input


class TestMakeArray:

    @pytest.mark.parametrize("distribution", sorted(DISTRIBUTIONS))
    def test_length_and_range(self, distribution):
        arr = make_array(distribution, n=30, lo=10, hi=60, seed=3)
        assert len(arr) == 30
        assert all(10 <= x <= 60 for x in arr)
        assert all(isinstance(x, int) for x in arr)

    @pytest.mark.parametrize("distribution", sorted(DISTRIBUTIONS))
    def test_seed_is_reproducible(self, distribution):
        assert make_array(distribution, n=20, seed=11) == make_array(distribution, n=20, seed=11)

    def test_sorted_variants(self):
        assert make_array("sorted_inc", n=25, seed=1) == sorted(make_array("sorted_inc", n=25, seed=1))
        dec = make_array("sorted_dec", n=25, seed=1)
        assert dec == sorted(dec, reverse=True)
        assert make_array("reversed", n=25, seed=1) == dec

    def test_few_uniques(self):
        arr = make_array("few", n=50, uniques=3, seed=5)
        assert len(set(arr)) <= 3

    def test_duplicates(self):
        assert len(set(make_array("duplicates", n=40, seed=2))) <= 2

    def test_sawtooth(self):
        arr = make_array("sawtooth", n=8, lo=0, hi=30, period=4)
        assert arr == [0, 10, 20, 30, 0, 10, 20, 30]

    def test_swapped_bounds(self):
        arr = make_array("random", n=10, lo=50, hi=5, seed=0)
        assert all(5 <= x <= 50 for x in arr)

    def test_zero_length(self):
        assert make_array("random", n=0) == []

    def test_unknown_distribution(self):
        with pytest.raises(ValueError):
            make_array("zipf", n=5)

    def test_negative_length(self):
        with pytest.raises(ValueError):
            make_array("random", n=-1)

    @pytest.mark.parametrize("uniques", [0, 1, 21, 30_000_000, True, "5"])
    def test_uniques_bounded(self, uniques):
        with pytest.raises(ValueError):
            make_array("few", n=4, uniques=uniques)

    @pytest.mark.parametrize("period", [1, 65, 10 ** 9, 4.0])
    def test_period_bounded(self, period):
        with pytest.raises(ValueError):
            make_array("sawtooth", n=4, period=period)

    def test_knob_limits_accepted(self):
        assert len(set(make_array("few", n=200, uniques=20, seed=1))) <= 20
        assert len(make_array("sawtooth", n=70, period=64)) == 70


class TestParseCustomInput:

    def test_mixed_separators(self):
        assert parse_custom_input("5, 3 8\n1,,2") == [5, 3, 8, 1, 2]

    def test_floats_and_negatives(self):
        assert parse_custom_input("-2, 3.5, 4.0") == [-2, 3.5, 4]

    def test_junk_dropped(self):
        assert parse_custom_input("1, x, nan, inf, 2") == [1, 2]

    def test_empty(self):
        assert parse_custom_input("   ") == []
