"""Unit tests for the interval module."""

import math

import hypothesis as hyp
import numpy as np
import pytest
from hypothesis import strategies as st

from src.python.core.approx import is_equal
from src.python.core.interval import Interval

F32_MAX = float(np.finfo(np.float32).max)

finite_f32 = st.floats(allow_nan=False, allow_infinity=False, width=32)


class TestSpecialIntervals:
    """Tests for the empty and universe intervals."""

    def test_empty_bounds(self):
        interval = Interval.empty()
        assert interval.min == math.inf
        assert interval.max == -math.inf

    def test_empty_size_is_negative(self):
        size = Interval.empty().size()
        assert math.isnan(size) or size < 0.0

    def test_default_is_empty(self):
        assert Interval() == Interval.empty()

    @hyp.given(x=finite_f32)
    def test_empty_contains_nothing(self, x):
        assert not Interval.empty().contains(x)
        assert not Interval.empty().surrounds(x)

    @hyp.given(x=finite_f32)
    def test_universe_contains_every_finite_value(self, x):
        assert Interval.universe().contains(x)

    def test_universe_contains_extremes(self):
        universe = Interval.universe()
        assert universe.contains(F32_MAX)
        assert universe.contains(-F32_MAX)
        assert universe.size() == math.inf


class TestQueries:
    """Tests for contains, surrounds, clamp and size."""

    def test_contains_is_inclusive(self):
        interval = Interval(0.0, 10.0)
        assert interval.contains(0.0)
        assert interval.contains(5.0)
        assert interval.contains(10.0)
        assert not interval.contains(-1.0)
        assert not interval.contains(11.0)

    def test_surrounds_is_strict(self):
        interval = Interval(0.0, 10.0)
        assert not interval.surrounds(0.0)
        assert interval.surrounds(5.0)
        assert not interval.surrounds(10.0)
        assert not interval.surrounds(-1.0)

    def test_in_operator(self):
        assert 5.0 in Interval(0.0, 10.0)
        assert 11.0 not in Interval(0.0, 10.0)

    def test_clamp(self):
        interval = Interval(0.0, 10.0)
        assert is_equal(interval.clamp(-5.0), 0.0)
        assert is_equal(interval.clamp(5.0), 5.0)
        assert is_equal(interval.clamp(15.0), 10.0)

    def test_clamp_against_empty_does_not_raise(self):
        assert Interval.empty().clamp(3.0) == math.inf

    def test_size(self):
        assert Interval(-2.0, 3.0).size() == 5.0

    def test_size_overflow_is_infinite(self):
        assert Interval(-F32_MAX, F32_MAX).size() == math.inf

    def test_nan_compares_false(self):
        nan = float("nan")
        interval = Interval(0.0, 10.0)
        assert not interval.contains(nan)
        assert not interval.surrounds(nan)
        assert not Interval.universe().contains(nan)
        assert math.isnan(interval.clamp(nan))

    def test_nan_bound_contains_nothing(self):
        interval = Interval(float("nan"), 10.0)
        assert not interval.contains(5.0)
        assert math.isnan(interval.size())

    def test_bounds_are_single_precision(self):
        interval = Interval(0.1, 0.2)
        assert interval.min == float(np.float32(0.1))


class TestConversions:
    """Tests for closed-range conversions and value semantics."""

    def test_from_range(self):
        interval = Interval.from_range((0.0, 10.0))
        assert is_equal(interval.min, 0.0)
        assert is_equal(interval.max, 10.0)

    def test_to_range(self):
        assert Interval(1.0, 2.0).to_range() == (1.0, 2.0)

    def test_round_trip(self):
        interval = Interval(-3.5, 7.25)
        assert Interval.from_range(interval.to_range()) == interval

    def test_frozen(self):
        interval = Interval(0.0, 1.0)
        with pytest.raises(AttributeError):
            interval.min = 5.0
