"""Tests for easing curves."""

import math

import pytest

from duel_tween import EASINGS
from duel_tween.easing import half_sine, linear


def test_registry_names():
    assert EASINGS == {"linear": linear, "half_sine": half_sine}


class TestLinear:
    @pytest.mark.parametrize("t", [0.0, 0.25, 0.5, 1.0])
    def test_identity(self, t):
        assert linear(t) == t


class TestHalfSine:
    """The lunge curve goes out and comes back."""

    def test_zero_at_both_ends(self):
        assert half_sine(0.0) == 0.0
        assert half_sine(1.0) == pytest.approx(0.0, abs=1e-12)

    def test_peaks_at_half(self):
        assert half_sine(0.5) == pytest.approx(1.0)
        assert half_sine(0.25) == pytest.approx(half_sine(0.75))
        assert half_sine(0.25) < half_sine(0.5)

    def test_quarter_value(self):
        assert half_sine(0.25) == pytest.approx(math.sqrt(2) / 2)
