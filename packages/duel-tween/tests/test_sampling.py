"""Tests for Tween sampling against elapsed time."""

import math

import pytest

from duel_tween import Tween, blink, elapsed, is_done, progress, sample


class TestProgress:
    """progress() is (now - start) / duration clamped to [0, 1]."""

    def test_before_start_is_zero(self):
        tween = Tween(start_ms=1000.0, duration_ms=500.0)
        assert progress(tween, 900.0) == 0.0

    def test_midway(self):
        tween = Tween(start_ms=1000.0, duration_ms=500.0)
        assert progress(tween, 1250.0) == 0.5

    def test_clamped_after_end(self):
        """A missed frame long after expiry still reads exactly 1."""
        tween = Tween(start_ms=1000.0, duration_ms=500.0)
        assert progress(tween, 1500.0) == 1.0
        assert progress(tween, 99_999.0) == 1.0

    def test_zero_duration_is_complete(self):
        tween = Tween(start_ms=10.0, duration_ms=0.0)
        assert progress(tween, 10.0) == 1.0
        assert is_done(tween, 10.0)

    def test_negative_duration_rejected(self):
        with pytest.raises(ValueError):
            Tween(start_ms=0.0, duration_ms=-1.0)


class TestElapsedAndDone:
    def test_elapsed_never_negative(self):
        tween = Tween(start_ms=100.0, duration_ms=50.0)
        assert elapsed(tween, 50.0) == 0.0
        assert elapsed(tween, 130.0) == 30.0

    def test_done_exactly_at_expiry(self):
        tween = Tween(start_ms=100.0, duration_ms=50.0)
        assert not is_done(tween, 149.9)
        assert is_done(tween, 150.0)
        assert tween.end_ms == 150.0


class TestSample:
    def test_linear_interpolation(self):
        tween = Tween(start_ms=0.0, duration_ms=500.0)
        assert sample(tween, 0.0, -15.0, -100.0) == -15.0
        assert sample(tween, 250.0, -15.0, -100.0) == pytest.approx(-57.5)
        assert sample(tween, 500.0, -15.0, -100.0) == -100.0

    def test_end_value_is_exact(self):
        """Expiry returns end_val itself, not an eased approximation."""
        tween = Tween(start_ms=0.0, duration_ms=3.0)
        assert sample(tween, 3.0, 0.1, 0.7) == 0.7

    def test_eased_interpolation(self):
        tween = Tween(start_ms=0.0, duration_ms=200.0, easing="half_sine")
        assert sample(tween, 50.0, 0.0, 100.0) == pytest.approx(100 * math.sqrt(2) / 2)

    def test_unknown_easing_raises(self):
        tween = Tween(start_ms=0.0, duration_ms=100.0, easing="bounce")
        with pytest.raises(KeyError):
            sample(tween, 50.0, 0.0, 1.0)


class TestBlink:
    def test_on_for_first_half_of_cycle(self):
        assert blink(0.0, 100.0)
        assert blink(99.0, 100.0)
        assert not blink(100.0, 100.0)
        assert not blink(199.0, 100.0)
        assert blink(200.0, 100.0)

    def test_non_positive_interval_is_always_on(self):
        assert blink(150.0, 0.0)
