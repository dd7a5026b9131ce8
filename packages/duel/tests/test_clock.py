"""Tests for time sources, clock advancement and TickContext generation."""

import random
from datetime import datetime

import pytest
from duel.clock import Clock, ManualTime, MonotonicTime
from duel.types import TickContext, TimeSource

_test_rng = random.Random(0)


def test_clock_initialization():
    """Clock starts at tick 0 with frame length 1000 / fps."""
    clock = Clock(fps=20, source=ManualTime())
    assert clock.fps == 20
    assert clock.tick_number == 0
    assert abs(clock.frame_ms - 50.0) < 1e-9


def test_clock_rejects_non_positive_fps():
    with pytest.raises(ValueError):
        Clock(fps=0)
    with pytest.raises(ValueError):
        Clock(fps=-5)


def test_advance_returns_new_tick_number():
    clock = Clock(fps=20, source=ManualTime())
    assert clock.advance() == 1
    assert clock.advance() == 2
    assert clock.tick_number == 2


def test_context_samples_time_source():
    """context() reads now_ms and wall from the source at call time."""
    source = ManualTime(start_ms=1000.0, wall=datetime(2024, 5, 6, 7, 8))
    clock = Clock(fps=30, source=source)
    clock.advance()

    stop_called = []
    rng = random.Random(0)
    ctx = clock.context(lambda: stop_called.append(True), rng)

    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 1
    assert ctx.now_ms == 1000.0
    assert ctx.wall == datetime(2024, 5, 6, 7, 8)
    assert ctx.random is rng

    ctx.request_stop()
    assert stop_called == [True]


def test_dt_is_time_since_previous_context():
    source = ManualTime()
    clock = Clock(fps=30, source=source)

    first = clock.context(lambda: None, _test_rng)
    assert first.dt_ms == 0.0

    source.advance(33.0)
    second = clock.context(lambda: None, _test_rng)
    assert second.dt_ms == 33.0

    source.advance(120.0)
    third = clock.context(lambda: None, _test_rng)
    assert third.dt_ms == 120.0


def test_reset_clears_tick_and_dt():
    source = ManualTime()
    clock = Clock(fps=30, source=source)
    clock.advance()
    clock.context(lambda: None, _test_rng)
    source.advance(500.0)

    clock.reset()
    assert clock.tick_number == 0
    assert clock.context(lambda: None, _test_rng).dt_ms == 0.0


def test_context_is_frozen():
    clock = Clock(fps=30, source=ManualTime())
    ctx = clock.context(lambda: None, _test_rng)
    with pytest.raises(AttributeError):
        ctx.now_ms = 5.0  # type: ignore[misc]


class TestManualTime:
    def test_advance_and_set(self):
        source = ManualTime(start_ms=10.0)
        assert source.now_ms() == 10.0
        assert source.advance(5.0) == 15.0
        source.set(100.0)
        assert source.now_ms() == 100.0

    def test_time_never_moves_backwards(self):
        source = ManualTime(start_ms=10.0)
        with pytest.raises(ValueError):
            source.advance(-1.0)
        with pytest.raises(ValueError):
            source.set(5.0)

    def test_wall_moves_with_counter(self):
        source = ManualTime(wall=datetime(2024, 1, 1, 23, 59))
        source.advance(60_000.0)
        assert source.wall() == datetime(2024, 1, 2, 0, 0)

    def test_conforms_to_protocol(self):
        assert isinstance(ManualTime(), TimeSource)
        assert isinstance(MonotonicTime(), TimeSource)


def test_monotonic_time_never_decreases():
    source = MonotonicTime()
    samples = [source.now_ms() for _ in range(50)]
    assert samples == sorted(samples)
