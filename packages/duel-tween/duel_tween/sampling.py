"""Pure sampling functions: ``(tween, now) -> value``.

Nothing here keeps state between calls, so a skipped frame only changes
which instant gets sampled, never the result for that instant.
"""
from __future__ import annotations

from duel_tween.components import Tween
from duel_tween.easing import EASINGS


def elapsed(tween: Tween, now: float) -> float:
    return max(0.0, now - tween.start_ms)


def progress(tween: Tween, now: float) -> float:
    """Linear progress in [0, 1]. A zero-length tween is always complete."""
    if tween.duration_ms <= 0:
        return 1.0
    t = (now - tween.start_ms) / tween.duration_ms
    return min(max(t, 0.0), 1.0)


def is_done(tween: Tween, now: float) -> bool:
    return now - tween.start_ms >= tween.duration_ms


def sample(tween: Tween, now: float, start_val: float, end_val: float) -> float:
    """Eased interpolation from start_val to end_val; exact at both ends."""
    t = progress(tween, now)
    if t >= 1.0:
        return end_val
    easing_fn = EASINGS.get(tween.easing)
    if easing_fn is None:
        raise KeyError(f"unknown easing {tween.easing!r}")
    return start_val + (end_val - start_val) * easing_fn(t)


def blink(elapsed_ms: float, interval_ms: float) -> bool:
    """On for the first ``interval_ms`` of every ``2 * interval_ms`` cycle."""
    if interval_ms <= 0:
        return True
    return elapsed_ms % (2 * interval_ms) < interval_ms
