"""Easing curves, looked up by name from a Tween."""
from __future__ import annotations

import math
from typing import Callable


def linear(t: float) -> float:
    return t


def half_sine(t: float) -> float:
    """Out and back: 0 at both ends, 1 at the midpoint.

    Not monotone, so ``sample`` (which snaps to the end value at expiry)
    is the wrong reader for it. Call it on ``progress`` directly.
    """
    return math.sin(math.pi * t)


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "half_sine": half_sine,
}
