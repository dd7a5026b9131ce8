"""Tween component."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tween:
    """A countdown anchored at ``start_ms``. Progress is sampled, never stepped."""

    start_ms: float
    duration_ms: float
    easing: str = "linear"

    def __post_init__(self) -> None:
        if self.duration_ms < 0:
            raise ValueError("duration_ms must be non-negative")

    @property
    def end_ms(self) -> float:
        return self.start_ms + self.duration_ms
