"""Shared type aliases and protocols for the duel engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    now_ms: float
    dt_ms: float
    wall: datetime
    request_stop: Callable[[], None]
    random: _random.Random


@runtime_checkable
class TimeSource(Protocol):
    """Supplies monotonic milliseconds and local wall-clock time."""

    def now_ms(self) -> float:
        ...

    def wall(self) -> datetime:
        ...


System = Callable[[TickContext], None]
