"""duel - Wall-clock tick engine for the battle clock."""

from duel.clock import Clock, ManualTime, MonotonicTime
from duel.engine import Engine
from duel.types import System, TickContext, TimeSource

__all__ = [
    "Engine",
    "Clock",
    "ManualTime",
    "MonotonicTime",
    "System",
    "TickContext",
    "TimeSource",
]
