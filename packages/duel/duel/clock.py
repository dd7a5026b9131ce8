"""Time sources and the frame Clock that stamps each TickContext."""

import random
import time
from datetime import datetime, timedelta
from typing import Callable

from duel.types import TickContext, TimeSource


class MonotonicTime:
    """Real time: ``time.monotonic`` in milliseconds, local ``datetime.now``."""

    def now_ms(self) -> float:
        return time.monotonic() * 1000.0

    def wall(self) -> datetime:
        return datetime.now()


class ManualTime:
    """Deterministic time source for tests and headless replays.

    Wall-clock time moves in lockstep with the monotonic counter.
    """

    def __init__(self, start_ms: float = 0.0, wall: datetime | None = None) -> None:
        self._now = float(start_ms)
        self._wall_origin = wall if wall is not None else datetime(2024, 1, 1, 12, 0)
        self._origin_ms = self._now

    def now_ms(self) -> float:
        return self._now

    def wall(self) -> datetime:
        return self._wall_origin + timedelta(milliseconds=self._now - self._origin_ms)

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError("time cannot move backwards")
        self._now += ms
        return self._now

    def set(self, ms: float) -> None:
        if ms < self._now:
            raise ValueError("time cannot move backwards")
        self._now = float(ms)


class Clock:
    def __init__(self, fps: int, source: TimeSource | None = None) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._frame_ms = 1000.0 / fps
        self._source = source if source is not None else MonotonicTime()
        self._tick_number = 0
        self._last_ms: float | None = None

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def frame_ms(self) -> float:
        return self._frame_ms

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def source(self) -> TimeSource:
        return self._source

    def now_ms(self) -> float:
        return self._source.now_ms()

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self, stop_fn: Callable[[], None], rng: random.Random) -> TickContext:
        now = self._source.now_ms()
        dt = 0.0 if self._last_ms is None else now - self._last_ms
        self._last_ms = now
        return TickContext(
            tick_number=self._tick_number,
            now_ms=now,
            dt_ms=dt,
            wall=self._source.wall(),
            request_stop=stop_fn,
            random=rng,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
        self._last_ms = None
