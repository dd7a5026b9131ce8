"""Engine - frame loop, pacing, and lifecycle hooks."""

import os
import random
import time
from typing import Callable

from duel.clock import Clock
from duel.types import System, TickContext, TimeSource


class Engine:
    def __init__(
        self,
        fps: int = 30,
        seed: int | None = None,
        source: TimeSource | None = None,
    ) -> None:
        self._clock = Clock(fps, source)
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[TickContext], None]] = []
        self._stop_hooks: list[Callable[[TickContext], None]] = []
        self._stop_requested: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop, self._rng)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def _fire(self, hooks: list[Callable[[TickContext], None]]) -> None:
        ctx = self._clock.context(self._request_stop, self._rng)
        for hook in hooks:
            hook(ctx)

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    def start(self) -> None:
        """Fire start hooks. For front ends that drive ``step`` themselves."""
        self._stop_requested = False
        self._fire(self._start_hooks)

    def stop(self) -> None:
        """Fire stop hooks. Counterpart of ``start``."""
        self._fire(self._stop_hooks)

    def run(self, n: int) -> None:
        self.start()
        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break
        self.stop()

    def run_forever(self) -> None:
        self.start()
        frame_s = self._clock.frame_ms / 1000.0
        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = frame_s - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)
        self.stop()
