"""Sprite provider protocol and background loader."""
from __future__ import annotations

from concurrent.futures import Executor, Future
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from duel_battle.types import Combatant, Side


@runtime_checkable
class SpriteProvider(Protocol):
    """Resolves a drawable handle for a combatant on a side.

    The handle is opaque to the battle core. Any exception counts as a
    failed load.
    """

    def load(self, side: Side, combatant: Combatant) -> Any:
        ...


@dataclass(frozen=True)
class SpriteResult:
    side: Side
    combatant: Combatant
    handle: Any = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SpriteLoader:
    """Runs provider loads off the tick loop and hands results back in order.

    With no executor the load runs inline inside ``request`` and the result
    waits in the queue for the next ``harvest``, which keeps the timing
    identical from the state machine's point of view.
    """

    def __init__(self, provider: SpriteProvider, executor: Executor | None = None) -> None:
        self._provider = provider
        self._executor = executor
        self._inflight: list[tuple[Side, Combatant, Future[Any]]] = []
        self._ready: list[SpriteResult] = []

    def request(self, side: Side, combatant: Combatant) -> None:
        if self._executor is None:
            try:
                handle = self._provider.load(side, combatant)
            except Exception as exc:
                self._ready.append(SpriteResult(side, combatant, error=exc))
            else:
                self._ready.append(SpriteResult(side, combatant, handle=handle))
            return
        future = self._executor.submit(self._provider.load, side, combatant)
        self._inflight.append((side, combatant, future))

    @property
    def pending(self) -> int:
        return len(self._inflight) + len(self._ready)

    def harvest(self) -> list[SpriteResult]:
        """Return every finished load since the last harvest."""
        still: list[tuple[Side, Combatant, Future[Any]]] = []
        for side, combatant, future in self._inflight:
            if not future.done():
                still.append((side, combatant, future))
                continue
            exc = future.exception()
            if exc is not None:
                self._ready.append(SpriteResult(side, combatant, error=exc))
            else:
                self._ready.append(SpriteResult(side, combatant, handle=future.result()))
        self._inflight = still
        results, self._ready = self._ready, []
        return results
