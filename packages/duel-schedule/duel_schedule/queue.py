"""DeferredQueue - fire-once callbacks keyed by name."""
from __future__ import annotations

import heapq
from typing import Callable

from duel_schedule.components import Deferred


class DuplicateDeferredError(ValueError):
    """Raised when a key is scheduled while an earlier entry is still pending."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"deferred callback {key!r} is already pending")


class DeferredQueue:
    """Explicit timer queue for delayed one-shot actions.

    A key can be pending at most once, so anything scheduled under a fixed
    key (a battle restart, say) cannot be doubled up. There is no
    cancellation: an entry either fires or the whole queue is cleared.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, str]] = []
        self._entries: dict[str, Deferred] = {}
        self._seq = 0

    def schedule(self, key: str, due_ms: float, fn: Callable[[float], None]) -> Deferred:
        if key in self._entries:
            raise DuplicateDeferredError(key)
        self._seq += 1
        entry = Deferred(key=key, due_ms=due_ms, fn=fn, seq=self._seq)
        self._entries[key] = entry
        heapq.heappush(self._heap, (due_ms, entry.seq, key))
        return entry

    def is_pending(self, key: str) -> bool:
        return key in self._entries

    def due_at(self, key: str) -> float | None:
        entry = self._entries.get(key)
        return entry.due_ms if entry is not None else None

    def pending(self) -> list[str]:
        """Pending keys in firing order."""
        return [key for _, _, key in sorted(self._heap)]

    def __len__(self) -> int:
        return len(self._entries)

    def fire_due(self, now: float) -> list[str]:
        """Run every callback whose due time has passed. Returns fired keys.

        Entries are removed before their callback runs, so a callback may
        schedule the same key again. Entries scheduled during this call with
        a due time already passed fire in the same call.
        """
        fired: list[str] = []
        while self._heap and self._heap[0][0] <= now:
            _, _, key = heapq.heappop(self._heap)
            entry = self._entries.pop(key)
            fired.append(key)
            entry.fn(now)
        return fired

    def clear(self) -> None:
        self._heap.clear()
        self._entries.clear()
