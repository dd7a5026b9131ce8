"""Tests for DeferredQueue."""
from __future__ import annotations

import pytest

from duel_schedule import DeferredQueue, DuplicateDeferredError


class TestSchedule:
    def test_pending_after_schedule(self) -> None:
        q = DeferredQueue()
        q.schedule("restart", 3000.0, lambda now: None)
        assert q.is_pending("restart")
        assert q.due_at("restart") == 3000.0
        assert len(q) == 1

    def test_duplicate_key_rejected(self) -> None:
        q = DeferredQueue()
        q.schedule("restart", 3000.0, lambda now: None)
        with pytest.raises(DuplicateDeferredError) as exc_info:
            q.schedule("restart", 5000.0, lambda now: None)
        assert exc_info.value.key == "restart"
        assert q.due_at("restart") == 3000.0

    def test_unknown_key(self) -> None:
        q = DeferredQueue()
        assert not q.is_pending("nope")
        assert q.due_at("nope") is None

    def test_pending_in_firing_order(self) -> None:
        q = DeferredQueue()
        q.schedule("c", 30.0, lambda now: None)
        q.schedule("a", 10.0, lambda now: None)
        q.schedule("b", 10.0, lambda now: None)
        assert q.pending() == ["a", "b", "c"]


class TestFireDue:
    def test_nothing_fires_early(self) -> None:
        q = DeferredQueue()
        calls: list[float] = []
        q.schedule("swap", 500.0, calls.append)
        assert q.fire_due(499.0) == []
        assert calls == []

    def test_fires_once_at_due_time(self) -> None:
        q = DeferredQueue()
        calls: list[float] = []
        q.schedule("swap", 500.0, calls.append)
        assert q.fire_due(500.0) == ["swap"]
        assert q.fire_due(600.0) == []
        assert calls == [500.0]
        assert not q.is_pending("swap")

    def test_late_sample_fires_everything_due_in_order(self) -> None:
        q = DeferredQueue()
        order: list[str] = []
        q.schedule("second", 200.0, lambda now: order.append("second"))
        q.schedule("first", 100.0, lambda now: order.append("first"))
        q.schedule("later", 900.0, lambda now: order.append("later"))
        assert q.fire_due(500.0) == ["first", "second"]
        assert order == ["first", "second"]
        assert q.pending() == ["later"]

    def test_callback_may_reschedule_own_key(self) -> None:
        q = DeferredQueue()
        fired: list[float] = []

        def again(now: float) -> None:
            fired.append(now)
            q.schedule("tick", now + 100.0, again)

        q.schedule("tick", 100.0, again)
        q.fire_due(100.0)
        assert q.due_at("tick") == 200.0
        assert fired == [100.0]

    def test_clear(self) -> None:
        q = DeferredQueue()
        q.schedule("a", 1.0, lambda now: None)
        q.clear()
        assert len(q) == 0
        assert q.fire_due(10.0) == []

