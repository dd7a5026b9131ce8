"""duel-schedule - Fire-once deferred callbacks for the duel engine."""
from __future__ import annotations

from duel_schedule.components import Deferred
from duel_schedule.queue import DeferredQueue, DuplicateDeferredError

__all__ = ["Deferred", "DeferredQueue", "DuplicateDeferredError"]
