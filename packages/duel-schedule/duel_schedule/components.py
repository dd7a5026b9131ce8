"""Deferred callback record."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Deferred:
    """One-shot callback. Fires once when ``due_ms`` has passed, then is gone."""

    key: str
    due_ms: float
    fn: Callable[[float], None]
    seq: int = 0
