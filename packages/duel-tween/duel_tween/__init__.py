"""duel-tween - Elapsed-time sampled animation primitives."""
from __future__ import annotations

from duel_tween.components import Tween
from duel_tween.easing import EASINGS
from duel_tween.sampling import blink, elapsed, is_done, progress, sample

__all__ = ["Tween", "EASINGS", "blink", "elapsed", "is_done", "progress", "sample"]
