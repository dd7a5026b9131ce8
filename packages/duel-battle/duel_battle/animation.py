"""Animation timers for attacks, hits, sprite slides and the winner banner.

Each timer holds a start time and duration and is read by sampling it
against ``now``. None of them fire callbacks; the state machine polls
them once per tick and applies the few transitions that depend on them.
"""
from __future__ import annotations

from dataclasses import dataclass

from duel_tween import Tween, blink, elapsed, is_done, progress, sample
from duel_tween.easing import half_sine

from duel_battle.config import SideLayout
from duel_battle.types import Outcome, Side, TransitionPhase


@dataclass
class AttackTimer:
    side: Side | None = None
    tween: Tween | None = None
    hit_triggered: bool = False

    def start(self, side: Side, now: float, duration_ms: float) -> None:
        self.side = side
        self.tween = Tween(now, duration_ms, easing="half_sine")
        self.hit_triggered = False

    def clear(self) -> None:
        self.side = None
        self.tween = None
        self.hit_triggered = False

    def active(self, now: float) -> bool:
        return self.tween is not None and not is_done(self.tween, now)

    def progress(self, now: float) -> float:
        if self.tween is None:
            return 0.0
        return progress(self.tween, now)

    def lunge_offset(self, now: float, lunge_px: float) -> float:
        """``sin(pi * p) * lunge_px`` while the lunge runs, else 0."""
        if not self.active(now):
            return 0.0
        return half_sine(self.progress(now)) * lunge_px

    def offset_for(self, side: Side, now: float, layout: SideLayout, lunge_px: float) -> tuple[float, float]:
        if side is not self.side:
            return (0.0, 0.0)
        amount = self.lunge_offset(now, lunge_px)
        dx, dy = layout.lunge_direction
        return (dx * amount, dy * amount)


@dataclass
class HitTimer:
    side: Side | None = None
    tween: Tween | None = None

    def start(self, side: Side, now: float, duration_ms: float) -> None:
        self.side = side
        self.tween = Tween(now, duration_ms)

    def clear(self) -> None:
        self.side = None
        self.tween = None

    def active(self, now: float) -> bool:
        return self.tween is not None and not is_done(self.tween, now)

    def visible(self, side: Side, now: float, interval_ms: float) -> bool:
        """Whether ``side`` is drawn: the defender blinks while the flash runs."""
        if side is not self.side or self.tween is None or not self.active(now):
            return True
        return blink(elapsed(self.tween, now), interval_ms)


@dataclass
class TransitionTimer:
    phase: TransitionPhase = TransitionPhase.IDLE
    tween: Tween | None = None

    def exit(self, now: float, duration_ms: float) -> None:
        self.phase = TransitionPhase.EXITING
        self.tween = Tween(now, duration_ms)

    def enter(self, now: float, duration_ms: float) -> None:
        self.phase = TransitionPhase.ENTERING
        self.tween = Tween(now, duration_ms)

    def reset(self) -> None:
        self.phase = TransitionPhase.IDLE
        self.tween = None

    def settle(self, now: float) -> bool:
        """Revert a finished ENTERING to IDLE. Returns True if it did."""
        if (
            self.phase is TransitionPhase.ENTERING
            and self.tween is not None
            and is_done(self.tween, now)
        ):
            self.reset()
            return True
        return False

    def exited(self, now: float) -> bool:
        """True once an exit has run its course; the side is off-screen."""
        return (
            self.phase is TransitionPhase.EXITING
            and self.tween is not None
            and is_done(self.tween, now)
        )

    def position(self, now: float, layout: SideLayout) -> tuple[float, float]:
        if self.phase is TransitionPhase.IDLE or self.tween is None:
            return layout.rest
        if self.phase is TransitionPhase.EXITING:
            start, end = layout.rest, layout.offscreen
        else:
            start, end = layout.offscreen, layout.rest
        return (
            sample(self.tween, now, start[0], end[0]),
            sample(self.tween, now, start[1], end[1]),
        )


class WinnerDisplay:
    """Announcement window that opens at the outcome time.

    The winner's health bar refills linearly from its value at victory to
    full across the window. That refill is for display only.
    """

    def __init__(self, outcome: Outcome, duration_ms: float, flash_ms: float) -> None:
        self.outcome = outcome
        self.tween = Tween(outcome.at_ms, duration_ms)
        self.flash_ms = flash_ms

    @property
    def side(self) -> Side | None:
        return self.outcome.winning_side

    def is_open(self, now: float) -> bool:
        return self.outcome.at_ms <= now < self.tween.end_ms

    def text_visible(self, now: float) -> bool:
        if self.outcome.winner is None or not self.is_open(now):
            return False
        return blink(elapsed(self.tween, now), self.flash_ms)

    def health(self, now: float) -> float:
        return sample(self.tween, now, self.outcome.health_at_victory, 1.0)
