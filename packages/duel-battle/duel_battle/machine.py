"""Battle state machine: battle setup, turn resolution, win detection.

The transition functions take the ``BattleSession`` they act on and
update it in place. ``BattleMachine`` wires them to a roster, a random
source, the deferred queue and the sprite loader, and is what the tick
loop talks to.
"""
from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from functools import partial
from typing import Callable

from duel_schedule import DeferredQueue

from duel_battle.animation import WinnerDisplay
from duel_battle.config import BattleConfig
from duel_battle.roster import Roster
from duel_battle.session import BattleSession
from duel_battle.sprites import SpriteLoader
from duel_battle.types import (
    SIDES,
    Combatant,
    MachineState,
    Outcome,
    Participant,
    Side,
    TransitionPhase,
    TurnState,
)

RESTART_KEY = "restart"


def swap_key(side: Side) -> str:
    return f"swap:{side.value}"


@dataclass(frozen=True)
class TurnRecord:
    """What one resolved turn did."""

    attacker: Side
    defender: Side
    damage: float
    defender_health: float
    ended_battle: bool


def _clamp(v: float) -> float:
    return min(max(v, 0.0), 1.0)


# ----------------------------------------------------------------------
# Setup
# ----------------------------------------------------------------------

def pick_combatants(
    session: BattleSession, roster: Roster, rng: random.Random,
) -> tuple[dict[Side, Combatant], Side | None]:
    """Choose next battle's combatants. Returns (picks, retained side).

    A winner keeps its side and faces a uniform draw from everyone else.
    With no winner (first battle or double faint) both sides are drawn
    independently and must differ.
    """
    outcome = session.outcome
    if outcome is not None and outcome.winner is not None and outcome.winning_side is not None:
        kept_side = outcome.winning_side
        opponent = roster.draw_excluding(rng, outcome.winner.name)
        return {kept_side: outcome.winner, kept_side.other: opponent}, kept_side
    front, back = roster.draw_pair(rng)
    return {Side.FRONT: front, Side.BACK: back}, None


def start_battle(
    session: BattleSession,
    roster: Roster,
    rng: random.Random,
    now: float,
    config: BattleConfig,
    queue: DeferredQueue,
    loader: SpriteLoader | None = None,
) -> bool:
    """Set up a fresh battle. Returns False when the roster cannot supply one."""
    if not roster.can_battle:
        return False

    picks, retained = pick_combatants(session, roster, rng)

    session.participants = {side: Participant(picks[side], 1.0) for side in SIDES}
    session.outcome = None
    session.winner_display = None
    session.retained_side = retained
    session.turn = TurnState(active_side=rng.choice(SIDES), locked=False, last_turn_ms=now)
    session.attack.clear()
    session.hit.clear()
    session.battle_number += 1
    session.state = MachineState.ACTIVE

    for side in SIDES:
        if side is retained:
            # The winner stays put with the sprite it already has.
            session.transitions[side].reset()
            continue
        session.transitions[side].exit(now, config.transition_ms)
        queue.schedule(
            swap_key(side),
            now + config.transition_ms,
            partial(_swap_sprite, session, side, picks[side], loader),
        )
    return True


def _swap_sprite(
    session: BattleSession,
    side: Side,
    combatant: Combatant,
    loader: SpriteLoader | None,
    now: float,
) -> None:
    if loader is None or session.combatant(side) != combatant:
        return
    loader.request(side, combatant)


def apply_sprites(
    session: BattleSession, loader: SpriteLoader, now: float, config: BattleConfig,
) -> None:
    """Install finished sprite loads and start their enter slide.

    A failed load keeps the previous handle and leaves the side off-screen.
    Loads for a combatant no longer on that side are dropped. A load that
    lands after its side was kept by a winner is installed in place, with
    no slide, unless that side already shows the combatant.
    """
    for result in loader.harvest():
        side = result.side
        if session.combatant(side) != result.combatant:
            continue
        phase = session.transitions[side].phase
        in_place = (
            side is session.retained_side
            and phase is TransitionPhase.IDLE
            and session.sprite_owner[side] != result.combatant
        )
        if phase is not TransitionPhase.EXITING and not in_place:
            continue
        if not result.ok:
            print(
                f"duel-battle: {result.side.value} sprite {result.combatant.file!r} "
                f"failed: {result.error}",
                file=sys.stderr,
            )
            continue
        session.sprites[side] = result.handle
        session.sprite_owner[side] = result.combatant
        if not in_place:
            session.transitions[side].enter(now, config.transition_ms)


# ----------------------------------------------------------------------
# Turns
# ----------------------------------------------------------------------

def take_turn(
    session: BattleSession,
    rng: random.Random,
    now: float,
    config: BattleConfig,
    queue: DeferredQueue,
    on_restart: Callable[[float], None],
) -> TurnRecord | None:
    """Resolve one attack. Returns None (and changes nothing) when refused.

    Refused when the battle is not ACTIVE or the lock is held. A turn that
    ends the battle keeps the lock; only the next ``start_battle`` clears it.
    """
    if session.state is not MachineState.ACTIVE or session.turn.locked:
        return None
    session.turn.locked = True

    attacker = session.turn.active_side
    defender = attacker.other
    session.hit.clear()
    session.attack.start(attacker, now, config.attack_ms)

    damage = config.damage_min + (config.damage_max - config.damage_min) * rng.random()
    target = session.participants[defender]
    target.health = _clamp(target.health - damage)

    if any(session.participants[side].health <= 0 for side in SIDES):
        _resolve(session, now, config, queue, on_restart)
        return TurnRecord(attacker, defender, damage, target.health, True)

    session.turn.active_side = defender
    session.turn.locked = False
    return TurnRecord(attacker, defender, damage, target.health, False)


def _resolve(
    session: BattleSession,
    now: float,
    config: BattleConfig,
    queue: DeferredQueue,
    on_restart: Callable[[float], None],
) -> None:
    session.state = MachineState.RESOLVING
    session.battle_ended_ms = now

    fainted = [side for side in SIDES if session.participants[side].health <= 0]
    if len(fainted) == 2:
        outcome = Outcome(winner=None, winning_side=None, at_ms=now)
    else:
        winning_side = fainted[0].other
        winner = session.participants[winning_side]
        outcome = Outcome(
            winner=winner.combatant,
            winning_side=winning_side,
            at_ms=now,
            health_at_victory=winner.health,
        )
    session.outcome = outcome
    session.winner_display = WinnerDisplay(
        outcome, config.winner_display_ms, config.winner_flash_ms,
    )
    queue.schedule(RESTART_KEY, now + config.restart_delay_ms, on_restart)


def turn_allowed(session: BattleSession, now: float, config: BattleConfig) -> bool:
    """Guards shared by the automatic and the explicit trigger."""
    if session.state is not MachineState.ACTIVE or session.turn.locked:
        return False
    if session.battle_ended_ms is not None:
        return now - session.battle_ended_ms > config.post_battle_guard_ms
    return True


def auto_turn_due(session: BattleSession, now: float, config: BattleConfig) -> bool:
    return (
        turn_allowed(session, now, config)
        and now - session.turn.last_turn_ms > config.turn_interval_ms
    )


def request_turn(
    session: BattleSession,
    rng: random.Random,
    now: float,
    config: BattleConfig,
    queue: DeferredQueue,
    on_restart: Callable[[float], None],
) -> TurnRecord | None:
    """Explicit trigger: take a turn now if the guards allow it."""
    if not turn_allowed(session, now, config):
        return None
    record = take_turn(session, rng, now, config, queue, on_restart)
    session.turn.last_turn_ms = now
    return record


# ----------------------------------------------------------------------
# Animation polling
# ----------------------------------------------------------------------

def advance_animations(session: BattleSession, now: float, config: BattleConfig) -> None:
    """Apply the transitions that depend on timers running out.

    The hit flash starts on the first sample whose progress lies inside the
    hit window, at most once per attack. A frame that jumps over the whole
    window starts no flash.
    """
    attack = session.attack
    if attack.tween is not None and attack.side is not None:
        lo, hi = config.hit_window
        if not attack.hit_triggered and lo <= attack.progress(now) <= hi:
            session.hit.start(attack.side.other, now, config.hit_ms)
            attack.hit_triggered = True
        if not attack.active(now):
            attack.clear()

    if session.hit.tween is not None and not session.hit.active(now):
        session.hit.clear()

    for side in SIDES:
        session.transitions[side].settle(now)


# ----------------------------------------------------------------------
# Facade
# ----------------------------------------------------------------------

class BattleMachine:
    """Owns a BattleSession and drives it from the tick loop.

    Observers registered with ``on_battle_start``, ``on_turn`` and
    ``on_battle_end`` are called after the session has been updated.
    Exceptions raised by observers are reported and swallowed.
    """

    def __init__(
        self,
        roster: Roster,
        config: BattleConfig | None = None,
        rng: random.Random | None = None,
        queue: DeferredQueue | None = None,
        loader: SpriteLoader | None = None,
    ) -> None:
        self.roster = roster
        self.config: BattleConfig = config if config is not None else BattleConfig()
        self.rng = rng if rng is not None else random.Random()
        self.queue = queue if queue is not None else DeferredQueue()
        self.loader = loader
        self.session = BattleSession()
        self._roster_reported = False

        self._on_battle_start: list[Callable[[BattleSession, float], None]] = []
        self._on_turn: list[Callable[[TurnRecord, BattleSession, float], None]] = []
        self._on_battle_end: list[Callable[[Outcome, BattleSession], None]] = []

    # --- Observers ---

    def on_battle_start(self, cb: Callable[[BattleSession, float], None]) -> None:
        self._on_battle_start.append(cb)

    def on_turn(self, cb: Callable[[TurnRecord, BattleSession, float], None]) -> None:
        self._on_turn.append(cb)

    def on_battle_end(self, cb: Callable[[Outcome, BattleSession], None]) -> None:
        self._on_battle_end.append(cb)

    def _notify(self, callbacks: list, *args) -> None:
        for cb in callbacks:
            try:
                cb(*args)
            except Exception:
                print(
                    f"duel-battle: observer error: {sys.exc_info()[1]}",
                    file=sys.stderr,
                )

    # --- Lifecycle ---

    def start(self, now: float) -> bool:
        """Start the first battle. Later battles start only from the restart timer."""
        if self.session.battle_number:
            return False
        return self._start(now)

    def _start(self, now: float) -> bool:
        started = start_battle(
            self.session, self.roster, self.rng, now, self.config, self.queue, self.loader,
        )
        if started:
            self._notify(self._on_battle_start, self.session, now)
        elif not self._roster_reported:
            self._roster_reported = True
            print(
                "duel-battle: roster needs at least two distinct combatants; "
                "no battle started",
                file=sys.stderr,
            )
        return started

    def _after_turn(self, record: TurnRecord | None, now: float) -> TurnRecord | None:
        if record is None:
            return None
        self._notify(self._on_turn, record, self.session, now)
        if record.ended_battle and self.session.outcome is not None:
            self._notify(self._on_battle_end, self.session.outcome, self.session)
        return record

    # --- Triggers ---

    def take_turn(self, now: float) -> TurnRecord | None:
        """Resolve a turn without the trigger guards (lock and state still apply)."""
        record = take_turn(
            self.session, self.rng, now, self.config, self.queue, self._start,
        )
        return self._after_turn(record, now)

    def click(self, now: float) -> TurnRecord | None:
        """Explicit trigger, subject to the same guards as the automatic one."""
        record = request_turn(
            self.session, self.rng, now, self.config, self.queue, self._start,
        )
        return self._after_turn(record, now)

    def tick(self, now: float) -> TurnRecord | None:
        """Per-tick work: deferred callbacks, sprites, timers, automatic turn."""
        self.queue.fire_due(now)
        if self.loader is not None:
            apply_sprites(self.session, self.loader, now, self.config)
        advance_animations(self.session, now, self.config)
        if auto_turn_due(self.session, now, self.config):
            return self.click(now)
        return None

    # --- Queries ---

    def winner_display_open(self, now: float) -> bool:
        display = self.session.winner_display
        return display is not None and display.is_open(now)

    def clock_visible(self, now: float) -> bool:
        """The time readout hides only while the winner is announced."""
        return not self.winner_display_open(now)
