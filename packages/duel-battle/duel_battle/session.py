"""BattleSession - the single owned value holding all simulation state."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from duel_battle.animation import AttackTimer, HitTimer, TransitionTimer, WinnerDisplay
from duel_battle.types import (
    SIDES,
    Combatant,
    MachineState,
    Outcome,
    Participant,
    Side,
    TurnState,
)


def _per_side(factory) -> dict[Side, Any]:
    return {side: factory() for side in SIDES}


@dataclass
class BattleSession:
    """Everything one running battle clock knows.

    Per-side state lives in dicts keyed by ``Side`` so every rule is
    written once for both sides.
    """

    state: MachineState = MachineState.IDLE
    participants: dict[Side, Participant] = field(default_factory=dict)
    turn: TurnState = field(default_factory=TurnState)
    outcome: Outcome | None = None
    winner_display: WinnerDisplay | None = None
    battle_ended_ms: float | None = None
    retained_side: Side | None = None
    battle_number: int = 0

    attack: AttackTimer = field(default_factory=AttackTimer)
    hit: HitTimer = field(default_factory=HitTimer)
    transitions: dict[Side, TransitionTimer] = field(
        default_factory=lambda: _per_side(TransitionTimer)
    )

    # Drawable handles, opaque to the core. A side with no handle is not drawn.
    sprites: dict[Side, Any] = field(default_factory=lambda: _per_side(lambda: None))
    # Combatant each handle was loaded for.
    sprite_owner: dict[Side, Combatant | None] = field(
        default_factory=lambda: _per_side(lambda: None)
    )

    def combatant(self, side: Side) -> Combatant | None:
        p = self.participants.get(side)
        return p.combatant if p is not None else None

    def health(self, side: Side) -> float:
        p = self.participants.get(side)
        return p.health if p is not None else 0.0

    @property
    def active(self) -> bool:
        return self.state is MachineState.ACTIVE
