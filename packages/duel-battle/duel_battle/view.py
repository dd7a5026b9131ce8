"""Read-only drawing snapshot of a BattleSession."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from duel_battle.config import BattleConfig
from duel_battle.session import BattleSession
from duel_battle.types import SIDES, Side, TransitionPhase


@dataclass(frozen=True)
class SideView:
    side: Side
    name: str | None
    position: tuple[float, float]
    visible: bool
    health: float
    sprite: Any
    phase: TransitionPhase


@dataclass(frozen=True)
class BattleView:
    sides: dict[Side, SideView]
    winner_name: str | None
    winner_text_visible: bool
    show_clock: bool

    def __getitem__(self, side: Side) -> SideView:
        return self.sides[side]


def displayed_health(session: BattleSession, side: Side, now: float) -> float:
    """Health as drawn. The winner's bar refills over the announcement."""
    display = session.winner_display
    if display is not None and display.side is side:
        return min(display.health(now), 1.0)
    return session.health(side)


def _side_view(
    session: BattleSession, side: Side, config: BattleConfig, now: float,
) -> SideView:
    layout = config.layout(side)
    transition = session.transitions[side]
    x, y = transition.position(now, layout)
    dx, dy = session.attack.offset_for(side, now, layout, config.lunge_px)

    sprite = session.sprites[side]
    visible = (
        sprite is not None
        and not transition.exited(now)
        and session.hit.visible(side, now, config.flash_interval_ms)
    )
    combatant = session.combatant(side)
    return SideView(
        side=side,
        name=combatant.name if combatant is not None else None,
        position=(x + dx, y + dy),
        visible=visible,
        health=displayed_health(session, side, now),
        sprite=sprite,
        phase=transition.phase,
    )


def battle_view(session: BattleSession, config: BattleConfig, now: float) -> BattleView:
    display = session.winner_display
    winner_name = None
    if display is not None and display.outcome.winner is not None:
        winner_name = display.outcome.winner.name
    return BattleView(
        sides={side: _side_view(session, side, config, now) for side in SIDES},
        winner_name=winner_name,
        winner_text_visible=display is not None and display.text_visible(now),
        show_clock=display is None or not display.is_open(now),
    )
