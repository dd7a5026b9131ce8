"""System factories that hook the battle clock into a duel Engine."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from duel_battle.machine import BattleMachine
from duel_battle.screens import ScreenController

if TYPE_CHECKING:
    from duel import TickContext


def make_battle_system(machine: BattleMachine) -> Callable[[TickContext], None]:
    """Return a system that advances the battle each tick.

    The first tick starts the opening battle. After that only the restart
    timer starts battles.
    """

    def battle_system(ctx: TickContext) -> None:
        if machine.session.battle_number == 0:
            machine.start(ctx.now_ms)
        machine.tick(ctx.now_ms)

    return battle_system


def make_screen_system(screens: ScreenController) -> Callable[[TickContext], None]:
    """Return a system that collects fetched text and times out the detail screen."""

    def screen_system(ctx: TickContext) -> None:
        screens.tick(ctx.now_ms)

    return screen_system
