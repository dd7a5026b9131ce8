"""duel-battle - Turn-based battle clock on top of the duel engine."""
from __future__ import annotations

from duel_battle.animation import AttackTimer, HitTimer, TransitionTimer, WinnerDisplay
from duel_battle.config import BattleConfig, SideLayout
from duel_battle.machine import (
    BattleMachine,
    TurnRecord,
    advance_animations,
    apply_sprites,
    auto_turn_due,
    request_turn,
    start_battle,
    take_turn,
    turn_allowed,
)
from duel_battle.roster import Roster, RosterError
from duel_battle.screens import LOADING_TEXT, ScreenController
from duel_battle.session import BattleSession
from duel_battle.sprites import SpriteLoader, SpriteProvider, SpriteResult
from duel_battle.systems import make_battle_system, make_screen_system
from duel_battle.types import (
    SIDES,
    Combatant,
    MachineState,
    Outcome,
    Participant,
    ScreenMode,
    Side,
    TransitionPhase,
    TurnState,
)
from duel_battle.view import BattleView, SideView, battle_view, displayed_health

__all__ = [
    "AttackTimer",
    "BattleConfig",
    "BattleMachine",
    "BattleSession",
    "BattleView",
    "Combatant",
    "HitTimer",
    "LOADING_TEXT",
    "MachineState",
    "Outcome",
    "Participant",
    "Roster",
    "RosterError",
    "SIDES",
    "ScreenController",
    "ScreenMode",
    "Side",
    "SideLayout",
    "SideView",
    "SpriteLoader",
    "SpriteProvider",
    "SpriteResult",
    "TransitionPhase",
    "TransitionTimer",
    "TurnRecord",
    "TurnState",
    "WinnerDisplay",
    "advance_animations",
    "apply_sprites",
    "auto_turn_due",
    "battle_view",
    "displayed_health",
    "make_battle_system",
    "make_screen_system",
    "request_turn",
    "start_battle",
    "take_turn",
    "turn_allowed",
]
