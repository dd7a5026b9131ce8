"""Core data types for the battle clock."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    FRONT = "front"
    BACK = "back"

    @property
    def other(self) -> Side:
        return Side.BACK if self is Side.FRONT else Side.FRONT


SIDES: tuple[Side, Side] = (Side.FRONT, Side.BACK)


class MachineState(Enum):
    IDLE = "idle"
    ACTIVE = "active"
    RESOLVING = "resolving"


class TransitionPhase(Enum):
    IDLE = "idle"
    EXITING = "exiting"
    ENTERING = "entering"


class ScreenMode(Enum):
    BATTLE = "battle"
    SECONDARY_INFO = "secondary_info"
    DETAIL = "detail"


@dataclass(frozen=True)
class Combatant:
    """Roster record. ``file`` names the sprite asset for either side."""

    name: str
    file: str


@dataclass
class Participant:
    combatant: Combatant
    health: float = 1.0


@dataclass
class TurnState:
    active_side: Side = Side.FRONT
    locked: bool = False
    last_turn_ms: float = 0.0


@dataclass(frozen=True)
class Outcome:
    """Result of a finished battle. ``winner`` is None on a double faint."""

    winner: Combatant | None
    winning_side: Side | None
    at_ms: float
    health_at_victory: float = 0.0
