"""Console narration for battle events."""
from __future__ import annotations

from duel_battle import BattleMachine, BattleSession, Outcome, Side, TurnRecord


def _name(session: BattleSession, side: Side) -> str:
    combatant = session.combatant(side)
    return combatant.name if combatant is not None else "?"


def on_battle_start(session: BattleSession, now: float) -> None:
    front, back = _name(session, Side.FRONT), _name(session, Side.BACK)
    kept = ""
    if session.retained_side is not None:
        kept = f" ({_name(session, session.retained_side)} stays in)"
    print(f"Battle {session.battle_number}: {front} vs {back}{kept}")


def on_turn(record: TurnRecord, session: BattleSession, now: float) -> None:
    attacker = _name(session, record.attacker)
    defender = _name(session, record.defender)
    print(f"{attacker} attacked! {defender} HP: {record.defender_health * 100:.0f}%")


def on_battle_end(outcome: Outcome, session: BattleSession) -> None:
    if outcome.winner is None:
        print("Both combatants fainted. Draw!")
    else:
        print(f"{outcome.winner.name} wins!")


def attach_narration(machine: BattleMachine) -> None:
    machine.on_battle_start(on_battle_start)
    machine.on_turn(on_turn)
    machine.on_battle_end(on_battle_end)
