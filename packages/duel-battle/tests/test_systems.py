"""Tests for running the battle clock inside a duel Engine."""
from duel import Engine, ManualTime
from duel_battle import (
    BattleConfig,
    BattleMachine,
    Combatant,
    MachineState,
    Roster,
    ScreenController,
    ScreenMode,
    Side,
    SpriteLoader,
    TransitionPhase,
    make_battle_system,
    make_screen_system,
)
from duel_schedule import DeferredQueue

ROSTER = Roster([
    Combatant("MEW", "mew.png"),
    Combatant("ONIX", "onix.png"),
    Combatant("ABRA", "abra.png"),
])


class Provider:
    def load(self, side, combatant):
        return combatant.file


def build(interval_ms=1000.0):
    time = ManualTime()
    engine = Engine(fps=30, seed=7, source=time)
    config = BattleConfig(turn_interval_ms=interval_ms)
    machine = BattleMachine(
        ROSTER, config, engine.random, DeferredQueue(), SpriteLoader(Provider()),
    )
    screens = ScreenController(machine)
    engine.add_system(make_battle_system(machine))
    engine.add_system(make_screen_system(screens))
    return engine, time, machine, screens


def test_first_tick_starts_battle():
    engine, time, machine, _ = build()
    engine.step()
    assert machine.session.battle_number == 1
    assert machine.session.state is MachineState.ACTIVE


def test_sprites_swap_in_after_exit():
    engine, time, machine, _ = build()
    engine.step()
    time.advance(500)
    engine.step()
    for side in (Side.FRONT, Side.BACK):
        assert machine.session.sprites[side] is not None
        assert machine.session.transitions[side].phase is TransitionPhase.ENTERING


def test_battles_keep_cycling():
    engine, time, machine, _ = build(interval_ms=100.0)
    seen_outcomes = []
    machine.on_battle_end(lambda outcome, session: seen_outcomes.append(outcome))
    for _ in range(2000):
        engine.step()
        time.advance(50)
    assert len(seen_outcomes) >= 2
    assert machine.session.battle_number == len(seen_outcomes) + (
        0 if machine.session.state is MachineState.RESOLVING else 1
    )


def test_detail_screen_times_out_on_engine_time():
    engine, time, machine, screens = build()
    engine.step()
    screens.cycle()
    screens.activate(time.now_ms())
    screens.loaded_ms = time.now_ms()
    time.advance(4999)
    engine.step()
    assert screens.mode is ScreenMode.DETAIL
    time.advance(1)
    engine.step()
    assert screens.mode is ScreenMode.BATTLE


def test_unusable_roster_is_reported_once(capsys):
    time = ManualTime()
    engine = Engine(fps=30, seed=7, source=time)
    machine = BattleMachine(Roster([Combatant("MEW", "mew.png")]), BattleConfig())
    engine.add_system(make_battle_system(machine))
    for _ in range(5):
        engine.step()
        time.advance(33)
    assert machine.session.state is MachineState.IDLE
    assert capsys.readouterr().err.count("duel-battle: roster needs") == 1
