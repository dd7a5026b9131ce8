"""Tests for the drawing snapshot."""
import random

import pytest

from duel_battle import (
    SIDES,
    BattleConfig,
    BattleMachine,
    Combatant,
    Roster,
    Side,
    SpriteLoader,
    battle_view,
)
from duel_schedule import DeferredQueue

ROSTER = Roster([Combatant("MEW", "mew.png"), Combatant("ONIX", "onix.png")])


class _Provider:
    def load(self, side, combatant):
        return object()


class _ZeroRolls:
    def __init__(self, seed=1):
        self._rng = random.Random(seed)

    def random(self):
        return 0.0

    def choice(self, seq):
        return self._rng.choice(seq)


@pytest.fixture
def machine():
    config = BattleConfig(damage_min=0.25, damage_max=0.5)
    m = BattleMachine(ROSTER, config, _ZeroRolls(), DeferredQueue(), SpriteLoader(_Provider()))
    m.start(0)
    return m


def view(machine, now):
    return battle_view(machine.session, machine.config, now)


class TestTransitions:
    def test_exit_slide_then_hidden(self, machine):
        front = machine.config.layout(Side.FRONT)
        v = view(machine, 0)
        assert v[Side.FRONT].position == front.rest
        assert not v[Side.FRONT].visible
        assert view(machine, 250)[Side.FRONT].position == pytest.approx((77.0, -57.5))
        assert view(machine, 499)[Side.FRONT].position != front.offscreen
        assert not view(machine, 500)[Side.FRONT].visible

    def test_enter_slide(self, machine):
        machine.tick(500)
        back = machine.config.layout(Side.BACK)
        assert view(machine, 500)[Side.BACK].position == back.offscreen
        assert view(machine, 500)[Side.BACK].visible
        assert view(machine, 750)[Side.BACK].position == pytest.approx((-45.0, 35.0))
        assert view(machine, 1000)[Side.BACK].position == back.rest


class TestAttackAndHit:
    def test_lunge_offsets_attacker_only(self, machine):
        machine.tick(500)
        machine.tick(1000)
        attacker = machine.session.turn.active_side
        machine.take_turn(2000)
        v = view(machine, 2150)
        rest = machine.config.layout(attacker).rest
        dx, _ = machine.config.layout(attacker).lunge_direction
        assert v[attacker].position == pytest.approx((rest[0] + dx * 10, rest[1]))
        assert v[attacker.other].position == machine.config.layout(attacker.other).rest

    def test_defender_blinks(self, machine):
        machine.tick(500)
        machine.tick(1000)
        defender = machine.session.turn.active_side.other
        machine.take_turn(2000)
        machine.tick(2120)
        assert view(machine, 2120)[defender].visible
        assert not view(machine, 2220)[defender].visible
        assert view(machine, 2320)[defender].visible
        assert view(machine, 2220)[defender.other].visible


class TestWinnerDisplay:
    def _finish(self, machine):
        machine.tick(500)
        machine.tick(1000)
        now = 2000
        while True:
            record = machine.take_turn(now)
            if record.ended_battle:
                return now
            now += 1000

    def test_winner_health_refills_then_stays_full(self, machine):
        end = self._finish(machine)
        side = machine.session.outcome.winning_side
        real = machine.session.health(side)
        samples = [view(machine, t)[side].health for t in range(end, end + 2001, 100)]
        assert samples[0] == pytest.approx(real)
        assert samples[-1] == 1.0
        assert all(b >= a for a, b in zip(samples, samples[1:]))
        assert view(machine, end + 2500)[side].health == 1.0
        # Display only: the session keeps the real value.
        assert machine.session.health(side) == real

    def test_loser_health_is_real(self, machine):
        end = self._finish(machine)
        loser = machine.session.outcome.winning_side.other
        assert view(machine, end + 500)[loser].health == 0.0

    def test_clock_and_text(self, machine):
        assert view(machine, 0).show_clock
        end = self._finish(machine)
        v = view(machine, end)
        assert not v.show_clock
        assert v.winner_text_visible
        assert v.winner_name == machine.session.outcome.winner.name
        assert not view(machine, end + 300).winner_text_visible
        assert view(machine, end + 2000).show_clock
        assert not view(machine, end + 2000).winner_text_visible


def test_names_follow_participants(machine):
    v = view(machine, 0)
    names = {v[side].name for side in SIDES}
    assert names == {"MEW", "ONIX"}
