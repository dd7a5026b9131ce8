"""Tests for BattleConfig validation and defaults."""
import pytest

from duel_battle import BattleConfig, Side


def test_defaults():
    config = BattleConfig()
    assert config.turn_interval_ms == 300_000
    assert config.restart_delay_ms == 3000
    assert config.winner_display_ms == 2000
    assert config.hit_window == (0.4, 0.6)
    assert config.canvas == (160, 144)


def test_layouts_cover_both_sides():
    config = BattleConfig()
    assert config.layout(Side.FRONT).rest == (77.0, -15.0)
    assert config.layout(Side.BACK).offscreen == (-90.0, 35.0)


def test_frozen():
    config = BattleConfig()
    with pytest.raises(AttributeError):
        config.attack_ms = 1  # type: ignore[misc]


@pytest.mark.parametrize("kwargs", [
    {"damage_min": 0.5, "damage_max": 0.2},
    {"damage_max": 1.5},
    {"hit_window": (0.7, 0.3)},
    {"attack_ms": 0},
    {"transition_ms": -1},
    {"restart_delay_ms": 1000, "winner_display_ms": 2000},
    {"transition_ms": 3000},
    {"transition_ms": 4000, "restart_delay_ms": 3000},
    {"layouts": {}},
])
def test_rejects_invalid(kwargs):
    with pytest.raises(ValueError):
        BattleConfig(**kwargs)
