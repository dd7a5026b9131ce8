"""Battle timing and layout configuration."""
from __future__ import annotations

from dataclasses import dataclass, field

from duel_battle.types import Side


@dataclass(frozen=True)
class SideLayout:
    """Where a side rests, where it slides to when it leaves, which way it lunges.

    Coordinates are logical canvas pixels. ``lunge_direction`` is a unit
    vector applied to the attack offset.
    """

    rest: tuple[float, float]
    offscreen: tuple[float, float]
    lunge_direction: tuple[float, float]
    size: tuple[int, int]


def _default_layouts() -> dict[Side, SideLayout]:
    return {
        Side.FRONT: SideLayout(
            rest=(77.0, -15.0),
            offscreen=(77.0, -100.0),
            lunge_direction=(-1.0, 0.0),
            size=(90, 90),
        ),
        Side.BACK: SideLayout(
            rest=(0.0, 35.0),
            offscreen=(-90.0, 35.0),
            lunge_direction=(1.0, 0.0),
            size=(80, 80),
        ),
    }


@dataclass(frozen=True)
class BattleConfig:
    """Immutable timing, damage and layout constants.

    All durations are milliseconds.

    Attributes:
        turn_interval_ms: Automatic turn cadence.
        post_battle_guard_ms: Quiet period after a battle-ending turn.
        restart_delay_ms: Delay from battle end to the next battle.
        damage_min: Inclusive lower bound of a damage roll.
        damage_max: Exclusive upper bound of a damage roll.
        attack_ms: Lunge duration.
        lunge_px: Peak lunge offset.
        hit_window: Attack progress window that starts the hit flash.
        hit_ms: Hit flash duration.
        flash_interval_ms: Hit flash half-cycle.
        transition_ms: Exit and enter slide duration.
        winner_display_ms: Winner announcement window.
        winner_flash_ms: Winner text half-cycle.
        detail_display_ms: Detail screen time after its text loaded.
    """

    turn_interval_ms: float = 5 * 60 * 1000
    post_battle_guard_ms: float = 50.0
    restart_delay_ms: float = 3000.0
    damage_min: float = 0.10
    damage_max: float = 0.30
    attack_ms: float = 300.0
    lunge_px: float = 10.0
    hit_window: tuple[float, float] = (0.4, 0.6)
    hit_ms: float = 400.0
    flash_interval_ms: float = 100.0
    transition_ms: float = 500.0
    winner_display_ms: float = 2000.0
    winner_flash_ms: float = 300.0
    detail_display_ms: float = 5000.0
    canvas: tuple[int, int] = (160, 144)
    layouts: dict[Side, SideLayout] = field(default_factory=_default_layouts)

    def __post_init__(self) -> None:
        if not 0.0 <= self.damage_min < self.damage_max <= 1.0:
            raise ValueError("damage range must satisfy 0 <= min < max <= 1")
        lo, hi = self.hit_window
        if not 0.0 <= lo <= hi <= 1.0:
            raise ValueError("hit_window must lie within [0, 1]")
        for name in (
            "turn_interval_ms", "attack_ms", "hit_ms", "transition_ms",
            "winner_display_ms", "restart_delay_ms",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.restart_delay_ms < self.winner_display_ms:
            raise ValueError(
                "restart_delay_ms must not be shorter than winner_display_ms"
            )
        if self.transition_ms >= self.restart_delay_ms:
            # The next battle schedules its sprite swaps under the same keys.
            raise ValueError("transition_ms must be shorter than restart_delay_ms")
        if set(self.layouts) != {Side.FRONT, Side.BACK}:
            raise ValueError("layouts must cover both sides")

    def layout(self, side: Side) -> SideLayout:
        return self.layouts[side]
