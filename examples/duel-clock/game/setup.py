"""Build the complete clock state."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

import pygame

from duel import Engine, MonotonicTime
from duel_battle import (
    BattleConfig,
    BattleMachine,
    Roster,
    ScreenController,
    SpriteLoader,
    make_battle_system,
    make_screen_system,
)
from duel_dex import DexConfig, DexFetcher, GeminiClient, MockClient, TextClient
from duel_schedule import DeferredQueue

from game.assets import FontBook, SpriteDirectory, load_image
from game.callbacks import attach_narration
from ui.constants import CANVAS_H, CANVAS_W


@dataclass
class ClockState:
    """Holds all clock objects."""
    engine: Engine
    machine: BattleMachine
    screens: ScreenController
    fetcher: DexFetcher
    fonts: FontBook
    background: pygame.Surface | None
    overlay: pygame.Surface | None


def offline_entry(name: str) -> str:
    return f"{name.upper()} keeps its secrets. No entry is available offline."


def build_text_client(config: DexConfig) -> TextClient:
    api_key = config.api_key()
    if not api_key:
        print(
            f"duel-clock: {config.api_key_env} not set, detail entries are offline",
            file=sys.stderr,
        )
        return MockClient(offline_entry)
    return GeminiClient(
        api_key, model=config.model, base_url=config.base_url, timeout=config.timeout,
    )


def build_clock(
    assets: Path,
    fps: int,
    seed: int | None = None,
    interval_s: float | None = None,
) -> ClockState:
    """Wire engine, battle machine, screens and fetcher.

    Needs an open pygame display: images are converted on load.
    """
    if interval_s is not None:
        config = BattleConfig(turn_interval_ms=interval_s * 1000.0)
    else:
        config = BattleConfig()

    engine = Engine(fps=fps, seed=seed, source=MonotonicTime())
    roster = Roster.load(assets / "roster.json")
    loader = SpriteLoader(SpriteDirectory(assets, config))
    machine = BattleMachine(roster, config, engine.random, DeferredQueue(), loader)
    attach_narration(machine)

    dex_config = DexConfig()
    fetcher = DexFetcher(build_text_client(dex_config), dex_config)
    screens = ScreenController(machine, fetcher)

    engine.add_system(make_battle_system(machine))
    engine.add_system(make_screen_system(screens))
    engine.on_stop(lambda ctx: fetcher.shutdown())

    return ClockState(
        engine=engine,
        machine=machine,
        screens=screens,
        fetcher=fetcher,
        fonts=FontBook(assets / "font.ttf"),
        background=load_image(assets / "bg.png", (CANVAS_W, CANVAS_H)),
        overlay=load_image(assets / "overlay.png", (CANVAS_W, CANVAS_H)),
    )
