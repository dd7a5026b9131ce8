"""Duel Clock - a battle that keeps time.

Two combatants trade blows every few minutes under a clock readout. The
winner stays in and faces a fresh challenger.

Exercises duel, duel-tween, duel-schedule, duel-dex and duel-battle.

Controls:
  Click   Battle: attack now / Day: open entry / Entry: back to battle
  Tab     Toggle battle / day screen
  Esc, Q  Quit

Environment:
  DUEL_DEX_API_KEY   Gemini API key for entries (offline text without it)
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pygame

from duel_battle import RosterError, ScreenMode, battle_view

from game.setup import ClockState, build_clock
from ui.battle import draw_battle
from ui.constants import BG_COLOR, CANVAS_H, CANVAS_W, FPS, ZOOM
from ui.day import draw_day
from ui.detail import draw_detail
from ui.hud import draw_clock, draw_winner

HERE = Path(__file__).resolve().parent


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Duel Clock - battle clock demo")
    p.add_argument("--assets", type=Path, default=HERE / "assets",
                   help="Assets directory (default: ./assets)")
    p.add_argument("--zoom", type=int, default=ZOOM, help=f"Window scale (default: {ZOOM})")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frames per second (default: {FPS})")
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    p.add_argument("--interval", type=float, default=None, metavar="SECONDS",
                   help="Seconds between automatic turns (default: 300)")
    args = p.parse_args()
    args.zoom = max(1, min(8, args.zoom))
    args.fps = max(1, args.fps)
    return args


def render(canvas: pygame.Surface, state: ClockState) -> None:
    now = state.engine.clock.now_ms()
    wall = state.engine.clock.source.wall()
    machine = state.machine
    view = battle_view(machine.session, machine.config, now)

    canvas.fill(BG_COLOR)
    if state.background is not None:
        canvas.blit(state.background, (0, 0))

    mode = state.screens.mode
    if mode is ScreenMode.BATTLE:
        draw_battle(canvas, view, state.fonts)
        if view.winner_text_visible and view.winner_name:
            draw_winner(canvas, state.fonts, view.winner_name)
    elif mode is ScreenMode.SECONDARY_INFO:
        draw_day(canvas, state.fonts, wall)
    else:
        draw_detail(canvas, state.fonts, state.screens.detail_text)

    if view.show_clock:
        draw_clock(canvas, state.fonts, wall)

    if state.overlay is not None:
        canvas.blit(state.overlay, (0, 0))


def main() -> None:
    args = parse_args()

    pygame.init()
    screen = pygame.display.set_mode((CANVAS_W * args.zoom, CANVAS_H * args.zoom))
    pygame.display.set_caption("Duel Clock")
    canvas = pygame.Surface((CANVAS_W, CANVAS_H))
    frame_clock = pygame.time.Clock()

    try:
        state = build_clock(args.assets, args.fps, args.seed, args.interval)
    except RosterError as exc:
        print(f"duel-clock: {exc}", file=sys.stderr)
        pygame.quit()
        sys.exit(1)

    state.engine.start()
    running = True

    while running:
        frame_clock.tick(args.fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    running = False
                elif event.key == pygame.K_TAB:
                    state.screens.cycle()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                state.screens.activate(state.engine.clock.now_ms())

        # --- Tick ---
        state.engine.step()
        if state.engine.stop_requested:
            running = False

        # --- Render ---
        render(canvas, state)
        pygame.transform.scale(canvas, screen.get_size(), screen)
        pygame.display.flip()

    state.engine.stop()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
