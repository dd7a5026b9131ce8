"""Overlays shared by every screen: clock readout and winner banner."""
from __future__ import annotations

from datetime import datetime

import pygame

from game.assets import FontBook
from ui.constants import (
    CLOCK_CENTER,
    CLOCK_TEXT_SIZE,
    TEXT_COLOR,
    WINNER_CENTER,
    WINNER_LINE_H,
    WINNER_TEXT_SIZE,
)


def draw_centered(
    surface: pygame.Surface, font: pygame.font.Font, text: str, center: tuple[int, int],
) -> None:
    img = font.render(text, False, TEXT_COLOR)
    surface.blit(img, img.get_rect(center=center))


def draw_clock(surface: pygame.Surface, fonts: FontBook, wall: datetime) -> None:
    draw_centered(surface, fonts.get(CLOCK_TEXT_SIZE), wall.strftime("%H:%M"), CLOCK_CENTER)


def draw_winner(surface: pygame.Surface, fonts: FontBook, name: str) -> None:
    font = fonts.get(WINNER_TEXT_SIZE)
    cx, cy = WINNER_CENTER
    draw_centered(surface, font, name.upper(), (cx, cy))
    draw_centered(surface, font, "WINS!", (cx, cy + WINNER_LINE_H))
