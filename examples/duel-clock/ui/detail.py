"""Detail screen: title plus word-wrapped entry text."""
from __future__ import annotations

import pygame

from game.assets import FontBook
from ui.constants import (
    DETAIL_LINE_GAP,
    DETAIL_TEXT_SIZE,
    DETAIL_TEXT_W,
    DETAIL_TEXT_X,
    DETAIL_TEXT_Y,
    DETAIL_TITLE,
    DETAIL_TITLE_CENTER,
    DETAIL_TITLE_SIZE,
    TEXT_COLOR,
)
from ui.hud import draw_centered


def wrap_words(font: pygame.font.Font, text: str, max_w: int) -> list[str]:
    """Greedy word wrap. A single over-long word gets a line of its own."""
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and font.size(candidate)[0] >= max_w:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def draw_detail(surface: pygame.Surface, fonts: FontBook, text: str) -> None:
    draw_centered(surface, fonts.get(DETAIL_TITLE_SIZE), DETAIL_TITLE, DETAIL_TITLE_CENTER)
    font = fonts.get(DETAIL_TEXT_SIZE)
    y = DETAIL_TEXT_Y
    for line in wrap_words(font, text, DETAIL_TEXT_W):
        surface.blit(font.render(line, False, TEXT_COLOR), (DETAIL_TEXT_X, y))
        y += DETAIL_TEXT_SIZE + DETAIL_LINE_GAP
