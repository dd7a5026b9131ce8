"""Battle screen: sprites, names, health bars."""
from __future__ import annotations

import pygame

from duel_battle import BattleView, Side

from game.assets import FontBook
from ui.constants import (
    BACK_HP_BAR,
    BACK_NAME_END_X,
    BACK_NAME_Y,
    FRONT_HP_BAR,
    FRONT_NAME_END_X,
    FRONT_NAME_X,
    FRONT_NAME_Y,
    HP_BAR_H,
    HP_BAR_W,
    HP_BORDER,
    HP_FILL,
    NAME_TEXT_SIZE,
    TEXT_COLOR,
)


def fit_text(font: pygame.font.Font, text: str, max_w: int) -> str:
    """Drop trailing characters until ``text`` fits in ``max_w`` pixels."""
    while text and font.size(text)[0] > max_w:
        text = text[:-1]
    return text


def draw_hp_bar(surface: pygame.Surface, x: int, y: int, value: float) -> None:
    value = max(0.0, min(1.0, value))
    fill_w = int(round(HP_BAR_W * value))
    if fill_w > 0:
        pygame.draw.rect(surface, HP_FILL, (x, y, fill_w, HP_BAR_H), border_radius=2)
    pygame.draw.rect(surface, HP_BORDER, (x, y, HP_BAR_W, HP_BAR_H), 1, border_radius=2)


def draw_sprites(surface: pygame.Surface, view: BattleView) -> None:
    # Back first so the front combatant overlaps it.
    for side in (Side.BACK, Side.FRONT):
        sv = view[side]
        if sv.visible and sv.sprite is not None:
            x, y = sv.position
            surface.blit(sv.sprite, (round(x), round(y)))


def draw_names(surface: pygame.Surface, view: BattleView, fonts: FontBook) -> None:
    font = fonts.get(NAME_TEXT_SIZE)
    front = view[Side.FRONT].name
    if front:
        text = fit_text(font, front, FRONT_NAME_END_X - FRONT_NAME_X)
        surface.blit(font.render(text, False, TEXT_COLOR), (FRONT_NAME_X, FRONT_NAME_Y))
    back = view[Side.BACK].name
    if back:
        img = font.render(back, False, TEXT_COLOR)
        surface.blit(img, img.get_rect(topright=(BACK_NAME_END_X, BACK_NAME_Y)))


def draw_health(surface: pygame.Surface, view: BattleView) -> None:
    draw_hp_bar(surface, *FRONT_HP_BAR, view[Side.FRONT].health)
    draw_hp_bar(surface, *BACK_HP_BAR, view[Side.BACK].health)


def draw_battle(surface: pygame.Surface, view: BattleView, fonts: FontBook) -> None:
    draw_sprites(surface, view)
    draw_names(surface, view, fonts)
    draw_health(surface, view)
