"""Day-of-week screen."""
from __future__ import annotations

from datetime import datetime

import pygame

from game.assets import FontBook
from ui.constants import BOX_FILL, DAY_BOX, DAY_LABEL_SIZE, DAY_TEXT_SIZE, DAYS, TEXT_COLOR
from ui.hud import draw_centered


def draw_day(surface: pygame.Surface, fonts: FontBook, wall: datetime) -> None:
    x, y, w, h = DAY_BOX
    pygame.draw.rect(surface, BOX_FILL, DAY_BOX, border_radius=2)
    pygame.draw.rect(surface, TEXT_COLOR, DAY_BOX, 1, border_radius=2)
    draw_centered(
        surface, fonts.get(DAY_LABEL_SIZE), "DAY:",
        (x + w // 2, y + DAY_LABEL_SIZE // 2 + 2),
    )
    draw_centered(
        surface, fonts.get(DAY_TEXT_SIZE), DAYS[wall.weekday()],
        (x + w // 2, y + h - DAY_TEXT_SIZE // 2 - 2),
    )
