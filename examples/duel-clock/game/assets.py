"""Image, font and sprite loading from the assets directory.

Layout::

    assets/
      bg.png overlay.png font.ttf roster.json
      front/<file>   back/<file>

Anything missing is reported once and skipped.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pygame

from duel_battle import BattleConfig, Combatant, Side


def load_image(path: Path, size: tuple[int, int] | None = None) -> pygame.Surface | None:
    if not path.exists():
        print(f"duel-clock: missing image {path}", file=sys.stderr)
        return None
    try:
        image = pygame.image.load(str(path)).convert_alpha()
    except pygame.error as exc:
        print(f"duel-clock: cannot load {path}: {exc}", file=sys.stderr)
        return None
    if size is not None and image.get_size() != size:
        image = pygame.transform.scale(image, size)
    return image


class FontBook:
    """Fonts by pixel size, from the bundled bitmap font or the system font."""

    def __init__(self, path: Path) -> None:
        self._path = path if path.exists() else None
        if self._path is None:
            print(f"duel-clock: missing font {path}, using system font", file=sys.stderr)
        self._cache: dict[int, pygame.font.Font] = {}

    def get(self, size: int) -> pygame.font.Font:
        font = self._cache.get(size)
        if font is None:
            if self._path is not None:
                font = pygame.font.Font(str(self._path), size)
            else:
                font = pygame.font.SysFont("monospace", size + 2)
            self._cache[size] = font
        return font


class SpriteDirectory:
    """SpriteProvider backed by ``front/`` and ``back/`` image folders.

    Raises ``FileNotFoundError`` for a missing file so the battle keeps
    the side off-screen instead of drawing nothing in its place.
    """

    def __init__(self, root: Path, config: BattleConfig) -> None:
        self._root = root
        self._config = config

    def path_for(self, side: Side, combatant: Combatant) -> Path:
        return self._root / side.value / combatant.file

    def load(self, side: Side, combatant: Combatant) -> pygame.Surface:
        path = self.path_for(side, combatant)
        if not path.exists():
            raise FileNotFoundError(str(path))
        image = pygame.image.load(str(path)).convert_alpha()
        size = self._config.layout(side).size
        if image.get_size() != size:
            image = pygame.transform.scale(image, size)
        return image
