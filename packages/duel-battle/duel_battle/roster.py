"""Combatant roster: loaded once, read-only afterwards."""
from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Any, Iterable, Iterator

from duel_battle.types import Combatant


class RosterError(ValueError):
    """Raised when a roster source cannot be turned into combatants."""


class Roster:
    """Ordered, immutable collection of combatants.

    Selection is by name: two records with the same name count as the
    same combatant.
    """

    def __init__(self, combatants: Iterable[Combatant]) -> None:
        self._combatants: tuple[Combatant, ...] = tuple(combatants)

    @classmethod
    def from_json(cls, data: Any) -> Roster:
        """Build from a decoded JSON sequence or mapping of records.

        Each record needs a non-empty ``name`` and ``file``. A mapping's
        keys are ignored; its values are taken in insertion order.
        """
        if isinstance(data, dict):
            records = list(data.values())
        elif isinstance(data, list):
            records = data
        else:
            raise RosterError(
                f"roster must be a list or object, got {type(data).__name__}"
            )

        combatants: list[Combatant] = []
        for i, record in enumerate(records):
            if not isinstance(record, dict):
                raise RosterError(f"record {i} is not an object")
            name = record.get("name")
            file = record.get("file")
            if not isinstance(name, str) or not name:
                raise RosterError(f"record {i} has no name")
            if not isinstance(file, str) or not file:
                raise RosterError(f"record {i} ({name}) has no file")
            combatants.append(Combatant(name=name, file=file))
        return cls(combatants)

    @classmethod
    def load(cls, path: str | Path) -> Roster:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise RosterError(f"cannot read roster {path}: {exc}") from exc
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise RosterError(f"roster {path} is not valid JSON: {exc}") from exc
        return cls.from_json(data)

    def __len__(self) -> int:
        return len(self._combatants)

    def __iter__(self) -> Iterator[Combatant]:
        return iter(self._combatants)

    def __getitem__(self, index: int) -> Combatant:
        return self._combatants[index]

    def names(self) -> set[str]:
        return {c.name for c in self._combatants}

    @property
    def can_battle(self) -> bool:
        return len(self.names()) >= 2

    def draw_excluding(self, rng: random.Random, name: str) -> Combatant:
        """Uniform draw over every combatant not called ``name``."""
        candidates = [c for c in self._combatants if c.name != name]
        if not candidates:
            raise RosterError(f"no combatant other than {name!r}")
        return rng.choice(candidates)

    def draw_pair(self, rng: random.Random) -> tuple[Combatant, Combatant]:
        """Two independent uniform draws, redrawing the second until they differ."""
        if not self.can_battle:
            raise RosterError("a battle needs at least two distinct combatants")
        first = rng.choice(self._combatants)
        second = rng.choice(self._combatants)
        while second.name == first.name:
            second = rng.choice(self._combatants)
        return first, second
