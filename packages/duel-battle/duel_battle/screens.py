"""Screen controller: battle, day indicator and detail modes."""
from __future__ import annotations

import sys

from duel_dex import DexFetcher

from duel_battle.machine import BattleMachine, TurnRecord
from duel_battle.types import ScreenMode, Side

LOADING_TEXT = "Loading entry..."


class ScreenController:
    """Routes the single user trigger according to the current screen.

    In BATTLE the trigger forces a turn attempt. In SECONDARY_INFO it opens
    DETAIL and starts a text fetch. In DETAIL it goes back to BATTLE. Time
    only moves the screen once: DETAIL returns to BATTLE on its own a
    fixed while after its text has loaded.
    """

    def __init__(self, machine: BattleMachine, fetcher: DexFetcher | None = None) -> None:
        self.machine = machine
        self.fetcher = fetcher
        self.mode: ScreenMode = ScreenMode.BATTLE
        self.detail_name: str | None = None
        self.detail_text: str = LOADING_TEXT
        self.loaded_ms: float | None = None

    @property
    def detail_display_ms(self) -> float:
        return self.machine.config.detail_display_ms

    def detail_target(self) -> str | None:
        """Name the detail screen describes: the front combatant, or the back
        one when the front is the winner kept from the previous battle."""
        session = self.machine.session
        side = Side.BACK if session.retained_side is Side.FRONT else Side.FRONT
        combatant = session.combatant(side)
        return combatant.name if combatant is not None else None

    # --- Inputs ---

    def activate(self, now: float) -> TurnRecord | None:
        """Primary trigger (a click). Returns the turn it forced, if any."""
        if self.mode is ScreenMode.BATTLE:
            return self.machine.click(now)
        if self.mode is ScreenMode.SECONDARY_INFO:
            self._open_detail()
        else:
            self._close_detail()
        return None

    def cycle(self) -> ScreenMode:
        """Secondary trigger: toggle between the battle and day screens."""
        if self.mode is ScreenMode.BATTLE:
            self.mode = ScreenMode.SECONDARY_INFO
        elif self.mode is ScreenMode.SECONDARY_INFO:
            self.mode = ScreenMode.BATTLE
        return self.mode

    def _open_detail(self) -> None:
        self.mode = ScreenMode.DETAIL
        self.detail_text = LOADING_TEXT
        self.loaded_ms = None
        self.detail_name = self.detail_target()
        self._request_fetch()

    def _close_detail(self) -> None:
        self.mode = ScreenMode.BATTLE
        self.detail_text = LOADING_TEXT
        self.detail_name = None
        self.loaded_ms = None

    def _request_fetch(self) -> None:
        if self.fetcher is None or self.detail_name is None:
            return
        # A fetch still in flight from an earlier visit is left alone; its
        # result is discarded on arrival and this name is asked for then.
        self.fetcher.request(self.detail_name)

    # --- Per tick ---

    def tick(self, now: float) -> None:
        self._harvest(now)
        if (
            self.mode is ScreenMode.DETAIL
            and self.loaded_ms is not None
            and now - self.loaded_ms >= self.detail_display_ms
        ):
            self._close_detail()

    def _harvest(self, now: float) -> None:
        if self.fetcher is None:
            return
        result = self.fetcher.poll()
        if result is None:
            return
        if self.mode is not ScreenMode.DETAIL or self.loaded_ms is not None:
            return
        if result.name != self.detail_name:
            print(
                f"duel-battle: discarding stale entry for {result.name!r}",
                file=sys.stderr,
            )
            self._request_fetch()
            return
        self.detail_text = result.text
        self.loaded_ms = now
