"""Background fetcher for descriptive text.

Runs at most one client call at a time on a thread pool and hands the
finished result back to the tick loop through ``poll()``. Failures never
escape: they become one of the user-visible error strings below.
"""
from __future__ import annotations

import sys
import time
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass

from duel_dex.client import DexFormatError, TextClient
from duel_dex.config import DexConfig

FORMAT_ERROR_TEXT = "ERROR: Could not fetch entry."
NETWORK_ERROR_TEXT = "ERROR: Network or API issue."


@dataclass(frozen=True)
class DexResult:
    """A finished fetch. ``ok`` is False when ``text`` is an error string."""

    name: str
    text: str
    ok: bool
    latency: float = 0.0


@dataclass(frozen=True)
class _PendingFetch:
    name: str
    future: Future[str]
    submitted_at: float


class DexFetcher:
    """Single-flight descriptive-text fetcher.

    ``request`` refuses while a fetch is in flight, so a screen that is
    entered twice before the first reply lands never issues a second call.
    """

    def __init__(self, client: TextClient, config: DexConfig | None = None) -> None:
        self.config: DexConfig = config if config is not None else DexConfig()
        self._client = client
        self._executor = ThreadPoolExecutor(
            max_workers=self.config.thread_pool_size,
        )
        self._pending: _PendingFetch | None = None
        self._shutdown: bool = False

    @property
    def pending(self) -> bool:
        return self._pending is not None

    @property
    def pending_name(self) -> str | None:
        return self._pending.name if self._pending is not None else None

    def request(self, name: str) -> bool:
        """Start fetching ``name``. Returns False if a fetch is already pending."""
        if self._shutdown or self._pending is not None:
            return False
        future: Future[str] = self._executor.submit(self._client.describe, name)
        self._pending = _PendingFetch(
            name=name, future=future, submitted_at=time.monotonic(),
        )
        return True

    def poll(self) -> DexResult | None:
        """Return the finished result once, or None while pending or idle."""
        pf = self._pending
        if pf is None or not pf.future.done():
            return None
        self._pending = None

        latency = time.monotonic() - pf.submitted_at
        exc = pf.future.exception()
        if exc is None:
            return DexResult(pf.name, pf.future.result(), True, latency)

        if isinstance(exc, DexFormatError):
            text = FORMAT_ERROR_TEXT
        else:
            text = NETWORK_ERROR_TEXT
        print(
            f"duel-dex: fetch for {pf.name!r} failed: {type(exc).__name__}: {exc}",
            file=sys.stderr,
        )
        return DexResult(pf.name, text, False, latency)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the pending fetch finishes. Returns False on timeout."""
        pf = self._pending
        if pf is None:
            return True
        try:
            pf.future.exception(timeout=timeout)
        except FutureTimeoutError:
            return False
        return True

    def shutdown(self) -> None:
        """Shut down the thread pool and discard the pending fetch.

        After shutdown, ``request`` always returns False.
        """
        self._shutdown = True
        self._executor.shutdown(wait=False, cancel_futures=True)
        self._pending = None
