"""Descriptive-text client protocol and mock implementation."""
from __future__ import annotations

import time
from typing import Callable, Protocol, runtime_checkable


class DexError(Exception):
    """Exception raised by descriptive-text client operations."""


class DexFormatError(DexError):
    """The service answered, but not with text we can show."""


@runtime_checkable
class TextClient(Protocol):
    """Protocol for descriptive-text providers.

    Implementations make blocking calls (invoked inside a thread pool worker).
    Any exception may be raised on failure -- the fetcher catches all
    exceptions and turns them into a user-visible error string.
    """

    def describe(self, name: str) -> str:
        """Return a short descriptive entry for the named combatant."""
        ...


class MockClient:
    """Deterministic client for testing.

    Conforms to the TextClient protocol. Supports configurable response
    mappings, latency simulation, and error injection.

    Args:
        responses: A dict mapping names to entries, OR a callable
            ``(name) -> str`` for dynamic responses.
        latency: Simulated delay in seconds before returning (default 0.0).
        error_exception: Raised on every call when given.
    """

    def __init__(
        self,
        responses: dict[str, str] | Callable[[str], str],
        latency: float = 0.0,
        error_exception: BaseException | None = None,
    ) -> None:
        self._responses = responses
        self._latency = latency
        self._error_exception = error_exception
        self.calls: list[str] = []

    def describe(self, name: str) -> str:
        """Return a mock entry, optionally simulating latency and errors."""
        self.calls.append(name)
        if self._latency > 0.0:
            time.sleep(self._latency)
        if self._error_exception is not None:
            raise self._error_exception
        if callable(self._responses) and not isinstance(self._responses, dict):
            return self._responses(name)
        try:
            return self._responses[name]
        except KeyError:
            raise DexFormatError(f"no entry for {name!r}") from None
