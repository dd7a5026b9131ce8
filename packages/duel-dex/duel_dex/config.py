"""Descriptive-text configuration dataclass."""
from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class DexConfig:
    """Immutable configuration for the descriptive-text fetcher.

    Attributes:
        thread_pool_size: ThreadPoolExecutor max workers.
        model: Model name passed to the HTTP client.
        base_url: Service root URL.
        timeout: Seconds before the HTTP request gives up.
        api_key_env: Environment variable holding the API key.
    """

    thread_pool_size: int = 1
    model: str = "gemini-2.0-flash"
    base_url: str = "https://generativelanguage.googleapis.com"
    timeout: float = 10.0
    api_key_env: str = "DUEL_DEX_API_KEY"

    def api_key(self) -> str:
        """The API key from the environment, or an empty string."""
        return os.environ.get(self.api_key_env, "")
