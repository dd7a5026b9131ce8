"""duel-dex - Descriptive-text provider for the battle clock."""
from __future__ import annotations

from duel_dex.client import DexError, DexFormatError, MockClient, TextClient
from duel_dex.config import DexConfig
from duel_dex.fetcher import (
    FORMAT_ERROR_TEXT,
    NETWORK_ERROR_TEXT,
    DexFetcher,
    DexResult,
)
from duel_dex.gemini import DEFAULT_PROMPT, GeminiClient
from duel_dex.parsers import clean_entry, extract_text, strip_code_fences

__all__ = [
    "DEFAULT_PROMPT",
    "DexConfig",
    "DexError",
    "DexFetcher",
    "DexFormatError",
    "DexResult",
    "FORMAT_ERROR_TEXT",
    "GeminiClient",
    "MockClient",
    "NETWORK_ERROR_TEXT",
    "TextClient",
    "clean_entry",
    "extract_text",
    "strip_code_fences",
]
