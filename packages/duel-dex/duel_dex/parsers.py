"""Response parsers for descriptive-text output."""
from __future__ import annotations

import re
from typing import Any

from duel_dex.client import DexFormatError

# Pattern to match ```text ... ``` or ``` ... ``` code fences.
_CODE_FENCE_RE = re.compile(
    r"^\s*```(?:\w+)?\s*\n?(.*?)\n?\s*```\s*$",
    re.DOTALL,
)
_WHITESPACE_RE = re.compile(r"\s+")


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences wrapping the text.

    Returns the inner content if fences are found, otherwise returns the
    original text unchanged.
    """
    match = _CODE_FENCE_RE.match(text)
    if match:
        return match.group(1)
    return text


def clean_entry(text: str) -> str:
    """Flatten a model reply into one line of words for word wrapping."""
    cleaned = strip_code_fences(text)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def extract_text(body: Any) -> str:
    """Pull ``candidates[0].content.parts[0].text`` out of a generateContent reply.

    Raises:
        DexFormatError: If the body does not have that shape or the text is empty.
    """
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise DexFormatError(f"unexpected response structure: {exc!r}") from exc
    if not isinstance(text, str):
        raise DexFormatError(f"expected text, got {type(text).__name__}")
    cleaned = clean_entry(text)
    if not cleaned:
        raise DexFormatError("empty entry text")
    return cleaned
