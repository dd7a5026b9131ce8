"""Gemini client adapter using stdlib urllib."""
from __future__ import annotations

import json
import urllib.error
import urllib.request

from duel_dex.client import DexFormatError
from duel_dex.parsers import extract_text

DEFAULT_PROMPT = (
    "Give a very brief, 1-sentence Pokedex entry for {name}, similar to what "
    "would be found in a Gen 1 Pokémon game. Focus on a key characteristic."
)


def _is_json(data: bytes) -> bool:
    try:
        json.loads(data.decode("utf-8", errors="replace"))
    except json.JSONDecodeError:
        return False
    return True


class GeminiClient:
    """TextClient for the Gemini ``generateContent`` endpoint.

    Uses POST ``{base_url}/v1beta/models/{model}:generateContent`` with a
    single user turn built from ``prompt``.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.0-flash",
        base_url: str = "https://generativelanguage.googleapis.com",
        timeout: float = 10.0,
        prompt: str = DEFAULT_PROMPT,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._prompt = prompt

    def build_request(self, name: str) -> urllib.request.Request:
        payload = json.dumps({
            "contents": [
                {"role": "user", "parts": [{"text": self._prompt.format(name=name)}]},
            ],
        }).encode("utf-8")
        return urllib.request.Request(
            f"{self._base_url}/v1beta/models/{self._model}:generateContent"
            f"?key={self._api_key}",
            data=payload,
            headers={"Content-Type": "application/json"},
            method="POST",
        )

    def describe(self, name: str) -> str:
        """Send the prompt and return the cleaned entry text.

        An HTTP error status that still carries a JSON body (the API's own
        error object) counts as a bad answer, not a transport failure.
        """
        req = self.build_request(name)
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as resp:
                raw = resp.read().decode("utf-8")
        except urllib.error.HTTPError as exc:
            if not _is_json(exc.read()):
                raise
            raise DexFormatError(f"HTTP {exc.code} with error body") from exc
        try:
            body = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DexFormatError(f"response is not JSON: {exc}") from exc
        return extract_text(body)
