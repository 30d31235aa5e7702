"""
legalhub.ai.transliteration – English (Latin script) → Marathi transliteration.

Each run of ASCII letters is sent to the Google Input Tools transliteration
endpoint (input code ``mr-t-i0-und``); digits, punctuation and whitespace are
copied through untouched so the user's layout survives.
At most ``max_concurrency`` word lookups are in flight at once, and a failed
lookup cancels the ones still pending.
"""
from __future__ import annotations

import asyncio
import logging
import re

import httpx

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 10.0
MAX_CONCURRENT_REQUESTS = 8
MARATHI_INPUT_CODE = "mr-t-i0-und"

_WORD_RE = re.compile(r"[A-Za-z]+")


class TransliterationError(RuntimeError):
    """Raised when the transliteration service fails or answers unexpectedly."""


class Transliterator:
    """
    Async client for the Input Tools transliteration API.

    Usage::

        transliterator = Transliterator("https://inputtools.google.com/request")
        await transliterator.transliterate("namaskar, mitra!")   # 'नमस्कार, मित्र!'
    """

    def __init__(
        self,
        url: str,
        timeout_seconds: float = REQUEST_TIMEOUT_SECONDS,
        max_concurrency: int = MAX_CONCURRENT_REQUESTS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.max_concurrency = max_concurrency
        self.timeout = httpx.Timeout(timeout_seconds, connect=timeout_seconds)
        self._transport = transport

    async def transliterate(self, text: str) -> str:
        if not text.strip():
            return ""

        words = list(dict.fromkeys(_WORD_RE.findall(text)))
        if not words:
            return text

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def bounded(client: httpx.AsyncClient, word: str) -> str:
            async with semaphore:
                return await self._transliterate_word(client, word)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                tasks = [asyncio.ensure_future(bounded(client, word)) for word in words]
                try:
                    converted = await asyncio.gather(*tasks)
                except BaseException:
                    # one word failed: stop the rest before the client closes
                    for task in tasks:
                        task.cancel()
                    await asyncio.gather(*tasks, return_exceptions=True)
                    raise
        except httpx.HTTPError as exc:
            logger.warning("Transliteration request failed: %s", exc)
            raise TransliterationError(
                "Could not reach the transliteration service."
            ) from exc

        mapping = dict(zip(words, converted))
        return _WORD_RE.sub(lambda match: mapping[match.group(0)], text)

    async def _transliterate_word(self, client: httpx.AsyncClient, word: str) -> str:
        response = await client.get(
            self.url,
            params={
                "text": word,
                "itc": MARATHI_INPUT_CODE,
                "num": 1,
                "cp": 0,
                "cs": 1,
                "ie": "utf-8",
                "oe": "utf-8",
            },
        )
        if response.status_code != 200:
            raise TransliterationError(
                f"Transliteration service returned HTTP {response.status_code}."
            )
        return self._parse(response, word)

    @staticmethod
    def _parse(response: httpx.Response, word: str) -> str:
        """
        Pick the top candidate out of an Input Tools response::

            ["SUCCESS", [["namaste", ["नमस्ते"], [], {...}]]]
        """
        try:
            payload = response.json()
            status, results = payload[0], payload[1]
        except (ValueError, IndexError, TypeError) as exc:
            raise TransliterationError("Unexpected transliteration response.") from exc

        if status != "SUCCESS":
            raise TransliterationError(f"Transliteration service reported {status!r}.")

        try:
            candidates = results[0][1]
        except (IndexError, TypeError):
            return word
        return candidates[0] if candidates else word
