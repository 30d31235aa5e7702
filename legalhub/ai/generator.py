"""
legalhub.ai.generator – generative-text service interface and Gemini client.

Flows depend only on the TextGenerator interface, so the backing model can be
swapped (or faked in tests) without touching actions or pages.
GeminiGenerator calls the Gemini API through the ``google-genai`` SDK.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 60.0


class GenerationError(RuntimeError):
    """Raised when the generative-text service cannot produce usable text."""


class TextGenerator(ABC):
    """A service that turns a prompt into text."""

    @abstractmethod
    async def generate(self, prompt: str, *, json_output: bool = False) -> str:
        """
        Return the model's text response for ``prompt``.

        When ``json_output`` is set the service is asked to answer with a
        single JSON document.
        """


class GeminiGenerator(TextGenerator):
    """
    Gemini ``generate_content`` client.

    One request per call, no retries.  Every failure mode (missing key,
    API error, transport error, blocked prompt, empty candidate list) is
    raised as GenerationError with a message fit for the UI.

    The SDK client is built on first use, so the app can start without a
    key; pass ``client`` to supply a ready-made one.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str,
        api_base: str | None = None,
        timeout_seconds: float = REQUEST_TIMEOUT_SECONDS,
        client: genai.Client | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.api_base = api_base
        self.timeout_seconds = timeout_seconds
        self._client = client

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            # HttpOptions.timeout is in milliseconds
            options: dict = {"timeout": int(self.timeout_seconds * 1000)}
            if self.api_base:
                options["base_url"] = self.api_base
            self._client = genai.Client(
                api_key=self.api_key, http_options=types.HttpOptions(**options)
            )
        return self._client

    async def generate(self, prompt: str, *, json_output: bool = False) -> str:
        if not self.api_key:
            raise GenerationError(
                "The AI service is not configured. Set GEMINI_API_KEY and restart."
            )

        config = (
            types.GenerateContentConfig(response_mime_type="application/json")
            if json_output
            else None
        )

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model, contents=prompt, config=config
            )
        except genai_errors.APIError as exc:
            message = exc.message or f"AI service returned HTTP {exc.code}."
            logger.warning(
                "Gemini request failed (model=%s, status=%s): %s",
                self.model, exc.code, message,
            )
            raise GenerationError(message) from exc
        except httpx.TimeoutException as exc:
            raise GenerationError("The AI service timed out. Please try again.") from exc
        except httpx.HTTPError as exc:
            raise GenerationError(f"Could not reach the AI service: {exc}") from exc

        return self._extract_text(response)

    @staticmethod
    def _extract_text(response: types.GenerateContentResponse) -> str:
        feedback = response.prompt_feedback
        if feedback is not None and feedback.block_reason:
            reason = getattr(feedback.block_reason, "value", feedback.block_reason)
            raise GenerationError(f"The request was blocked by the AI service ({reason}).")

        if not response.candidates:
            raise GenerationError("The AI service returned no candidates.")

        content = response.candidates[0].content
        parts = (content.parts if content is not None else None) or []
        return "".join(part.text or "" for part in parts)
