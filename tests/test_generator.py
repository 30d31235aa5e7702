from __future__ import annotations

from types import SimpleNamespace

import httpx
import pytest
from google.genai import errors as genai_errors
from google.genai import types

from legalhub.ai.generator import GeminiGenerator, GenerationError


class StubModels:
    """Stands in for ``client.aio.models``; returns or raises ``result``."""

    def __init__(self, result) -> None:
        self.result = result
        self.calls: list[dict] = []

    async def generate_content(self, *, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result


def _generator(result, api_key: str | None = "test-key") -> tuple[GeminiGenerator, StubModels]:
    models = StubModels(result)
    client = SimpleNamespace(aio=SimpleNamespace(models=models))
    return GeminiGenerator(api_key=api_key, model="gemini-test", client=client), models


def _response(*texts: str) -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(role="model", parts=[types.Part(text=t) for t in texts])
            )
        ]
    )


@pytest.mark.asyncio
async def test_generate_returns_joined_parts_and_requests_json():
    generator, models = _generator(_response('{"summary": ', '"short"}'))

    text = await generator.generate("Summarize this", json_output=True)

    assert text == '{"summary": "short"}'
    call = models.calls[0]
    assert call["model"] == "gemini-test"
    assert call["contents"] == "Summarize this"
    assert call["config"].response_mime_type == "application/json"


@pytest.mark.asyncio
async def test_plain_text_request_has_no_config():
    generator, models = _generator(_response("hello"))

    assert await generator.generate("hi") == "hello"
    assert models.calls[0]["config"] is None


@pytest.mark.asyncio
async def test_missing_api_key_fails_without_a_request():
    generator, models = _generator(_response("unused"), api_key=None)

    with pytest.raises(GenerationError, match="GEMINI_API_KEY"):
        await generator.generate("hi")
    assert models.calls == []


@pytest.mark.asyncio
async def test_api_error_uses_service_message():
    error = genai_errors.ClientError(
        400,
        {"error": {"code": 400, "message": "API key not valid.", "status": "INVALID_ARGUMENT"}},
    )
    generator, _ = _generator(error)

    with pytest.raises(GenerationError, match="API key not valid."):
        await generator.generate("hi")


@pytest.mark.asyncio
async def test_api_error_without_message_reports_status():
    generator, _ = _generator(genai_errors.ServerError(503, {}))

    with pytest.raises(GenerationError, match="HTTP 503"):
        await generator.generate("hi")


@pytest.mark.asyncio
async def test_blocked_prompt_is_reported():
    blocked = types.GenerateContentResponse(
        prompt_feedback=types.GenerateContentResponsePromptFeedback(block_reason="SAFETY")
    )
    generator, _ = _generator(blocked)

    with pytest.raises(GenerationError, match="SAFETY"):
        await generator.generate("hi")


@pytest.mark.asyncio
async def test_no_candidates_is_an_error():
    generator, _ = _generator(types.GenerateContentResponse(candidates=[]))

    with pytest.raises(GenerationError, match="no candidates"):
        await generator.generate("hi")


@pytest.mark.asyncio
async def test_timeout_is_reported():
    generator, _ = _generator(httpx.ReadTimeout("slow"))

    with pytest.raises(GenerationError, match="timed out"):
        await generator.generate("hi")


@pytest.mark.asyncio
async def test_transport_failure_is_wrapped():
    generator, _ = _generator(httpx.ConnectError("connection refused"))

    with pytest.raises(GenerationError, match="Could not reach the AI service"):
        await generator.generate("hi")
