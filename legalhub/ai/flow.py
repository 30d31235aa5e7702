"""
legalhub.ai.flow – prompt flows.

A Flow binds a name, an input model, an output model and a prompt template.
Running a flow renders the template from the validated input, asks the text
generator for JSON matching the output model's schema and parses the answer
back into that model.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from .generator import GenerationError, TextGenerator

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)

_RESPONSE_CONTRACT = (
    "\n\nRespond with a single JSON object and nothing else. "
    "It must conform to this JSON schema:\n{schema}"
)


class Flow(Generic[InputT, OutputT]):
    """
    A named prompt executed against a TextGenerator.

    ``prompt`` is a ``str.format`` template whose placeholders are the input
    model's field names (literal braces must be doubled).  ``fast_path`` may
    return an output directly for inputs that need no model call; returning
    None falls through to the generator.
    """

    def __init__(
        self,
        name: str,
        prompt: str,
        input_model: type[InputT],
        output_model: type[OutputT],
        fast_path: Callable[[InputT], OutputT | None] | None = None,
    ) -> None:
        self.name = name
        self.prompt = prompt
        self.input_model = input_model
        self.output_model = output_model
        self.fast_path = fast_path

    def render(self, payload: InputT) -> str:
        """Fill the template and append the JSON response contract."""
        schema = json.dumps(self.output_model.model_json_schema(), indent=2)
        return self.prompt.format(**payload.model_dump()) + _RESPONSE_CONTRACT.format(
            schema=schema
        )

    async def run(
        self, payload: InputT | Mapping[str, Any], generator: TextGenerator
    ) -> OutputT:
        data = (
            payload
            if isinstance(payload, self.input_model)
            else self.input_model.model_validate(payload)
        )

        if self.fast_path is not None:
            shortcut = self.fast_path(data)
            if shortcut is not None:
                logger.debug("Flow %s answered from fast path", self.name)
                return shortcut

        logger.info("Running flow %s", self.name)
        raw = await generator.generate(self.render(data), json_output=True)

        try:
            return self.output_model.model_validate_json(_strip_code_fence(raw))
        except ValidationError as exc:
            logger.warning("Flow %s returned malformed output: %s", self.name, exc)
            raise GenerationError(
                "The AI service returned a response in an unexpected format."
            ) from exc

    async def __call__(
        self, payload: InputT | Mapping[str, Any], generator: TextGenerator
    ) -> OutputT:
        return await self.run(payload, generator)


def _strip_code_fence(text: str) -> str:
    cleaned = text.strip()
    if cleaned.startswith("```"):
        fence = "```"
        start = cleaned.find(fence)
        end = cleaned.rfind(fence)
        if end > start:
            block = cleaned[start + len(fence): end].lstrip()
            if block.startswith("json"):
                block = block[len("json"):]
            return block.strip()
    return cleaned
