"""
legalhub.ai.simplifier – legal lingo simplifier flow.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from .flow import Flow
from .generator import TextGenerator
from .prompts import SIMPLIFY_LEGAL_TEXT_PROMPT


class SimplifyLegalTextInput(BaseModel):
    legal_text: str = Field(description="The legal text to simplify.")


class SimplifyLegalTextOutput(BaseModel):
    simplified_text: str = Field(description="The text rewritten in plain language.")


simplify_legal_text_flow: Flow[SimplifyLegalTextInput, SimplifyLegalTextOutput] = Flow(
    name="simplifyLegalTextFlow",
    prompt=SIMPLIFY_LEGAL_TEXT_PROMPT,
    input_model=SimplifyLegalTextInput,
    output_model=SimplifyLegalTextOutput,
)


async def simplify_legal_text(
    payload: SimplifyLegalTextInput, generator: TextGenerator
) -> SimplifyLegalTextOutput:
    return await simplify_legal_text_flow.run(payload, generator)
