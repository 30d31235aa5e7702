"""
legalhub.ai.verification – legal news "truth filter" flow.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from .flow import Flow
from .generator import TextGenerator
from .prompts import VERIFY_NEWS_FACT_PROMPT


class VerifyLegalNewsFactInput(BaseModel):
    news_headline: str = Field(description="The legal news headline to verify.")


class VerifyLegalNewsFactOutput(BaseModel):
    is_verified:       bool      = Field(description="Whether the headline is accurate.")
    explanation:       str       = Field(description="Why the headline is or is not accurate.")
    relevant_sections: list[str] = Field(
        default_factory=list,
        description="Statutes, sections or judgments relevant to the verdict.",
    )


verify_legal_news_fact_flow: Flow[VerifyLegalNewsFactInput, VerifyLegalNewsFactOutput] = Flow(
    name="verifyLegalNewsFactFlow",
    prompt=VERIFY_NEWS_FACT_PROMPT,
    input_model=VerifyLegalNewsFactInput,
    output_model=VerifyLegalNewsFactOutput,
)


async def verify_legal_news_fact(
    payload: VerifyLegalNewsFactInput, generator: TextGenerator
) -> VerifyLegalNewsFactOutput:
    return await verify_legal_news_fact_flow.run(payload, generator)
