"""
legalhub.ai.news – legal news feed for the truth-filter page.

The model returns a shuffled mix of real and fabricated legal headlines so
users can practise telling them apart before checking one with the
verification flow.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from .flow import Flow
from .generator import TextGenerator
from .prompts import LEGAL_NEWS_PROMPT


class GetLegalNewsInput(BaseModel):
    pass


class LegalNewsArticle(BaseModel):
    headline: str  = Field(description="One-line news headline.")
    summary:  str  = Field(description="Two-sentence summary of the story.")
    category: str  = Field(default="General", description="Area of law the story belongs to.")
    is_real:  bool = Field(description="True for a real development, false for a fabricated one.")


class GetLegalNewsOutput(BaseModel):
    articles: list[LegalNewsArticle] = Field(
        default_factory=list, description="Mixed real and fabricated legal news items."
    )


get_legal_news_flow: Flow[GetLegalNewsInput, GetLegalNewsOutput] = Flow(
    name="getLegalNewsFlow",
    prompt=LEGAL_NEWS_PROMPT,
    input_model=GetLegalNewsInput,
    output_model=GetLegalNewsOutput,
)


async def get_legal_news(generator: TextGenerator) -> GetLegalNewsOutput:
    """Fetch a fresh batch of real and AI-generated legal headlines."""
    return await get_legal_news_flow.run(GetLegalNewsInput(), generator)
