"""
legalhub.ai.summarizer – markdown summarization flow.

Empty or whitespace-only markdown is answered with an empty summary without
calling the model.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from .flow import Flow
from .generator import TextGenerator
from .prompts import SUMMARIZE_MARKDOWN_PROMPT


class SummarizeMarkdownInput(BaseModel):
    markdown_text: str = Field(description="The markdown text to be summarized.")


class SummarizeMarkdownOutput(BaseModel):
    summary: str = Field(description="A concise summary of the provided markdown text.")


def _empty_document(payload: SummarizeMarkdownInput) -> SummarizeMarkdownOutput | None:
    if not payload.markdown_text.strip():
        return SummarizeMarkdownOutput(summary="")
    return None


summarize_markdown_flow: Flow[SummarizeMarkdownInput, SummarizeMarkdownOutput] = Flow(
    name="summarizeMarkdownFlow",
    prompt=SUMMARIZE_MARKDOWN_PROMPT,
    input_model=SummarizeMarkdownInput,
    output_model=SummarizeMarkdownOutput,
    fast_path=_empty_document,
)


async def summarize_markdown(
    payload: SummarizeMarkdownInput, generator: TextGenerator
) -> SummarizeMarkdownOutput:
    """Summarize a markdown document."""
    return await summarize_markdown_flow.run(payload, generator)
