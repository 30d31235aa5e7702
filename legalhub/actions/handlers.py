"""
legalhub.actions.handlers – server actions behind each feature form.

Every handler validates the submitted values, runs the matching flow and
returns a tagged state.  Handlers never raise: validation problems and any
exception from the underlying service are turned into error states.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from legalhub.ai.chatbot import ChatInput, chat
from legalhub.ai.drafting import GenerateRentAgreementInput, generate_rent_agreement
from legalhub.ai.generator import TextGenerator
from legalhub.ai.news import get_legal_news
from legalhub.ai.simplifier import SimplifyLegalTextInput, simplify_legal_text
from legalhub.ai.summarizer import SummarizeMarkdownInput, summarize_markdown
from legalhub.ai.transliteration import Transliterator
from legalhub.ai.verification import VerifyLegalNewsFactInput, verify_legal_news_fact

from .schemas import (
    FactVerificationForm,
    LegalDraftingForm,
    LegalSimplifierForm,
    MarkdownSummarizerForm,
)
from .states import (
    ChatState,
    FactVerificationState,
    LegalDraftingState,
    LegalNewsState,
    LegalSimplifierState,
    MarkdownSummarizerState,
    TransliterationState,
)

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR = "An unexpected error occurred."


def _pick(form: Mapping[str, Any], *names: str) -> dict[str, Any]:
    return {name: form.get(name) for name in names}


def _error_message(exc: Exception, fallback: str) -> str:
    return str(exc).strip() or fallback


# ---------------------------------------------------------------------------
# Legal drafting
# ---------------------------------------------------------------------------

async def handle_generate_agreement(
    form: Mapping[str, Any], generator: TextGenerator
) -> LegalDraftingState:
    try:
        fields = LegalDraftingForm.model_validate(
            _pick(form, "template", "partyDetails", "clauses")
        )
    except ValidationError:
        return LegalDraftingState.failure("All text fields are required.")

    try:
        result = await generate_rent_agreement(
            GenerateRentAgreementInput(
                template=fields.template,
                party_details=fields.party_details,
                clauses=fields.clauses,
            ),
            generator,
        )
    except Exception as exc:
        logger.exception("Agreement generation failed")
        return LegalDraftingState.failure(_error_message(exc, UNEXPECTED_ERROR))

    if result.rent_agreement.strip():
        return LegalDraftingState.success(rent_agreement=result.rent_agreement)
    return LegalDraftingState.failure("Failed to generate agreement.")


# ---------------------------------------------------------------------------
# Fact verification and the news feed
# ---------------------------------------------------------------------------

async def handle_verify_fact(
    form: Mapping[str, Any], generator: TextGenerator
) -> FactVerificationState:
    """Check a legal news headline; the first validation message is surfaced."""
    try:
        fields = FactVerificationForm.model_validate(_pick(form, "newsHeadline"))
    except ValidationError as exc:
        errors = exc.errors()
        return FactVerificationState.failure(errors[0]["msg"] if errors else "Invalid input.")

    try:
        result = await verify_legal_news_fact(
            VerifyLegalNewsFactInput(news_headline=fields.news_headline), generator
        )
    except Exception as exc:
        logger.exception("Headline verification failed")
        return FactVerificationState.failure(
            _error_message(exc, "An unexpected error occurred during verification.")
        )

    if not result.explanation.strip():
        return FactVerificationState.failure("Failed to verify the headline.")
    return FactVerificationState.success(**result.model_dump())


async def handle_get_news(generator: TextGenerator) -> LegalNewsState:
    try:
        news = await get_legal_news(generator)
    except Exception as exc:
        logger.exception("Fetching legal news failed")
        return LegalNewsState.failure(_error_message(exc, "Failed to fetch news."))

    if not news.articles:
        return LegalNewsState.failure("No news articles were returned.")
    return LegalNewsState.success(articles=news.articles)


# ---------------------------------------------------------------------------
# Simplifier, chat, markdown summarizer
# ---------------------------------------------------------------------------

async def handle_simplify_text(
    form: Mapping[str, Any], generator: TextGenerator
) -> LegalSimplifierState:
    try:
        fields = LegalSimplifierForm.model_validate(_pick(form, "legalText"))
    except ValidationError:
        return LegalSimplifierState.failure("The document text cannot be empty.")

    try:
        result = await simplify_legal_text(
            SimplifyLegalTextInput(legal_text=fields.legal_text), generator
        )
    except Exception as exc:
        logger.exception("Text simplification failed")
        return LegalSimplifierState.failure(_error_message(exc, UNEXPECTED_ERROR))

    if result.simplified_text.strip():
        return LegalSimplifierState.success(simplified_text=result.simplified_text)
    return LegalSimplifierState.failure("Failed to simplify the text.")


async def handle_chat(message: str | None, generator: TextGenerator) -> ChatState:
    if not (message or "").strip():
        return ChatState.failure("Message cannot be empty.")

    try:
        result = await chat(ChatInput(message=message), generator)
    except Exception as exc:
        logger.exception("Chat reply failed")
        return ChatState.failure(_error_message(exc, UNEXPECTED_ERROR))

    if result.reply.strip():
        return ChatState.success(reply=result.reply)
    return ChatState.failure("Failed to get a reply.")


async def handle_summarize_markdown(
    form: Mapping[str, Any], generator: TextGenerator
) -> MarkdownSummarizerState:
    try:
        fields = MarkdownSummarizerForm.model_validate(_pick(form, "markdownText"))
    except ValidationError:
        return MarkdownSummarizerState.failure("The markdown text cannot be empty.")

    try:
        result = await summarize_markdown(
            SummarizeMarkdownInput(markdown_text=fields.markdown_text), generator
        )
    except Exception as exc:
        logger.exception("Markdown summarization failed")
        return MarkdownSummarizerState.failure(_error_message(exc, UNEXPECTED_ERROR))

    if result.summary.strip():
        return MarkdownSummarizerState.success(summary=result.summary)
    return MarkdownSummarizerState.failure("Failed to summarize the text.")


# ---------------------------------------------------------------------------
# Marathi transliteration
# ---------------------------------------------------------------------------

async def handle_transliterate(
    text: str | None, transliterator: Transliterator
) -> TransliterationState:
    """Transliterate as the user types; empty input is a successful no-op."""
    try:
        converted = await transliterator.transliterate(text or "")
    except Exception as exc:
        logger.warning("Transliteration failed: %s", exc)
        return TransliterationState.failure(_error_message(exc, "Transliteration failed."))
    return TransliterationState.success(transliteration=converted)
