"""
legalhub.main – FastAPI application entry point.

Initialises the service singletons, registers the page routes (home view and
one view per feature) and the JSON endpoints used by the in-page widgets.

Start the server:
    uvicorn legalhub.main:app --reload --port 8000
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from legalhub.actions import (
    ActionState,
    handle_chat,
    handle_generate_agreement,
    handle_get_news,
    handle_simplify_text,
    handle_summarize_markdown,
    handle_transliterate,
    handle_verify_fact,
)
from legalhub.actions.states import ChatState, LegalNewsState, TransliterationState
from legalhub.ai.generator import GeminiGenerator, TextGenerator
from legalhub.ai.transliteration import Transliterator
from legalhub.config import configure_logging, load_settings
from legalhub.disclaimer import get_disclaimer
from legalhub.features import FEATURES, Feature, get_feature
from legalhub.preview import SAMPLE_MARKDOWN, render_markdown

PACKAGE_DIR = Path(__file__).resolve().parent

settings = load_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="LegalHub – AI-Powered Legal Tools",
    version="1.0.0",
    description=(
        "Legal drafting, legal news verification, plain-language "
        "simplification, chat and markdown summaries backed by Gemini."
    ),
)
app.mount("/static", StaticFiles(directory=PACKAGE_DIR / "static"), name="static")

templates = Jinja2Templates(directory=str(PACKAGE_DIR / "templates"))
templates.env.globals["disclaimer"] = get_disclaimer()
templates.env.globals["features"] = FEATURES

# ---------------------------------------------------------------------------
# Singleton service instances
# ---------------------------------------------------------------------------

text_generator = GeminiGenerator(
    api_key=settings.gemini_api_key,
    model=settings.gemini_model,
    api_base=settings.gemini_api_base,
    timeout_seconds=settings.generation_timeout_seconds,
)
marathi_transliterator = Transliterator(settings.transliteration_url)

if not settings.gemini_api_key:
    logger.warning("GEMINI_API_KEY is not set; AI features will return errors.")


def get_generator() -> TextGenerator:
    return text_generator


def get_transliterator() -> Transliterator:
    return marathi_transliterator

# ---------------------------------------------------------------------------
# Pydantic request / response models
# ---------------------------------------------------------------------------

class ChatRequest(BaseModel):
    message: str = Field(default="", description="The user's chat message")


class MarkdownPreviewRequest(BaseModel):
    markdown_text: str = Field(default="", description="Markdown source to render")


class MarkdownPreviewResponse(BaseModel):
    html: str


class TransliterateRequest(BaseModel):
    text: str = Field(default="", description="English (Latin script) text")

# ---------------------------------------------------------------------------
# Page helpers
# ---------------------------------------------------------------------------

def _render_feature(
    request: Request,
    feature: Feature,
    state: ActionState | None = None,
    values: Mapping[str, Any] | None = None,
    **extra: Any,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        feature.template,
        {"feature": feature, "state": state, "values": dict(values or {}), **extra},
    )


def _feature_or_404(slug: str) -> Feature:
    feature = get_feature(slug)
    if feature is None:
        raise HTTPException(status_code=404, detail=f"Unknown feature: {slug}")
    return feature

# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@app.get("/api/health")
async def health() -> dict[str, str]:
    """Liveness probe: returns {"status": "ok"} when the server is up."""
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
async def home(request: Request) -> HTMLResponse:
    """Home view: one card per feature."""
    return templates.TemplateResponse(request, "home.html", {})


@app.get("/features/{slug}", response_class=HTMLResponse)
async def feature_page(request: Request, slug: str) -> HTMLResponse:
    """Feature view with an empty form (the editor starts with a sample)."""
    feature = _feature_or_404(slug)
    if slug == "markdown-editor":
        return _render_feature(
            request,
            feature,
            values={"markdownText": SAMPLE_MARKDOWN},
            preview_html=render_markdown(SAMPLE_MARKDOWN),
        )
    return _render_feature(request, feature)


@app.post("/features/legal-drafting", response_class=HTMLResponse)
async def legal_drafting(
    request: Request, generator: TextGenerator = Depends(get_generator)
) -> HTMLResponse:
    form = await request.form()
    state = await handle_generate_agreement(form, generator)
    return _render_feature(request, FEATURES["legal-drafting"], state, form)


@app.post("/features/fact-verification", response_class=HTMLResponse)
async def fact_verification(
    request: Request, generator: TextGenerator = Depends(get_generator)
) -> HTMLResponse:
    form = await request.form()
    state = await handle_verify_fact(form, generator)
    return _render_feature(request, FEATURES["fact-verification"], state, form)


@app.post("/features/legal-simplifier", response_class=HTMLResponse)
async def legal_simplifier(
    request: Request, generator: TextGenerator = Depends(get_generator)
) -> HTMLResponse:
    form = await request.form()
    state = await handle_simplify_text(form, generator)
    return _render_feature(request, FEATURES["legal-simplifier"], state, form)


@app.post("/features/markdown-editor", response_class=HTMLResponse)
async def markdown_editor(
    request: Request, generator: TextGenerator = Depends(get_generator)
) -> HTMLResponse:
    form = await request.form()
    state = await handle_summarize_markdown(form, generator)
    markdown_text = form.get("markdownText")
    return _render_feature(
        request,
        FEATURES["markdown-editor"],
        state,
        form,
        preview_html=render_markdown(markdown_text if isinstance(markdown_text, str) else ""),
    )


@app.post("/api/chat", response_model=ChatState, response_model_exclude_none=True)
async def chat_endpoint(
    payload: ChatRequest, generator: TextGenerator = Depends(get_generator)
) -> ChatState:
    """Single-turn reply for the floating chat widget."""
    return await handle_chat(payload.message, generator)


@app.get("/api/news", response_model=LegalNewsState, response_model_exclude_none=True)
async def news_endpoint(generator: TextGenerator = Depends(get_generator)) -> LegalNewsState:
    """Mixed real and AI-generated legal headlines for the truth filter."""
    return await handle_get_news(generator)


@app.post("/api/markdown/preview", response_model=MarkdownPreviewResponse)
async def markdown_preview(payload: MarkdownPreviewRequest) -> MarkdownPreviewResponse:
    return MarkdownPreviewResponse(html=render_markdown(payload.markdown_text))


@app.post(
    "/api/transliterate",
    response_model=TransliterationState,
    response_model_exclude_none=True,
)
async def transliterate_endpoint(
    payload: TransliterateRequest,
    transliterator: Transliterator = Depends(get_transliterator),
) -> TransliterationState:
    return await handle_transliterate(payload.text, transliterator)
