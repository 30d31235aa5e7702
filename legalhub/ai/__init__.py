"""legalhub.ai – text generation, prompt flows and transliteration."""
from .chatbot import chat
from .drafting import generate_rent_agreement
from .flow import Flow
from .generator import GeminiGenerator, GenerationError, TextGenerator
from .news import get_legal_news
from .simplifier import simplify_legal_text
from .summarizer import summarize_markdown
from .transliteration import Transliterator, TransliterationError
from .verification import verify_legal_news_fact

__all__ = [
    "Flow",
    "TextGenerator",
    "GeminiGenerator",
    "GenerationError",
    "Transliterator",
    "TransliterationError",
    "chat",
    "generate_rent_agreement",
    "get_legal_news",
    "simplify_legal_text",
    "summarize_markdown",
    "verify_legal_news_fact",
]
