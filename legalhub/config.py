"""
legalhub.config – environment-driven application settings.

Values are read from a ``.env`` file (if present) and then from the process
environment.  The Gemini API key may be supplied as ``GEMINI_API_KEY`` or
``GOOGLE_API_KEY``; a missing key does not stop the app from starting, it
only makes generation calls fail with a readable error.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_TRANSLITERATION_URL = "https://inputtools.google.com/request"
DEFAULT_TIMEOUT_SECONDS = 60.0


@dataclass(frozen=True)
class Settings:
    """Immutable settings snapshot used to build the service singletons."""
    gemini_api_key:             str | None
    gemini_model:               str = DEFAULT_GEMINI_MODEL
    gemini_api_base:            str | None = None
    generation_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    transliteration_url:        str = DEFAULT_TRANSLITERATION_URL
    log_level:                  str = "INFO"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Ignoring non-numeric %s=%r; using %s", name, raw, default
        )
        return default


def load_settings() -> Settings:
    """Load a .env file (without overriding real env vars) and build Settings."""
    load_dotenv()

    api_key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or None

    return Settings(
        gemini_api_key=api_key,
        gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        gemini_api_base=os.getenv("GEMINI_API_BASE") or None,
        generation_timeout_seconds=_float_env(
            "GENERATION_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS
        ),
        transliteration_url=os.getenv("TRANSLITERATION_URL", DEFAULT_TRANSLITERATION_URL),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str) -> None:
    """Configure root logging once for the web process."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
