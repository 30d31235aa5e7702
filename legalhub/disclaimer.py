"""
legalhub.disclaimer – footer notice shown under every page and AI result.
"""
from __future__ import annotations

_DISCLAIMER = (
    "LegalHub produces AI-generated drafts and explanations for general "
    "awareness only. They are not legal advice and may contain errors. "
    "Always have documents reviewed by a qualified legal professional "
    "before relying on them."
)


def get_disclaimer() -> str:
    """Return the standard disclaimer string."""
    return _DISCLAIMER
