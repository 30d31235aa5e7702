"""
legalhub.actions – server actions bound to the feature forms.

Submodules
----------
schemas    Form validation schemas (non-empty / minimum-length checks).
states     Tagged success/error results handed to the pages.
handlers   One async handler per feature: validate → run flow → shape state.
"""

from .handlers import (
    handle_chat,
    handle_generate_agreement,
    handle_get_news,
    handle_simplify_text,
    handle_summarize_markdown,
    handle_transliterate,
    handle_verify_fact,
)
from .states import ActionState

__all__ = [
    "ActionState",
    "handle_chat",
    "handle_generate_agreement",
    "handle_get_news",
    "handle_simplify_text",
    "handle_summarize_markdown",
    "handle_transliterate",
    "handle_verify_fact",
]
