"""
legalhub.features – registry of the feature cards shown on the home view.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Feature:
    slug:        str
    title:       str
    description: str
    icon:        str
    template:    str


FEATURES: dict[str, Feature] = {
    feature.slug: feature
    for feature in (
        Feature(
            slug="legal-drafting",
            title="AI Legal Drafting",
            description="Generate legal documents by providing party details and clauses.",
            icon="📄",
            template="legal_drafting.html",
        ),
        Feature(
            slug="fact-verification",
            title="Legal News & Truth Filter",
            description="Verify legal headlines or browse real and AI-generated news.",
            icon="📰",
            template="fact_verification.html",
        ),
        Feature(
            slug="marathi-transliteration",
            title="Marathi Transliteration",
            description="Type in English to get real-time Marathi transliteration.",
            icon="🔤",
            template="marathi_transliteration.html",
        ),
        Feature(
            slug="legal-simplifier",
            title="Legal Lingo Simplifier",
            description="Translate complex legal jargon into simple, plain language.",
            icon="📘",
            template="legal_simplifier.html",
        ),
        Feature(
            slug="markdown-editor",
            title="Markdown Editor & Summarizer",
            description="Write in Markdown with a live preview and generate AI summaries.",
            icon="⬇️",
            template="markdown_editor.html",
        ),
    )
}


def get_feature(slug: str) -> Feature | None:
    return FEATURES.get(slug)
