"""
legalhub.actions.states – tagged results returned by the server actions.

Every state is either ``{"type": "success", ...payload}`` or
``{"type": "error", "message": ...}``; the validator below rejects anything
in between.
"""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, model_validator

from legalhub.ai.news import LegalNewsArticle


class ActionState(BaseModel):
    type:    Literal["success", "error"]
    message: str | None = None

    @model_validator(mode="after")
    def _payload_xor_message(self) -> "ActionState":
        payload = self.payload()
        if self.type == "error":
            if not self.message:
                raise ValueError("an error state needs a message")
            if payload:
                raise ValueError("an error state cannot carry a payload")
        elif self.message is not None:
            raise ValueError("a success state cannot carry a message")
        return self

    def payload(self) -> dict[str, Any]:
        """Return the non-empty success fields."""
        return {
            name: value
            for name, value in self
            if name not in ("type", "message") and value is not None
        }

    @classmethod
    def success(cls, **payload: Any):
        return cls(type="success", **payload)

    @classmethod
    def failure(cls, message: str):
        return cls(type="error", message=message)

    @property
    def is_error(self) -> bool:
        return self.type == "error"


class LegalDraftingState(ActionState):
    rent_agreement: str | None = None


class FactVerificationState(ActionState):
    is_verified:       bool | None = None
    explanation:       str | None = None
    relevant_sections: list[str] | None = None


class LegalNewsState(ActionState):
    articles: list[LegalNewsArticle] | None = None


class LegalSimplifierState(ActionState):
    simplified_text: str | None = None


class ChatState(ActionState):
    reply: str | None = None


class MarkdownSummarizerState(ActionState):
    summary: str | None = None


class TransliterationState(ActionState):
    transliteration: str | None = None
