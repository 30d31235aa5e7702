"""
legalhub.actions.schemas – form validation schemas.

Form fields keep the names used by the HTML forms (``partyDetails``,
``newsHeadline`` ...).  Length checks ignore surrounding whitespace, so
whitespace-only input is rejected, but the validated values keep the text
exactly as submitted.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


def _min_length(length: int, message: str) -> Callable[[str], str]:
    def check(value: str) -> str:
        if len(value.strip()) < length:
            raise PydanticCustomError("too_short", message)
        return value
    return check


def _required(message: str) -> AfterValidator:
    return AfterValidator(_min_length(1, message))


class FormSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _missing_as_empty(cls, value: Any) -> Any:
        # absent form fields arrive as None
        return "" if value is None else value


class LegalDraftingForm(FormSchema):
    template:      Annotated[str, _required("Template cannot be empty.")]
    party_details: Annotated[str, _required("Party details cannot be empty.")] = Field(
        alias="partyDetails"
    )
    clauses:       Annotated[str, _required("Clauses cannot be empty.")]


class FactVerificationForm(FormSchema):
    news_headline: Annotated[
        str,
        AfterValidator(
            _min_length(10, "News headline must be at least 10 characters long.")
        ),
    ] = Field(alias="newsHeadline")


class LegalSimplifierForm(FormSchema):
    legal_text: Annotated[str, _required("Legal text cannot be empty.")] = Field(
        alias="legalText"
    )


class MarkdownSummarizerForm(FormSchema):
    markdown_text: Annotated[str, _required("Markdown text cannot be empty.")] = Field(
        alias="markdownText"
    )
