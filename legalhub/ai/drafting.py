"""
legalhub.ai.drafting – agreement drafting flow.

Turns a template, the parties' details and the requested clauses into a
complete agreement.  The output field keeps the rent-agreement name the
drafting page was built around, but any agreement type can be drafted.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from .flow import Flow
from .generator import TextGenerator
from .prompts import RENT_AGREEMENT_PROMPT


class GenerateRentAgreementInput(BaseModel):
    template:      str = Field(description="The agreement template to follow.")
    party_details: str = Field(description="Names, addresses and roles of the parties.")
    clauses:       str = Field(description="Clauses to include in the agreement.")


class GenerateRentAgreementOutput(BaseModel):
    rent_agreement: str = Field(description="The generated agreement text.")


generate_rent_agreement_flow: Flow[GenerateRentAgreementInput, GenerateRentAgreementOutput] = Flow(
    name="generateRentAgreementFlow",
    prompt=RENT_AGREEMENT_PROMPT,
    input_model=GenerateRentAgreementInput,
    output_model=GenerateRentAgreementOutput,
)


async def generate_rent_agreement(
    payload: GenerateRentAgreementInput, generator: TextGenerator
) -> GenerateRentAgreementOutput:
    """Draft an agreement from a template, party details and clauses."""
    return await generate_rent_agreement_flow.run(payload, generator)
