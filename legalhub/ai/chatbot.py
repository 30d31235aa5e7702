"""
legalhub.ai.chatbot – single-turn legal assistant chat flow.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from .flow import Flow
from .generator import TextGenerator
from .prompts import CHAT_PROMPT


class ChatInput(BaseModel):
    message: str = Field(description="The user's chat message.")


class ChatOutput(BaseModel):
    reply: str = Field(description="The assistant's reply.")


chat_flow: Flow[ChatInput, ChatOutput] = Flow(
    name="chatFlow",
    prompt=CHAT_PROMPT,
    input_model=ChatInput,
    output_model=ChatOutput,
)


async def chat(payload: ChatInput, generator: TextGenerator) -> ChatOutput:
    return await chat_flow.run(payload, generator)
