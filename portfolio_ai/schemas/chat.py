"""Chat request/response schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """A single conversation turn, content already trimmed by the validator."""

    role: Literal["user", "assistant"]
    content: str


class ChatResponse(BaseModel):
    message: str = Field(..., description="Assistant reply text")
