"""
Chat domain models and schemas.

Request/response schemas for chat operations.

Dependencies: pydantic
System role: Chat API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pdfsearch.models.source import Source


class SendMessageRequest(BaseModel):
    """Request schema for sending a chat message."""

    message: str = Field(min_length=1, description="User question")
    chat_id: uuid.UUID | None = Field(
        default=None,
        description="Existing chat; a new chat is created when omitted",
    )
    top_k: int = Field(default=5, ge=1, le=100, description="Number of passages to retrieve")


class CreateChatRequest(BaseModel):
    """Request schema for creating an empty chat."""

    title: str = Field(min_length=1, max_length=255, description="Chat title")


class MessageResponse(BaseModel):
    """Single chat message in history."""

    model_config = ConfigDict(from_attributes=True)

    role: str = Field(description="Message role: 'user' or 'assistant'")
    content: str = Field(description="Message content")
    sources: list[Source] = Field(default_factory=list, description="Cited sources")
    created_at: datetime | None = None

    @field_validator("role", mode="before")
    @classmethod
    def _role_value(cls, value):
        return getattr(value, "value", value)


class ChatTurn(BaseModel):
    """Assistant reply produced by one send_message call."""

    chat_id: uuid.UUID
    message: MessageResponse
    display_sources: list[Source] = Field(
        default_factory=list,
        description="Top sources for display; the full set is on message.sources",
    )


class ChatSummary(BaseModel):
    """Chat list entry."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    created_at: datetime
    updated_at: datetime


class ChatDetail(ChatSummary):
    """Chat with its ordered messages."""

    messages: list[MessageResponse] = Field(default_factory=list)


class ChatCompletedEvent(BaseModel):
    """Notification published after an assistant reply is stored."""

    chat_id: uuid.UUID
    sources_count: int
