"""
Chat and message ORM models.

A chat owns an append-only, position-ordered list of messages. Assistant
messages carry the sources they cite as a JSON list.

Dependencies: sqlalchemy, pdfsearch.boundary.db.base
System role: Persisted chat history (authoritative for all clients)
"""

import enum
import uuid

from sqlalchemy import JSON, Enum, ForeignKey, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pdfsearch.boundary.db.base import Base, TimestampMixin, UUIDMixin


class MessageRole(str, enum.Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatModel(Base, UUIDMixin, TimestampMixin):
    """
    Chat ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owning user
        title: Display title (prefix of the first question by default)
        messages: Ordered messages (by position)
    """

    __tablename__ = "chats"

    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)

    messages = relationship(
        "MessageModel",
        back_populates="chat",
        order_by="MessageModel.position",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class MessageModel(Base, UUIDMixin, TimestampMixin):
    """
    Chat message ORM model.

    Attributes:
        chat_id: Parent chat (cascade delete)
        position: 0-based order within the chat, unique per chat
        role: user or assistant
        content: Message text
        sources: Serialized Source list (assistant messages only)
    """

    __tablename__ = "chat_messages"
    __table_args__ = (UniqueConstraint("chat_id", "position", name="uq_chat_message_position"),)

    chat_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("chats.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    role: Mapped[MessageRole] = mapped_column(
        Enum(MessageRole, native_enum=False),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    sources: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    chat = relationship("ChatModel", back_populates="messages")
