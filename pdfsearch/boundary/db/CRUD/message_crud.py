"""
Chat message CRUD operations.

Messages are append-only; ``position`` is assigned as max(position) + 1
within the chat. Callers serialize appends per chat.

Dependencies: sqlalchemy, pdfsearch.boundary.db.models.chat_model
System role: Message persistence operations
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pdfsearch.boundary.db.CRUD.base_crud import BaseCRUD
from pdfsearch.boundary.db.models.chat_model import MessageModel, MessageRole


class MessageCRUD(BaseCRUD[MessageModel]):
    """CRUD operations for MessageModel."""

    def __init__(self) -> None:
        super().__init__(MessageModel)

    async def next_position(self, session: AsyncSession, chat_id: UUID) -> int:
        stmt = select(func.max(MessageModel.position)).where(MessageModel.chat_id == chat_id)
        result = await session.execute(stmt)
        current = result.scalar_one_or_none()
        return 0 if current is None else current + 1

    async def append(
        self,
        session: AsyncSession,
        chat_id: UUID,
        role: MessageRole,
        content: str,
        sources: list[dict[str, Any]] | None = None,
    ) -> MessageModel:
        """
        Append a message at the end of a chat.

        Args:
            session: Async database session
            chat_id: Parent chat UUID
            role: Message author
            content: Message text
            sources: Serialized sources (assistant messages only)

        Returns:
            Created MessageModel
        """
        position = await self.next_position(session, chat_id)
        return await self.create(
            session,
            chat_id=chat_id,
            position=position,
            role=role,
            content=content,
            sources=sources or [],
        )

    async def list_by_chat(
        self,
        session: AsyncSession,
        chat_id: UUID,
        limit: int | None = None,
    ) -> Sequence[MessageModel]:
        """
        List a chat's messages in order.

        When ``limit`` is given, only the most recent ``limit`` messages are
        returned (still oldest first).
        """
        if limit is None:
            stmt = (
                select(MessageModel)
                .where(MessageModel.chat_id == chat_id)
                .order_by(MessageModel.position)
            )
            result = await session.execute(stmt)
            return result.scalars().all()

        stmt = (
            select(MessageModel)
            .where(MessageModel.chat_id == chat_id)
            .order_by(MessageModel.position.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return list(reversed(result.scalars().all()))


message_crud = MessageCRUD()
