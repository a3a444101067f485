"""
Chat CRUD operations.

Dependencies: sqlalchemy, pdfsearch.boundary.db.models.chat_model
System role: Chat persistence operations
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from pdfsearch.boundary.db.base import utcnow
from pdfsearch.boundary.db.CRUD.base_crud import BaseCRUD
from pdfsearch.boundary.db.models.chat_model import ChatModel, MessageModel


class ChatCRUD(BaseCRUD[ChatModel]):
    """CRUD operations for ChatModel."""

    def __init__(self) -> None:
        super().__init__(ChatModel)

    async def get_with_messages(
        self,
        session: AsyncSession,
        id: UUID,
        user_id: str,
    ) -> ChatModel | None:
        """
        Load an owned chat with its messages eagerly, ordered by position.

        Async sessions cannot lazy-load relationships, so callers that read
        ``chat.messages`` must go through this method.
        """
        stmt = (
            select(ChatModel)
            .where(ChatModel.id == id, ChatModel.user_id == user_id)
            .options(selectinload(ChatModel.messages))
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def touch(self, session: AsyncSession, id: UUID) -> ChatModel | None:
        """Bump updated_at so the chat sorts first in listings."""
        return await self.update_by_id(session, id, updated_at=utcnow())

    async def delete_with_messages(self, session: AsyncSession, id: UUID) -> bool:
        """
        Delete a chat and its messages.

        Messages are removed explicitly; SQLite does not enforce the
        ON DELETE CASCADE foreign key unless the pragma is enabled.
        """
        await session.execute(delete(MessageModel).where(MessageModel.chat_id == id))
        return await self.delete_by_id(session, id)


chat_crud = ChatCRUD()
