"""
Chat service for conversational Q&A with RAG.

Orchestrates the full chat turn: chat creation, user message persistence,
retrieval, generation, assistant message persistence with cited sources.
A failed or cancelled turn leaves no trace of the user message (nor of the
chat, when the same call created it).

Dependencies: sqlalchemy, fastapi.concurrency, pdfsearch.core, pdfsearch.boundary.db
System role: Chat service orchestration layer
"""

import asyncio
import logging
from uuid import UUID

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from pdfsearch.boundary.db.CRUD import chat_crud, message_crud
from pdfsearch.boundary.db.models import ChatModel, MessageModel, MessageRole
from pdfsearch.configs.chat import ChatSettings
from pdfsearch.core.chat_locks import ChatLockRegistry
from pdfsearch.core.exceptions import ChatNotFoundError
from pdfsearch.core.generator import AnswerGenerator
from pdfsearch.core.notifier import ChatNotifier
from pdfsearch.core.retrieval import RetrievalService
from pdfsearch.models.chat import (
    ChatCompletedEvent,
    ChatDetail,
    ChatSummary,
    ChatTurn,
    MessageResponse,
)
from pdfsearch.models.source import Source
from pdfsearch.observability.log_utils import log_error_with_context

logger = logging.getLogger(__name__)


class ChatService:
    """
    Chat service for conversational Q&A.

    Coordinates chat ownership checks, retrieval, answer generation and
    message persistence for multi-turn conversations. Sends on the same chat
    are serialized through the shared lock registry; different chats proceed
    in parallel.
    """

    def __init__(
        self,
        db: AsyncSession,
        retrieval_service: RetrievalService,
        generator: AnswerGenerator,
        lock_registry: ChatLockRegistry,
        notifier: ChatNotifier | None = None,
        settings: ChatSettings | None = None,
    ) -> None:
        """
        Initialize chat service.

        Args:
            db: AsyncSession for database operations (request scoped)
            retrieval_service: User-scoped retrieval over the vector store
            generator: Answer generator
            lock_registry: Process-wide per-chat lock registry
            notifier: Optional listener hub for completed turns
            settings: Chat settings (defaults from environment)
        """
        self.db = db
        self.retrieval_service = retrieval_service
        self.generator = generator
        self.lock_registry = lock_registry
        self.notifier = notifier
        self.settings = settings or ChatSettings()

    async def send_message(
        self,
        user_id: str,
        message: str,
        chat_id: UUID | None = None,
        top_k: int | None = None,
    ) -> ChatTurn:
        """
        Process one user turn through retrieval and generation.

        Flow:
        1. Resolve the chat (create one titled from the message if chat_id is None)
        2. Append the user message
        3. Retrieve the user's passages for the message
        4. Generate an answer from message, passages and recent history
        5. Append the assistant message with all sources

        Args:
            user_id: Requesting user
            message: User question
            chat_id: Existing chat, or None to start a new one
            top_k: Retrieval depth (defaults to settings)

        Returns:
            ChatTurn: Assistant message, chat id and the sources to display

        Raises:
            ValueError: If user_id or message is empty, or top_k is invalid
            ChatNotFoundError: If chat_id is not one of the user's chats
            StoreReadError: If retrieval fails (user message rolled back)
            GenerationError: If generation fails (user message rolled back)
        """
        if not user_id:
            raise ValueError("user_id is required")
        if not message or not message.strip():
            raise ValueError("message must not be empty")
        if top_k is None:
            top_k = self.settings.default_top_k

        logger.info(
            f"{__name__}:send_message - START",
            extra={"user_id": user_id, "chat_id": str(chat_id) if chat_id else None},
        )

        created_chat = chat_id is None
        if created_chat:
            chat = await chat_crud.create(
                self.db,
                user_id=user_id,
                title=self._title_from(message),
            )
        else:
            chat = await chat_crud.get_for_user(self.db, chat_id, user_id)
            if chat is None:
                raise ChatNotFoundError(str(chat_id))

        async with self.lock_registry.lock_for(chat.id):
            # A delete holding the lock may have removed the chat while we waited
            if not created_chat and await chat_crud.get_for_user(self.db, chat.id, user_id) is None:
                raise ChatNotFoundError(str(chat_id))
            return await self._run_turn(chat, user_id, message, top_k, created_chat)

    async def _run_turn(
        self,
        chat: ChatModel,
        user_id: str,
        message: str,
        top_k: int,
        created_chat: bool,
    ) -> ChatTurn:
        chat_id = chat.id
        history = await message_crud.list_by_chat(
            self.db,
            chat_id,
            limit=self.settings.history_window,
        )
        history_pairs = [(item.role.value, item.content) for item in history]

        user_message = await message_crud.append(
            self.db,
            chat_id,
            MessageRole.USER,
            message,
        )
        user_message_id = user_message.id
        await self.db.commit()

        try:
            sources = await run_in_threadpool(
                self.retrieval_service.retrieve,
                message,
                user_id,
                top_k,
            )
            answer = await self.generator.agenerate(
                message,
                [source.content for source in sources],
                history=history_pairs,
            )
            assistant_message = await message_crud.append(
                self.db,
                chat_id,
                MessageRole.ASSISTANT,
                answer,
                sources=[source.model_dump() for source in sources],
            )
            await chat_crud.touch(self.db, chat_id)
            await self.db.commit()
        except (Exception, asyncio.CancelledError) as e:
            logger.warning(
                f"{__name__}:send_message - Turn failed, rolling back: {type(e).__name__}: {e}",
                extra={"chat_id": str(chat_id)},
            )
            await asyncio.shield(
                self._rollback_turn(chat_id, user_message_id, created_chat)
            )
            raise

        logger.info(
            f"{__name__}:send_message - COMPLETE",
            extra={"chat_id": str(chat_id), "sources_count": len(sources)},
        )

        if self.notifier is not None:
            self.notifier.publish(
                ChatCompletedEvent(chat_id=chat_id, sources_count=len(sources))
            )

        return ChatTurn(
            chat_id=chat_id,
            message=self._to_message_response(assistant_message),
            display_sources=self._display_sources(sources),
        )

    async def _rollback_turn(
        self,
        chat_id: UUID,
        user_message_id: UUID,
        created_chat: bool,
    ) -> None:
        """Remove the committed user message, and the chat if this turn created it."""
        try:
            await self.db.rollback()
            if created_chat:
                await chat_crud.delete_with_messages(self.db, chat_id)
            else:
                await message_crud.delete_by_id(self.db, user_message_id)
            await self.db.commit()
        except Exception as e:
            # The original turn error is what the caller sees
            log_error_with_context(
                logger,
                "Failed to roll back chat turn",
                e,
                chat_id=chat_id,
                message_id=user_message_id,
            )

    def _title_from(self, message: str) -> str:
        return message.strip()[: self.settings.title_max_length]

    def _display_sources(self, sources: list[Source]) -> list[Source]:
        return sources[: self.settings.display_source_limit]

    @staticmethod
    def _to_message_response(message: MessageModel) -> MessageResponse:
        return MessageResponse.model_validate(message)

    async def create_chat(self, user_id: str, title: str) -> ChatSummary:
        """
        Create an empty chat.

        Args:
            user_id: Owning user
            title: Chat title

        Returns:
            ChatSummary: Created chat
        """
        if not user_id:
            raise ValueError("user_id is required")
        chat = await chat_crud.create(self.db, user_id=user_id, title=title.strip())
        await self.db.commit()
        logger.info(f"{__name__}:create_chat - Created chat {chat.id}")
        return ChatSummary.model_validate(chat)

    async def list_chats(self, user_id: str) -> list[ChatSummary]:
        """List the user's chats, most recently active first."""
        chats = await chat_crud.list_by_user(self.db, user_id)
        return [ChatSummary.model_validate(chat) for chat in chats]

    async def get_chat(self, chat_id: UUID, user_id: str) -> ChatDetail:
        """
        Get a chat with its messages in order.

        Raises:
            ChatNotFoundError: If the chat does not exist or belongs to another user
        """
        chat = await chat_crud.get_with_messages(self.db, chat_id, user_id)
        if chat is None:
            raise ChatNotFoundError(str(chat_id))
        return ChatDetail.model_validate(chat)

    async def delete_chat(self, chat_id: UUID, user_id: str) -> None:
        """
        Delete a chat and its messages. Vector data is untouched.

        Raises:
            ChatNotFoundError: If the chat does not exist or belongs to another user
        """
        chat = await chat_crud.get_for_user(self.db, chat_id, user_id)
        if chat is None:
            raise ChatNotFoundError(str(chat_id))

        async with self.lock_registry.lock_for(chat_id):
            await chat_crud.delete_with_messages(self.db, chat_id)
            await self.db.commit()
        logger.info(f"{__name__}:delete_chat - Deleted chat {chat_id}")
