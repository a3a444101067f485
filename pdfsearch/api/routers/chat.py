"""
Chat API endpoints.

Routes:
- GET /chats - List the caller's chats
- POST /chats - Create an empty chat
- POST /chats/messages - Send a message (creates a chat when chat_id is omitted)
- GET /chats/{chat_id} - Get a chat with its messages
- DELETE /chats/{chat_id} - Delete a chat

Dependencies: pdfsearch.application.services.chat_service
System role: Chat messaging HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from pdfsearch.api.deps import get_chat_service, get_user_id
from pdfsearch.application.services.chat_service import ChatService
from pdfsearch.core.exceptions import (
    ChatNotFoundError,
    FilterOnlyUnsupportedError,
    GenerationError,
    VectorStoreError,
)
from pdfsearch.models.chat import (
    ChatDetail,
    ChatSummary,
    ChatTurn,
    CreateChatRequest,
    SendMessageRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chats", tags=["chat"])


@router.get("", response_model=list[ChatSummary])
async def list_chats(
    user_id: str = Depends(get_user_id),
    chat_service: ChatService = Depends(get_chat_service),
) -> list[ChatSummary]:
    return await chat_service.list_chats(user_id)


@router.post("", response_model=ChatSummary, status_code=201)
async def create_chat(
    request: CreateChatRequest,
    user_id: str = Depends(get_user_id),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatSummary:
    return await chat_service.create_chat(user_id, request.title)


@router.post("/messages", response_model=ChatTurn)
async def send_message(
    request: SendMessageRequest,
    user_id: str = Depends(get_user_id),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatTurn:
    """
    Send a chat message and get the grounded answer.

    Flow:
    1. ChatService stores the question, retrieves passages, generates an answer
    2. The assistant message comes back with the top sources for display

    Raises:
        HTTPException(400): Invalid input
        HTTPException(404): Chat not found
        HTTPException(502): Retrieval or generation failed (question rolled back)
    """
    try:
        return await chat_service.send_message(
            user_id=user_id,
            message=request.message,
            chat_id=request.chat_id,
            top_k=request.top_k,
        )
    except ChatNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except (ValueError, FilterOnlyUnsupportedError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (VectorStoreError, GenerationError) as e:
        logger.error(f"{__name__}:send_message - {type(e).__name__}: {e}")
        raise HTTPException(status_code=502, detail=f"Chat processing failed: {e.message}")


@router.get("/{chat_id}", response_model=ChatDetail)
async def get_chat(
    chat_id: UUID,
    user_id: str = Depends(get_user_id),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatDetail:
    try:
        return await chat_service.get_chat(chat_id, user_id)
    except ChatNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.delete("/{chat_id}", status_code=204)
async def delete_chat(
    chat_id: UUID,
    user_id: str = Depends(get_user_id),
    chat_service: ChatService = Depends(get_chat_service),
) -> None:
    try:
        await chat_service.delete_chat(chat_id, user_id)
    except ChatNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
