"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from pdfsearch.boundary.db.CRUD import chat_crud, message_crud

    chat = await chat_crud.get_for_user(db, chat_id, user_id)
"""

from pdfsearch.boundary.db.CRUD.base_crud import BaseCRUD
from pdfsearch.boundary.db.CRUD.chat_crud import ChatCRUD, chat_crud
from pdfsearch.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud
from pdfsearch.boundary.db.CRUD.message_crud import MessageCRUD, message_crud

__all__ = [
    "BaseCRUD",
    "ChatCRUD",
    "chat_crud",
    "DocumentCRUD",
    "document_crud",
    "MessageCRUD",
    "message_crud",
]
