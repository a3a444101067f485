"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - DocumentModel, ChatModel, MessageModel: Persisted entities
  - DocumentStatus, MessageRole: Enum types
  - document_crud, chat_crud, message_crud: CRUD operation singletons

Dependencies: sqlalchemy, pdfsearch.configs
System role: Relational storage for documents and chat history.
"""

from pdfsearch.boundary.db.base import Base, TimestampMixin, UUIDMixin
from pdfsearch.boundary.db.connection import (
    create_tables,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from pdfsearch.boundary.db.models import (
    ChatModel,
    DocumentModel,
    DocumentStatus,
    MessageModel,
    MessageRole,
)
from pdfsearch.boundary.db.CRUD import (
    BaseCRUD,
    chat_crud,
    document_crud,
    message_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "create_tables",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "ChatModel",
    "DocumentModel",
    "DocumentStatus",
    "MessageModel",
    "MessageRole",
    # CRUD
    "BaseCRUD",
    "chat_crud",
    "document_crud",
    "message_crud",
]
