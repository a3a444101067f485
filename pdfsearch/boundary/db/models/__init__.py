"""
Database models package.

Exports:
  - DocumentModel, DocumentStatus: Document ORM model and status enum
  - ChatModel, MessageModel, MessageRole: Chat history ORM models

Dependencies: sqlalchemy, pdfsearch.boundary.db.base
System role: Database model definitions for domain entities
"""

from pdfsearch.boundary.db.models.chat_model import ChatModel, MessageModel, MessageRole
from pdfsearch.boundary.db.models.document_model import DocumentModel, DocumentStatus

__all__ = [
    "ChatModel",
    "DocumentModel",
    "DocumentStatus",
    "MessageModel",
    "MessageRole",
]
