"""
Application services.

Exports:
  - ChatService: RAG chat orchestration and chat management
  - DocumentService: Document lifecycle, ingestion job, search, deletion
"""

from pdfsearch.application.services.chat_service import ChatService
from pdfsearch.application.services.document_service import DocumentService

__all__ = ["ChatService", "DocumentService"]
