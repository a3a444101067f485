"""
Exception hierarchy for pdf-search.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class PdfSearchException(Exception):
    """Base exception for all pdf-search application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class DocumentProcessingError(PdfSearchException):
    """Base exception for document processing errors."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            document_id: ID of the document that failed
            details: Additional context
        """
        details = details or {}
        if document_id:
            details["document_id"] = document_id
        super().__init__(message, details)


class EmptyDocumentError(DocumentProcessingError):
    """Raised when chunking yields no chunks (e.g. empty extracted text)."""

    def __init__(self, document_id: str | None = None) -> None:
        super().__init__(
            "Document produced no chunks; extracted text is empty",
            document_id=document_id,
        )


class ParsingError(DocumentProcessingError):
    """Raised when text extraction from an uploaded file fails."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize parsing error.

        Args:
            message: Error message
            document_id: ID of the document
            file_path: Path of the file that failed parsing
            details: Additional context
        """
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, document_id, details)


class VectorStoreError(PdfSearchException):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (upsert, search, delete)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class StoreWriteError(VectorStoreError):
    """Raised when the vector store rejects or cannot apply an upsert/delete."""


class StoreReadError(VectorStoreError):
    """Raised when a vector store search fails."""


class FilterOnlyUnsupportedError(VectorStoreError):
    """Raised when an adapter cannot run a metadata-only (empty query) search."""

    def __init__(self, adapter: str) -> None:
        super().__init__(
            f"Vector store adapter '{adapter}' does not support filter-only search",
            operation="search",
            details={"adapter": adapter},
        )


class GenerationError(PdfSearchException):
    """Raised when the answer generation step fails."""


class ChatNotFoundError(PdfSearchException):
    """Raised when a chat cannot be found for the requesting user."""

    def __init__(self, chat_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["chat_id"] = chat_id
        super().__init__(f"Chat not found: {chat_id}", details)


class DocumentNotFoundError(PdfSearchException):
    """Raised when a document cannot be found for the requesting user."""

    def __init__(self, document_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["document_id"] = document_id
        super().__init__(f"Document not found: {document_id}", details)
