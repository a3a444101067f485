"""
Document ORM model.

Represents uploaded documents with processing status and metadata.
Tracks the ingestion lifecycle from intake to vector storage.

Dependencies: sqlalchemy, pdfsearch.boundary.db.base
System role: Document persistence for ingestion tracking
"""

import enum

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pdfsearch.boundary.db.base import Base, TimestampMixin, UUIDMixin


class DocumentStatus(str, enum.Enum):
    """
    Document processing lifecycle states.

    PENDING: Document registered, awaiting ingestion
    PROCESSING: Text is being chunked and embedded
    COMPLETED: Chunks stored in the vector store, ready for retrieval
    FAILED: Processing error; error_message holds details
    """

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class DocumentModel(Base, UUIDMixin, TimestampMixin):
    """
    Document ORM model tracking ingestion state.

    Chunks in the vector store point back here only through their
    ``document_id`` metadata; there is no foreign key to enforce it.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owning user
        filename: Original filename (255 char limit)
        size_bytes: Upload size
        mime_type: Upload MIME type
        status: Current processing state
        chunk_count: Chunks stored by the last successful ingestion
        error_message: Null on success; error details if FAILED
    """

    __tablename__ = "documents"

    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    filename: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Original filename",
    )

    size_bytes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    mime_type: Mapped[str] = mapped_column(
        String(127),
        nullable=False,
        default="application/pdf",
    )

    status: Mapped[DocumentStatus] = mapped_column(
        Enum(DocumentStatus, native_enum=False),
        nullable=False,
        default=DocumentStatus.PENDING,
    )

    chunk_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    error_message: Mapped[str | None] = mapped_column(
        String(2048),
        nullable=True,
        doc="Error details if processing failed",
    )
