"""
Document CRUD operations.

Provides Create, Read, Update, Delete operations for DocumentModel
with status-tracking helpers used by the ingestion job.

Dependencies: sqlalchemy, pdfsearch.boundary.db.models.document_model
System role: Document persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pdfsearch.boundary.db.CRUD.base_crud import BaseCRUD
from pdfsearch.boundary.db.models.document_model import DocumentModel, DocumentStatus


class DocumentCRUD(BaseCRUD[DocumentModel]):
    """
    CRUD operations for DocumentModel.

    Extends BaseCRUD with lifecycle transitions
    (pending -> processing -> completed | failed).
    """

    def __init__(self) -> None:
        super().__init__(DocumentModel)

    async def get_by_status(
        self,
        session: AsyncSession,
        status: DocumentStatus,
        limit: int | None = None,
    ) -> Sequence[DocumentModel]:
        """
        Retrieve documents by processing status.

        Args:
            session: Async database session
            status: Document processing status to filter by
            limit: Maximum number of documents to return

        Returns:
            Sequence of DocumentModels with matching status
        """
        stmt = select(DocumentModel).where(DocumentModel.status == status)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def update_status(
        self,
        session: AsyncSession,
        id: UUID,
        status: DocumentStatus,
        error_message: str | None = None,
    ) -> DocumentModel | None:
        update_fields = {"status": status}
        if error_message is not None:
            update_fields["error_message"] = error_message
        return await self.update_by_id(session, id, **update_fields)

    async def mark_processing(
        self,
        session: AsyncSession,
        id: UUID,
    ) -> DocumentModel | None:
        """Move a document into processing and clear any previous error."""
        return await self.update_by_id(
            session,
            id,
            status=DocumentStatus.PROCESSING,
            error_message=None,
        )

    async def mark_completed(
        self,
        session: AsyncSession,
        id: UUID,
        chunk_count: int,
    ) -> DocumentModel | None:
        """
        Mark document as successfully ingested.

        Args:
            session: Async database session
            id: Document UUID
            chunk_count: Number of chunks stored in the vector store

        Returns:
            Updated DocumentModel if found, None otherwise
        """
        return await self.update_by_id(
            session,
            id,
            status=DocumentStatus.COMPLETED,
            chunk_count=chunk_count,
            error_message=None,
        )

    async def mark_failed(
        self,
        session: AsyncSession,
        id: UUID,
        error_message: str,
    ) -> DocumentModel | None:
        """
        Mark document as failed with error details.

        Args:
            session: Async database session
            id: Document UUID
            error_message: Description of the failure (truncated to column size)

        Returns:
            Updated DocumentModel if found, None otherwise
        """
        return await self.update_status(
            session,
            id,
            DocumentStatus.FAILED,
            error_message=error_message[:2048],
        )


document_crud = DocumentCRUD()
