"""
Document service orchestrator.

Coordinates document registration, the ingestion job, search, and deletion.
Vector store calls are synchronous and run in the threadpool.

Dependencies: sqlalchemy, fastapi.concurrency, pdfsearch.core, pdfsearch.boundary.db
System role: Document management orchestration
"""

import logging
from typing import Any
from uuid import UUID

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from pdfsearch.boundary.db.CRUD import document_crud
from pdfsearch.boundary.db.models import DocumentStatus
from pdfsearch.core.cascade import CascadeDeleter, CascadeDeletionResult
from pdfsearch.core.exceptions import DocumentNotFoundError
from pdfsearch.core.ingestion import IngestionPipeline
from pdfsearch.core.parser import extract_text
from pdfsearch.core.retrieval import RetrievalService
from pdfsearch.models.document import (
    DocumentListResponse,
    DocumentResponse,
    IngestionResult,
    SearchResponse,
)

logger = logging.getLogger(__name__)


class DocumentService:
    """
    Document service orchestrator.

    Handles the document lifecycle: registration, ingestion job
    (pending -> processing -> completed | failed), search, deletion with
    vector cascade.
    """

    def __init__(
        self,
        db: AsyncSession,
        pipeline: IngestionPipeline,
        retrieval_service: RetrievalService,
        cascade_deleter: CascadeDeleter,
    ) -> None:
        """
        Initialize document service.

        Args:
            db: AsyncSession for document metadata tracking
            pipeline: Ingestion pipeline bound to the vector store
            retrieval_service: User-scoped retrieval
            cascade_deleter: Document-scoped vector deletion
        """
        self.db = db
        self.pipeline = pipeline
        self.retrieval_service = retrieval_service
        self.cascade_deleter = cascade_deleter

    async def register_document(
        self,
        user_id: str,
        filename: str,
        size_bytes: int = 0,
        mime_type: str = "application/pdf",
    ) -> DocumentResponse:
        """
        Create a pending document record (intake).

        Args:
            user_id: Owning user
            filename: Original filename
            size_bytes: Upload size
            mime_type: Upload MIME type

        Returns:
            DocumentResponse: The pending document
        """
        if not user_id:
            raise ValueError("user_id is required")

        document = await document_crud.create(
            self.db,
            user_id=user_id,
            filename=filename,
            size_bytes=size_bytes,
            mime_type=mime_type,
            status=DocumentStatus.PENDING,
        )
        await self.db.commit()
        logger.info(f"{__name__}:register_document - Registered document {document.id}")
        return DocumentResponse.model_validate(document)

    async def process_document(
        self,
        document_id: UUID,
        text: str,
        metadata: dict[str, Any] | None = None,
    ) -> IngestionResult:
        """
        Run the ingestion job for an extracted document text.

        Steps:
        1. Mark the document PROCESSING
        2. Chunk, embed and upsert through the pipeline
        3. Mark COMPLETED with the chunk count, or FAILED with the error

        Args:
            document_id: Document UUID
            text: Extracted text
            metadata: Extra chunk metadata (filename and mime_type are added)

        Returns:
            IngestionResult: Chunk count, ids and timing

        Raises:
            DocumentNotFoundError: If the document does not exist
            EmptyDocumentError: If the text yields no chunks
            StoreWriteError: If the vector store rejects the batch
        """
        document = await document_crud.get_by_id(self.db, document_id)
        if document is None:
            raise DocumentNotFoundError(str(document_id))

        user_id = document.user_id
        chunk_metadata = {
            "filename": document.filename,
            "mime_type": document.mime_type,
            **(metadata or {}),
        }

        await document_crud.mark_processing(self.db, document_id)
        await self.db.commit()

        try:
            result = await run_in_threadpool(
                self.pipeline.ingest,
                str(document_id),
                text,
                chunk_metadata,
                user_id,
            )
        except Exception as e:
            logger.error(
                f"{__name__}:process_document - {type(e).__name__}: {e}",
                extra={"document_id": str(document_id)},
            )
            await self._mark_failed(document_id, e)
            raise

        await document_crud.mark_completed(self.db, document_id, result.chunk_count)
        await self.db.commit()

        logger.info(
            f"{__name__}:process_document - Completed",
            extra={"document_id": str(document_id), "chunk_count": result.chunk_count},
        )
        return result

    async def process_file(
        self,
        document_id: UUID,
        file_path: str,
        metadata: dict[str, Any] | None = None,
    ) -> IngestionResult:
        """
        Extract text from a stored upload and ingest it.

        Raises:
            ParsingError: If the file cannot be read (document marked FAILED)
        """
        try:
            text = await run_in_threadpool(extract_text, file_path)
        except Exception as e:
            await self._mark_failed(document_id, e)
            raise
        return await self.process_document(document_id, text, metadata)

    async def _mark_failed(self, document_id: UUID, error: Exception) -> None:
        await self.db.rollback()
        await document_crud.mark_failed(self.db, document_id, error_message=str(error))
        await self.db.commit()

    async def list_documents(self, user_id: str) -> DocumentListResponse:
        """List the user's documents, most recently updated first."""
        documents = await document_crud.list_by_user(self.db, user_id)
        return DocumentListResponse(
            documents=[DocumentResponse.model_validate(doc) for doc in documents],
            total=len(documents),
        )

    async def get_document(self, document_id: UUID, user_id: str) -> DocumentResponse:
        document = await document_crud.get_for_user(self.db, document_id, user_id)
        if document is None:
            raise DocumentNotFoundError(str(document_id))
        return DocumentResponse.model_validate(document)

    async def search_documents(
        self,
        query: str,
        user_id: str,
        top_k: int = 5,
        document_id: UUID | None = None,
        filters: dict[str, Any] | None = None,
    ) -> SearchResponse:
        """
        Semantic search over the user's chunks.

        Args:
            query: Search query text
            user_id: Requesting user (always enforced)
            top_k: Number of results to return
            document_id: Optional document restriction
            filters: Additional metadata equality filters

        Returns:
            SearchResponse: Sources ordered by descending score
        """
        extra_filter = dict(filters or {})
        if document_id is not None:
            extra_filter["document_id"] = str(document_id)

        sources = await run_in_threadpool(
            self.retrieval_service.retrieve,
            query,
            user_id,
            top_k,
            extra_filter,
        )
        return SearchResponse(results=sources, total=len(sources))

    async def delete_document(
        self,
        document_id: UUID,
        user_id: str,
    ) -> CascadeDeletionResult:
        """
        Delete a document's vectors, then its record.

        Vector cleanup never blocks the record deletion; its outcome is
        returned for callers that want to report it.

        Raises:
            DocumentNotFoundError: If the document does not exist or belongs to another user
        """
        document = await document_crud.get_for_user(self.db, document_id, user_id)
        if document is None:
            raise DocumentNotFoundError(str(document_id))

        cascade_result = await run_in_threadpool(
            self.cascade_deleter.delete_document_vectors,
            str(document_id),
        )

        await document_crud.delete_by_id(self.db, document_id)
        await self.db.commit()

        logger.info(
            f"{__name__}:delete_document - Deleted document {document_id}",
            extra={
                "deleted_chunks": cascade_result.deleted_count,
                "cascade_ok": cascade_result.ok,
            },
        )
        return cascade_result
