"""
Document-to-vector ingestion pipeline.

Turns (document_id, text, metadata, user_id) into chunk records with fresh
identifiers and upserts them in one batch. Document status is not touched
here; that belongs to the ingestion job (DocumentService).

Dependencies: pdfsearch.core.chunker, pdfsearch.boundary.vdb
System role: Ingestion orchestration (chunk -> id -> metadata -> upsert)
"""

import logging
import time
import uuid
from typing import Any

from pdfsearch.boundary.vdb import VectorRecord, VectorStoreAdapter
from pdfsearch.core.chunker import TextChunker
from pdfsearch.core.exceptions import EmptyDocumentError
from pdfsearch.models.document import IngestionResult

logger = logging.getLogger(__name__)


class IngestionPipeline:
    """Chunk, tag and upsert a document's text into the vector store."""

    def __init__(self, vector_store: VectorStoreAdapter, chunker: TextChunker) -> None:
        """
        Initialize pipeline.

        Args:
            vector_store: Injected vector store adapter
            chunker: Text chunker carrying the process-wide size/overlap
        """
        self._vector_store = vector_store
        self._chunker = chunker

    def build_records(
        self,
        document_id: str,
        text: str,
        metadata: dict[str, Any] | None,
        user_id: str,
    ) -> list[VectorRecord]:
        """
        Chunk text and build tagged records without writing them.

        Args:
            document_id: Owning document ID
            text: Extracted document text
            metadata: Caller metadata (filename, mime type, ...)
            user_id: Owning user ID (mandatory)

        Returns:
            list[VectorRecord]: One record per chunk, each with a new uuid4

        Raises:
            ValueError: If user_id or document_id is missing
            EmptyDocumentError: If chunking yields zero chunks
        """
        if not user_id:
            raise ValueError("user_id is required for ingestion")
        if not document_id:
            raise ValueError("document_id is required for ingestion")

        chunks = self._chunker.split(text)
        if not chunks:
            raise EmptyDocumentError(document_id=document_id)

        base_metadata = dict(metadata or {})
        base_metadata.setdefault("filename", "unknown")
        total_chunks = len(chunks)

        return [
            VectorRecord(
                id=str(uuid.uuid4()),
                content=chunk,
                embedding_source_text=chunk,
                metadata={
                    **base_metadata,
                    "chunk_index": index,
                    "total_chunks": total_chunks,
                    "document_id": document_id,
                    "user_id": user_id,
                },
            )
            for index, chunk in enumerate(chunks)
        ]

    def ingest(
        self,
        document_id: str,
        text: str,
        metadata: dict[str, Any] | None,
        user_id: str,
    ) -> IngestionResult:
        """
        Ingest a document's text into the vector store.

        Args:
            document_id: Owning document ID
            text: Extracted document text
            metadata: Caller metadata merged under the core keys
            user_id: Owning user ID (mandatory)

        Returns:
            IngestionResult: Chunk count, chunk IDs and timing

        Raises:
            ValueError: If user_id or document_id is missing
            EmptyDocumentError: If chunking yields zero chunks (nothing upserted)
            StoreWriteError: If the upsert fails (no retry here)
        """
        start_time = time.perf_counter()

        records = self.build_records(document_id, text, metadata, user_id)
        self._vector_store.upsert(records)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{__name__}:ingest - Stored {len(records)} chunks for document {document_id}",
            extra={"document_id": document_id, "chunk_count": len(records)},
        )

        return IngestionResult(
            document_id=document_id,
            chunk_count=len(records),
            chunk_ids=[record.id for record in records],
            processing_time_ms=elapsed_ms,
        )
