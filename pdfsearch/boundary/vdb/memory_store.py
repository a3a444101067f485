"""
In-memory vector store for local development and tests.

Wraps LangChain's InMemoryVectorStore with metadata filtering and a
filter-only scan for empty queries. Writes are serialized by a lock.

Dependencies: langchain_core
System role: Local vector store adapter
"""

import logging
import threading
from typing import Any

from langchain_core.embeddings import Embeddings
from langchain_core.vectorstores import InMemoryVectorStore

from pdfsearch.boundary.vdb.base_store import VectorStoreAdapter, matches_filter
from pdfsearch.boundary.vdb.vector_schemas import VectorRecord, VectorSearchResult
from pdfsearch.core.exceptions import StoreReadError, StoreWriteError

logger = logging.getLogger(__name__)


class InMemoryVectorsStore(VectorStoreAdapter):
    """
    Process-local vector store.

    Records live in ``InMemoryVectorStore.store`` keyed by chunk id, so
    upserting an existing id replaces it.
    """

    name = "memory"
    supports_filter_only = True

    def __init__(self, embeddings: Embeddings) -> None:
        """
        Initialize the store.

        Args:
            embeddings: Embedding model used for records and queries
        """
        self._embeddings = embeddings
        self._vector_store = InMemoryVectorStore(embedding=embeddings)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._vector_store.store)

    def upsert(self, records: list[VectorRecord]) -> None:
        if not records:
            return

        try:
            vectors = self._embeddings.embed_documents(
                [record.embedding_source_text for record in records]
            )
        except Exception as e:
            raise StoreWriteError(
                message=f"Failed to embed records: {e}",
                operation="upsert",
                details={"record_count": len(records)},
            ) from e

        with self._lock:
            for record, vector in zip(records, vectors):
                self._vector_store.store[record.id] = {
                    "id": record.id,
                    "vector": vector,
                    "text": record.content,
                    "metadata": dict(record.metadata),
                }

        logger.info(f"{__name__}:upsert - Stored {len(records)} records")

    def search(
        self,
        query: str,
        top_k: int,
        filter_dict: dict[str, Any] | None = None,
    ) -> list[VectorSearchResult]:
        if not query:
            return self._scan(top_k, filter_dict)

        try:
            with self._lock:
                results = self._vector_store.similarity_search_with_score(
                    query=query,
                    k=top_k,
                    filter=lambda doc: matches_filter(doc.metadata, filter_dict),
                )
        except Exception as e:
            raise StoreReadError(
                message=f"Failed to search in-memory store: {e}",
                operation="search",
                details={"top_k": top_k},
            ) from e

        return [
            VectorSearchResult(
                id=doc.id or "",
                content=doc.page_content,
                score=float(score),
                metadata=dict(doc.metadata),
            )
            for doc, score in results
        ]

    def _scan(
        self,
        top_k: int,
        filter_dict: dict[str, Any] | None,
    ) -> list[VectorSearchResult]:
        """Metadata-only enumeration in insertion order; every hit scores 1.0."""
        with self._lock:
            entries = list(self._vector_store.store.values())

        matches = []
        for entry in entries:
            if not matches_filter(entry["metadata"], filter_dict):
                continue
            matches.append(
                VectorSearchResult(
                    id=entry["id"],
                    content=entry["text"],
                    score=1.0,
                    metadata=dict(entry["metadata"]),
                )
            )
            if len(matches) >= top_k:
                break
        return matches

    def delete(self, ids: list[str]) -> None:
        if not ids:
            return
        with self._lock:
            for chunk_id in ids:
                self._vector_store.store.pop(chunk_id, None)
        logger.info(f"{__name__}:delete - Deleted up to {len(ids)} records")
