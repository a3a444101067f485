"""
FAISS vector store persisted to local disk.

Provides the same adapter contract as InMemoryVectorsStore on top of
LangChain's FAISS wrapper. The index is created lazily on first upsert and
saved after every write.

Dependencies: faiss-cpu, langchain_community, langchain_core
System role: Persistent vector store adapter
"""

import logging
import threading
from pathlib import Path
from typing import Any

from langchain_community.vectorstores import FAISS
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings

from pdfsearch.boundary.vdb.base_store import VectorStoreAdapter, matches_filter
from pdfsearch.boundary.vdb.vector_schemas import VectorRecord, VectorSearchResult
from pdfsearch.core.exceptions import StoreReadError, StoreWriteError

logger = logging.getLogger(__name__)

# FAISS search results do not carry the docstore id, so it travels in metadata
CHUNK_ID_KEY = "chunk_id"


class FAISSVectorsStore(VectorStoreAdapter):
    """
    FAISS vector store with metadata filtering.

    Wraps LangChain FAISS (L2-normalized vectors) and persists the index
    under ``index_dir`` for reuse across runs.
    """

    name = "faiss"
    supports_filter_only = True

    def __init__(
        self,
        embeddings: Embeddings,
        index_dir: str,
        index_name: str = "documents",
    ) -> None:
        """
        Initialize FAISS vector store.

        Args:
            embeddings: Embedding model used for records and queries
            index_dir: Directory holding the persisted index
            index_name: Index file name inside ``index_dir``
        """
        self._embeddings = embeddings
        self._index_dir = Path(index_dir)
        self._index_name = index_name
        self._lock = threading.Lock()
        self._vector_store: FAISS | None = self._load_index()

    def _load_index(self) -> FAISS | None:
        """Load a previously saved index, or None when nothing is on disk yet."""
        index_file = self._index_dir / f"{self._index_name}.faiss"
        if not index_file.exists():
            logger.info(f"{__name__}:_load_index - No index at {index_file}, will create on first upsert")
            return None

        logger.info(f"{__name__}:_load_index - Loading index from {self._index_dir}")
        return FAISS.load_local(
            str(self._index_dir),
            self._embeddings,
            index_name=self._index_name,
            allow_dangerous_deserialization=True,
        )

    def _save(self) -> None:
        if self._vector_store is None:
            return
        self._index_dir.mkdir(parents=True, exist_ok=True)
        self._vector_store.save_local(str(self._index_dir), index_name=self._index_name)

    def _existing_ids(self, ids: list[str]) -> list[str]:
        if self._vector_store is None:
            return []
        known = set(self._vector_store.index_to_docstore_id.values())
        return [chunk_id for chunk_id in ids if chunk_id in known]

    def upsert(self, records: list[VectorRecord]) -> None:
        if not records:
            return

        ids = [record.id for record in records]
        metadatas = [{**record.metadata, CHUNK_ID_KEY: record.id} for record in records]

        try:
            vectors = self._embeddings.embed_documents(
                [record.embedding_source_text for record in records]
            )
            text_embeddings = [
                (record.content, vector) for record, vector in zip(records, vectors)
            ]

            with self._lock:
                if self._vector_store is None:
                    self._vector_store = FAISS.from_embeddings(
                        text_embeddings,
                        self._embeddings,
                        metadatas=metadatas,
                        ids=ids,
                        normalize_L2=True,
                    )
                else:
                    stale = self._existing_ids(ids)
                    if stale:
                        self._vector_store.delete(ids=stale)
                    self._vector_store.add_embeddings(
                        text_embeddings,
                        metadatas=metadatas,
                        ids=ids,
                    )
                self._save()

        except Exception as e:
            logger.error(f"{__name__}:upsert - {type(e).__name__}: {e}")
            raise StoreWriteError(
                message=f"Failed to upsert records into FAISS: {e}",
                operation="upsert",
                details={"record_count": len(records)},
            ) from e

        logger.info(f"{__name__}:upsert - Stored {len(records)} records")

    def search(
        self,
        query: str,
        top_k: int,
        filter_dict: dict[str, Any] | None = None,
    ) -> list[VectorSearchResult]:
        if self._vector_store is None:
            return []
        if not query:
            return self._scan(top_k, filter_dict)

        try:
            with self._lock:
                # Metadata filter runs after the k-NN pass; rank the whole index when filtering
                fetch_k = self._vector_store.index.ntotal if filter_dict else top_k
                results = self._vector_store.similarity_search_with_relevance_scores(
                    query,
                    k=top_k,
                    filter=filter_dict or None,
                    fetch_k=max(fetch_k, top_k),
                )
        except Exception as e:
            logger.error(f"{__name__}:search - {type(e).__name__}: {e}")
            raise StoreReadError(
                message=f"Failed to search FAISS index: {e}",
                operation="search",
                details={"top_k": top_k},
            ) from e

        return [self._to_result(doc, score) for doc, score in results]

    def _scan(
        self,
        top_k: int,
        filter_dict: dict[str, Any] | None,
    ) -> list[VectorSearchResult]:
        """Metadata-only enumeration over the docstore; every hit scores 1.0."""
        matches = []
        with self._lock:
            for docstore_id in self._vector_store.index_to_docstore_id.values():
                doc = self._vector_store.docstore.search(docstore_id)
                if not isinstance(doc, Document):
                    continue
                if not matches_filter(doc.metadata, filter_dict):
                    continue
                matches.append(self._to_result(doc, 1.0))
                if len(matches) >= top_k:
                    break
        return matches

    @staticmethod
    def _to_result(doc: Document, score: float) -> VectorSearchResult:
        metadata = dict(doc.metadata or {})
        chunk_id = metadata.pop(CHUNK_ID_KEY, None) or doc.id or ""
        return VectorSearchResult(
            id=chunk_id,
            content=doc.page_content,
            score=float(score),
            metadata=metadata,
        )

    def delete(self, ids: list[str]) -> None:
        if not ids:
            return

        try:
            with self._lock:
                existing = self._existing_ids(ids)
                if not existing:
                    return
                self._vector_store.delete(ids=existing)
                self._save()
            logger.info(
                "Deleted chunks from FAISS",
                extra={"chunk_count": len(existing)},
            )
        except Exception as e:
            logger.error(f"{__name__}:delete - {type(e).__name__}: {e}")
            raise StoreWriteError(
                message=f"Failed to delete records from FAISS: {e}",
                operation="delete",
                details={"chunk_count": len(ids)},
            ) from e
