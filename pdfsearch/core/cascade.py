"""
Cascade deletion of a document's vectors.

Chunks reference their document only through metadata, so deleting a
document must remove its chunks separately. This never raises: failures are
captured in CascadeDeletionResult, logged and discarded so the document
record can always be deleted.

Each enumeration is bounded by ``enumeration_limit``; documents with more
chunks are drained page by page, since every delete shrinks the next scan.

Dependencies: pdfsearch.core.retrieval, pdfsearch.boundary.vdb
System role: Best-effort vector cleanup on document deletion
"""

import logging
from dataclasses import dataclass

from pdfsearch.boundary.vdb import VectorStoreAdapter
from pdfsearch.core.retrieval import RetrievalService
from pdfsearch.observability.log_utils import log_error_with_context

logger = logging.getLogger(__name__)

DOCUMENT_ID_KEY = "document_id"


@dataclass(frozen=True)
class CascadeDeletionResult:
    """Outcome of one cascade deletion attempt."""

    document_id: str
    deleted_count: int = 0
    pages: int = 0
    stalled: bool = False
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CascadeDeleter:
    """Enumerate and delete all chunks belonging to a document."""

    def __init__(
        self,
        vector_store: VectorStoreAdapter,
        retrieval_service: RetrievalService,
        enumeration_limit: int = 1000,
    ) -> None:
        """
        Initialize cascade deleter.

        Args:
            vector_store: Injected vector store adapter (delete target)
            retrieval_service: Used for the filter-only enumeration
            enumeration_limit: Maximum chunks enumerated per scan (page size)
        """
        self._vector_store = vector_store
        self._retrieval_service = retrieval_service
        self._enumeration_limit = enumeration_limit

    def delete_document_vectors(self, document_id: str) -> CascadeDeletionResult:
        """
        Remove every chunk of ``document_id`` from the vector store.

        Never raises; inspect the returned result for the error branch.

        Args:
            document_id: Document whose chunks should be deleted

        Returns:
            CascadeDeletionResult: Deleted count, page count and captured error
        """
        result = self._try_delete(document_id)

        if not result.ok:
            log_error_with_context(
                logger,
                f"{__name__}:delete_document_vectors - Vector cleanup failed, orphan chunks may remain",
                result.error,
                document_id=document_id,
                deleted_count=result.deleted_count,
            )
        elif result.deleted_count:
            logger.info(
                f"{__name__}:delete_document_vectors - Deleted {result.deleted_count} chunks "
                f"for document {document_id} in {result.pages} page(s)"
            )
        return result

    def _try_delete(self, document_id: str) -> CascadeDeletionResult:
        deleted: set[str] = set()
        pages = 0
        stalled = False

        try:
            while True:
                matches = self._retrieval_service.scan(
                    {DOCUMENT_ID_KEY: document_id},
                    self._enumeration_limit,
                )
                chunk_ids = [match.id for match in matches if match.id not in deleted]
                if not chunk_ids:
                    # Only already-deleted ids came back: the store did not remove them
                    stalled = bool(matches)
                    break

                self._vector_store.delete(chunk_ids)
                deleted.update(chunk_ids)
                pages += 1

                if len(matches) < self._enumeration_limit:
                    break
        except Exception as e:
            return CascadeDeletionResult(
                document_id=document_id,
                deleted_count=len(deleted),
                pages=pages,
                error=e,
            )

        if stalled:
            logger.warning(
                f"{__name__}:_try_delete - Store still lists deleted chunks after "
                f"{pages} page(s); some chunks may remain",
                extra={"document_id": document_id},
            )

        return CascadeDeletionResult(
            document_id=document_id,
            deleted_count=len(deleted),
            pages=pages,
            stalled=stalled,
        )
