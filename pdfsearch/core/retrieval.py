"""
User-scoped retrieval service.

Executes semantic queries under a mandatory per-user filter. The caller's
user_id always overwrites any ``user_id`` key in the extra filter, and hits
owned by anyone else are dropped even if an adapter returns them.

Dependencies: pdfsearch.boundary.vdb, pdfsearch.models
System role: Retrieval orchestration for search and RAG chat
"""

import logging
from typing import Any

from pdfsearch.boundary.vdb import VectorSearchResult, VectorStoreAdapter
from pdfsearch.core.exceptions import FilterOnlyUnsupportedError
from pdfsearch.models.source import Source

logger = logging.getLogger(__name__)

USER_ID_KEY = "user_id"


def _validate_top_k(top_k: int) -> None:
    if isinstance(top_k, bool) or not isinstance(top_k, int) or top_k < 1:
        raise ValueError(f"top_k must be a positive integer, got {top_k!r}")


class RetrievalService:
    """Ranked, user-scoped retrieval over the vector store. No caching."""

    def __init__(self, vector_store: VectorStoreAdapter) -> None:
        """
        Initialize retrieval service.

        Args:
            vector_store: Injected vector store adapter
        """
        self._vector_store = vector_store

    def retrieve(
        self,
        query: str,
        user_id: str,
        top_k: int,
        extra_filter: dict[str, Any] | None = None,
    ) -> list[Source]:
        """
        Retrieve the caller's most relevant chunks.

        An empty query runs a filter-only scan (metadata match, no similarity).

        Args:
            query: Search query text
            user_id: Requesting user; always enforced
            top_k: Maximum number of results (positive integer)
            extra_filter: Additional metadata equality filters

        Returns:
            list[Source]: At most top_k sources, descending by score

        Raises:
            ValueError: If user_id is missing or top_k is not a positive integer
            StoreReadError: If the adapter query fails
            FilterOnlyUnsupportedError: Empty query on an adapter without scans
        """
        if not user_id:
            raise ValueError("user_id is required for retrieval")
        _validate_top_k(top_k)

        search_filter = {**(extra_filter or {}), USER_ID_KEY: user_id}
        results = self._search(query, top_k, search_filter)

        sources = [
            Source.from_search_result(result)
            for result in results
            if result.metadata.get(USER_ID_KEY) == user_id
        ]
        sources.sort(key=lambda source: source.score, reverse=True)
        sources = sources[:top_k]

        logger.info(
            f"{__name__}:retrieve - Found {len(sources)} results",
            extra={"user_id": user_id, "top_k": top_k, "filter_only": not query},
        )
        return sources

    def scan(self, filter_dict: dict[str, Any], limit: int) -> list[VectorSearchResult]:
        """
        Unscoped filter-only enumeration for internal maintenance tasks.

        Not exposed to users: it does not inject the user filter.

        Args:
            filter_dict: Metadata equality filters
            limit: Maximum number of records returned

        Returns:
            list[VectorSearchResult]: Matching records

        Raises:
            StoreReadError: If the adapter query fails
            FilterOnlyUnsupportedError: If the adapter cannot scan by metadata
        """
        _validate_top_k(limit)
        return self._search("", limit, filter_dict)

    def _search(
        self,
        query: str,
        top_k: int,
        filter_dict: dict[str, Any],
    ) -> list[VectorSearchResult]:
        if not query and not self._vector_store.supports_filter_only:
            raise FilterOnlyUnsupportedError(self._vector_store.name)
        return self._vector_store.search(query, top_k, filter_dict)
