"""
Vector store adapter contract.

Narrow interface the core depends on: upsert, search with metadata filter,
delete by id. An empty query asks for a filter-only scan.

Dependencies: backend-agnostic
System role: Seam between the core and any similarity-search backend
"""

from abc import ABC, abstractmethod
from typing import Any

from pdfsearch.boundary.vdb.vector_schemas import VectorRecord, VectorSearchResult


def matches_filter(metadata: dict[str, Any], filter_dict: dict[str, Any] | None) -> bool:
    """Return True when every filter key is present in metadata with an equal value."""
    if not filter_dict:
        return True
    return all(metadata.get(key) == value for key, value in filter_dict.items())


class VectorStoreAdapter(ABC):
    """
    Abstract vector store adapter.

    Implementations wrap backend failures in StoreWriteError / StoreReadError
    and raise FilterOnlyUnsupportedError when ``search`` receives an empty
    query they cannot serve.
    """

    name: str = "abstract"
    supports_filter_only: bool = False

    @abstractmethod
    def upsert(self, records: list[VectorRecord]) -> None:
        """
        Insert or replace records by id.

        Raises:
            StoreWriteError: If the backend rejects the batch
        """

    @abstractmethod
    def search(
        self,
        query: str,
        top_k: int,
        filter_dict: dict[str, Any] | None = None,
    ) -> list[VectorSearchResult]:
        """
        Similarity search restricted to records matching ``filter_dict``.

        An empty ``query`` returns up to ``top_k`` records matched purely by
        metadata.

        Raises:
            StoreReadError: If the backend query fails
            FilterOnlyUnsupportedError: Empty query on an adapter without scans
        """

    @abstractmethod
    def delete(self, ids: list[str]) -> None:
        """
        Delete records by id. Unknown ids are ignored.

        Raises:
            StoreWriteError: If the backend delete fails
        """
