"""
Vector database boundary layer.

Provides the adapter contract and the bundled adapters:
- InMemoryVectorsStore: process-local store (dev, tests)
- FAISSVectorsStore: FAISS index persisted to disk

Dependencies: langchain_core, langchain_community
System role: Vector store adapter for ingestion and retrieval
"""

from pdfsearch.boundary.vdb.base_store import VectorStoreAdapter, matches_filter
from pdfsearch.boundary.vdb.vector_schemas import VectorRecord, VectorSearchResult

__all__ = [
    "VectorStoreAdapter",
    "VectorRecord",
    "VectorSearchResult",
    "matches_filter",
]
