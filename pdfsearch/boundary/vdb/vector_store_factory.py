"""
Vector store factory for selecting between in-memory and FAISS adapters.

Depends on VECTOR_STORE_STORE_TYPE. Callers construct the adapter once and
inject it; nothing here caches an instance.

Dependencies: pdfsearch.boundary.vdb, pdfsearch.configs
System role: Vector store instantiation and selection
"""

import logging

from langchain_core.embeddings import Embeddings

from pdfsearch.boundary.vdb.base_store import VectorStoreAdapter
from pdfsearch.boundary.vdb.embeddings import build_embeddings
from pdfsearch.boundary.vdb.faiss_store import FAISSVectorsStore
from pdfsearch.boundary.vdb.memory_store import InMemoryVectorsStore
from pdfsearch.configs.vector_store import VectorStoreSettings

logger = logging.getLogger(__name__)


def create_vector_store(
    settings: VectorStoreSettings,
    embeddings: Embeddings | None = None,
) -> VectorStoreAdapter:
    """
    Build the vector store adapter configured in ``settings``.

    Args:
        settings: Vector store settings
        embeddings: Optional embedding model (built from settings if None)

    Returns:
        VectorStoreAdapter: Configured adapter instance

    Raises:
        ValueError: If store_type is invalid
    """
    store_type = settings.store_type.lower()
    embeddings = embeddings or build_embeddings(settings)

    if store_type == "memory":
        logger.info(f"{__name__}:create_vector_store - Creating in-memory vector store")
        return InMemoryVectorsStore(embeddings=embeddings)

    if store_type == "faiss":
        logger.info(
            f"{__name__}:create_vector_store - Creating FAISS vector store at {settings.index_dir}"
        )
        return FAISSVectorsStore(
            embeddings=embeddings,
            index_dir=settings.index_dir,
            index_name=settings.index_name,
        )

    raise ValueError(
        f"Invalid VECTOR_STORE_STORE_TYPE: {settings.store_type}. "
        f"Must be 'memory' or 'faiss'."
    )
