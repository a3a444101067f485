"""
Embedding model factory.

Google Generative AI embeddings in production; a deterministic hash-seeded
fake for offline development and tests.

Dependencies: langchain_google_genai, langchain_core
System role: Embedding model selection
"""

import logging

from langchain_core.embeddings import DeterministicFakeEmbedding, Embeddings

from pdfsearch.configs.vector_store import VectorStoreSettings

logger = logging.getLogger(__name__)


def build_embeddings(settings: VectorStoreSettings) -> Embeddings:
    """
    Build the embedding model configured in ``settings``.

    Args:
        settings: Vector store settings (provider, model, dimension)

    Returns:
        Embeddings: LangChain embeddings instance

    Raises:
        ValueError: If the provider is unknown
    """
    provider = settings.embedding_provider.lower()

    if provider == "google":
        from langchain_google_genai import GoogleGenerativeAIEmbeddings

        logger.info(
            f"{__name__}:build_embeddings - Creating GoogleGenerativeAIEmbeddings "
            f"model={settings.embedding_model}"
        )
        return GoogleGenerativeAIEmbeddings(model=settings.embedding_model)

    if provider == "fake":
        logger.info(
            f"{__name__}:build_embeddings - Creating DeterministicFakeEmbedding "
            f"size={settings.embedding_dimension}"
        )
        return DeterministicFakeEmbedding(size=settings.embedding_dimension)

    raise ValueError(
        f"Invalid embedding provider: {settings.embedding_provider}. "
        f"Must be 'google' or 'fake'."
    )
