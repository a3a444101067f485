"""
Vector store configuration settings.

Selects the vector store adapter and the embedding model feeding it.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from pdfsearch.configs.base import BaseSettings


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (in-memory for dev, FAISS for persisted indexes)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECTOR_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="memory",
        description="Vector store type: 'memory' or 'faiss'",
    )
    index_dir: str = Field(
        default="/tmp/.pdfsearch_faiss",
        description="Directory where the FAISS index is persisted",
    )
    index_name: str = Field(default="documents", description="FAISS index file name")

    embedding_provider: str = Field(
        default="fake",
        description="Embedding provider: 'google' or 'fake' (deterministic, offline)",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google embedding model ID",
    )
    embedding_dimension: int = Field(
        default=768,
        description="Embedding vector dimension",
    )

    default_top_k: int = Field(default=5, description="Number of top results to retrieve")
    cascade_enumeration_limit: int = Field(
        default=1000,
        description="Ceiling on chunks enumerated per cascade deletion",
    )
