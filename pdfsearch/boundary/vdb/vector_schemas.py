"""
Vector database schemas.

Pydantic models for vector operations (records written, results read).
Used for type-safe vector store interactions.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from typing import Any

from pydantic import BaseModel, Field


class VectorRecord(BaseModel):
    """
    Single chunk record written to the vector store.

    ``embedding_source_text`` is what gets embedded; ``content`` is what gets
    returned on retrieval. The ingestion pipeline sets both to the chunk text.
    """

    id: str = Field(description="Unique chunk identifier")
    content: str = Field(description="Chunk text content")
    embedding_source_text: str = Field(description="Text fed to the embedding model")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Filterable chunk metadata")


class VectorSearchResult(BaseModel):
    """Single result from vector search."""

    id: str = Field(description="Chunk identifier")
    content: str = Field(description="Chunk text content")
    score: float = Field(description="Relevance score reported by the adapter")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Chunk metadata")
