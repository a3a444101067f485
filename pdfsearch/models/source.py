"""
Source domain model.

A retrieval hit surfaced to the user and cited by assistant messages.

Dependencies: pydantic
System role: Citation data structure
"""

from typing import Any

from pydantic import BaseModel, Field, computed_field

from pdfsearch.boundary.vdb.vector_schemas import VectorSearchResult


class Source(BaseModel):
    """Retrieved passage with relevance score and flattened citation fields."""

    chunk_id: str = Field(description="Chunk identifier for tracing")
    content: str = Field(description="Chunk text content")
    score: float = Field(ge=0.0, le=1.0, description="Relevance score (0.0-1.0)")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Chunk metadata")
    filename: str = Field(default="unknown", description="Source document filename")
    document_id: str | None = Field(default=None, description="Owning document ID")

    @classmethod
    def from_search_result(cls, result: VectorSearchResult) -> "Source":
        """Build a Source from an adapter result, clamping the score into [0, 1]."""
        metadata = dict(result.metadata)
        return cls(
            chunk_id=result.id,
            content=result.content,
            score=min(max(result.score, 0.0), 1.0),
            metadata=metadata,
            filename=metadata.get("filename") or "unknown",
            document_id=metadata.get("document_id"),
        )

    @computed_field
    @property
    def display_score(self) -> str:
        """Score rounded to two decimals for display."""
        return f"{self.score:.2f}"
