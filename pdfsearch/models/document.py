"""
Document domain models and schemas.

Request/response schemas for document operations.

Dependencies: pydantic
System role: Document API contracts
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pdfsearch.models.source import Source


class DocumentResponse(BaseModel):
    """Response schema for document operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: str
    filename: str
    size_bytes: int
    mime_type: str
    status: str
    chunk_count: int
    created_at: datetime
    updated_at: datetime
    error_message: str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _status_value(cls, value):
        return getattr(value, "value", value)


class DocumentListResponse(BaseModel):
    """Document list response."""

    documents: list[DocumentResponse]
    total: int


class SearchRequest(BaseModel):
    """Request schema for semantic search over the caller's documents."""

    query: str = Field(min_length=1, description="Search query text")
    top_k: int = Field(default=5, ge=1, le=100, description="Number of results")
    document_id: uuid.UUID | None = Field(default=None, description="Restrict to one document")
    filters: dict[str, Any] = Field(default_factory=dict, description="Extra metadata filters")


class SearchResponse(BaseModel):
    """Search results ordered by descending score."""

    results: list[Source]
    total: int


class IngestionResult(BaseModel):
    """Outcome of ingesting one document into the vector store."""

    document_id: str = Field(description="Document identifier")
    chunk_count: int = Field(description="Number of chunks stored")
    chunk_ids: list[str] = Field(default_factory=list, description="Freshly generated chunk IDs")
    processing_time_ms: float = Field(description="Total ingestion time in milliseconds")
