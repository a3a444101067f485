"""
Ingestion pipeline configuration.

Chunk size and overlap are shared process-wide by every chunker instance.

Dependencies: pydantic, pydantic_settings
System role: Chunking configuration
"""

from pydantic import Field, model_validator
from pydantic_settings import SettingsConfigDict

from pdfsearch.configs.base import BaseSettings


class IngestionSettings(BaseSettings):
    """Settings for the document-to-vector ingestion pipeline."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="INGESTION_",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(
        default=1000,
        gt=0,
        description="Maximum chunk size in characters",
    )
    chunk_overlap: int = Field(
        default=100,
        ge=0,
        description="Overlap between consecutive chunks",
    )

    @model_validator(mode="after")
    def _overlap_smaller_than_chunk(self) -> "IngestionSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError("chunk_overlap must be smaller than chunk_size")
        return self
