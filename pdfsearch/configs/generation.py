"""
Answer generation configuration.

Dependencies: pydantic, pydantic_settings
System role: Chat model configuration for the RAG generator
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from pdfsearch.configs.base import BaseSettings


class GenerationSettings(BaseSettings):
    """Chat model settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GENERATION_",
        case_sensitive=False,
        extra="ignore",
    )

    model_id: str = Field(
        default="gemini-2.5-flash",
        description="Google Generative AI chat model ID",
    )
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Model temperature (0.0 for deterministic)",
    )
