"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from pdfsearch.configs.base import BaseSettings
from pdfsearch.configs.chat import ChatSettings
from pdfsearch.configs.database import DatabaseSettings
from pdfsearch.configs.generation import GenerationSettings
from pdfsearch.configs.ingestion import IngestionSettings
from pdfsearch.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_context: bool = Field(
        default=True,
        description="Append structured ``extra`` fields to each log line",
    )

    database: DatabaseSettings = DatabaseSettings()
    vector_store: VectorStoreSettings = VectorStoreSettings()
    ingestion: IngestionSettings = IngestionSettings()
    chat: ChatSettings = ChatSettings()
    generation: GenerationSettings = GenerationSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from pdfsearch.configs import get_settings
        settings = get_settings()
    """
    return Settings()
