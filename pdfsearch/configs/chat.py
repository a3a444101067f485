"""
Chat orchestration configuration.

Dependencies: pydantic, pydantic_settings
System role: RAG chat defaults (titles, source display, history window)
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from pdfsearch.configs.base import BaseSettings


class ChatSettings(BaseSettings):
    """RAG chat settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHAT_",
        case_sensitive=False,
        extra="ignore",
    )

    title_max_length: int = Field(
        default=50,
        description="Characters of the first message used as a new chat title",
    )
    display_source_limit: int = Field(
        default=3,
        description="Sources shown with an answer (all are persisted)",
    )
    history_window: int = Field(
        default=10,
        description="Recent messages passed to the generator as context",
    )
    default_top_k: int = Field(default=5, description="Default retrieval depth per turn")
