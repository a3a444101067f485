"""
Shared settings base.

Every config module reads the same ``.env`` file and ignores keys that
belong to other modules, so one file can configure the whole service.

Dependencies: pydantic_settings
System role: Common loader behaviour for configuration classes
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Settings loaded from the environment and ``.env``; unknown keys ignored."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
