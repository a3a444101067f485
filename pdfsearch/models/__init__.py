"""Domain models and API schemas."""

from pdfsearch.models.source import Source

__all__ = ["Source"]
