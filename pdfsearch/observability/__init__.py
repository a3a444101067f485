"""
Observability module.

Exports:
- configure_logging: Root logger setup with structured context rendering
- log_error_with_context: Logging for swallowed cleanup failures
"""

from pdfsearch.observability.log_utils import log_error_with_context
from pdfsearch.observability.logger import configure_logging

__all__ = ["configure_logging", "log_error_with_context"]
