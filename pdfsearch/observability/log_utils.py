"""
Helpers for logging errors that are handled instead of raised.

Cascade deletion and chat rollback swallow their own failures so the
caller's outcome stands; these helpers keep those failures visible.

Dependencies: logging (stdlib)
System role: Logging for best-effort cleanup paths
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any
from uuid import UUID


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Render a context value for a log record without dumping large payloads.

    Collections are summarized by size and long strings are cut at
    ``max_length``.
    """
    if value is None or isinstance(value, (UUID, int, float, bool)):
        return str(value)
    if isinstance(value, Mapping):
        return f"dict({len(value)} keys)"
    if isinstance(value, Sequence) and not isinstance(value, str):
        return f"{type(value).__name__}({len(value)} items)"

    text = str(value)
    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def log_error_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log a failure that is being deliberately discarded.

    Args:
        logger: Logger of the module doing the cleanup
        message: What failed
        exc: The discarded exception, logged with its traceback
        **context: Ids of the affected chat, message or document
    """
    extra = {key: safe_log_value(value) for key, value in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.error(message, extra=extra, exc_info=exc)
