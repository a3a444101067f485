"""
Logging setup for the service.

Services attach ids through ``extra=`` (chat_id, document_id, user_id);
ContextFormatter renders those fields after the message so a log line can
be traced back to the chat or document it concerns.

Dependencies: logging (stdlib)
System role: Root logger configuration at app startup
"""

import logging
import sys

# Attributes present on every LogRecord; anything else came in via ``extra``
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}

QUIET_LOGGERS = ("httpx", "aiosqlite", "sqlalchemy.engine", "faiss")


class ContextFormatter(logging.Formatter):
    """Formatter that appends ``extra`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        return f"{line} | {pairs}"


def configure_logging(level: str = "INFO", with_context: bool = True) -> None:
    """
    Install a single stdout handler on the root logger.

    Args:
        level: Root log level name
        with_context: Render ``extra`` fields after each message
    """
    formatter_cls = ContextFormatter if with_context else logging.Formatter
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        formatter_cls(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level.upper())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
