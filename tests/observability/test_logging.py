"""
Test suite for logging setup and cleanup-failure helpers.
"""

import logging
import uuid

from pdfsearch.observability.log_utils import log_error_with_context, safe_log_value
from pdfsearch.observability.logger import ContextFormatter


def _record(**extra) -> logging.LogRecord:
    logger = logging.getLogger("pdfsearch.test")
    return logger.makeRecord(
        "pdfsearch.test", logging.INFO, __file__, 1, "Deleted chat", None, None, extra=extra
    )


class TestContextFormatter:
    def test_appends_extra_fields_sorted(self) -> None:
        formatter = ContextFormatter("%(levelname)s - %(message)s")

        line = formatter.format(_record(chat_id="c1", chunk_count=3))

        assert line == "INFO - Deleted chat | chunk_count=3 chat_id=c1"

    def test_plain_record_is_unchanged(self) -> None:
        formatter = ContextFormatter("%(levelname)s - %(message)s")

        assert formatter.format(_record()) == "INFO - Deleted chat"


class TestSafeLogValue:
    def test_collections_are_summarized(self) -> None:
        assert safe_log_value(["a", "b"]) == "list(2 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"

    def test_long_strings_are_truncated(self) -> None:
        rendered = safe_log_value("x" * 300, max_length=10)

        assert rendered == "xxxxxxxxxx... (300 chars)"

    def test_ids_render_verbatim(self) -> None:
        chat_id = uuid.uuid4()

        assert safe_log_value(chat_id) == str(chat_id)
        assert safe_log_value(None) == "None"


class TestLogErrorWithContext:
    def test_logs_error_type_and_context(self, caplog) -> None:
        logger = logging.getLogger("pdfsearch.test")

        with caplog.at_level(logging.ERROR):
            log_error_with_context(logger, "Rollback failed", RuntimeError("db gone"), chat_id="c1")

        [record] = caplog.records
        assert record.message == "Rollback failed"
        assert record.error_type == "RuntimeError"
        assert record.error_msg == "db gone"
        assert record.chat_id == "c1"
        assert record.exc_info is not None
