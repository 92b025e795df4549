"""
Test suite for logging utilities.

System role: Verification of degraded-path logging helpers
"""

import logging

import pytest

from studyeasier.observability.log_utils import log_degraded, safe_log_value
from studyeasier.observability.logger import configure_logging


class TestSafeLogValue:
    """Test suite for safe_log_value()."""

    def test_none(self) -> None:
        assert safe_log_value(None) == "None"

    def test_collections_are_summarized(self) -> None:
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"

    def test_long_values_are_truncated(self) -> None:
        result = safe_log_value("x" * 50, max_length=10)

        assert result.startswith("x" * 10 + "...")
        assert "50 total" in result

    def test_unprintable_value_does_not_raise(self) -> None:
        class Broken:
            def __str__(self) -> str:
                raise RuntimeError("no")

        assert safe_log_value(Broken()) == "<unable to log: RuntimeError>"


class TestLogDegraded:
    """Test suite for log_degraded()."""

    def test_logs_warning_with_operation_and_context(self, caplog: pytest.LogCaptureFixture) -> None:
        # Arrange
        logger = logging.getLogger("tests.degraded")

        # Act
        with caplog.at_level(logging.WARNING, logger="tests.degraded"):
            log_degraded(logger, "fetch_chats", ConnectionError("refused"), user_id="u1")

        # Assert
        (record,) = caplog.records
        assert record.levelno == logging.WARNING
        assert record.operation == "fetch_chats"
        assert "ConnectionError: refused" in record.getMessage()
        assert "user_id=u1" in record.getMessage()

    def test_accepts_plain_error_text(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("tests.degraded")

        with caplog.at_level(logging.WARNING, logger="tests.degraded"):
            log_degraded(logger, "insert_asset", "Timed out after 10.0s")

        assert caplog.records[0].getMessage() == "insert_asset degraded - Timed out after 10.0s"


class TestConfigureLogging:
    """Test suite for configure_logging()."""

    def test_sets_root_level_and_quiets_http_libraries(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("debug")

            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)
