"""Unit tests for structured logging setup and processors."""

import json
import logging
import os
from unittest.mock import patch

import pytest
import structlog

from core.logging import clear_request_id, set_request_id, setup_logging
from core.logging.processors import (
    add_process_info,
    add_request_context,
    add_service_context,
    console_renderer,
)


@pytest.fixture
def restore_logging():
    """Restore root handlers and structlog config after the test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestProcessors:
    """Tests for the custom structlog processors."""

    def test_request_context_added_when_set(self):
        """Test the current request ID is attached."""
        set_request_id("req-42")
        try:
            event = add_request_context(None, "info", {"event": "x"})
        finally:
            clear_request_id()

        assert event["request_id"] == "req-42"

    def test_request_context_absent_outside_request(self):
        """Test no request ID key is added without a request."""
        assert "request_id" not in add_request_context(None, "info", {})

    @patch.dict(os.environ, {"SERVICE_NAME": "admin", "ENVIRONMENT": "test"})
    def test_service_context(self):
        """Test service name and environment come from the environment."""
        event = add_service_context(None, "info", {})

        assert event["service_name"] == "admin"
        assert event["environment"] == "test"

    def test_process_info(self):
        """Test process ID is attached."""
        assert add_process_info(None, "info", {})["process_id"] == os.getpid()

    def test_console_renderer_format(self):
        """Test the console line layout and extra fields."""
        line = console_renderer(
            None,
            "info",
            {
                "level": "info",
                "timestamp": "2024-01-01T00:00:00Z",
                "logger": "core.services",
                "event": "message_created",
                "message_id": 3,
            },
        )

        assert "[INFO" in line
        assert "no-request-id" in line
        assert "message_created" in line
        assert "message_id=3" in line


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_writes_json_lines_to_file(self, tmp_path, restore_logging):
        """Test records are written to the log file as JSON."""
        log_file = tmp_path / "logs" / "service.log"

        with patch.dict(os.environ, {"LOG_FILE_PATH": str(log_file)}):
            setup_logging()
        structlog.get_logger("logging_setup_test").info("hello", answer=42)
        for handler in logging.getLogger().handlers:
            handler.flush()

        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        record = records[-1]
        assert record["event"] == "hello"
        assert record["answer"] == 42
        assert record["level"] == "info"
        assert record["service_name"]

    def test_log_level_from_environment(self, tmp_path, restore_logging):
        """Test LOG_LEVEL sets the root level."""
        env = {"LOG_FILE_PATH": str(tmp_path / "a.log"), "LOG_LEVEL": "warning"}

        with patch.dict(os.environ, env):
            setup_logging()

        assert logging.getLogger().level == logging.WARNING
