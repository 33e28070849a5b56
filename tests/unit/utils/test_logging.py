"""Tests for logging configuration utilities."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from animkit.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="animkit.core.animation.controller",
        level=logging.DEBUG,
        pathname="/path/to/controller.py",
        lineno=42,
        msg="Animation started: %s",
        args=("ping_pong",),
        exc_info=None,
    )
    record.funcName = "start"
    record.module = "controller"
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self):
        """Test basic log record formatting to JSON."""
        data = json.loads(StructuredJSONFormatter().format(_record()))

        assert data["level"] == "DEBUG"
        assert data["message"] == "Animation started: ping_pong"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "animkit.core.animation.controller"
        assert data["context"]["module"] == "controller"
        assert data["context"]["function"] == "start"
        assert data["context"]["line"] == 42

    def test_extra_fields_in_context(self):
        """Extra attributes end up in the context."""
        data = json.loads(StructuredJSONFormatter().format(_record(animation="fade")))
        assert data["context"]["animation"] == "fade"

    def test_standard_attributes_excluded(self):
        """Standard LogRecord attributes are not duplicated into the context."""
        data = json.loads(StructuredJSONFormatter().format(_record()))
        assert "pathname" not in data["context"]
        assert "args" not in data["context"]

    def test_exception_info(self):
        """Exception details are included."""
        try:
            raise ValueError("bad duration")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        data = json.loads(StructuredJSONFormatter().format(record))
        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "bad duration"
        assert "Traceback" in data["context"]["stack_trace"]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level(self, restore_root_logger):
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_structured_file_output(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "anim.jsonl"
        configure_logging(level="INFO", filename=str(log_file), structured=True)

        logging.getLogger("animkit.test").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["message"] == "hello"

    def test_custom_format(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "anim.log"
        configure_logging(
            level="INFO", format_string="%(levelname)s|%(message)s", filename=str(log_file)
        )

        logging.getLogger("animkit.test").warning("careful")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "WARNING|careful" in log_file.read_text(encoding="utf-8")


class TestGetLogger:
    """Tests for get_logger."""

    def test_plain_logger(self):
        logger = get_logger("animkit.test")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "animkit.test"

    def test_adapter_with_context(self):
        adapter = get_logger("animkit.test", animation="fade")
        assert isinstance(adapter, logging.LoggerAdapter)
        assert adapter.extra == {"animation": "fade"}
