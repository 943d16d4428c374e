#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_logging_utils.py
"""Unit tests for command-line logging setup.

Tests cover:
- Level name resolution
- Console and file handlers on the package logger
- Reconfiguration without duplicate handlers
- Unwritable log files

"""

import io
import logging

import pytest

from html_to_text.logging_utils import PACKAGE_LOGGER, configure_logging, resolve_level


@pytest.fixture(autouse=True)
def restore_package_logger():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


@pytest.mark.unit
class TestResolveLevel:

    def test_names(self):
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level("WARNING") == logging.WARNING

    def test_numbers_pass_through(self):
        assert resolve_level(15) == 15

    def test_unknown_name_defaults_to_info(self):
        assert resolve_level("chatty") == logging.INFO


@pytest.mark.unit
class TestConfigureLogging:

    def test_configures_package_logger_only(self):
        root_handlers = list(logging.getLogger().handlers)
        logger = configure_logging("DEBUG", stream=io.StringIO())
        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.DEBUG
        assert logging.getLogger().handlers == root_handlers

    def test_console_format(self):
        stream = io.StringIO()
        configure_logging("INFO", stream=stream)
        logging.getLogger("html_to_text.walker").info("walking")
        assert stream.getvalue() == "INFO: walking\n"

    def test_trace_format_names_logger(self):
        stream = io.StringIO()
        configure_logging("INFO", trace_mode=True, stream=stream)
        logging.getLogger("html_to_text.walker").info("walking")
        assert "[INFO] [html_to_text.walker] walking" in stream.getvalue()

    def test_level_filters_records(self):
        stream = io.StringIO()
        configure_logging("WARNING", stream=stream)
        logging.getLogger("html_to_text.walker").info("hidden")
        assert stream.getvalue() == ""

    def test_reconfiguring_replaces_handlers(self):
        stream = io.StringIO()
        configure_logging("INFO", stream=io.StringIO())
        logger = configure_logging("INFO", stream=stream)
        logger.info("once")
        assert stream.getvalue() == "INFO: once\n"
        assert len(logger.handlers) == 1

    def test_keeps_foreign_handlers(self):
        logger = logging.getLogger(PACKAGE_LOGGER)
        foreign = logging.NullHandler()
        logger.addHandler(foreign)
        configure_logging("INFO", stream=io.StringIO())
        assert foreign in logger.handlers

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "convert.log"
        configure_logging("DEBUG", log_file=str(log_file), stream=io.StringIO())
        logging.getLogger("html_to_text.converter").debug("converted")
        for handler in logging.getLogger(PACKAGE_LOGGER).handlers:
            handler.flush()
        assert "DEBUG: converted" in log_file.read_text(encoding="utf-8")

    def test_unwritable_log_file_warns(self, tmp_path):
        stream = io.StringIO()
        logger = configure_logging("INFO", log_file=str(tmp_path / "missing" / "x.log"), stream=stream)
        assert "Could not open log file" in stream.getvalue()
        assert len(logger.handlers) == 1
