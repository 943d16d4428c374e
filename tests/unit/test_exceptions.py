#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_exceptions.py
"""Unit tests for the exception hierarchy and dependency checks."""

import logging

import pytest

from html_to_text.exceptions import (
    DependencyError,
    FormatterNotFoundError,
    HtmlToTextError,
    ParsingError,
    ValidationError,
)
from html_to_text.utils.decorators import debug_timer, requires_dependencies


@pytest.mark.unit
class TestExceptions:

    def test_hierarchy(self):
        assert issubclass(ValidationError, HtmlToTextError)
        assert issubclass(FormatterNotFoundError, ValidationError)
        assert issubclass(ParsingError, HtmlToTextError)
        assert issubclass(DependencyError, HtmlToTextError)

    def test_original_error_kept(self):
        cause = ValueError("bad")
        error = ParsingError("failed", parsing_stage="backend", original_error=cause)
        assert error.original_error is cause
        assert str(error) == "failed"

    def test_formatter_not_found_message(self):
        error = FormatterNotFoundError("bold", "b")
        assert "'b'" in str(error)
        assert "'bold'" in str(error)
        assert error.parameter_name == "tags"

    def test_formatter_not_found_default_tag(self):
        assert "<default>" in str(FormatterNotFoundError("bold", ""))

    def test_dependency_error_install_command(self):
        error = DependencyError("html", [("beautifulsoup4", ">=4.9.0")])
        assert error.install_command == 'pip install "beautifulsoup4>=4.9.0"'
        assert "beautifulsoup4" in str(error)


@pytest.mark.unit
class TestRequiresDependencies:

    def test_missing_package(self):
        @requires_dependencies("demo", [("not-a-real-package", "not_a_real_package_xyz", "")])
        def convert():
            return "converted"

        with pytest.raises(DependencyError) as exc_info:
            convert()
        assert exc_info.value.missing_packages == [("not-a-real-package", "")]
        assert isinstance(exc_info.value.original_import_error, ImportError)

    def test_version_mismatch(self):
        @requires_dependencies("demo", [("beautifulsoup4", "bs4", ">=999")])
        def convert():
            return "converted"

        with pytest.raises(DependencyError) as exc_info:
            convert()
        assert exc_info.value.version_mismatches[0][:2] == ("beautifulsoup4", ">=999")

    def test_satisfied(self):
        @requires_dependencies("demo", [("beautifulsoup4", "bs4", ">=4.0")])
        def convert(value):
            return value * 2

        assert convert(2) == 4


@pytest.mark.unit
def test_debug_timer_logs(caplog):
    logger = logging.getLogger("tests.timer")
    with caplog.at_level(logging.DEBUG, logger="tests.timer"):
        with debug_timer(logger, "Conversion"):
            pass
    assert "Conversion completed in" in caplog.text
