"""Pytest configuration and shared fixtures for the html_to_text test suite.

This module provides shared fixtures and test configuration used across the
unit and integration tests.
"""

import os

import pytest
from hypothesis import HealthCheck, Verbosity, settings

from html_to_text.formatters import DEFAULT_REGISTRY
from html_to_text.node import Node
from html_to_text.options import HtmlToTextOptions
from html_to_text.walker import FormatContext, TreeWalker, WalkState

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50, suppress_health_check=[HealthCheck.too_slow])
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")


@pytest.fixture
def default_options() -> HtmlToTextOptions:
    """Provide default conversion options."""
    return HtmlToTextOptions()


@pytest.fixture
def walker() -> TreeWalker:
    """Provide a walker bound to the built-in formatters."""
    return TreeWalker(DEFAULT_REGISTRY)


@pytest.fixture
def make_context():
    """Provide a factory for formatter contexts with a fresh line cursor."""

    def _make(options: HtmlToTextOptions | None = None) -> FormatContext:
        return FormatContext(options or HtmlToTextOptions(), WalkState())

    return _make


@pytest.fixture
def article_tree() -> list[Node]:
    """Provide a small parsed document with navigation and an article."""
    return [
        Node.tag(
            "html",
            children=[
                Node.tag(
                    "body",
                    children=[
                        Node.tag("div", {"id": "nav", "class": "menu"}, [Node.text("Menu")]),
                        Node.tag(
                            "div",
                            {"id": "main", "class": "article featured"},
                            [Node.tag("p", children=[Node.text("Main story")])],
                        ),
                        Node.tag("div", {"class": "footer"}, [Node.text("Footer")]),
                    ],
                )
            ],
        )
    ]

