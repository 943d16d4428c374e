#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for html_to_text.

This module centralizes the named defaults used by the option dataclasses,
the formatter registry and the command-line wrapper.

Constants are organized by category:
1. Type Definitions
2. Traversal Limits
3. Word Wrapping
4. Tag Formatting
5. Parser Backend
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlParserBackend = Literal["html.parser", "lxml", "html5lib"]

# =============================================================================
# Traversal Limits
# =============================================================================

DEFAULT_BASE_ELEMENTS: tuple[str, ...] = ("body",)
DEFAULT_ELLIPSIS = "..."
DEFAULT_MAX_DEPTH: int | None = None
DEFAULT_MAX_CHILD_NODES: int | None = None
DEFAULT_RETURN_DOM_BY_DEFAULT = True

# Text node data the parser emits for some line endings; skipped by the walker
IGNORED_TEXT_DATA = "\r\n"

# =============================================================================
# Word Wrapping
# =============================================================================

DEFAULT_WORDWRAP_WIDTH: int | None = 80
DEFAULT_PRESERVE_NEWLINES = False
DEFAULT_FORCE_WRAP_ON_LIMIT = False
DEFAULT_WRAP_CHARACTERS: tuple[str, ...] = ()

# Leading control whitespace allowed before the space that marks a
# significant leading/trailing blank
MAX_CONTROL_WHITESPACE_RUN = 4

# Horizontal rule width when wrapping is disabled
UNWRAPPED_HORIZONTAL_LINE_WIDTH = 40

# =============================================================================
# Tag Formatting
# =============================================================================

DEFAULT_TAG_FORMAT = "children"
TEXT_FORMAT = "text"

# tag name -> (formatter id, inline); "" supplies the default for unmatched tags
DEFAULT_TAG_FORMATS: dict[str, tuple[str, bool]] = {
    "": (DEFAULT_TAG_FORMAT, False),
    "a": ("anchor", True),
    "blockquote": ("blockquote", False),
    "br": ("line_break", False),
    "h1": ("heading", False),
    "h2": ("heading", False),
    "h3": ("heading", False),
    "h4": ("heading", False),
    "h5": ("heading", False),
    "h6": ("heading", False),
    "hr": ("horizontal_line", False),
    "img": ("image", True),
    "ol": ("ordered_list", False),
    "p": ("paragraph", False),
    "pre": ("pre", False),
    "table": ("table", False),
    "ul": ("unordered_list", False),
}

DEFAULT_UPPERCASE_HEADINGS = True
DEFAULT_SINGLE_NEWLINE_PARAGRAPHS = False
DEFAULT_UNORDERED_LIST_ITEM_PREFIX = " * "
DEFAULT_IGNORE_HREF = False
DEFAULT_IGNORE_IMAGE = False
DEFAULT_NO_ANCHOR_URL = True
DEFAULT_NO_LINK_BRACKETS = False
DEFAULT_HIDE_LINK_HREF_IF_SAME_AS_TEXT = False
DEFAULT_UPPERCASE_HEADER_CELLS = True
DEFAULT_TABLE_COLUMN_SPACING = 3
BLOCKQUOTE_PREFIX = "> "

# =============================================================================
# Parser Backend
# =============================================================================

DEFAULT_HTML_PARSER: HtmlParserBackend = "html.parser"
DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.9.0")]

# Environment variable prefix used by the CLI for option defaults
ENV_PREFIX = "HTML_TO_TEXT_"
