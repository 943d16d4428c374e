"""html_to_text - Convert HTML documents to word-wrapped plain text.

html_to_text parses HTML with BeautifulSoup and renders it as plain text,
applying per-tag formatting rules (headings, paragraphs, lists, tables,
links, images, line breaks) and wrapping the result to a fixed width.

Key Features
------------
- Word wrapping that continues from the current column across nested tags
- Configurable long-word splitting and newline preservation
- Depth and sibling-count limits with an ellipsis marker
- Base element selection with ``tag.class#id`` selectors
- Pluggable per-tag formatters through a registry

Examples
--------
Basic usage:

    >>> from html_to_text import html_to_text
    >>> html_to_text("<h1>Hello</h1><p>World</p>")
    'HELLO\\nWorld'

Narrow output and a custom base element:

    >>> html_to_text(html, wrap={"width": 40}, base_elements=("div.article",))

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from html_to_text.converter import HtmlToTextConverter, convert_nodes, html_to_text
from html_to_text.exceptions import (
    DependencyError,
    FormatterNotFoundError,
    HtmlToTextError,
    ParsingError,
    ValidationError,
)
from html_to_text.formatters import DEFAULT_REGISTRY, FormatterRegistry
from html_to_text.layout import TextBuilder, wordwrap
from html_to_text.node import Node, NodeKind
from html_to_text.options import (
    HtmlToTextOptions,
    LimitsOptions,
    LongWordSplitOptions,
    TagSpec,
    WrapOptions,
    merge_options,
)
from html_to_text.walker import FormatContext, TreeWalker, WalkState

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_REGISTRY",
    "DependencyError",
    "FormatContext",
    "FormatterNotFoundError",
    "FormatterRegistry",
    "HtmlToTextConverter",
    "HtmlToTextError",
    "HtmlToTextOptions",
    "LimitsOptions",
    "LongWordSplitOptions",
    "Node",
    "NodeKind",
    "ParsingError",
    "TagSpec",
    "TextBuilder",
    "TreeWalker",
    "ValidationError",
    "WalkState",
    "WrapOptions",
    "convert_nodes",
    "html_to_text",
    "merge_options",
    "wordwrap",
]
