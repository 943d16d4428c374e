#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html_to_text/converter.py
"""HTML to plain text conversion entry point.

The converter ties the pieces together: it parses the HTML into a node tree,
locates each configured base element, walks it with the configured depth
limit, concatenates the results, and trims trailing whitespace.

Examples
--------
    >>> from html_to_text import html_to_text
    >>> html_to_text("<p>Hello</p><p>World</p>")
    'Hello\\n\\nWorld'

"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Optional

from html_to_text.base_locator import find_base
from html_to_text.constants import DEFAULT_HTML_PARSER, TEXT_FORMAT
from html_to_text.exceptions import FormatterNotFoundError, ValidationError
from html_to_text.formatters import DEFAULT_REGISTRY, FormatterRegistry
from html_to_text.node import Node
from html_to_text.options import HtmlToTextOptions, merge_options
from html_to_text.parser import parse_html
from html_to_text.utils.decorators import debug_timer
from html_to_text.walker import FormatContext, TreeWalker, TruncationHandler, WalkState, append_ellipsis

logger = logging.getLogger(__name__)


class HtmlToTextConverter:
    """Convert HTML or parsed node trees to wrapped plain text.

    The converter validates its configuration once, at construction. A
    converter holds no per-call state and may be reused, including from
    several threads at once.

    Parameters
    ----------
    options : HtmlToTextOptions or None, default None
        Conversion options; defaults are used when None
    registry : FormatterRegistry or None, default None
        Formatter registry; the built-in registry is used when None
    truncate : callable, default append_ellipsis
        Handler invoked where the depth limit cuts off content
    html_parser : str, default "html.parser"
        BeautifulSoup tree builder used by :meth:`convert`

    Raises
    ------
    ValidationError
        If options have the wrong type
    FormatterNotFoundError
        If a tag mapping references a formatter id that is not registered

    """

    def __init__(
        self,
        options: HtmlToTextOptions | None = None,
        registry: FormatterRegistry | None = None,
        truncate: TruncationHandler = append_ellipsis,
        html_parser: str = DEFAULT_HTML_PARSER,
    ):
        if options is not None and not isinstance(options, HtmlToTextOptions):
            raise ValidationError(
                f"options must be HtmlToTextOptions, got {type(options).__name__}", "options", type(options)
            )
        self.options = options or HtmlToTextOptions()
        self.registry = registry or DEFAULT_REGISTRY
        self.html_parser = html_parser
        self._walker = TreeWalker(self.registry, truncate=truncate)
        self._validate_formatters()

    def _validate_formatters(self) -> None:
        if TEXT_FORMAT not in self.registry:
            raise FormatterNotFoundError(TEXT_FORMAT)
        for tag_name, spec in self.options.tags.items():
            if spec.format not in self.registry:
                raise FormatterNotFoundError(spec.format, tag_name)

    def convert(self, html: str) -> str:
        """Convert an HTML string to plain text.

        Parameters
        ----------
        html : str
            HTML content

        Returns
        -------
        str
            Plain text without trailing whitespace

        """
        if not isinstance(html, str):
            raise ValidationError(f"html must be a string, got {type(html).__name__}", "html", type(html))
        return self.convert_nodes(parse_html(html, self.html_parser))

    def convert_nodes(self, nodes: Sequence[Node]) -> str:
        """Convert an already parsed node tree to plain text.

        Each base element is located and walked independently; their
        outputs are concatenated in the configured order. A base element
        that is not found (with the whole-tree fallback disabled)
        contributes nothing.

        Parameters
        ----------
        nodes : sequence of Node
            Top-level nodes of the document

        Returns
        -------
        str
            Plain text without trailing whitespace

        """
        context = FormatContext(self.options, WalkState())
        max_depth = self.options.limits.max_depth

        result = ""
        with debug_timer(logger, "Conversion"):
            for selector in self.options.base_elements:
                base = find_base(nodes, self.options, selector)
                if base is None:
                    continue
                result += self._walker.walk(base, context, depth=max_depth)

        return result.rstrip()


def _resolve_options(options: Optional[HtmlToTextOptions], overrides: dict[str, Any]) -> HtmlToTextOptions:
    if options is not None and not isinstance(options, HtmlToTextOptions):
        raise ValidationError(f"options must be HtmlToTextOptions, got {type(options).__name__}", "options", options)
    return merge_options(options, **overrides)


def html_to_text(
    html: str,
    options: Optional[HtmlToTextOptions] = None,
    *,
    registry: Optional[FormatterRegistry] = None,
    html_parser: str = DEFAULT_HTML_PARSER,
    **kwargs: Any,
) -> str:
    """Convert an HTML string to word-wrapped plain text.

    Parameters
    ----------
    html : str
        HTML content
    options : HtmlToTextOptions or None, default None
        Conversion options
    registry : FormatterRegistry or None, default None
        Formatter registry; the built-in registry is used when None
    html_parser : str, default "html.parser"
        BeautifulSoup tree builder
    **kwargs : Any
        Option overrides merged over ``options``, e.g. ``wrap={"width": 40}``

    Returns
    -------
    str
        Plain text

    Examples
    --------
        >>> html_to_text("<h1>Title</h1><p>Body</p>", uppercase_headings=False)
        'Title\\nBody'

    """
    resolved = _resolve_options(options, kwargs)
    return HtmlToTextConverter(resolved, registry=registry, html_parser=html_parser).convert(html)


def convert_nodes(
    nodes: Sequence[Node],
    options: Optional[HtmlToTextOptions] = None,
    *,
    registry: Optional[FormatterRegistry] = None,
    **kwargs: Any,
) -> str:
    """Convert a parsed node tree to word-wrapped plain text.

    Parameters
    ----------
    nodes : sequence of Node
        Top-level nodes of the document
    options : HtmlToTextOptions or None, default None
        Conversion options
    registry : FormatterRegistry or None, default None
        Formatter registry
    **kwargs : Any
        Option overrides merged over ``options``

    Returns
    -------
    str
        Plain text

    """
    resolved = _resolve_options(options, kwargs)
    return HtmlToTextConverter(resolved, registry=registry).convert_nodes(nodes)
