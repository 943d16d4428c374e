#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html_to_text/formatters.py
"""Formatter registry and built-in tag formatters.

A formatter renders one node to text. It receives the node, a walk callable
for rendering the node's children (carrying the remaining depth budget), and
the :class:`~html_to_text.walker.FormatContext`. Tag names are mapped to
formatter ids through ``HtmlToTextOptions.tags``; the ids are resolved in a
:class:`FormatterRegistry`.

Examples
--------
Registering a custom formatter:

    >>> registry = DEFAULT_REGISTRY.copy()
    >>> @registry.register("strong")
    ... def format_strong(node, walk, context):
    ...     return "*" + walk(node.children, context) + "*"

"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Callable, Optional

from html_to_text.constants import BLOCKQUOTE_PREFIX, TEXT_FORMAT, UNWRAPPED_HORIZONTAL_LINE_WIDTH
from html_to_text.exceptions import FormatterNotFoundError
from html_to_text.layout import wordwrap
from html_to_text.node import Node, NodeKind
from html_to_text.numbering import number_to_letter_sequence, number_to_roman
from html_to_text.tables import format_data_table, format_layout_table, is_data_table
from html_to_text.walker import FormatContext, Walk

logger = logging.getLogger(__name__)

Formatter = Callable[[Node, Walk, FormatContext], str]


class FormatterRegistry:
    """Mapping of formatter ids to formatter callables.

    Parameters
    ----------
    formatters : dict, optional
        Initial formatters keyed by id

    """

    def __init__(self, formatters: Optional[dict[str, Formatter]] = None):
        self._formatters: dict[str, Formatter] = dict(formatters or {})

    def register(self, name: str, formatter: Optional[Formatter] = None) -> Callable:
        """Register a formatter under ``name``.

        Can be called directly or used as a decorator. Registering an
        existing id replaces the previous formatter.

        Parameters
        ----------
        name : str
            Formatter id referenced from tag mappings
        formatter : callable, optional
            The formatter. When omitted, a decorator is returned.

        """

        def decorator(func: Formatter) -> Formatter:
            if name in self._formatters:
                logger.debug("Replacing formatter '%s'", name)
            self._formatters[name] = func
            return func

        if formatter is not None:
            return decorator(formatter)
        return decorator

    def unregister(self, name: str) -> bool:
        """Remove a formatter. Returns True if it was registered."""
        return self._formatters.pop(name, None) is not None

    def get(self, name: str) -> Formatter:
        """Resolve a formatter id.

        Raises
        ------
        FormatterNotFoundError
            If no formatter is registered under ``name``

        """
        try:
            return self._formatters[name]
        except KeyError:
            raise FormatterNotFoundError(name) from None

    def names(self) -> list[str]:
        return sorted(self._formatters)

    def copy(self) -> FormatterRegistry:
        return FormatterRegistry(self._formatters)

    def __contains__(self, name: object) -> bool:
        return name in self._formatters

    def __len__(self) -> int:
        return len(self._formatters)


DEFAULT_REGISTRY = FormatterRegistry()


def _wrap_inline(text: str, context: FormatContext, offset: int) -> str:
    if context.in_pre:
        return text
    return wordwrap(text, context.options, offset)


def _narrowed_width(context: FormatContext, indent: int) -> Optional[int]:
    width = context.options.wrap.width
    return None if width is None else max(1, width - indent)


def _start_block(context: FormatContext) -> str:
    """Return a newline when the cursor is mid-line, moving it to column 0."""
    if context.state.line_char_count:
        context.state.line_char_count = 0
        return "\n"
    return ""


def _indent_continuation(text: str, indent: int) -> str:
    first, *rest = text.split("\n")
    padding = " " * indent
    return "\n".join([first, *(padding + line if line else line for line in rest)])


@DEFAULT_REGISTRY.register(TEXT_FORMAT)
def format_text(node: Node, walk: Walk, context: FormatContext) -> str:
    return _wrap_inline(node.data or "", context, context.state.line_char_count)


@DEFAULT_REGISTRY.register("children")
def format_children(node: Node, walk: Walk, context: FormatContext) -> str:
    return walk(node.children, context)


@DEFAULT_REGISTRY.register("paragraph")
def format_paragraph(node: Node, walk: Walk, context: FormatContext) -> str:
    separator = "\n" if context.options.single_newline_paragraphs else "\n\n"
    lead = _start_block(context)
    return lead + walk(node.children, context) + separator


@DEFAULT_REGISTRY.register("heading")
def format_heading(node: Node, walk: Walk, context: FormatContext) -> str:
    lead = _start_block(context)
    heading = walk(node.children, context)
    if context.options.uppercase_headings:
        heading = heading.upper()
    return lead + heading + "\n"


@DEFAULT_REGISTRY.register("line_break")
def format_line_break(node: Node, walk: Walk, context: FormatContext) -> str:
    return "\n"


@DEFAULT_REGISTRY.register("horizontal_line")
def format_horizontal_line(node: Node, walk: Walk, context: FormatContext) -> str:
    width = context.options.wrap.width or UNWRAPPED_HORIZONTAL_LINE_WIDTH
    return "\n" + "-" * width + "\n\n"


@DEFAULT_REGISTRY.register("anchor")
def format_anchor(node: Node, walk: Walk, context: FormatContext) -> str:
    """Render link text followed by its target.

    The link text is rendered first and then re-wrapped together with the
    target, starting from the column the link began at.
    """
    options = context.options
    stored_char_count = context.state.line_char_count
    text = walk(node.children, context)
    result = text

    href = "" if options.ignore_href else node.get("href")
    if href.startswith("mailto:"):
        href = href[len("mailto:") :]
    if href and not (options.no_anchor_url and href.startswith("#")):
        if options.link_href_base_url and href.startswith("/"):
            href = options.link_href_base_url + href
        if not (options.hide_link_href_if_same_as_text and href == text.replace("\n", "")):
            target = href if options.no_link_brackets else f"[{href}]"
            result = f"{text} {target}" if text else target

    context.state.line_char_count = stored_char_count
    return _wrap_inline(result, context, stored_char_count)


@DEFAULT_REGISTRY.register("image")
def format_image(node: Node, walk: Walk, context: FormatContext) -> str:
    options = context.options
    if options.ignore_image:
        return ""

    alt = node.get("alt")
    src = node.get("src")
    if src and options.link_href_base_url and src.startswith("/"):
        src = options.link_href_base_url + src

    parts = []
    if alt:
        parts.append(alt)
    if src:
        parts.append(f"[{src}]")
    return _wrap_inline(" ".join(parts), context, context.state.line_char_count)


@DEFAULT_REGISTRY.register("blockquote")
def format_blockquote(node: Node, walk: Walk, context: FormatContext) -> str:
    lead = _start_block(context)
    quote_context = context.with_wrap_width(_narrowed_width(context, len(BLOCKQUOTE_PREFIX)))
    context.state.line_char_count = 0
    text = walk(node.children, quote_context).strip("\n").rstrip()
    bare_prefix = BLOCKQUOTE_PREFIX.rstrip()
    lines = [BLOCKQUOTE_PREFIX + line if line else bare_prefix for line in text.split("\n")]
    return lead + "\n".join(lines) + "\n\n"


@DEFAULT_REGISTRY.register("pre")
def format_pre(node: Node, walk: Walk, context: FormatContext) -> str:
    lead = _start_block(context)
    text = walk(node.children, context.with_pre())
    # a newline right after the opening tag is not content
    if text.startswith("\n"):
        text = text[1:]
    return lead + text + "\n\n"


def _list_items(node: Node) -> list[Node]:
    items = []
    for child in node.children:
        if child.kind is NodeKind.OTHER:
            continue
        if child.is_text and not (child.data or "").strip():
            continue
        items.append(child)
    return items


def _format_list_item(prefix: str, item: Node, walk: Walk, context: FormatContext) -> str:
    item_context = context.with_wrap_width(_narrowed_width(context, len(prefix)))
    context.state.line_char_count = 0
    nodes: Iterable[Node] = item.children if item.is_tag else (item,)
    text = walk(tuple(nodes), item_context).rstrip()
    return prefix + _indent_continuation(text, len(prefix)) + "\n"


@DEFAULT_REGISTRY.register("unordered_list")
def format_unordered_list(node: Node, walk: Walk, context: FormatContext) -> str:
    prefix = context.options.unordered_list_item_prefix
    lead = _start_block(context)
    items = "".join(_format_list_item(prefix, item, walk, context) for item in _list_items(node))
    return lead + items + "\n"


def _ordered_marker(list_type: str, number: int) -> str:
    if list_type in ("a", "A") and number >= 1:
        return number_to_letter_sequence(number, list_type)
    if list_type in ("i", "I") and 0 < number <= 3999:
        roman = number_to_roman(number)
        return roman.lower() if list_type == "i" else roman
    return str(number)


@DEFAULT_REGISTRY.register("ordered_list")
def format_ordered_list(node: Node, walk: Walk, context: FormatContext) -> str:
    items = _list_items(node)
    if not items:
        return "\n"

    list_type = node.get("type", "1") or "1"
    if list_type not in ("1", "a", "A", "i", "I"):
        logger.warning("Unknown ordered list type %r; using decimal numbering", list_type)
        list_type = "1"

    start_attr = node.get("start", "1") or "1"
    try:
        start = int(start_attr)
    except ValueError:
        logger.debug("Ignoring invalid ordered list start %r", start_attr)
        start = 1

    lead = _start_block(context)
    markers = [_ordered_marker(list_type, start + index) for index in range(len(items))]
    marker_width = max(len(marker) for marker in markers)

    result = lead
    for marker, item in zip(markers, items):
        prefix = f" {marker}. " + " " * (marker_width - len(marker))
        result += _format_list_item(prefix, item, walk, context)
    return result + "\n"


@DEFAULT_REGISTRY.register("table")
def format_table(node: Node, walk: Walk, context: FormatContext) -> str:
    lead = _start_block(context)
    if is_data_table(node, context):
        return lead + format_data_table(node, walk, context)
    return lead + format_layout_table(node, walk, context)
