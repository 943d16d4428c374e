#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html_to_text/parser.py
"""HTML parsing boundary.

This module parses HTML with BeautifulSoup and converts the resulting soup
into the immutable :class:`~html_to_text.node.Node` tree the converter walks.
Entities are decoded by the parser backend, so text node data is plain text.

Scripts and stylesheets become ``OTHER`` nodes: their content is never part
of the rendered text.

"""

from __future__ import annotations

import logging
from typing import Any

from html_to_text.constants import DEFAULT_HTML_PARSER, DEPS_HTML
from html_to_text.exceptions import ParsingError
from html_to_text.node import Node
from html_to_text.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

# Elements whose content is not document text
NON_TEXT_ELEMENTS = frozenset({"script", "style", "template", "noscript"})


def _attribs_from_tag(tag: Any) -> dict[str, str]:
    attribs = {}
    for name, value in tag.attrs.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        attribs[name] = "" if value is None else str(value)
    return attribs


def _leaf_from_element(element: Any) -> Node:
    from bs4.element import NavigableString, PreformattedString, Tag

    if isinstance(element, Tag):
        # only reached for non-text elements
        return Node.other()
    if isinstance(element, PreformattedString):
        return Node.other(str(element))
    if isinstance(element, NavigableString):
        return Node.text(str(element))
    return Node.other()


def nodes_from_soup(element: Any) -> list[Node]:
    """Convert a BeautifulSoup element into a list of nodes.

    A ``BeautifulSoup`` document contributes its children; any other element
    becomes a single node. Conversion uses an explicit stack, so deeply
    nested documents do not exhaust the Python call stack.

    Parameters
    ----------
    element : bs4.BeautifulSoup or bs4.element.PageElement
        Parsed document or element

    Returns
    -------
    list of Node
        Top-level nodes

    """
    from bs4 import BeautifulSoup
    from bs4.element import Tag

    def is_container(candidate: Any) -> bool:
        return isinstance(candidate, Tag) and candidate.name not in NON_TEXT_ELEMENTS

    if isinstance(element, BeautifulSoup):
        roots = list(element.contents)
    else:
        roots = [element]

    # each frame: (tag, its contents, converted children so far)
    top_level: list[Node] = []
    stack: list[tuple[Any, list[Any], list[Node]]] = []

    def emit(node: Node) -> None:
        if stack:
            stack[-1][2].append(node)
        else:
            top_level.append(node)

    for root in roots:
        if not is_container(root):
            emit(_leaf_from_element(root))
            continue

        stack.append((root, list(reversed(root.contents)), []))
        while stack:
            tag, pending, converted = stack[-1]
            if pending:
                child = pending.pop()
                if is_container(child):
                    stack.append((child, list(reversed(child.contents)), []))
                else:
                    emit(_leaf_from_element(child))
                continue

            stack.pop()
            emit(Node.tag(tag.name.lower(), _attribs_from_tag(tag), converted))

    return top_level


@requires_dependencies("html", DEPS_HTML)
def parse_html(html: str, parser: str = DEFAULT_HTML_PARSER) -> list[Node]:
    """Parse an HTML string into a node tree.

    Parameters
    ----------
    html : str
        HTML content
    parser : str, default "html.parser"
        BeautifulSoup tree builder ("html.parser", "lxml", "html5lib")

    Returns
    -------
    list of Node
        Top-level nodes of the document

    Raises
    ------
    ParsingError
        If the requested parser backend is not available
    DependencyError
        If beautifulsoup4 is not installed

    """
    from bs4 import BeautifulSoup, FeatureNotFound

    try:
        soup = BeautifulSoup(html, parser)
    except FeatureNotFound as e:
        raise ParsingError(
            f"HTML parser backend '{parser}' is not available. Install it or use 'html.parser'.",
            parsing_stage="backend",
            original_error=e,
        ) from e

    nodes = nodes_from_soup(soup)
    logger.debug("Parsed HTML with %s into %d top-level nodes", parser, len(nodes))
    return nodes


__all__ = ["NON_TEXT_ELEMENTS", "nodes_from_soup", "parse_html"]
