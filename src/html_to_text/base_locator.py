#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html_to_text/base_locator.py
"""Locate the element where conversion starts.

The search is depth-first in document order and honours the same depth and
breadth limits as the tree walker: at most ``max_depth + 1`` levels are
searched and at most ``max_child_nodes`` siblings per level. Reaching a
limit ends that branch silently.

"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from html_to_text.node import Node
from html_to_text.options import HtmlToTextOptions
from html_to_text.selectors import TagSelector

logger = logging.getLogger(__name__)


def _search(nodes: Sequence[Node], selector: TagSelector, options: HtmlToTextOptions) -> Optional[Node]:
    max_child_nodes = options.limits.max_child_nodes
    max_depth = options.limits.max_depth

    # frames of (siblings, next index, remaining depth budget)
    stack: list[tuple[Sequence[Node], int, Optional[int]]] = [(nodes, 0, max_depth)]
    while stack:
        siblings, index, depth = stack.pop()
        if max_child_nodes is not None:
            siblings = siblings[:max_child_nodes]
        if index >= len(siblings):
            continue

        node = siblings[index]
        if selector.matches(node):
            return node

        stack.append((siblings, index + 1, depth))
        child_depth = None if depth is None else depth - 1
        if node.children and (child_depth is None or child_depth >= 0):
            stack.append((node.children, 0, child_depth))

    return None


def find_base(
    nodes: Sequence[Node],
    options: HtmlToTextOptions,
    selector: str | TagSelector,
) -> Optional[list[Node]]:
    """Find the first node matching a selector.

    Parameters
    ----------
    nodes : sequence of Node
        Top-level nodes of the document
    options : HtmlToTextOptions
        Conversion options supplying limits and the fallback policy
    selector : str or TagSelector
        Selector such as ``"div.article#main"``

    Returns
    -------
    list of Node or None
        ``[match]`` when found. Otherwise the whole tree when
        ``options.return_dom_by_default`` is set, else None.

    """
    tag_selector = selector if isinstance(selector, TagSelector) else TagSelector.parse(selector)

    match = _search(nodes, tag_selector, options)
    if match is not None:
        return [match]

    if options.return_dom_by_default:
        logger.debug("Base element '%s' not found; using the whole document", tag_selector)
        return list(nodes)

    logger.debug("Base element '%s' not found; it produces no text", tag_selector)
    return None
