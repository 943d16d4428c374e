"""Shared helpers for building node trees in tests."""

from html_to_text.node import Node


def nested_divs(depth: int) -> list[Node]:
    """Build ``depth`` nested divs, each holding a text node ``"L<level> "``.

    Level 0 is the outermost div.
    """
    node = Node.tag("div", children=[Node.text(f"L{depth - 1} ")])
    for level in range(depth - 2, -1, -1):
        node = Node.tag("div", children=[Node.text(f"L{level} "), node])
    return [node]