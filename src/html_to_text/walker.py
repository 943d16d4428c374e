#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html_to_text/walker.py
"""Depth- and breadth-limited recursive tree walker.

The walker visits a sequence of sibling nodes, resolves a formatter for each
one, and accumulates the formatted chunks into a result string. Formatters
receive a :class:`ChildWalk` so they can render their own children; each
``ChildWalk`` carries the remaining depth budget explicitly. When the budget
is exhausted the walker hands over to a truncation handler instead of
descending.

While accumulating, the walker keeps :attr:`WalkState.line_char_count`, the
number of characters on the current output line. A nested walk starts
from the column its enclosing level had reached, so the count stays correct
across nested inline tags. Formatters that wrap text read it to know how
much of the current line is already occupied. The state object belongs to
a single conversion call.

"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol

from html_to_text.constants import IGNORED_TEXT_DATA, TEXT_FORMAT
from html_to_text.node import Node, NodeKind
from html_to_text.options import HtmlToTextOptions

if TYPE_CHECKING:
    from html_to_text.formatters import FormatterRegistry

logger = logging.getLogger(__name__)


@dataclass
class WalkState:
    """Mutable traversal state shared by every step of one conversion.

    Attributes
    ----------
    line_char_count : int
        Characters emitted since the last newline

    """

    line_char_count: int = 0


@dataclass(frozen=True)
class FormatContext:
    """Options and shared state handed to formatters.

    Parameters
    ----------
    options : HtmlToTextOptions
        Options in effect for this subtree. Formatters may derive narrower
        options (e.g. a reduced wrap width for list items).
    state : WalkState
        The conversion's mutable line cursor, shared by derived contexts
    in_pre : bool, default False
        Whether text is inside a preformatted block and must not be reflowed

    """

    options: HtmlToTextOptions
    state: WalkState = field(default_factory=WalkState)
    in_pre: bool = False

    def derive(self, **option_changes: Any) -> FormatContext:
        """Return a context with updated options sharing the same state."""
        return FormatContext(self.options.create_updated(**option_changes), self.state, self.in_pre)

    def with_wrap_width(self, width: int | None) -> FormatContext:
        """Return a context whose wrap width is replaced."""
        return self.derive(wrap=self.options.wrap.create_updated(width=width))

    def with_pre(self) -> FormatContext:
        """Return a context marking text as preformatted."""
        return FormatContext(self.options, self.state, in_pre=True)


class Walk(Protocol):
    """Callable used by formatters to render child nodes."""

    def __call__(self, nodes: Sequence[Node], context: FormatContext, result: str = "") -> str: ...


TruncationHandler = Callable[[Sequence[Node], FormatContext, str], str]


def append_ellipsis(nodes: Sequence[Node], context: FormatContext, result: str = "") -> str:
    """Default truncation handler: append the configured ellipsis."""
    logger.debug("Depth limit reached; skipping %d node(s)", len(nodes))
    return result + context.options.limits.ellipsis


def _ends_with_whitespace(text: str) -> bool:
    return bool(text) and text[-1].isspace()


def _column_after(result: str, start_column: int) -> int:
    newline = result.rfind("\n")
    if newline == -1:
        return start_column + len(result)
    return len(result) - (newline + 1)


class ChildWalk:
    """Walk callable bound to a walker and the depth budget of the children.

    Parameters
    ----------
    walker : TreeWalker
        Walker to delegate to
    depth : int or None
        Remaining depth budget for the nodes this callable walks

    """

    __slots__ = ("walker", "depth")

    def __init__(self, walker: TreeWalker, depth: Optional[int]):
        self.walker = walker
        self.depth = depth

    def __call__(self, nodes: Sequence[Node], context: FormatContext, result: str = "") -> str:
        return self.walker.walk(nodes, context, result, depth=self.depth)

    def __repr__(self) -> str:
        return f"ChildWalk(depth={self.depth!r})"


class TreeWalker:
    """Recursive walker that renders nodes through registered formatters.

    Parameters
    ----------
    registry : FormatterRegistry
        Formatters resolved by the ids in ``options.tags``
    truncate : callable, default append_ellipsis
        Handler invoked in place of descending once the depth budget is
        exhausted. Receives ``(nodes, context, result)`` and returns the new
        result.

    Examples
    --------
        >>> from html_to_text.formatters import DEFAULT_REGISTRY
        >>> from html_to_text.node import Node
        >>> walker = TreeWalker(DEFAULT_REGISTRY)
        >>> context = FormatContext(HtmlToTextOptions())
        >>> walker.walk([Node.text("Hello "), Node.text("World")], context)
        'Hello World'

    """

    def __init__(self, registry: FormatterRegistry, truncate: TruncationHandler = append_ellipsis):
        self.registry = registry
        self.truncate = truncate

    def walk(
        self,
        nodes: Sequence[Node] | None,
        context: FormatContext,
        result: str = "",
        depth: Optional[int] = None,
    ) -> str:
        """Render ``nodes`` and append them to ``result``.

        Parameters
        ----------
        nodes : sequence of Node or None
            Sibling nodes to render
        context : FormatContext
            Options and shared line cursor
        result : str, default ""
            Output accumulated so far at this level
        depth : int or None, default None
            Remaining depth budget. None is unbounded; a negative budget
            means these nodes lie beyond the limit and are truncated.

        Returns
        -------
        str
            ``result`` extended with the rendered nodes

        """
        if depth is not None and depth < 0:
            return self.truncate(nodes or (), context, result)
        if not nodes:
            return result

        limits = context.options.limits
        too_many_child_nodes = limits.max_child_nodes is not None and len(nodes) > limits.max_child_nodes
        if too_many_child_nodes:
            logger.debug("Truncating %d sibling nodes to %d", len(nodes), limits.max_child_nodes)
            nodes = nodes[: limits.max_child_nodes]

        child_walk = ChildWalk(self, None if depth is None else depth - 1)
        # column of the output line where this level's result begins
        start_column = 0 if "\n" in result else max(0, context.state.line_char_count - len(result))

        for node in nodes:
            is_inline, text = self._format_node(node, child_walk, context)
            if not text:
                continue

            if is_inline and _ends_with_whitespace(result):
                text = text.lstrip()
            result += text
            context.state.line_char_count = _column_after(result, start_column)

        if too_many_child_nodes and limits.ellipsis:
            result += limits.ellipsis
        return result

    def _format_node(self, node: Node, child_walk: ChildWalk, context: FormatContext) -> tuple[bool, str]:
        if node.kind is NodeKind.TAG:
            tags = context.options.tags
            spec = tags.get(node.name or "") or tags[""]
            formatter = self.registry.get(spec.format)
            return spec.inline, formatter(node, child_walk, context)

        if node.kind is NodeKind.TEXT and node.data != IGNORED_TEXT_DATA:
            formatter = self.registry.get(TEXT_FORMAT)
            return True, formatter(node, child_walk, context)

        return False, ""
