#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html_to_text/tables.py
"""Data table layout.

Tables selected through ``HtmlToTextOptions.tables`` are laid out as a grid:
each cell is rendered without wrapping, columns are padded to their widest
line and separated by ``table_column_spacing`` spaces.

"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from html_to_text.node import Node
from html_to_text.selectors import TagSelector
from html_to_text.walker import FormatContext, Walk

logger = logging.getLogger(__name__)

_ROW_GROUPS = frozenset({"thead", "tbody", "tfoot"})
_CELL_TAGS = frozenset({"td", "th"})


@dataclass
class TableCell:
    """A rendered table cell.

    Attributes
    ----------
    lines : list of str
        Cell text split into lines
    colspan : int
        Number of grid columns the cell occupies

    """

    lines: list[str]
    colspan: int = 1

    @property
    def width(self) -> int:
        return max((len(line) for line in self.lines), default=0)


def is_data_table(node: Node, context: FormatContext) -> bool:
    """Check whether a table is selected for grid layout.

    Selectors without an element name (``".prices"``, ``"#totals"``) apply
    to tables.
    """
    tables = context.options.tables
    if tables is True:
        return True

    for selector in tables:
        parsed = TagSelector.parse(selector)
        if not parsed.element:
            parsed = TagSelector("table", parsed.classes, parsed.ids)
        if parsed.matches(node):
            return True
    return False


def _iter_rows(node: Node) -> Iterator[Node]:
    for child in node.children:
        if not child.is_tag:
            continue
        if child.name == "tr":
            yield child
        elif child.name in _ROW_GROUPS:
            yield from _iter_rows(child)


def _colspan(cell: Node) -> int:
    value = cell.get("colspan", "1")
    try:
        return max(1, int(value))
    except ValueError:
        logger.debug("Ignoring invalid colspan %r", value)
        return 1


def _render_cell(cell: Node, walk: Walk, context: FormatContext) -> TableCell:
    cell_context = context.with_wrap_width(None)
    context.state.line_char_count = 0
    text = walk(cell.children, cell_context).strip()
    if cell.name == "th" and context.options.uppercase_header_cells:
        text = text.upper()
    return TableCell(lines=text.split("\n") if text else [], colspan=_colspan(cell))


def _column_widths(rows: list[list[TableCell]]) -> list[int]:
    widths: list[int] = []
    for row in rows:
        column = 0
        for cell in row:
            while len(widths) < column + cell.colspan:
                widths.append(0)
            if cell.colspan == 1:
                widths[column] = max(widths[column], cell.width)
            column += cell.colspan
    return widths


def _render_grid(rows: list[list[TableCell]], spacing: int) -> str:
    widths = _column_widths(rows)
    gap = " " * spacing
    output = []
    for row in rows:
        height = max((len(cell.lines) for cell in row), default=0)
        spans = []
        column = 0
        for cell in row:
            span_width = sum(widths[column : column + cell.colspan]) + spacing * (cell.colspan - 1)
            spans.append(max(span_width, cell.width))
            column += cell.colspan

        for line_index in range(max(height, 1)):
            parts = []
            for cell, cell_width in zip(row, spans):
                line = cell.lines[line_index] if line_index < len(cell.lines) else ""
                parts.append(line.ljust(cell_width))
            output.append(gap.join(parts).rstrip())
    return "\n".join(output)


def format_data_table(node: Node, walk: Walk, context: FormatContext) -> str:
    """Render a table element as a padded text grid.

    Parameters
    ----------
    node : Node
        The ``table`` node
    walk : Walk
        Walk callable used to render cell contents
    context : FormatContext
        Options and shared line cursor

    Returns
    -------
    str
        Grid text followed by a blank line, or an empty string for tables
        without cells

    """
    rows = []
    for row in _iter_rows(node):
        cells = [_render_cell(cell, walk, context) for cell in row.children if cell.is_tag and cell.name in _CELL_TAGS]
        if cells:
            rows.append(cells)

    if not rows:
        return ""
    return _render_grid(rows, context.options.table_column_spacing) + "\n\n"


def format_layout_table(node: Node, walk: Walk, context: FormatContext) -> str:
    """Render a table that is not a data table as a sequence of blocks.

    Each non-empty cell becomes its own block of wrapped text, in row order.
    Tables without rows render their children directly.
    """
    rows = list(_iter_rows(node))
    if not rows:
        return walk(node.children, context) + "\n"

    blocks = []
    for row in rows:
        for cell in row.children:
            if not (cell.is_tag and cell.name in _CELL_TAGS):
                continue
            context.state.line_char_count = 0
            text = walk(cell.children, context).strip()
            if text:
                blocks.append(text)

    if not blocks:
        return ""
    return "\n".join(blocks) + "\n\n"
