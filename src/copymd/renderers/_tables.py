#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/copymd/renderers/_tables.py
"""Pipe-table formatting for the Markdown renderer.

A ``table`` element is flattened into a ``TableModel``: one header row and
zero or more body rows of already-rendered cell strings. The model is then
squared off to a fixed column count and emitted as a pipe table.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Iterator, Optional

from copymd.constants import TABLE_SEPARATOR_CELL, TableOverflowMode
from copymd.tree.nodes import DocumentNode, NodeCategory
from copymd.utils.escape import escape_table_cell
from copymd.utils.text import normalize_markdown

if TYPE_CHECKING:
    from copymd.options.markdown import MarkdownOptions
    from copymd.renderers._lists import ListContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableModel:
    """Rendered cells of one table.

    Parameters
    ----------
    header_cells : tuple of str
        Header labels
    body_rows : tuple of tuple of str
        Body rows in document order

    """

    header_cells: tuple[str, ...] = ()
    body_rows: tuple[tuple[str, ...], ...] = field(default_factory=tuple)

    @property
    def column_count(self) -> int:
        """Number of columns, taken from the header."""
        return len(self.header_cells)

    def fit_columns(self, overflow: TableOverflowMode) -> TableModel:
        """Square off the table to a single column count.

        Short body rows are padded with empty cells. Long body rows either
        extend the header with empty labels (``"extend"``) or lose their
        extra cells (``"truncate"``).

        Parameters
        ----------
        overflow : {"extend", "truncate"}
            Policy for body rows longer than the header

        Returns
        -------
        TableModel
            Model whose rows all have ``column_count`` cells

        """
        header = self.header_cells
        if overflow == "extend":
            widest = max((len(row) for row in self.body_rows), default=0)
            if widest > len(header):
                logger.debug("Extending table header from %d to %d columns", len(header), widest)
                header = header + ("",) * (widest - len(header))

        width = len(header)
        rows = tuple(row[:width] + ("",) * (width - len(row)) for row in self.body_rows)
        return TableModel(header_cells=header, body_rows=rows)

    def to_markdown(self) -> str:
        """Format the model as pipe-table lines; empty when it has no columns."""
        if not self.column_count:
            return ""
        lines = [_format_row(self.header_cells), _format_row((TABLE_SEPARATOR_CELL,) * self.column_count)]
        lines.extend(_format_row(row) for row in self.body_rows)
        return "\n".join(lines)


def _format_row(cells: tuple[str, ...]) -> str:
    return "| " + " | ".join(cells) + " |"


class TableFormatterMixin:
    """Mixin rendering ``table`` elements as pipe tables.

    The implementing class must provide ``options``,
    ``_render_children(node, context, depth)`` and
    ``_validate_node(node, depth)``.
    """

    options: MarkdownOptions
    _render_children: Callable[..., str]
    _validate_node: Callable[..., None]

    def _render_table(self, node: DocumentNode, context: Optional[ListContext], depth: int) -> str:
        """Render a table; a table without rows or columns renders as nothing."""
        model = self._build_table_model(node, context, depth)
        if model is None:
            return ""
        table = model.fit_columns(self.options.table_overflow).to_markdown()
        if not table:
            return ""
        return f"\n\n{table}\n\n"

    def _build_table_model(
        self, node: DocumentNode, context: Optional[ListContext], depth: int
    ) -> TableModel | None:
        """Collect rows and render cells.

        The header is the first row holding a ``th`` cell, or the first row
        when no row does. Returns None for a table without rows.
        """
        rows: list[list[str]] = []
        header_index: int | None = None

        for row, row_depth in self._iter_rows(node, depth):
            cells: list[str] = []
            has_header_cell = False
            for cell in row.iter_children():
                self._validate_node(cell, row_depth + 1)
                if cell.category is not NodeCategory.TABLE_CELL:
                    continue
                has_header_cell = has_header_cell or cell.tag_name == "th"
                cells.append(self._render_cell(cell, context, row_depth + 1))
            if has_header_cell and header_index is None:
                header_index = len(rows)
            rows.append(cells)

        if not rows:
            return None
        if header_index is None:
            header_index = 0

        body = tuple(tuple(cells) for index, cells in enumerate(rows) if index != header_index)
        return TableModel(header_cells=tuple(rows[header_index]), body_rows=body)

    def _iter_rows(self, table: DocumentNode, depth: int) -> Iterator[tuple[DocumentNode, int]]:
        """Yield ``(tr, depth)`` for every row of ``table`` in document order.

        Rows of tables nested inside cells belong to those tables and are
        not visited.
        """
        stack = [(child, depth + 1) for child in reversed(tuple(table.iter_children()))]
        while stack:
            node, node_depth = stack.pop()
            if node.is_text:
                continue
            self._validate_node(node, node_depth)
            if node.category is NodeCategory.TABLE_ROW:
                yield node, node_depth
                continue
            if node.category is NodeCategory.TABLE:
                continue
            stack.extend((child, node_depth + 1) for child in reversed(tuple(node.iter_children())))

    def _render_cell(self, cell: DocumentNode, context: Optional[ListContext], depth: int) -> str:
        return escape_table_cell(normalize_markdown(self._render_children(cell, context, depth)))
