#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/renderers/_rst_tables.py
"""Table rendering for reStructuredText output.

Tables are first normalized into a rectangular grid of cells (spans are
resolved by leaving the covered positions empty), then written with one of
three strategies:

- ``list-table`` directive, when requested by the options
- simple table, for tables without column widths whose cells are all single
  lines and which fit in the available width
- grid table otherwise

"""

from __future__ import annotations

import math
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Optional

from all2rst.ast.nodes import Node, Table, TableRow
from all2rst.constants import RST_INDENT, Alignment
from all2rst.renderers._rst_references import ReferenceRegistry, RegistryMark
from all2rst.utils.layout import BLANK, Block, block_width, hang, measure_width, nest, pad_right, vcat

if TYPE_CHECKING:
    from all2rst.options.rst import RstRendererOptions
    from all2rst.renderers.base import RenderMessage

# A grid table spends three characters per column on borders and padding,
# plus one for the closing border
_GRID_CELL_OVERHEAD = 3


@dataclass
class LegacyTable:
    """Rectangular view of a table.

    Parameters
    ----------
    caption : list of Node
        Inline caption
    alignments : list
        Alignment per column
    widths : list of float
        Relative width per column, 0 meaning unspecified
    headers : list of list of Node
        Block content of each header cell; empty when there is no header
    rows : list of list of list of Node
        Block content of each body cell

    """

    caption: list[Node] = field(default_factory=list)
    alignments: list[Optional[Alignment]] = field(default_factory=list)
    widths: list[float] = field(default_factory=list)
    headers: list[list[Node]] = field(default_factory=list)
    rows: list[list[list[Node]]] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.widths)

    @property
    def has_header(self) -> bool:
        return any(self.headers)


def _place_cells(rows: list[TableRow]) -> tuple[list[dict[int, list[Node]]], int]:
    """Assign each cell its starting column, honouring row and column spans."""
    occupied: set[tuple[int, int]] = set()
    placed: list[dict[int, list[Node]]] = []
    width = 0
    for r, row in enumerate(rows):
        positions: dict[int, list[Node]] = {}
        col = 0
        for cell in row.cells:
            while (r, col) in occupied:
                col += 1
            positions[col] = cell.content
            colspan = max(1, cell.colspan)
            rowspan = max(1, cell.rowspan)
            for dr in range(rowspan):
                for dc in range(colspan):
                    occupied.add((r + dr, col + dc))
            col += colspan
            width = max(width, col)
        placed.append(positions)
    return placed, width


def to_legacy_table(table: Table, min_columns: int = 0) -> LegacyTable:
    """Normalize a table into a rectangular grid.

    Cells covered by a span are left empty. A table without a header row
    whose first row is marked as a header uses that row as header. A table
    with a header but no body rows is written with the header as its only
    body row.

    Parameters
    ----------
    table : Table
        Table node
    min_columns : int, default 0
        Lower bound for the number of columns

    Returns
    -------
    LegacyTable
        Normalized table

    """
    header = table.header
    body = list(table.rows)
    if header is None and body and body[0].is_header:
        header, body = body[0], body[1:]

    all_rows = ([header] if header is not None else []) + body
    placed, placed_width = _place_cells(all_rows)
    columns = max(min_columns, placed_width, len(table.column_widths), len(table.alignments))

    grid = [[positions.get(c, []) for c in range(columns)] for positions in placed]
    headers = grid[0] if header is not None else []
    rows = grid[1:] if header is not None else grid
    if not rows and any(headers):
        headers, rows = [], [headers]

    widths = [float(w) for w in table.column_widths[:columns]]
    widths += [0.0] * (columns - len(widths))
    alignments = list(table.alignments[:columns])
    alignments += [None] * (columns - len(alignments))

    return LegacyTable(caption=table.caption, alignments=alignments, widths=widths, headers=headers, rows=rows)


class TableRenderingMixin:
    """Table strategies for the reStructuredText renderer.

    The implementing class must provide:
    - ``options``: RstRendererOptions
    - ``registry``: footnotes, link targets and images of the current pass
    - ``messages``: content reported as not rendered
    - ``_indent``: current indentation of the output position
    - ``_indented(n)``: context manager adding ``n`` to the indentation
    - ``_cell_scope(width)``: context manager for rendering table cells
      at ``width`` columns (None for no wrapping)
    - ``_cell_lines(blocks)``: render cell blocks to text lines
    - ``_bullet_item(blocks)``: render one bullet list item
    - ``_inline_text(inlines)``: render inlines on a single line

    """

    options: RstRendererOptions
    registry: ReferenceRegistry
    messages: list[RenderMessage]
    _indent: int

    def _indented(self, amount: int) -> AbstractContextManager[None]:
        raise NotImplementedError

    def _cell_scope(self, width: Optional[int]) -> AbstractContextManager[None]:
        raise NotImplementedError

    def _cell_lines(self, blocks: list[Node]) -> list[str]:
        raise NotImplementedError

    def _bullet_item(self, blocks: list[Node]) -> Block:
        raise NotImplementedError

    def _inline_text(self, inlines: list[Node]) -> str:
        raise NotImplementedError

    def _checkpoint(self) -> tuple[RegistryMark, int]:
        return self.registry.checkpoint(), len(self.messages)

    def _rollback(self, mark: tuple[RegistryMark, int]) -> None:
        registry_mark, message_count = mark
        self.registry.rollback(registry_mark)
        del self.messages[message_count:]

    @contextmanager
    def _discarded_pass(self) -> Iterator[None]:
        """Render cells for measurement only.

        Footnotes, link targets, images and messages registered inside the
        block are forgotten on exit, so only the rendering that is kept
        numbers and labels them.
        """
        mark = self._checkpoint()
        try:
            yield
        finally:
            self._rollback(mark)

    def _render_legacy_table(self, table: LegacyTable) -> Block:
        """Render a normalized table, choosing the strategy."""
        if table.column_count == 0:
            return []

        caption = self._inline_text(table.caption) if table.caption else ""
        if self.options.list_tables:
            return [BLANK] + self._list_table(table, caption) + [BLANK]

        available = self.options.columns - self._indent - (RST_INDENT if caption else 0)
        rendered: Optional[Block] = None
        if table.column_count > 1 and all(w == 0 for w in table.widths):
            mark = self._checkpoint()
            rendered = self._simple_table(table, available)
            if rendered is None:
                self._rollback(mark)
        if rendered is None:
            rendered = self._grid_table(table, available)

        if caption:
            rendered = [f".. table:: {caption}", BLANK] + nest(rendered, RST_INDENT)
        return [BLANK] + rendered + [BLANK]

    def _simple_table(self, table: LegacyTable, available: int) -> Optional[Block]:
        """Render a simple table, or return None when one cannot hold the table."""
        with self._cell_scope(None):
            header_lines = [self._cell_lines(cell) for cell in table.headers] if table.has_header else []
            body_lines = [[self._cell_lines(cell) for cell in row] for row in table.rows]

        if any(len(lines) > 1 for lines in header_lines) or any(
            len(lines) > 1 for row in body_lines for lines in row
        ):
            return None

        def cell_texts(row: list[list[str]]) -> list[str]:
            texts = [lines[0] if lines else "" for lines in row]
            if texts and not texts[0]:
                texts[0] = "\\ "
            return texts

        header = cell_texts(header_lines) if header_lines else []
        body = [cell_texts(row) for row in body_lines]
        all_rows = ([header] if header else []) + body

        widths = [
            max(1, max((measure_width(row[col]) for row in all_rows), default=0)) for col in range(table.column_count)
        ]

        def format_row(texts: list[str]) -> str:
            return " ".join(pad_right(text, w) for text, w in zip(texts, widths)).rstrip()

        hline = " ".join("=" * w for w in widths)
        lines: Block = [hline]
        if header:
            lines += [format_row(header), hline]
        lines += [format_row(row) for row in body]
        lines.append(hline)

        if block_width(lines) > available:
            return None
        return lines

    def _grid_column_widths(self, table: LegacyTable, available: int) -> list[int]:
        """Content width of each grid column before cells are rendered."""
        n = table.column_count
        fixed: list[Optional[int]] = [
            max(1, math.floor(available * w) - _GRID_CELL_OVERHEAD) if w > 0 else None for w in table.widths
        ]
        if all(w is not None for w in fixed):
            return [w for w in fixed if w is not None]

        natural: list[int] = []
        minimum: list[int] = []
        with self._discarded_pass(), self._cell_scope(None):
            for col in range(n):
                cells = ([table.headers[col]] if table.has_header else []) + [row[col] for row in table.rows]
                lines = [line for cell in cells for line in self._cell_lines(cell)]
                natural.append(max(1, max((measure_width(line) for line in lines), default=0)))
                minimum.append(
                    max(1, max((measure_width(word) for line in lines for word in line.split()), default=0))
                )

        auto_cols = [col for col in range(n) if fixed[col] is None]
        room = available - (_GRID_CELL_OVERHEAD * n + 1) - sum(w for w in fixed if w is not None)
        natural_total = sum(natural[col] for col in auto_cols)

        widths = list(fixed)
        for col in auto_cols:
            if natural_total <= room:
                widths[col] = natural[col]
            else:
                share = math.floor(natural[col] * max(room, 0) / natural_total)
                widths[col] = max(minimum[col], share)
        return [w if w is not None else 1 for w in widths]

    def _grid_table(self, table: LegacyTable, available: int) -> Block:
        """Render a grid table."""
        widths = self._grid_column_widths(table, available)

        def render_row(row: list[list[Node]]) -> list[list[str]]:
            cells = []
            for col, blocks in enumerate(row):
                with self._cell_scope(widths[col]):
                    cells.append(self._cell_lines(blocks))
            return cells

        header = render_row(table.headers) if table.has_header else None
        body = [render_row(row) for row in table.rows]

        for row in ([header] if header else []) + body:
            for col, lines in enumerate(row):
                widths[col] = max(widths[col], max((measure_width(line) for line in lines), default=0))

        def border(char: str) -> str:
            return "+" + "+".join(char * (w + 2) for w in widths) + "+"

        def row_lines(row: list[list[str]]) -> list[str]:
            height = max(1, max(len(lines) for lines in row))
            result = []
            for k in range(height):
                parts = [pad_right(lines[k] if k < len(lines) else "", w) for lines, w in zip(row, widths)]
                result.append("| " + " | ".join(parts) + " |")
            return result

        lines: Block = [border("-")]
        if header:
            lines += row_lines(header)
            lines.append(border("="))
        for row in body:
            lines += row_lines(row)
            lines.append(border("-"))
        return lines

    def _list_table(self, table: LegacyTable, caption: str) -> Block:
        """Render a ``list-table`` directive."""
        directive = ".. list-table::" + (f" {caption}" if caption else "")
        fields: Block = []
        if any(w != 0 for w in table.widths):
            fields.append(":widths: " + " ".join(str(round(w * self.options.columns)) for w in table.widths))
        if table.has_header:
            fields.append(":header-rows: 1")

        rows = ([table.headers] if table.has_header else []) + table.rows
        # rows hang under "* " and cells under "- "
        with self._indented(RST_INDENT + 2):
            content = vcat(hang(vcat(self._bullet_item(cell) for cell in row), 2, "* ") for row in rows)

        return [directive] + nest(fields + [BLANK] + content + [BLANK], RST_INDENT)
