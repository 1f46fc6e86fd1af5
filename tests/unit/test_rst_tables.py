#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_rst_tables.py
"""Unit tests for table normalization and the three table strategies."""

import pytest

from all2rst.ast import Document, Image, Note, Paragraph, Plain, Table, TableCell, TableRow, Text
from all2rst.options import RstRendererOptions
from all2rst.renderers._rst_tables import to_legacy_table
from all2rst.renderers.rst import RestructuredTextRenderer


def cell(text: str, **kwargs) -> TableCell:
    return TableCell(content=[Plain(content=[Text(content=text)])] if text else [], **kwargs)


def row(*texts: str, is_header: bool = False) -> TableRow:
    return TableRow(cells=[cell(t) for t in texts], is_header=is_header)


def blocks_cell(*inlines) -> TableCell:
    return TableCell(content=[Plain(content=list(inlines))])


def footnote(text: str) -> Note:
    return Note(children=[Paragraph(content=[Text(content=text)])])


def render(table: Table, **options) -> str:
    renderer = RestructuredTextRenderer(RstRendererOptions(**options))
    return renderer.render_to_string(Document(children=[table]))


@pytest.mark.unit
class TestLegacyTable:
    """Normalization into a rectangular grid."""

    def test_spans_leave_empty_cells(self) -> None:
        table = Table(
            header=row("a", "b", "c"),
            rows=[TableRow(cells=[cell("wide", colspan=2), cell("x")]), row("1", "2", "3")],
        )
        legacy = to_legacy_table(table)
        assert legacy.column_count == 3
        assert legacy.rows[0][1] == []
        assert legacy.rows[0][2] == [Plain(content=[Text(content="x")])]

    def test_row_span_shifts_following_row(self) -> None:
        table = Table(rows=[TableRow(cells=[cell("tall", rowspan=2), cell("a")]), TableRow(cells=[cell("b")])])
        legacy = to_legacy_table(table)
        assert legacy.rows[1][0] == []
        assert legacy.rows[1][1] == [Plain(content=[Text(content="b")])]

    def test_header_flag_on_first_row(self) -> None:
        legacy = to_legacy_table(Table(rows=[row("h", is_header=True), row("b")]))
        assert legacy.has_header
        assert len(legacy.rows) == 1

    def test_header_only_table_becomes_body(self) -> None:
        legacy = to_legacy_table(Table(header=row("only")))
        assert not legacy.has_header
        assert len(legacy.rows) == 1

    def test_widths_padded(self) -> None:
        legacy = to_legacy_table(Table(rows=[row("a", "b")], column_widths=[0.3]))
        assert legacy.widths == [0.3, 0.0]
        assert legacy.alignments == [None, None]


@pytest.mark.unit
class TestSimpleTables:
    """Single-line cells without widths use simple tables."""

    def test_simple_table(self) -> None:
        table = Table(header=row("h1", "h2"), rows=[row("a", "b")])
        assert render(table) == "== ==\nh1 h2\n== ==\na  b\n== =="

    def test_without_header(self) -> None:
        table = Table(rows=[row("a", "b"), row("cc", "d")])
        assert render(table) == "== =\na  b\ncc d\n== ="

    def test_empty_first_cell_placeholder(self) -> None:
        table = Table(rows=[row("", "b")])
        assert render(table) == "== =\n\\  b\n== ="

    def test_caption(self) -> None:
        table = Table(rows=[row("a", "b")], caption=[Text(content="Cap")])
        assert render(table) == ".. table:: Cap\n\n   = =\n   a b\n   = ="


@pytest.mark.unit
class TestGridTables:
    """Grid tables handle widths, multi-line cells and overflow."""

    def test_single_column_uses_grid(self) -> None:
        assert render(Table(rows=[row("x")])) == "+---+\n| x |\n+---+"

    def test_multiline_cell_forces_grid(self) -> None:
        multi = TableCell(content=[Paragraph(content=[Text(content="p1")]), Paragraph(content=[Text(content="p2")])])
        table = Table(header=row("h", "i"), rows=[TableRow(cells=[multi, cell("x")])])
        assert render(table) == (
            "+----+---+\n"
            "| h  | i |\n"
            "+====+===+\n"
            "| p1 | x |\n"
            "|    |   |\n"
            "| p2 |   |\n"
            "+----+---+"
        )

    def test_relative_widths(self) -> None:
        table = Table(header=row("A", "B"), rows=[row("1", "2")], column_widths=[0.5, 0.5])
        lines = render(table, columns=40).split("\n")
        assert lines[0] == "+" + "-" * 19 + "+" + "-" * 19 + "+"
        assert lines[2] == "+" + "=" * 19 + "+" + "=" * 19 + "+"
        assert lines[1].startswith("| A ")

    def test_overflowing_table_uses_grid(self) -> None:
        long_text = " ".join(["word"] * 20)
        table = Table(rows=[row(long_text, "b")])
        lines = render(table, columns=40).split("\n")
        assert lines[0].startswith("+")
        assert all(len(line) <= 40 for line in lines)

    def test_content_wider_than_plan_grows_column(self) -> None:
        table = Table(rows=[row("supercalifragilistic")], column_widths=[0.1])
        lines = render(table, columns=40).split("\n")
        assert lines[1] == "| supercalifragilistic |"


@pytest.mark.unit
class TestDeferredContentInCells:
    """Notes and images inside cells are registered once, by the rendering that is kept."""

    def test_note_in_grid_cell(self) -> None:
        table = Table(rows=[TableRow(cells=[blocks_cell(Text(content="x"), footnote("fn"))])])
        rst = render(table)
        assert rst.count(".. [") == 1
        assert "x [1]_" in rst
        assert rst.endswith(".. [1]\n   fn")

    def test_note_in_simple_table_that_falls_back_to_grid(self) -> None:
        long_text = " ".join(["word"] * 30)
        table = Table(rows=[TableRow(cells=[blocks_cell(Text(content="x"), footnote("fn")), cell(long_text)])])
        rst = render(table, columns=40)
        assert rst.startswith("+")
        assert rst.count(".. [") == 1
        assert "[2]" not in rst

    def test_note_in_simple_table(self) -> None:
        table = Table(rows=[TableRow(cells=[blocks_cell(Text(content="x"), footnote("fn")), cell("y")])])
        rst = render(table)
        assert rst.startswith("======")
        assert rst.count(".. [") == 1

    def test_notes_keep_document_order(self) -> None:
        table = Table(rows=[TableRow(cells=[blocks_cell(Text(content="x"), footnote("in table"))])])
        after = Paragraph(content=[Text(content="y"), footnote("after")])
        renderer = RestructuredTextRenderer()
        rst = renderer.render_to_string(Document(children=[table, after]))
        assert "y [2]_" in rst
        assert ".. [1]\n   in table" in rst
        assert ".. [2]\n   after" in rst

    def test_image_without_alt_in_grid_cell(self) -> None:
        table = Table(rows=[TableRow(cells=[blocks_cell(Image(url="p.png"))])])
        rst = render(table)
        assert rst.count("image::") == 1
        assert "| |image1| |" in rst
        assert rst.endswith(".. |image1| image:: p.png")

    def test_image_without_alt_in_simple_table_that_falls_back_to_grid(self) -> None:
        long_text = " ".join(["word"] * 30)
        table = Table(rows=[TableRow(cells=[blocks_cell(Image(url="p.png")), cell(long_text)])])
        rst = render(table, columns=40)
        assert rst.count("image::") == 1
        assert "image2" not in rst


@pytest.mark.unit
class TestListTables:
    """The list-table directive."""

    def test_list_table(self) -> None:
        table = Table(header=row("A", "B"), rows=[row("1", "2")])
        assert render(table, list_tables=True) == (
            ".. list-table::\n"
            "   :header-rows: 1\n"
            "\n"
            "   * - A\n"
            "     - B\n"
            "   * - 1\n"
            "     - 2"
        )

    def test_list_table_widths_and_caption(self) -> None:
        table = Table(rows=[row("1", "2")], column_widths=[0.25, 0.75], caption=[Text(content="Cap")])
        rst = render(table, list_tables=True, columns=80)
        assert rst.split("\n")[:2] == [".. list-table:: Cap", "   :widths: 20 60"]

    def test_zero_column_table(self) -> None:
        assert render(Table()) == ""
