#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_table_formatting.py
"""Unit tests for pipe-table rendering and TableModel."""

import pytest
from utils import render

from copymd.exceptions import InvalidNodeError
from copymd.options.markdown import MarkdownOptions
from copymd.renderers._tables import TableModel
from copymd.tree.builder import element
from copymd.tree.nodes import DocumentNode, NodeKind


def table(*rows):
    return element("table", *rows)


def tr(*cells):
    return element("tr", *cells)


def th(*children):
    return element("th", *children)


def td(*children):
    return element("td", *children)


@pytest.mark.unit
class TestTableModel:
    """Tests for TableModel."""

    def test_column_count_from_header(self):
        assert TableModel(header_cells=("A", "B"), body_rows=(("1",),)).column_count == 2

    def test_short_rows_padded(self):
        model = TableModel(header_cells=("A", "B", "C"), body_rows=(("1",),)).fit_columns("extend")
        assert model.body_rows == (("1", "", ""),)

    def test_extend_adds_empty_header_labels(self):
        model = TableModel(header_cells=("A",), body_rows=(("1", "2", "3"),)).fit_columns("extend")
        assert model.header_cells == ("A", "", "")
        assert model.body_rows == (("1", "2", "3"),)

    def test_truncate_drops_extra_cells(self):
        model = TableModel(header_cells=("A",), body_rows=(("1", "2"),)).fit_columns("truncate")
        assert model.header_cells == ("A",)
        assert model.body_rows == (("1",),)

    def test_to_markdown(self):
        model = TableModel(header_cells=("A", "B"), body_rows=(("1", ""),))
        assert model.to_markdown() == "| A | B |\n| --- | --- |\n| 1 |  |"

    def test_no_columns(self):
        assert TableModel().to_markdown() == ""


@pytest.mark.unit
class TestTables:
    """Tests for table rendering."""

    def test_padding_of_short_body_row(self):
        tree = table(tr(th("A"), th("B")), tr(td("1")))
        assert render(tree) == "| A | B |\n| --- | --- |\n| 1 |  |"

    def test_every_body_line_has_header_width(self):
        tree = table(tr(th("A"), th("B"), th("C")), tr(td("1")), tr(td("1"), td("2")))
        lines = render(tree).split("\n")
        assert all(line.count(" | ") == 2 for line in lines)
        assert lines[2] == "| 1 |  |  |"
        assert lines[3] == "| 1 | 2 |  |"

    def test_sections(self):
        tree = table(
            element("thead", tr(th("Name"), th("Value"))),
            element("tbody", tr(td("a"), td("1")), tr(td("b"), td("2"))),
        )
        assert render(tree) == "| Name | Value |\n| --- | --- |\n| a | 1 |\n| b | 2 |"

    def test_first_row_is_header_without_th(self):
        tree = table(tr(td("x"), td("y")), tr(td("1"), td("2")))
        assert render(tree) == "| x | y |\n| --- | --- |\n| 1 | 2 |"

    def test_header_is_first_row_with_th(self):
        tree = table(tr(td("before")), tr(th("H")), tr(td("after")))
        assert render(tree) == "| H |\n| --- |\n| before |\n| after |"

    def test_long_row_extends_header_by_default(self):
        tree = table(tr(th("A")), tr(td("1"), td("2"), td("3")))
        assert render(tree) == "| A |  |  |\n| --- | --- | --- |\n| 1 | 2 | 3 |"

    def test_long_row_truncated(self):
        tree = table(tr(th("A")), tr(td("1"), td("2")))
        assert render(tree, options=MarkdownOptions(table_overflow="truncate")) == "| A |\n| --- |\n| 1 |"

    def test_zero_rows_render_nothing(self):
        assert render(element("p", "x"), table(), element("p", "y")) == "x\n\ny"

    def test_zero_columns_render_nothing(self):
        assert render(table(tr())) == ""

    def test_cell_pipes_escaped(self):
        assert render(table(tr(th("a|b")))) == "| a\\|b |\n| --- |"

    def test_cell_newlines_become_breaks(self):
        tree = table(tr(th(element("p", "x"), element("p", "y"))), tr(td("a", element("br"), "b")))
        assert render(tree) == "| x<br>y |\n| --- |\n| a<br>b |"

    def test_cell_inline_formatting(self):
        tree = table(tr(th("k")), tr(td(element("b", "a*b"))))
        assert render(tree) == "| k |\n| --- |\n| **a\\*b** |"

    def test_nested_table_rows_belong_to_inner_table(self):
        inner = table(tr(td("inner")))
        tree = table(tr(td("outer")), tr(td(inner)))
        lines = render(tree).split("\n")
        assert len(lines) == 3
        assert lines[0] == "| outer |"
        assert lines[2] == "| \\| inner \\|<br>\\| --- \\| |"

    def test_non_cell_children_of_row_skipped(self):
        assert render(table(tr("stray", th("A")))) == "| A |\n| --- |"

    def test_table_between_paragraphs(self):
        result = render(element("p", "Before"), table(tr(th("A"))), element("p", "After"))
        assert result == "Before\n\n| A |\n| --- |\n\nAfter"

    def test_row_outside_table_passes_through(self):
        assert render(tr(td("x"))) == "x"

    def test_invalid_node_inside_row(self):
        bad = DocumentNode(kind=NodeKind.ELEMENT, tag_name=None, children=())
        with pytest.raises(InvalidNodeError):
            render(table(tr(th("A"), bad)))
