#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_list_formatting.py
"""Unit tests for list rendering and ListContext."""

import pytest
from utils import render

from copymd.exceptions import InvalidNodeError
from copymd.renderers._lists import ListContext
from copymd.tree.builder import element
from copymd.tree.nodes import DocumentNode, NodeKind


def ul(*items):
    return element("ul", *items)


def ol(*items):
    return element("ol", *items)


def li(*children):
    return element("li", *children)


@pytest.mark.unit
class TestListContext:
    """Tests for ListContext."""

    def test_unordered_bullet(self):
        context = ListContext(ordered=False)
        assert context.take_bullet() == "- "
        assert context.take_bullet() == "- "

    def test_ordered_bullets_count_from_one(self):
        context = ListContext(ordered=True)
        assert [context.take_bullet() for _ in range(3)] == ["1. ", "2. ", "3. "]

    def test_top_level_has_no_indent(self):
        assert ListContext(ordered=False).indent == ""

    def test_nested_context(self):
        outer = ListContext(ordered=True)
        outer.take_bullet()
        inner = outer.nested(ordered=False)
        assert inner.indent_level == 4
        assert inner.indent == "  "
        assert inner.next_index == 1
        assert outer.next_index == 2


@pytest.mark.unit
class TestFlatLists:
    """Tests for single-level lists."""

    def test_ordered(self):
        assert render(ol(li("first"), li("second"))) == "1. first\n2. second"

    def test_unordered(self):
        assert render(ul(li("a"), li("b"))) == "- a\n- b"

    def test_inline_content(self):
        assert render(ul(li("Use ", element("code", "pip"), " or ", element("b", "uv")))) == "- Use `pip` or **uv**"

    def test_non_item_children_skipped(self):
        assert render(ul("stray", element("p", "para"), li("a"))) == "- a"

    def test_list_after_paragraph(self):
        assert render(element("p", "Intro"), ul(li("a"))) == "Intro\n\n- a"

    def test_continuation_lines(self):
        assert render(ul(li("a", element("br"), "b"))) == "- a\n  b"

    def test_item_with_paragraphs(self):
        assert render(ul(li(element("p", "para one"), element("p", "para two")))) == "- para one\n\n  para two"

    def test_empty_item(self):
        assert render(ul(li(), li("b"))) == "-\n- b"

    def test_item_outside_list_uses_default_context(self):
        assert render(li("x")) == "- x"

    def test_separate_lists_restart_numbering(self):
        assert render(ol(li("a")), ol(li("b"))) == "1. a\n\n1. b"


@pytest.mark.unit
class TestNestedLists:
    """Tests for nested lists."""

    def test_ordered_inside_unordered(self):
        tree = ul(li("outer", ol(li("one"), li("two"))), li("next"))
        assert render(tree) == "- outer\n  1. one\n  2. two\n- next"

    def test_levels_differ_by_two_spaces(self):
        result = render(ul(li("a", ul(li("b", ul(li("c")))))))
        assert result == "- a\n  - b\n    - c"
        indents = [len(line) - len(line.lstrip(" ")) for line in result.split("\n")]
        assert indents == [0, 2, 4]

    def test_inner_counter_independent_of_outer_position(self):
        tree = ol(li("a"), li("b"), li("c", ol(li("x"), li("y"))))
        assert render(tree) == "1. a\n2. b\n3. c\n  1. x\n  2. y"

    def test_outer_counter_continues_after_nested_list(self):
        tree = ol(li("a", ul(li("x"))), li("b"))
        assert render(tree) == "1. a\n  - x\n2. b"

    def test_item_starting_with_nested_list(self):
        assert render(ul(li(ul(li("inner"))))) == "-\n  - inner"

    def test_text_after_nested_list(self):
        tree = ul(li("Item", ul(li("sub")), "more"))
        assert render(tree) == "- Item\n  - sub\n  more"

    def test_wrapped_list_after_text(self):
        tree = ul(li("a", element("div", ul(li("b")))))
        assert render(tree) == "- a\n  - b"

    def test_wrapped_list_as_first_content(self):
        assert render(ul(li(element("div", ul(li("b")))))) == "-\n  - b"

    def test_wrapped_paragraph_and_list(self):
        tree = ul(li(element("div", element("p", "a"), ul(li("b")))), li("c"))
        assert render(tree) == "- a\n  - b\n- c"

    def test_list_behind_several_wrappers(self):
        tree = ol(li("a", element("section", element("div", ol(li("x"), li("y"))))), li("b"))
        assert render(tree) == "1. a\n  1. x\n  2. y\n2. b"

    def test_wrapper_without_list_stays_inline(self):
        assert render(ul(li("a ", element("span", "b"), " c"))) == "- a b c"


@pytest.mark.unit
class TestListValidation:
    """Tests for contract violations inside lists."""

    def test_invalid_node_directly_under_list(self):
        bad = DocumentNode(kind=NodeKind.ELEMENT, tag_name=None, children=())
        with pytest.raises(InvalidNodeError):
            render(ul(bad, li("a")))

    def test_invalid_wrapper_inside_item(self):
        bad = DocumentNode(kind=NodeKind.ELEMENT, tag_name="div", children=None)
        with pytest.raises(InvalidNodeError):
            render(ul(li("a", bad)))
