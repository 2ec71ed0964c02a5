#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_text_utils.py
"""Unit tests for the Markdown normalizer and plain-text helpers.

Tests cover:
- Trailing whitespace stripping and blank-line collapsing
- Idempotence of normalization (property-based)
- Blockquote body formatting
- Fenced code blocks for plain text

"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from copymd.utils.text import collapse_blank_lines, fence_text, normalize_markdown, quote_text


@pytest.mark.unit
class TestNormalizeMarkdown:
    """Tests for normalize_markdown."""

    def test_strips_edges_and_collapses_blank_runs(self):
        assert normalize_markdown("  \n\nHello  \n\n\n\nworld\n") == "Hello\n\nworld"

    def test_strips_tabs_and_spaces_before_newline(self):
        assert normalize_markdown("a\t \nb") == "a\nb"

    def test_keeps_single_blank_line(self):
        assert normalize_markdown("a\n\nb") == "a\n\nb"

    def test_keeps_leading_indentation_of_inner_lines(self):
        assert normalize_markdown("- a\n  - b") == "- a\n  - b"

    def test_whitespace_only_becomes_empty(self):
        assert normalize_markdown(" \n\t\n ") == ""

    def test_blank_line_with_spaces_counts_as_blank(self):
        assert normalize_markdown("a\n  \n \n\nb") == "a\n\nb"

    @given(st.text())
    def test_idempotent(self, s):
        once = normalize_markdown(s)
        assert normalize_markdown(once) == once

    @given(st.text(alphabet=st.sampled_from(["a", " ", "\t", "\n", ">"])))
    def test_never_leaves_three_newlines_or_trailing_spaces(self, s):
        result = normalize_markdown(s)
        assert "\n\n\n" not in result
        assert " \n" not in result
        assert "\t\n" not in result


@pytest.mark.unit
class TestCollapseBlankLines:
    """Tests for collapse_blank_lines."""

    def test_keeps_first_line_indentation(self):
        assert collapse_blank_lines("\n\n  - a\n\n\n\n  - b  \n") == "  - a\n\n  - b"

    def test_empty(self):
        assert collapse_blank_lines("\n\n") == ""


@pytest.mark.unit
class TestQuoteText:
    """Tests for quote_text."""

    def test_single_line(self):
        assert quote_text("quoted") == "> quoted"

    def test_drops_edge_blank_lines_and_collapses_interior(self):
        assert quote_text("\nfirst\n\n\n\nsecond\n") == "> first\n> \n> second"

    def test_blank_lines_with_whitespace_collapse(self):
        assert quote_text("a\n   \n\t\nb") == "> a\n> \n> b"

    def test_empty_input(self):
        assert quote_text("") == ""
        assert quote_text("\n \n") == ""

    def test_every_line_prefixed(self):
        lines = quote_text("one\ntwo\nthree").split("\n")
        assert all(line.startswith("> ") for line in lines)


@pytest.mark.unit
class TestFenceText:
    """Tests for fence_text."""

    def test_default_language(self):
        assert fence_text("raw") == "```text\nraw\n```"

    def test_custom_and_empty_language(self):
        assert fence_text("print(1)", language="python") == "```python\nprint(1)\n```"
        assert fence_text("x", language="") == "```\nx\n```"

    def test_fence_longer_than_backtick_runs(self):
        assert fence_text("has ``` inside") == "````text\nhas ``` inside\n````"

    def test_text_is_normalized(self):
        assert fence_text("\n\na  \n\n\n\nb\n") == "```text\na\n\nb\n```"
