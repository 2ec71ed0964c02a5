#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_api.py
"""Unit tests for the public API functions."""

import pytest
from utils import nested_spans

import copymd
from copymd.api import convert, html_to_markdown, text_to_blockquote, text_to_code_block
from copymd.exceptions import RenderingError
from copymd.options import HtmlOptions, MarkdownOptions
from copymd.tree.builder import element


@pytest.mark.unit
class TestConvert:
    """Tests for convert."""

    def test_default_options(self):
        assert convert(element("div", element("p", "a_b"))) == "a\\_b"

    def test_options_object(self):
        root = element("div", element("p", "a_b"))
        assert convert(root, MarkdownOptions(escape_special=False)) == "a_b"

    def test_keyword_overrides_options(self):
        root = element("div", element("p", "a_b"))
        assert convert(root, MarkdownOptions(escape_special=True), escape_special=False) == "a_b"

    def test_keyword_max_depth(self):
        with pytest.raises(RenderingError):
            convert(element("div", nested_spans(10)), max_depth=5)

    def test_unknown_keywords_ignored(self):
        assert convert(element("div", "x"), not_an_option=True) == "x"


@pytest.mark.unit
class TestHtmlToMarkdown:
    """Tests for html_to_markdown."""

    def test_basic(self):
        assert html_to_markdown("<p>Hello <b>world</b></p>") == "Hello **world**"

    def test_html_and_markdown_keywords(self):
        html = '<div class="msg"><p>a_b</p></div><p>other</p>'
        assert html_to_markdown(html, root_selector=".msg", escape_special=False) == "a_b"

    def test_markdown_options_from_html_options(self):
        html_options = HtmlOptions(markdown_options=MarkdownOptions(escape_special=False))
        assert html_to_markdown("<p>a_b</p>", html_options=html_options) == "a_b"

    def test_explicit_markdown_options_win(self):
        html_options = HtmlOptions(markdown_options=MarkdownOptions(escape_special=False))
        result = html_to_markdown("<p>a_b</p>", options=MarkdownOptions(), html_options=html_options)
        assert result == "a\\_b"


@pytest.mark.unit
class TestPlainTextModes:
    """Tests for the plain-text copy helpers."""

    def test_blockquote_collapses_blank_lines(self):
        result = text_to_blockquote("\nfirst\n\n\n\nsecond\n")
        assert result == "> first\n> \n> second"

    def test_blockquote_of_blank_text(self):
        assert text_to_blockquote(" \n\n ") == ""

    def test_code_block_default_language(self):
        assert text_to_code_block("x = 1\n") == "```text\nx = 1\n```"

    def test_code_block_language(self):
        assert text_to_code_block("print(1)", language="python") == "```python\nprint(1)\n```"

    def test_code_block_fence_longer_than_content(self):
        assert text_to_code_block("a ``` b", language="") == "````\na ``` b\n````"


@pytest.mark.unit
class TestPackageExports:
    """Tests for the package namespace."""

    def test_version(self):
        assert copymd.__version__ == "1.0.0"

    def test_all_names_importable(self):
        for name in copymd.__all__:
            assert hasattr(copymd, name), name
