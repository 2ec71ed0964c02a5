#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_options.py
"""Unit tests for the options dataclasses."""

import dataclasses

import pytest

from copymd.constants import DEFAULT_MAX_DEPTH, DEFAULT_STRIP_SELECTORS
from copymd.options import HtmlOptions, MarkdownOptions


@pytest.mark.unit
class TestMarkdownOptions:
    """Tests for MarkdownOptions."""

    def test_defaults(self):
        options = MarkdownOptions()
        assert options.escape_special is True
        assert options.table_overflow == "extend"
        assert options.max_depth == DEFAULT_MAX_DEPTH

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            MarkdownOptions().escape_special = False

    def test_create_updated(self):
        original = MarkdownOptions()
        updated = original.create_updated(table_overflow="truncate")
        assert updated.table_overflow == "truncate"
        assert original.table_overflow == "extend"

    def test_field_names(self):
        assert MarkdownOptions.field_names() == frozenset({"escape_special", "table_overflow", "max_depth"})

    @pytest.mark.parametrize("kwargs", [{"table_overflow": "wrap"}, {"max_depth": 0}, {"max_depth": -5}])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            MarkdownOptions(**kwargs)

    def test_create_updated_validates(self):
        with pytest.raises(ValueError):
            MarkdownOptions().create_updated(max_depth=0)


@pytest.mark.unit
class TestHtmlOptions:
    """Tests for HtmlOptions."""

    def test_defaults(self):
        options = HtmlOptions()
        assert options.html_parser == "html.parser"
        assert options.root_selector is None
        assert options.strip_selectors == DEFAULT_STRIP_SELECTORS
        assert options.collapse_whitespace is True
        assert options.markdown_options == MarkdownOptions()

    def test_unknown_parser(self):
        with pytest.raises(ValueError, match="html_parser"):
            HtmlOptions(html_parser="bogus")

    def test_nested_markdown_options(self):
        options = HtmlOptions(markdown_options=MarkdownOptions(escape_special=False))
        assert options.markdown_options.escape_special is False

    def test_field_metadata_has_help(self):
        for options_class in (HtmlOptions, MarkdownOptions):
            for field in dataclasses.fields(options_class):
                assert field.metadata.get("help"), f"{options_class.__name__}.{field.name}"
