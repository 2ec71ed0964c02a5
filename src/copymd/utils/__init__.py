#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/copymd/utils/__init__.py
"""Utility modules for the copymd package.

This package contains the Markdown normalizer, escaping helpers and the
decorators shared by the adapters and renderers.
"""

from copymd.utils.escape import escape_markdown_text, escape_table_cell, inline_code_fence
from copymd.utils.text import collapse_blank_lines, fence_text, normalize_markdown, quote_text

__all__ = [
    "escape_markdown_text",
    "escape_table_cell",
    "inline_code_fence",
    "collapse_blank_lines",
    "fence_text",
    "normalize_markdown",
    "quote_text",
]
