#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for copymd.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy.
"""

from __future__ import annotations

from copymd.options.base import CloneFrozenMixin
from copymd.options.html import HtmlOptions
from copymd.options.markdown import MarkdownOptions

__all__ = [
    "CloneFrozenMixin",
    "HtmlOptions",
    "MarkdownOptions",
]
