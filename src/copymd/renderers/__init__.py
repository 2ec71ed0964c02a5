#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/copymd/renderers/__init__.py
"""Renderers that turn document trees into text."""

from copymd.renderers._lists import ListContext
from copymd.renderers._tables import TableModel
from copymd.renderers.base import BaseRenderer
from copymd.renderers.markdown import MarkdownRenderer

__all__ = [
    "BaseRenderer",
    "ListContext",
    "MarkdownRenderer",
    "TableModel",
]
