#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown serialization.

This module defines the options consumed by the document-tree serializer.
"""
# src/copymd/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field
from typing import get_args

from copymd.constants import (
    DEFAULT_ESCAPE_SPECIAL,
    DEFAULT_MAX_DEPTH,
    DEFAULT_TABLE_OVERFLOW,
    TableOverflowMode,
)
from copymd.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class MarkdownOptions(CloneFrozenMixin):
    """Configuration options for document-tree-to-Markdown conversion.

    Parameters
    ----------
    escape_special : bool, default True
        Backslash-escape ``*``, ``_`` and backticks in text nodes.
    table_overflow : {"extend", "truncate"}, default "extend"
        What to do with body rows longer than the header row. ``"extend"``
        adds empty-label header columns; ``"truncate"`` drops the extra cells.
    max_depth : int, default 150
        Maximum element nesting depth. Deeper trees raise ``RenderingError``
        instead of exhausting the interpreter stack.

    """

    escape_special: bool = field(
        default=DEFAULT_ESCAPE_SPECIAL,
        metadata={"help": "Escape *, _ and ` in text"},
    )
    table_overflow: TableOverflowMode = field(
        default=DEFAULT_TABLE_OVERFLOW,
        metadata={
            "help": "Policy for body rows longer than the header: extend or truncate",
            "choices": list(get_args(TableOverflowMode)),
        },
    )
    max_depth: int = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={"help": "Maximum element nesting depth", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.table_overflow not in get_args(TableOverflowMode):
            raise ValueError(
                f"table_overflow must be one of {get_args(TableOverflowMode)}, got {self.table_overflow!r}"
            )
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
