#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/copymd/utils/escape.py
"""Markdown escaping utilities.

This module provides the escape helpers shared by the inline and table
formatters.

"""

from __future__ import annotations

import re

from copymd.constants import MARKDOWN_SPECIAL_CHARS, TABLE_CELL_LINE_BREAK

_SPECIAL_CHARS_RE = re.compile("([" + re.escape(MARKDOWN_SPECIAL_CHARS) + "])")
_NEWLINE_RUN_RE = re.compile(r"\n+")


def escape_markdown_text(text: str) -> str:
    r"""Escape emphasis and code markers in literal text.

    Only asterisks, underscores and backticks are escaped, each with a single backslash.
    Every other character, backslashes included, is left untouched.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_markdown_text("snake_case * 2")
        'snake\\_case \\* 2'

    """
    if not text:
        return text
    return _SPECIAL_CHARS_RE.sub(r"\\\1", text)


def escape_table_cell(text: str) -> str:
    """Make rendered cell content safe for a single pipe-table cell.

    Pipes become ``\\|`` and every run of newlines becomes ``<br>``.

    """
    return _NEWLINE_RUN_RE.sub(TABLE_CELL_LINE_BREAK, text.replace("|", "\\|"))


def inline_code_fence(code: str) -> str:
    """Return the backtick fence for inline code: doubled when the code holds a backtick."""
    return "``" if "`" in code else "`"
