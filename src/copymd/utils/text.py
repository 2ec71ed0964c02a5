#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/copymd/utils/text.py
"""Text normalization utilities.

This module holds the Markdown normalizer applied to intermediate fragments
and to the final conversion result, plus the plain-text helpers behind the
quote and code copy modes.

"""

from __future__ import annotations

import re

from copymd.constants import DEFAULT_PLAIN_TEXT_LANGUAGE

# Any whitespace except the newline itself, directly before a newline
_TRAILING_WS_RE = re.compile(r"[^\S\n]+(?=\n)")
_BLANK_RUN_RE = re.compile(r"\n{3,}")
_BACKTICK_RUN_RE = re.compile(r"`+")


def collapse_blank_lines(text: str) -> str:
    """Strip whitespace before each newline and collapse 3+ newlines to 2.

    Unlike :func:`normalize_markdown`, leading indentation of the first line
    is kept; only blank lines at either end are removed.

    Parameters
    ----------
    text : str
        Text to clean

    Returns
    -------
    str
        Cleaned text

    """
    text = _TRAILING_WS_RE.sub("", text)
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.lstrip("\n").rstrip()


def normalize_markdown(text: str) -> str:
    """Canonicalize whitespace and blank-line runs.

    Strips horizontal whitespace before every newline, collapses any run of
    three or more newlines to exactly two, and trims the whole string.
    Applying it twice gives the same result as applying it once.

    Parameters
    ----------
    text : str
        Markdown text

    Returns
    -------
    str
        Normalized Markdown text

    Examples
    --------
        >>> normalize_markdown("\\n\\nHello  \\n\\n\\n\\nworld\\n")
        'Hello\\n\\nworld'

    """
    text = _TRAILING_WS_RE.sub("", text)
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()


def quote_text(text: str) -> str:
    """Format text as the body of a Markdown blockquote.

    The text is normalized, leading and trailing blank lines are dropped,
    interior runs of blank lines collapse to one, and every remaining line,
    blank or not, is prefixed with ``"> "``.

    Parameters
    ----------
    text : str
        Text to quote

    Returns
    -------
    str
        Quoted lines joined by newlines; empty when there is nothing to quote

    """
    lines: list[str] = []
    previous_blank = True
    for line in normalize_markdown(text).split("\n"):
        blank = not line.strip()
        if blank and previous_blank:
            continue
        lines.append("" if blank else line)
        previous_blank = blank

    while lines and not lines[-1]:
        lines.pop()

    return "\n".join(f"> {line}" for line in lines)


def fence_text(text: str, language: str = DEFAULT_PLAIN_TEXT_LANGUAGE) -> str:
    """Wrap plain text in a fenced code block.

    The fence is at least three backticks and always longer than the longest
    backtick run inside the text, so the block cannot be closed early.

    Parameters
    ----------
    text : str
        Plain text to fence
    language : str, default "text"
        Info string placed after the opening fence

    Returns
    -------
    str
        Fenced code block

    """
    body = normalize_markdown(text)
    longest = max((len(run) for run in _BACKTICK_RUN_RE.findall(body)), default=0)
    fence = "`" * max(3, longest + 1)
    return f"{fence}{language}\n{body}\n{fence}"
