"""copymd - Copy rendered documents as canonical Markdown.

copymd serializes a rendered document tree (for example an assistant
message in a chat interface) into clean Markdown. HTML is adapted into an
immutable ``DocumentNode`` tree with BeautifulSoup, and a recursive
serializer turns that tree into Markdown with nested lists, pipe tables,
fenced code blocks, blockquotes, links and escaped inline emphasis.

Examples
--------
Converting HTML:

    >>> from copymd import html_to_markdown
    >>> html_to_markdown("<p>Hello <b>world</b></p>")
    'Hello **world**'

Converting a hand-built tree:

    >>> from copymd import convert
    >>> from copymd.tree import element
    >>> convert(element("div", element("foo", element("span", "x"))))
    'x'

Plain-text copy modes:

    >>> from copymd import text_to_blockquote, text_to_code_block
    >>> text_to_blockquote("quoted")
    '> quoted'
    >>> text_to_code_block("raw")
    '```text\\nraw\\n```'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "copymd requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from copymd.api import convert, html_to_markdown, text_to_blockquote, text_to_code_block
from copymd.exceptions import (
    CopyMdError,
    DependencyError,
    InvalidNodeError,
    InvalidOptionsError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from copymd.options import HtmlOptions, MarkdownOptions
from copymd.tree import DocumentNode, NodeCategory, NodeKind

__all__ = [
    "__version__",
    # API
    "convert",
    "html_to_markdown",
    "text_to_blockquote",
    "text_to_code_block",
    # Tree
    "DocumentNode",
    "NodeCategory",
    "NodeKind",
    # Options
    "HtmlOptions",
    "MarkdownOptions",
    # Exceptions
    "CopyMdError",
    "DependencyError",
    "InvalidNodeError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
]
