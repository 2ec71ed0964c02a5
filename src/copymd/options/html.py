#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the HTML tree provider.

This module defines options that control how HTML markup is adapted into a
``DocumentNode`` snapshot before serialization.
"""
# src/copymd/options/html.py


from __future__ import annotations

from dataclasses import dataclass, field
from typing import get_args

from copymd.constants import (
    DEFAULT_COLLAPSE_WHITESPACE,
    DEFAULT_HTML_PARSER,
    DEFAULT_STRIP_SELECTORS,
    HtmlParserType,
)
from copymd.options.base import CloneFrozenMixin
from copymd.options.markdown import MarkdownOptions


@dataclass(frozen=True)
class HtmlOptions(CloneFrozenMixin):
    """Configuration options for HTML-to-tree adaptation.

    Parameters
    ----------
    html_parser : {"html.parser", "lxml", "html5lib"}, default "html.parser"
        BeautifulSoup backend. ``lxml`` and ``html5lib`` must be installed
        separately.
    root_selector : str or None, default None
        CSS selector for the conversion root, e.g.
        ``'[data-message-author-role="assistant"]'``. When None the ``<body>``
        (or the whole document) is the root.
    strip_selectors : tuple of str
        CSS selectors whose matches are removed before adaptation. Defaults
        to the controls that surround a chat message (buttons, toolbars,
        copy/share actions, forms).
    collapse_whitespace : bool, default True
        Collapse whitespace runs in text outside ``<pre>`` and drop
        whitespace-only text nodes.
    markdown_options : MarkdownOptions
        Serializer options used by ``html_to_markdown``.

    """

    html_parser: HtmlParserType = field(
        default=DEFAULT_HTML_PARSER,
        metadata={"help": "BeautifulSoup parser backend", "choices": list(get_args(HtmlParserType))},
    )
    root_selector: str | None = field(
        default=None,
        metadata={"help": "CSS selector for the element to convert"},
    )
    strip_selectors: tuple[str, ...] = field(
        default=DEFAULT_STRIP_SELECTORS,
        metadata={"help": "CSS selectors removed before conversion"},
    )
    collapse_whitespace: bool = field(
        default=DEFAULT_COLLAPSE_WHITESPACE,
        metadata={"help": "Collapse whitespace in text outside <pre>"},
    )
    markdown_options: MarkdownOptions = field(
        default_factory=MarkdownOptions,
        metadata={"help": "Markdown serializer options"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If the parser backend is unknown.

        """
        if self.html_parser not in get_args(HtmlParserType):
            raise ValueError(f"html_parser must be one of {get_args(HtmlParserType)}, got {self.html_parser!r}")
        if isinstance(self.strip_selectors, list):
            object.__setattr__(self, "strip_selectors", tuple(self.strip_selectors))
