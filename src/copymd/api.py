"""The major exported API functions for Markdown conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/copymd/api.py
import logging
from typing import Any, Optional, TypeVar

from copymd.constants import DEFAULT_PLAIN_TEXT_LANGUAGE
from copymd.options.base import CloneFrozenMixin
from copymd.options.html import HtmlOptions
from copymd.options.markdown import MarkdownOptions
from copymd.renderers.markdown import MarkdownRenderer
from copymd.tree.html import HtmlTreeAdapter
from copymd.tree.nodes import DocumentNode
from copymd.utils.text import fence_text, quote_text

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound=CloneFrozenMixin)


def _apply_option_kwargs(options: OptionsT, options_type_name: str, **kwargs: Any) -> tuple[OptionsT, dict[str, Any]]:
    """Apply keyword overrides that name fields of ``options``.

    Parameters
    ----------
    options : CloneFrozenMixin
        Base options
    options_type_name : str
        Name used in debug messages
    **kwargs
        Candidate field overrides

    Returns
    -------
    tuple
        Updated options and the keyword arguments that did not match a field

    """
    names = options.field_names()
    matched = {k: v for k, v in kwargs.items() if k in names}
    remaining = {k: v for k, v in kwargs.items() if k not in names}
    if matched:
        logger.debug(f"Overriding {options_type_name} options: {sorted(matched)}")
        options = options.create_updated(**matched)
    return options, remaining


def convert(root: DocumentNode, options: Optional[MarkdownOptions] = None, **kwargs: Any) -> str:
    """Convert a document tree to Markdown.

    Only the children of ``root`` are converted; ``root`` itself is the
    anchor of the conversion. The call is pure: the same tree always gives
    the same string and nothing is retained between calls.

    Parameters
    ----------
    root : DocumentNode
        Conversion anchor
    options : MarkdownOptions, optional
        Serializer options
    **kwargs
        Individual ``MarkdownOptions`` fields overriding ``options``

    Returns
    -------
    str
        Normalized Markdown text

    Raises
    ------
    InvalidNodeError
        If a visited node violates the ``DocumentNode`` contract
    RenderingError
        If the tree is nested deeper than ``max_depth``

    Examples
    --------
        >>> from copymd.tree.builder import element
        >>> convert(element("div", element("ol", element("li", "first"), element("li", "second"))))
        '1. first\\n2. second'

    """
    options = options or MarkdownOptions()
    options, unknown = _apply_option_kwargs(options, "markdown", **kwargs)
    if unknown:
        logger.debug(f"Skipping unknown markdown options: {sorted(unknown)}")
    return MarkdownRenderer(options).render_to_string(root)


def html_to_markdown(
    html: str,
    options: Optional[MarkdownOptions] = None,
    html_options: Optional[HtmlOptions] = None,
    **kwargs: Any,
) -> str:
    """Convert HTML markup to Markdown.

    Parameters
    ----------
    html : str
        HTML markup, a fragment or a full page
    options : MarkdownOptions, optional
        Serializer options. Defaults to ``html_options.markdown_options``.
    html_options : HtmlOptions, optional
        Tree-provider options (parser, root selector, stripped chrome)
    **kwargs
        Individual ``HtmlOptions`` or ``MarkdownOptions`` fields

    Returns
    -------
    str
        Normalized Markdown text

    Raises
    ------
    DependencyError
        If BeautifulSoup or the selected parser backend is missing
    ParsingError
        If the root selector is invalid or matches nothing

    Examples
    --------
        >>> html_to_markdown("<p>Hello <b>world</b></p>")
        'Hello **world**'
        >>> html_to_markdown('<div class="msg"><p>Hi</p></div>', root_selector=".msg")
        'Hi'

    """
    html_options = html_options or HtmlOptions()
    html_options, remaining = _apply_option_kwargs(html_options, "html", **kwargs)
    markdown_options = options or html_options.markdown_options

    root = HtmlTreeAdapter(html_options).parse(html)
    return convert(root, markdown_options, **remaining)


def text_to_blockquote(text: str) -> str:
    """Format plain text as a Markdown blockquote.

    Parameters
    ----------
    text : str
        Selected text

    Returns
    -------
    str
        Quoted text, or an empty string for blank input

    Examples
    --------
        >>> text_to_blockquote("first\\n\\n\\nsecond\\n")
        '> first\\n> \\n> second'

    """
    return quote_text(text)


def text_to_code_block(text: str, language: str = DEFAULT_PLAIN_TEXT_LANGUAGE) -> str:
    """Wrap plain text in a fenced code block.

    Parameters
    ----------
    text : str
        Text to fence
    language : str, default "text"
        Info string after the opening fence

    Returns
    -------
    str
        Fenced code block

    Examples
    --------
        >>> text_to_code_block("print(1)", language="python")
        '```python\\nprint(1)\\n```'

    """
    return fence_text(text, language)


__all__ = [
    "convert",
    "html_to_markdown",
    "text_to_blockquote",
    "text_to_code_block",
]
