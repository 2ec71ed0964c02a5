#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/copymd/tree/html.py
"""HTML tree provider.

This module adapts HTML markup, parsed with BeautifulSoup, into an
immutable ``DocumentNode`` snapshot. The snapshot shares nothing with the
soup, so the markup may change or be discarded as soon as ``parse`` returns.

Chat interfaces surround each message with buttons, toolbars and copy/share
actions. Elements matching ``HtmlOptions.strip_selectors`` are removed
before the tree is built so that none of that chrome reaches the output.

"""

from __future__ import annotations

import logging
import re
from typing import Any

from copymd.constants import BLOCK_TAGS, DEPS_HTML, HTML_PARSER_PACKAGES
from copymd.exceptions import DependencyError, InvalidOptionsError, ParsingError
from copymd.options.html import HtmlOptions
from copymd.tree.nodes import DocumentNode, NodeKind
from copymd.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


class HtmlTreeAdapter:
    """Adapt BeautifulSoup markup into ``DocumentNode`` trees.

    Parameters
    ----------
    options : HtmlOptions or None, default = None
        Adaptation options

    Examples
    --------
        >>> adapter = HtmlTreeAdapter()
        >>> root = adapter.parse("<p>Hello <b>world</b></p>")
        >>> root.children[0].tag_name
        'p'

    """

    def __init__(self, options: HtmlOptions | None = None):
        """Initialize the adapter with options."""
        if options is not None and not isinstance(options, HtmlOptions):
            raise InvalidOptionsError(converter_name="html", expected_type=HtmlOptions, received_type=type(options))
        self.options: HtmlOptions = options or HtmlOptions()

    @requires_dependencies("html", DEPS_HTML)
    def parse(self, html_content: str) -> DocumentNode:
        """Parse HTML and return the conversion root as a ``DocumentNode``.

        Parameters
        ----------
        html_content : str
            HTML markup

        Returns
        -------
        DocumentNode
            Snapshot of the selected root element

        Raises
        ------
        DependencyError
            If the configured parser backend is not installed
        ParsingError
            If ``root_selector`` matches nothing or is not a valid selector

        """
        from bs4 import BeautifulSoup
        from bs4.exceptions import FeatureNotFound

        try:
            soup = BeautifulSoup(html_content, self.options.html_parser)
        except FeatureNotFound as e:
            missing = HTML_PARSER_PACKAGES.get(self.options.html_parser)
            raise DependencyError(
                converter_name="html",
                missing_packages=[missing] if missing else [],
                message=f"Selected HtmlOptions.html_parser not found: {e}.",
            ) from e

        self._strip_chrome(soup)
        root = self._select_root(soup)
        return self.from_soup(root)

    def from_soup(self, root: Any) -> DocumentNode:
        """Adapt an already-parsed BeautifulSoup element.

        Parameters
        ----------
        root : bs4.Tag or bs4.BeautifulSoup
            Element to adapt; becomes the conversion anchor

        Returns
        -------
        DocumentNode
            Element node for ``root``

        """
        try:
            node = self._adapt(root, in_pre=False)
        except RecursionError as e:
            raise ParsingError("HTML document is nested too deeply to adapt", parsing_stage="adapt", original_error=e) from e
        if node is None or node.is_text:
            # Bare strings are wrapped so the converter always gets an anchor element
            children = () if node is None else (node,)
            return DocumentNode(kind=NodeKind.ELEMENT, tag_name="div", children=children)
        return node

    def _strip_chrome(self, soup: Any) -> None:
        """Remove every element matching one of the strip selectors."""
        from soupsieve import SelectorSyntaxError

        removed = 0
        for selector in self.options.strip_selectors:
            try:
                matches = soup.select(selector)
            except (SelectorSyntaxError, ValueError) as e:
                raise ParsingError(
                    f"Invalid strip selector {selector!r}: {e}", parsing_stage="strip", original_error=e
                ) from e
            for element in matches:
                # Already detached as part of an earlier match
                if element.decomposed:
                    continue
                element.decompose()
                removed += 1
        if removed:
            logger.debug("Stripped %d interface elements before conversion", removed)

    def _select_root(self, soup: Any) -> Any:
        """Pick the conversion root: selector match, then <body>, then the document."""
        from bs4.element import Tag
        from soupsieve import SelectorSyntaxError

        if self.options.root_selector:
            try:
                root = soup.select_one(self.options.root_selector)
            except (SelectorSyntaxError, ValueError) as e:
                raise ParsingError(
                    f"Invalid root selector {self.options.root_selector!r}: {e}",
                    parsing_stage="select",
                    original_error=e,
                ) from e
            if root is None:
                raise ParsingError(
                    f"Root selector {self.options.root_selector!r} matched no element", parsing_stage="select"
                )
            return root

        body = soup.find("body")
        return body if isinstance(body, Tag) else soup

    def _adapt(self, node: Any, in_pre: bool) -> DocumentNode | None:
        """Recursively copy a BeautifulSoup node into a ``DocumentNode``."""
        from bs4.element import NavigableString, PreformattedString, Tag

        if isinstance(node, PreformattedString):
            # Comments, doctypes, CDATA, processing instructions
            return None

        if isinstance(node, NavigableString):
            content = str(node)
            if self.options.collapse_whitespace and not in_pre:
                content = self._collapse_text(node, content)
                if not content:
                    return None
            return DocumentNode(kind=NodeKind.TEXT, text_content=content, children=None)

        if not isinstance(node, Tag):
            return None

        tag_name = node.name or "div"
        if tag_name == "[document]":
            tag_name = "div"
        child_in_pre = in_pre or tag_name == "pre"

        children: list[DocumentNode] = []
        for child in node.children:
            adapted = self._adapt(child, child_in_pre)
            if adapted is not None:
                children.append(adapted)

        return DocumentNode(
            kind=NodeKind.ELEMENT,
            tag_name=tag_name,
            children=tuple(children),
            attributes=self._adapt_attributes(node.attrs),
        )

    @staticmethod
    def _collapse_text(node: Any, content: str) -> str:
        """Collapse whitespace in a text node outside ``<pre>``.

        Whitespace-only text survives as a single space only between two
        inline siblings that are not separated by a ``<br>``. Text at the start
        or end of a block container loses its leading or trailing whitespace,
        and so does text directly after a ``<br>``.
        """
        previous_node = node.previous_sibling
        next_node = node.next_sibling

        if not content.strip():
            if _is_inline(previous_node) and not _is_line_break(previous_node) and _is_inline(next_node):
                return " "
            return ""

        content = _WHITESPACE_RE.sub(" ", content)
        parent_name = getattr(node.parent, "name", None)
        parent_is_block = parent_name in BLOCK_TAGS or parent_name == "[document]"
        starts_line = _is_block(previous_node) or _is_line_break(previous_node)
        if previous_node is None and parent_is_block or starts_line:
            content = content.lstrip()
        if next_node is None and parent_is_block or _is_block(next_node):
            content = content.rstrip()
        return content

    @staticmethod
    def _adapt_attributes(attrs: dict[str, Any]) -> dict[str, str]:
        """Flatten BeautifulSoup attributes; multi-valued ones are space-joined."""
        adapted: dict[str, str] = {}
        for name, value in attrs.items():
            if isinstance(value, (list, tuple)):
                adapted[name] = " ".join(str(v) for v in value)
            else:
                adapted[name] = str(value)
        return adapted


def _is_block(node: Any) -> bool:
    """Whether a sibling is a block-level element."""
    return getattr(node, "name", None) in BLOCK_TAGS


def _is_inline(node: Any) -> bool:
    """Whether a sibling exists and is not a block-level element."""
    return node is not None and not _is_block(node)


def _is_line_break(node: Any) -> bool:
    """Whether a sibling is a ``<br>``; text after it starts a new line."""
    return getattr(node, "name", None) == "br"
