#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/copymd/renderers/markdown.py
"""Markdown rendering from document trees.

This module provides the MarkdownRenderer class which converts a
``DocumentNode`` tree into canonical Markdown text.

Every node carries a ``NodeCategory`` assigned when the node was built. The
renderer looks the category up in a dispatch table and calls the matching
formatter; categories without a formatter pass through, rendering their
children and dropping the element itself. Fragments are concatenated in
document order and the result is normalized once.

The renderer keeps no per-call state. List nesting and recursion depth are
passed down as arguments, so a single instance can be shared freely.

"""

from __future__ import annotations

import logging
from typing import Optional

from copymd.exceptions import InvalidNodeError, RenderingError
from copymd.options.markdown import MarkdownOptions
from copymd.renderers._blocks import BlockFormatterMixin
from copymd.renderers._inline import InlineFormatterMixin
from copymd.renderers._lists import ListContext, ListFormatterMixin
from copymd.renderers._tables import TableFormatterMixin
from copymd.renderers.base import BaseRenderer
from copymd.tree.nodes import DocumentNode, NodeCategory, NodeKind
from copymd.utils.decorators import debug_timer
from copymd.utils.text import normalize_markdown

logger = logging.getLogger(__name__)

# Category -> formatter method. Categories missing here pass through.
_HANDLERS: dict[NodeCategory, str] = {
    NodeCategory.TEXT: "_render_text",
    NodeCategory.STRONG: "_render_strong",
    NodeCategory.EMPHASIS: "_render_emphasis",
    NodeCategory.INLINE_CODE: "_render_inline_code",
    NodeCategory.LINK: "_render_link",
    NodeCategory.LINE_BREAK: "_render_line_break",
    NodeCategory.HEADING: "_render_heading",
    NodeCategory.PARAGRAPH: "_render_paragraph",
    NodeCategory.CODE_BLOCK: "_render_code_block",
    NodeCategory.BLOCKQUOTE: "_render_blockquote",
    NodeCategory.LIST: "_render_list",
    NodeCategory.LIST_ITEM: "_render_list_item",
    NodeCategory.TABLE: "_render_table",
    NodeCategory.IGNORED: "_render_ignored",
}


class MarkdownRenderer(
    InlineFormatterMixin,
    BlockFormatterMixin,
    ListFormatterMixin,
    TableFormatterMixin,
    BaseRenderer,
):
    """Render document trees to Markdown text.

    Parameters
    ----------
    options : MarkdownOptions or None, default = None
        Markdown formatting options

    Examples
    --------
    Basic usage:

        >>> from copymd.tree.builder import element
        >>> from copymd.renderers.markdown import MarkdownRenderer
        >>> root = element("div", element("p", "Hello ", element("b", "world")))
        >>> MarkdownRenderer().render_to_string(root)
        'Hello **world**'

    """

    def __init__(self, options: MarkdownOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownOptions, "markdown")
        options = options or MarkdownOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownOptions = options

    def render_to_string(self, root: DocumentNode) -> str:
        """Render the children of ``root`` to a Markdown string.

        ``root`` is the conversion anchor: its own tag is never rendered.

        Parameters
        ----------
        root : DocumentNode
            The node whose children are converted

        Returns
        -------
        str
            Normalized Markdown text

        Raises
        ------
        InvalidNodeError
            If a visited node violates the ``DocumentNode`` contract
        RenderingError
            If the tree is nested deeper than ``options.max_depth``

        """
        if not isinstance(root, DocumentNode):
            raise InvalidNodeError(f"Expected a DocumentNode, got {type(root).__name__}", node=root)

        with debug_timer(logger, "Markdown conversion"):
            self._validate_node(root, 0)
            markdown = normalize_markdown(self._render_children(root, None, 0))

        logger.debug("Converted tree to %d characters of Markdown", len(markdown))
        return markdown

    def _render_node(self, node: DocumentNode, context: Optional[ListContext], depth: int) -> str:
        """Validate one node and dispatch it to its formatter."""
        self._validate_node(node, depth)
        handler_name = _HANDLERS.get(node.category)
        if handler_name is None:
            return self._render_children(node, context, depth)
        return getattr(self, handler_name)(node, context, depth)

    def _render_children(self, node: DocumentNode, context: Optional[ListContext], depth: int) -> str:
        """Render and concatenate the children of ``node`` in document order."""
        return "".join(self._render_node(child, context, depth + 1) for child in node.iter_children())

    def _render_ignored(self, node: DocumentNode, context: Optional[ListContext], depth: int) -> str:
        return ""

    def _validate_node(self, node: DocumentNode, depth: int) -> None:
        """Check the node contract and the nesting limit.

        Raises
        ------
        InvalidNodeError
            For an element without a tag name, or a non-text node whose
            children are absent
        RenderingError
            When ``depth`` exceeds ``options.max_depth``

        """
        if depth > self.options.max_depth:
            raise RenderingError(
                f"Document tree is nested deeper than max_depth={self.options.max_depth}",
                rendering_stage="dispatch",
            )
        if not isinstance(node, DocumentNode):
            raise InvalidNodeError(f"Expected a DocumentNode child, got {type(node).__name__}", node=node)
        if node.kind is NodeKind.TEXT:
            return
        if not node.tag_name:
            raise InvalidNodeError("Element node has no tag_name", node=node)
        if node.children is None:
            raise InvalidNodeError(f"Element <{node.tag_name}> has no children sequence", node=node)
