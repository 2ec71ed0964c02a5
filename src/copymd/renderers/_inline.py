#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/copymd/renderers/_inline.py
"""Inline element formatting for the Markdown renderer.

Text, emphasis, strong, inline code, links and line breaks. Each handler
takes the node, the active list context and the recursion depth, and
returns a Markdown fragment.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

from copymd.exceptions import InvalidNodeError
from copymd.tree.nodes import DocumentNode
from copymd.utils.escape import escape_markdown_text, inline_code_fence

if TYPE_CHECKING:
    from copymd.options.markdown import MarkdownOptions
    from copymd.renderers._lists import ListContext


class InlineFormatterMixin:
    """Mixin rendering inline elements.

    The implementing class must provide ``options`` and
    ``_render_children(node, context, depth)``.
    """

    options: MarkdownOptions
    _render_children: Callable[..., str]

    def _render_text(self, node: DocumentNode, context: Optional[ListContext], depth: int) -> str:
        """Render a text node, escaping ``*``, ``_`` and backticks."""
        if node.text_content is None:
            raise InvalidNodeError("Text node has no text_content", node=node)
        if not self.options.escape_special:
            return node.text_content
        return escape_markdown_text(node.text_content)

    def _render_strong(self, node: DocumentNode, context: Optional[ListContext], depth: int) -> str:
        return f"**{self._render_children(node, context, depth)}**"

    def _render_emphasis(self, node: DocumentNode, context: Optional[ListContext], depth: int) -> str:
        return f"*{self._render_children(node, context, depth)}*"

    def _render_inline_code(self, node: DocumentNode, context: Optional[ListContext], depth: int) -> str:
        """Render ``code`` outside a code block using its raw text."""
        code = node.get_text()
        fence = inline_code_fence(code)
        return f"{fence}{code}{fence}"

    def _render_link(self, node: DocumentNode, context: Optional[ListContext], depth: int) -> str:
        """Render a link.

        A blank label falls back to the ``href``; a missing or empty ``href``
        leaves the label without link syntax.
        """
        label = self._render_children(node, context, depth)
        href: Any = node.get_attribute("href")
        if not href:
            return label
        if not label.strip():
            label = str(href)
        return f"[{label}]({href})"

    def _render_line_break(self, node: DocumentNode, context: Optional[ListContext], depth: int) -> str:
        return "\n"
