#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/copymd/renderers/_blocks.py
"""Block element formatting for the Markdown renderer.

Headings, paragraphs, fenced code blocks and blockquotes. Block fragments
are wrapped in blank lines; the normalizer later collapses the surplus.

"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Callable, Optional

from copymd.constants import LANGUAGE_CLASS_PATTERN
from copymd.tree.nodes import DocumentNode, NodeCategory
from copymd.utils.text import quote_text

if TYPE_CHECKING:
    from copymd.options.markdown import MarkdownOptions
    from copymd.renderers._lists import ListContext

_LANGUAGE_RE = re.compile(LANGUAGE_CLASS_PATTERN, re.IGNORECASE)


def detect_language(node: DocumentNode) -> str:
    """Return the ``language-<token>`` token from a node's class, or ``""``.

    Parameters
    ----------
    node : DocumentNode
        Element whose ``class`` attribute is inspected

    Returns
    -------
    str
        Language token as written in the class attribute

    Examples
    --------
        >>> from copymd.tree.builder import element
        >>> detect_language(element("code", class_="hljs language-python"))
        'python'

    """
    class_value = node.get_attribute("class")
    if not class_value:
        return ""
    match = _LANGUAGE_RE.search(str(class_value))
    return match.group(1) if match else ""


class BlockFormatterMixin:
    """Mixin rendering block elements.

    The implementing class must provide ``options`` and
    ``_render_children(node, context, depth)``.
    """

    options: MarkdownOptions
    _render_children: Callable[..., str]

    def _render_heading(self, node: DocumentNode, context: Optional[ListContext], depth: int) -> str:
        """Render ``h1``..``h6`` as an ATX heading."""
        level = int(node.tag_name[1]) if node.tag_name else 1
        return f"\n\n{'#' * level} {self._render_children(node, context, depth)}\n\n"

    def _render_paragraph(self, node: DocumentNode, context: Optional[ListContext], depth: int) -> str:
        return f"\n\n{self._render_children(node, context, depth)}\n\n"

    def _render_code_block(self, node: DocumentNode, context: Optional[ListContext], depth: int) -> str:
        """Render ``pre`` as a fenced code block.

        The raw text of the first nested ``code`` element is used, or of the
        ``pre`` itself when there is none. The language comes from the
        ``code`` element's class, then from the ``pre``'s.
        """
        code_node = node.find(NodeCategory.INLINE_CODE) or node
        language = detect_language(code_node) or detect_language(node)
        code = code_node.get_text().rstrip("\n")
        return f"\n\n```{language}\n{code}\n```\n\n"

    def _render_blockquote(self, node: DocumentNode, context: Optional[ListContext], depth: int) -> str:
        """Render a blockquote; a quote with no content renders as nothing."""
        quoted = quote_text(self._render_children(node, context, depth))
        if not quoted:
            return ""
        return f"\n\n{quoted}\n\n"
