#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/copymd/tree/nodes.py
"""Document tree node definitions.

This module defines ``DocumentNode``, the immutable view of one node of a
rendered document that the Markdown serializer walks. A node is either a
text leaf or a tagged element with ordered children and attributes.

Each node is classified once, when it is built, into a closed
``NodeCategory``. The serializer dispatches on that category and never
compares tag-name strings itself, which keeps it independent of whatever
host document API the tree was adapted from.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Mapping, Optional

from copymd.constants import (
    EMPHASIS_TAGS,
    HEADING_TAGS,
    IGNORED_TAGS,
    LIST_TAGS,
    STRONG_TAGS,
    TABLE_CELL_TAGS,
)
from copymd.exceptions import InvalidNodeError


class NodeKind(str, Enum):
    """Kind of a document node."""

    TEXT = "text"
    ELEMENT = "element"


class NodeCategory(Enum):
    """Closed classification of document nodes used for dispatch."""

    TEXT = "text"
    STRONG = "strong"
    EMPHASIS = "emphasis"
    INLINE_CODE = "inline_code"
    LINK = "link"
    LINE_BREAK = "line_break"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    CODE_BLOCK = "code_block"
    BLOCKQUOTE = "blockquote"
    LIST = "list"
    LIST_ITEM = "list_item"
    TABLE = "table"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    IGNORED = "ignored"
    PASS_THROUGH = "pass_through"


_SINGLE_TAG_CATEGORIES: dict[str, NodeCategory] = {
    "code": NodeCategory.INLINE_CODE,
    "a": NodeCategory.LINK,
    "br": NodeCategory.LINE_BREAK,
    "p": NodeCategory.PARAGRAPH,
    "pre": NodeCategory.CODE_BLOCK,
    "blockquote": NodeCategory.BLOCKQUOTE,
    "li": NodeCategory.LIST_ITEM,
    "table": NodeCategory.TABLE,
    "tr": NodeCategory.TABLE_ROW,
}

_TAG_GROUP_CATEGORIES: tuple[tuple[frozenset[str], NodeCategory], ...] = (
    (STRONG_TAGS, NodeCategory.STRONG),
    (EMPHASIS_TAGS, NodeCategory.EMPHASIS),
    (HEADING_TAGS, NodeCategory.HEADING),
    (LIST_TAGS, NodeCategory.LIST),
    (TABLE_CELL_TAGS, NodeCategory.TABLE_CELL),
    (IGNORED_TAGS, NodeCategory.IGNORED),
)


def classify_tag(tag_name: str) -> NodeCategory:
    """Map an element tag name to its category.

    Parameters
    ----------
    tag_name : str
        Element tag name (any case)

    Returns
    -------
    NodeCategory
        The category; ``PASS_THROUGH`` for tags without a rule

    """
    tag = tag_name.lower()
    category = _SINGLE_TAG_CATEGORIES.get(tag)
    if category is not None:
        return category
    for tags, group_category in _TAG_GROUP_CATEGORIES:
        if tag in tags:
            return group_category
    return NodeCategory.PASS_THROUGH


@dataclass(frozen=True)
class DocumentNode:
    """Immutable view of one document tree node.

    Parameters
    ----------
    kind : NodeKind or {"text", "element"}
        Node kind
    tag_name : str or None, default None
        Tag name, required for elements; stored lower-cased
    text_content : str or None, default None
        Text of a text node
    children : tuple of DocumentNode or None, default ()
        Ordered children. ``None`` means the field is absent, which is only
        valid for text nodes.
    attributes : mapping, default empty
        Element attributes, at least ``class`` and ``href`` when present

    Attributes
    ----------
    category : NodeCategory
        Classification derived from ``kind`` and ``tag_name`` at construction

    Notes
    -----
    The constructor accepts incomplete nodes (an element without a tag name,
    absent children) so that contract violations surface as
    ``InvalidNodeError`` from the converter, for the node that is actually
    visited. Only an unknown ``kind`` is rejected immediately.

    """

    kind: NodeKind
    tag_name: Optional[str] = None
    text_content: Optional[str] = None
    children: Optional[tuple[DocumentNode, ...]] = ()
    attributes: Mapping[str, Any] = field(default_factory=dict)
    category: NodeCategory = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Coerce field types and classify the node."""
        try:
            kind = NodeKind(self.kind)
        except ValueError as e:
            raise InvalidNodeError(f"Unknown node kind: {self.kind!r}", node=self) from e
        object.__setattr__(self, "kind", kind)

        if self.children is not None and not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

        if kind is NodeKind.TEXT:
            category = NodeCategory.TEXT
        elif self.tag_name:
            object.__setattr__(self, "tag_name", self.tag_name.lower())
            category = classify_tag(self.tag_name)
        else:
            category = NodeCategory.PASS_THROUGH
        object.__setattr__(self, "category", category)

    @property
    def is_text(self) -> bool:
        """Whether this node is a text leaf."""
        return self.kind is NodeKind.TEXT

    def get_attribute(self, name: str) -> Any:
        """Return an attribute value, or None when the attribute is absent."""
        if self.attributes is None:
            return None
        return self.attributes.get(name)

    def iter_children(self) -> Iterator[DocumentNode]:
        """Iterate over children; text nodes and absent children yield nothing."""
        if self.is_text or self.children is None:
            return iter(())
        return iter(self.children)

    def get_text(self) -> str:
        """Return the concatenated raw text of this node and its descendants.

        Mirrors the DOM ``textContent`` property: no escaping, no separators.
        """
        if self.is_text:
            return self.text_content or ""
        parts: list[str] = []
        stack = list(reversed(tuple(self.iter_children())))
        while stack:
            node = stack.pop()
            if node.is_text:
                parts.append(node.text_content or "")
            else:
                stack.extend(reversed(tuple(node.iter_children())))
        return "".join(parts)

    def find(self, category: NodeCategory) -> DocumentNode | None:
        """Return the first descendant with the given category, depth first.

        Parameters
        ----------
        category : NodeCategory
            Category to look for

        Returns
        -------
        DocumentNode or None
            The first match in document order, or None

        """
        stack = list(reversed(tuple(self.iter_children())))
        while stack:
            node = stack.pop()
            if node.category is category:
                return node
            stack.extend(reversed(tuple(node.iter_children())))
        return None
