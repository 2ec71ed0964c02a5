#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/copymd/tree/builder.py
"""Helpers for constructing document trees by hand.

These helpers keep tree literals short in callers and tests:

    >>> from copymd.tree.builder import element, text
    >>> root = element("div", element("p", text("Hello "), element("b", text("world"))))

"""

from __future__ import annotations

from typing import Any

from copymd.tree.nodes import DocumentNode, NodeKind


def text(content: str) -> DocumentNode:
    """Build a text node."""
    return DocumentNode(kind=NodeKind.TEXT, text_content=content, children=None)


def element(tag_name: str, *children: DocumentNode | str, **attributes: Any) -> DocumentNode:
    """Build an element node.

    Plain strings among ``children`` become text nodes. Keyword attributes
    with a trailing underscore lose it, so ``class_="x"`` sets ``class``.

    Parameters
    ----------
    tag_name : str
        Element tag name
    *children : DocumentNode or str
        Ordered children
    **attributes : Any
        Element attributes

    Returns
    -------
    DocumentNode
        The element node

    """
    nodes = tuple(text(child) if isinstance(child, str) else child for child in children)
    attrs = {name.rstrip("_"): value for name, value in attributes.items()}
    return DocumentNode(kind=NodeKind.ELEMENT, tag_name=tag_name, children=nodes, attributes=attrs)
