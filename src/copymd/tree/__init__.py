#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/copymd/tree/__init__.py
"""Document tree model for copymd.

The serializer consumes ``DocumentNode`` trees. Trees can be built by hand
with the helpers in :mod:`copymd.tree.builder` or adapted from HTML with
:class:`HtmlTreeAdapter`.
"""

from copymd.tree.builder import element, text
from copymd.tree.html import HtmlTreeAdapter
from copymd.tree.nodes import DocumentNode, NodeCategory, NodeKind, classify_tag

__all__ = [
    "DocumentNode",
    "NodeCategory",
    "NodeKind",
    "classify_tag",
    "element",
    "text",
    "HtmlTreeAdapter",
]
