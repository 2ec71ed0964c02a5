#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/copymd/renderers/_lists.py
"""List formatting for the Markdown renderer.

List nesting state lives in a ``ListContext`` that is created when a list
is entered and handed down the recursion as an argument. Leaving the list
simply drops the context, so the caller's own context is never touched and
one renderer can serve any number of concurrent conversions.

Indentation is absolute: a list nested at depth ``n`` indents its items by
``2 * n`` spaces. Lines produced by a directly nested list therefore keep
their own indentation and are not re-prefixed by the enclosing item.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator, Optional

from copymd.constants import LIST_INDENT_STEP, ORDERED_LIST_START, UNORDERED_BULLET
from copymd.tree.nodes import DocumentNode, NodeCategory
from copymd.utils.text import collapse_blank_lines, normalize_markdown

if TYPE_CHECKING:
    from copymd.options.markdown import MarkdownOptions


@dataclass
class ListContext:
    """Nesting state of the list currently being rendered.

    Parameters
    ----------
    ordered : bool
        Whether items get ``N. `` bullets instead of ``- ``
    indent_level : int, default 2
        Indent of this list's nesting level; items are indented by
        ``indent_level - 2`` spaces
    next_index : int, default 1
        Ordinal of the next ordered item

    """

    ordered: bool
    indent_level: int = LIST_INDENT_STEP
    next_index: int = ORDERED_LIST_START

    @property
    def indent(self) -> str:
        """Leading whitespace for item lines of this list."""
        return " " * max(self.indent_level - LIST_INDENT_STEP, 0)

    def take_bullet(self) -> str:
        """Return the bullet for the next item, advancing the ordinal."""
        if not self.ordered:
            return UNORDERED_BULLET
        bullet = f"{self.next_index}. "
        self.next_index += 1
        return bullet

    def nested(self, ordered: bool) -> ListContext:
        """Create the context for a list nested inside this one."""
        return ListContext(ordered=ordered, indent_level=self.indent_level + LIST_INDENT_STEP)


class ListFormatterMixin:
    """Mixin rendering ``ul``/``ol`` containers and their ``li`` items.

    The implementing class must provide ``options``,
    ``_render_node(node, context, depth)`` and
    ``_validate_node(node, depth)``.
    """

    options: MarkdownOptions
    _render_node: Callable[..., str]
    _validate_node: Callable[..., None]

    def _render_list(self, node: DocumentNode, context: Optional[ListContext], depth: int) -> str:
        """Render a list container.

        Only direct ``li`` children are rendered. Anything else placed
        directly inside the list is validated, then skipped.
        """
        ordered = node.tag_name == "ol"
        if context is None:
            list_context = ListContext(ordered=ordered)
        else:
            list_context = context.nested(ordered)

        items: list[str] = []
        for child in node.iter_children():
            self._validate_node(child, depth + 1)
            if child.category is NodeCategory.LIST_ITEM:
                items.append(self._render_node(child, list_context, depth + 1))
        return "\n" + "".join(items) + "\n"

    def _render_list_item(self, node: DocumentNode, context: Optional[ListContext], depth: int) -> str:
        """Render one list item.

        The first content line follows the bullet; later lines are indented
        two spaces past the item's indent. An item that opens with a nested
        list puts its bullet on a line of its own.
        """
        if context is None:
            context = ListContext(ordered=False)

        indent = context.indent
        bullet = context.take_bullet()
        continuation = indent + " " * LIST_INDENT_STEP

        lines: list[str] = []
        for is_nested_list, fragment in self._iter_item_parts(node, context, depth):
            if is_nested_list:
                nested = collapse_blank_lines(fragment)
                if not nested:
                    continue
                if not lines:
                    lines.append((indent + bullet).rstrip())
                lines.extend(nested.split("\n"))
                continue

            body = normalize_markdown(fragment)
            if not body:
                continue
            for line in body.split("\n"):
                if not lines:
                    lines.append(f"{indent}{bullet}{line}")
                elif line:
                    lines.append(f"{continuation}{line}")
                else:
                    lines.append("")

        if not lines:
            lines.append((indent + bullet).rstrip())
        return "\n".join(lines) + "\n"

    def _iter_item_parts(
        self, node: DocumentNode, context: ListContext, depth: int
    ) -> Iterator[tuple[bool, str]]:
        """Yield ``(is_nested_list, fragment)`` pairs for an item's children.

        Consecutive children that are not lists are joined into one
        fragment; each nested list is its own fragment.
        """
        run: list[str] = []
        for is_nested_list, fragment in self._iter_item_flow(node, context, depth):
            if is_nested_list:
                if run:
                    yield False, "".join(run)
                    run = []
                yield True, fragment
            else:
                run.append(fragment)
        if run:
            yield False, "".join(run)

    def _iter_item_flow(
        self, node: DocumentNode, context: ListContext, depth: int
    ) -> Iterator[tuple[bool, str]]:
        """Render the children of ``node``, flagging nested lists.

        Pass-through wrappers that hold a list (``li > div > ul``) are opened
        up so the list keeps its absolute indentation instead of being
        re-prefixed as continuation text.
        """
        for child in node.iter_children():
            if child.category is NodeCategory.LIST:
                yield True, self._render_node(child, context, depth + 1)
                continue
            if child.category is NodeCategory.PASS_THROUGH:
                self._validate_node(child, depth + 1)
                if child.find(NodeCategory.LIST) is not None:
                    yield from self._iter_item_flow(child, context, depth + 1)
                    continue
            yield False, self._render_node(child, context, depth + 1)
