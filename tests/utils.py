"""Test utilities for the copymd test suite.

This module provides helpers for building document trees, converting them,
and managing temporary directories.
"""

import tempfile
from pathlib import Path

from copymd.api import convert
from copymd.options.markdown import MarkdownOptions
from copymd.tree.builder import element, text
from copymd.tree.nodes import DocumentNode


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    import shutil

    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def render(*children: DocumentNode | str, options: MarkdownOptions | None = None) -> str:
    """Convert ``children`` wrapped in an anchor ``div``."""
    return convert(element("div", *children), options)


def nested_spans(depth: int, content: str = "x") -> DocumentNode:
    """Build a chain of ``depth`` nested ``span`` elements around a text node."""
    node = text(content)
    for _ in range(depth):
        node = element("span", node)
    return node
