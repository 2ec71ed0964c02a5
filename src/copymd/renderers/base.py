#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/copymd/renderers/base.py
"""Base classes for document tree renderers.

This module defines the abstract base class that tree renderers inherit
from. It fixes the public surface (``render_to_string`` and ``render``) and
provides the shared options-type check.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Union

from copymd.exceptions import InvalidOptionsError
from copymd.tree.nodes import DocumentNode


class BaseRenderer(ABC):
    """Abstract base class for document tree renderers.

    Parameters
    ----------
    options : Any or None, default = None
        Renderer-specific options

    Examples
    --------
    Creating a custom renderer:

        >>> from copymd.renderers.base import BaseRenderer
        >>>
        >>> class PlainTextRenderer(BaseRenderer):
        ...     def render_to_string(self, root):
        ...         return root.get_text()

    """

    def __init__(self, options: Any = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, root: DocumentNode) -> str:
        """Render the tree below ``root`` to a string.

        Parameters
        ----------
        root : DocumentNode
            Conversion anchor; only its children are rendered

        Returns
        -------
        str
            Rendered text

        """
        raise NotImplementedError

    def render(self, root: DocumentNode, output: Union[str, Path, IO[str]]) -> None:
        """Render the tree and write the text to ``output``.

        Parameters
        ----------
        root : DocumentNode
            Conversion anchor
        output : str, Path, or IO[str]
            File path or text stream

        """
        self.write_text_output(self.render_to_string(root), output)

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[str]]) -> None:
        """Write text to a file path or text stream, terminated by one newline.

        Parameters
        ----------
        text : str
            Rendered text
        output : str, Path, or IO[str]
            Output destination

        Raises
        ------
        TypeError
            If ``output`` is neither a path nor a writable stream

        """
        if text and not text.endswith("\n"):
            text += "\n"
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8")
        elif hasattr(output, "write"):
            output.write(text)
        else:
            raise TypeError(f"Unsupported output type: {type(output).__name__}")

    @staticmethod
    def _validate_options_type(options: Any, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : Any
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
