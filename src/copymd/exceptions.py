#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the copymd library.

This module defines specialized exception classes for the error conditions
that can occur while adapting a document tree and serializing it to Markdown.

Exception Hierarchy
-------------------
- CopyMdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidNodeError (input tree violates the DocumentNode contract)
    - InvalidOptionsError (wrong options class for a renderer or adapter)

  - ParsingError (HTML adaptation failures)

  - RenderingError (Markdown generation failures)

  - DependencyError (missing/incompatible packages)

Unrecognized element tags and empty tables are *not* errors: the converter
passes unknown tags through and renders empty tables as nothing.

"""

from __future__ import annotations

from typing import Any


class CopyMdError(Exception):
    """Base exception class for all copymd-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(CopyMdError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidNodeError(ValidationError):
    """Exception raised when a node violates the DocumentNode contract.

    Raised for an element without a tag name, a non-text node whose
    ``children`` are absent, a text node without ``text_content``, or an
    unknown node kind. Conversion of the whole tree aborts.

    Parameters
    ----------
    message : str
        Description of the contract violation
    node : any, optional
        The offending node

    """

    def __init__(self, message: str, node: Any = None, original_error: Exception | None = None):
        """Initialize the invalid node error."""
        super().__init__(message, parameter_name="node", parameter_value=node, original_error=original_error)
        self.node = node


class InvalidOptionsError(ValidationError):
    """Exception raised when an options object of the wrong class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the component that received invalid options
    expected_type : type
        The expected options class
    received_type : type
        The options class actually received
    message : str, optional
        Custom error message. If not provided, generates one

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(CopyMdError):
    """Exception raised when an HTML document cannot be adapted into a tree.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(CopyMdError):
    """Exception raised when Markdown generation fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class DependencyError(CopyMdError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the component requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The import error that revealed the missing package

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        self.original_import_error = original_import_error
        if message is None:
            pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
            packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in missing_packages)
            message = (
                f"{converter_name.upper()} requires the following packages: {pkg_list}"
                f"\nInstall with: pip install --upgrade {packages_str}"
            )

        super().__init__(message, original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages


__all__ = [
    "CopyMdError",
    "ValidationError",
    "InvalidNodeError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "DependencyError",
]
