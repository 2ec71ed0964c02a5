#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/copymd/cli/builder.py
"""Argument parser construction and exit codes for the copymd CLI.

Option flags take their help text and choices from the ``metadata`` of the
corresponding options dataclass field, so the CLI and the options stay in
step. Every option flag defaults to None: only flags given on the command
line override values coming from a configuration file.

"""

import argparse
import dataclasses
from typing import Any, Dict, get_args

from copymd.constants import DEFAULT_PLAIN_TEXT_LANGUAGE, CopyMode
from copymd.exceptions import (
    DependencyError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from copymd.options.html import HtmlOptions
from copymd.options.markdown import MarkdownOptions

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

# CLI destination -> (options class, field name)
OPTION_FLAGS: Dict[str, tuple[type, str]] = {
    "html_parser": (HtmlOptions, "html_parser"),
    "selector": (HtmlOptions, "root_selector"),
    "strip_selector": (HtmlOptions, "strip_selectors"),
    "escape_special": (MarkdownOptions, "escape_special"),
    "table_overflow": (MarkdownOptions, "table_overflow"),
    "max_depth": (MarkdownOptions, "max_depth"),
}


def _field_metadata(options_class: type, field_name: str) -> Dict[str, Any]:
    """Return the metadata mapping of one options field."""
    for field in dataclasses.fields(options_class):
        if field.name == field_name:
            return dict(field.metadata)
    raise KeyError(f"{options_class.__name__} has no field {field_name!r}")


def _option_kwargs(dest: str, **extra: Any) -> Dict[str, Any]:
    """Build ``add_argument`` keyword arguments for an options-backed flag."""
    options_class, field_name = OPTION_FLAGS[dest]
    metadata = _field_metadata(options_class, field_name)
    kwargs: Dict[str, Any] = {"dest": dest, "default": None, "help": metadata.get("help")}
    if "choices" in metadata:
        kwargs["choices"] = metadata["choices"]
    if "type" in metadata:
        kwargs["type"] = metadata["type"]
    kwargs.update(extra)
    return kwargs


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the copymd CLI.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="copymd",
        description="Convert rendered HTML (such as a chat message) to clean Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert an HTML file
  copymd message.html

  # Convert only the assistant message of a saved chat page
  copymd page.html --selector '[data-message-author-role="assistant"]' -o reply.md

  # Read from stdin
  xclip -o -selection clipboard -t text/html | copymd -

  # Plain-text copy modes
  copymd --mode quote selection.txt
  copymd --mode code --language python script.txt
""",
    )

    parser.add_argument("input", nargs="?", default="-", help="Input file; '-' or omitted reads stdin")
    parser.add_argument("-o", "--output", metavar="PATH", help="Write output to PATH instead of stdout")
    parser.add_argument(
        "--mode",
        choices=list(get_args(CopyMode)),
        default="markdown",
        help="markdown: convert HTML; quote: blockquote plain text; code: fence plain text (default: markdown)",
    )
    parser.add_argument(
        "--language",
        default=DEFAULT_PLAIN_TEXT_LANGUAGE,
        help=f"Info string for --mode code (default: {DEFAULT_PLAIN_TEXT_LANGUAGE})",
    )

    html_group = parser.add_argument_group("HTML options")
    html_group.add_argument("--html-parser", **_option_kwargs("html_parser"))
    html_group.add_argument("--selector", **_option_kwargs("selector", metavar="CSS"))
    html_group.add_argument(
        "--strip-selector",
        **_option_kwargs("strip_selector", action="append", metavar="CSS"),
    )

    markdown_group = parser.add_argument_group("Markdown options")
    markdown_group.add_argument(
        "--no-escape",
        **_option_kwargs("escape_special", action="store_const", const=False, help="Do not escape *, _ and ` in text"),
    )
    markdown_group.add_argument("--table-overflow", **_option_kwargs("table_overflow"))
    markdown_group.add_argument("--max-depth", **_option_kwargs("max_depth", metavar="N"))

    rich_group = parser.add_argument_group(
        "Rich output",
        "Preview the Markdown in the terminal with formatting. Requires: `pip install copymd[rich]`",
    )
    rich_group.add_argument(
        "--rich",
        action="store_true",
        help="Enable rich terminal output (automatically disabled when output is piped or written to a file)",
    )
    rich_group.add_argument(
        "--force-rich",
        action="store_true",
        help="Use rich output even when stdout is not a terminal",
    )
    rich_group.add_argument(
        "--rich-code-theme",
        metavar="THEME",
        default="monokai",
        help="Pygments theme for code blocks in rich output (default: monokai)",
    )

    config_group = parser.add_argument_group("Configuration")
    config_source = config_group.add_mutually_exclusive_group()
    config_source.add_argument(
        "--config",
        metavar="PATH",
        help="Path to configuration file (TOML, YAML or JSON). If not specified, searches for .copymd.* "
        "or pyproject.toml [tool.copymd] from the current directory upwards, then in the home directory.",
    )
    config_source.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help="Disable loading of configuration files, including COPYMD_CONFIG",
    )

    logging_group = parser.add_argument_group("Logging")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    logging_group.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    logging_group.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with verbose logging and timing information",
    )

    parser.add_argument("--version", "-V", action="version", version=f"copymd {_get_version()}")

    return parser


def _get_version() -> str:
    """Get the version of the copymd package."""
    from copymd import __version__

    return __version__


def apply_cli_overrides(options: HtmlOptions, parsed_args: argparse.Namespace) -> HtmlOptions:
    """Apply option flags given on the command line on top of ``options``.

    Parameters
    ----------
    options : HtmlOptions
        Options loaded from configuration (or defaults)
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    Returns
    -------
    HtmlOptions
        Updated options

    """
    html_updates: Dict[str, Any] = {}
    markdown_updates: Dict[str, Any] = {}

    for dest, (options_class, field_name) in OPTION_FLAGS.items():
        value = getattr(parsed_args, dest, None)
        if value is None:
            continue
        if options_class is MarkdownOptions:
            markdown_updates[field_name] = value
        else:
            html_updates[field_name] = tuple(value) if isinstance(value, list) else value

    if markdown_updates:
        html_updates["markdown_options"] = options.markdown_options.create_updated(**markdown_updates)
    if html_updates:
        options = options.create_updated(**html_updates)
    return options


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    # Includes invalid nodes, bad options and bad configuration values
    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError, ValueError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, OSError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
