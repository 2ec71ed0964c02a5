"""Command-line interface for the copymd library.

This module provides the ``copymd`` command, which converts saved or piped
HTML (typically one message of a chat interface) to Markdown, and offers the
two plain-text copy modes: quoting a selection and fencing a whole response.

Configuration Files
-------------------
Options can be stored in ``.copymd.toml``, ``.copymd.yaml``,
``.copymd.yml``, ``.copymd.json`` or the ``[tool.copymd]`` table of
``pyproject.toml``. The ``COPYMD_CONFIG`` environment variable names a file
explicitly. Command-line flags always override configuration values.

Examples
--------
Convert a file::

    $ copymd message.html

Convert the assistant message of a saved page into a file::

    $ copymd page.html --selector '[data-message-author-role="assistant"]' -o reply.md

Quote a plain-text selection from stdin::

    $ pbpaste | copymd --mode quote

Preview the result in the terminal (requires the ``rich`` extra)::

    $ copymd message.html --rich

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys
from pathlib import Path

from copymd.api import convert, text_to_blockquote, text_to_code_block
from copymd.cli.builder import (
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    apply_cli_overrides,
    create_parser,
    get_exit_code_for_exception,
)
from copymd.cli.config import load_config_with_priority, options_from_config
from copymd.cli.output import render_rich_markdown, should_use_rich_output
from copymd.constants import CONFIG_ENV_VAR
from copymd.exceptions import CopyMdError, DependencyError
from copymd.logging_utils import configure_logging
from copymd.options.html import HtmlOptions
from copymd.tree.html import HtmlTreeAdapter
from copymd.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

__all__ = [
    "main",
    "create_parser",
]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes precedence over --log-level
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _read_input(input_arg: str) -> str:
    """Read UTF-8 text from a file path, or from stdin for ``-``."""
    if input_arg == "-":
        logger.debug("Reading input from stdin")
        return sys.stdin.read()
    return Path(input_arg).read_text(encoding="utf-8")


def _write_output(text: str, output: str | None) -> None:
    """Write text, terminated by a single newline, to a file or stdout."""
    text = text.rstrip("\n") + "\n"
    if output:
        Path(output).write_text(text, encoding="utf-8")
        logger.info("Wrote %d characters to %s", len(text), output)
    else:
        sys.stdout.write(text)


def _load_options(parsed_args: argparse.Namespace) -> HtmlOptions:
    """Resolve options from configuration files and command-line flags.

    Raises
    ------
    argparse.ArgumentTypeError
        If a configuration file cannot be loaded
    ValidationError
        If the configuration holds unknown or invalid options

    """
    options = HtmlOptions()
    if not parsed_args.no_config:
        config = load_config_with_priority(
            explicit_path=parsed_args.config,
            env_var_path=os.environ.get(CONFIG_ENV_VAR),
        )
        if config:
            logger.debug("Loaded configuration sections: %s", sorted(config))
            options = options_from_config(config)
    return apply_cli_overrides(options, parsed_args)


def _convert(content: str, parsed_args: argparse.Namespace, options: HtmlOptions) -> str:
    """Produce the output text for the selected mode."""
    if parsed_args.mode == "quote":
        return text_to_blockquote(content)
    if parsed_args.mode == "code":
        return text_to_code_block(content, language=parsed_args.language)

    root = HtmlTreeAdapter(options).parse(content)
    return convert(root, options.markdown_options)


def main(args: list[str] | None = None) -> int:
    """Execute the copymd command.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        options = _load_options(parsed_args)
    except (argparse.ArgumentTypeError, CopyMdError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    try:
        content = _read_input(parsed_args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read input {parsed_args.input!r}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        with debug_timer(logger, f"Conversion in {parsed_args.mode} mode"):
            result = _convert(content, parsed_args, options)
    except CopyMdError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    try:
        use_rich = should_use_rich_output(parsed_args, raise_on_missing=True)
    except DependencyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    if use_rich:
        sys.stdout.write(render_rich_markdown(result, parsed_args))
        return EXIT_SUCCESS

    try:
        _write_output(result, parsed_args.output)
    except OSError as e:
        print(f"Error: Could not write output {parsed_args.output!r}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
