"""Terminal output helpers for the copymd CLI."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/copymd/cli/output.py
import argparse
import sys
from typing import IO, Optional

from copymd.exceptions import DependencyError


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(
    args: argparse.Namespace, raise_on_missing: bool = False, stream: Optional[IO[str]] = None
) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    raise_on_missing : bool, default False
        Raise DependencyError if rich is not installed
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    Notes
    -----
    Rich output is used when:
    - The --rich flag is set and no output file is given
    - AND either --force-rich is set OR stdout is a TTY
    - AND Rich library is available

    """
    if not getattr(args, "rich", False) or getattr(args, "output", None):
        return False

    if not check_rich_available():
        if raise_on_missing:
            raise DependencyError(
                converter_name="rich-output",
                missing_packages=[("rich", "")],
                message="Rich output requires the optional 'rich' dependency. Install with: pip install copymd[rich]",
            )
        return False

    if getattr(args, "force_rich", False):
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def render_rich_markdown(markdown_content: str, args: argparse.Namespace) -> str:
    """Format Markdown for the terminal with Rich.

    Parameters
    ----------
    markdown_content : str
        Markdown produced by the converter
    args : argparse.Namespace
        Parsed command line arguments; ``rich_code_theme`` selects the
        Pygments theme for code blocks

    Returns
    -------
    str
        Text with terminal control sequences

    """
    from rich.console import Console
    from rich.markdown import Markdown

    console = Console(force_terminal=getattr(args, "force_rich", False) or None)
    code_theme = getattr(args, "rich_code_theme", None) or "monokai"
    with console.capture() as capture:
        console.print(Markdown(markdown_content, code_theme=code_theme))
    return capture.get()
