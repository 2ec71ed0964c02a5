#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/copymd/utils/decorators.py
"""Utility decorators for copymd adapters and renderers.

This module provides reusable decorators that centralize dependency checks
and debug timing.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from copymd.exceptions import DependencyError


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str]]) -> Callable:
    """Check required dependencies before method execution.

    Parameters
    ----------
    converter_name : str
        Name of the component (e.g., "html"). Appears in error messages.
    packages : list of tuple
        Required packages as (install_name, import_name) tuples.

    Returns
    -------
    Callable
        Decorated method that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package cannot be imported.

    Examples
    --------
        >>> @requires_dependencies("html", [("beautifulsoup4", "bs4")])
        ... def parse(self, html):
        ...     from bs4 import BeautifulSoup
        ...     # parsing logic here

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing = []
            original_error = None

            for install_name, import_name in packages:
                try:
                    importlib.import_module(import_name)
                except ImportError as e:
                    missing.append((install_name, ""))
                    if original_error is None:
                        original_error = e

            if missing:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    original_import_error=original_error,
                ) from original_error

            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time the enclosed block and log the result at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Converting tree")

    Notes
    -----
    Only measures time when the logger has DEBUG enabled.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.4f}s")
    else:
        yield
