"""Pytest configuration and shared fixtures for the copymd test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
from pathlib import Path
from typing import Generator

import pytest
from utils import cleanup_test_dir, create_test_temp_dir

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Restore root logger handlers and level after CLI runs reconfigure them."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    try:
        yield
    finally:
        for handler in root_logger.handlers:
            if handler not in handlers:
                handler.close()
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)


@pytest.fixture
def chat_message_html() -> str:
    """Provide an assistant message as rendered by a chat interface.

    Returns
    -------
    str
        HTML of one message, including copy/share chrome.

    """
    return """<div data-message-author-role="assistant">
  <h2>Setup</h2>
  <p>Install the <code>copymd</code> package:</p>
  <pre><code class="language-bash">pip install copymd</code></pre>
  <ul>
    <li>Fast</li>
    <li>Small <em>and</em> simple</li>
  </ul>
  <blockquote><p>Note this.</p></blockquote>
  <table>
    <thead><tr><th>Name</th><th>Value</th></tr></thead>
    <tbody><tr><td>a</td><td>1</td></tr></tbody>
  </table>
  <div class="copy-toolbar"><button>Copy</button></div>
</div>
"""


@pytest.fixture
def chat_message_markdown() -> str:
    """Provide the Markdown expected for ``chat_message_html``."""
    return (
        "## Setup\n\n"
        "Install the `copymd` package:\n\n"
        "```bash\npip install copymd\n```\n\n"
        "- Fast\n- Small *and* simple\n\n"
        "> Note this.\n\n"
        "| Name | Value |\n| --- | --- |\n| a | 1 |"
    )
