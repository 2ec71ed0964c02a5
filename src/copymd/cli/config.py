#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the copymd CLI.

This module finds configuration files, loads them from TOML, YAML or JSON,
merges them, and turns the result into option objects.

A configuration holds up to two tables whose keys are option field names::

    [markdown]
    escape_special = true
    table_overflow = "truncate"

    [html]
    root_selector = '[data-message-author-role="assistant"]'
    strip_selectors = ["button", "nav"]

"""

import argparse
import json
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from copymd.constants import CONFIG_FILENAMES
from copymd.exceptions import ValidationError
from copymd.options.html import HtmlOptions
from copymd.options.markdown import MarkdownOptions

PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_SECTIONS = ("markdown", "html")


def _load_pyproject_copymd_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.copymd] section from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration from [tool.copymd], or empty dict if the section is absent

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get("copymd")
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.copymd] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Each directory from ``start_dir`` up to the filesystem root is checked
    for ``.copymd.toml``, ``.copymd.yaml``, ``.copymd.yml``, ``.copymd.json``
    and finally ``pyproject.toml`` with a ``[tool.copymd]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / PYPROJECT_FILENAME
        if pyproject_path.is_file():
            try:
                if _load_pyproject_copymd_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # Broken pyproject.toml files belong to someone else; keep searching
                pass

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    Parent directories of ``start_dir`` are searched first, then the user's
    home directory.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has an unsupported format

    Examples
    --------
    >>> config = load_config_file(".copymd.toml")
    >>> print(config["markdown"]["table_overflow"])
    truncate

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == PYPROJECT_FILENAME:
        return _load_pyproject_copymd_section(config_path)
    if ext == ".toml":
        return _load_toml_config(config_path)
    if ext in (".yaml", ".yml"):
        return _load_yaml_config(config_path)
    if ext == ".json":
        return _load_json_config(config_path)
    raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    """Load configuration from a TOML file."""
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading TOML config {config_path}: {e}") from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    """Load configuration from a JSON file."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading JSON config {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"JSON config file must contain an object, got {type(config).__name__}")
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """Load configuration from a YAML file.

    An empty YAML document is treated as an empty configuration.
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading YAML config {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    The override dictionary takes precedence over base for conflicting keys.
    Nested dictionaries are merged recursively, not replaced entirely.

    Parameters
    ----------
    base : dict
        Base configuration dictionary
    override : dict
        Override configuration dictionary (higher priority)

    Returns
    -------
    dict
        Merged configuration dictionary

    Examples
    --------
    >>> base = {"markdown": {"escape_special": False}, "html": {"root_selector": "main"}}
    >>> override = {"markdown": {"table_overflow": "truncate"}}
    >>> merge_configs(base, override)["markdown"]
    {'escape_special': False, 'table_overflow': 'truncate'}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (COPYMD_CONFIG)
    3. Auto-discovered config file

    Parameters
    ----------
    explicit_path : str, optional
        Explicit config file path from --config flag
    env_var_path : str, optional
        Config file path from the COPYMD_CONFIG environment variable

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}


def _section(config: Dict[str, Any], name: str, options_class: type) -> Dict[str, Any]:
    """Return one config table after checking its keys against the options fields."""
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise ValidationError(
            f"Config section '{name}' must be a table, got {type(section).__name__}",
            parameter_name=name,
            parameter_value=section,
        )
    unknown = sorted(set(section) - options_class.field_names())
    if unknown:
        raise ValidationError(
            f"Unknown option(s) in config section '{name}': {', '.join(unknown)}",
            parameter_name=name,
            parameter_value=unknown,
        )
    return section


def options_from_config(config: Dict[str, Any]) -> HtmlOptions:
    """Build options from a loaded configuration.

    Parameters
    ----------
    config : dict
        Configuration with optional ``markdown`` and ``html`` tables

    Returns
    -------
    HtmlOptions
        HTML options whose ``markdown_options`` carry the ``markdown`` table

    Raises
    ------
    ValidationError
        If a section is malformed, names unknown options, or holds invalid values

    """
    unknown_sections = sorted(set(config) - set(CONFIG_SECTIONS))
    if unknown_sections:
        raise ValidationError(
            f"Unknown config section(s): {', '.join(unknown_sections)}",
            parameter_name="config",
            parameter_value=unknown_sections,
        )

    markdown_section = _section(config, "markdown", MarkdownOptions)
    html_section = dict(_section(config, "html", HtmlOptions))
    html_section.pop("markdown_options", None)

    try:
        markdown_options = MarkdownOptions(**markdown_section)
        return HtmlOptions(markdown_options=markdown_options, **html_section)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid configuration value: {e}", parameter_name="config", original_error=e) from e
