#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the tinymark CLI.

Configuration files hold option values in two tables::

    [parser]
    strict_mode = false

    [html]
    escape_quotes = true
    code_class_prefix = "lang-"

They are looked up in the current directory and its parents, then in the
user's home directory. ``.tinymark.toml``, ``.tinymark.yaml``/``.yml``,
``.tinymark.json`` and a ``[tool.tinymark]`` table in ``pyproject.toml`` are
recognised.
"""

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from tinymark.constants import CONFIG_FILENAMES, PYPROJECT_SECTION
from tinymark.exceptions import ConfigError

logger = logging.getLogger(__name__)

PARSER_SECTION = "parser"
RENDERER_SECTION = "html"
KNOWN_SECTIONS = (PARSER_SECTION, RENDERER_SECTION)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.tinymark]`` table from a pyproject.toml file.

    Returns
    -------
    dict
        The table, or an empty dict when the file has none

    Raises
    ------
    ConfigError
        If the file is not valid TOML or the table is not a table

    """
    data = _load_toml_config(pyproject_path)
    config = data.get("tool", {}).get(PYPROJECT_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file in ``start_dir`` or any of its parents.

    Dedicated config files take priority over ``pyproject.toml`` within each
    directory; a pyproject.toml only counts when it has a tinymark table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        First config file found walking towards the filesystem root

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                logger.debug(f"Skipping unreadable {pyproject_path}: {e}")

        parent = current.parent
        if parent == current:
            return None
        current = parent


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    The directory tree from ``start_dir`` (or the working directory) up to the
    root is searched first, then the user's home directory.
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
        Configuration mapping

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, malformed or of unknown type

    Examples
    --------
    >>> config = load_config_file(".tinymark.toml")
    >>> config["parser"]["strict_mode"]
    False

    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))

    ext = config_path.suffix.lower()
    if config_path.name.lower() == "pyproject.toml":
        config = _load_pyproject_section(config_path)
    elif ext == ".toml":
        config = _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        config = _load_yaml_config(config_path)
    elif ext == ".json":
        config = _load_json_config(config_path)
    else:
        raise ConfigError(
            f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", config_path=str(config_path)
        )

    _validate_sections(config, config_path)
    logger.debug(f"Loaded configuration from {config_path}")
    return config


def _validate_sections(config: Dict[str, Any], config_path: Path) -> None:
    for section in KNOWN_SECTIONS:
        value = config.get(section, {})
        if not isinstance(value, dict):
            raise ConfigError(
                f"'{section}' in {config_path} must be a table, got {type(value).__name__}",
                config_path=str(config_path),
            )
    unknown = sorted(set(config) - set(KNOWN_SECTIONS))
    if unknown:
        logger.warning(f"Ignoring unknown sections in {config_path}: {', '.join(unknown)}")


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading TOML config {config_path}: {e}", str(config_path), e) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading JSON config {config_path}: {e}", str(config_path), e) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"JSON config file must contain an object, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading YAML config {config_path}: {e}", str(config_path), e) from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"YAML config file must contain a mapping, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, start_dir: Optional[Path] = None
) -> Dict[str, Any]:
    """Load the effective configuration mapping.

    An explicit path (``--config`` or ``TINYMARK_CONFIG``) replaces discovery;
    otherwise the discovered file, if any, is loaded.

    Raises
    ------
    ConfigError
        If the chosen file cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    discovered = discover_config_file(start_dir)
    if discovered is None:
        return {}
    return load_config_file(discovered)
