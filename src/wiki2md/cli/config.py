#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration files for the wiki2md command line.

A configuration file sets defaults for the conversion options. It has up to
two tables, ``parser`` and ``renderer``, keyed by the field names of
:class:`WikitextParserOptions` and :class:`MarkdownRendererOptions`::

    [parser]
    max_input_size = 1000000
    strip_comments = false

    [renderer]
    internal_link_suffix = ".html"

The same layout is accepted as TOML, YAML or JSON, or as a
``[tool.wiki2md]`` table inside ``pyproject.toml``. Every loading problem
is reported as :class:`argparse.ArgumentTypeError` so the command line can
treat it like a bad flag.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from wiki2md.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from wiki2md.options.markdown import MarkdownRendererOptions
from wiki2md.options.wikitext import WikitextParserOptions

CONFIG_SECTIONS = ("parser", "renderer")


def _read_toml(path: Path) -> Any:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _read_yaml(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        # An empty document loads as None
        return yaml.safe_load(f) or {}


def _read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _read_pyproject(path: Path) -> Any:
    tool = _read_toml(path).get("tool", {})
    return tool.get(PYPROJECT_TOOL_SECTION, {}) if isinstance(tool, dict) else {}


_READERS: Dict[str, tuple[str, Callable[[Path], Any]]] = {
    ".toml": ("TOML", _read_toml),
    ".yaml": ("YAML", _read_yaml),
    ".yml": ("YAML", _read_yaml),
    ".json": ("JSON", _read_json),
}

_DECODE_ERRORS = (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError)


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Read one configuration file.

    The format follows the file suffix; a file named ``pyproject.toml``
    contributes only its ``[tool.wiki2md]`` table (empty when absent).

    Parameters
    ----------
    config_path : Path or str
        File to read

    Returns
    -------
    dict
        The configuration mapping

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is missing, unreadable, malformed, of an unknown format,
        or does not hold a mapping

    """
    path = Path(config_path)
    if not path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {path}")

    if path.name.lower() == "pyproject.toml":
        format_name, reader = "TOML", _read_pyproject
    else:
        suffix = path.suffix.lower()
        if suffix not in _READERS:
            raise argparse.ArgumentTypeError(
                f"Unsupported config file format: {suffix or path.name} (expected .toml, .yaml, .yml or .json)"
            )
        format_name, reader = _READERS[suffix]

    try:
        config = reader(path)
    except _DECODE_ERRORS as e:
        raise argparse.ArgumentTypeError(f"Invalid {format_name} in {path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Cannot read {path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"{path} must contain a mapping at the top level, not {type(config).__name__}")
    return config


def _has_tool_section(pyproject_path: Path) -> bool:
    try:
        return bool(load_config_file(pyproject_path))
    except argparse.ArgumentTypeError:
        # Malformed pyproject.toml files are skipped
        return False


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Locate the nearest configuration file.

    Starting at ``start_dir`` (the working directory by default) and moving
    up to the filesystem root, each directory is checked for the names in
    :data:`~wiki2md.constants.CONFIG_FILENAMES`, in order, and then for a
    ``pyproject.toml`` with a non-empty ``[tool.wiki2md]`` table.

    Returns
    -------
    Path or None
        The first match, or None

    """
    directory = (start_dir or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        for filename in CONFIG_FILENAMES:
            candidate = candidate_dir / filename
            if candidate.is_file():
                return candidate

        pyproject = candidate_dir / "pyproject.toml"
        if pyproject.is_file() and _has_tool_section(pyproject):
            return pyproject
    return None


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load the configuration that applies to this run.

    ``explicit_path`` (from ``--config``) wins over ``env_var_path`` (from
    ``WIKI2MD_CONFIG``), which wins over a discovered file. No file at all
    gives an empty configuration.

    Raises
    ------
    argparse.ArgumentTypeError
        If the selected file cannot be loaded

    """
    selected = explicit_path or env_var_path or find_config_in_parents()
    if not selected:
        return {}
    return load_config_file(selected)


def options_from_config(
    config: Dict[str, Any],
) -> tuple[WikitextParserOptions, MarkdownRendererOptions]:
    """Build parser and renderer options from a loaded configuration.

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration has an unknown section or option, or an option
        value is invalid

    """
    unknown_sections = sorted(set(config) - set(CONFIG_SECTIONS))
    if unknown_sections:
        raise argparse.ArgumentTypeError(
            f"Unknown config section(s): {', '.join(unknown_sections)}. Expected: {', '.join(CONFIG_SECTIONS)}"
        )

    sections: Dict[str, Dict[str, Any]] = {}
    for name in CONFIG_SECTIONS:
        section = config.get(name) or {}
        if not isinstance(section, dict):
            raise argparse.ArgumentTypeError(f"Config section '{name}' must be a table, got {type(section).__name__}")
        sections[name] = section

    try:
        parser_options = WikitextParserOptions.from_mapping(sections["parser"])
        renderer_options = MarkdownRendererOptions.from_mapping(sections["renderer"])
    except (TypeError, ValueError) as e:
        raise argparse.ArgumentTypeError(f"Invalid configuration: {e}") from e
    return parser_options, renderer_options
