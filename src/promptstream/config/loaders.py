# topmark:header:start
#
#   project      : PromptStream
#   file         : loaders.py
#   file_relpath : src/promptstream/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading PromptStream configuration from:
- the packaged default TOML resource, and
- on-disk TOML files (`promptstream.toml` / `pyproject.toml`).

Parsing is done with `tomlkit` and returned as plain `dict` structures.

Precedence (lowest to highest):
    1. bundled defaults
    2. ``pyproject.toml`` ``[tool.promptstream]`` in the working directory
    3. ``promptstream.toml`` ``[promptstream]`` in the working directory
    4. an explicit ``--config`` file
"""

from __future__ import annotations

from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from promptstream.config.logging import get_logger
from promptstream.config.model import Config, MutableConfig
from promptstream.constants import (
    CONFIG_TABLE,
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    LOCAL_CONFIG_NAME,
    PYPROJECT_CONFIG_NAME,
)
from promptstream.errors import ConfigError

if TYPE_CHECKING:
    from promptstream.config.logging import PromptStreamLogger

logger: PromptStreamLogger = get_logger(__name__)

_HEADER_END: str = "# topmark:header:end"


def load_default_config_template_text() -> str:
    """Return the bundled default TOML template, comments included.

    The file header block is stripped so the output starts at the template content.

    Returns:
        str: The TOML document text.
    """
    text: str = (
        files(DEFAULT_TOML_CONFIG_PACKAGE)
        .joinpath(DEFAULT_TOML_CONFIG_NAME)
        .read_text(encoding="utf-8")
    )
    lines: list[str] = text.splitlines(keepends=True)
    for i, line in enumerate(lines):
        if line.strip() == _HEADER_END:
            return "".join(lines[i + 1 :]).lstrip("\n")
    return text


def parse_toml_text(text: str, *, source: Path | None = None) -> dict[str, Any]:
    """Parse TOML text into a plain dict.

    Args:
        text (str): The TOML document.
        source (Path | None): Where the text came from, for error messages.

    Returns:
        dict[str, Any]: The parsed document.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        return tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise ConfigError(f"invalid TOML: {exc}", source=source) from exc


def load_defaults_dict() -> dict[str, Any]:
    """Return the bundled defaults as a plain dict."""
    return parse_toml_text(load_default_config_template_text())


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Read and parse a TOML file.

    Args:
        path (Path): The file to read.

    Returns:
        dict[str, Any]: The parsed document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read configuration: {exc.strerror or exc}", source=path) from exc
    return parse_toml_text(text, source=path)


def extract_settings_table(document: dict[str, Any], path: Path) -> dict[str, Any] | None:
    """Return the PromptStream table of a parsed document, or None if absent.

    ``pyproject.toml`` files keep the settings under ``[tool.promptstream]``; every
    other file uses a top-level ``[promptstream]`` table.

    Args:
        document (dict[str, Any]): The parsed TOML document.
        path (Path): The file the document was read from.

    Returns:
        dict[str, Any] | None: The settings table, if present.

    Raises:
        ConfigError: If the table exists but is not a table.
    """
    if path.name == PYPROJECT_CONFIG_NAME:
        table: Any = document.get("tool", {}).get(CONFIG_TABLE)
    else:
        table = document.get(CONFIG_TABLE)
    if table is None:
        return None
    if not isinstance(table, dict):
        raise ConfigError(f"[{CONFIG_TABLE}] must be a table", source=path)
    return table


def discover_config_files(cwd: Path) -> list[Path]:
    """Return the config files present in ``cwd``, lowest precedence first.

    Args:
        cwd (Path): Directory to look in.

    Returns:
        list[Path]: Existing ``pyproject.toml`` and ``promptstream.toml`` files.
    """
    candidates: list[Path] = [cwd / PYPROJECT_CONFIG_NAME, cwd / LOCAL_CONFIG_NAME]
    return [p for p in candidates if p.is_file()]


def load_config(
    config_path: Path | None = None,
    *,
    cwd: Path | None = None,
    overrides: MutableConfig | None = None,
) -> Config:
    """Load, merge and freeze the effective configuration.

    Args:
        config_path (Path | None): Explicit configuration file (highest file precedence).
        cwd (Path | None): Directory searched for config files; defaults to the CWD.
        overrides (MutableConfig | None): Values applied last (e.g. from CLI options).

    Returns:
        Config: The effective configuration.

    Raises:
        ConfigError: If a source is unreadable or invalid.
    """
    draft: MutableConfig = MutableConfig.from_defaults()

    paths: list[Path] = discover_config_files(cwd or Path.cwd())
    if config_path is not None:
        paths.append(config_path)

    for path in paths:
        table: dict[str, Any] | None = extract_settings_table(load_toml_dict(path), path)
        if table is None:
            if path == config_path:
                raise ConfigError(f"no [{CONFIG_TABLE}] table found", source=path)
            logger.debug("No PromptStream settings in %s", path)
            continue
        logger.debug("Merging configuration from %s", path)
        draft = draft.merge_with(MutableConfig.from_toml_dict(table, config_file=path))

    if overrides is not None:
        draft = draft.merge_with(overrides)

    config: Config = draft.freeze()
    logger.trace("Effective configuration: %s", config)
    return config
