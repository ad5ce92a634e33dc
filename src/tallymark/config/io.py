# tallymark:header:start
#
#   project      : TallyMark
#   file         : io.py
#   file_relpath : src/tallymark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading TallyMark configuration from
on-disk TOML files (``tallymark.toml`` / ``pyproject.toml``) and typed getters
over the parsed tables. Parsing is done with `tomlkit` and returned as plain
`dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tallymark.config.keys import Toml
from tallymark.config.logging import get_logger
from tallymark.constants import PYPROJECT_TOML_NAME, TALLYMARK_TOML_NAME

if TYPE_CHECKING:
    from pathlib import Path

    from tallymark.config.logging import TallymarkLogger

TomlTable = dict[str, Any]

logger: TallymarkLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``tallymark.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_tool_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the TallyMark table of a parsed config document.

    For ``pyproject.toml`` this is ``[tool.tallymark]`` (None when absent);
    for any other file it is the whole document.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    section: Any = tool.get(Toml.SECTION_TOOL_TALLYMARK) if isinstance(tool, dict) else None
    return cast("TomlTable", section) if isinstance(section, dict) else None


def discover_config_files(start: Path) -> list[Path]:
    """Return config files in ``start``, lowest precedence first.

    ``pyproject.toml`` comes before ``tallymark.toml`` so that a later merge
    gives ``tallymark.toml`` the final word.
    """
    found: list[Path] = []
    for name in (PYPROJECT_TOML_NAME, TALLYMARK_TOML_NAME):
        candidate: Path = start / name
        if candidate.is_file():
            found.append(candidate)
    logger.debug("Discovered config files in %s: %s", start, found)
    return found


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` of ``table``, or an empty dict."""
    value: Any = table.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        logger.warning("Ignoring [%s]: expected a table, got %s", key, type(value).__name__)
        return {}
    return cast("TomlTable", value)


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Return the string value of ``key``, or None (with a warning for other types)."""
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        logger.warning("Ignoring %s: expected a string, got %r", key, value)
        return None
    return value


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Return the boolean value of ``key``, or None (with a warning for other types)."""
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        logger.warning("Ignoring %s: expected a boolean, got %r", key, value)
        return None
    return value


def get_string_list_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Return the list-of-strings value of ``key``, or None (with a warning for other types)."""
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        logger.warning("Ignoring %s: expected a list of strings, got %r", key, value)
        return None
    return [str(v) for v in value]
