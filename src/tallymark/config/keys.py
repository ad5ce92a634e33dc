# tallymark:header:start
#
#   project      : TallyMark
#   file         : keys.py
#   file_relpath : src/tallymark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Canonical TOML section and key names for TallyMark configuration.

Keys defined here represent the external configuration API as it appears in
``tallymark.toml`` and in ``[tool.tallymark]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by TallyMark configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_TALLYMARK: Final[str] = "tallymark"

    # [reporter]
    SECTION_REPORTER: Final[str] = "reporter"

    KEY_MIN_LEVEL: Final[str] = "min_level"
    KEY_ON_ORPHAN_MESSAGE: Final[str] = "on_orphan_message"
    KEY_SYSTEM_SCHEMES: Final[str] = "system_schemes"
    KEY_PACKAGE_SCHEME: Final[str] = "package_scheme"

    # [log]
    SECTION_LOG: Final[str] = "log"

    KEY_USE_COLORS: Final[str] = "use_colors"
