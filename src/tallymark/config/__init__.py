# tallymark:header:start
#
#   project      : TallyMark
#   file         : __init__.py
#   file_relpath : src/tallymark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Configuration and logging setup for TallyMark.

Use `MutableConfig` to layer defaults, config files and CLI overrides, then
`MutableConfig.freeze` into an immutable `Config` for reporters.
"""

from __future__ import annotations

from tallymark.config.model import Config, MutableConfig, OrphanPolicy

__all__ = [
    "Config",
    "MutableConfig",
    "OrphanPolicy",
]
