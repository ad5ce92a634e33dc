# tallymark:header:start
#
#   project      : TallyMark
#   file         : __init__.py
#   file_relpath : src/tallymark/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Core primitives shared by the summary model, reporters and the CLI."""

from __future__ import annotations
