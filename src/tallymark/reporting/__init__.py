# tallymark:header:start
#
#   project      : TallyMark
#   file         : __init__.py
#   file_relpath : src/tallymark/reporting/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Reporters, the table renderer and report assembly."""

from __future__ import annotations

from tallymark.reporting.reporter import (
    CheckerReporter,
    CompilerReporter,
    LogReporter,
    SummaryReporter,
    UnitHandle,
)
from tallymark.reporting.summary_text import summary_to_dict, summary_to_string
from tallymark.reporting.table import Table

__all__ = [
    "CheckerReporter",
    "CompilerReporter",
    "LogReporter",
    "SummaryReporter",
    "Table",
    "UnitHandle",
    "summary_to_dict",
    "summary_to_string",
]
