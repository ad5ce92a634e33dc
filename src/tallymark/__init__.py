# tallymark:header:start
#
#   project      : TallyMark
#   file         : __init__.py
#   file_relpath : src/tallymark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""TallyMark package.

TallyMark collects the diagnostics reported while analyzing a source tree into
a summary grouped by package and library, and renders per-package counts as a
plain-text table. It exposes both a CLI (replaying recorded event streams) and
a small typed API for embedding in an analyzer.
"""

from __future__ import annotations

from tallymark.config.model import Config, MutableConfig, OrphanPolicy
from tallymark.core.errors import (
    MalformedTableError,
    NoCurrentUnitError,
    ReplayError,
    SchemaFrozenError,
    TableError,
    TallymarkError,
)
from tallymark.core.identity import Scope, UnitIdentity, resolve_unit_identity
from tallymark.diagnostic.model import Message, Severity
from tallymark.diagnostic.span import SourceFile, SourceSpan
from tallymark.reporting.reporter import (
    CompilerReporter,
    LogReporter,
    SummaryReporter,
    UnitHandle,
)
from tallymark.reporting.summary_text import summary_to_dict, summary_to_string
from tallymark.reporting.table import Table
from tallymark.summary.model import (
    GlobalSummary,
    HtmlSummary,
    LibrarySummary,
    MessageSummary,
    PackageSummary,
)

__all__ = [
    "CompilerReporter",
    "Config",
    "GlobalSummary",
    "HtmlSummary",
    "LibrarySummary",
    "LogReporter",
    "MalformedTableError",
    "Message",
    "MessageSummary",
    "MutableConfig",
    "NoCurrentUnitError",
    "OrphanPolicy",
    "PackageSummary",
    "ReplayError",
    "SchemaFrozenError",
    "Scope",
    "Severity",
    "SourceFile",
    "SourceSpan",
    "SummaryReporter",
    "Table",
    "TableError",
    "TallymarkError",
    "UnitHandle",
    "UnitIdentity",
    "resolve_unit_identity",
    "summary_to_dict",
    "summary_to_string",
]
