# tallymark:header:start
#
#   project      : TallyMark
#   file         : __init__.py
#   file_relpath : src/tallymark/summary/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Summary tree, visitors and the counting visitor."""

from __future__ import annotations

from tallymark.summary.counter import SummaryCounter, count_summary
from tallymark.summary.model import (
    GlobalSummary,
    HtmlSummary,
    LibrarySummary,
    MessageSummary,
    PackageSummary,
    UnitSummary,
)
from tallymark.summary.visitor import RecursiveSummaryVisitor, SummaryVisitor

__all__ = [
    "GlobalSummary",
    "HtmlSummary",
    "LibrarySummary",
    "MessageSummary",
    "PackageSummary",
    "RecursiveSummaryVisitor",
    "SummaryCounter",
    "SummaryVisitor",
    "UnitSummary",
    "count_summary",
]
