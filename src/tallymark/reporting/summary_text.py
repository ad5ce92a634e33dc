# tallymark:header:start
#
#   project      : TallyMark
#   file         : summary_text.py
#   file_relpath : src/tallymark/reporting/summary_text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Render a `GlobalSummary` as a text table or a JSON-friendly mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tallymark.config.logging import TallymarkLogger, get_logger
from tallymark.constants import ANALYZER_ERROR_KIND
from tallymark.reporting.table import Table
from tallymark.summary.counter import count_summary

if TYPE_CHECKING:
    from tallymark.summary.counter import SummaryCounter
    from tallymark.summary.model import GlobalSummary

logger: TallymarkLogger = get_logger(__name__)

LINES_OF_CODE_COLUMN: str = "LinesOfCode"


def format_percent(count: int, total: int) -> str:
    """Return ``count`` as a percentage of ``total`` with two decimals (``0.00`` if total is 0)."""
    if total == 0:
        return f"{0:.2f}"
    return f"{count * 100 / total:.2f}"


def active_kinds(counter: SummaryCounter) -> list[str]:
    """Return the reported kinds in first-seen order, without the AnalyzerError kind."""
    return [kind for kind in counter.totals if kind != ANALYZER_ERROR_KIND]


def summary_to_string(summary: GlobalSummary) -> str:
    """Produce a string representation of the summary.

    The table has one row per package (system and loose units are grouped
    under ``*other*``) with an ``AnalyzerError`` column, one column per
    reported kind and a lines-of-code column, followed by a totals row and a
    row of percentages relative to the total lines of code.

    Raises:
        TableError: If the table cannot be laid out.
    """
    counter: SummaryCounter = count_summary(summary)
    kinds: list[str] = active_kinds(counter)
    logger.debug("Rendering summary: %d package(s), kinds=%s", len(counter.packages), kinds)

    table = Table()
    table.declare_column("package")
    table.declare_column(ANALYZER_ERROR_KIND, abbreviate=True)
    for kind in kinds:
        table.declare_column(kind, abbreviate=True)
    table.declare_column(LINES_OF_CODE_COLUMN, abbreviate=True)
    table.add_header()

    for package in counter.packages:
        counts: dict[str, int] = counter.error_count.get(package, {})
        table.add_entry(package)
        table.add_entry(counts.get(ANALYZER_ERROR_KIND, 0))
        for kind in kinds:
            table.add_entry(counts.get(kind, 0))
        table.add_entry(counter.lines_of_code.get(package, 0))

    # Totals, percents and a new header for quick reference
    table.add_divider()
    table.add_header()
    table.add_entry("total")
    table.add_entry(counter.totals.get(ANALYZER_ERROR_KIND, 0))
    for kind in kinds:
        table.add_entry(counter.totals.get(kind, 0))
    table.add_entry(counter.total_lines_of_code)

    total_loc: int = counter.total_lines_of_code
    table.add_entry("%")
    table.add_entry(format_percent(counter.totals.get(ANALYZER_ERROR_KIND, 0), total_loc))
    for kind in kinds:
        table.add_entry(format_percent(counter.totals.get(kind, 0), total_loc))
    table.add_entry(100)

    return table.render()


def summary_to_dict(summary: GlobalSummary) -> dict[str, Any]:
    """Return the summary tree and its aggregated counts as a JSON-friendly mapping."""
    counter: SummaryCounter = count_summary(summary)
    return {
        "summary": summary.to_dict(),
        "counts": {
            "error_count": counter.error_count,
            "lines_of_code": counter.lines_of_code,
            "totals": counter.totals,
            "total_lines_of_code": counter.total_lines_of_code,
        },
    }
