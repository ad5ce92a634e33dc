# tallymark:header:start
#
#   project      : TallyMark
#   file         : counter.py
#   file_relpath : src/tallymark/summary/counter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Counting visitor: messages per package and kind, and lines of code.

The counter is presentation-free. `tallymark.reporting.summary_text` turns its
maps into a table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tallymark.constants import OTHER_PACKAGE
from tallymark.summary.visitor import RecursiveSummaryVisitor

if TYPE_CHECKING:
    from tallymark.summary.model import GlobalSummary, LibrarySummary, MessageSummary, PackageSummary


class SummaryCounter(RecursiveSummaryVisitor):
    """Count messages per package and kind, and lines of code, in one traversal.

    Units outside any package (system and loose units) are attributed to the
    `OTHER_PACKAGE` context.

    Attributes:
        error_count (dict[str, dict[str, int]]): package → kind → message count.
        lines_of_code (dict[str, int]): package → total lines of its libraries.
        totals (dict[str, int]): kind → message count over the whole tree, in
            first-seen order.
        total_lines_of_code (int): Lines over every library of the tree.
        packages (list[str]): Package contexts in first-seen order.
    """

    def __init__(self) -> None:
        self._current_package: str | None = None
        self.error_count: dict[str, dict[str, int]] = {}
        self.lines_of_code: dict[str, int] = {}
        self.totals: dict[str, int] = {}
        self.total_lines_of_code: int = 0
        self.packages: list[str] = []

    @property
    def current_package(self) -> str:
        """Return the package context of the node being visited."""
        return self._current_package if self._current_package is not None else OTHER_PACKAGE

    def _see(self, package: str) -> None:
        if package not in self.error_count:
            self.error_count[package] = {}
            self.lines_of_code[package] = 0
            self.packages.append(package)

    def visit_package(self, package: PackageSummary) -> None:
        self._current_package = package.name
        try:
            super().visit_package(package)
        finally:
            self._current_package = None

    def visit_library(self, library: LibrarySummary) -> None:
        self._see(self.current_package)
        super().visit_library(library)
        self.lines_of_code[self.current_package] += library.lines
        self.total_lines_of_code += library.lines

    def visit_message(self, message: MessageSummary) -> None:
        package: str = self.current_package
        self._see(package)
        counts: dict[str, int] = self.error_count[package]
        counts[message.kind] = counts.get(message.kind, 0) + 1
        self.totals[message.kind] = self.totals.get(message.kind, 0) + 1


def count_summary(summary: GlobalSummary) -> SummaryCounter:
    """Run a fresh `SummaryCounter` over ``summary`` and return it."""
    counter = SummaryCounter()
    summary.accept(counter)
    return counter
