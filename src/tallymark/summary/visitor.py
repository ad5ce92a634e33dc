# tallymark:header:start
#
#   project      : TallyMark
#   file         : visitor.py
#   file_relpath : src/tallymark/summary/visitor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Visitors over the summary tree.

Each summary node implements ``accept(visitor)`` and calls back the matching
``visit_*`` method (double dispatch over a closed set of node kinds). New
accumulators subclass `RecursiveSummaryVisitor` and override only the hooks
they need.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tallymark.summary.model import (
        GlobalSummary,
        HtmlSummary,
        LibrarySummary,
        MessageSummary,
        PackageSummary,
    )


class SummaryVisitor(Protocol):
    """Callbacks invoked by ``accept`` on each summary node kind."""

    def visit_global(self, global_summary: GlobalSummary) -> None: ...

    def visit_package(self, package: PackageSummary) -> None: ...

    def visit_library(self, library: LibrarySummary) -> None: ...

    def visit_html(self, html: HtmlSummary) -> None: ...

    def visit_message(self, message: MessageSummary) -> None: ...


class RecursiveSummaryVisitor:
    """A visitor that walks the whole tree, parents before children.

    The default global traversal order is ``system``, ``packages``, ``loose``.
    """

    def visit_global(self, global_summary: GlobalSummary) -> None:
        for lib in global_summary.system.values():
            lib.accept(self)
        for package in global_summary.packages.values():
            package.accept(self)
        for unit in global_summary.loose.values():
            unit.accept(self)

    def visit_package(self, package: PackageSummary) -> None:
        for lib in package.libraries.values():
            lib.accept(self)

    def visit_library(self, library: LibrarySummary) -> None:
        for message in library.messages:
            message.accept(self)

    def visit_html(self, html: HtmlSummary) -> None:
        for message in html.messages:
            message.accept(self)

    def visit_message(self, message: MessageSummary) -> None:
        pass
