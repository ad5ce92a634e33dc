# tallymark:header:start
#
#   project      : TallyMark
#   file         : test_counter.py
#   file_relpath : tests/summary/test_counter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Tests for the counting visitor and the recursive traversal order."""

from __future__ import annotations

from tallymark.constants import OTHER_PACKAGE
from tallymark.core.identity import resolve_unit_identity
from tallymark.diagnostic.span import SourceSpan
from tallymark.summary.counter import SummaryCounter, count_summary
from tallymark.summary.model import (
    GlobalSummary,
    HtmlSummary,
    LibrarySummary,
    MessageSummary,
    PackageSummary,
)
from tallymark.summary.visitor import RecursiveSummaryVisitor


def _add(summary: GlobalSummary, uri: str, *kinds: str, lines: int = 0) -> LibrarySummary:
    lib = summary.get_or_create_library(resolve_unit_identity(uri))
    assert isinstance(lib, LibrarySummary)
    lib.lines += lines
    for kind in kinds:
        lib.messages.append(MessageSummary(kind, "severe", SourceSpan(uri, 0, 0), kind))
    return lib


def test_empty_summary() -> None:
    counter: SummaryCounter = count_summary(GlobalSummary())
    assert counter.error_count == {}
    assert counter.totals == {}
    assert counter.total_lines_of_code == 0
    assert counter.packages == []


def test_counts_per_package_and_kind() -> None:
    summary = GlobalSummary()
    _add(summary, "package:p/a.dart", "TypeError", "TypeError", lines=10)
    _add(summary, "dart:core", "TypeError", lines=5)
    _add(summary, "package:q/b.dart", "Lint", lines=1)

    counter: SummaryCounter = count_summary(summary)

    assert counter.error_count == {
        OTHER_PACKAGE: {"TypeError": 1},
        "p": {"TypeError": 2},
        "q": {"Lint": 1},
    }
    assert counter.lines_of_code == {OTHER_PACKAGE: 5, "p": 10, "q": 1}
    assert counter.totals == {"TypeError": 3, "Lint": 1}
    assert counter.total_lines_of_code == 16
    assert counter.packages == [OTHER_PACKAGE, "p", "q"]


def test_html_messages_count_under_other() -> None:
    summary = GlobalSummary()
    html = summary.get_or_create_html("index.html")
    assert isinstance(html, HtmlSummary)
    html.messages.append(MessageSummary("HtmlError", "warning", SourceSpan(None, 0, 0), "m"))

    counter: SummaryCounter = count_summary(summary)

    assert counter.error_count == {OTHER_PACKAGE: {"HtmlError": 1}}
    assert counter.total_lines_of_code == 0


def test_package_with_lines_but_no_messages_gets_a_row() -> None:
    summary = GlobalSummary()
    _add(summary, "package:clean/a.dart", lines=42)

    counter: SummaryCounter = count_summary(summary)

    assert counter.packages == ["clean"]
    assert counter.error_count["clean"] == {}
    assert counter.lines_of_code["clean"] == 42


def test_package_context_resets_after_package() -> None:
    summary = GlobalSummary()
    _add(summary, "package:p/a.dart", "A")
    _add(summary, "file:///loose.dart", "B")

    counter: SummaryCounter = count_summary(summary)

    assert counter.error_count[OTHER_PACKAGE] == {"B": 1}
    assert counter.current_package == OTHER_PACKAGE


class _OrderRecorder(RecursiveSummaryVisitor):
    def __init__(self) -> None:
        self.seen: list[str] = []

    def visit_package(self, package: PackageSummary) -> None:
        self.seen.append(f"package:{package.name}")
        super().visit_package(package)

    def visit_library(self, library: LibrarySummary) -> None:
        self.seen.append(library.identifier)
        super().visit_library(library)

    def visit_html(self, html: HtmlSummary) -> None:
        self.seen.append(html.identifier)
        super().visit_html(html)

    def visit_message(self, message: MessageSummary) -> None:
        self.seen.append(f"msg:{message.kind}")


def test_traversal_is_system_packages_loose_parent_first() -> None:
    summary = GlobalSummary()
    _add(summary, "file:///z.dart", "Z")
    summary.get_or_create_html("i.html")
    _add(summary, "package:p/a.dart", "P")
    _add(summary, "dart:core", "S")

    recorder = _OrderRecorder()
    summary.accept(recorder)

    assert recorder.seen == [
        "dart:core",
        "msg:S",
        "package:p",
        "package:p/a.dart",
        "msg:P",
        "file:///z.dart",
        "msg:Z",
        "i.html",
    ]
