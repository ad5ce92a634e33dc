# tallymark:header:start
#
#   project      : TallyMark
#   file         : test_summary_text.py
#   file_relpath : tests/reporting/test_summary_text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""End-to-end tests for the summary report (text and JSON-friendly forms)."""

from __future__ import annotations

import json

from tallymark.constants import OTHER_PACKAGE
from tallymark.diagnostic.model import Severity
from tallymark.diagnostic.span import SourceFile
from tallymark.reporting.reporter import SummaryReporter
from tallymark.reporting.summary_text import format_percent, summary_to_dict, summary_to_string
from tallymark.summary.model import GlobalSummary
from tests.conftest import msg


def _populate(reporter: SummaryReporter) -> None:
    reporter.enter_library("package:p/a.dart")
    reporter.record_line_count(10)
    reporter.log(msg("TypeError"))
    reporter.log(msg("TypeError"))
    reporter.leave_library()

    reporter.enter_library("dart:core")
    reporter.enter_compilation_unit(SourceFile("1\n2\n3\n4\n5\n"))
    reporter.log(msg("TypeError", begin=2, end=3))
    reporter.leave_compilation_unit()
    reporter.leave_library()


def test_format_percent() -> None:
    assert format_percent(3, 15) == "20.00"
    assert format_percent(1, 3) == "33.33"
    assert format_percent(5, 0) == "0.00"


def test_report_end_to_end(reporter: SummaryReporter) -> None:
    _populate(reporter)

    expected: list[str] = [
        "",
        "package     AE     TE   LOC",
        "*other*      0      1     5",
        "p            0      2    10",
        "-------- ----- ------ -----",
        "package     AE     TE   LOC",
        "total        0      3    15",
        "%         0.00  20.00   100",
        "",
        "Where:",
        "  AE:   AnalyzerError",
        "  TE:   TypeError",
        "  LOC:  LinesOfCode",
    ]
    assert summary_to_string(reporter.result) == "\n".join(expected) + "\n"


def test_empty_summary_report() -> None:
    rendered: str = summary_to_string(GlobalSummary())

    lines: list[str] = rendered.split("\n")
    assert lines[1].split() == ["package", "AE", "LOC"]
    assert "total" in rendered
    total_row: list[str] = next(line for line in lines if line.startswith("total")).split()
    percent_row: list[str] = next(line for line in lines if line.startswith("%")).split()
    assert total_row == ["total", "0", "0"]
    assert percent_row == ["%", "0.00", "100"]


def test_analyzer_error_has_a_single_column(reporter: SummaryReporter) -> None:
    reporter.enter_library("package:p/a.dart")
    reporter.log(msg("AnalyzerError"))
    reporter.log(msg("Lint", level=Severity.INFO))

    lines: list[str] = summary_to_string(reporter.result).split("\n")

    assert lines[1].split() == ["package", "AE", "L", "LOC"]
    assert lines[2].split() == ["p", "1", "1", "0"]


def test_kind_columns_follow_first_seen_order(reporter: SummaryReporter) -> None:
    reporter.enter_library("package:p/a.dart")
    for kind in ("Zeta", "Alpha", "Zeta"):
        reporter.log(msg(kind))

    header: list[str] = summary_to_string(reporter.result).split("\n")[1].split()
    assert header == ["package", "AE", "Z", "A", "LOC"]


def test_rows_have_equal_length(reporter: SummaryReporter) -> None:
    _populate(reporter)
    reporter.enter_library("package:a_much_longer_package_name/x.dart")
    reporter.record_line_count(123456)

    rendered: str = summary_to_string(reporter.result)
    rows: list[str] = rendered.split("\n")[1 : rendered.split("\n").index("Where:") - 1]
    assert len({len(r) for r in rows}) == 1


def test_summary_to_dict(reporter: SummaryReporter) -> None:
    _populate(reporter)

    data = summary_to_dict(reporter.result)

    assert data["counts"] == {
        "error_count": {OTHER_PACKAGE: {"TypeError": 1}, "p": {"TypeError": 2}},
        "lines_of_code": {OTHER_PACKAGE: 5, "p": 10},
        "totals": {"TypeError": 3},
        "total_lines_of_code": 15,
    }
    assert data["summary"]["system"]["dart:core"]["messages"][0]["location"]["start_line"] == 0
    json.dumps(data)
