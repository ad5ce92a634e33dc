# tallymark:header:start
#
#   project      : TallyMark
#   file         : errors.py
#   file_relpath : src/tallymark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Exceptions raised by the TallyMark core.

These are plain exceptions, independent from Click. The CLI translates them
into `tallymark.cli.errors.TallymarkCliError` subclasses with exit codes.
"""

from __future__ import annotations


class TallymarkError(Exception):
    """Base exception for all TallyMark errors."""

    pass


class NoCurrentUnitError(TallymarkError):
    """Raised when a message or line count is reported while no unit is current."""

    def __init__(self, message: str = "No library or HTML unit is currently entered") -> None:
        super().__init__(message)


class TableError(TallymarkError):
    """Base class for table construction errors."""


class MalformedTableError(TableError):
    """Raised when table entries do not fill whole rows."""


class SchemaFrozenError(TableError):
    """Raised when a column is declared after entries were added."""


class ReplayError(TallymarkError):
    """Raised when a replay event stream cannot be interpreted.

    Attributes:
        line_no (int | None): 1-based line number of the offending event, if known.
    """

    def __init__(self, message: str, *, line_no: int | None = None) -> None:
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no
