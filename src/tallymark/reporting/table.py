# tallymark:header:start
#
#   project      : TallyMark
#   file         : table.py
#   file_relpath : src/tallymark/reporting/table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Plain-text table builder for terminal reports.

A `Table` is built in two phases:

1. Schema: `Table.declare_column` adds columns. Abbreviated columns keep only
   the non-lowercase characters of their name as header (``LinesOfCode`` →
   ``LOC``) and are listed in a trailing legend.
2. Data: `Table.add_entry` fills rows left to right; a row is closed each
   time it holds one value per column. Declaring a column after the first
   entry raises `SchemaFrozenError`.

Column widths only grow while entries are added, so rows are buffered and
laid out with their final widths when the table is rendered.
"""

from __future__ import annotations

import re
from typing import Final

from tallymark.config.logging import TallymarkLogger, get_logger
from tallymark.core.errors import MalformedTableError, SchemaFrozenError

logger: TallymarkLogger = get_logger(__name__)

MIN_COLUMN_WIDTH: Final[int] = 5

_LOWERCASE_RE: Final[re.Pattern[str]] = re.compile(r"[a-z]")

# Marker row replaced by dashes at render time.
_DIVIDER: Final[None] = None


class Table:
    """Helper class to combine report values in table form.

    Attributes:
        abbreviations (dict[str, str]): Abbreviated header → full column name.
        widths (list[int]): Current width of each column.
        header (list[str]): Header text of each column.
        rows (list[list[str] | None]): Buffered rows; None marks a divider.
    """

    def __init__(self) -> None:
        self.abbreviations: dict[str, str] = {}
        self.widths: list[int] = []
        self.header: list[str] = []
        self.rows: list[list[str] | None] = []
        self._sealed: bool = False
        self._current_row: list[str] = []

    @property
    def total_columns(self) -> int:
        """Return the number of declared columns."""
        return len(self.header)

    @property
    def sealed(self) -> bool:
        """Return True once entries were added and the schema is frozen."""
        return self._sealed

    def declare_column(self, name: str, *, abbreviate: bool = False) -> str:
        """Add a column with the given ``name``.

        Args:
            name (str): Full column name.
            abbreviate (bool): Whether to use the capital initials as header.

        Returns:
            str: The header text used for the column.

        Raises:
            SchemaFrozenError: If entries were already added.
        """
        if self._sealed:
            raise SchemaFrozenError(f"Cannot declare column {name!r} after entries were added")

        header_name: str = name
        if abbreviate:
            header_name = _LOWERCASE_RE.sub("", name)
            while header_name in self.abbreviations:
                header_name = f"{header_name}'"
            self.abbreviations[header_name] = name
        self.widths.append(max(MIN_COLUMN_WIDTH, len(header_name) + 1))
        self.header.append(header_name)
        logger.trace("Declared column %r (header %r)", name, header_name)
        return header_name

    def add_entry(self, entry: object) -> None:
        """Add an entry, starting a new row each time `total_columns` entries were added.

        Raises:
            MalformedTableError: If no columns were declared.
        """
        if not self.header:
            raise MalformedTableError("Cannot add entries to a table without columns")
        self._sealed = True

        text: str = str(entry)
        pos: int = len(self._current_row)
        self.widths[pos] = max(self.widths[pos], len(text) + 1)
        self._current_row.append(text)

        if pos + 1 == self.total_columns:
            self.rows.append(self._current_row)
            self._current_row = []

    def add_divider(self) -> None:
        """Add a dashed row to divide sections of the table."""
        self._check_row_boundary("divider")
        self.rows.append(_DIVIDER)

    def add_header(self) -> None:
        """Enter the header titles. OK to do so more than once in long tables."""
        self._check_row_boundary("header")
        self.rows.append(self.header)

    def _check_row_boundary(self, what: str) -> None:
        if self._current_row:
            raise MalformedTableError(
                f"Cannot insert a {what} row after {len(self._current_row)} of "
                f"{self.total_columns} entries of a row"
            )

    def render(self) -> str:
        """Generate a string representation of the table to print on a terminal.

        The first column is aligned to the left, every other column to the right.

        Raises:
            MalformedTableError: If the last row is incomplete.
        """
        if self._current_row:
            raise MalformedTableError(
                f"Incomplete last row: {len(self._current_row)} of {self.total_columns} entries"
            )

        lines: list[str] = [""]
        for row in self.rows:
            cells: list[str] = ["-" * w for w in self.widths] if row is _DIVIDER else row
            parts: list[str] = []
            for i, entry in enumerate(cells):
                if i == 0:
                    parts.append(entry.ljust(self.widths[i]))
                else:
                    parts.append(entry.rjust(self.widths[i] + 1))
            lines.append("".join(parts))

        lines.append("")
        lines.append("Where:")
        for abbrev, name in self.abbreviations.items():
            lines.append(f"  {abbrev}:".ljust(7) + f" {name}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()
