# tallymark:header:start
#
#   project      : TallyMark
#   file         : span.py
#   file_relpath : src/tallymark/diagnostic/span.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Source files and spans used to locate diagnostics.

`SourceFile` indexes line starts of a source text so that offsets can be
turned into 0-based line/column pairs. `SourceSpan` is the resolved,
immutable location stored on each `MessageSummary`.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class SourceSpan:
    """A resolved range of a source file.

    Line and column fields are 0-based. They are None when the span was
    created without source text (offsets only).
    """

    url: str | None
    start: int
    end: int
    start_line: int | None = None
    start_column: int | None = None
    end_line: int | None = None
    end_column: int | None = None
    text: str = ""
    context: str = ""

    def message(self, text: str, *, color: Callable[[str], str] | None = None) -> str:
        """Format ``text`` with this span's location and a highlight of the source.

        Args:
            text (str): The message text.
            color (Callable[[str], str] | None): Optional colorizer for the highlight.

        Returns:
            str: ``"line L, column C of URL: text"`` followed, when the source
                line is known, by the line and a caret underline.
        """
        where: str = self.url or "<unknown source>"
        if self.start_line is None or self.start_column is None:
            return f"{where}: {text}"

        out: str = f"line {self.start_line + 1}, column {self.start_column + 1} of {where}: {text}"
        if not self.context:
            return out

        line: str = self.context.rstrip("\r\n")
        width: int = max(1, min(self.end - self.start, len(line) - self.start_column))
        marker: str = "^" * width
        if color is not None:
            marker = color(marker)
        return f"{out}\n{line}\n{' ' * self.start_column}{marker}"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this span."""
        return {
            "url": self.url,
            "start": self.start,
            "end": self.end,
            "start_line": self.start_line,
            "start_column": self.start_column,
            "end_line": self.end_line,
            "end_column": self.end_column,
            "text": self.text,
        }


@dataclass(frozen=True)
class SourceFile:
    """Source text with precomputed line starts."""

    text: str
    url: str | None = None
    _line_starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        starts: list[int] = [0]
        for i, ch in enumerate(self.text):
            if ch == "\n":
                starts.append(i + 1)
        object.__setattr__(self, "_line_starts", tuple(starts))

    @property
    def line_count(self) -> int:
        """Return the number of lines; a trailing newline does not start a new line."""
        if not self.text:
            return 0
        n: int = len(self._line_starts)
        return n - 1 if self.text.endswith("\n") else n

    def location(self, offset: int) -> tuple[int, int]:
        """Return the 0-based ``(line, column)`` of ``offset`` (clamped to the text)."""
        offset = max(0, min(offset, len(self.text)))
        line: int = bisect_right(self._line_starts, offset) - 1
        return line, offset - self._line_starts[line]

    def line_text(self, line: int) -> str:
        """Return the text of ``line`` including its newline, if any."""
        start: int = self._line_starts[line]
        end: int = (
            self._line_starts[line + 1] if line + 1 < len(self._line_starts) else len(self.text)
        )
        return self.text[start:end]

    def span(self, begin: int, end: int) -> SourceSpan:
        """Create a `SourceSpan` for the offsets ``[begin, end)``.

        Offsets are clamped to the text; ``end`` is never before ``begin``.
        """
        begin = max(0, min(begin, len(self.text)))
        end = max(begin, min(end, len(self.text)))
        start_line, start_col = self.location(begin)
        end_line, end_col = self.location(end)
        return SourceSpan(
            url=self.url,
            start=begin,
            end=end,
            start_line=start_line,
            start_column=start_col,
            end_line=end_line,
            end_column=end_col,
            text=self.text[begin:end],
            context=self.line_text(start_line),
        )


def create_span(source: SourceFile | None, begin: int, end: int, url: str | None = None) -> SourceSpan:
    """Resolve offsets against ``source``.

    Args:
        source (SourceFile | None): The current compilation unit source, if any.
        begin (int): Start offset.
        end (int): End offset.
        url (str | None): Fallback URL when there is no source.

    Returns:
        SourceSpan: A fully resolved span, or an offsets-only span when
            ``source`` is None.
    """
    if source is None:
        return SourceSpan(url=url, start=begin, end=max(begin, end))
    return source.span(begin, end)
