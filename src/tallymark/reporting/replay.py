# tallymark:header:start
#
#   project      : TallyMark
#   file         : replay.py
#   file_relpath : src/tallymark/reporting/replay.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Replay a recorded analysis event stream into a reporter.

Streams are NDJSON: one JSON object per line, with an ``event`` key naming
the reporter hook to call. Blank lines are skipped.

Example::

    {"event": "enter_library", "uri": "package:foo/foo.dart"}
    {"event": "enter_compilation_unit", "source": "void main() {}\\n"}
    {"event": "log", "kind": "TypeError", "level": "severe", "text": "bad", "begin": 0, "end": 4}
    {"event": "leave_compilation_unit"}
    {"event": "leave_library"}

``enter_compilation_unit`` accepts either the ``source`` text or a bare
``lines`` count. Both forms add to the current library and follow the
reporter's orphan policy when no unit is entered.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Final

from tallymark.config.logging import TallymarkLogger, get_logger
from tallymark.core.errors import ReplayError
from tallymark.diagnostic.model import Message, Severity
from tallymark.diagnostic.span import SourceFile

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from tallymark.reporting.reporter import CompilerReporter

logger: TallymarkLogger = get_logger(__name__)

EVENT_KEY: Final[str] = "event"


def _require_str(event: dict[str, Any], key: str) -> str:
    value: Any = event.get(key)
    if not isinstance(value, str):
        raise ReplayError(f"{event.get(EVENT_KEY)!r} requires a string {key!r}")
    return value


def _optional_int(event: dict[str, Any], key: str, default: int = 0) -> int:
    value: Any = event.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ReplayError(f"{event.get(EVENT_KEY)!r} requires an integer {key!r}, got {value!r}")
    return value


def message_from_event(event: dict[str, Any]) -> Message:
    """Build a `Message` from a ``log`` event.

    Raises:
        ReplayError: If a field is missing or has the wrong type.
    """
    level_name: str = str(event.get("level", "severe"))
    level: Severity | None = Severity.from_name(level_name)
    if level is None:
        raise ReplayError(f"Unknown severity level {level_name!r}")
    return Message(
        kind=_require_str(event, "kind"),
        text=_require_str(event, "text"),
        level=level,
        begin=_optional_int(event, "begin"),
        end=_optional_int(event, "end"),
    )


def _enter_compilation_unit(reporter: CompilerReporter, event: dict[str, Any]) -> None:
    source: Any = event.get("source")
    if source is not None:
        if not isinstance(source, str):
            raise ReplayError("'enter_compilation_unit' requires a string 'source'")
        url: Any = event.get("url")
        reporter.enter_compilation_unit(SourceFile(source, url if isinstance(url, str) else None))
        return
    if "lines" not in event:
        raise ReplayError("'enter_compilation_unit' requires a 'source' or a 'lines' count")
    lines: int = _optional_int(event, "lines")
    if lines < 0:
        raise ReplayError(f"'lines' must not be negative, got {lines}")
    record_line_count: Callable[[int], None] | None = getattr(reporter, "record_line_count", None)
    if record_line_count is not None:
        record_line_count(lines)


def apply_event(reporter: CompilerReporter, event: dict[str, Any]) -> None:
    """Dispatch one decoded event to ``reporter``.

    Raises:
        ReplayError: If the event is unknown or malformed.
    """
    name: Any = event.get(EVENT_KEY)
    if name == "enter_library":
        reporter.enter_library(_require_str(event, "uri"))
    elif name == "leave_library":
        reporter.leave_library()
    elif name == "enter_html":
        reporter.enter_html(_require_str(event, "uri"))
    elif name == "leave_html":
        reporter.leave_html()
    elif name == "enter_compilation_unit":
        _enter_compilation_unit(reporter, event)
    elif name == "leave_compilation_unit":
        reporter.leave_compilation_unit()
    elif name == "log":
        reporter.log(message_from_event(event))
    elif name == "clear_library":
        reporter.clear_library(_require_str(event, "uri"))
    elif name == "clear_html":
        reporter.clear_html(_require_str(event, "uri"))
    elif name == "clear_all":
        reporter.clear_all()
    else:
        raise ReplayError(f"Unknown event {name!r}")


def replay_lines(reporter: CompilerReporter, lines: Iterable[str]) -> int:
    """Replay NDJSON ``lines`` into ``reporter``.

    Args:
        reporter (CompilerReporter): Target reporter.
        lines (Iterable[str]): NDJSON lines (e.g. an open text file).

    Returns:
        int: Number of events applied.

    Raises:
        ReplayError: On malformed JSON or an invalid event, with its line number.
    """
    applied: int = 0
    for line_no, raw in enumerate(lines, start=1):
        text: str = raw.strip()
        if not text:
            continue
        try:
            event: Any = json.loads(text)
        except json.JSONDecodeError as e:
            raise ReplayError(f"Invalid JSON: {e.msg}", line_no=line_no) from e
        if not isinstance(event, dict) or EVENT_KEY not in event:
            raise ReplayError(f"Expected an object with an {EVENT_KEY!r} key", line_no=line_no)
        try:
            apply_event(reporter, event)
        except ReplayError as e:
            if e.line_no is not None:
                raise
            raise ReplayError(str(e), line_no=line_no) from e
        applied += 1
    logger.debug("Replayed %d event(s)", applied)
    return applied
