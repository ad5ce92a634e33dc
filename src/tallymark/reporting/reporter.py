# tallymark:header:start
#
#   project      : TallyMark
#   file         : reporter.py
#   file_relpath : src/tallymark/reporting/reporter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Reporters receive analyzer messages and unit lifecycle notifications.

The analysis driver calls, for every unit::

    enter_library(uri) / enter_html(uri)
        enter_compilation_unit(source)   # zero or more
        log(message)                     # zero or more
        leave_compilation_unit()
    leave_library() / leave_html()

Two reporters are provided:

- `SummaryReporter` gathers everything into a `GlobalSummary`.
- `LogReporter` forwards each message to a logging sink as it is seen.

``enter_library``/``enter_html`` return a `UnitHandle` bound to the entered
unit. Drivers that keep the handle log through it and never depend on which
unit is current; drivers that only use the lifecycle hooks log through the
reporter, which targets the current unit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from tallymark.config.logging import TallymarkLogger, get_logger
from tallymark.config.model import Config, OrphanPolicy
from tallymark.core.errors import NoCurrentUnitError
from tallymark.core.identity import UnitIdentity, resolve_unit_identity
from tallymark.diagnostic.span import SourceFile, SourceSpan, create_span
from tallymark.summary.model import (
    GlobalSummary,
    HtmlSummary,
    LibrarySummary,
    MessageSummary,
    UnitSummary,
)

if TYPE_CHECKING:
    import logging

    from tallymark.diagnostic.model import Message

logger: TallymarkLogger = get_logger(__name__)

CHECKER_LOGGER_NAME: str = "tallymark.checker"


class CheckerReporter(Protocol):
    """Interface used to report messages from a checker."""

    def log(self, message: Message) -> None: ...


class CompilerReporter:
    """Base class for reporters driven by a compiler.

    Tracks the current compilation unit source so message offsets can be
    resolved into `SourceSpan` objects. Lifecycle hooks are no-ops here.
    """

    def __init__(self) -> None:
        self._source: SourceFile | None = None

    @property
    def current_source(self) -> SourceFile | None:
        """Return the source of the compilation unit being processed, if any."""
        return self._source

    def enter_library(self, uri: str) -> UnitHandle | None:
        """Called when starting to process a library."""
        return None

    def leave_library(self) -> None:
        pass

    def enter_html(self, uri: str) -> UnitHandle | None:
        """Called when starting to process an HTML source file."""
        return None

    def leave_html(self) -> None:
        pass

    def enter_compilation_unit(self, source: SourceFile) -> None:
        """Called when starting to process a source.

        All subsequent messages belong to this source until the next call.
        """
        self._source = source

    def leave_compilation_unit(self) -> None:
        self._source = None

    def log(self, message: Message) -> None:
        raise NotImplementedError

    def clear_library(self, uri: str) -> None:
        pass

    def clear_html(self, uri: str) -> None:
        pass

    def clear_all(self) -> None:
        pass

    def create_span(self, begin: int, end: int, url: str | None = None) -> SourceSpan:
        """Resolve offsets against the current compilation unit."""
        return create_span(self._source, begin, end, url=url)


class LogReporter(CompilerReporter):
    """Simple reporter that logs checker messages as they are seen.

    Args:
        config (Config | None): Runtime configuration; ``use_colors`` decides
            whether the source highlight is colored by severity. Defaults to
            `Config()`.
        sink (logging.Logger | None): Where messages go; defaults to the
            ``tallymark.checker`` logger.
    """

    def __init__(self, config: Config | None = None, *, sink: logging.Logger | None = None) -> None:
        super().__init__()
        self.config: Config = config if config is not None else Config()
        self.sink: logging.Logger = sink if sink is not None else get_logger(CHECKER_LOGGER_NAME)

    @property
    def use_colors(self) -> bool:
        return self.config.use_colors

    def log(self, message: Message) -> None:
        span: SourceSpan = self.create_span(message.begin, message.end)
        color = message.level.color if self.use_colors else None
        text: str = f"[{message.kind}] {message.text}"
        self.sink.log(message.level.logging_level, "%s", span.message(text, color=color))


class UnitHandle:
    """Explicit reporting context for one entered unit.

    A handle logs into its own unit regardless of which unit is current on
    the reporter, and stays usable after the unit was left.
    """

    def __init__(self, reporter: SummaryReporter, summary: UnitSummary) -> None:
        self._reporter = reporter
        self.summary: UnitSummary = summary

    @property
    def identifier(self) -> str:
        return self.summary.identifier

    def log(self, message: Message) -> None:
        """Record ``message`` on this handle's unit (subject to the reporter threshold)."""
        self._reporter.record(self.summary, message)

    def record_line_count(self, lines: int) -> None:
        """Add ``lines`` to this handle's library; HTML units do not track lines."""
        _add_lines(self.summary, lines)


class SummaryReporter(CompilerReporter):
    """A reporter that gathers all the information in a `GlobalSummary`.

    Args:
        config (Config | None): Runtime configuration (threshold, orphan policy,
            identifier schemes). Defaults to `Config()`.
    """

    def __init__(self, config: Config | None = None) -> None:
        super().__init__()
        self.config: Config = config if config is not None else Config()
        self.result: GlobalSummary = GlobalSummary()
        self._current: UnitSummary | None = None

    @property
    def current(self) -> UnitSummary | None:
        """Return the unit receiving messages, if any."""
        return self._current

    def _resolve(self, uri: str) -> UnitIdentity:
        return resolve_unit_identity(
            uri,
            system_schemes=self.config.system_schemes,
            package_scheme=self.config.package_scheme,
        )

    def enter_library(self, uri: str) -> UnitHandle:
        identity: UnitIdentity = self._resolve(uri)
        unit: UnitSummary = self.result.get_or_create_library(identity)
        self._current = unit
        logger.debug("Entering %s library %s", identity.scope.value, identity.uri)
        return UnitHandle(self, unit)

    def leave_library(self) -> None:
        self._current = None

    def enter_html(self, uri: str) -> UnitHandle:
        identifier: str = self._resolve(uri).uri
        unit: UnitSummary = self.result.get_or_create_html(identifier)
        self._current = unit
        logger.debug("Entering html %s", identifier)
        return UnitHandle(self, unit)

    def leave_html(self) -> None:
        self._current = None

    def enter_compilation_unit(self, source: SourceFile) -> None:
        """Track ``source`` and add its line count to the current library.

        Raises:
            NoCurrentUnitError: If no unit is current and orphans are errors.
        """
        super().enter_compilation_unit(source)
        if self._current is None:
            self._orphan("line count")
            return
        _add_lines(self._current, source.line_count)

    def record_line_count(self, lines: int) -> None:
        """Add ``lines`` to the current library.

        Raises:
            NoCurrentUnitError: If no unit is current and orphans are errors.
            ValueError: If ``lines`` is negative.
        """
        if self._current is None:
            self._orphan("line count")
            return
        _add_lines(self._current, lines)

    def log(self, message: Message) -> None:
        """Record ``message`` on the current unit.

        Raises:
            NoCurrentUnitError: If no unit is current and the orphan policy is
                `OrphanPolicy.ERROR`.
        """
        if self._current is None:
            if message.level < self.config.min_level:
                return
            self._orphan(f"message [{message.kind}] {message.text!r}")
            return
        self.record(self._current, message)

    def record(self, unit: UnitSummary, message: Message) -> None:
        """Record ``message`` on ``unit`` unless it is below the configured threshold."""
        # Only summarize messages per configured level
        if message.level < self.config.min_level:
            logger.trace("Below %s, dropping [%s]", self.config.min_level.label, message.kind)
            return
        span: SourceSpan = self.create_span(message.begin, message.end, url=unit.identifier)
        unit.messages.append(MessageSummary(message.kind, message.level.label, span, message.text))

    def _orphan(self, what: str) -> None:
        if self.config.on_orphan_message is OrphanPolicy.DROP:
            logger.debug("No current unit, dropping %s", what)
            return
        raise NoCurrentUnitError(f"Cannot report {what}: no library or HTML unit is entered")

    def clear_library(self, uri: str) -> None:
        unit: UnitSummary = self.result.get_or_create_library(self._resolve(uri))
        unit.clear()
        self._current = None

    def clear_html(self, uri: str) -> None:
        unit: UnitSummary | None = self.result.loose.get(self._resolve(uri).uri)
        if isinstance(unit, HtmlSummary):
            unit.clear()

    def clear_all(self) -> None:
        self.result = GlobalSummary()
        self._current = None


def _add_lines(unit: UnitSummary, lines: int) -> None:
    if lines < 0:
        raise ValueError(f"Line count must not be negative, got {lines}")
    if isinstance(unit, LibrarySummary):
        unit.lines += lines
