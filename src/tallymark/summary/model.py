# tallymark:header:start
#
#   project      : TallyMark
#   file         : model.py
#   file_relpath : src/tallymark/summary/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Hierarchical summary of the messages reported while analyzing a source tree.

The tree is strictly hierarchical:

    GlobalSummary
      ├─ system:   identifier → LibrarySummary
      ├─ packages: name → PackageSummary ─ libraries: identifier → LibrarySummary
      └─ loose:    identifier → LibrarySummary | HtmlSummary

Libraries and HTML units own an ordered list of `MessageSummary` records.
Every identifier maps to exactly one summary object: the ``get_or_create_*``
helpers reuse existing entries instead of replacing them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from tallymark.config.logging import TallymarkLogger, get_logger
from tallymark.core.identity import Scope

if TYPE_CHECKING:
    from tallymark.core.identity import UnitIdentity
    from tallymark.diagnostic.span import SourceSpan
    from tallymark.summary.visitor import SummaryVisitor

logger: TallymarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class MessageSummary:
    """One reported diagnostic.

    Attributes:
        kind (str): Category tag of the diagnostic.
        severity (str): Lower-cased severity name (e.g. ``"warning"``).
        location (SourceSpan): Where the diagnostic was reported.
        text (str): The message text.
    """

    kind: str
    severity: str
    location: SourceSpan
    text: str

    def accept(self, visitor: SummaryVisitor) -> None:
        visitor.visit_message(self)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this message."""
        return {
            "kind": self.kind,
            "severity": self.severity,
            "location": self.location.to_dict(),
            "text": self.text,
        }


@dataclass
class LibrarySummary:
    """Summary of one analyzed library.

    Attributes:
        identifier (str): Stringified unit identifier.
        lines (int): Accumulated line count of the library's sources.
        messages (list[MessageSummary]): Messages in report order.
    """

    identifier: str
    lines: int = 0
    messages: list[MessageSummary] = field(default_factory=lambda: [])

    def accept(self, visitor: SummaryVisitor) -> None:
        visitor.visit_library(self)

    def clear(self) -> None:
        """Drop all messages and reset the line count, keeping the object."""
        self.messages.clear()
        self.lines = 0

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this library."""
        return {
            "type": "library",
            "identifier": self.identifier,
            "lines": self.lines,
            "messages": [m.to_dict() for m in self.messages],
        }


@dataclass
class HtmlSummary:
    """Summary of one analyzed HTML document (no line count is tracked)."""

    identifier: str
    messages: list[MessageSummary] = field(default_factory=lambda: [])

    def accept(self, visitor: SummaryVisitor) -> None:
        visitor.visit_html(self)

    def clear(self) -> None:
        """Drop all messages."""
        self.messages.clear()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this HTML unit."""
        return {
            "type": "html",
            "identifier": self.identifier,
            "messages": [m.to_dict() for m in self.messages],
        }


UnitSummary = Union[LibrarySummary, HtmlSummary]


@dataclass
class PackageSummary:
    """Summary of the libraries of one distribution package."""

    name: str
    libraries: dict[str, LibrarySummary] = field(default_factory=lambda: {})

    def accept(self, visitor: SummaryVisitor) -> None:
        visitor.visit_package(self)

    def get_or_create_library(self, identifier: str) -> LibrarySummary:
        """Return the library summary for ``identifier``, creating it if needed."""
        lib: LibrarySummary | None = self.libraries.get(identifier)
        if lib is None:
            lib = LibrarySummary(identifier)
            self.libraries[identifier] = lib
            logger.trace("Created library %s in package %s", identifier, self.name)
        return lib

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this package."""
        return {
            "name": self.name,
            "libraries": {k: v.to_dict() for k, v in self.libraries.items()},
        }


@dataclass
class GlobalSummary:
    """Root of the summary tree for one reporting session."""

    system: dict[str, LibrarySummary] = field(default_factory=lambda: {})
    packages: dict[str, PackageSummary] = field(default_factory=lambda: {})
    loose: dict[str, UnitSummary] = field(default_factory=lambda: {})

    def accept(self, visitor: SummaryVisitor) -> None:
        visitor.visit_global(self)

    def get_or_create_package(self, name: str) -> PackageSummary:
        """Return the package summary for ``name``, creating it if needed."""
        package: PackageSummary | None = self.packages.get(name)
        if package is None:
            package = PackageSummary(name)
            self.packages[name] = package
            logger.debug("Created package summary %s", name)
        return package

    def get_or_create_library(self, identity: UnitIdentity) -> UnitSummary:
        """Return the summary for a resolved library identity, creating it if needed.

        A loose identifier that is already summarized as an HTML unit keeps
        its `HtmlSummary`, which is returned as is: each identifier maps to a
        single summary object.

        Args:
            identity (UnitIdentity): The resolved identity of the library.

        Returns:
            UnitSummary: The summary object for the identifier; a `LibrarySummary`
                unless the loose identifier was first entered as HTML.
        """
        if identity.scope is Scope.PACKAGE and identity.package is not None:
            return self.get_or_create_package(identity.package).get_or_create_library(
                identity.uri
            )

        container: dict[str, Any] = self.system if identity.scope is Scope.SYSTEM else self.loose
        unit: UnitSummary | None = container.get(identity.uri)
        if unit is None:
            unit = LibrarySummary(identity.uri)
            container[identity.uri] = unit
            logger.trace("Created %s library %s", identity.scope.value, identity.uri)
        elif isinstance(unit, HtmlSummary):
            logger.debug("Reusing html unit %s as a library", identity.uri)
        return unit

    def get_or_create_html(self, identifier: str) -> UnitSummary:
        """Return the loose unit summary for ``identifier``, creating an HTML one if needed."""
        unit: UnitSummary | None = self.loose.get(identifier)
        if unit is None:
            unit = HtmlSummary(identifier)
            self.loose[identifier] = unit
            logger.trace("Created html unit %s", identifier)
        return unit

    def iter_libraries(self) -> list[LibrarySummary]:
        """Return every library summary (system, then packages, then loose)."""
        libs: list[LibrarySummary] = list(self.system.values())
        for package in self.packages.values():
            libs.extend(package.libraries.values())
        libs.extend(u for u in self.loose.values() if isinstance(u, LibrarySummary))
        return libs

    def merge(self, other: GlobalSummary) -> None:
        """Fold ``other`` into this summary.

        Entries are get-or-created by identifier; line counts are added and
        messages appended in ``other``'s order. Used to combine summaries
        produced by independent workers.
        """
        for ident, lib in other.system.items():
            _merge_unit(self.system.setdefault(ident, LibrarySummary(ident)), lib)
        for name, package in other.packages.items():
            target: PackageSummary = self.get_or_create_package(name)
            for ident, lib in package.libraries.items():
                _merge_unit(target.get_or_create_library(ident), lib)
        for ident, unit in other.loose.items():
            fresh: UnitSummary = (
                LibrarySummary(ident) if isinstance(unit, LibrarySummary) else HtmlSummary(ident)
            )
            _merge_unit(self.loose.setdefault(ident, fresh), unit)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of the whole tree."""
        return {
            "system": {k: v.to_dict() for k, v in self.system.items()},
            "packages": {k: v.to_dict() for k, v in self.packages.items()},
            "loose": {k: v.to_dict() for k, v in self.loose.items()},
        }


def _merge_unit(target: UnitSummary, source: UnitSummary) -> None:
    if isinstance(target, LibrarySummary) and isinstance(source, LibrarySummary):
        target.lines += source.lines
    target.messages.extend(source.messages)
