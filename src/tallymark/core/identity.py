# tallymark:header:start
#
#   project      : TallyMark
#   file         : identity.py
#   file_relpath : src/tallymark/core/identity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Classification of source-unit identifiers.

A unit identifier is URI-like (``scheme:path``). Identifiers are sorted into
one of three scopes:

- ``system``: units provided by the platform (e.g. ``dart:core``),
- ``package``: units that belong to a named distribution package
  (e.g. ``package:foo/bar.dart`` belongs to ``foo``),
- ``loose``: anything else, including identifiers that cannot be parsed.

Resolution is pure and never raises: reporting must not fail because of an
odd identifier.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from tallymark.config.logging import TallymarkLogger, get_logger
from tallymark.constants import DEFAULT_PACKAGE_SCHEME, DEFAULT_SYSTEM_SCHEMES

logger: TallymarkLogger = get_logger(__name__)


class Scope(Enum):
    """Container a unit is summarized under."""

    SYSTEM = "system"
    PACKAGE = "package"
    LOOSE = "loose"


@dataclass(frozen=True)
class UnitIdentity:
    """Resolved identity of a source unit.

    Attributes:
        uri (str): The stringified identifier, with its scheme lower-cased.
        scope (Scope): The container the unit belongs to.
        package (str | None): Package name; only set for `Scope.PACKAGE`.
    """

    uri: str
    scope: Scope
    package: str | None = None


def split_scheme(uri: str) -> tuple[str, str] | None:
    """Split ``uri`` into ``(scheme, path)``.

    Returns:
        tuple[str, str] | None: The scheme (lower-cased) and the path, or None when
            there is no valid scheme or the path is empty.
    """
    scheme, sep, path = uri.partition(":")
    if not sep or not scheme or not path:
        return None
    if not scheme[0].isalpha() or not all(c.isalnum() or c in "+-." for c in scheme):
        return None
    return scheme.lower(), path


def resolve_unit_identity(
    uri: object,
    *,
    system_schemes: Iterable[str] = DEFAULT_SYSTEM_SCHEMES,
    package_scheme: str = DEFAULT_PACKAGE_SCHEME,
) -> UnitIdentity:
    """Classify a unit identifier into a `Scope`.

    Args:
        uri (object): The unit identifier, typically a ``str`` such as
            ``"package:foo/bar.dart"``. Other objects are stringified.
        system_schemes (Iterable[str]): Schemes of platform-provided units.
        package_scheme (str): Scheme of units scoped to a package; the package
            name is the first path segment.

    Returns:
        UnitIdentity: The resolved identity. Malformed identifiers resolve to
            `Scope.LOOSE`.
    """
    text: str = str(uri)
    parts: tuple[str, str] | None = split_scheme(text)
    if parts is None:
        logger.trace("Unit identifier %r has no scheme; treating as loose", text)
        return UnitIdentity(uri=text, scope=Scope.LOOSE)

    scheme, path = parts
    text = f"{scheme}:{path}"
    if scheme in {s.lower() for s in system_schemes}:
        return UnitIdentity(uri=text, scope=Scope.SYSTEM)

    if scheme == package_scheme.lower():
        name: str = path.split("/", 1)[0]
        if name:
            return UnitIdentity(uri=text, scope=Scope.PACKAGE, package=name)
        logger.trace("Package identifier %r has no package name; treating as loose", text)

    return UnitIdentity(uri=text, scope=Scope.LOOSE)
