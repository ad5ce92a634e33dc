# tallymark:header:start
#
#   project      : TallyMark
#   file         : test_identity.py
#   file_relpath : tests/core/test_identity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Tests for unit identifier classification."""

from __future__ import annotations

from tallymark.core.identity import Scope, UnitIdentity, resolve_unit_identity, split_scheme
from tests.conftest import parametrize


def test_package_identifier_resolves_to_first_segment() -> None:
    identity: UnitIdentity = resolve_unit_identity("package:foo/bar.dart")
    assert identity == UnitIdentity("package:foo/bar.dart", Scope.PACKAGE, "foo")


def test_nested_package_path_uses_first_segment_only() -> None:
    identity: UnitIdentity = resolve_unit_identity("package:foo/src/deep/baz.dart")
    assert identity.package == "foo"


def test_system_identifier() -> None:
    identity: UnitIdentity = resolve_unit_identity("dart:core")
    assert identity.scope is Scope.SYSTEM
    assert identity.package is None


def test_scheme_is_case_insensitive() -> None:
    assert resolve_unit_identity("DART:async").scope is Scope.SYSTEM
    assert resolve_unit_identity("Package:foo/a.dart").package == "foo"


def test_stored_identifier_has_lower_case_scheme() -> None:
    assert resolve_unit_identity("DART:async").uri == "dart:async"
    assert resolve_unit_identity("Package:Foo/A.dart").uri == "package:Foo/A.dart"
    assert resolve_unit_identity("FILE:///X.dart").uri == "file:///X.dart"
    assert resolve_unit_identity("DART:core") == resolve_unit_identity("dart:core")


@parametrize(
    "uri",
    [
        "file:///a.dart",
        "a.dart",
        "",
        "package:",
        "package:/bar.dart",
        ":nothing",
        "1abc:def",
        "http://example.com/x.dart",
    ],
)
def test_other_identifiers_are_loose(uri: str) -> None:
    """Unparseable or foreign identifiers never raise and resolve to loose."""
    identity: UnitIdentity = resolve_unit_identity(uri)
    assert identity.scope is Scope.LOOSE
    assert identity.package is None
    assert identity.uri == uri


def test_non_string_input_is_stringified() -> None:
    identity: UnitIdentity = resolve_unit_identity(42)
    assert identity == UnitIdentity("42", Scope.LOOSE)


def test_custom_schemes() -> None:
    identity: UnitIdentity = resolve_unit_identity(
        "pkg:acme/lib.py", system_schemes=("builtin",), package_scheme="pkg"
    )
    assert identity.scope is Scope.PACKAGE
    assert identity.package == "acme"
    assert resolve_unit_identity("builtin:os", system_schemes=("builtin",)).scope is Scope.SYSTEM
    assert resolve_unit_identity("dart:core", system_schemes=("builtin",)).scope is Scope.LOOSE


def test_split_scheme() -> None:
    assert split_scheme("package:foo/bar.dart") == ("package", "foo/bar.dart")
    assert split_scheme("no-scheme") is None
    assert split_scheme("dart:") is None
