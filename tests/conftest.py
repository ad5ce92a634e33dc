# tallymark:header:start
#
#   project      : TallyMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Pytest configuration for the TallyMark test suite.

Sets up global fixtures, typed mark wrappers and a verbose logging
configuration for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `tallymark.config.MutableConfig`, then `freeze()` into a
    `tallymark.config.Config` before handing them to a reporter.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from tallymark.config import Config, MutableConfig, logging
from tallymark.diagnostic.model import Message, Severity
from tallymark.reporting.reporter import SummaryReporter

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_tallymark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure TallyMark's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove the environment override.
    """
    monkeypatch.delenv("TALLYMARK_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for the whole test run (output is captured by pytest)."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and ``overrides``.

    Args:
        **overrides (Any): `MutableConfig` field values to set.

    Returns:
        Config: The frozen configuration.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()


def msg(kind: str = "TypeError", level: Severity = Severity.SEVERE, **kwargs: Any) -> Message:
    """Shorthand to build a `Message`."""
    return Message(kind=kind, text=kwargs.pop("text", f"{kind} here"), level=level, **kwargs)


@pytest.fixture
def reporter() -> SummaryReporter:
    """A `SummaryReporter` with the default configuration."""
    return SummaryReporter()
