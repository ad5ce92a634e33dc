# tallymark:header:start
#
#   project      : TallyMark
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Tests for the TRACE level, environment override and logger setup."""

from __future__ import annotations

import logging

import pytest

from tallymark.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    TallymarkLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from tests.conftest import parametrize


def test_trace_level_is_below_debug() -> None:
    assert TRACE_LEVEL < logging.DEBUG
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_get_logger_returns_tallymark_logger() -> None:
    assert isinstance(get_logger("tallymark.tests.fresh"), TallymarkLogger)


def test_trace_is_emitted(caplog: pytest.LogCaptureFixture) -> None:
    logger: TallymarkLogger = get_logger("tallymark.tests.trace")
    with caplog.at_level(TRACE_LEVEL, logger="tallymark.tests.trace"):
        logger.trace("value=%d", 7)
    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [("TRACE", "value=7")]


@parametrize(
    ("value", "expected"),
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("Fatal", logging.CRITICAL),
        ("10", 10),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    monkeypatch.setenv("TALLYMARK_LOG_LEVEL", value)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    assert resolve_env_log_level() is None


def test_setup_logging_installs_single_chalk_handler() -> None:
    root: logging.Logger = logging.getLogger()
    saved_level: int = root.level
    saved_handlers: list[logging.Handler] = root.handlers[:]
    try:
        setup_logging(level=logging.INFO)
        setup_logging(level=logging.INFO)
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ChalkFormatter)
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
