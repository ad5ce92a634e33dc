# tallymark:header:start
#
#   project      : TallyMark
#   file         : model.py
#   file_relpath : src/tallymark/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Inbound diagnostic types for TallyMark.

This module defines the records the analysis driver hands to a reporter:

Sections:
    * Severity: ordered severity levels with associated terminal colors and
      a mapping onto the standard `logging` levels.
    * Message: one diagnostic, located by offsets into the current source.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from tallymark.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable


@functools.total_ordering
class Severity(Enum):
    """Severity levels of analyzer messages.

    Levels are ordered by their numeric value: ``ALL`` < ``FINEST`` < ... <
    ``SHOUT`` < ``OFF``. ``ALL`` and ``OFF`` are thresholds only; a threshold of
    ``ALL`` records everything, ``OFF`` records nothing.
    """

    ALL = 0
    FINEST = 300
    FINER = 400
    FINE = 500
    CONFIG = 700
    INFO = 800
    WARNING = 900
    SEVERE = 1000
    SHOUT = 1200
    OFF = 2000

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.value < other.value

    @property
    def label(self) -> str:
        """Return the lower-cased level name used in summaries (e.g. ``"severe"``)."""
        return self.name.lower()

    @property
    def logging_level(self) -> int:
        """Return the standard `logging` level that corresponds to this severity."""
        if self >= Severity.SHOUT:
            return logging.CRITICAL
        if self >= Severity.SEVERE:
            return logging.ERROR
        if self >= Severity.WARNING:
            return logging.WARNING
        if self >= Severity.CONFIG:
            return logging.INFO
        if self >= Severity.FINE:
            return logging.DEBUG
        return TRACE_LEVEL

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this level.
        """
        if self >= Severity.SHOUT:
            return cast("Callable[[str], str]", chalk.red_bright.bold)
        if self >= Severity.SEVERE:
            return cast("Callable[[str], str]", chalk.red_bright)
        if self >= Severity.WARNING:
            return cast("Callable[[str], str]", chalk.yellow)
        if self >= Severity.CONFIG:
            return cast("Callable[[str], str]", chalk.blue)
        return cast("Callable[[str], str]", chalk.gray)

    @classmethod
    def from_name(cls, name: str | None) -> Severity | None:
        """Look up a severity by (case-insensitive) name.

        ``"error"`` is accepted as an alias for ``SEVERE``.

        Args:
            name (str | None): Level name such as ``"warning"``.

        Returns:
            Severity | None: The matching level, or None if ``name`` is unknown or None.
        """
        if name is None:
            return None
        key: str = name.strip().upper()
        if key == "ERROR":
            return cls.SEVERE
        try:
            return cls[key]
        except KeyError:
            return None


@dataclass(frozen=True)
class Message:
    """A message (error or warning) produced by an analyzer, with its location.

    The location is given as offsets into the source of the compilation unit
    that is current when the message is logged.

    Attributes:
        kind (str): Category tag of the diagnostic (e.g. ``"TypeError"``).
        text (str): Message description.
        level (Severity): Severity of the message.
        begin (int): Offset where the message begins in the current source.
        end (int): Offset where the message ends in the current source.
    """

    kind: str
    text: str
    level: Severity = Severity.SEVERE
    begin: int = 0
    end: int = 0
