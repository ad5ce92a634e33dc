# tallymark:header:start
#
#   project      : TallyMark
#   file         : console.py
#   file_relpath : src/tallymark/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Console abstraction for user-facing program output.

This module provides a `Console` class that separates CLI output from
internal logging. Use this for messages intended for end users, while
reserving `logging` for diagnostics.
"""

from __future__ import annotations

from typing import Any

import click


class Console:
    """Program-output console, independent from the logger.

    Output goes through `click.echo`, so it lands in the streams Click
    manages (including `click.testing.CliRunner` captures).

    Attributes:
        enable_color (bool): Whether to emit ANSI color codes.
    """

    def __init__(self, *, enable_color: bool = True) -> None:
        self.enable_color = enable_color

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text: Message text.
            nl: If True, append a newline.
        """
        click.echo(text, nl=nl, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.echo(text, nl=nl, err=True, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.echo(text, nl=nl, err=True, color=self.enable_color)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style (plain text if color is disabled)."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
