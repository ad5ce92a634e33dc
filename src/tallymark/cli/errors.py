# tallymark:header:start
#
#   project      : TallyMark
#   file         : errors.py
#   file_relpath : src/tallymark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Exceptions for TallyMark CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from tallymark.cli.exit_codes import ExitCode


class TallymarkCliError(click.ClickException):
    """Base class for all TallyMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is not None:
            console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
            return
        super().show(file)


class TallymarkUsageError(TallymarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TallymarkConfigError(TallymarkCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class TallymarkInputError(TallymarkCliError):
    """Error for unreadable or malformed event streams."""

    exit_code = ExitCode.INPUT_ERROR


class TallymarkReportError(TallymarkCliError):
    """Error raised when the report cannot be assembled."""

    exit_code = ExitCode.REPORT_ERROR
