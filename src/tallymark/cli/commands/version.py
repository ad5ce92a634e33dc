# tallymark:header:start
#
#   project      : TallyMark
#   file         : version.py
#   file_relpath : src/tallymark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""TallyMark `version` command.

Prints the current TallyMark version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tallymark.constants import TALLYMARK_VERSION

if TYPE_CHECKING:
    from tallymark.cli.console import Console


@click.command(
    name="version",
    help="Show the current version of TallyMark.",
)
def version_command() -> None:
    """Show the current version of TallyMark."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: Console = ctx.obj["console"]
    console.print(f"tallymark {TALLYMARK_VERSION}")
