# tallymark:header:start
#
#   project      : TallyMark
#   file         : report.py
#   file_relpath : src/tallymark/cli/commands/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""TallyMark `report` command.

Replays recorded analysis event streams (NDJSON) into a `SummaryReporter` and
prints the resulting summary table (or JSON).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from tallymark.cli.errors import (
    TallymarkConfigError,
    TallymarkInputError,
    TallymarkReportError,
)
from tallymark.cli.options import OutputFormat
from tallymark.config.logging import TallymarkLogger, get_logger
from tallymark.config.model import Config, MutableConfig, OrphanPolicy
from tallymark.core.errors import NoCurrentUnitError, ReplayError, TableError
from tallymark.diagnostic.model import Severity
from tallymark.reporting.replay import replay_lines
from tallymark.reporting.reporter import SummaryReporter
from tallymark.reporting.summary_text import summary_to_dict, summary_to_string

if TYPE_CHECKING:
    from tallymark.cli.console import Console

logger: TallymarkLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


def build_config(
    *,
    config_path: Path | None,
    min_level: str | None,
    on_orphan: str | None,
) -> Config:
    """Merge defaults, discovered config files, ``--config`` and CLI overrides.

    Raises:
        TallymarkConfigError: If ``--config`` does not exist.
        click.BadParameter: If ``--min-level`` is not a known severity.
    """
    if config_path is not None and not config_path.is_file():
        raise TallymarkConfigError(f"Config file not found: {config_path}")

    level: Severity | None = Severity.from_name(min_level)
    if min_level is not None and level is None:
        raise click.BadParameter(f"unknown severity {min_level!r}", param_hint="--min-level")

    overrides: dict[str, Any] = {
        "min_level": level,
        "on_orphan_message": OrphanPolicy.from_name(on_orphan),
    }
    draft: MutableConfig = MutableConfig.load_merged(
        search_dir=Path.cwd(),
        extra_config_files=[config_path] if config_path is not None else None,
        overrides=overrides,
    )
    return draft.freeze()


def replay_files(reporter: SummaryReporter, files: tuple[str, ...]) -> int:
    """Replay every event file (``-`` is stdin) into ``reporter``.

    Raises:
        TallymarkInputError: If a file cannot be read or replayed.
    """
    applied: int = 0
    for name in files or (STDIN_MARKER,):
        try:
            if name == STDIN_MARKER:
                applied += replay_lines(reporter, click.get_text_stream("stdin"))
            else:
                with open(name, encoding="utf-8") as fh:
                    applied += replay_lines(reporter, fh)
        except OSError as e:
            raise TallymarkInputError(f"Cannot read {name}: {e.strerror or e}") from e
        except (ReplayError, NoCurrentUnitError) as e:
            raise TallymarkInputError(f"{name}: {e}") from e
    return applied


@click.command(
    name="report",
    help="Replay analysis event streams (NDJSON) and print the summary report.",
)
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False, allow_dash=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TEXT.value,
    show_default=True,
    help="Output format.",
)
@click.option(
    "--min-level",
    "min_level",
    default=None,
    help="Only summarize messages at or above this severity (e.g. warning, severe).",
)
@click.option(
    "--on-orphan",
    "on_orphan",
    type=click.Choice([p.value for p in OrphanPolicy]),
    default=None,
    help="What to do with messages logged outside any unit.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Additional config file (applied after discovered ones).",
)
@click.pass_context
def report_command(
    ctx: click.Context,
    files: tuple[str, ...],
    output_format: str,
    min_level: str | None,
    on_orphan: str | None,
    config_path: Path | None,
) -> None:
    """Replay event streams and print the summary report.

    Args:
        ctx (click.Context): Click context holding the console and verbosity.
        files (tuple[str, ...]): Event files; stdin when empty or ``-``.
        output_format (str): ``text`` or ``json``.
        min_level (str | None): Severity threshold override.
        on_orphan (str | None): Orphan message policy override.
        config_path (Path | None): Extra config file.
    """
    ctx.ensure_object(dict)
    console: Console = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    config: Config = build_config(config_path=config_path, min_level=min_level, on_orphan=on_orphan)
    logger.debug("Effective config: %s", config)

    reporter = SummaryReporter(config)
    applied: int = replay_files(reporter, files)
    if verbosity > 0:
        console.warn(f"Replayed {applied} event(s) from {len(files) or 1} stream(s)")

    try:
        if output_format == OutputFormat.JSON.value:
            rendered: str = json.dumps(summary_to_dict(reporter.result), indent=2) + "\n"
        else:
            rendered = summary_to_string(reporter.result)
    except TableError as e:
        raise TallymarkReportError(f"Cannot render report: {e}") from e

    # -q: the exit status is the only output
    if verbosity < 0:
        return
    console.print(rendered, nl=False)
