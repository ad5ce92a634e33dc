# tallymark:header:start
#
#   project      : TallyMark
#   file         : __main__.py
#   file_relpath : src/tallymark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Module entry point for running TallyMark via ``python -m tallymark``.

Delegates to :func:`tallymark.cli.main.cli`, the same entry point as the
``tallymark`` console script.

Examples:
    Summarize a recorded event stream::

        python -m tallymark report events.ndjson
"""

from __future__ import annotations

from tallymark.cli.main import cli

if __name__ == "__main__":
    cli()
