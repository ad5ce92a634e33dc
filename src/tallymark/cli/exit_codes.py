# tallymark:header:start
#
#   project      : TallyMark
#   file         : exit_codes.py
#   file_relpath : src/tallymark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Standardized exit codes used by the TallyMark CLI."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for TallyMark CLI.

    Attributes:
        SUCCESS (int): The report was produced.
        FAILURE (int): Generic failure.
        USAGE_ERROR (int): Invalid command-line usage (Click's own usage errors also use 2).
        CONFIG_ERROR (int): Invalid or unreadable configuration.
        INPUT_ERROR (int): An event stream could not be read or replayed.
        REPORT_ERROR (int): The report could not be assembled.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
    CONFIG_ERROR = 3
    INPUT_ERROR = 4
    REPORT_ERROR = 5
