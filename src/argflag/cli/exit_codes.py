# topmark:header:start
#
#   project      : ArgFlag
#   file         : exit_codes.py
#   file_relpath : src/argflag/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the ArgFlag CLI application."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ArgFlag CLI.

    Attributes:
        SUCCESS (int): The command completed without errors.
        FAILURE (int): The command ran but an operation failed (e.g. a rejected
            value replacement), or an error note requested process exit.
        USAGE_ERROR (int): Invalid command-line invocation (bad option values,
            conflicting options). Matches ``EX_USAGE`` from ``sysexits.h``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
