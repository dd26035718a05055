# topmark:header:start
#
#   project      : ArgFlag
#   file         : __init__.py
#   file_relpath : src/argflag/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ArgFlag CLI package.

This package groups the Click command definitions and supporting utilities
for the ArgFlag command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        argflag = "argflag.cli.main:cli"

All subcommands live in [`argflag.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
