# topmark:header:start
#
#   project      : ArgFlag
#   file         : options.py
#   file_relpath : src/argflag/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Group-level options of the ArgFlag CLI: verbosity and color.

``-v``/``-q`` resolve to a `logging` level that `ClickConsole` uses to filter
user-facing lines; ``--color``/``--no-color`` resolve to a single on/off switch.
"""

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from argflag.cli.errors import ArgflagUsageError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Map the ``-v``/``-q`` counts to the console verbosity level.

    ``-v`` shows INFO lines, ``-vv`` (or more) also DEBUG lines, ``-q`` hides
    notices and warnings (ERROR). The default is WARNING.

    Raises:
        ArgflagUsageError: If both options are given.
    """
    if verbose_count and quiet_count:
        raise ArgflagUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count:
        return logging.ERROR
    return {0: logging.WARNING, 1: logging.INFO}.get(verbose_count, logging.DEBUG)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Show more detail: -v adds summaries, -vv adds internal details.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only print results and errors (no hints, notes or warnings).",
    )(f)
    return f


class ColorMode(str, Enum):
    """Requested color behavior."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Return whether output is colored.

    An explicit ALWAYS/NEVER wins. Otherwise ``FORCE_COLOR`` (non-zero) turns
    color on, ``NO_COLOR`` turns it off, and finally a TTY on stdout turns it on.
    """
    if cli_mode is ColorMode.ALWAYS:
        return True
    if cli_mode is ColorMode.NEVER:
        return False
    if os.getenv("FORCE_COLOR") not in (None, "", "0"):
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        callback=lambda _ctx, _param, value: ColorMode(value) if value else None,
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Same as --color=never.",
    )(f)
    return f
