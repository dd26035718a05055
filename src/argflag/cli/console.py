# topmark:header:start
#
#   project      : ArgFlag
#   file         : console.py
#   file_relpath : src/argflag/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""User-facing output of the ArgFlag CLI, filtered by verbosity.

Every line the CLI prints goes through `ClickConsole`. Each method has a fixed
importance, compared against the verbosity level resolved from ``-v``/``-q``
(a `logging` level, WARNING by default):

| Method | Stream | Shown when |
| --- | --- | --- |
| `print` | stdout | always (the command's result) |
| `notice` | stdout | unless ``-q`` |
| `info` | stderr | ``-v`` or more |
| `debug` | stderr | ``-vv`` or more |
| `warn` | stderr | unless ``-q`` |
| `error` | stderr | always |

Internal diagnostics use `logging` (see `argflag.config.logging`) and are not
affected by these options.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Verbosity-aware console writing through `click.echo`.

    Args:
        enable_color (bool): Whether ANSI styling is emitted.
        verbosity_level (int): Lowest importance (a `logging` level) still shown.
        out (TextIO | None): Standard output stream; `sys.stdout` by default.
        err (TextIO | None): Diagnostic stream; `sys.stderr` by default.
    """

    enable_color: bool
    verbosity_level: int
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        verbosity_level: int = logging.WARNING,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.verbosity_level = verbosity_level
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def shows(self, level: int) -> bool:
        """Return True if lines of importance ``level`` are printed."""
        return level >= self.verbosity_level

    def _echo(self, level: int, text: str, stream: TextIO, **style: Any) -> None:
        if not self.shows(level):
            return
        if style and self.enable_color:
            text = click.style(text, **style)
        click.echo(text, file=stream, color=self.enable_color)

    def print(self, text: str = "") -> None:
        """Print the command's result to stdout, regardless of verbosity."""
        self._echo(logging.CRITICAL, text, self.out)

    def notice(self, text: str = "") -> None:
        """Print a secondary stdout line (hints, headings); dropped by ``-q``."""
        self._echo(logging.WARNING, text, self.out)

    def info(self, text: str) -> None:
        """Print extra detail to stderr when run with ``-v``."""
        self._echo(logging.INFO, text, self.err, dim=True)

    def debug(self, text: str) -> None:
        """Print internal detail to stderr when run with ``-vv``."""
        self._echo(logging.DEBUG, text, self.err, dim=True)

    def warn(self, text: str) -> None:
        """Print a warning to stderr; dropped by ``-q``."""
        self._echo(logging.WARNING, text, self.err, fg="yellow")

    def error(self, text: str) -> None:
        """Print an error to stderr, regardless of verbosity."""
        self._echo(logging.CRITICAL, text, self.err, fg="bright_red")

    def styled(self, text: str, **style: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged when color is off."""
        return click.style(text, **style) if self.enable_color else text
