# topmark:header:start
#
#   project      : ArgFlag
#   file         : version.py
#   file_relpath : src/argflag/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ArgFlag `version` command.

Prints the current ArgFlag version as installed in the active Python environment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from argflag.constants import ARGFLAG_VERSION

if TYPE_CHECKING:
    from argflag.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of ArgFlag.",
)
def version_command() -> None:
    """Show the current version of ArgFlag.

    With ``-v`` on the group, a heading is printed above the version.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if console.shows(logging.INFO):
        console.print(console.styled("ArgFlag version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(ARGFLAG_VERSION, bold=True)}")
    else:
        console.print(console.styled(ARGFLAG_VERSION, bold=True))
