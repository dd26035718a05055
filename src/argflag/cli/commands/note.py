# topmark:header:start
#
#   project      : ArgFlag
#   file         : note.py
#   file_relpath : src/argflag/cli/commands/note.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ArgFlag `note` command.

Prints a diagnostic note. Without ``--error`` the message is printed as a
[`Note`][argflag.diagnostic.model.Note]; with ``--error`` it is scoped as an
[`ErrorNote`][argflag.diagnostic.model.ErrorNote], which prints when the scope
ends, or exits the process with status 1 when ``--exit`` is also given.

Plain notes are informational and are dropped by ``-q``; error notes are always
printed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from argflag.cli.cli_types import EnumChoiceParam
from argflag.cli.errors import ArgflagUsageError
from argflag.diagnostic.model import ErrorNote, ErrType, Note

if TYPE_CHECKING:
    from argflag.cli.console import ClickConsole


@click.command(
    name="note",
    help="Print MESSAGE as a note, or as an error note with --error.",
)
@click.argument("message")
@click.option(
    "--error",
    "err_type",
    type=EnumChoiceParam(ErrType),
    default=None,
    help="Print an error note of this type instead of a plain note.",
)
@click.option(
    "--exit",
    "exit_process",
    is_flag=True,
    default=False,
    help="Exit with status 1 after printing the error note (requires --error).",
)
def note_command(
    *,
    message: str,
    err_type: ErrType | None,
    exit_process: bool,
) -> None:
    """Print a note or an error note.

    Args:
        message (str): The note text.
        err_type (ErrType | None): Error type; ``None`` prints a plain note.
        exit_process (bool): Whether the error note terminates the process.

    Raises:
        ArgflagUsageError: If ``--exit`` is given without ``--error``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if err_type is None:
        if exit_process:
            raise ArgflagUsageError("'--exit' requires '--error'.")
        console.notice(str(Note(message)))
        return

    with ErrorNote(
        message,
        err_type,
        exit_process,
        out=console.out,
        color=console.enable_color,
    ) as err_note:
        err_note.exit()
