# topmark:header:start
#
#   project      : ArgFlag
#   file         : render.py
#   file_relpath : src/argflag/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ArgFlag `render` command.

Builds a single [`FlagDescriptor`][argflag.flag.descriptor.FlagDescriptor] from
command-line options and prints its rendering. Useful for previewing how a flag
will be documented.

Examples:
    ```bash
    argflag render --name output --arg -o --arg --output \\
        --desc "Specify the output file" --default output.txt
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from argflag.cli.cli_types import EnumChoiceParam, coerce_value
from argflag.cli.errors import ArgflagUsageError
from argflag.cli.exit_codes import ExitCode
from argflag.config.logging import get_logger
from argflag.flag.descriptor import FlagDescriptor
from argflag.flag.errors import FlagError
from argflag.flag.value import ValueKind

if TYPE_CHECKING:
    from argflag.cli.console import ClickConsole
    from argflag.config.logging import ArgflagLogger

logger: ArgflagLogger = get_logger(__name__)


def _kind_summary(descriptor: FlagDescriptor) -> str:
    value = descriptor.get_value()
    return "none" if value is None else value.kind.key


def _coerce_option(kind: ValueKind, raw: str, option_name: str) -> object:
    """Convert an option value, mapping conversion errors to a usage error."""
    try:
        return coerce_value(kind, raw)
    except ValueError as exc:
        raise ArgflagUsageError(f"Invalid value for '{option_name}': {exc}") from exc


@click.command(
    name="render",
    help="Build a flag descriptor from the given options and print its rendering.",
)
@click.option("--name", "name", required=True, help="Flag name, e.g. 'verbose'.")
@click.option(
    "--arg",
    "args",
    multiple=True,
    help="Accepted argument spelling (repeatable, kept in order), e.g. '-v'.",
)
@click.option("--desc", "desc", default="", help="Human-readable description.")
@click.option("--notes", "notes", default=None, help="Optional notes, e.g. 'To be deprecated'.")
@click.option("--default", "default_text", default=None, help="Default value of the flag.")
@click.option(
    "--type",
    "value_kind",
    type=EnumChoiceParam(ValueKind, ValueKind.supported()),
    default=ValueKind.TEXT.key,
    show_default=True,
    help="Type of the --default and --set values.",
)
@click.option(
    "--set",
    "set_text",
    default=None,
    help="Replace the value after construction (fails when there is no --default).",
)
def render_command(
    *,
    name: str,
    args: tuple[str, ...],
    desc: str,
    notes: str | None,
    default_text: str | None,
    value_kind: ValueKind,
    set_text: str | None,
) -> None:
    """Render a flag descriptor.

    Args:
        name (str): Flag name.
        args (tuple[str, ...]): Accepted argument spellings.
        desc (str): Description.
        notes (str | None): Optional notes.
        default_text (str | None): Default value as text, converted to ``value_kind``.
        value_kind (ValueKind): Type of the default and replacement values.
        set_text (str | None): Replacement value as text, converted to ``value_kind``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    value: object | None = None
    if default_text is not None:
        value = _coerce_option(value_kind, default_text, "--default")

    descriptor = FlagDescriptor(name, args, desc, notes, value)
    logger.debug("Rendering %r", descriptor)
    console.info(f"Flag '{name}': {len(args)} argument(s), value: {_kind_summary(descriptor)}")
    console.debug(repr(descriptor))

    if set_text is not None:
        new_value: object = _coerce_option(value_kind, set_text, "--set")
        try:
            descriptor.set_value(new_value)
        except FlagError as exc:
            console.warn(f"Cannot set the value of flag '{name}': {exc.label}")
            console.print(descriptor.format())
            ctx.exit(ExitCode.FAILURE)
        console.info(f"Value replaced, now {_kind_summary(descriptor)}")

    console.print(descriptor.format())
