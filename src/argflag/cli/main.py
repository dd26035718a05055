# topmark:header:start
#
#   project      : ArgFlag
#   file         : main.py
#   file_relpath : src/argflag/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ArgFlag CLI.

Key ideas:
- Group-level options (verbosity, color) are resolved once into a shared console in ``ctx.obj``.
- Subcommands read the shared console from ``ctx.obj["console"]``.
"""

from __future__ import annotations

import click

from argflag.cli.commands.note import note_command
from argflag.cli.commands.render import render_command
from argflag.cli.commands.version import version_command
from argflag.cli.console import ClickConsole
from argflag.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from argflag.config.logging import get_logger, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    verbosity_level: int = resolve_verbosity(verbose, quiet)

    # Internal logging follows ARGFLAG_LOG_LEVEL, not -v/-q
    setup_logging()

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color, verbosity_level=verbosity_level)
    logger.debug("CLI state: verbosity=%d color=%s", verbosity_level, enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ArgFlag CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ArgFlag CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.notice("Hint: use 'argflag render --name NAME --arg ARG' to render a flag.")
        console.notice()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(render_command)

cli.add_command(note_command)

if __name__ == "__main__":
    cli()
