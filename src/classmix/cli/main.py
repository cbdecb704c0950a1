# topmark:header:start
#
#   project      : Classmix
#   file         : main.py
#   file_relpath : src/classmix/cli/main.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Click entry point for the ``classmix`` command.

Group-level options are resolved once and stored in ``ctx.obj``:

- ``console``: the [`ClickConsole`][classmix.cli.console.ClickConsole] for program output;
- ``verbosity_level``: ``-1`` (quiet), ``0`` or the ``-v`` count;
- ``log_level``: the level taken from ``CLASSMIX_LOG_LEVEL`` (or ``None``).
"""

from __future__ import annotations

import click

from classmix.cli.commands.inspect import inspect_command
from classmix.cli.commands.plan import plan_command
from classmix.cli.commands.version import version_command
from classmix.cli.console import ClickConsole
from classmix.cli.options import common_verbose_options, resolve_verbosity
from classmix.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize verbosity, logging and the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is populated.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Classmix CLI",
)
@common_verbose_options
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the Classmix CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'classmix plan TARGET SOURCE' to preview a mixin.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(inspect_command)

cli.add_command(plan_command)

if __name__ == "__main__":
    cli()
