# topmark:header:start
#
#   project      : Classmix
#   file         : version.py
#   file_relpath : src/classmix/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Classmix `version` command.

Prints the Classmix version installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from classmix.cli.options import OutputFormat, output_format_option
from classmix.constants import CLASSMIX_VERSION

if TYPE_CHECKING:
    from classmix.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of Classmix.",
)
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, output_format: OutputFormat) -> None:
    """Show the current version of Classmix.

    Args:
        ctx (click.Context): Click context carrying the console.
        output_format (OutputFormat): Plain text or JSON.
    """
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if output_format is OutputFormat.JSON:
        console.print(json.dumps({"version": CLASSMIX_VERSION}))
    elif ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("Classmix version:", bold=True, underline=True))
        console.print(f"    {console.styled(CLASSMIX_VERSION, bold=True)}")
    else:
        console.print(console.styled(CLASSMIX_VERSION, bold=True))
