# topmark:header:start
#
#   project      : Classmix
#   file         : inspect.py
#   file_relpath : src/classmix/cli/commands/inspect.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Classmix `inspect` command.

Shows the static and instance members of a unit together with its lineage and
the mixins applied to it.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from classmix.cli.emitters import emit_unit, unit_payload
from classmix.cli.options import OutputFormat, output_format_option
from classmix.cli.resolve import resolve_unit_ref

if TYPE_CHECKING:
    from classmix.cli.console import ClickConsole
    from classmix.core.units import Unit


@click.command(
    name="inspect",
    help="Show the members, lineage and applied mixins of UNIT (module:attribute).",
)
@click.argument("unit_ref", metavar="UNIT")
@output_format_option
@click.pass_context
def inspect_command(ctx: click.Context, unit_ref: str, output_format: OutputFormat) -> None:
    """Describe a unit."""
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    unit: Unit = resolve_unit_ref(unit_ref)

    if output_format is OutputFormat.JSON:
        console.print(json.dumps(unit_payload(unit), indent=2))
        return
    emit_unit(console, unit, verbosity=ctx.obj.get("verbosity_level", 0))
