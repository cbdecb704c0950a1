# topmark:header:start
#
#   project      : Classmix
#   file         : plan.py
#   file_relpath : src/classmix/cli/commands/plan.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Classmix `plan` command.

Previews what applying SOURCE to TARGET as a mixin would change, without
mutating either unit.

Options are resolved in layers:

1. built-in defaults;
2. the ``[mixin]`` table of ``--config`` (or of the discovered config file);
3. explicit ``--override`` / ``--static`` / ``--instance`` flags.

Exit status is ``0`` when SOURCE is already applied to TARGET and ``2``
(``WOULD_CHANGE``) otherwise, so the command can gate CI checks.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from classmix.cli.emitters import emit_plan, plan_payload
from classmix.cli.errors import ClassmixConfigError
from classmix.cli.exit_codes import ExitCode
from classmix.cli.options import OutputFormat, output_format_option
from classmix.cli.resolve import resolve_unit_ref
from classmix.config.loaders import discover_config, load_composition_defaults
from classmix.config.logging import get_logger
from classmix.core.errors import ConfigLoadError, OptionsError
from classmix.core.merge import plan_mixin
from classmix.core.options import CompositionDefaults, MixinOptions

if TYPE_CHECKING:
    from classmix.cli.console import ClickConsole
    from classmix.config.logging import ClassmixLogger
    from classmix.core.merge import MixinPlan
    from classmix.core.units import Unit

logger: ClassmixLogger = get_logger(__name__)


def resolve_mixin_options(
    config_path: Path | None,
    *,
    override: bool | None,
    copy_static: bool | None,
    copy_instance: bool | None,
) -> MixinOptions:
    """Build the effective mixin options from config and CLI flags.

    Args:
        config_path (Path | None): Explicit config file; discovered from the
            working directory when ``None``.
        override (bool | None): ``--override`` / ``--no-override``, if given.
        copy_static (bool | None): ``--static`` / ``--no-static``, if given.
        copy_instance (bool | None): ``--instance`` / ``--no-instance``, if given.

    Returns:
        MixinOptions: The effective options.

    Raises:
        ClassmixConfigError: If the config file cannot be loaded or is invalid.
    """
    path: Path | None = config_path if config_path is not None else discover_config(Path.cwd())
    defaults: CompositionDefaults = CompositionDefaults()
    if path is not None:
        try:
            defaults = load_composition_defaults(path)
        except (ConfigLoadError, OptionsError) as exc:
            raise ClassmixConfigError(str(exc)) from exc
        logger.info("Using composition defaults from %s", path)

    return defaults.mixin.with_changes(
        override=override,
        copy_static_members=copy_static,
        copy_instance_members=copy_instance,
    )


@click.command(
    name="plan",
    help="Preview applying SOURCE to TARGET as a mixin (both given as module:attribute).",
)
@click.argument("target_ref", metavar="TARGET")
@click.argument("source_ref", metavar="SOURCE")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read composition defaults from this classmix.toml or pyproject.toml.",
)
@click.option(
    "--override/--no-override",
    default=None,
    help="Let SOURCE members replace existing TARGET members.",
)
@click.option(
    "--static/--no-static",
    "copy_static",
    default=None,
    help="Merge static members.",
)
@click.option(
    "--instance/--no-instance",
    "copy_instance",
    default=None,
    help="Merge instance members.",
)
@output_format_option
@click.pass_context
def plan_command(
    ctx: click.Context,
    target_ref: str,
    source_ref: str,
    config_path: Path | None,
    override: bool | None,
    copy_static: bool | None,
    copy_instance: bool | None,
    output_format: OutputFormat,
) -> None:
    """Print the merge decisions for a mixin application."""
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    options: MixinOptions = resolve_mixin_options(
        config_path,
        override=override,
        copy_static=copy_static,
        copy_instance=copy_instance,
    )
    target: Unit = resolve_unit_ref(target_ref)
    source: Unit = resolve_unit_ref(source_ref)
    plan: MixinPlan = plan_mixin(target, source, options)

    if output_format is OutputFormat.JSON:
        console.print(json.dumps(plan_payload(plan), indent=2))
    else:
        emit_plan(console, plan, verbosity=ctx.obj.get("verbosity_level", 0))

    if not plan.is_noop:
        ctx.exit(ExitCode.WOULD_CHANGE)
