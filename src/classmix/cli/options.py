# topmark:header:start
#
#   project      : Classmix
#   file         : options.py
#   file_relpath : src/classmix/cli/options.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Reusable Click options and parameter types for the Classmix CLI."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Generic, NoReturn, ParamSpec, TypeVar

import click

from classmix.cli.errors import ClassmixUsageError

P = ParamSpec("P")
R = TypeVar("R")
E = TypeVar("E", bound=Enum)


class OutputFormat(str, Enum):
    """Output format for command results.

    Members:
      DEFAULT: Human-friendly text; may include ANSI color.
      JSON: One JSON document on stdout, never colored.
    """

    DEFAULT = "default"
    JSON = "json"


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Click parameter type converting a (case-insensitive) string to an Enum member."""

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self.choices: list[str] = [str(member.value) for member in enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert ``value`` to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        lookup: dict[str, E] = {str(member.value).lower(): member for member in self.enum_cls}
        member: E | None = lookup.get(str(value).lower())
        if member is None:
            self._fail_noreturn(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return member

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Render the choices in help output, e.g. ``[default|json]``."""
        return f"[{'|'.join(self.choices)}]"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` / ``-q`` counts.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, otherwise the ``-v`` count.

    Raises:
        ClassmixUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ClassmixUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Show more detail (member flags, decision reasons).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report the outcome.",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--format`` option."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=OutputFormat.DEFAULT.value,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
