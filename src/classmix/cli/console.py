# topmark:header:start
#
#   project      : Classmix
#   file         : console.py
#   file_relpath : src/classmix/cli/console.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Console for user-facing program output.

Keeps CLI output separate from internal logging: use the console for what the
user asked to see and ``logging`` for diagnostics.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, styled text carries ANSI color codes.
        out (TextIO | None): Stream for standard output (defaults to ``sys.stdout``).
        err (TextIO | None): Stream for error output (defaults to ``sys.stderr``).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO | None = out
        self.err: TextIO | None = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to stdout."""
        click.echo(text, nl=nl, file=self.out or sys.stdout, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a yellow warning to stderr."""
        click.secho(text, nl=nl, file=self.err or sys.stderr, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a red error to stderr."""
        click.secho(text, nl=nl, file=self.err or sys.stderr, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with ``click.style`` (plain if color is off)."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
