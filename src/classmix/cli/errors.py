# topmark:header:start
#
#   project      : Classmix
#   file         : errors.py
#   file_relpath : src/classmix/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Exceptions for the Classmix CLI.

Raise these from commands to exit with a standardized message and exit code.
They print through the project console when one is present in the Click
context, and fall back to Click's own error display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from classmix.cli.exit_codes import ExitCode


class ClassmixError(click.ClickException):
    """Base class for all Classmix CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text, without styling."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error through the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is not None:
            console.error(self.format_message())
            return
        super().show(file)


class ClassmixUsageError(ClassmixError):
    """Error for invalid invocations and unresolvable unit references."""

    exit_code = ExitCode.USAGE_ERROR


class ClassmixConfigError(ClassmixError):
    """Error for missing, unreadable or invalid configuration."""

    exit_code = ExitCode.CONFIG_ERROR
