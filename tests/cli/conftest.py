# topmark:header:start
#
#   project      : Classmix
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""CLI test helpers for running Classmix in a controlled working directory.

`run_cli_in()` changes the working directory before invoking the Click CLI so
that config discovery starts from the test's temporary directory instead of
the repository.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Sequence

import pytest
from click.testing import CliRunner, Result

from classmix.cli.exit_codes import ExitCode
from classmix.cli.main import cli
from classmix.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

SAMPLES: str = "tests.cli.sample_units"


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Reinstall TRACE logging after the CLI configured logging for its own run."""
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def ref(attr: str) -> str:
    """Return a ``module:attribute`` reference into the sample units module."""
    return f"{SAMPLES}:{attr}"


def run_cli_in(tmp_path: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory to run from.
        argv (str | Sequence[str] | None): CLI argument vector.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv)
    finally:
        os.chdir(cwd)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    return CliRunner().invoke(cli, argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2)."""
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
