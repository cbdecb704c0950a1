# topmark:header:start
#
#   project      : Classmix
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""CLI tests: `version` command and the bare group invocation."""

from __future__ import annotations

import json

from classmix.constants import CLASSMIX_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_installed_version() -> None:
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == CLASSMIX_VERSION


@mark_cli
def test_version_json_format() -> None:
    result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": CLASSMIX_VERSION}


@mark_cli
def test_version_format_is_case_insensitive() -> None:
    result = run_cli(["version", "--format", "JSON"])
    assert_SUCCESS(result)
    assert json.loads(result.output)["version"] == CLASSMIX_VERSION


@mark_cli
def test_unknown_format_is_rejected() -> None:
    result = run_cli(["version", "--format", "yaml"])
    assert result.exit_code != 0
    assert "Must be one of: default, json" in result.output


@mark_cli
def test_group_without_command_prints_help() -> None:
    result = run_cli(["--no-color"])
    assert_SUCCESS(result)
    assert "Hint: use 'classmix plan TARGET SOURCE'" in result.output
    assert "inspect" in result.output
