# topmark:header:start
#
#   project      : Classmix
#   file         : test_inspect.py
#   file_relpath : tests/cli/test_inspect.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""CLI tests: `inspect` command."""

from __future__ import annotations

import json

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, ref, run_cli
from tests.conftest import mark_cli, parametrize


@mark_cli
def test_inspect_text_lists_members() -> None:
    result = run_cli(["--no-color", "inspect", ref("Widget")])
    assert_SUCCESS(result)

    out: str = result.output
    assert "Unit Widget" in out
    assert "lineage: Widget -> Base" in out
    assert "mixins: (none)" in out
    assert "kind: concrete [ewc] 'widget'" in out
    assert "__base__" in out


@mark_cli
def test_inspect_quiet_prints_name_only() -> None:
    result = run_cli(["--no-color", "-q", "inspect", ref("Widget")])
    assert_SUCCESS(result)
    assert result.output.strip() == "Unit Widget"


@mark_cli
def test_inspect_json_describes_class_bridge() -> None:
    result = run_cli(["inspect", ref("Hooked"), "--format", "json"])
    assert_SUCCESS(result)

    payload = json.loads(result.output)
    assert payload["name"] == "Hooked"
    assert payload["base"] is None
    assert payload["instantiable"] is True
    assert [(m["name"], m["tag"]) for m in payload["instance"]] == [("render", "overridable")]


@mark_cli
def test_inspect_json_reports_mixins_and_flags() -> None:
    result = run_cli(["inspect", ref("Tagged"), "--format", "json"])
    assert_SUCCESS(result)

    payload = json.loads(result.output)
    assert payload["mixins"] == ["Taggable"]
    assert [m["name"] for m in payload["static"]] == ["label"]
    assert [m["name"] for m in payload["instance"]] == ["tag"]


@mark_cli
def test_inspect_non_instantiable_unit() -> None:
    result = run_cli(["--no-color", "inspect", ref("Constants")])
    assert_SUCCESS(result)
    assert "instance: (not instantiable)" in result.output


@mark_cli
@parametrize(
    "unit_ref",
    [
        "no_colon_here",
        "tests.cli.no_such_module:Thing",
        ref("Missing"),
        ref("NOT_A_UNIT"),
    ],
)
def test_inspect_bad_reference_is_usage_error(unit_ref: str) -> None:
    result = run_cli(["inspect", unit_ref])
    assert_USAGE_ERROR(result)


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result = run_cli(["-v", "-q", "inspect", ref("Widget")])
    assert_USAGE_ERROR(result)
