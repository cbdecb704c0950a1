# topmark:header:start
#
#   project      : Classmix
#   file         : test_options.py
#   file_relpath : tests/core/test_options.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Tests for option records and their mapping loaders."""

from __future__ import annotations

import dataclasses

import pytest

from classmix.core.errors import OptionsError
from classmix.core.options import CompositionDefaults, InheritOptions, MixinOptions, normalize_option_key


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("copyStaticMembers", "copy_static_members"),
        ("copy-instance-members", "copy_instance_members"),
        ("proxy_instance_calls", "proxy_instance_calls"),
        (" override ", "override"),
    ],
)
def test_normalize_option_key(raw: str, expected: str) -> None:
    assert normalize_option_key(raw) == expected


def test_defaults() -> None:
    assert InheritOptions().to_dict() == {"copy_static_members": True, "override": False}
    assert MixinOptions().to_dict() == {
        "copy_static_members": True,
        "override": False,
        "copy_instance_members": True,
        "proxy_instance_calls": False,
    }


def test_options_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        MixinOptions().override = True  # type: ignore[misc]


def test_from_mapping_accepts_any_key_style() -> None:
    opts = MixinOptions.from_mapping({"copyInstanceMembers": False, "override": True})
    assert opts == MixinOptions(copy_instance_members=False, override=True)


def test_from_mapping_rejects_unknown_keys() -> None:
    with pytest.raises(OptionsError, match="copyInstanceMembers"):
        InheritOptions.from_mapping({"copyInstanceMembers": True})


@pytest.mark.parametrize("value", [1, "yes", None])
def test_from_mapping_rejects_non_booleans(value: object) -> None:
    with pytest.raises(OptionsError) as excinfo:
        MixinOptions.from_mapping({"override": value})
    assert isinstance(excinfo.value, ValueError)


def test_with_changes_ignores_none() -> None:
    opts = MixinOptions(override=True)
    changed = opts.with_changes(override=None, copy_static_members=False)
    assert changed == MixinOptions(override=True, copy_static_members=False)
    assert opts == MixinOptions(override=True)


def test_composition_defaults_from_mapping() -> None:
    defaults = CompositionDefaults.from_mapping({"mixin": {"override": True}})
    assert defaults.inherit == InheritOptions()
    assert defaults.mixin == MixinOptions(override=True)
    assert defaults.to_dict()["mixin"]["override"] is True


@pytest.mark.parametrize(
    "data",
    [
        {"merge": {}},
        {"mixin": True},
        {"inherit": {"proxyInstanceCalls": True}},
    ],
)
def test_composition_defaults_rejects_bad_sections(data: dict[str, object]) -> None:
    with pytest.raises(OptionsError):
        CompositionDefaults.from_mapping(data)
