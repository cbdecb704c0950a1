# topmark:header:start
#
#   project      : Classmix
#   file         : test_members.py
#   file_relpath : tests/core/test_members.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Tests for member descriptors and the ``@overridable`` decorator."""

from __future__ import annotations

import dataclasses

import pytest

from classmix.core.members import Concrete, Member, Overridable, as_member, overridable


def test_member_defaults_are_fully_permissive() -> None:
    m = Concrete(1)
    assert (m.enumerable, m.writable, m.configurable) == (True, True, True)


def test_members_are_frozen() -> None:
    m = Concrete(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        m.value = 2  # type: ignore[misc]


def test_tag_names_the_variant() -> None:
    assert Concrete(1).tag == "concrete"
    assert Overridable(len).tag == "overridable"


def test_only_callable_overridable_is_a_delegate() -> None:
    assert Overridable(lambda: None).is_delegate
    assert not Overridable("placeholder").is_delegate
    assert not Concrete(lambda: None).is_delegate


def test_variants_with_same_value_are_not_equal() -> None:
    """Tag is part of descriptor identity."""
    assert Concrete(len) != Overridable(len)
    assert Concrete(len) == Concrete(len)


def test_with_value_keeps_flags_and_drops_placeholder_tag() -> None:
    hook = Overridable(len, enumerable=False, writable=True, configurable=False)
    replaced = hook.with_value(abs)
    assert isinstance(replaced, Concrete)
    assert replaced.value is abs
    assert (replaced.enumerable, replaced.writable, replaced.configurable) == (False, True, False)


def test_overridable_decorator_wraps_function() -> None:
    def render(self: object) -> str:
        return "<placeholder>"

    wrapped = overridable(render)
    assert isinstance(wrapped, Overridable)
    assert wrapped.value is render  # type: ignore[attr-defined]


def test_as_member_wraps_plain_values_only() -> None:
    existing = Overridable(len)
    assert as_member(existing) is existing
    wrapped = as_member(42)
    assert isinstance(wrapped, Concrete)
    assert wrapped.value == 42
    assert type(wrapped) is not Member
