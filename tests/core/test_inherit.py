# topmark:header:start
#
#   project      : Classmix
#   file         : test_inherit.py
#   file_relpath : tests/core/test_inherit.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Tests for `inherit`: the instance link, the base marker and static copies."""

from __future__ import annotations

import pytest

from classmix.constants import BASE_KEY, MIXINS_KEY
from classmix.core.compose import apply_mixin, inherit
from classmix.core.errors import CyclicLinkError, LockedMemberError
from classmix.core.members import Concrete
from classmix.core.options import InheritOptions
from classmix.core.units import Unit
from tests.conftest import make_unit


def test_inherit_links_instances_and_records_base(base_unit: Unit) -> None:
    derived = make_unit("Derived")
    inherit(derived, base_unit)

    assert derived.instance is not None
    assert derived.instance.parent is base_unit.instance
    assert derived.base is base_unit
    assert derived().describe() == "base instance"
    assert [u.name for u in derived.lineage()] == ["Derived", "Base"]


def test_inherit_copies_static_members(base_unit: Unit) -> None:
    derived = make_unit("Derived")
    inherit(derived, base_unit)
    assert derived.kind == "base"
    assert derived.static.get_own("kind") == base_unit.static.get_own("kind")


def test_base_marker_is_hidden_and_never_copied(base_unit: Unit) -> None:
    middle = make_unit("Middle")
    leaf = make_unit("Leaf")
    inherit(middle, base_unit)
    inherit(leaf, middle)

    assert leaf.base is middle
    assert [name for name, _ in middle.static.enumerable_items()] == ["kind"]
    assert middle.static.get_own(BASE_KEY) == Concrete(base_unit, enumerable=False)
    assert [u.name for u in leaf.lineage()] == ["Leaf", "Middle", "Base"]


def test_rerun_does_not_overwrite_own_member(base_unit: Unit) -> None:
    derived = make_unit("Derived")
    inherit(derived, base_unit)
    derived.kind = "derived"
    inherit(derived, base_unit)
    assert derived.kind == "derived"


def test_rerun_recomputes_from_current_base_with_override(base_unit: Unit) -> None:
    derived = make_unit("Derived")
    inherit(derived, base_unit)
    base_unit.kind = "changed"
    inherit(derived, base_unit, InheritOptions(override=True))
    assert derived.kind == "changed"


def test_without_static_copy_only_the_link_is_made(base_unit: Unit) -> None:
    derived = make_unit("Derived")
    inherit(derived, base_unit, InheritOptions(copy_static_members=False))
    assert "kind" not in derived.static
    assert derived.base is base_unit
    assert derived().describe() == "base instance"


def test_base_provenance_is_unioned_not_shared(base_unit: Unit) -> None:
    mixin_a, mixin_b = make_unit("A"), make_unit("B")
    apply_mixin(base_unit, mixin_a)
    derived = make_unit("Derived")
    apply_mixin(derived, mixin_b)

    inherit(derived, base_unit)

    assert derived.mixins.as_tuple() == (mixin_b, mixin_a)
    assert derived.static.get_own(MIXINS_KEY) is not base_unit.static.get_own(MIXINS_KEY)
    assert base_unit.mixins.as_tuple() == (mixin_a,)


def test_inherit_from_self_is_rejected() -> None:
    unit = make_unit("Self")
    with pytest.raises(CyclicLinkError):
        inherit(unit, unit)


def test_inherit_cycle_is_rejected(base_unit: Unit) -> None:
    derived = make_unit("Derived")
    inherit(derived, base_unit)
    with pytest.raises(CyclicLinkError):
        inherit(base_unit, derived)


def test_inherit_rejects_non_units() -> None:
    with pytest.raises(TypeError):
        inherit(make_unit("Derived"), "not a unit")  # type: ignore[arg-type]


def test_inherit_into_non_instantiable_unit_fails(base_unit: Unit) -> None:
    with pytest.raises(AttributeError):
        inherit(Unit("Static", instantiable=False), base_unit)


def test_locked_static_member_blocks_override(base_unit: Unit) -> None:
    derived = Unit("Derived", static={"kind": Concrete("own", configurable=False)})
    with pytest.raises(LockedMemberError):
        inherit(derived, base_unit, InheritOptions(override=True))
    # link and marker are established before copying
    assert derived.base is base_unit
