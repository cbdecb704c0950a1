# topmark:header:start
#
#   project      : Classmix
#   file         : test_provenance.py
#   file_relpath : tests/core/test_provenance.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Tests for `ProvenanceList` and the identity-based `union_into`."""

from __future__ import annotations

import pytest
from hypothesis import given

from classmix.constants import MIXINS_KEY
from classmix.core.members import Concrete
from classmix.core.namespace import MemberTable
from classmix.core.provenance import ProvenanceList, ensure_provenance, provenance_of, union_into
from tests.strategies_classmix import s_identity_lists


class _AlwaysEqual:
    def __eq__(self, other: object) -> bool:
        return True

    __hash__ = object.__hash__


def test_union_preserves_target_order_and_appends_in_source_order() -> None:
    a, b, c = object(), object(), object()
    target = [b, c]
    added = union_into([a, b], target)
    assert target == [b, c, a]
    assert added == [a]


def test_union_into_provenance_list() -> None:
    a, b, c = object(), object(), object()
    target = ProvenanceList([b, c])
    union_into(ProvenanceList([a, b]), target)
    assert target.as_tuple() == (b, c, a)


def test_union_with_itself_is_a_noop() -> None:
    a, b = object(), object()
    target = ProvenanceList([a, b])
    assert union_into(target, target) == []
    assert target.as_tuple() == (a, b)


def test_membership_is_by_identity_not_equality() -> None:
    first, second = _AlwaysEqual(), _AlwaysEqual()
    provenance = ProvenanceList([first])
    assert second not in provenance
    assert provenance.append(second)
    assert len(provenance) == 2
    assert provenance.index(second) == 1


def test_append_reports_duplicates() -> None:
    a = object()
    provenance = ProvenanceList()
    assert provenance.append(a)
    assert not provenance.append(a)
    assert list(provenance) == [a]


def test_index_of_missing_item_raises() -> None:
    with pytest.raises(ValueError):
        ProvenanceList().index(object())


def test_lists_compare_by_identity_order() -> None:
    a, b = object(), object()
    assert ProvenanceList([a, b]) == ProvenanceList([a, b])
    assert ProvenanceList([a, b]) != ProvenanceList([b, a])


def test_ensure_provenance_creates_read_only_member_on_demand() -> None:
    table = MemberTable("T")
    assert provenance_of(table) is None
    created = ensure_provenance(table)
    assert ensure_provenance(table) is created
    member = table.get_own(MIXINS_KEY)
    assert member == Concrete(created, writable=False)
    assert provenance_of(table) is created


@given(source=s_identity_lists(), target=s_identity_lists())
def test_union_is_an_ordered_set_union(source: list[object], target: list[object]) -> None:
    before: list[object] = list(target)
    added = union_into(source, target)

    # no duplicates, by identity
    assert len({id(x) for x in target}) == len(target)
    # existing prefix untouched
    assert target[: len(before)] == before
    # new entries are exactly the unseen source items, in source order
    assert added == [x for x in source if all(x is not y for y in before)]
    assert target[len(before) :] == added


@given(source=s_identity_lists(), target=s_identity_lists())
def test_union_is_idempotent(source: list[object], target: list[object]) -> None:
    union_into(source, target)
    snapshot: list[object] = list(target)
    assert union_into(source, target) == []
    assert target == snapshot
