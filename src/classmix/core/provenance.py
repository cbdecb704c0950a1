# topmark:header:start
#
#   project      : Classmix
#   file         : provenance.py
#   file_relpath : src/classmix/core/provenance.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Mixin provenance: the ordered record of mixins already applied to a unit.

Provenance lists are ordered sets keyed by object *identity*: two distinct
units that happen to compare equal are still distinct entries. The first
application of a mixin fixes its position.

The list lives in the owning unit's static table under
[`MIXINS_KEY`][classmix.constants.MIXINS_KEY], which is how a mixin's own
provenance reaches its targets: the merge algorithm meets the member while
walking the static namespace and unions the lists instead of copying one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Protocol, TypeVar, overload

from classmix.constants import MIXINS_KEY
from classmix.core.members import Concrete

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from classmix.core.members import Member
    from classmix.core.namespace import MemberTable

T = TypeVar("T")


class _AppendableSequence(Protocol[T]):
    """Minimal protocol for ``union_into`` targets."""

    def __iter__(self) -> Iterator[T]: ...

    def append(self, item: T, /) -> object: ...


def _holds(items: Iterable[object], item: object) -> bool:
    return any(existing is item for existing in items)


class ProvenanceList(Generic[T]):
    """Ordered, duplicate-free (by identity) list of applied mixins.

    Args:
        items (Iterable[T]): Initial entries; later duplicates are dropped.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        for item in items:
            self.append(item)

    def __repr__(self) -> str:
        return f"ProvenanceList({self._items!r})"

    def __contains__(self, item: object) -> bool:
        return _holds(self._items, item)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ProvenanceList):
            other_items: list[object] = list(other)
            return len(other_items) == len(self._items) and all(
                a is b for a, b in zip(self._items, other_items)
            )
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def append(self, item: T) -> bool:
        """Append ``item`` unless already present.

        Returns:
            bool: True if the item was added, False if it was already recorded.
        """
        if _holds(self._items, item):
            return False
        self._items.append(item)
        return True

    def index(self, item: T) -> int:
        """Return the position of ``item`` (by identity).

        Raises:
            ValueError: If ``item`` is not in the list.
        """
        for i, existing in enumerate(self._items):
            if existing is item:
                return i
        raise ValueError(f"{item!r} is not in the provenance list")

    def as_tuple(self) -> tuple[T, ...]:
        """Return the entries as a tuple, in application order."""
        return tuple(self._items)


def union_into(source: Iterable[T], target: _AppendableSequence[T]) -> list[T]:
    """Append each item of ``source`` that ``target`` does not hold yet.

    Pre-existing entries of ``target`` keep their order; new entries follow in
    ``source`` order. ``source`` is read in full first, so ``source`` and
    ``target`` may be the same object.

    Args:
        source (Iterable[T]): Items to merge in.
        target (_AppendableSequence[T]): List to extend in place, compared by identity.

    Returns:
        list[T]: The items actually appended, in order.
    """
    added: list[T] = []
    for item in list(source):
        if not _holds(target, item):
            target.append(item)
            added.append(item)
    return added


def provenance_of(table: MemberTable) -> ProvenanceList[object] | None:
    """Return the provenance list stored in ``table``, or ``None`` when absent."""
    member: Member | None = table.get_own(MIXINS_KEY)
    return member.value if member is not None else None


def ensure_provenance(table: MemberTable) -> ProvenanceList[object]:
    """Return the provenance list stored in ``table``, installing an empty one if needed.

    The list is stored as a non-writable `Concrete` member under ``__mixins__``.

    Args:
        table (MemberTable): A static member table.

    Returns:
        ProvenanceList[object]: The stored or newly installed list.
    """
    existing: ProvenanceList[object] | None = provenance_of(table)
    if existing is not None:
        return existing
    provenance: ProvenanceList[object] = ProvenanceList()
    table.define(MIXINS_KEY, Concrete(provenance, writable=False))
    return provenance
