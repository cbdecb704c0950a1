# topmark:header:start
#
#   project      : Classmix
#   file         : namespace.py
#   file_relpath : src/classmix/core/namespace.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Ordered member namespaces.

A [`MemberTable`][classmix.core.namespace.MemberTable] maps member names to
[`Member`][classmix.core.members.Member] descriptors in declaration order. Every
unit owns a static table and (usually) an instance table; instance tables may
delegate lookups to a single parent table, which is how the inheritance link
is represented.

The table is the primitive every composition step goes through: ``define``
replaces a descriptor, ``assign`` replaces a value. The errors they raise are
the only errors composition itself can produce.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from classmix.config.logging import get_logger
from classmix.core.errors import CyclicLinkError, LockedMemberError, ReadOnlyMemberError
from classmix.core.members import Concrete, Member

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from classmix.config.logging import ClassmixLogger

logger: ClassmixLogger = get_logger(__name__)


class MemberTable:
    """Insertion-ordered table of named member descriptors.

    Redefining an existing name keeps its original position, so enumeration
    order is always the order in which names were first declared.

    Args:
        owner (str): Display name of the owning unit and namespace, used in errors.
        parent (MemberTable | None): Optional table that ``lookup`` falls back to.
    """

    __slots__ = ("_members", "_parent", "owner")

    def __init__(self, owner: str, parent: MemberTable | None = None) -> None:
        self.owner: str = owner
        self._members: dict[str, Member] = {}
        self._parent: MemberTable | None = None
        if parent is not None:
            self.link(parent)

    def __repr__(self) -> str:
        return f"MemberTable({self.owner!r}, names={list(self._members)!r})"

    def __contains__(self, name: object) -> bool:
        return name in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._members))

    def __len__(self) -> int:
        return len(self._members)

    # ---- Delegation chain ----------------------------------------------------

    @property
    def parent(self) -> MemberTable | None:
        """The table lookups fall back to, or ``None``."""
        return self._parent

    def chain(self) -> Iterator[MemberTable]:
        """Yield this table followed by its ancestors, nearest first."""
        table: MemberTable | None = self
        while table is not None:
            yield table
            table = table._parent

    def link(self, parent: MemberTable) -> None:
        """Make ``parent`` the fallback for lookups, replacing any previous link.

        Raises:
            TypeError: If ``parent`` is not a `MemberTable`.
            CyclicLinkError: If the link would make the chain cyclic.
        """
        if not isinstance(parent, MemberTable):
            raise TypeError(
                f"Delegation target for {self.owner!r} must be a MemberTable, "
                f"got {type(parent).__name__}"
            )
        if any(table is self for table in parent.chain()):
            raise CyclicLinkError(f"Linking {self.owner!r} to {parent.owner!r} creates a cycle")
        self._parent = parent

    # ---- Own members ---------------------------------------------------------

    def has_own(self, name: str) -> bool:
        """Return True if this table itself (not an ancestor) holds ``name``."""
        return name in self._members

    def get_own(self, name: str) -> Member | None:
        """Return the descriptor this table holds for ``name``, or ``None``."""
        return self._members.get(name)

    def own_items(self) -> tuple[tuple[str, Member], ...]:
        """Return all ``(name, member)`` pairs in declaration order."""
        return tuple(self._members.items())

    def enumerable_items(self) -> tuple[tuple[str, Member], ...]:
        """Return the ``(name, member)`` pairs that composition copies."""
        return tuple((name, member) for name, member in self._members.items() if member.enumerable)

    def as_mapping(self) -> Mapping[str, Member]:
        """Return a read-only view of the own members."""
        return MappingProxyType(self._members)

    def lookup(self, name: str) -> Member | None:
        """Return the nearest descriptor for ``name`` along the delegation chain."""
        for table in self.chain():
            member: Member | None = table._members.get(name)
            if member is not None:
                return member
        return None

    # ---- Mutation ------------------------------------------------------------

    def define(self, name: str, member: Member) -> None:
        """Install ``member`` under ``name``, replacing any existing descriptor.

        Raises:
            LockedMemberError: If the existing member is non-configurable and
                ``member`` differs from it.
        """
        existing: Member | None = self._members.get(name)
        if existing is not None and not existing.configurable and existing != member:
            raise LockedMemberError(self.owner, name)
        self._members[name] = member
        logger.trace("%s: defined %s member %r", self.owner, member.tag, name)

    def assign(self, name: str, value: Any) -> None:
        """Replace the value of ``name`` (or create a plain member).

        The new member keeps the existing flags but is always `Concrete`.

        Raises:
            ReadOnlyMemberError: If the existing member is not writable.
        """
        existing: Member | None = self._members.get(name)
        if existing is None:
            self._members[name] = Concrete(value)
            return
        if not existing.writable:
            raise ReadOnlyMemberError(self.owner, name)
        self._members[name] = existing.with_value(value)

    def delete(self, name: str) -> None:
        """Remove ``name`` from this table.

        Raises:
            KeyError: If the table does not own ``name``.
            LockedMemberError: If the member is non-configurable.
        """
        existing: Member = self._members[name]
        if not existing.configurable:
            raise LockedMemberError(self.owner, name)
        del self._members[name]
