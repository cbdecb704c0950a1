# topmark:header:start
#
#   project      : Classmix
#   file         : members.py
#   file_relpath : src/classmix/core/members.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Member descriptors stored in a unit's namespaces.

A member is a named slot's *descriptor*: the value plus three flags that gate
how the slot may change later:

    - ``enumerable``: the member takes part in merges and static copies.
    - ``writable``: the value may be replaced through assignment.
    - ``configurable``: the descriptor may be redefined by composition.

Members come in two tagged variants:

    - [`Concrete`][classmix.core.members.Concrete]: an ordinary member. Once a
      unit owns it, later mixins leave it alone unless ``override`` is set.
    - [`Overridable`][classmix.core.members.Overridable]: a placeholder hook
      that a later mixin may replace even without ``override``.

Descriptors are frozen, so placing one in a second namespace copies it.

Example:
    ```python
    from classmix import Unit, overridable

    class Plugin:
        @overridable
        def render(self) -> str:
            return "<placeholder>"

    unit = Unit.from_class(Plugin)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

_F = TypeVar("_F", bound=Callable[..., Any])


@dataclass(frozen=True)
class Member:
    """A named slot's value and attributes.

    Attributes:
        value (Any): The slot value; functions are bound on access.
        enumerable (bool): Whether merges and static copies see this member.
        writable (bool): Whether assignment may replace the value.
        configurable (bool): Whether composition may redefine the descriptor.
    """

    value: Any
    enumerable: bool = True
    writable: bool = True
    configurable: bool = True

    @property
    def is_delegate(self) -> bool:
        """True if this member is a function-valued placeholder for composition."""
        return False

    def with_value(self, value: Any) -> Concrete:
        """Return a `Concrete` member holding ``value`` with this member's flags.

        Assignment always produces a concrete member: a freshly assigned value
        carries no placeholder tag.
        """
        return Concrete(
            value,
            enumerable=self.enumerable,
            writable=self.writable,
            configurable=self.configurable,
        )

    @property
    def tag(self) -> str:
        """Short lowercase name of the member variant (``"concrete"``, ``"overridable"``)."""
        return type(self).__name__.lower()


@dataclass(frozen=True)
class Concrete(Member):
    """An ordinary member, protected from later mixins unless ``override`` is set."""


@dataclass(frozen=True)
class Overridable(Member):
    """A placeholder member that later mixins may replace without ``override``."""

    @property
    def is_delegate(self) -> bool:
        """True only when the wrapped value is callable."""
        return callable(self.value)


def overridable(func: _F) -> _F:
    """Mark ``func`` as an overridable hook in a class body.

    The class bridge ([`Unit.from_class`][classmix.core.units.Unit.from_class])
    stores the function as an [`Overridable`][classmix.core.members.Overridable]
    instance member. Typed as returning ``_F`` so the decorated name keeps its
    signature for type checkers.
    """
    return Overridable(func)  # type: ignore[return-value]


def as_member(value: Any) -> Member:
    """Return ``value`` if it already is a `Member`, else wrap it as `Concrete`."""
    if isinstance(value, Member):
        return value
    return Concrete(value)
