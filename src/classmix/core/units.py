# topmark:header:start
#
#   project      : Classmix
#   file         : units.py
#   file_relpath : src/classmix/core/units.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Composable units: class-like records with explicit member namespaces.

A [`Unit`][classmix.core.units.Unit] holds:

    - ``static``: members attached to the unit itself (``Unit.attr``),
    - ``instance``: members seen by objects created from the unit, optionally
      delegating to a base unit's instance table,

and keeps its mixin provenance list and base marker as reserved static
members. Calling a unit creates a [`UnitInstance`][classmix.core.units.UnitInstance].

Ordinary Python classes become units through
[`Unit.from_class`][classmix.core.units.Unit.from_class]; the composers accept
either and go through [`as_unit`][classmix.core.units.as_unit], which returns
the same unit for the same class every time.

Example:
    ```python
    from classmix import Unit, apply_mixin

    class Taggable:
        def tag(self) -> str:
            return "tagged"

    Widget = Unit("Widget")
    apply_mixin(Widget, Taggable)
    assert Widget().tag() == "tagged"
    ```

Notes:
    The attribute names ``name``, ``static`` and ``instance`` and the public
    methods of `Unit` shadow static members of the same name on attribute
    access; such members stay reachable through ``unit.static``.
"""

from __future__ import annotations

from dataclasses import replace
from functools import cached_property
from types import FunctionType
from typing import TYPE_CHECKING, Any
from weakref import WeakKeyDictionary

from classmix.config.logging import get_logger
from classmix.constants import BASE_KEY
from classmix.core.members import Concrete, Member, as_member
from classmix.core.namespace import MemberTable
from classmix.core.provenance import ProvenanceList, ensure_provenance, provenance_of

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from classmix.config.logging import ClassmixLogger

logger: ClassmixLogger = get_logger(__name__)

_CLASS_UNITS: WeakKeyDictionary[type, Unit] = WeakKeyDictionary()


def _bind(value: Any, owner: object) -> Any:
    """Resolve ``value`` for attribute access through ``owner``.

    Anything implementing ``__get__`` (functions, properties, staticmethods)
    goes through the descriptor protocol; plain values are returned as-is.
    """
    getter = getattr(type(value), "__get__", None)
    if getter is None:
        return value
    return getter(value, owner, type(owner))


def _is_instance_value(value: Any) -> bool:
    """Return True if a class-body value belongs in the instance namespace."""
    return isinstance(value, (FunctionType, property, cached_property))


class Unit:
    """A composable, class-like unit.

    Args:
        name (str): Display name of the unit.
        static (Mapping[str, Any] | None): Initial static members; plain values
            are wrapped as `Concrete`, `Member` instances are stored as given.
        instance (Mapping[str, Any] | None): Initial instance members.
        instantiable (bool): If False the unit has no instance namespace and
            cannot be called.
    """

    __slots__ = ("__weakref__", "instance", "name", "static")

    name: str
    static: MemberTable
    instance: MemberTable | None

    def __init__(
        self,
        name: str,
        *,
        static: Mapping[str, Any] | None = None,
        instance: Mapping[str, Any] | None = None,
        instantiable: bool = True,
    ) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "static", MemberTable(name))
        object.__setattr__(self, "instance", MemberTable(f"{name}.instance") if instantiable else None)

        for key, value in (static or {}).items():
            self.static.define(key, as_member(value))
        if instance:
            if self.instance is None:
                raise TypeError(f"Unit {name!r} is not instantiable but instance members were given")
            for key, value in instance.items():
                self.instance.define(key, as_member(value))

    @classmethod
    def from_class(cls, klass: type, *, name: str | None = None) -> Unit:
        """Build a new unit from the body of a Python class.

        Only the class's own ``__dict__`` is read, in declaration order; its
        Python base classes are ignored. Routing:

            - plain functions, properties and cached properties -> instance
            - ``staticmethod`` -> static (unbound on access)
            - ``classmethod`` -> static, bound to the unit on access
            - everything else -> static
            - ``__init__`` -> instance, non-enumerable so mixins never copy it
            - other dunder names are skipped

        Values already wrapped as a `Member` (for example via ``@overridable``)
        keep their tag and flags and are routed by the value they wrap.

        Args:
            klass (type): The class to read.
            name (str | None): Unit name; defaults to ``klass.__qualname__``.

        Returns:
            Unit: A new unit; use `as_unit` for the cached one.
        """
        unit: Unit = cls(name or klass.__qualname__)
        for key, raw in vars(klass).items():
            if key.startswith("__") and key.endswith("__") and key != "__init__":
                continue
            member: Member = as_member(raw)
            value: Any = member.value
            if isinstance(value, classmethod):
                member = replace(member, value=value.__func__)
            if key == "__init__":
                member = replace(member, enumerable=False)
            target: MemberTable | None = unit.instance if _is_instance_value(value) else unit.static
            if target is None:
                raise TypeError(f"Unit {unit.name!r} has no instance table for {key!r}")
            target.define(key, member)
        logger.debug(
            "Built unit %r from class %s (%d static, %d instance members)",
            unit.name,
            klass.__qualname__,
            len(unit.static),
            len(unit.instance or ()),
        )
        return unit

    def __repr__(self) -> str:
        return f"<Unit {self.name}>"

    # ---- Attribute protocol --------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        member: Member | None = self.static.get_own(name)
        if member is None:
            raise AttributeError(f"Unit {self.name!r} has no static member {name!r}")
        return _bind(member.value, self)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in Unit.__slots__:
            raise AttributeError(f"Unit attribute {name!r} cannot be reassigned")
        self.static.assign(name, value)

    def __delattr__(self, name: str) -> None:
        if name in Unit.__slots__:
            raise AttributeError(f"Unit attribute {name!r} cannot be deleted")
        try:
            self.static.delete(name)
        except KeyError:
            raise AttributeError(f"Unit {self.name!r} has no static member {name!r}") from None

    def __call__(self, *args: Any, **kwargs: Any) -> UnitInstance:
        """Create an instance, running an ``__init__`` member if one resolves."""
        if self.instance is None:
            raise TypeError(f"Unit {self.name!r} is not instantiable")
        obj = UnitInstance(self)
        init: Member | None = self.instance.lookup("__init__")
        if init is not None:
            _bind(init.value, obj)(*args, **kwargs)
        elif args or kwargs:
            raise TypeError(f"Unit {self.name!r} takes no arguments")
        return obj

    # ---- Composition state ---------------------------------------------------

    @property
    def mixins(self) -> ProvenanceList[object]:
        """The unit's provenance list, created empty on first access."""
        return ensure_provenance(self.static)

    def applied_mixins(self) -> tuple[Unit, ...]:
        """Return the applied mixins without creating a provenance list."""
        provenance = provenance_of(self.static)
        return tuple(provenance) if provenance is not None else ()  # type: ignore[arg-type]

    @property
    def base(self) -> Unit | None:
        """The unit this one inherits from, or ``None``."""
        member: Member | None = self.static.get_own(BASE_KEY)
        return member.value if member is not None else None

    def lineage(self) -> Iterator[Unit]:
        """Yield this unit followed by its bases, nearest first."""
        unit: Unit | None = self
        while unit is not None:
            yield unit
            unit = unit.base

    def is_instance(self, obj: object) -> bool:
        """Return True if ``obj`` was created from this unit or a derived unit."""
        if not isinstance(obj, UnitInstance):
            return False
        return any(unit is self for unit in obj.__unit__.lineage())

    def mark_base(self, base: Unit) -> None:
        """Record ``base`` in the non-enumerable base marker member."""
        self.static.define(BASE_KEY, Concrete(base, enumerable=False))


class UnitInstance:
    """An object created by calling a `Unit`.

    Attribute reads check the object's own ``__dict__`` first, then the
    unit's instance table and its delegation chain. Writes go to ``__dict__``
    unless the resolved member is a data descriptor (a property with a
    setter, for example).
    """

    __slots__ = ("__dict__", "__unit__")

    def __init__(self, unit: Unit) -> None:
        object.__setattr__(self, "__unit__", unit)

    def __repr__(self) -> str:
        return f"<{self.__unit__.name} instance>"

    def _resolve(self, name: str) -> Member | None:
        table: MemberTable | None = self.__unit__.instance
        return table.lookup(name) if table is not None else None

    def __getattr__(self, name: str) -> Any:
        member: Member | None = self._resolve(name)
        if member is None:
            raise AttributeError(f"{self.__unit__.name!r} instance has no attribute {name!r}")
        return _bind(member.value, self)

    def __setattr__(self, name: str, value: Any) -> None:
        member: Member | None = self._resolve(name)
        if member is not None:
            setter = getattr(type(member.value), "__set__", None)
            if setter is not None:
                setter(member.value, self, value)
                return
        object.__setattr__(self, name, value)


def as_unit(obj: Unit | type) -> Unit:
    """Return ``obj`` itself if it is a `Unit`, else the cached unit for a class.

    Raises:
        TypeError: If ``obj`` is neither a unit nor a class.
    """
    if isinstance(obj, Unit):
        return obj
    if not isinstance(obj, type):
        raise TypeError(f"Expected a Unit or a class, got {type(obj).__name__}")
    unit: Unit | None = _CLASS_UNITS.get(obj)
    if unit is None:
        unit = Unit.from_class(obj)
        _CLASS_UNITS[obj] = unit
    return unit
