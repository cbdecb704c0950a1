# topmark:header:start
#
#   project      : Classmix
#   file         : compose.py
#   file_relpath : src/classmix/core/compose.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""The two composition entry points: inheritance and mixins.

Both are meant to run once, synchronously, while a unit is being set up
(usually at import time), before the unit is used:

```python
from classmix import Unit, apply_mixin, inherit

Base = Unit("Base", static={"kind": "base"})
Derived = Unit("Derived")
inherit(Derived, Base)
assert Derived.kind == "base"

class Taggable:
    def tag(self) -> str:
        return "tagged"

apply_mixin(Derived, Taggable)
assert Derived().tag() == "tagged"
apply_mixin(Derived, Taggable)  # already applied: no-op
assert len(Derived.mixins) == 1
```

Neither function recovers from errors: a failing table primitive aborts the
call and leaves the members copied so far in place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from classmix.config.logging import get_logger
from classmix.constants import BASE_KEY, MIXINS_KEY
from classmix.core.merge import merge_members
from classmix.core.options import InheritOptions, MixinOptions
from classmix.core.provenance import union_into
from classmix.core.units import as_unit

if TYPE_CHECKING:
    from classmix.config.logging import ClassmixLogger
    from classmix.core.units import Unit

logger: ClassmixLogger = get_logger(__name__)


def inherit(
    derived: Unit | type,
    base: Unit | type,
    options: InheritOptions | None = None,
) -> None:
    """Link ``derived`` to ``base`` and copy the base's static members.

    The link makes instances of ``derived`` fall back to ``base``'s instance
    members and records ``base`` as ``derived.base``. It is (re)established on
    every call. With ``copy_static_members`` set, each enumerable static member
    of ``base`` is then copied, in declaration order, unless ``derived``
    already owns it and ``override`` is off. The base marker is never copied,
    and the base's provenance list is unioned into the derived unit's own list
    rather than shared.

    Static copies are recomputed from ``base``'s current state on each call.

    Args:
        derived (Unit | type): The unit (or class) being defined.
        base (Unit | type): The unit (or class) to inherit from.
        options (InheritOptions | None): Options; defaults to ``InheritOptions()``.

    Raises:
        TypeError: If either argument is not a unit or class, or ``base`` has
            no instance namespace.
        AttributeError: If ``derived`` has no instance namespace.
        CyclicLinkError: If ``base`` already (transitively) inherits from
            ``derived``, including ``base is derived``.
        LockedMemberError: If a copy hits a non-configurable member of ``derived``.
    """
    opts: InheritOptions = options or InheritOptions()
    derived_unit: Unit = as_unit(derived)
    base_unit: Unit = as_unit(base)
    logger.debug("inherit(%s, %s) %s", derived_unit.name, base_unit.name, opts)

    derived_unit.instance.link(base_unit.instance)  # type: ignore[union-attr, arg-type]
    derived_unit.mark_base(base_unit)

    if not opts.copy_static_members:
        return

    for name, member in base_unit.static.enumerable_items():
        if name == BASE_KEY:
            continue
        if name == MIXINS_KEY:
            added = union_into(member.value, derived_unit.mixins)
            logger.trace("%s <- %s: merged provenance (%d new)", derived_unit.name, base_unit.name, len(added))
            continue
        if opts.override or not derived_unit.static.has_own(name):
            derived_unit.static.define(name, member)
            logger.trace("%s <- %s: copied static %r", derived_unit.name, base_unit.name, name)


def apply_mixin(
    target: Unit | type,
    source: Unit | type,
    options: MixinOptions | None = None,
) -> Unit:
    """Merge ``source``'s members into ``target`` and record the application.

    Steps:
        1. Read (or create) the target's provenance list.
        2. If ``source`` is already recorded, return at once: nothing is copied.
        3. Record ``source``.
        4. With ``copy_static_members``, merge the static namespaces.
        5. With ``copy_instance_members`` and a source instance namespace,
           merge the instance namespaces.

    Member conflicts follow [`decide_member`][classmix.core.merge.decide_member].
    ``proxy_instance_calls`` is accepted but changes nothing.

    Args:
        target (Unit | type): The unit (or class) receiving the mixin.
        source (Unit | type): The mixin; never modified.
        options (MixinOptions | None): Options; defaults to ``MixinOptions()``.

    Returns:
        Unit: The target unit.

    Raises:
        TypeError: If either argument is not a unit or class.
        AttributeError: If instance members must be merged into a target
            without an instance namespace.
        LockedMemberError: If a copy hits a non-configurable target member.
    """
    opts: MixinOptions = options or MixinOptions()
    target_unit: Unit = as_unit(target)
    source_unit: Unit = as_unit(source)

    provenance = target_unit.mixins
    if source_unit in provenance:
        logger.debug("apply_mixin(%s, %s): already applied, skipping", target_unit.name, source_unit.name)
        return target_unit
    provenance.append(source_unit)
    logger.debug("apply_mixin(%s, %s) %s", target_unit.name, source_unit.name, opts)

    if opts.copy_static_members:
        merge_members(source_unit.static, target_unit.static, opts)

    if opts.copy_instance_members and source_unit.instance is not None:
        merge_members(source_unit.instance, target_unit.instance, opts)  # type: ignore[arg-type]

    return target_unit
