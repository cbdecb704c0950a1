# topmark:header:start
#
#   project      : Classmix
#   file         : merge.py
#   file_relpath : src/classmix/core/merge.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Member merge algorithm.

For every enumerable member of a source namespace, in declaration order, the
merge decides whether the target receives the source descriptor:

    ============================  ========  ==============
    Condition (first match wins)  Action    Reason
    ============================  ========  ==============
    name is the provenance list   UNION     ``provenance``
    ``options.override``          COPY      ``override``
    target does not own the name  COPY      ``absent``
    target member is a delegate   COPY      ``delegate``
    otherwise                     SKIP      ``exists``
    ============================  ========  ==============

A *delegate* is an [`Overridable`][classmix.core.members.Overridable] member
wrapping a callable: a hook declared so a later mixin can fill it in.

The decision is a pure function ([`decide_member`][classmix.core.merge.decide_member]),
shared by the real merge and by the dry-run [`plan_mixin`][classmix.core.merge.plan_mixin].
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from classmix.config.logging import get_logger
from classmix.constants import MIXINS_KEY
from classmix.core.options import MixinOptions
from classmix.core.provenance import ensure_provenance, union_into
from classmix.core.units import as_unit

if TYPE_CHECKING:
    from classmix.config.logging import ClassmixLogger
    from classmix.core.members import Member
    from classmix.core.namespace import MemberTable
    from classmix.core.options import InheritOptions
    from classmix.core.units import Unit

logger: ClassmixLogger = get_logger(__name__)


class MergeAction(str, Enum):
    """What the merge does with one source member."""

    COPY = "copy"
    SKIP = "skip"
    UNION = "union"


@dataclass(frozen=True)
class MergeDecision:
    """The outcome for one source member.

    Attributes:
        name (str): Member name.
        action (MergeAction): Copy, skip or union.
        reason (str): Short key naming the rule that decided
            (``provenance``, ``override``, ``absent``, ``delegate``, ``exists``).
    """

    name: str
    action: MergeAction
    reason: str

    @property
    def changes_target(self) -> bool:
        """True for decisions that write to the target."""
        return self.action is not MergeAction.SKIP


def decide_member(name: str, target_ns: MemberTable, options: InheritOptions) -> MergeDecision:
    """Decide what merging a source member called ``name`` into ``target_ns`` does.

    Args:
        name (str): Name of the source member.
        target_ns (MemberTable): The namespace receiving the member.
        options (InheritOptions): Only ``override`` is consulted.

    Returns:
        MergeDecision: The decision; nothing is mutated.
    """
    if name == MIXINS_KEY:
        return MergeDecision(name, MergeAction.UNION, "provenance")
    if options.override:
        return MergeDecision(name, MergeAction.COPY, "override")
    existing: Member | None = target_ns.get_own(name)
    if existing is None:
        return MergeDecision(name, MergeAction.COPY, "absent")
    if existing.is_delegate:
        return MergeDecision(name, MergeAction.COPY, "delegate")
    return MergeDecision(name, MergeAction.SKIP, "exists")


def merge_members(
    source_ns: MemberTable,
    target_ns: MemberTable,
    options: InheritOptions,
) -> list[MergeDecision]:
    """Merge the enumerable members of ``source_ns`` into ``target_ns`` in place.

    Copies share the (immutable) source descriptor. The provenance member is
    never copied: the source list is unioned into the target's own list,
    which is created if missing.

    Errors raised by the table primitives (for example
    [`LockedMemberError`][classmix.core.errors.LockedMemberError]) propagate;
    members merged before the failure stay merged.

    Args:
        source_ns (MemberTable): Namespace to read from; not modified.
        target_ns (MemberTable): Namespace to write to.
        options (InheritOptions): Merge options (``override``).

    Returns:
        list[MergeDecision]: One decision per merged source member, in order.
    """
    decisions: list[MergeDecision] = []
    for name, member in source_ns.enumerable_items():
        decision: MergeDecision = decide_member(name, target_ns, options)
        if decision.action is MergeAction.UNION:
            added = union_into(member.value, ensure_provenance(target_ns))
            logger.trace("%s <- %s: merged provenance (%d new)", target_ns.owner, source_ns.owner, len(added))
        elif decision.action is MergeAction.COPY:
            target_ns.define(name, member)
            logger.trace("%s <- %s: copied %r (%s)", target_ns.owner, source_ns.owner, name, decision.reason)
        else:
            logger.trace("%s <- %s: kept own %r", target_ns.owner, source_ns.owner, name)
        decisions.append(decision)
    return decisions


@dataclass(frozen=True)
class MixinPlan:
    """Dry-run report of what [`apply_mixin`][classmix.core.compose.apply_mixin] would do.

    Attributes:
        target (Unit): The unit that would receive the mixin.
        source (Unit): The mixin.
        options (MixinOptions): Options the plan was computed with.
        already_applied (bool): True if ``source`` is already in the target's
            provenance list; the application would then be a no-op.
        static (tuple[MergeDecision, ...]): Decisions for static members.
        instance (tuple[MergeDecision, ...]): Decisions for instance members.
    """

    target: Unit
    source: Unit
    options: MixinOptions
    already_applied: bool
    static: tuple[MergeDecision, ...] = ()
    instance: tuple[MergeDecision, ...] = ()

    @property
    def changes(self) -> int:
        """Number of decisions that would write to the target."""
        return sum(1 for d in (*self.static, *self.instance) if d.changes_target)

    @property
    def is_noop(self) -> bool:
        """True if the application would be skipped entirely."""
        return self.already_applied


def plan_mixin(
    target: Unit | type,
    source: Unit | type,
    options: MixinOptions | None = None,
) -> MixinPlan:
    """Compute the merge decisions ``apply_mixin(target, source, options)`` would make.

    Nothing is mutated; in particular no provenance list is created. Instance
    decisions are empty when either unit has no instance namespace.

    Args:
        target (Unit | type): The unit (or class) that would receive the mixin.
        source (Unit | type): The mixin unit (or class).
        options (MixinOptions | None): Options; defaults to ``MixinOptions()``.

    Returns:
        MixinPlan: The plan.
    """
    opts: MixinOptions = options or MixinOptions()
    target_unit: Unit = as_unit(target)
    source_unit: Unit = as_unit(source)

    if any(m is source_unit for m in target_unit.applied_mixins()):
        return MixinPlan(target_unit, source_unit, opts, already_applied=True)

    static: tuple[MergeDecision, ...] = ()
    if opts.copy_static_members:
        static = tuple(decide_member(name, target_unit.static, opts) for name, _ in source_unit.static.enumerable_items())

    instance: tuple[MergeDecision, ...] = ()
    if opts.copy_instance_members and source_unit.instance is not None and target_unit.instance is not None:
        instance = tuple(
            decide_member(name, target_unit.instance, opts) for name, _ in source_unit.instance.enumerable_items()
        )

    return MixinPlan(target_unit, source_unit, opts, already_applied=False, static=static, instance=instance)
