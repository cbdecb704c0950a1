# topmark:header:start
#
#   project      : Classmix
#   file         : emitters.py
#   file_relpath : src/classmix/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Render units and merge plans for the CLI.

Payload builders (``*_payload``) return JSON-serializable dicts; text emitters
(``emit_*``) write human-readable output through the console. Machine output
never carries ANSI styling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from classmix.constants import MIXINS_KEY
from classmix.core.merge import MergeAction
from classmix.utils.introspection import describe_value

if TYPE_CHECKING:
    from classmix.cli.console import ClickConsole
    from classmix.core.merge import MergeDecision, MixinPlan
    from classmix.core.namespace import MemberTable
    from classmix.core.units import Unit

_ACTION_STYLES: dict[MergeAction, dict[str, Any]] = {
    MergeAction.COPY: {"fg": "green"},
    MergeAction.UNION: {"fg": "cyan"},
    MergeAction.SKIP: {"dim": True},
}


def _flags(member: Any) -> str:
    return "".join(
        letter if enabled else "-"
        for letter, enabled in (
            ("e", member.enumerable),
            ("w", member.writable),
            ("c", member.configurable),
        )
    )


def _members_payload(table: MemberTable | None) -> list[dict[str, Any]]:
    if table is None:
        return []
    return [
        {
            "name": name,
            "tag": member.tag,
            "value": describe_value(member.value),
            "enumerable": member.enumerable,
            "writable": member.writable,
            "configurable": member.configurable,
        }
        for name, member in table.own_items()
        if name != MIXINS_KEY
    ]


def unit_payload(unit: Unit) -> dict[str, Any]:
    """Return a JSON-serializable description of ``unit``."""
    base: Unit | None = unit.base
    return {
        "name": unit.name,
        "base": base.name if base is not None else None,
        "lineage": [u.name for u in unit.lineage()],
        "mixins": [m.name for m in unit.applied_mixins()],
        "instantiable": unit.instance is not None,
        "static": _members_payload(unit.static),
        "instance": _members_payload(unit.instance),
    }


def _decisions_payload(decisions: tuple[MergeDecision, ...]) -> list[dict[str, str]]:
    return [{"name": d.name, "action": d.action.value, "reason": d.reason} for d in decisions]


def plan_payload(plan: MixinPlan) -> dict[str, Any]:
    """Return a JSON-serializable description of ``plan``."""
    return {
        "target": plan.target.name,
        "source": plan.source.name,
        "options": plan.options.to_dict(),
        "already_applied": plan.already_applied,
        "changes": plan.changes,
        "static": _decisions_payload(plan.static),
        "instance": _decisions_payload(plan.instance),
    }


def emit_unit(console: ClickConsole, unit: Unit, *, verbosity: int = 0) -> None:
    """Print ``unit`` as text; quiet mode prints the name only."""
    console.print(console.styled(f"Unit {unit.name}", bold=True))
    if verbosity < 0:
        return
    base: Unit | None = unit.base
    if base is not None:
        console.print(f"  lineage: {' -> '.join(u.name for u in unit.lineage())}")
    mixins = unit.applied_mixins()
    console.print(f"  mixins: {', '.join(m.name for m in mixins) if mixins else '(none)'}")

    for label, table in (("static", unit.static), ("instance", unit.instance)):
        if table is None:
            console.print(f"  {label}: (not instantiable)")
            continue
        entries = [(n, m) for n, m in table.own_items() if n != MIXINS_KEY]
        console.print(f"  {label} members ({len(entries)}):")
        for name, member in entries:
            tag: str = console.styled(member.tag, fg="yellow") if member.is_delegate else member.tag
            console.print(f"    {name}: {tag} [{_flags(member)}] {describe_value(member.value)}")


def _emit_decisions(
    console: ClickConsole,
    label: str,
    decisions: tuple[MergeDecision, ...],
    *,
    verbosity: int,
) -> None:
    console.print(f"  {label}:")
    if not decisions:
        console.print("    (nothing to merge)")
        return
    for decision in decisions:
        if decision.action is MergeAction.SKIP and verbosity <= 0:
            continue
        action: str = console.styled(decision.action.value, **_ACTION_STYLES[decision.action])
        console.print(f"    {action:<6} {decision.name} ({decision.reason})")


def emit_plan(console: ClickConsole, plan: MixinPlan, *, verbosity: int = 0) -> None:
    """Print ``plan`` as text. Skipped members are listed only when verbose."""
    header: str = f"{plan.source.name} -> {plan.target.name}"
    if plan.already_applied:
        console.print(f"{header}: already applied, nothing to do")
        return
    console.print(console.styled(f"{header}: {plan.changes} change(s)", bold=True))
    if verbosity < 0:
        return
    if plan.options.copy_static_members:
        _emit_decisions(console, "static", plan.static, verbosity=verbosity)
    if plan.options.copy_instance_members:
        _emit_decisions(console, "instance", plan.instance, verbosity=verbosity)
