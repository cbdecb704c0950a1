# topmark:header:start
#
#   project      : Classmix
#   file         : __init__.py
#   file_relpath : src/classmix/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Classmix package.

Classmix composes behavior units through prototype-style inheritance and
idempotent mixins. Units carry a static namespace and an instance namespace;
``inherit`` links them to a base, ``apply_mixin`` merges another unit's members
in and records it in the target's provenance list.
"""

from __future__ import annotations

from classmix.constants import CLASSMIX_VERSION
from classmix.core.compose import apply_mixin, inherit
from classmix.core.errors import (
    CompositionError,
    ConfigLoadError,
    CyclicLinkError,
    LockedMemberError,
    OptionsError,
    ReadOnlyMemberError,
)
from classmix.core.members import Concrete, Member, Overridable, overridable
from classmix.core.merge import decide_member, merge_members, plan_mixin
from classmix.core.namespace import MemberTable
from classmix.core.options import CompositionDefaults, InheritOptions, MixinOptions
from classmix.core.provenance import ProvenanceList, union_into
from classmix.core.units import Unit, UnitInstance, as_unit
from classmix.values.datestring import DateString, InvalidDateError

__version__: str = CLASSMIX_VERSION

__all__ = [
    "CompositionDefaults",
    "CompositionError",
    "Concrete",
    "ConfigLoadError",
    "CyclicLinkError",
    "DateString",
    "InheritOptions",
    "InvalidDateError",
    "LockedMemberError",
    "Member",
    "MemberTable",
    "MixinOptions",
    "OptionsError",
    "Overridable",
    "ProvenanceList",
    "ReadOnlyMemberError",
    "Unit",
    "UnitInstance",
    "apply_mixin",
    "as_unit",
    "decide_member",
    "inherit",
    "merge_members",
    "overridable",
    "plan_mixin",
    "union_into",
]
