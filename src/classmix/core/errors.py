# topmark:header:start
#
#   project      : Classmix
#   file         : errors.py
#   file_relpath : src/classmix/core/errors.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Exceptions raised by the Classmix composition primitives.

Duplicate mixin applications and member conflicts are *not* errors; they are
resolved silently by the merge policy. What remains are violations of the
member table primitives and malformed configuration. Each error also derives
from the builtin exception a caller would expect (``TypeError`` for a locked
member, ``AttributeError`` for a read-only one, ...), so generic handlers keep
working.

Composition errors are programmer errors surfaced at import time. The
composers never catch them and never roll back members copied before the
failure.
"""

from __future__ import annotations


class CompositionError(Exception):
    """Base class for all Classmix errors."""


class LockedMemberError(CompositionError, TypeError):
    """Raised when redefining a non-configurable member with a different descriptor."""

    def __init__(self, owner: str, name: str) -> None:
        super().__init__(f"Cannot redefine non-configurable member {name!r} of {owner!r}")
        self.owner = owner
        self.name = name


class ReadOnlyMemberError(CompositionError, AttributeError):
    """Raised when assigning to a non-writable member."""

    def __init__(self, owner: str, name: str) -> None:
        super().__init__(f"Member {name!r} of {owner!r} is read-only")
        self.owner = owner
        self.name = name


class CyclicLinkError(CompositionError, TypeError):
    """Raised when an inheritance link would make the delegation chain cyclic."""


class OptionsError(CompositionError, ValueError):
    """Raised for unknown option keys or non-boolean option values."""


class ConfigLoadError(CompositionError):
    """Raised when a configuration file cannot be read or parsed."""
