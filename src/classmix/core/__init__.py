# topmark:header:start
#
#   project      : Classmix
#   file         : __init__.py
#   file_relpath : src/classmix/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""The composition engine.

Included modules:

- ``members``
  Member descriptors: the tagged ``Concrete`` / ``Overridable`` variants and
  the ``@overridable`` decorator.

- ``namespace``
  ``MemberTable``, the ordered namespace primitive with an optional parent
  link (the inheritance link).

- ``provenance``
  ``ProvenanceList`` and the identity-based ``union_into``.

- ``units``
  ``Unit`` / ``UnitInstance`` and the bridge from Python classes.

- ``options``
  Frozen option records.

- ``merge``
  The per-member decision algorithm, the merge itself and the dry-run plan.

- ``compose``
  ``inherit`` and ``apply_mixin``.

- ``errors``
  The exception taxonomy.
"""

from __future__ import annotations
