# topmark:header:start
#
#   project      : Classmix
#   file         : resolve.py
#   file_relpath : src/classmix/cli/resolve.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Resolve ``module:attribute`` references to units.

The attribute path after the colon may be dotted (``pkg.mod:Outer.Inner``).
The resolved object may be a [`Unit`][classmix.core.units.Unit] or a plain
class; classes are converted through [`as_unit`][classmix.core.units.as_unit].
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any

from classmix.cli.errors import ClassmixUsageError
from classmix.config.logging import get_logger
from classmix.core.units import Unit, as_unit

if TYPE_CHECKING:
    from classmix.config.logging import ClassmixLogger

logger: ClassmixLogger = get_logger(__name__)


def resolve_unit_ref(ref: str) -> Unit:
    """Import ``module:attr`` and return it as a unit.

    Args:
        ref (str): Reference such as ``"myapp.models:Widget"``.

    Returns:
        Unit: The referenced unit.

    Raises:
        ClassmixUsageError: If the reference is malformed, the module cannot be
            imported, the attribute is missing, or it is neither a unit nor a class.
    """
    module_name, sep, attr_path = ref.partition(":")
    if not sep or not module_name or not attr_path:
        raise ClassmixUsageError(f"Invalid unit reference {ref!r}: expected 'module:attribute'")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ClassmixUsageError(f"Cannot import module {module_name!r}: {exc}") from exc

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise ClassmixUsageError(f"{module_name!r} has no attribute {attr_path!r}") from exc

    if not isinstance(obj, (Unit, type)):
        raise ClassmixUsageError(f"{ref!r} is a {type(obj).__name__}, not a unit or class")
    logger.debug("Resolved %s -> %r", ref, obj)
    return as_unit(obj)
