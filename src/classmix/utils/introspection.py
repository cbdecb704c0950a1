# topmark:header:start
#
#   project      : Classmix
#   file         : introspection.py
#   file_relpath : src/classmix/utils/introspection.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Human-friendly descriptions of member values."""

from __future__ import annotations

from functools import cached_property
from inspect import getmodule
from typing import Any, Final

_MAX_REPR: Final[int] = 60


def format_callable_pretty(obj: Any) -> str:
    """Return ``(module.qualname)`` for any callable.

    Handles functions, bound methods, callable instances, and partials. Falls
    back to the callable's class name when needed, and uses
    ``inspect.getmodule`` as a last resort to resolve the module name.

    Args:
        obj: The callable object to describe.

    Returns:
        A string like ``"(package.module.QualifiedName)"`` or ``"(QualifiedName)"``
        if the module cannot be resolved.
    """
    mod_name: str | None = getattr(obj, "__module__", None)
    call_name: str | None = getattr(obj, "__qualname__", None) or getattr(obj, "__name__", None)
    if call_name is None:
        call_name = type(obj).__name__

    if not mod_name:
        mod = getmodule(obj)
        if mod is not None and getattr(mod, "__name__", None):
            mod_name = mod.__name__

    return f"({mod_name}.{call_name})" if mod_name else f"({call_name})"


def describe_value(value: Any) -> str:
    """Return a one-line description of a member value.

    Wrapped callables (``staticmethod``, ``property``, ...) are labelled with
    their wrapper kind; other values use a shortened ``repr``.

    Examples:
        ``staticmethod (mod.Cls.make)``, ``property (mod.Cls.size)``, ``'base'``.
    """
    if isinstance(value, (staticmethod, classmethod)):
        return f"{type(value).__name__} {format_callable_pretty(value.__func__)}"
    if isinstance(value, property) and value.fget is not None:
        return f"property {format_callable_pretty(value.fget)}"
    if isinstance(value, cached_property):
        return f"cached_property {format_callable_pretty(value.func)}"
    if callable(value):
        return f"function {format_callable_pretty(value)}"
    text: str = repr(value)
    if len(text) > _MAX_REPR:
        text = text[: _MAX_REPR - 3] + "..."
    return text
