# topmark:header:start
#
#   project      : Classmix
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Pytest configuration for the Classmix test suite.

Sets up global fixtures and TRACE-level logging so composition steps show up
in captured output when a test fails.

Notes:
    Classes handed to the composers are converted once and cached (see
    `classmix.core.units.as_unit`). Tests that mutate a unit built from a
    class must define that class inside the test so no state leaks between
    tests.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from classmix.config import logging
from classmix.constants import LOG_LEVEL_ENV_VAR
from classmix.core.units import Unit

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.mark.parametrize(*args, **kwargs))


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_classmix_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop ``CLASSMIX_LOG_LEVEL``.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_unit(
    name: str,
    *,
    static: dict[str, Any] | None = None,
    instance: dict[str, Any] | None = None,
) -> Unit:
    """Return a fresh unit with the given members.

    Args:
        name (str): Unit name.
        static (dict[str, Any] | None): Static members (plain values or `Member` instances).
        instance (dict[str, Any] | None): Instance members.

    Returns:
        Unit: The new unit.
    """
    return Unit(name, static=static, instance=instance)


@pytest.fixture
def base_unit() -> Unit:
    """A base unit with one static value and one instance method."""
    return make_unit(
        "Base",
        static={"kind": "base"},
        instance={"describe": lambda self: "base instance"},
    )
