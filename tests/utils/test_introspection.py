# topmark:header:start
#
#   project      : Classmix
#   file         : test_introspection.py
#   file_relpath : tests/utils/test_introspection.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Tests for the value descriptions used by the CLI emitters."""

from __future__ import annotations

from functools import cached_property, partial

from classmix.utils.introspection import describe_value, format_callable_pretty


class Sample:
    @staticmethod
    def make() -> None:
        pass

    @classmethod
    def build(cls) -> None:
        pass

    @property
    def size(self) -> int:
        return 1

    @cached_property
    def heavy(self) -> int:
        return 2


def helper() -> None:
    pass


def test_format_callable_pretty() -> None:
    assert format_callable_pretty(helper) == f"({__name__}.helper)"
    assert format_callable_pretty(partial(helper)).startswith("(")


def test_describe_wrapped_callables() -> None:
    body = vars(Sample)
    assert describe_value(body["make"]) == f"staticmethod ({__name__}.Sample.make)"
    assert describe_value(body["build"]) == f"classmethod ({__name__}.Sample.build)"
    assert describe_value(body["size"]) == f"property ({__name__}.Sample.size)"
    assert describe_value(body["heavy"]) == f"cached_property ({__name__}.Sample.heavy)"
    assert describe_value(helper) == f"function ({__name__}.helper)"


def test_describe_plain_values_uses_short_repr() -> None:
    assert describe_value("base") == "'base'"
    long_text = describe_value("x" * 200)
    assert len(long_text) == 60
    assert long_text.endswith("...")
