# topmark:header:start
#
#   project      : Classmix
#   file         : options.py
#   file_relpath : src/classmix/core/options.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Immutable option records for the composers.

Options are plain frozen dataclasses passed explicitly to each call; there is
no process-wide default object to mutate. Callers that keep defaults in a
config file load them once (see [`classmix.config.loaders`][]) and pass the
resulting records along.

``from_mapping`` accepts snake_case, kebab-case and camelCase keys, so a TOML
table may use either ``copy_static_members``, ``copy-static-members`` or
``copyStaticMembers``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, Final, TypeVar

from classmix.core.errors import OptionsError

_O = TypeVar("_O", bound="InheritOptions")

_CAMEL_BOUNDARY: Final[re.Pattern[str]] = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_option_key(key: str) -> str:
    """Normalize ``copyStaticMembers`` / ``copy-static-members`` to ``copy_static_members``."""
    return _CAMEL_BOUNDARY.sub("_", key.strip()).replace("-", "_").lower()


@dataclass(frozen=True)
class InheritOptions:
    """Options for [`inherit`][classmix.core.compose.inherit].

    Attributes:
        copy_static_members (bool): Copy the base's static members onto the
            derived unit.
        override (bool): Also overwrite static members the derived unit
            already owns.
    """

    copy_static_members: bool = True
    override: bool = False

    @classmethod
    def from_mapping(cls: type[_O], data: Mapping[str, Any]) -> _O:
        """Build options from a mapping, filling missing keys with defaults.

        Args:
            data (Mapping[str, Any]): Raw option values, e.g. a TOML table.

        Returns:
            _O: The option record.

        Raises:
            OptionsError: On an unknown key or a non-boolean value.
        """
        known: set[str] = {f.name for f in fields(cls)}
        values: dict[str, bool] = {}
        for raw_key, raw_value in data.items():
            key: str = normalize_option_key(raw_key)
            if key not in known:
                raise OptionsError(
                    f"Unknown {cls.__name__} key {raw_key!r} (expected one of {sorted(known)})"
                )
            if not isinstance(raw_value, bool):
                raise OptionsError(
                    f"{cls.__name__}.{key} must be a boolean, got {type(raw_value).__name__}"
                )
            values[key] = raw_value
        return cls(**values)

    def with_changes(self: _O, **changes: bool | None) -> _O:
        """Return a copy with the given fields replaced; ``None`` values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def to_dict(self) -> dict[str, bool]:
        """Return the options as a plain ``{field: value}`` dict."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class MixinOptions(InheritOptions):
    """Options for [`apply_mixin`][classmix.core.compose.apply_mixin].

    Attributes:
        copy_static_members (bool): Merge the mixin's static members.
        override (bool): Replace members the target already owns.
        copy_instance_members (bool): Merge the mixin's instance members.
        proxy_instance_calls (bool): Accepted and carried along; it does not
            change any merge decision.
    """

    copy_instance_members: bool = True
    proxy_instance_calls: bool = False


@dataclass(frozen=True)
class CompositionDefaults:
    """Default options for both composers, typically loaded from a config file.

    Attributes:
        inherit (InheritOptions): Defaults for ``inherit``.
        mixin (MixinOptions): Defaults for ``apply_mixin``.
    """

    inherit: InheritOptions = InheritOptions()
    mixin: MixinOptions = MixinOptions()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CompositionDefaults:
        """Build defaults from a ``{"inherit": {...}, "mixin": {...}}`` mapping.

        Raises:
            OptionsError: On an unknown section, a section that is not a table,
                or an invalid option inside a section.
        """
        sections: dict[str, Mapping[str, Any]] = {}
        for raw_key, section in data.items():
            key: str = normalize_option_key(raw_key)
            if key not in ("inherit", "mixin"):
                raise OptionsError(f"Unknown options section {raw_key!r} (expected 'inherit' or 'mixin')")
            if not isinstance(section, Mapping):
                raise OptionsError(f"Options section {raw_key!r} must be a table")
            sections[key] = section
        return cls(
            inherit=InheritOptions.from_mapping(sections.get("inherit", {})),
            mixin=MixinOptions.from_mapping(sections.get("mixin", {})),
        )

    def to_dict(self) -> dict[str, dict[str, bool]]:
        """Return both option sets as nested plain dicts."""
        return {"inherit": self.inherit.to_dict(), "mixin": self.mixin.to_dict()}
