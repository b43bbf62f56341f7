"""
Summary: Immutable product of binding command line tokens to the option table.
Why: Downstream consumers share one owned value instead of a mutable bean.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeAlias

OptionValue: TypeAlias = str | bool | tuple[str, ...] | Mapping[str, str] | None


@dataclass(slots=True, frozen=True)
class RawConfiguration:
    """Raw option values keyed by option name plus the positional arguments.

    ``tokens`` keeps the original command line for re-launching and is not
    part of equality: two command lines binding to the same values compare
    equal.
    """

    options: Mapping[str, OptionValue]
    arguments: tuple[str, ...] = ()
    tokens: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        frozen: dict[str, OptionValue] = {}
        for name, value in self.options.items():
            if isinstance(value, Mapping):
                value = MappingProxyType(dict(value))
            elif isinstance(value, list):
                value = tuple(value)
            frozen[name] = value
        object.__setattr__(self, "options", MappingProxyType(frozen))
        object.__setattr__(self, "arguments", tuple(self.arguments))
        object.__setattr__(self, "tokens", tuple(self.tokens))

    def __hash__(self) -> int:
        snapshot = tuple(
            (name, tuple(sorted(value.items())) if isinstance(value, Mapping) else value)
            for name, value in sorted(self.options.items())
        )
        return hash((snapshot, self.arguments))

    def value(self, name: str) -> OptionValue:
        """Return the raw value of ``name``; unknown names raise ``KeyError``."""

        return self.options[name]

    def string(self, name: str) -> str | None:
        value = self.options[name]
        if value is None or isinstance(value, str):
            return value
        raise TypeError(f"Option {name!r} does not hold a string value")

    def flag(self, name: str) -> bool:
        value = self.options[name]
        if isinstance(value, bool):
            return value
        raise TypeError(f"Option {name!r} does not hold a boolean value")

    def bindings(self, name: str) -> Mapping[str, str]:
        value = self.options[name]
        if isinstance(value, Mapping):
            return value
        raise TypeError(f"Option {name!r} does not hold key=value bindings")


__all__ = ["OptionValue", "RawConfiguration"]
