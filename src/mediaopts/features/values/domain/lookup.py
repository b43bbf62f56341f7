"""
Summary: Case-insensitive exact-or-prefix lookup over fixed name tables.
Why: Every option enumeration resolves user input with the same matching rules.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import TypeVar

from .errors import IllegalValueError

E = TypeVar("E", bound=Enum)


def _normalize(value: str) -> str:
    return value.strip().casefold()


def match_name(field: str, value: str, candidates: Iterable[tuple[str, E]]) -> E:
    """Return the member whose name matches ``value``.

    An exact (case-insensitive) match always wins. Otherwise ``value`` must be
    the prefix of exactly one member's names; several members sharing the
    prefix is as illegal as no member at all.

    Args:
        field: Option label used in the error message.
        value: Raw user input.
        candidates: ``(name, member)`` pairs. A member may appear under
            several names (aliases, display labels).

    Raises:
        IllegalValueError: If nothing or more than one member matches.
    """
    table = list(candidates)
    needle = _normalize(value)

    if needle:
        for name, member in table:
            if _normalize(name) == needle:
                return member

        prefixed = {member for name, member in table if _normalize(name).startswith(needle)}
        if len(prefixed) == 1:
            return prefixed.pop()

    # First name listed for each member is the one shown to users.
    primary: dict[E, str] = {}
    for name, member in table:
        _ = primary.setdefault(member, name)
    raise IllegalValueError(field, value, ", ".join(primary.values()))


__all__ = ["match_name"]
