"""Episode sort orders understood by episode list providers."""

from __future__ import annotations

from enum import Enum

from .lookup import match_name


class SortOrder(str, Enum):
    """Order in which a series' episodes are numbered."""

    AIRDATE = "Airdate"
    DVD = "DVD"
    ABSOLUTE = "Absolute"
    ABSOLUTE_AIRDATE = "AbsoluteAirdate"

    @staticmethod
    def from_name(value: str) -> "SortOrder":
        return match_name("sort order", value, ((o.value, o) for o in SortOrder))


DEFAULT_SORT_ORDER = SortOrder.AIRDATE

__all__ = ["DEFAULT_SORT_ORDER", "SortOrder"]
