"""Rename actions and conflict strategies selectable on the command line."""

from __future__ import annotations

from enum import Enum

from .lookup import match_name


class RenameAction(str, Enum):
    """Represent how a renamed file reaches its destination."""

    MOVE = "move"
    COPY = "copy"
    KEEPLINK = "keeplink"
    SYMLINK = "symlink"
    HARDLINK = "hardlink"
    REFLINK = "reflink"
    TEST = "test"

    @staticmethod
    def from_name(value: str) -> "RenameAction":
        """Translate raw CLI input into the matching action."""

        return match_name("rename action", value, ((a.value, a) for a in RenameAction))


class ConflictAction(str, Enum):
    """Represent how to handle a destination path that already exists."""

    SKIP = "skip"
    OVERRIDE = "override"
    AUTO = "auto"
    INDEX = "index"
    FAIL = "fail"

    @staticmethod
    def from_name(value: str) -> "ConflictAction":
        """Translate raw CLI input into the matching strategy."""

        return match_name("conflict action", value, ((c.value, c) for c in ConflictAction))


DEFAULT_RENAME_ACTION = RenameAction.MOVE
DEFAULT_CONFLICT_ACTION = ConflictAction.SKIP

__all__ = [
    "ConflictAction",
    "DEFAULT_CONFLICT_ACTION",
    "DEFAULT_RENAME_ACTION",
    "RenameAction",
]
