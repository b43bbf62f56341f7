"""Run classifications derived from the bound command line flags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ModeKind(str, Enum):
    """Mutually exclusive run kinds, highest priority first."""

    INTERACTIVE = "interactive"
    COMMAND = "command"
    NOOP = "noop"


class Command(str, Enum):
    """Sub-operations a command line run can request."""

    RENAME = "rename"
    SUBTITLES = "subtitles"
    CHECK = "check"
    LIST = "list"
    MEDIA_INFO = "media-info"
    REVERT = "revert"
    EXTRACT = "extract"
    SCRIPT = "script"


@dataclass(slots=True, frozen=True)
class ExecutionMode:
    """Classification of the run plus every sub-operation that was requested."""

    kind: ModeKind
    commands: frozenset[Command] = frozenset()

    @property
    def is_noop(self) -> bool:
        return self.kind is ModeKind.NOOP

    @property
    def is_interactive(self) -> bool:
        return self.kind is ModeKind.INTERACTIVE

    @property
    def is_command(self) -> bool:
        return self.kind is ModeKind.COMMAND

    def is_active(self, command: Command) -> bool:
        return command in self.commands


__all__ = ["Command", "ExecutionMode", "ModeKind"]
