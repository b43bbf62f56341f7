"""Exit codes used by the CLI layer."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE = 2
    KEYBOARD_INTERRUPT = 130


__all__ = ["ExitCode"]
