"""
Summary: Classify a bound command line as interactive, command-driven or no-op.
Why: The entry point picks its run loop from one place instead of ad hoc flag checks.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Final

from mediaopts.features.modes.domain.models import Command, ExecutionMode, ModeKind
from mediaopts.shared import RawConfiguration

INTERACTIVE_MODE: Final[str] = "interactive"

# Boolean options that each request one sub-operation.
COMMAND_FLAGS: Final[tuple[tuple[str, Command], ...]] = (
    ("rename", Command.RENAME),
    ("get_subtitles", Command.SUBTITLES),
    ("check", Command.CHECK),
    ("list", Command.LIST),
    ("media_info", Command.MEDIA_INFO),
    ("revert", Command.REVERT),
    ("extract", Command.EXTRACT),
)


def has_console() -> bool:
    """Return whether both standard input and output are attached to a terminal."""

    return sys.stdin is not None and sys.stdout is not None and sys.stdin.isatty() and sys.stdout.isatty()


def active_commands(raw: RawConfiguration) -> frozenset[Command]:
    """Every sub-operation requested by ``raw``; several may be active at once."""

    commands = {command for name, command in COMMAND_FLAGS if raw.flag(name)}
    if raw.string("script"):
        commands.add(Command.SCRIPT)
    return frozenset(commands)


def resolve_execution_mode(
    raw: RawConfiguration,
    *,
    console_probe: Callable[[], bool] = has_console,
) -> ExecutionMode:
    """Classify the run described by ``raw``.

    Interactive wins when ``--mode interactive`` is given and a console is
    attached. Otherwise any requested sub-operation makes it a command run.
    ``-version`` and ``-help`` alone leave the run a no-op.

    Args:
        raw: Bound configuration.
        console_probe: Reports whether an interactive terminal is attached.

    Returns:
        ExecutionMode: A fresh classification; nothing is cached.
    """
    commands = active_commands(raw)
    mode = raw.string("mode")

    if mode is not None and mode.casefold() == INTERACTIVE_MODE and console_probe():
        return ExecutionMode(ModeKind.INTERACTIVE, commands)
    if commands:
        return ExecutionMode(ModeKind.COMMAND, commands)
    return ExecutionMode(ModeKind.NOOP, commands)


__all__ = [
    "COMMAND_FLAGS",
    "INTERACTIVE_MODE",
    "active_commands",
    "has_console",
    "resolve_execution_mode",
]
