"""Public surface for execution mode classification."""

from .domain.models import Command, ExecutionMode, ModeKind
from .usecases.classifier import active_commands, has_console, resolve_execution_mode

__all__ = [
    "Command",
    "ExecutionMode",
    "ModeKind",
    "active_commands",
    "has_console",
    "resolve_execution_mode",
]
