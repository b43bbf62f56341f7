"""src/mediaopts/ui/cli/display/summary.py
What: Render the resolved command line configuration for the console.
Why: Show users what a run would do before any command consumes it.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mediaopts.features.modes import ExecutionMode
from mediaopts.features.values import IllegalValueError, ResolvedValues


def _display(value: object) -> str:
    if value is None:
        return "-"
    if isinstance(value, Enum):
        return value.value if isinstance(value.value, str) else value.name.lower()
    return str(value)


@final
class ConfigurationDisplay:
    """Renders execution mode, typed values and resolved files."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_mode(self, mode: ExecutionMode) -> None:
        commands = ", ".join(sorted(command.value for command in mode.commands)) or "none"
        self.console.print(f"[bold]Execution mode:[/bold] {mode.kind.value}")
        self.console.print(f"[bold]Commands:[/bold] {commands}")

    def show_values(self, values: ResolvedValues) -> None:
        table = Table(title="Resolved Options")
        _ = table.add_column("Option", style="cyan")
        _ = table.add_column("Value", style="green")

        rows: Sequence[tuple[str, object]] = (
            ("action", values.rename_action),
            ("conflict", values.conflict_action),
            ("order", values.sort_order),
            ("lang", values.language),
            ("log", values.log_level),
            ("encoding", values.encoding),
            ("db", values.datasource),
            ("db kind", values.datasource.kind if values.datasource else None),
            ("hash type", values.hash_type),
            ("subtitle naming", values.subtitle_naming),
            ("subtitle format", values.subtitle_format),
        )
        for label, value in rows:
            _ = table.add_row(label, _display(value))
        self.console.print(table)

    def show_errors(self, errors: Sequence[IllegalValueError]) -> None:
        self.console.print(f"[red]Invalid options: {len(errors)}[/red]")
        for error in errors:
            self.console.print(f"[red]  • {escape(str(error))}[/red]", highlight=False)

    def show_files(self, files: Sequence[Path]) -> None:
        self.console.print(f"\n[bold]Files ({len(files)}):[/bold]")
        for path in files:
            self.console.print(f"  {path}", markup=False, highlight=False)


__all__ = ["ConfigurationDisplay"]
