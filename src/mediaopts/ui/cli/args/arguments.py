"""
Summary: Typed view over a bound command line handed to downstream commands.
Why: Commands ask for actions, languages and files instead of raw strings.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import final

from mediaopts.features.files import resolve_files
from mediaopts.features.modes import ExecutionMode, ModeKind, has_console, resolve_execution_mode
from mediaopts.features.values import (
    ConflictAction,
    Datasource,
    HashType,
    Language,
    LogLevel,
    RenameAction,
    SortOrder,
    SubtitleFormat,
    SubtitleNaming,
    ValueResolution,
    map_conflict_action,
    map_datasource,
    map_encoding,
    map_hash_type,
    map_language,
    map_log_level,
    map_rename_action,
    map_sort_order,
    map_subtitle_format,
    map_subtitle_naming,
    resolve_values,
)
from mediaopts.shared import RawConfiguration
from mediaopts.ui.cli.args.parser import ArgumentParser
from mediaopts.ui.cli.args.schema import to_tokens


@final
class CommandLineArguments:
    """Bound command line with typed accessors.

    Every accessor derives its value from the immutable ``raw``
    configuration when called. Mapping accessors raise
    ``IllegalValueError`` for invalid values; :meth:`resolve_values` maps
    everything at once and collects the errors instead.
    """

    def __init__(self, raw: RawConfiguration, console_probe: Callable[[], bool] = has_console) -> None:
        self.raw = raw
        self._console_probe = console_probe

    @classmethod
    def parse(cls, tokens: Sequence[str], console_probe: Callable[[], bool] = has_console) -> "CommandLineArguments":
        """Parse ``tokens``; raises ``ArgumentParseError`` on malformed input."""

        return cls(ArgumentParser.parse(tokens), console_probe)

    # Raw surface -----------------------------------------------------------

    @property
    def arguments(self) -> tuple[str, ...]:
        return self.raw.arguments

    @property
    def defines(self) -> Mapping[str, str]:
        return self.raw.bindings("defines")

    def argument_array(self) -> list[str]:
        """Copy of the original tokens."""

        return list(self.raw.tokens)

    def to_tokens(self) -> list[str]:
        return to_tokens(self.raw)

    @staticmethod
    def usage() -> str:
        return ArgumentParser.format_usage()

    # Run classification ----------------------------------------------------

    def execution_mode(self) -> ExecutionMode:
        return resolve_execution_mode(self.raw, console_probe=self._console_probe)

    def run_cli(self) -> bool:
        """Whether any command line sub-operation was requested."""

        return bool(self.execution_mode().commands)

    def is_interactive(self) -> bool:
        return self.execution_mode().kind is ModeKind.INTERACTIVE

    def mode(self) -> str | None:
        return self.raw.string("mode")

    def print_version(self) -> bool:
        return self.raw.flag("version")

    def print_help(self) -> bool:
        return self.raw.flag("help")

    def clear_cache(self) -> bool:
        return self.raw.flag("clear_cache")

    def clear_user_data(self) -> bool:
        return self.raw.flag("clear_prefs")

    # Plain flags -----------------------------------------------------------

    def is_strict(self) -> bool:
        return not self.raw.flag("non_strict")

    def is_recursive(self) -> bool:
        return self.raw.flag("recursive")

    def unixfs(self) -> bool:
        return self.raw.flag("unixfs")

    def use_extended_attributes(self) -> bool:
        return not self.raw.flag("no_xattr")

    def log_lock(self) -> bool:
        return self.raw.flag("log_lock")

    # Files -----------------------------------------------------------------

    def files(self, resolve_folders: bool = True) -> list[Path]:
        """Positional arguments resolved to files; see ``resolve_files``."""

        return resolve_files(self.raw.arguments, recursive=self.is_recursive(), resolve_folders=resolve_folders)

    # Typed values ----------------------------------------------------------

    def rename_action(self) -> RenameAction:
        return map_rename_action(self.raw.string("action"))

    def conflict_action(self) -> ConflictAction:
        return map_conflict_action(self.raw.string("conflict"))

    def sort_order(self) -> SortOrder:
        return map_sort_order(self.raw.string("order"))

    def language(self) -> Language:
        return map_language(self.raw.string("lang"))

    def log_level(self) -> LogLevel:
        return map_log_level(self.raw.string("log"))

    def encoding(self) -> str | None:
        return map_encoding(self.raw.string("encoding"))

    def output_hash_type(self) -> HashType:
        return map_hash_type(self.raw.string("output"), self.raw.string("format"))

    def subtitle_naming(self) -> SubtitleNaming:
        return map_subtitle_naming(self.raw.string("format"))

    def subtitle_output_format(self) -> SubtitleFormat | None:
        return map_subtitle_format(self.raw.string("output"))

    def datasource(self) -> Datasource | None:
        return map_datasource(self.raw.string("db"))

    def resolve_values(self) -> ValueResolution:
        return resolve_values(self.raw)

    # Free-form strings -----------------------------------------------------

    def search_query(self) -> str | None:
        query = self.raw.string("query")
        return query if query else None

    def format_expression(self) -> str | None:
        return self.raw.string("format")

    def filter_expression(self) -> str | None:
        return self.raw.string("filter")

    def script(self) -> str | None:
        return self.raw.string("script")

    def log_file(self) -> Path | None:
        log_file = self.raw.string("log_file")
        return Path(log_file) if log_file else None

    def output_path(self) -> Path | None:
        output = self.raw.string("output")
        return None if output is None else Path(output)

    def absolute_output_folder(self) -> Path | None:
        """Canonical ``--output`` path; raises ``OSError`` if it cannot be resolved."""

        output = self.output_path()
        return None if output is None else output.resolve()


__all__ = ["CommandLineArguments"]
