"""Tests for the typed command line facade."""

from __future__ import annotations

from pathlib import Path

import pytest

from mediaopts.features.modes import ModeKind
from mediaopts.features.values import (
    ConflictAction,
    HashType,
    IllegalValueError,
    LogLevel,
    RenameAction,
    SortOrder,
    SubtitleFormat,
)
from mediaopts.ui.cli.args import CommandLineArguments


def _arguments(*tokens: str, console: bool = False) -> CommandLineArguments:
    return CommandLineArguments.parse(list(tokens), console_probe=lambda: console)


def test_defaults() -> None:
    arguments = _arguments()

    assert arguments.rename_action() is RenameAction.MOVE
    assert arguments.conflict_action() is ConflictAction.SKIP
    assert arguments.sort_order() is SortOrder.AIRDATE
    assert arguments.language().name == "English"
    assert arguments.log_level() is LogLevel.ALL
    assert arguments.encoding() is None
    assert arguments.datasource() is None
    assert arguments.output_hash_type() is HashType.SFV
    assert arguments.is_strict()
    assert arguments.use_extended_attributes()
    assert arguments.log_lock()
    assert not arguments.is_recursive()
    assert not arguments.run_cli()
    assert arguments.execution_mode().kind is ModeKind.NOOP


def test_typed_values() -> None:
    arguments = _arguments(
        "--action", "copy", "--conflict", "override", "--order", "Absolute", "--lang", "ger",
        "-non-strict", "-no-xattr", "--log-lock", "off", "--encoding", "utf8",
    )

    assert arguments.rename_action() is RenameAction.COPY
    assert arguments.conflict_action() is ConflictAction.OVERRIDE
    assert arguments.sort_order() is SortOrder.ABSOLUTE
    assert arguments.language().code == "de"
    assert arguments.encoding() == "utf-8"
    assert not arguments.is_strict()
    assert not arguments.use_extended_attributes()
    assert not arguments.log_lock()


def test_invalid_value_raises_on_access_only() -> None:
    arguments = _arguments("--action", "teleport")

    assert arguments.conflict_action() is ConflictAction.SKIP
    with pytest.raises(IllegalValueError):
        _ = arguments.rename_action()
    assert not arguments.resolve_values().ok


def test_hash_type_and_subtitle_format_follow_output() -> None:
    arguments = _arguments("-check", "--output", "/media/sums.sha1", "--format", "md5")

    assert arguments.output_hash_type() is HashType.SHA1
    assert arguments.subtitle_output_format() is None
    assert _arguments("--output", "srt").subtitle_output_format() is SubtitleFormat.SUBRIP


def test_free_form_strings() -> None:
    arguments = _arguments("--q", "", "--format", "{n}", "--filter", "y > 2000", "--log-file", "run.log")

    assert arguments.search_query() is None
    assert _arguments("--q", "Alias").search_query() == "Alias"
    assert arguments.format_expression() == "{n}"
    assert arguments.filter_expression() == "y > 2000"
    assert arguments.log_file() == Path("run.log")
    assert arguments.output_path() is None
    assert arguments.absolute_output_folder() is None


def test_absolute_output_folder(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert _arguments("--output", "out").absolute_output_folder() == tmp_path.resolve() / "out"


def test_argument_array_is_a_copy() -> None:
    arguments = _arguments("-rename", "a.mkv")

    tokens = arguments.argument_array()
    tokens.append("-check")

    assert arguments.argument_array() == ["-rename", "a.mkv"]
    assert arguments.to_tokens() == ["-rename", "--", "a.mkv"]


def test_run_classification() -> None:
    assert _arguments("-rename").run_cli()
    assert _arguments("--mode", "interactive", console=True).is_interactive()
    assert not _arguments("--mode", "interactive").is_interactive()
    assert _arguments("--mode", "Rename").mode() == "Rename"
    assert _arguments("-version").print_version()
    assert _arguments("-help").print_help()
    assert _arguments("-clear-cache").clear_cache()
    assert _arguments("-clear-prefs").clear_user_data()


def test_defines() -> None:
    assert dict(_arguments("--def", "x=1", "--def", "y=2").defines) == {"x": "1", "y": "2"}


def test_files(tmp_path: Path) -> None:
    root = tmp_path.resolve()
    (root / "show" / "s1").mkdir(parents=True)
    (root / "show" / "b.mkv").touch()
    (root / "show" / "s1" / "a.mkv").touch()

    assert _arguments(str(root / "show")).files() == [root / "show" / "b.mkv"]
    assert _arguments("-r", str(root / "show")).files() == [root / "show" / "b.mkv", root / "show" / "s1" / "a.mkv"]
    assert _arguments(str(root / "show")).files(resolve_folders=False) == [root / "show"]


def test_usage_lists_options() -> None:
    usage = CommandLineArguments.usage()

    assert "-rename" in usage
    assert "--action" in usage
