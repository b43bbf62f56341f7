"""
Summary: Declarative table of every recognized command line option.
Why: Binding, help text and re-serialization all read the same option surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from mediaopts.shared import OptionValue, RawConfiguration


class OptionKind(str, Enum):
    """Raw storage type of an option."""

    STRING = "string"
    FLAG = "flag"
    EXPLICIT_BOOLEAN = "explicit-boolean"
    BINDINGS = "bindings"


@dataclass(slots=True, frozen=True)
class OptionSpec:
    """A single option: external name, storage key, kind, default and help."""

    flag: str
    dest: str
    kind: OptionKind
    help: str
    default: OptionValue = None
    metavar: str | None = None

    @property
    def takes_value(self) -> bool:
        return self.kind is not OptionKind.FLAG


def _string(flag: str, dest: str, help: str, default: str | None = None, metavar: str | None = None) -> OptionSpec:
    return OptionSpec(flag, dest, OptionKind.STRING, help, default, metavar)


def _flag(flag: str, dest: str, help: str) -> OptionSpec:
    return OptionSpec(flag, dest, OptionKind.FLAG, help, False)


OPTIONS: Final[tuple[OptionSpec, ...]] = (
    _string(
        "--mode",
        "mode",
        "Open GUI in single panel mode / Enable CLI interactive mode",
        metavar="[Rename, Subtitles, SFV] or [interactive]",
    ),
    _flag("-rename", "rename", "Rename media files"),
    _string("--db", "db", "Database", metavar="[TheTVDB, AniDB] or [TheMovieDB] or [AcoustID, ID3] or [xattr]"),
    _string("--order", "order", "Episode order", "Airdate", "[Airdate, Absolute, DVD]"),
    _string(
        "--action",
        "action",
        "Rename action",
        "move",
        "[move, copy, keeplink, symlink, hardlink, reflink, test]",
    ),
    _string("--conflict", "conflict", "Conflict resolution", "skip", "[skip, override, auto, index, fail]"),
    _string("--filter", "filter", "Filter expression", metavar="expression"),
    _string("--format", "format", "Format expression", metavar="expression"),
    _flag("-non-strict", "non_strict", "Enable advanced matching and more aggressive guessing"),
    _flag("-get-subtitles", "get_subtitles", "Fetch subtitles"),
    _string("--q", "query", "Force lookup query", metavar="series/movie title"),
    _string("--lang", "lang", "Language", "en", "3-letter language code"),
    _flag("-check", "check", "Create/Check verification files"),
    _string("--output", "output", "Output path", metavar="/path"),
    _string("--encoding", "encoding", "Output character encoding", metavar="[UTF-8, Windows-1252]"),
    _flag("-list", "list", "Fetch episode list"),
    _flag("-mediainfo", "media_info", "Get media info"),
    _flag("-revert", "revert", "Revert files"),
    _flag("-extract", "extract", "Extract archives"),
    _string("-script", "script", "Run script", metavar="[fn:name] or [dev:name] or [/path/to/script]"),
    _string("--log", "log", "Log level", "all", "[all, fine, info, warning]"),
    _string("--log-file", "log_file", "Log file", metavar="/path/to/log.txt"),
    OptionSpec("--log-lock", "log_lock", OptionKind.EXPLICIT_BOOLEAN, "Lock log file", True, "[yes, no]"),
    _flag("-r", "recursive", "Recursively process folders"),
    _flag("-clear-cache", "clear_cache", "Clear cached and temporary data"),
    _flag("-clear-prefs", "clear_prefs", "Clear application settings"),
    _flag("-unixfs", "unixfs", "Do not strip invalid characters from file paths"),
    _flag("-no-xattr", "no_xattr", "Disable extended attributes"),
    _flag("-version", "version", "Print version identifier"),
    _flag("-help", "help", "Print this help message"),
    OptionSpec("--def", "defines", OptionKind.BINDINGS, "Define script variables", None, "name=value"),
)

TRUE_WORDS: Final[frozenset[str]] = frozenset({"true", "on", "yes", "1"})
FALSE_WORDS: Final[frozenset[str]] = frozenset({"false", "off", "no", "0"})


def default_value(option: OptionSpec) -> OptionValue:
    """Fresh default for ``option``; bindings default to an empty mapping."""

    if option.kind is OptionKind.BINDINGS:
        return {}
    return option.default


def parse_explicit_boolean(value: str) -> bool:
    """Parse ``yes``/``no`` style words.

    Raises:
        ValueError: If ``value`` is not a recognized boolean word.
    """
    word = value.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise ValueError(f"expected one of {', '.join(sorted(TRUE_WORDS | FALSE_WORDS))}")


def parse_binding(value: str) -> tuple[str, str]:
    """Split a ``name=value`` definition.

    Raises:
        ValueError: If ``=`` is missing or the name is empty.
    """
    name, separator, bound = value.partition("=")
    if not separator or not name.strip():
        raise ValueError("expected name=value")
    return name.strip(), bound


def _option_tokens(option: OptionSpec, value: str) -> tuple[str, ...]:
    # A separate value token starting with "-" would be read as an option.
    if value.startswith("-"):
        return (f"{option.flag}={value}",)
    return (option.flag, value)


def to_tokens(raw: RawConfiguration) -> list[str]:
    """Serialize ``raw`` back into command line tokens.

    Only values differing from their defaults are written; positional
    arguments follow a ``--`` separator so they are never read as options.
    Parsing the result yields a configuration equal to ``raw``.
    """
    tokens: list[str] = []
    for option in OPTIONS:
        value = raw.value(option.dest)
        if value == default_value(option):
            continue

        if option.kind is OptionKind.FLAG:
            tokens.append(option.flag)
        elif option.kind is OptionKind.EXPLICIT_BOOLEAN:
            tokens.extend((option.flag, "yes" if value else "no"))
        elif option.kind is OptionKind.BINDINGS:
            for name, bound in raw.bindings(option.dest).items():
                tokens.extend(_option_tokens(option, f"{name}={bound}"))
        elif value is not None:
            tokens.extend(_option_tokens(option, str(value)))

    if raw.arguments:
        tokens.append("--")
        tokens.extend(raw.arguments)
    return tokens


__all__ = [
    "OPTIONS",
    "OptionKind",
    "OptionSpec",
    "default_value",
    "parse_binding",
    "parse_explicit_boolean",
    "to_tokens",
]
