"""
Summary: Pure translations from raw option strings to typed domain values.
Why: Defaults apply only to absent options; present but invalid values fail.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Callable, TypeVar

from mediaopts.shared import RawConfiguration

from mediaopts.features.values.domain.actions import (
    DEFAULT_CONFLICT_ACTION,
    DEFAULT_RENAME_ACTION,
    ConflictAction,
    RenameAction,
)
from mediaopts.features.values.domain.datasource import Datasource
from mediaopts.features.values.domain.errors import IllegalValueError
from mediaopts.features.values.domain.hash_type import DEFAULT_HASH_TYPE, HashType
from mediaopts.features.values.domain.language import Language, find_language
from mediaopts.features.values.domain.log_level import LogLevel
from mediaopts.features.values.domain.sort_order import DEFAULT_SORT_ORDER, SortOrder
from mediaopts.features.values.domain.subtitles import DEFAULT_SUBTITLE_NAMING, SubtitleFormat, SubtitleNaming

T = TypeVar("T")


def map_rename_action(value: str | None) -> RenameAction:
    return DEFAULT_RENAME_ACTION if value is None else RenameAction.from_name(value)


def map_conflict_action(value: str | None) -> ConflictAction:
    return DEFAULT_CONFLICT_ACTION if value is None else ConflictAction.from_name(value)


def map_sort_order(value: str | None) -> SortOrder:
    return DEFAULT_SORT_ORDER if value is None else SortOrder.from_name(value)


def map_subtitle_naming(value: str | None) -> SubtitleNaming:
    """Resolve the naming scheme that ``--format`` selects for subtitles."""

    return DEFAULT_SUBTITLE_NAMING if value is None else SubtitleNaming.from_name(value)


def map_language(value: str | None) -> Language:
    """Find a language by code (``en``), three-letter code (``eng``) or name.

    There is no fallback: ``--lang`` itself defaults to ``en``, so ``None``
    only reaches this function when a caller bypassed the option table.
    """
    language = find_language(value)
    if language is None:
        raise IllegalValueError("language code", value)
    return language


def map_log_level(value: str | None) -> LogLevel:
    if value is None:
        raise IllegalValueError("log level", value)
    return LogLevel.from_name(value)


def map_encoding(value: str | None) -> str | None:
    """Return the canonical codec name for ``value``, e.g. ``utf-8``."""

    if value is None:
        return None
    try:
        return codecs.lookup(value.strip()).name
    except LookupError as e:
        raise IllegalValueError("character encoding", value) from e


def map_hash_type(output: str | None, format_value: str | None) -> HashType:
    """Resolve the checksum type written or verified by the check command.

    The ``--output`` path wins when its extension names a hash type
    (``--output report.sfv``). Otherwise ``--format`` is read as a type name
    or extension (``--format MD5``). With neither, SFV is used.

    Raises:
        IllegalValueError: If ``--format`` is consulted and names no hash type.
    """
    if output is not None:
        inferred = HashType.for_path(PurePath(output))
        if inferred is not None:
            return inferred

    if format_value is not None:
        by_extension = HashType.by_extension(format_value)
        if by_extension is not None:
            return by_extension
        return HashType.from_name(format_value)

    return DEFAULT_HASH_TYPE


def map_subtitle_format(output: str | None) -> SubtitleFormat | None:
    return None if output is None else SubtitleFormat.by_name(output)


def map_datasource(value: str | None) -> Datasource | None:
    return None if value is None else Datasource.from_name(value)


@dataclass(slots=True)
class ResolvedValues:
    """Typed option values; ``None`` where the mapping failed or is unset."""

    rename_action: RenameAction | None = None
    conflict_action: ConflictAction | None = None
    sort_order: SortOrder | None = None
    language: Language | None = None
    log_level: LogLevel | None = None
    encoding: str | None = None
    hash_type: HashType | None = None
    subtitle_naming: SubtitleNaming | None = None
    subtitle_format: SubtitleFormat | None = None
    datasource: Datasource | None = None


@dataclass(slots=True)
class ValueResolution:
    """Outcome of mapping every option at once."""

    values: ResolvedValues
    errors: list[IllegalValueError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def resolve_values(raw: RawConfiguration, *, include_subtitles: bool | None = None) -> ValueResolution:
    """Map every typed option of ``raw``, collecting errors instead of raising.

    ``--format`` doubles as a rename format expression, so it is only read as
    a subtitle naming scheme when subtitles are requested. ``include_subtitles``
    overrides that decision; by default it follows ``-get-subtitles``.

    Args:
        raw: Bound configuration.
        include_subtitles: Whether to map ``--format`` as a subtitle naming.

    Returns:
        ValueResolution: Values that mapped plus every ``IllegalValueError``.
    """
    if include_subtitles is None:
        include_subtitles = raw.flag("get_subtitles")

    values = ResolvedValues()
    errors: list[IllegalValueError] = []

    def attempt(mapper: Callable[[], T]) -> T | None:
        try:
            return mapper()
        except IllegalValueError as e:
            errors.append(e)
            return None

    values.rename_action = attempt(lambda: map_rename_action(raw.string("action")))
    values.conflict_action = attempt(lambda: map_conflict_action(raw.string("conflict")))
    values.sort_order = attempt(lambda: map_sort_order(raw.string("order")))
    values.language = attempt(lambda: map_language(raw.string("lang")))
    values.log_level = attempt(lambda: map_log_level(raw.string("log")))
    values.encoding = attempt(lambda: map_encoding(raw.string("encoding")))
    values.datasource = attempt(lambda: map_datasource(raw.string("db")))
    values.subtitle_format = map_subtitle_format(raw.string("output"))

    if raw.flag("check"):
        values.hash_type = attempt(lambda: map_hash_type(raw.string("output"), raw.string("format")))
    if include_subtitles:
        values.subtitle_naming = attempt(lambda: map_subtitle_naming(raw.string("format")))

    return ValueResolution(values=values, errors=errors)


__all__ = [
    "ResolvedValues",
    "ValueResolution",
    "map_conflict_action",
    "map_datasource",
    "map_encoding",
    "map_hash_type",
    "map_language",
    "map_log_level",
    "map_rename_action",
    "map_sort_order",
    "map_subtitle_format",
    "map_subtitle_naming",
    "resolve_values",
]
