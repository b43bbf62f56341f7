"""Public surface for option value mapping."""

from .domain.actions import ConflictAction, RenameAction
from .domain.datasource import Datasource, MediaKind
from .domain.errors import ArgumentParseError, IllegalValueError
from .domain.hash_type import HashType
from .domain.language import LANGUAGES, Language, find_language
from .domain.log_level import LogLevel
from .domain.sort_order import SortOrder
from .domain.subtitles import SubtitleFormat, SubtitleNaming
from .usecases.mappers import (
    ResolvedValues,
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

__all__ = [
    "ArgumentParseError",
    "ConflictAction",
    "Datasource",
    "HashType",
    "IllegalValueError",
    "LANGUAGES",
    "Language",
    "LogLevel",
    "MediaKind",
    "RenameAction",
    "ResolvedValues",
    "SortOrder",
    "SubtitleFormat",
    "SubtitleNaming",
    "ValueResolution",
    "find_language",
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
