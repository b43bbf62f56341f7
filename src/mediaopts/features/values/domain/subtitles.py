"""Subtitle naming schemes and output formats."""

from __future__ import annotations

from enum import Enum

from .lookup import match_name


class SubtitleNaming(str, Enum):
    """Describe how fetched subtitle files are named next to their video."""

    ORIGINAL = "original"
    MATCH_VIDEO = "match-video"
    MATCH_VIDEO_ADD_LANGUAGE_TAG = "match-video-lang"

    @property
    def label(self) -> str:
        return _NAMING_LABELS[self]

    @staticmethod
    def from_name(value: str) -> "SubtitleNaming":
        """Accept the short value, the enum name or the display label."""

        candidates: list[tuple[str, SubtitleNaming]] = []
        for naming in SubtitleNaming:
            candidates.extend(((naming.value, naming), (naming.name, naming), (naming.label, naming)))
        return match_name("subtitle naming", value, candidates)


_NAMING_LABELS: dict[SubtitleNaming, str] = {
    SubtitleNaming.ORIGINAL: "Keep Original",
    SubtitleNaming.MATCH_VIDEO: "Match Video",
    SubtitleNaming.MATCH_VIDEO_ADD_LANGUAGE_TAG: "Match Video and Language",
}

DEFAULT_SUBTITLE_NAMING = SubtitleNaming.MATCH_VIDEO_ADD_LANGUAGE_TAG


class SubtitleFormat(Enum):
    """Subtitle file formats that fetched subtitles can be converted to."""

    SUBRIP = ("SubRip", ("srt",))
    MICRODVD = ("MicroDVD", ("sub",))
    SUBVIEWER = ("SubViewer", ("sub",))
    SSA = ("SubStationAlpha", ("ssa", "ass"))
    SAMI = ("SAMI", ("smi", "sami"))

    def __init__(self, label: str, extensions: tuple[str, ...]) -> None:
        self.label = label
        self.extensions = extensions

    @staticmethod
    def by_name(value: str) -> "SubtitleFormat | None":
        """Find a format by label or file extension.

        Only exact (case-insensitive) matches count. Formats sharing an
        extension resolve to the first declared one.
        """
        needle = value.strip().lstrip(".").casefold()
        for subtitle_format in SubtitleFormat:
            if subtitle_format.label.casefold() == needle:
                return subtitle_format
        for subtitle_format in SubtitleFormat:
            if needle in subtitle_format.extensions:
                return subtitle_format
        return None


__all__ = ["DEFAULT_SUBTITLE_NAMING", "SubtitleFormat", "SubtitleNaming"]
