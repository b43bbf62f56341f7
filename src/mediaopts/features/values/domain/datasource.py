"""Metadata sources that ``--db`` may name."""

from __future__ import annotations

from enum import Enum

from .lookup import match_name


class MediaKind(str, Enum):
    """Kind of media a data source describes."""

    EPISODE = "episode"
    MOVIE = "movie"
    MUSIC = "music"
    LOCAL = "local"


class Datasource(str, Enum):
    """Known data sources, valued by their identifier."""

    THETVDB = "TheTVDB"
    ANIDB = "AniDB"
    THEMOVIEDB = "TheMovieDB"
    OMDB = "OMDb"
    ACOUSTID = "AcoustID"
    ID3 = "ID3"
    XATTR = "xattr"

    @property
    def kind(self) -> MediaKind:
        return _KINDS[self]

    @staticmethod
    def from_name(value: str) -> "Datasource":
        return match_name("datasource", value, ((d.value, d) for d in Datasource))


_KINDS: dict[Datasource, MediaKind] = {
    Datasource.THETVDB: MediaKind.EPISODE,
    Datasource.ANIDB: MediaKind.EPISODE,
    Datasource.THEMOVIEDB: MediaKind.MOVIE,
    Datasource.OMDB: MediaKind.MOVIE,
    Datasource.ACOUSTID: MediaKind.MUSIC,
    Datasource.ID3: MediaKind.MUSIC,
    Datasource.XATTR: MediaKind.LOCAL,
}

__all__ = ["Datasource", "MediaKind"]
