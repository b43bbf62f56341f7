"""
Summary: Fixed language table searchable by code, three-letter code or name.
Why: ``--lang`` accepts ``en``, ``eng`` and ``English`` for the same language.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from unidecode import unidecode


@dataclass(slots=True, frozen=True)
class Language:
    """A language known to subtitle and metadata providers."""

    code: str
    iso3b: str
    iso3t: str
    name: str

    @property
    def iso3(self) -> str:
        """Bibliographic ISO 639-2 code, the one providers expect."""

        return self.iso3b

    def matches(self, value: str) -> bool:
        needle = _fold(value)
        if not needle:
            return False
        return needle in {self.code, self.iso3b, self.iso3t} or needle == _fold(self.name)

    def __str__(self) -> str:
        return self.name


def _fold(value: str) -> str:
    return unidecode(value).strip().casefold()


_L = Language

LANGUAGES: Final[tuple[Language, ...]] = (
    _L("en", "eng", "eng", "English"),
    _L("de", "ger", "deu", "German"),
    _L("fr", "fre", "fra", "French"),
    _L("es", "spa", "spa", "Spanish"),
    _L("it", "ita", "ita", "Italian"),
    _L("pt", "por", "por", "Portuguese"),
    _L("nl", "dut", "nld", "Dutch"),
    _L("sv", "swe", "swe", "Swedish"),
    _L("da", "dan", "dan", "Danish"),
    _L("no", "nor", "nor", "Norwegian"),
    _L("fi", "fin", "fin", "Finnish"),
    _L("is", "ice", "isl", "Icelandic"),
    _L("pl", "pol", "pol", "Polish"),
    _L("cs", "cze", "ces", "Czech"),
    _L("sk", "slo", "slk", "Slovak"),
    _L("sl", "slv", "slv", "Slovenian"),
    _L("hu", "hun", "hun", "Hungarian"),
    _L("ro", "rum", "ron", "Romanian"),
    _L("bg", "bul", "bul", "Bulgarian"),
    _L("hr", "hrv", "hrv", "Croatian"),
    _L("sr", "srp", "srp", "Serbian"),
    _L("bs", "bos", "bos", "Bosnian"),
    _L("mk", "mac", "mkd", "Macedonian"),
    _L("el", "gre", "ell", "Greek"),
    _L("tr", "tur", "tur", "Turkish"),
    _L("ru", "rus", "rus", "Russian"),
    _L("uk", "ukr", "ukr", "Ukrainian"),
    _L("et", "est", "est", "Estonian"),
    _L("lv", "lav", "lav", "Latvian"),
    _L("lt", "lit", "lit", "Lithuanian"),
    _L("ca", "cat", "cat", "Catalan"),
    _L("eu", "baq", "eus", "Basque"),
    _L("gl", "glg", "glg", "Galician"),
    _L("ga", "gle", "gle", "Irish"),
    _L("cy", "wel", "cym", "Welsh"),
    _L("sq", "alb", "sqi", "Albanian"),
    _L("ar", "ara", "ara", "Arabic"),
    _L("he", "heb", "heb", "Hebrew"),
    _L("fa", "per", "fas", "Persian"),
    _L("hi", "hin", "hin", "Hindi"),
    _L("bn", "ben", "ben", "Bengali"),
    _L("ta", "tam", "tam", "Tamil"),
    _L("th", "tha", "tha", "Thai"),
    _L("vi", "vie", "vie", "Vietnamese"),
    _L("id", "ind", "ind", "Indonesian"),
    _L("ms", "may", "msa", "Malay"),
    _L("tl", "tgl", "tgl", "Tagalog"),
    _L("zh", "chi", "zho", "Chinese"),
    _L("ja", "jpn", "jpn", "Japanese"),
    _L("ko", "kor", "kor", "Korean"),
    _L("eo", "epo", "epo", "Esperanto"),
)


def find_language(value: str | None) -> Language | None:
    """Return the language matching any of its representations, or ``None``."""

    if value is None:
        return None
    for language in LANGUAGES:
        if language.matches(value):
            return language
    return None


__all__ = ["LANGUAGES", "Language", "find_language"]
