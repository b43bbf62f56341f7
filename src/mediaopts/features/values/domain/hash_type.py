"""Checksum file types produced and verified by the check command."""

from __future__ import annotations

from enum import Enum
from pathlib import PurePath

from .lookup import match_name


class HashType(str, Enum):
    """Verification file formats, valued by their file extension."""

    SFV = "sfv"
    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"

    @property
    def algorithm(self) -> str:
        """Name of the matching ``hashlib`` algorithm."""

        return _ALGORITHMS[self]

    @staticmethod
    def from_name(value: str) -> "HashType":
        """Resolve a type name such as ``MD5`` or ``sha256``."""

        candidates: list[tuple[str, HashType]] = []
        for hash_type in HashType:
            candidates.extend(((hash_type.name, hash_type), (hash_type.algorithm, hash_type)))
        return match_name("hash type", value, candidates)

    @staticmethod
    def by_extension(value: str) -> "HashType | None":
        """Return the type using ``value`` as extension, or ``None``."""

        needle = value.strip().lstrip(".").casefold()
        for hash_type in HashType:
            if hash_type.value == needle:
                return hash_type
        return None

    @staticmethod
    def for_path(path: PurePath) -> "HashType | None":
        """Infer the type from a verification file path such as ``report.sfv``."""

        if not path.suffix:
            return None
        return HashType.by_extension(path.suffix)


_ALGORITHMS: dict[HashType, str] = {
    HashType.SFV: "crc32",
    HashType.MD5: "md5",
    HashType.SHA1: "sha1",
    HashType.SHA256: "sha256",
}

DEFAULT_HASH_TYPE = HashType.SFV

__all__ = ["DEFAULT_HASH_TYPE", "HashType"]
