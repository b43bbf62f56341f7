"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
import re
import stat
from collections.abc import Callable
from pathlib import Path

from unidecode import unidecode

_DIGITS = re.compile(r"(\d+)")

PathFilter = Callable[[Path], bool]


def human_name_key(name: str) -> tuple[tuple[tuple[int, int, str], ...], str]:
    """Sort key ordering names the way people read them.

    Runs of digits compare by numeric value (``file2`` before ``file10``) and
    text compares case- and accent-insensitively (``Émile`` next to
    ``emile``). The raw name breaks remaining ties so the order is total.
    """
    folded = unidecode(name).casefold()
    parts: list[tuple[int, int, str]] = []
    for index, chunk in enumerate(_DIGITS.split(folded)):
        if index % 2:
            parts.append((0, int(chunk), chunk))
        elif chunk:
            parts.append((1, 0, chunk))
    return tuple(parts), name


def human_path_key(path: Path) -> tuple[tuple[tuple[int, int, str], ...], str]:
    return human_name_key(path.name)


def is_hidden(path: Path) -> bool:
    """Return whether ``path`` is hidden (dot file or Windows hidden attribute)."""

    if path.name.startswith("."):
        return True
    if os.name != "nt":
        return False
    return bool(path.lstat().st_file_attributes & stat.FILE_ATTRIBUTE_HIDDEN)


def is_regular_file(path: Path) -> bool:
    return path.is_file()


def is_visible_file(path: Path) -> bool:
    return path.is_file() and not is_hidden(path)


def get_children(directory: Path, accept: PathFilter | None = None) -> list[Path]:
    """List the immediate children of ``directory`` in human name order.

    Raises:
        OSError: If the directory cannot be listed.
    """
    children = [child for child in directory.iterdir() if accept is None or accept(child)]
    return sorted(children, key=human_path_key)


def list_files(directory: Path, accept: PathFilter = is_regular_file) -> list[Path]:
    """Collect accepted files below ``directory`` at any depth.

    Each directory level is ordered by :func:`human_name_key`, and a folder's
    contents take the folder's place in that order. Hidden entries are not
    visited. Every directory is entered at most once, so symlinked folders
    pointing back up the tree do not repeat files.

    Raises:
        OSError: If a directory cannot be listed.
    """
    files: list[Path] = []
    visited: set[tuple[int, int]] = set()

    def walk(folder: Path) -> None:
        info = folder.stat()
        identity = (info.st_dev, info.st_ino)
        if identity in visited:
            return
        visited.add(identity)

        for child in get_children(folder, lambda entry: not is_hidden(entry)):
            if child.is_dir():
                walk(child)
            elif accept(child):
                files.append(child)

    walk(directory)
    return files


def canonical_path(path: Path) -> Path:
    """Resolve ``path`` to an absolute path with symlinks removed.

    Raises:
        OSError: On permission problems or symlink loops (Python 3.13+).
        RuntimeError: On symlink loops (earlier Python versions).
    """
    return path.resolve()


__all__ = [
    "PathFilter",
    "canonical_path",
    "get_children",
    "human_name_key",
    "human_path_key",
    "is_hidden",
    "is_regular_file",
    "is_visible_file",
    "list_files",
]
