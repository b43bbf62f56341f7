"""
Summary: Turn positional path arguments into the ordered list of files to process.
Why: Batch renames apply in this order, so it must be deterministic.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from mediaopts.core.filesystem import canonical_path, get_children, is_visible_file, list_files
from mediaopts.platform.logging import logger


def canonicalize_argument(argument: str) -> Path:
    """Resolve ``argument`` to a canonical absolute path, best effort.

    A path that cannot be canonicalized (permissions, symlink loops) is kept
    as constructed and a warning is logged.
    """
    path = Path(argument)
    try:
        return canonical_path(path)
    except (OSError, RuntimeError) as e:
        logger.warning(
            "Illegal argument: %s (%s)",
            path,
            e,
            extra={"args_event": "files.canonicalize.failed", "path": str(path), "error_message": str(e)},
        )
        return path


def resolve_files(
    arguments: Iterable[str],
    *,
    recursive: bool = False,
    resolve_folders: bool = True,
) -> list[Path]:
    """Resolve positional arguments to files, preserving argument order.

    Args:
        arguments: Positional command line arguments.
        recursive: Expand folders to every file at any depth instead of
            their immediate visible files.
        resolve_folders: Expand folders at all. When false, a folder is
            returned as a single path like any other argument.

    Returns:
        list[Path]: Resolved paths. Arguments naming nothing on disk are kept;
        existence is checked by the consuming command.

    Raises:
        OSError: If a folder cannot be listed.
    """
    files: list[Path] = []

    for argument in arguments:
        if not argument.strip():
            continue

        path = canonicalize_argument(argument)

        if resolve_folders and path.is_dir():
            if recursive:
                expanded = list_files(path)
            else:
                expanded = get_children(path, is_visible_file)
            logger.debug(
                "Expanded %s (%d files)",
                path,
                len(expanded),
                extra={"args_event": "files.folder.expanded", "path": str(path), "count": len(expanded)},
            )
            files.extend(expanded)
        else:
            files.append(path)

    return files


__all__ = ["canonicalize_argument", "resolve_files"]
