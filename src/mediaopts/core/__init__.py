"""Core utilities shared across mediaopts layers."""

from .filesystem import canonical_path, get_children, human_name_key, list_files

__all__ = [
    "canonical_path",
    "get_children",
    "human_name_key",
    "list_files",
]
