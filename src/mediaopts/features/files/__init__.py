"""Public surface for positional file argument resolution."""

from .usecases.resolver import canonicalize_argument, resolve_files

__all__ = ["canonicalize_argument", "resolve_files"]
