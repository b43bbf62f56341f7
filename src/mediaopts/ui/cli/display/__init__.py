"""Console rendering for the CLI."""

from .summary import ConfigurationDisplay

__all__ = ["ConfigurationDisplay"]
