"""Command line interface package."""

from mediaopts.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
