"""Command line argument handling package."""

from mediaopts.ui.cli.args.arguments import CommandLineArguments
from mediaopts.ui.cli.args.parser import ArgumentParser
from mediaopts.ui.cli.args.schema import OPTIONS, OptionKind, OptionSpec, to_tokens

__all__ = ["ArgumentParser", "CommandLineArguments", "OPTIONS", "OptionKind", "OptionSpec", "to_tokens"]
