"""Command line interface for mediaopts."""

from __future__ import annotations

import sys
import tomllib
from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.markup import escape

from mediaopts import __version__
from mediaopts.config import Config
from mediaopts.features.values import ArgumentParseError, IllegalValueError, LogLevel
from mediaopts.platform.logging import logger, setup_logger
from mediaopts.ui.cli.args import CommandLineArguments
from mediaopts.ui.cli.display import ConfigurationDisplay
from mediaopts.ui.cli.exit_codes import ExitCode


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(
        args_list: Sequence[str] | None = None,
        console: Console | None = None,
    ) -> ExitCode:
        """Bind ``args_list`` and report the resolved configuration.

        Args:
            args_list: Command line tokens (defaults to ``sys.argv[1:]``).
            console: Console for regular output.

        Returns:
            ExitCode: ``USAGE`` for malformed command lines, ``GENERAL_ERROR``
            for illegal option values or unreadable folders.
        """
        console = console or Console()
        tokens = list(sys.argv[1:] if args_list is None else args_list)

        try:
            arguments = CommandLineArguments.parse(tokens)
        except ArgumentParseError as e:
            CommandProcessor._print_error(str(e))
            Console(stderr=True).print("Try '-help' for the list of options.", markup=False)
            return ExitCode.USAGE

        try:
            return CommandProcessor._run(arguments, console)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return ExitCode.KEYBOARD_INTERRUPT

    @staticmethod
    def _run(arguments: CommandLineArguments, console: Console) -> ExitCode:
        if arguments.print_help():
            console.print(arguments.usage(), markup=False, highlight=False)
            return ExitCode.SUCCESS
        if arguments.print_version():
            console.print(f"mediaopts {__version__}", markup=False, highlight=False)
            return ExitCode.SUCCESS

        try:
            configuration = Config.load()
        except (tomllib.TOMLDecodeError, IllegalValueError, OSError) as e:
            CommandProcessor._print_error(f"Invalid configuration file: {e}")
            return ExitCode.GENERAL_ERROR

        resolution = arguments.resolve_values()
        file_level = LogLevel.FINE
        try:
            file_level = LogLevel.from_name(configuration.file_log_level)
        except IllegalValueError as e:
            resolution.errors.append(e)

        log_file = arguments.log_file() or configuration.log_file
        try:
            _ = setup_logger(
                log_file=log_file,
                console_level=resolution.values.log_level or LogLevel.ALL,
                file_level=file_level,
            )
        except OSError as e:
            CommandProcessor._print_error(f"Cannot open log file {log_file}: {e}")
            return ExitCode.GENERAL_ERROR

        display = ConfigurationDisplay(console)
        if not resolution.ok:
            for error in resolution.errors:
                logger.debug(
                    "Illegal option value: %s",
                    error,
                    extra={"args_event": "values.illegal", "error_message": str(error)},
                )
            display.show_errors(resolution.errors)
            return ExitCode.GENERAL_ERROR

        mode = arguments.execution_mode()
        display.show_mode(mode)
        display.show_values(resolution.values)

        try:
            files = arguments.files()
        except OSError as e:
            logger.error("Failed to list files: %s", e)
            return ExitCode.GENERAL_ERROR

        display.show_files(files)
        return ExitCode.SUCCESS

    @staticmethod
    def _print_error(message: str) -> None:
        Console(stderr=True).print(f"[red]{escape(message)}[/red]", highlight=False)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success).
    """
    return int(CommandProcessor.process_command())
