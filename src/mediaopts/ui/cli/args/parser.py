"""Command line argument parser."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from typing import Any, NoReturn, final, override

from mediaopts.features.values import ArgumentParseError
from mediaopts.platform.logging import logger
from mediaopts.shared import OptionValue, RawConfiguration
from mediaopts.ui.cli.args.schema import (
    OPTIONS,
    OptionKind,
    OptionSpec,
    default_value,
    parse_binding,
    parse_explicit_boolean,
)

PROG = "mediaopts"
SEPARATOR = "--"
# Fixed usage line; generated usage cannot wrap metavars such as "[yes, no]".
USAGE = "%(prog)s [options] [FILE ...]"
# argparse reads these as values, not options.
_NEGATIVE_NUMBER = re.compile(r"^-\d+$|^-\d*\.\d+$")
_OPTIONS_BY_FLAG: dict[str, OptionSpec] = {option.flag: option for option in OPTIONS}


class _RaisingArgumentParser(argparse.ArgumentParser):
    """``argparse`` parser that raises instead of printing and exiting."""

    @override
    def error(self, message: str) -> NoReturn:
        raise ArgumentParseError(message)


class _BindingsAction(argparse.Action):
    """Accumulate repeated ``name=value`` definitions into one mapping."""

    @override
    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: str | Sequence[Any] | None,
        option_string: str | None = None,
    ) -> None:
        assert isinstance(values, str)
        try:
            name, bound = parse_binding(values)
        except ValueError as e:
            raise argparse.ArgumentError(self, f"{e}: {values!r}") from e
        bindings: dict[str, str] = dict(getattr(namespace, self.dest) or {})
        bindings[name] = bound
        setattr(namespace, self.dest, bindings)


def _explicit_boolean(value: str) -> bool:
    try:
        return parse_explicit_boolean(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"{e}, got {value!r}") from e


@final
class ArgumentParser:
    """Bind command line tokens to the option table."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create the ``argparse`` parser described by the option table.

        Abbreviated option names are not accepted and ``-h`` is not implied;
        ``-help`` is a regular flag answered by the caller.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = _RaisingArgumentParser(
            prog=PROG,
            usage=USAGE,
            description="Bind media command line options to typed values.",
            add_help=False,
            allow_abbrev=False,
            exit_on_error=False,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        for option in OPTIONS:
            ArgumentParser._add_option(parser, option)
        _ = parser.add_argument("arguments", nargs="*", metavar="FILE", help="Files or folders to process")
        return parser

    @staticmethod
    def _add_option(parser: argparse.ArgumentParser, option: OptionSpec) -> None:
        if option.kind is OptionKind.FLAG:
            _ = parser.add_argument(option.flag, dest=option.dest, action="store_true", help=option.help)
        elif option.kind is OptionKind.EXPLICIT_BOOLEAN:
            _ = parser.add_argument(
                option.flag,
                dest=option.dest,
                type=_explicit_boolean,
                default=option.default,
                metavar=option.metavar,
                help=option.help,
            )
        elif option.kind is OptionKind.BINDINGS:
            _ = parser.add_argument(
                option.flag,
                dest=option.dest,
                action=_BindingsAction,
                default=None,
                metavar=option.metavar,
                help=option.help,
            )
        else:
            _ = parser.add_argument(
                option.flag,
                dest=option.dest,
                default=option.default,
                metavar=option.metavar,
                help=option.help,
            )

    @staticmethod
    def parse(tokens: Sequence[str]) -> RawConfiguration:
        """Bind ``tokens`` to the option table.

        Options and positional arguments may be interleaved. Everything after
        the first ``--`` is positional.

        Args:
            tokens: Command line tokens without the program name.

        Returns:
            RawConfiguration: Every option with its default or bound value.

        Raises:
            ArgumentParseError: On unknown options, missing values or
                malformed values.
        """
        token_list = list(tokens)
        if SEPARATOR in token_list:
            split = token_list.index(SEPARATOR)
            option_tokens, trailing = token_list[:split], token_list[split + 1:]
        else:
            option_tokens, trailing = token_list, []

        ArgumentParser._check_option_names(option_tokens)
        parser = ArgumentParser.create_parser()
        try:
            namespace, extras = parser.parse_known_intermixed_args(option_tokens)
        except argparse.ArgumentError as e:
            ArgumentParser._log_failure(e.message, e.argument_name)
            raise ArgumentParseError(e.message, e.argument_name) from e
        except ArgumentParseError as e:
            ArgumentParser._log_failure(e.message, e.token)
            raise

        if extras:
            ArgumentParser._log_failure("Unrecognized option", extras[0])
            raise ArgumentParseError("Unrecognized option", extras[0])

        options: dict[str, OptionValue] = {}
        for option in OPTIONS:
            value = getattr(namespace, option.dest)
            if value is None and option.kind is OptionKind.BINDINGS:
                value = default_value(option)
            options[option.dest] = value

        arguments = [*namespace.arguments, *trailing]
        return RawConfiguration(options=options, arguments=tuple(arguments), tokens=tuple(token_list))

    @staticmethod
    def _check_option_names(tokens: Sequence[str]) -> None:
        """Reject option tokens not spelled exactly as in the option table.

        argparse still completes single-dash prefixes such as ``-che`` even
        with ``allow_abbrev=False``.
        """
        expects_value = False
        for token in tokens:
            if expects_value:
                expects_value = False
                continue
            if not token.startswith("-") or token == "-" or " " in token or _NEGATIVE_NUMBER.match(token):
                continue
            flag, separator, _ = token.partition("=")
            option = _OPTIONS_BY_FLAG.get(flag)
            if option is None:
                ArgumentParser._log_failure("Unrecognized option", token)
                raise ArgumentParseError("Unrecognized option", token)
            expects_value = option.takes_value and not separator

    @staticmethod
    def format_usage() -> str:
        """Return the help text listing every option."""

        return ArgumentParser.create_parser().format_help()

    @staticmethod
    def _log_failure(message: str, token: str | None) -> None:
        logger.debug(
            "Argument parsing failed: %s (%s)",
            message,
            token,
            extra={"args_event": "args.parse.failed", "token": token, "error_message": message},
        )


__all__ = ["ArgumentParser"]
