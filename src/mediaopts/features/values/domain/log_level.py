"""Log severity ladder accepted by ``--log``."""

from __future__ import annotations

import logging
from enum import IntEnum

from .errors import IllegalValueError


class LogLevel(IntEnum):
    """Severity names mapped onto standard library ``logging`` levels.

    The ladder runs from ``OFF`` (nothing is logged) down to ``ALL``
    (everything is logged). Intermediate fine-grained levels sit below
    ``logging.DEBUG``.
    """

    OFF = logging.CRITICAL + 10
    SEVERE = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    CONFIG = logging.INFO - 5
    FINE = logging.DEBUG
    FINER = logging.DEBUG - 3
    FINEST = logging.DEBUG - 6
    ALL = logging.NOTSET + 1

    @staticmethod
    def from_name(value: str) -> "LogLevel":
        """Parse a level name (any case) or a numeric level.

        The standard library names ``debug``, ``error`` and ``critical`` are
        accepted as aliases of ``fine``, ``severe`` and ``severe``.
        """
        needle = value.strip().upper()
        if needle in LogLevel.__members__:
            return LogLevel[needle]
        if needle in _ALIASES:
            return _ALIASES[needle]
        if needle.isdigit():
            number = int(needle)
            for level in LogLevel:
                if level.value == number:
                    return level
        valid = ", ".join(level.name.lower() for level in LogLevel)
        raise IllegalValueError("log level", value, valid)


_ALIASES: dict[str, LogLevel] = {
    "DEBUG": LogLevel.FINE,
    "ERROR": LogLevel.SEVERE,
    "CRITICAL": LogLevel.SEVERE,
    "WARN": LogLevel.WARNING,
}

__all__ = ["LogLevel"]
