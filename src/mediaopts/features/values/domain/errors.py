"""Errors raised while binding and mapping command line values."""

from __future__ import annotations


class ArgumentParseError(ValueError):
    """Raised when the raw token sequence cannot be bound to the option table."""

    def __init__(self, message: str, token: str | None = None) -> None:
        self.message = message
        self.token = token
        super().__init__(message if token is None else f"{message}: {token}")


class IllegalValueError(ValueError):
    """Raised when an option carries a value that maps to no domain value."""

    def __init__(self, field: str, value: object, valid: str | None = None) -> None:
        self.field = field
        self.value = value
        self.valid = valid
        message = f"Illegal {field}: {value!r}"
        if valid:
            message = f"{message}. Valid options: {valid}"
        super().__init__(message)


__all__ = ["ArgumentParseError", "IllegalValueError"]
