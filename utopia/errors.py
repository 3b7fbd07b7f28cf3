"""Exception types raised by utopia."""

from __future__ import annotations


class UtopiaError(Exception):
    """Base class for all utopia errors."""


class InvalidArgumentError(UtopiaError, TypeError):
    """Raised when a supplied transform or predicate has the wrong shape."""

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument
