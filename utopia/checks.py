"""Argument validation returning tagged results instead of raising."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .config import get_settings
from .errors import InvalidArgumentError


if TYPE_CHECKING:
    from collections.abc import Callable


_T = TypeVar("_T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[_T]):
    """Successful check carrying the validated value."""

    value: _T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Err:
    """Failed check carrying a human readable reason."""

    reason: str
    argument: str | None = None

    @property
    def ok(self) -> bool:
        return False


def check_callable(f: Any, argument: str = "f") -> Ok[Callable[..., Any]] | Err:
    """Check that ``f`` is callable at all."""
    if not callable(f):
        return Err(f"{argument} must be callable, got {type(f).__name__}", argument)
    return Ok(f)


def check_unary(f: Any, argument: str = "f") -> Ok[Callable[[Any], Any]] | Err:
    """Check that ``f`` can be called with a single positional argument.

    Callables without an introspectable signature (some builtins and C
    extensions) are accepted. Arity checking is skipped entirely when
    ``Settings.check_arity`` is off.
    """
    result = check_callable(f, argument)
    if not result.ok or not get_settings().check_arity:
        return result

    try:
        signature = inspect.signature(f)
    except (TypeError, ValueError):
        return Ok(f)

    try:
        _ = signature.bind(None)
    except TypeError:
        return Err(f"{argument} must accept a single positional argument: {signature}", argument)
    return Ok(f)


def ensure(result: Ok[_T] | Err) -> _T:
    """Unwrap a successful result or raise :class:`InvalidArgumentError`."""
    if isinstance(result, Err):
        raise InvalidArgumentError(result.reason, argument=result.argument)
    return result.value


def ensure_unary(f: Any, argument: str = "f") -> Callable[[Any], Any]:
    """Return ``f`` unchanged when it is a valid one-argument callable."""
    return ensure(check_unary(f, argument))
