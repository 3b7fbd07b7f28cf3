"""Integer-multiple arithmetic helpers."""

from __future__ import annotations

from numbers import Real

from .errors import InvalidArgumentError


def _check_step(step: Real, argument: str) -> None:
    if isinstance(step, bool) or not isinstance(step, Real):
        msg = f"{argument} must be a real number, got {type(step).__name__}"
        raise InvalidArgumentError(msg, argument=argument)
    if step == 0:
        msg = f"{argument} must not be zero"
        raise ValueError(msg)


def divide(a: Real, b: Real) -> float:
    """Return how many times ``b`` fits into ``a``."""
    _check_step(b, "b")
    return a / b


def divisible(a: Real, b: Real) -> bool:
    """Return whether ``a`` is an exact multiple of ``b``."""
    _check_step(b, "b")
    return a % b == 0


def round_to(value: Real, step: Real) -> Real:
    """Round ``value`` down to the nearest multiple of ``step``.

    Rounding follows the sign of ``step`` the way ``%`` does, so negative
    values move away from zero for a positive step.
    """
    _check_step(step, "step")
    return value - value % step
