"""Eager forms of the stateful sequence stages."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from . import stages


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


def indistinct(coll: Iterable[Any] | None) -> list[Any]:
    """Return every repeat occurrence in ``coll``, dropping first sightings.

    >>> indistinct([1, 2, 1, 2, 2, 3, 4, 5, 1])
    [1, 2, 2, 1]
    """
    return stages.run(stages.indistinct(), coll)


def dedupe_by(f: Callable[[Any], Any], coll: Iterable[Any] | None) -> list[Any]:
    """Drop consecutive items that share the same ``f`` key, keeping the first of each run."""
    return stages.run(stages.dedupe_by(f), coll)
