"""Predicate-driven path search over nested mappings and sequences."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from utopia.checks import ensure_unary
from utopia.log import get_logger


if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


logger = get_logger(__name__)

_SCALAR_SEQUENCES = (str, bytes, bytearray)


def _is_branch(value: Any) -> bool:
    return isinstance(value, Mapping) or _is_sequence(value)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_SEQUENCES)


def iter_paths(pred: Callable[[Any], Any], coll: Any, path: tuple[Any, ...] = ()) -> Iterator[list[Any]]:
    """Lazily yield the paths of ``coll`` whose values satisfy ``pred``.

    Only leaves are tested: mappings and sequences are descended into
    without calling ``pred`` on them. Mapping keys and sequence indices
    extend the path. A scalar root is tested directly and matches with an
    empty path. ``coll`` must be acyclic.
    """
    if isinstance(coll, Mapping):
        for key, value in coll.items():
            child = (*path, key)
            if _is_branch(value):
                yield from iter_paths(pred, value, child)
            elif pred(value):
                yield list(child)
    elif _is_sequence(coll):
        for index, element in enumerate(coll):
            yield from iter_paths(pred, element, (*path, index))
    elif pred(coll):
        yield list(path)


def find_paths(pred: Callable[[Any], Any], coll: Any) -> list[list[Any]]:
    """Return every path in ``coll`` whose value satisfies ``pred``, in pre-order."""
    pred = ensure_unary(pred, "pred")
    paths = list(iter_paths(pred, coll))
    logger.debug("find_paths", matches=len(paths))
    return paths
