"""Stateful stages over plain sequences."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, override

from utopia.checks import ensure_unary

from .protocol import Stage


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator


_NOTHING = object()


class _Seen:
    """Membership set that tolerates unhashable members.

    Hashable items live in a set and the rest in a list; lookups fall back
    to an equality scan across both, so ``{1}`` matches an earlier
    ``frozenset({1})`` and the other way round.
    """

    def __init__(self) -> None:
        super().__init__()
        self._hashed: set[Any] = set()
        self._unhashed: list[Any] = []

    def __contains__(self, item: Any) -> bool:
        try:
            if item in self._hashed:
                return True
        except TypeError:
            return item in self._unhashed or any(item == member for member in self._hashed)
        return item in self._unhashed

    def add(self, item: Any) -> None:
        try:
            self._hashed.add(item)
        except TypeError:
            self._unhashed.append(item)


class IndistinctStage(Stage):
    """Emit only items already seen earlier in the same traversal."""

    @override
    def __call__(self, items: Iterable[Any]) -> Iterator[Any]:
        seen = _Seen()
        for item in items:
            if item in seen:
                yield item
            else:
                seen.add(item)

    @override
    def __repr__(self) -> str:
        return "indistinct()"


class DedupeByStage(Stage):
    """Drop items whose key equals the key of the previously emitted item."""

    def __init__(self, f: Callable[[Any], Any]) -> None:
        super().__init__()
        self.f = f

    @override
    def __call__(self, items: Iterable[Any]) -> Iterator[Any]:
        previous = _NOTHING
        for item in items:
            key = self.f(item)
            if previous is _NOTHING or key != previous:
                previous = key
                yield item

    @override
    def __repr__(self) -> str:
        return "dedupe_by()"


def indistinct() -> Stage:
    return IndistinctStage()


def dedupe_by(f: Callable[[Any], Any]) -> Stage:
    return DedupeByStage(ensure_unary(f))
