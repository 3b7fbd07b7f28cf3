"""Stage interface and the generic stage implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from itertools import filterfalse
from typing import TYPE_CHECKING, Any, override


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator


class Stage(ABC):
    """Reusable transformer from one lazy sequence to another.

    A stage holds no per-traversal state of its own: every call builds a
    fresh iterator, so one stage may drive any number of traversals.
    """

    @abstractmethod
    def __call__(self, items: Iterable[Any]) -> Iterator[Any]:
        """Return a lazy iterator over the transformed items."""

    def __or__(self, other: Stage) -> Stage:
        if not isinstance(other, Stage):
            return NotImplemented
        return Pipeline(self, other)


class Pipeline(Stage):
    """Stages applied left to right."""

    def __init__(self, *stages: Stage) -> None:
        super().__init__()
        flattened: list[Stage] = []
        for stage in stages:
            if isinstance(stage, Pipeline):
                flattened.extend(stage.stages)
            elif isinstance(stage, Stage):
                flattened.append(stage)
            else:
                msg = f"pipeline members must be stages, got {type(stage).__name__}"
                raise TypeError(msg)
        self.stages = tuple(flattened)

    @override
    def __call__(self, items: Iterable[Any]) -> Iterator[Any]:
        for stage in self.stages:
            items = stage(items)
        return iter(items)

    @override
    def __repr__(self) -> str:
        return " | ".join(repr(stage) for stage in self.stages) or "Pipeline()"


class MapStage(Stage):
    """Emit ``fn(item)`` for every item."""

    def __init__(self, fn: Callable[[Any], Any], name: str = "map") -> None:
        super().__init__()
        self.fn = fn
        self.name = name

    @override
    def __call__(self, items: Iterable[Any]) -> Iterator[Any]:
        return map(self.fn, items)

    @override
    def __repr__(self) -> str:
        return f"{self.name}()"


class FilterStage(Stage):
    """Emit the items for which ``pred`` is truthy, or falsy when ``keep`` is off."""

    def __init__(self, pred: Callable[[Any], Any], *, keep: bool = True, name: str = "filter") -> None:
        super().__init__()
        self.pred = pred
        self.keep = keep
        self.name = name

    @override
    def __call__(self, items: Iterable[Any]) -> Iterator[Any]:
        if self.keep:
            return filter(self.pred, items)
        return filterfalse(self.pred, items)

    @override
    def __repr__(self) -> str:
        return f"{self.name}()"


def compose(*stages: Stage) -> Stage:
    """Compose stages left to right; no stages gives the identity pipeline."""
    return Pipeline(*stages)


def run(stage: Stage, items: Iterable[Any] | None) -> list[Any]:
    """Drive ``stage`` over ``items`` and collect the output."""
    if items is None:
        return []
    return list(stage(items))
