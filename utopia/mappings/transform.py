"""Eager map transformations built on entry stages."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from utopia import stages


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from utopia.stages import Stage


class Mode(Enum):
    """How a transform combinator is invoked."""

    STAGE = "stage"
    EAGER = "eager"


def _entries(m: Mapping[Any, Any] | Iterable[tuple[Any, Any]]) -> Iterable[tuple[Any, Any]]:
    if isinstance(m, Mapping):
        return m.items()
    return m


def into(stage: Stage, m: Mapping[Any, Any] | Iterable[tuple[Any, Any]] | None) -> dict[Any, Any] | None:
    """Drive ``stage`` over the entries of ``m`` and collect a new dict.

    ``None`` is returned unchanged without touching the stage. Besides
    mappings, ``m`` may be any iterable of ``(key, value)`` pairs. Later
    entries win when the stage produces duplicate keys.
    """
    if m is None:
        return None
    return dict(stage(_entries(m)))


def transform(mode: Mode, stage: Stage, m: Mapping[Any, Any] | None = None) -> Stage | dict[Any, Any] | None:
    """Return ``stage`` itself in stage mode, or apply it to ``m`` in eager mode."""
    if mode is Mode.STAGE:
        return stage
    if mode is Mode.EAGER:
        return into(stage, m)
    msg = f"unknown transform mode: {mode!r}"
    raise ValueError(msg)


def map_keys(f: Callable[[Any], Any], m: Mapping[Any, Any] | None) -> dict[Any, Any] | None:
    """Return a new mapping with ``f`` applied to every key.

    When ``f`` maps two keys to the same result the later entry wins.
    """
    if m is None:
        return None
    return into(stages.map_keys(f), m)


def map_values(f: Callable[[Any], Any], m: Mapping[Any, Any] | None) -> dict[Any, Any] | None:
    """Return a new mapping with ``f`` applied to every value."""
    if m is None:
        return None
    return into(stages.map_values(f), m)


map_vals = map_values


def map_leaves(f: Callable[[Any], Any], m: Mapping[Any, Any] | None) -> dict[Any, Any] | None:
    """Return a new nested mapping with ``f`` applied to every non-mapping leaf.

    Every mapping value is treated as a branch and rebuilt recursively; the
    input must not contain reference cycles.
    """
    if m is None:
        return None
    return into(stages.map_leaves(f), m)


def filter_keys(pred: Callable[[Any], Any], m: Mapping[Any, Any] | None) -> dict[Any, Any] | None:
    if m is None:
        return None
    return into(stages.filter_keys(pred), m)


def remove_keys(pred: Callable[[Any], Any], m: Mapping[Any, Any] | None) -> dict[Any, Any] | None:
    if m is None:
        return None
    return into(stages.remove_keys(pred), m)


def filter_values(pred: Callable[[Any], Any], m: Mapping[Any, Any] | None) -> dict[Any, Any] | None:
    """Keep the entries whose value satisfies ``pred``."""
    if m is None:
        return None
    return into(stages.filter_values(pred), m)


def remove_values(pred: Callable[[Any], Any], m: Mapping[Any, Any] | None) -> dict[Any, Any] | None:
    """Drop the entries whose value satisfies ``pred``."""
    if m is None:
        return None
    return into(stages.remove_values(pred), m)


def namespace_keys(ns: str | None, m: Mapping[Any, Any] | None) -> dict[Any, Any] | None:
    """Return a new mapping with every key moved into namespace ``ns``."""
    if m is None:
        return None
    return into(stages.namespace_keys(ns), m)


ns_keys = namespace_keys


def partition_keys(
    m: Mapping[Any, Any] | None, keys: Iterable[Any]
) -> tuple[dict[Any, Any], dict[Any, Any]] | tuple[None, None]:
    """Split ``m`` into the entries under ``keys`` and everything else."""
    if m is None:
        return None, None
    wanted = set(keys)
    selected = {key: value for key, value in m.items() if key in wanted}
    rest = {key: value for key, value in m.items() if key not in wanted}
    return selected, rest
