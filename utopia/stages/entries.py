"""Stages over ``(key, value)`` map entries.

Each constructor validates its function up front and returns a
:class:`~utopia.stages.protocol.Stage`; nothing is evaluated until the stage
is driven over a sequence of entries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from utopia.checks import ensure_unary
from utopia.key_mapping import DEFAULT_QUALIFIER

from .protocol import FilterStage, MapStage


if TYPE_CHECKING:
    from collections.abc import Callable

    from .protocol import Stage


def map_leaf(f: Callable[[Any], Any], value: Any) -> Any:
    """Apply ``f`` to ``value``, or to every leaf below it when it is a mapping."""
    if isinstance(value, Mapping):
        return {key: map_leaf(f, child) for key, child in value.items()}
    return f(value)


def map_keys(f: Callable[[Any], Any]) -> Stage:
    """Stage replacing every entry key ``k`` with ``f(k)``."""
    f = ensure_unary(f)
    return MapStage(lambda entry: (f(entry[0]), entry[1]), name="map_keys")


def map_values(f: Callable[[Any], Any]) -> Stage:
    """Stage replacing every entry value ``v`` with ``f(v)``."""
    f = ensure_unary(f)
    return MapStage(lambda entry: (entry[0], f(entry[1])), name="map_values")


map_vals = map_values


def map_leaves(f: Callable[[Any], Any]) -> Stage:
    """Stage applying ``f`` to every non-mapping value, descending into mappings."""
    f = ensure_unary(f)
    return MapStage(lambda entry: (entry[0], map_leaf(f, entry[1])), name="map_leaves")


def filter_keys(pred: Callable[[Any], Any]) -> Stage:
    pred = ensure_unary(pred, "pred")
    return FilterStage(lambda entry: pred(entry[0]), name="filter_keys")


def remove_keys(pred: Callable[[Any], Any]) -> Stage:
    pred = ensure_unary(pred, "pred")
    return FilterStage(lambda entry: pred(entry[0]), keep=False, name="remove_keys")


def filter_values(pred: Callable[[Any], Any]) -> Stage:
    pred = ensure_unary(pred, "pred")
    return FilterStage(lambda entry: pred(entry[1]), name="filter_values")


def remove_values(pred: Callable[[Any], Any]) -> Stage:
    pred = ensure_unary(pred, "pred")
    return FilterStage(lambda entry: pred(entry[1]), keep=False, name="remove_values")


def namespace_keys(ns: str | None) -> Stage:
    """Stage moving every key into namespace ``ns``, keeping its local name."""
    return map_keys(DEFAULT_QUALIFIER.requalifier(ns))


ns_keys = namespace_keys
