"""Recursive merging of nested mappings."""

from __future__ import annotations

from collections.abc import Mapping
from functools import reduce
from typing import Any

from utopia.log import get_logger


logger = get_logger(__name__)


def _merge_pair(left: Any, right: Any) -> Any:
    if not (isinstance(left, Mapping) and isinstance(right, Mapping)):
        return right

    merged = dict(left)
    for key, value in right.items():
        if key in merged:
            merged[key] = _merge_pair(merged[key], value)
        else:
            merged[key] = value
    return merged


def deep_merge(x: Any, *maps: Any) -> Any:
    """Merge nested mappings from left to right.

    Where both sides hold a mapping the two are merged key by key; anywhere
    else the right-hand value replaces the left one, even when that turns a
    mapping into a scalar. A single argument is returned as-is. Inputs are
    never mutated: merged levels are fresh dicts, untouched values are shared.
    """
    if not maps:
        return x
    logger.debug("deep_merge", count=len(maps) + 1)
    return reduce(_merge_pair, maps, x)
