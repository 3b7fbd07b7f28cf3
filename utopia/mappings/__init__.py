"""Eager mapping transformations, merging and path search."""

from .merge import deep_merge
from .paths import find_paths, iter_paths
from .transform import (
    Mode,
    filter_keys,
    filter_values,
    into,
    map_keys,
    map_leaves,
    map_vals,
    map_values,
    namespace_keys,
    ns_keys,
    partition_keys,
    remove_keys,
    remove_values,
    transform,
)


__all__ = [
    "Mode",
    "deep_merge",
    "filter_keys",
    "filter_values",
    "find_paths",
    "into",
    "iter_paths",
    "map_keys",
    "map_leaves",
    "map_vals",
    "map_values",
    "namespace_keys",
    "ns_keys",
    "partition_keys",
    "remove_keys",
    "remove_values",
    "transform",
]
