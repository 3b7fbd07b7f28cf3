"""Composable sequence stages."""

from .entries import (
    filter_keys,
    filter_values,
    map_keys,
    map_leaves,
    map_vals,
    map_values,
    namespace_keys,
    ns_keys,
    remove_keys,
    remove_values,
)
from .protocol import FilterStage, MapStage, Pipeline, Stage, compose, run
from .sequences import DedupeByStage, IndistinctStage, dedupe_by, indistinct


__all__ = [
    "DedupeByStage",
    "FilterStage",
    "IndistinctStage",
    "MapStage",
    "Pipeline",
    "Stage",
    "compose",
    "dedupe_by",
    "filter_keys",
    "filter_values",
    "indistinct",
    "map_keys",
    "map_leaves",
    "map_vals",
    "map_values",
    "namespace_keys",
    "ns_keys",
    "remove_keys",
    "remove_values",
    "run",
]
