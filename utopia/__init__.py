"""utopia - extensions to Python's collection primitives."""

from ._version import version as __version__
from .checks import Err, Ok, check_callable, check_unary, ensure, ensure_unary
from .errors import InvalidArgumentError, UtopiaError
from .key_mapping import KeyQualifier, local_name, namespace, qualify
from .mappings import (
    Mode,
    deep_merge,
    filter_keys,
    filter_values,
    find_paths,
    into,
    iter_paths,
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
from .rounding import divide, divisible, round_to
from .sequences import dedupe_by, indistinct
from .stages import Stage, compose


__all__ = [
    "Err",
    "InvalidArgumentError",
    "KeyQualifier",
    "Mode",
    "Ok",
    "Stage",
    "UtopiaError",
    "__version__",
    "check_callable",
    "check_unary",
    "compose",
    "dedupe_by",
    "deep_merge",
    "divide",
    "divisible",
    "ensure",
    "ensure_unary",
    "filter_keys",
    "filter_values",
    "find_paths",
    "indistinct",
    "into",
    "iter_paths",
    "local_name",
    "map_keys",
    "map_leaves",
    "map_vals",
    "map_values",
    "namespace",
    "namespace_keys",
    "ns_keys",
    "partition_keys",
    "qualify",
    "remove_keys",
    "remove_values",
    "round_to",
    "transform",
]
