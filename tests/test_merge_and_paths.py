import copy

from hypothesis import given
from hypothesis import strategies as st

from utopia import deep_merge, find_paths, iter_paths


_SCALARS = st.none() | st.booleans() | st.integers(min_value=-10_000, max_value=10_000) | st.text(max_size=10)
_NESTED = st.recursive(
    _SCALARS,
    lambda children: st.lists(children, max_size=4) | st.dictionaries(st.text(max_size=6), children, max_size=4),
    max_leaves=15,
)
_NESTED_MAPS = st.dictionaries(st.text(max_size=6), _NESTED, max_size=5)


def _even(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value % 2 == 0


def test_deep_merge_combines_nested_mappings() -> None:
    result = deep_merge(
        {"a": 1, "b": {"x": 2, "y": 3}},
        {"c": 4, "d": {"z": 5}},
        {"a": 6, "b": {"x": 7, "z": 8}},
    )
    assert result == {"a": 6, "b": {"x": 7, "y": 3, "z": 8}, "c": 4, "d": {"z": 5}}


def test_deep_merge_single_argument_is_identity() -> None:
    value = {"a": {"b": 1}}
    assert deep_merge(value) is value
    assert deep_merge(None) is None
    assert deep_merge(3) == 3


def test_deep_merge_right_non_mapping_wins() -> None:
    assert deep_merge({"a": {"b": 1}}, {"a": 2}) == {"a": 2}
    assert deep_merge({"a": 2}, {"a": {"b": 1}}) == {"a": {"b": 1}}
    assert deep_merge({"a": 1}, None) is None
    assert deep_merge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}


def test_deep_merge_does_not_mutate_inputs() -> None:
    left = {"a": {"b": 1, "c": {"d": 2}}}
    right = {"a": {"c": {"e": 3}}}
    left_before = copy.deepcopy(left)
    right_before = copy.deepcopy(right)

    result = deep_merge(left, right)

    assert result == {"a": {"b": 1, "c": {"d": 2, "e": 3}}}
    assert left == left_before
    assert right == right_before
    assert result["a"] is not left["a"]


@given(_NESTED_MAPS)
def test_deep_merge_with_itself_is_equal(value: dict) -> None:
    assert deep_merge(value, value) == value


@given(_NESTED_MAPS, _NESTED_MAPS)
def test_deep_merge_keeps_every_top_level_key(left: dict, right: dict) -> None:
    result = deep_merge(left, right)

    assert set(result) == set(left) | set(right)
    for key, value in right.items():
        if not isinstance(value, dict) or not isinstance(left.get(key), dict):
            assert result[key] == value


def test_find_paths_finds_nested_leaf() -> None:
    assert find_paths(_even, {"a": 1, "b": {"c": 2, "d": 3}}) == [["b", "c"]]


def test_find_paths_indexes_into_sequences() -> None:
    data = {"a": [1, 2, {"b": 4}], "c": (6, "x")}
    assert find_paths(_even, data) == [["a", 1], ["a", 2, "b"], ["c", 0]]


def test_find_paths_with_plain_even_predicate() -> None:
    assert find_paths(lambda v: v % 2 == 0, {"a": 1, "b": {"c": 2, "d": 3}}) == [["b", "c"]]
    assert find_paths(lambda v: v % 2 == 0, {"a": [1, 2, {"b": 4}], "c": (6, 7)}) == [["a", 1], ["a", 2, "b"], ["c", 0]]


def test_find_paths_never_tests_container_values() -> None:
    seen: list[object] = []

    def record(value: object) -> bool:
        seen.append(value)
        return isinstance(value, dict)

    data = {"user": {"name": "Ed", "address": {"city": "Paris"}}, "tags": ["x"]}

    assert find_paths(record, data) == []
    assert seen == ["Ed", "Paris", "x"]


def test_find_paths_does_not_test_sequences_themselves() -> None:
    assert find_paths(lambda value: isinstance(value, list), [[1], [2]]) == []


def test_find_paths_on_scalar_root() -> None:
    assert find_paths(_even, 4) == [[]]
    assert find_paths(_even, 3) == []


def test_find_paths_treats_strings_as_scalars() -> None:
    assert find_paths(lambda value: value == "ab", ["ab", "cd"]) == [[0]]


def test_find_paths_returns_empty_when_nothing_matches() -> None:
    assert find_paths(_even, {"a": 1, "b": [3, {"c": 5}]}) == []
    assert find_paths(_even, {}) == []


def test_iter_paths_is_lazy() -> None:
    iterator = iter_paths(_even, [2, 4, 6])
    assert next(iterator) == [0]


@given(_NESTED)
def test_every_found_path_leads_to_a_matching_value(value: object) -> None:
    for path in find_paths(_even, value):
        node = value
        for step in path:
            node = node[step]
        assert _even(node)
