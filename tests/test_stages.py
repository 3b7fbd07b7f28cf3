import pytest

from utopia import stages
from utopia.errors import InvalidArgumentError
from utopia.stages import FilterStage, MapStage, Pipeline, Stage, compose, run


def test_entry_stages_work_on_plain_entry_sequences() -> None:
    stage = stages.map_keys(str.upper)
    assert list(stage([("a", 1), ("b", 2)])) == [("A", 1), ("B", 2)]


def test_stages_are_lazy() -> None:
    calls: list[int] = []

    def record(value: int) -> int:
        calls.append(value)
        return value

    iterator = stages.map_values(record)([("a", 1), ("b", 2)])
    assert calls == []

    assert next(iterator) == ("a", 1)
    assert calls == [1]


def test_pipe_operator_composes_left_to_right() -> None:
    pipeline = stages.remove_values(lambda v: v is None) | stages.map_values(lambda v: v * 2)

    assert isinstance(pipeline, Pipeline)
    assert dict(pipeline({"a": None, "b": 1, "c": 2}.items())) == {"b": 2, "c": 4}


def test_compose_flattens_nested_pipelines() -> None:
    inc = stages.map_values(lambda v: v + 1)
    pipeline = compose(inc, compose(inc, inc))

    assert len(pipeline.stages) == 3
    assert dict(pipeline([("a", 0)])) == {"a": 3}


def test_empty_compose_is_identity() -> None:
    assert run(compose(), [1, 2, 3]) == [1, 2, 3]


def test_pipeline_rejects_non_stage_members() -> None:
    with pytest.raises(TypeError, match="pipeline members must be stages"):
        _ = Pipeline(stages.indistinct(), len)  # type: ignore[arg-type]


def test_or_with_non_stage_is_not_supported() -> None:
    with pytest.raises(TypeError):
        _ = stages.indistinct() | 3  # type: ignore[operator]


def test_generic_map_and_filter_stages() -> None:
    pipeline = MapStage(lambda n: n * n) | FilterStage(lambda n: n > 4) | FilterStage(lambda n: n == 16, keep=False)
    assert run(pipeline, range(6)) == [9, 25]


def test_run_treats_none_as_empty() -> None:
    assert run(stages.indistinct(), None) == []


def test_stage_constructors_validate_functions() -> None:
    with pytest.raises(InvalidArgumentError, match="pred must be callable"):
        _ = stages.filter_values(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError, match="f must be callable"):
        _ = stages.dedupe_by(42)  # type: ignore[arg-type]


def test_map_leaves_stage_rebuilds_nested_values() -> None:
    stage = stages.map_leaves(lambda v: -v)
    assert list(stage([("a", {"b": 1, "c": {"d": 2}})])) == [("a", {"b": -1, "c": {"d": -2}})]


def test_namespace_keys_stage() -> None:
    assert dict(stages.ns_keys("user")([("name", "Ed"), ("old/age", 31)])) == {"user/name": "Ed", "user/age": 31}


def test_stages_are_stage_instances_with_readable_repr() -> None:
    pipeline = stages.filter_keys(bool) | stages.indistinct()
    assert isinstance(pipeline, Stage)
    assert repr(pipeline) == "filter_keys() | indistinct()"
