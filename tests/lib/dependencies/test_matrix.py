import pytest

from dependency_miner.lib.dependencies import (
    Dependency,
    DependencyMatrix,
    Direction,
    ExistentialDependency,
    ExistentialType,
    TemporalDependency,
    TemporalType,
    UnknownActivityError,
    build_dependency_matrix,
)


def _row(*cells: str) -> str:
    return "".join(f"{c:<15}" for c in cells)


def test_matrix_covers_every_ordered_pair(sample_traces):
    matrix = build_dependency_matrix(sample_traces)
    assert isinstance(matrix, DependencyMatrix)
    assert matrix.activities == ("A", "B", "C", "D", "E")
    assert len(matrix.dependencies) == 20
    assert matrix.threshold.value == 1.0


def test_get_combines_temporal_and_existential(sample_traces):
    matrix = build_dependency_matrix(sample_traces)
    dep = matrix.get("A", "D")
    assert dep.temporal.dependency_type is TemporalType.EVENTUAL
    assert dep.existential.dependency_type is ExistentialType.EQUIVALENCE
    assert str(dep) == "≺,⇔"
    assert str(matrix.get("A", "E")) == "≺d,<="
    assert str(matrix.get("B", "C")) == "-,⇔"
    assert str(matrix.get("B", "E")) == "-,⇎"
    assert matrix.get("A", "A") is None


def test_get_unknown_activity_raises(sample_traces):
    matrix = build_dependency_matrix(sample_traces)
    with pytest.raises(UnknownActivityError):
        matrix.get("A", "Z")
    with pytest.raises(KeyError):
        matrix.get("Z", "A")


def test_render_fixed_width_grid(sample_traces):
    matrix = build_dependency_matrix(sample_traces)
    lines = matrix.render().splitlines()
    assert lines[0] == _row(" ", "A", "B", "C", "D", "E")
    assert lines[1] == _row("A", "n/a", "≺,<=", "≺,<=", "≺,⇔", "≺d,<=")
    assert lines[2] == _row("B", "≻,=>", "n/a", "-,⇔", "≺,=>", "-,⇎")
    assert len(lines) == 6
    assert str(matrix) == matrix.render()


def test_to_frame_uses_activity_labels(sample_traces):
    frame = build_dependency_matrix(sample_traces).to_frame()
    assert list(frame.index) == ["A", "B", "C", "D", "E"]
    assert list(frame.columns) == ["A", "B", "C", "D", "E"]
    assert frame.loc["E", "A"] == "≻d,=>"
    assert frame.loc["C", "C"] == "n/a"


def test_statistics(sample_traces):
    stats = build_dependency_matrix(sample_traces).statistics
    assert stats.activity_count == 5
    assert stats.relations == 25
    assert stats.pure_existence == 6
    assert stats.full_independence == 0
    assert stats.eventual_equivalence == 2
    assert stats.direct_equivalence == 0
    assert stats.temporal_independence_ratio == pytest.approx(6 / 25)
    assert stats.independence_ratio == 0.0
    assert stats.to_dict()["relations"] == 25


def test_fully_independent_pairs_are_counted():
    matrix = build_dependency_matrix([["A", "B"], ["B", "A"], ["A"], ["B"], ["C"]])
    assert str(matrix.get("A", "B")) == "None"
    assert matrix.statistics.full_independence == 2


def test_direct_equivalence_is_counted():
    matrix = build_dependency_matrix([["A", "B"], ["A", "B"]])
    assert str(matrix.get("A", "B")) == "≺d,⇔"
    assert matrix.statistics.direct_equivalence == 2
    assert matrix.statistics.eventual_equivalence == 0


def test_empty_log_produces_empty_matrix():
    matrix = build_dependency_matrix([])
    assert matrix.activities == ()
    assert matrix.statistics.relations == 0
    assert matrix.statistics.independence_ratio == 0.0
    assert matrix.render() == f"{' ':<15}\n"


def test_dependency_labels():
    temporal = TemporalDependency("A", "B", TemporalType.DIRECT, Direction.BACKWARD)
    assert str(temporal) == "≻d"
    assert str(
        ExistentialDependency("A", "B", ExistentialType.NAND, Direction.FORWARD)
    ) == "⊼"
    assert str(
        ExistentialDependency("A", "B", ExistentialType.OR, Direction.FORWARD)
    ) == "∨"
    assert str(Dependency("A", "B")) == "None"
    assert str(Dependency("A", "B", temporal=temporal)) == "≻d,-"
    assert Dependency("A", "B").is_independent
    assert not Dependency("A", "B", temporal=temporal).is_temporally_independent


def test_direction_has_only_two_members():
    assert {d.name for d in Direction} == {"FORWARD", "BACKWARD"}
    assert Direction.FORWARD.mirrored() is Direction.BACKWARD
