import math

import pytest

from dependency_miner.lib.dependencies import (
    InvalidThresholdError,
    Threshold,
    build_dependency_matrix,
    check_existential_dependency,
)

ACTIVITIES = ["A", "B", "C", "D", "E"]


@pytest.mark.parametrize("value", [-0.01, 1.01, math.nan, True, "0.5", None])
def test_invalid_values_are_rejected(value):
    with pytest.raises(InvalidThresholdError):
        Threshold(value)


def test_invalid_threshold_error_is_value_error():
    assert issubclass(InvalidThresholdError, ValueError)


def test_bounds_are_inclusive():
    assert Threshold(0).value == 0.0
    assert Threshold(1).value == 1.0
    assert float(Threshold(0.25)) == 0.25


def test_of_reuses_existing_instance():
    limit = Threshold(0.8)
    assert Threshold.of(limit) is limit
    assert Threshold.of(0.8) == limit


def test_accepts_ratio_at_or_above_value():
    limit = Threshold(0.8)
    assert limit.accepts(0.8)
    assert limit.accepts(1.0)
    assert not limit.accepts(0.79)


def test_matrix_rejects_threshold_before_analysis(sample_traces):
    with pytest.raises(InvalidThresholdError):
        build_dependency_matrix(sample_traces, 1.5)


def test_lowering_threshold_never_removes_dependencies(noisy_traces):
    for a in ACTIVITIES:
        for b in ACTIVITIES:
            strict = check_existential_dependency(a, b, noisy_traces, 1.0)
            relaxed = check_existential_dependency(a, b, noisy_traces, 0.8)
            if strict is not None:
                assert relaxed is not None, (a, b)


@pytest.mark.parametrize("relaxed_value", [0.8, 0.5, 0.0])
def test_lowering_threshold_keeps_every_matrix_dependency(noisy_traces, relaxed_value):
    strict = build_dependency_matrix(noisy_traces, 1.0)
    relaxed = build_dependency_matrix(noisy_traces, relaxed_value)
    assert strict.activities == relaxed.activities
    for pair, dependency in strict.dependencies.items():
        other = relaxed.dependencies[pair]
        if dependency.temporal is not None:
            assert other.temporal is not None, pair
        if dependency.existential is not None:
            assert other.existential is not None, pair
    assert relaxed.statistics.full_independence <= strict.statistics.full_independence
