import dataclasses

import pytest

from mcflow.config import DEFAULT_CONFIG, SolverConfig


def test_defaults():
    assert DEFAULT_CONFIG.tolerance == 2**-12
    assert DEFAULT_CONFIG.max_iterations is None
    assert DEFAULT_CONFIG.time_budget is None


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.tolerance = 1.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tolerance": 0},
        {"tolerance": -1e-9},
        {"max_iterations": 0},
        {"time_budget": 0},
        {"time_budget": -1.0},
    ],
)
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        SolverConfig(**kwargs)


def test_explicit_iteration_limit_wins():
    config = SolverConfig(max_iterations=7)
    assert config.derive_iteration_limit(1000, 1, 50) == 7


def test_derived_iteration_limit():
    config = SolverConfig(iteration_slack=4)
    # ceil(12 / 2) units times 5 edges plus slack
    assert config.derive_iteration_limit(12, 2, 5) == 34
    assert config.derive_iteration_limit(0.5, 0.25, 2) == 8


def test_derived_iteration_limit_without_capacity():
    config = SolverConfig(iteration_slack=3)
    assert config.derive_iteration_limit(0, 0, 4) == 3
    assert config.derive_iteration_limit(10, 0, 4) == 3
