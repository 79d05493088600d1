"""
Tests for the Beta posterior estimator.
"""

import pytest

from admissions.logic.bayesian import (
    bayesian_probability,
    beta_parameters,
    cumulative_pct_at_or_above,
    effective_sample_size,
)
from admissions.logic.contracts import ProgramCategory, ProgramRecord


def test_cumulative_share_at_bin_edges(scenario_program):
    assert cumulative_pct_at_or_above(100.0, scenario_program) == 0.0
    assert cumulative_pct_at_or_above(95.0, scenario_program) == pytest.approx(10.0)
    assert cumulative_pct_at_or_above(90.0, scenario_program) == pytest.approx(40.0)
    assert cumulative_pct_at_or_above(85.0, scenario_program) == pytest.approx(80.0)
    assert cumulative_pct_at_or_above(80.0, scenario_program) == pytest.approx(95.0)
    assert cumulative_pct_at_or_above(65.0, scenario_program) == pytest.approx(100.0)
    assert cumulative_pct_at_or_above(50.0, scenario_program) == pytest.approx(100.0)


def test_cumulative_share_interpolates_inside_bin(scenario_program):
    # Half of the 90-94 bin sits above 92.5
    assert cumulative_pct_at_or_above(92.5, scenario_program) == pytest.approx(25.0)
    # The below-75 bin is spread across 65-80
    assert cumulative_pct_at_or_above(72.5, scenario_program) == pytest.approx(97.5)


def test_cumulative_share_is_continuous_at_boundaries(scenario_program):
    for edge in (95.0, 90.0, 85.0, 80.0):
        below = cumulative_pct_at_or_above(edge - 1e-9, scenario_program)
        at = cumulative_pct_at_or_above(edge, scenario_program)
        assert below == pytest.approx(at, abs=1e-6)


def test_effective_sample_size_scales_with_bin_total(scenario_program, empty_program):
    assert effective_sample_size(scenario_program) == pytest.approx(500.0)
    assert effective_sample_size(empty_program) == 100.0

    sparse = ProgramRecord(
        university="U",
        program="P",
        category=ProgramCategory.ARTS,
        pct_95_plus=5,
        pct_90_94=5,
        pct_85_89=0,
        pct_80_84=0,
        pct_below_75=0,
    )
    assert effective_sample_size(sparse) == 100.0


def test_symmetric_case_is_exactly_half(scenario_program):
    # 10 + 30 + 0.25 * 40 = 50% at or above 88.75
    params = beta_parameters(88.75, scenario_program)
    assert params.alpha == params.beta == pytest.approx(251.0)
    assert bayesian_probability(88.75, scenario_program) == 0.5


def test_beta_parameters(scenario_program):
    params = beta_parameters(90.0, scenario_program)
    assert params.cumulative_pct == pytest.approx(40.0)
    assert params.effective_sample_size == pytest.approx(500.0)
    assert params.alpha == pytest.approx(0.6 * 500 + 1)
    assert params.beta == pytest.approx(0.4 * 500 + 1)
    assert params.posterior_mean == pytest.approx(301 / 502)


def test_bayesian_probability_monotonic_in_grade(sample_catalog, scenario_program):
    grades = [50 + g / 4 for g in range(201)]
    for program in list(sample_catalog) + [scenario_program]:
        values = [bayesian_probability(g, program) for g in grades]
        assert all(a <= b + 1e-12 for a, b in zip(values, values[1:]))
        assert all(0.0 <= v <= 1.0 for v in values)


def _overfull_program():
    # Rounded bins summing to 100.4
    return ProgramRecord(
        university="U",
        program="P",
        category=ProgramCategory.ARTS,
        pct_95_plus=20.1,
        pct_90_94=30.1,
        pct_85_89=30.1,
        pct_80_84=15.1,
        pct_below_75=5.0,
    )


def test_overfull_bins_keep_probability_in_range():
    program = _overfull_program()
    params = beta_parameters(50.0, program)

    assert params.cumulative_pct == 100.0
    assert params.alpha == 1.0
    assert 0.0 <= bayesian_probability(50.0, program) <= 1.0

    grades = [50 + g / 4 for g in range(201)]
    values = [bayesian_probability(g, program) for g in grades]
    assert all(0.0 <= v <= 1.0 for v in values)
    assert all(a <= b + 1e-12 for a, b in zip(values, values[1:]))
