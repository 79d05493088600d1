"""
Bayesian Beta Posterior

Treats the unknown admission likelihood at the applicant's grade as a
Beta-distributed random variable (conjugate to a binomial "competitive or
not" trial):

    alpha = (share of admitted students below the grade) * n + 1
    beta  = (share at or above the grade) * n + 1
    E[theta] = alpha / (alpha + beta)

The effective sample size n is synthetic because the catalog carries no
enrolment counts. Small n pulls both parameters toward the prior, i.e. the
estimate toward 0.5.
"""

from .contracts import ProgramRecord, BetaParams
from .constants import (
    BIN_BOUNDS,
    SAMPLE_SIZE_SCALE,
    MIN_SAMPLE_SIZE,
    BETA_PRIOR,
)


def cumulative_pct_at_or_above(grade: float, program: ProgramRecord) -> float:
    """
    Percentage of historically admitted students at or above ``grade``.

    Mass is assumed uniform inside each bin. Below 80 only the combined
    below-75 bin is available, so it is spread across a synthetic 65-80 band.
    """
    cumulative = 0.0
    for (upper, lower), pct in zip(BIN_BOUNDS, program.bins):
        if grade >= upper:
            break
        if grade > lower:
            cumulative += (upper - grade) / (upper - lower) * pct
            break
        cumulative += pct
    return cumulative


def effective_sample_size(program: ProgramRecord) -> float:
    return max(program.bin_total * SAMPLE_SIZE_SCALE, MIN_SAMPLE_SIZE)


def beta_parameters(grade: float, program: ProgramRecord) -> BetaParams:
    """
    Laplace-smoothed Beta parameters for an applicant at ``grade``.

    Args:
        grade: Applicant's average
        program: Program with binned percentages

    Returns:
        BetaParams including the intermediate cumulative share and n
    """
    # Bins may sum slightly past 100; the share can't exceed the whole cohort
    cumulative_pct = min(cumulative_pct_at_or_above(grade, program), 100.0)
    pct_below = 100.0 - cumulative_pct
    n = effective_sample_size(program)

    return BetaParams(
        alpha=(pct_below / 100.0) * n + BETA_PRIOR,
        beta=(cumulative_pct / 100.0) * n + BETA_PRIOR,
        cumulative_pct=cumulative_pct,
        effective_sample_size=n,
    )


def bayesian_probability(grade: float, program: ProgramRecord) -> float:
    """Beta posterior mean admission probability."""
    return beta_parameters(grade, program).posterior_mean
