"""
Gaussian Admission Model

Reconstructs a normal approximation of each program's entering-average
distribution from its binned percentages, and scores an applicant's grade
against it:

    P_academic(g) = Phi((g - mu) / sigma)

where Phi is the standard normal CDF, evaluated through the Abramowitz &
Stegun rational approximation of the error function.
"""

import math

from .contracts import ProgramRecord, DistributionParams
from .constants import (
    BIN_MIDPOINTS,
    SIGMA_FLOOR,
    FALLBACK_MU,
    FALLBACK_SIGMA,
)

# Abramowitz & Stegun 7.1.26
_ERF_P = 0.3275911
_ERF_COEFFICIENTS = (
    0.254829592,
    -0.284496736,
    1.421413741,
    -1.453152027,
    1.061405429,
)


def erf(x: float) -> float:
    """
    Gauss error function, maximum absolute error 1.5e-7.

        erf(x) ~ 1 - (a1 t + a2 t^2 + a3 t^3 + a4 t^4 + a5 t^5) e^(-x^2)
        t = 1 / (1 + p |x|)
    """
    sign = 1.0 if x >= 0 else -1.0
    x = abs(x)

    t = 1.0 / (1.0 + _ERF_P * x)

    # Horner form of a1 t + ... + a5 t^5
    poly = 0.0
    for coefficient in reversed(_ERF_COEFFICIENTS):
        poly = (poly + coefficient) * t

    return sign * (1.0 - poly * math.exp(-x * x))


def normal_cdf(z: float) -> float:
    """Standard normal CDF: Phi(z) = (1/2)[1 + erf(z / sqrt(2))]."""
    return 0.5 * (1.0 + erf(z / math.sqrt(2.0)))


def estimate_distribution_params(program: ProgramRecord) -> DistributionParams:
    """
    Recover (mu, sigma) of a program's entering averages by the method of
    moments, treating each bin as a point mass at its midpoint.

    Args:
        program: Program with binned percentages

    Returns:
        DistributionParams with sigma floored at SIGMA_FLOOR. A program
        with no bin data gets the fixed fallback (85, 5).
    """
    weights = program.bins
    total_weight = sum(weights)
    if total_weight == 0:
        return DistributionParams(mu=FALLBACK_MU, sigma=FALLBACK_SIGMA)

    # First moment
    mu = sum(m * w for m, w in zip(BIN_MIDPOINTS, weights)) / total_weight

    # Second central moment
    variance = sum(w * (m - mu) ** 2 for m, w in zip(BIN_MIDPOINTS, weights)) / total_weight
    sigma = max(math.sqrt(variance), SIGMA_FLOOR)

    return DistributionParams(mu=mu, sigma=sigma)


def z_score(grade: float, params: DistributionParams) -> float:
    return (grade - params.mu) / params.sigma


def academic_probability(grade: float, program: ProgramRecord) -> float:
    """
    Probability that the applicant's grade is at least as competitive as a
    randomly drawn admitted student.
    """
    params = estimate_distribution_params(program)
    return normal_cdf(z_score(grade, params))
