"""
Log-Odds Composite Scoring

Fuses independent probability signals by adding weighted log-odds:

    logit(P_final) = w1 logit(P_academic) + w2 logit(P_ec) + w3 logit(P_interest)
    P_final = 1 / (1 + e^(-logit(P_final)))

This keeps the result inside (0, 1) and avoids the compression toward 0.5
that a weighted average of raw probabilities produces.
"""

import math
from typing import Iterable

from .constants import (
    GAUSSIAN_ENSEMBLE_WEIGHT,
    BAYESIAN_ENSEMBLE_WEIGHT,
    COMPOSITE_WEIGHTS,
    INTEREST_MATCH_SCORE,
    INTEREST_MISMATCH_SCORE,
    LOGIT_CLAMP_MIN,
    LOGIT_CLAMP_MAX,
)


def logit(p: float) -> float:
    """Log-odds ln(p / (1 - p)), with p clamped so the result stays finite."""
    clamped = max(LOGIT_CLAMP_MIN, min(LOGIT_CLAMP_MAX, p))
    return math.log(clamped / (1.0 - clamped))


def sigmoid(x: float) -> float:
    """Inverse logit 1 / (1 + e^(-x))."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    # Same value, without overflowing exp() for large negative x
    exp_x = math.exp(x)
    return exp_x / (1.0 + exp_x)


def ensemble_academic_probability(gaussian: float, bayesian: float) -> float:
    """Fixed linear blend of the Gaussian and Bayesian academic estimates."""
    return GAUSSIAN_ENSEMBLE_WEIGHT * gaussian + BAYESIAN_ENSEMBLE_WEIGHT * bayesian


def interest_alignment_score(category: str, interest_categories: Iterable[str]) -> float:
    """
    Two-valued interest signal: strong when the program's category is one
    the applicant selected, weak otherwise (including no selection at all).
    """
    category_value = getattr(category, "value", category)
    selected = {getattr(c, "value", c) for c in interest_categories}
    if category_value in selected:
        return INTEREST_MATCH_SCORE
    return INTEREST_MISMATCH_SCORE


def composite_score(
    academic_prob: float,
    extracurricular_score: float,
    interest_score: float,
) -> float:
    """
    Combine academic, extracurricular and interest signals via log-odds.

    Args:
        academic_prob: Ensemble academic probability (0-1)
        extracurricular_score: Extracurricular strength (0-1)
        interest_score: Interest alignment (0-1)

    Returns:
        Fused admission probability in (0, 1)
    """
    composite_log_odds = (
        COMPOSITE_WEIGHTS["academic"] * logit(academic_prob)
        + COMPOSITE_WEIGHTS["extracurricular"] * logit(extracurricular_score)
        + COMPOSITE_WEIGHTS["interest"] * logit(interest_score)
    )
    return sigmoid(composite_log_odds)
