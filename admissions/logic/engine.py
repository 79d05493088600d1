"""
Recommendation Engine

Main orchestrator that combines all scoring components into a single pipeline.
This is the primary entry point for scoring a catalog.
"""

import math
from typing import Iterable, List, Optional, Sequence

from .contracts import (
    ApplicantProfile,
    ProgramRecord,
    RecommendationResult,
    ScoreExplanation,
)
from .distributions import estimate_distribution_params, normal_cdf, z_score
from .bayesian import beta_parameters
from .composite import ensemble_academic_probability, interest_alignment_score, composite_score
from .classifier import classify_tier
from .constants import (
    GRADE_MIN,
    GRADE_MAX,
    EXTRACURRICULAR_MIN,
    EXTRACURRICULAR_MAX,
    MOMENT_PRECISION,
    PROBABILITY_PRECISION,
    BETA_PARAM_PRECISION,
)


class InvalidApplicantError(ValueError):
    """Raised when applicant inputs fall outside the range the models accept."""


def validate_applicant(grade: float, extracurricular_score: float) -> None:
    """
    Reject out-of-range or non-finite applicant inputs.

    Raises:
        InvalidApplicantError: grade outside [50, 100] or extracurricular
            score outside [0, 1]
    """
    if not math.isfinite(grade) or not GRADE_MIN <= grade <= GRADE_MAX:
        raise InvalidApplicantError(
            f"Grade must be between {GRADE_MIN:g} and {GRADE_MAX:g}, got {grade!r}"
        )
    if (
        not math.isfinite(extracurricular_score)
        or not EXTRACURRICULAR_MIN <= extracurricular_score <= EXTRACURRICULAR_MAX
    ):
        raise InvalidApplicantError(
            f"Extracurricular score must be between {EXTRACURRICULAR_MIN:g} and "
            f"{EXTRACURRICULAR_MAX:g}, got {extracurricular_score!r}"
        )


def score_program(
    grade: float,
    extracurricular_score: float,
    interest_categories: Iterable[str],
    program: ProgramRecord
) -> RecommendationResult:
    """
    Score one program for one applicant.

    Pipeline flow:
    1. Gaussian CDF - academic probability from the moment-matched normal
    2. Beta posterior - smoothed academic probability from the bins
    3. Ensemble - fixed blend of the two academic estimates
    4. Composite - log-odds fusion with extracurricular and interest signals
    5. Classification - safety / match / reach

    Inputs are assumed valid; see ``validate_applicant``.
    """
    params = estimate_distribution_params(program)
    z = z_score(grade, params)
    gaussian_prob = normal_cdf(z)

    beta = beta_parameters(grade, program)
    bayes_prob = beta.posterior_mean

    academic_prob = ensemble_academic_probability(gaussian_prob, bayes_prob)
    interest_score = interest_alignment_score(program.category, interest_categories)
    fused = composite_score(academic_prob, extracurricular_score, interest_score)

    return RecommendationResult(
        university=program.university,
        program=program.program,
        category=program.category,
        academic_probability=academic_prob,
        bayesian_probability=bayes_prob,
        composite_score=fused,
        tier=classify_tier(fused),
        estimated_cutoff=program.estimated_cutoff,
        year=program.year,
        explanation=ScoreExplanation(
            mu=round(params.mu, MOMENT_PRECISION),
            sigma=round(params.sigma, MOMENT_PRECISION),
            z_score=round(z, MOMENT_PRECISION),
            gaussian_cdf=round(gaussian_prob, PROBABILITY_PRECISION),
            beta_alpha=round(beta.alpha, BETA_PARAM_PRECISION),
            beta_beta=round(beta.beta, BETA_PARAM_PRECISION),
            beta_posterior_mean=round(bayes_prob, PROBABILITY_PRECISION),
            effective_sample_size=beta.effective_sample_size,
        ),
    )


def generate_recommendations(
    grade: float,
    extracurricular_score: float,
    interest_categories: Iterable[str],
    catalog: Sequence[ProgramRecord]
) -> List[RecommendationResult]:
    """
    Score every program in the catalog.

    Each program is scored independently; the output keeps catalog order
    and is identical for identical inputs.

    Args:
        grade: Applicant's average (50-100)
        extracurricular_score: Extracurricular strength (0-1)
        interest_categories: Selected categories, may be empty
        catalog: Programs to score

    Returns:
        One RecommendationResult per program

    Raises:
        InvalidApplicantError: if grade or extracurricular score is out of range
    """
    validate_applicant(grade, extracurricular_score)
    interests = frozenset(getattr(c, "value", c) for c in interest_categories)

    return [
        score_program(grade, extracurricular_score, interests, program)
        for program in catalog
    ]


class RecommendationEngine:
    """
    Scores applicant profiles against a fixed program catalog.
    """

    def __init__(self, catalog: Optional[Sequence[ProgramRecord]] = None):
        """
        Initialize the recommendation engine.

        Args:
            catalog: Programs to score. If None, uses the configured catalog.
        """
        if catalog is None:
            from ..catalog import get_catalog
            catalog = get_catalog()
        self.catalog = tuple(catalog)

    def recommend(self, profile: ApplicantProfile) -> List[RecommendationResult]:
        """
        Score the whole catalog for a profile.
        """
        return generate_recommendations(
            profile.grade,
            profile.extracurricular_score,
            profile.interest_categories,
            self.catalog,
        )

    def recommend_from_dict(self, profile_data: dict) -> List[RecommendationResult]:
        """
        Convenience method for API integration.
        """
        profile = ApplicantProfile(**profile_data)
        return self.recommend(profile)

    def score_single_program(
        self,
        profile: ApplicantProfile,
        program: ProgramRecord
    ) -> RecommendationResult:
        """
        Score one program the applicant is interested in, which need not be
        part of the catalog.
        """
        validate_applicant(profile.grade, profile.extracurricular_score)
        return score_program(
            profile.grade,
            profile.extracurricular_score,
            profile.interest_categories,
            program,
        )


# Convenience function for simple usage
def get_recommendations(
    profile: ApplicantProfile,
    catalog: Optional[Sequence[ProgramRecord]] = None
) -> List[RecommendationResult]:
    """
    Convenience function to score a profile.
    """
    engine = RecommendationEngine(catalog)
    return engine.recommend(profile)
