"""
Admission Probability Logic Module

Provides the statistical scoring engine that turns binned admission-average
data into per-program admission probabilities.
"""

from .contracts import (
    ProgramCategory,
    ProgramRecord,
    ApplicantProfile,
    DistributionParams,
    BetaParams,
    ScoreExplanation,
    RecommendationResult,
    RecommendationOutput,
)
from .engine import (
    RecommendationEngine,
    InvalidApplicantError,
    generate_recommendations,
    get_recommendations,
    score_program,
)
from .runner import run_recommendations
from .constants import AdmissionTier

__all__ = [
    # Main engine
    "RecommendationEngine",
    "InvalidApplicantError",
    "generate_recommendations",
    "get_recommendations",
    "score_program",
    "run_recommendations",

    # Contracts
    "ProgramCategory",
    "ProgramRecord",
    "ApplicantProfile",
    "DistributionParams",
    "BetaParams",
    "ScoreExplanation",
    "RecommendationResult",
    "RecommendationOutput",

    # Enums
    "AdmissionTier",
]
