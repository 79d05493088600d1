"""
Data Contracts for the Admission Probability Engine

Defines Pydantic models for the program catalog (input), the applicant
profile (input), and per-program results (output).
These contracts are the API boundary for the scoring engine.
"""

from typing import List, Optional, Dict
from pydantic import BaseModel, Field
from enum import Enum

from .constants import (
    AdmissionTier,
    ENGINE_VERSION,
    GRADE_MIN,
    GRADE_MAX,
    EXTRACURRICULAR_MIN,
    EXTRACURRICULAR_MAX,
)


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class ProgramCategory(str, Enum):
    """Subject categories programs are grouped under."""
    ENGINEERING = "Engineering"
    BUSINESS = "Business"
    ARTS = "Arts"
    SCIENCE = "Science"
    HEALTH = "Health"
    COMPUTER_SCIENCE = "Computer Science"


class ProgramRecord(BaseModel):
    """
    One program's historical entering-average distribution.

    Each bin is the percentage of admitted students whose entering average
    fell in that range. The five bins should sum to roughly 100; the
    producer of the catalog is responsible for that.
    """
    university: str
    program: str
    category: ProgramCategory

    pct_95_plus: float = Field(..., ge=0.0, alias="pct95plus")
    pct_90_94: float = Field(..., ge=0.0, alias="pct90_94")
    pct_85_89: float = Field(..., ge=0.0, alias="pct85_89")
    pct_80_84: float = Field(..., ge=0.0, alias="pct80_84")
    pct_below_75: float = Field(..., ge=0.0, alias="pctBelow75")

    estimated_cutoff: float = Field(default=0.0, alias="estimatedCutoff")
    year: int = 0

    class Config:
        use_enum_values = True
        populate_by_name = True
        frozen = True

    @property
    def bins(self) -> List[float]:
        """Bin percentages, highest grade band first."""
        return [
            self.pct_95_plus,
            self.pct_90_94,
            self.pct_85_89,
            self.pct_80_84,
            self.pct_below_75,
        ]

    @property
    def bin_total(self) -> float:
        return sum(self.bins)


class ApplicantProfile(BaseModel):
    """
    Input contract for one recommendation request.
    """
    grade: float = Field(ge=GRADE_MIN, le=GRADE_MAX)
    extracurricular_score: float = Field(ge=EXTRACURRICULAR_MIN, le=EXTRACURRICULAR_MAX)
    interest_categories: List[ProgramCategory] = Field(default_factory=list)

    class Config:
        use_enum_values = True


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class DistributionParams(BaseModel):
    """Normal approximation of a program's entering-average distribution."""
    mu: float
    sigma: float

    class Config:
        frozen = True


class BetaParams(BaseModel):
    """Beta posterior parameters for one applicant/program pair."""
    alpha: float
    beta: float
    cumulative_pct: float
    effective_sample_size: float

    class Config:
        frozen = True

    @property
    def posterior_mean(self) -> float:
        return self.alpha / (self.alpha + self.beta)


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class ScoreExplanation(BaseModel):
    """Rounded breakdown of the math behind a result, for display."""
    mu: float
    sigma: float
    z_score: float
    gaussian_cdf: float
    beta_alpha: float
    beta_beta: float
    beta_posterior_mean: float
    effective_sample_size: float


class RecommendationResult(BaseModel):
    """
    Single program result with full scoring details.
    """
    # Identifiers
    university: str
    program: str
    category: str

    # Scoring
    academic_probability: float = Field(ge=0.0, le=1.0)
    bayesian_probability: float = Field(ge=0.0, le=1.0)
    composite_score: float = Field(ge=0.0, le=1.0)

    # Classification
    tier: AdmissionTier

    # Additional Context
    estimated_cutoff: float
    year: int

    # Explainability
    explanation: ScoreExplanation

    class Config:
        use_enum_values = True


class RecommendationOutput(BaseModel):
    """
    Output contract for one request.
    Contains the top results per tier with summary statistics.
    """
    # Request tracking
    request_id: Optional[str] = None

    # Top results per tier, best first
    safety: List[RecommendationResult] = Field(default_factory=list)
    match: List[RecommendationResult] = Field(default_factory=list)
    reach: List[RecommendationResult] = Field(default_factory=list)

    # Summary Statistics
    total_programs_analyzed: int = 0
    tier_counts: Dict[str, int] = Field(default_factory=dict)

    # Processing metadata
    processing_time_ms: Optional[float] = None
    engine_version: str = ENGINE_VERSION

    # Warnings/Notes
    warnings: List[str] = Field(default_factory=list)
