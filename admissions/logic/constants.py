"""
Scoring Engine Constants

Defines bin layouts, weights, thresholds, and enums used by the admission
probability engine. All values are fixed design constants, not learned.
"""

from enum import Enum
from typing import Dict, Tuple

ENGINE_VERSION = "1.0.0"

# =============================================================================
# APPLICANT INPUT RANGES
# =============================================================================

GRADE_MIN = 50.0
GRADE_MAX = 100.0
EXTRACURRICULAR_MIN = 0.0
EXTRACURRICULAR_MAX = 1.0

# =============================================================================
# DISTRIBUTION ESTIMATION (METHOD OF MOMENTS)
# =============================================================================

# Representative midpoints for the five entering-average bins
# 95+ / 90-94 / 85-89 / 80-84 / below 80 (75-79, 70-74, <70 combined)
BIN_MIDPOINTS: Tuple[float, ...] = (96.5, 92.0, 87.0, 82.0, 74.0)

SIGMA_FLOOR = 1.5

# Used when a program has no bin data at all
FALLBACK_MU = 85.0
FALLBACK_SIGMA = 5.0

# =============================================================================
# BAYESIAN (BETA) ESTIMATION
# =============================================================================

# (upper, lower) grade bounds per bin, highest first.
# The last band carries the whole below-75 bin across 65-80.
BIN_BOUNDS: Tuple[Tuple[float, float], ...] = (
    (100.0, 95.0),
    (95.0, 90.0),
    (90.0, 85.0),
    (85.0, 80.0),
    (80.0, 65.0),
)

SAMPLE_SIZE_SCALE = 5.0
MIN_SAMPLE_SIZE = 100.0

# Laplace smoothing added to both Beta parameters
BETA_PRIOR = 1.0

# =============================================================================
# ENSEMBLE & COMPOSITE WEIGHTS
# =============================================================================

GAUSSIAN_ENSEMBLE_WEIGHT = 0.6
BAYESIAN_ENSEMBLE_WEIGHT = 0.4

COMPOSITE_WEIGHTS: Dict[str, float] = {
    "academic": 0.60,
    "extracurricular": 0.20,
    "interest": 0.20,
}

INTEREST_MATCH_SCORE = 0.85
INTEREST_MISMATCH_SCORE = 0.30

# Probabilities are clamped to this range before taking log-odds
LOGIT_CLAMP_MIN = 0.001
LOGIT_CLAMP_MAX = 0.999

# =============================================================================
# CLASSIFICATION THRESHOLDS
# =============================================================================

class AdmissionTier(str, Enum):
    """Discrete admission-likelihood categories."""
    SAFETY = "safety"    # High likelihood of admission
    MATCH = "match"      # Moderate chance
    REACH = "reach"      # Challenging but possible


SAFETY_THRESHOLD = 0.75
MATCH_THRESHOLD = 0.40

# Display order, most likely first
TIER_ORDER: Tuple[AdmissionTier, ...] = (
    AdmissionTier.SAFETY,
    AdmissionTier.MATCH,
    AdmissionTier.REACH,
)

# =============================================================================
# RANKING CONFIGURATION
# =============================================================================

MAX_RESULTS_PER_TIER = 5

# =============================================================================
# DISPLAY PRECISION (decimal places in the explanation bundle)
# =============================================================================

MOMENT_PRECISION = 2       # mu, sigma, z-score
PROBABILITY_PRECISION = 3  # CDF, posterior mean
BETA_PARAM_PRECISION = 1   # alpha, beta
