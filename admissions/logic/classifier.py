"""
Classifier

Classifies fused admission probabilities into tiers:
- Safety (high likelihood)
- Match (moderate chance)
- Reach (challenging but possible)
"""

from typing import Dict, List
from .contracts import RecommendationResult
from .constants import AdmissionTier, SAFETY_THRESHOLD, MATCH_THRESHOLD, TIER_ORDER


def classify_tier(probability: float) -> AdmissionTier:
    """
    Classify a fused probability into an admission tier.

    The thresholds split [0, 1] into three contiguous ranges:
    [0.75, 1] safety, [0.40, 0.75) match, [0, 0.40) reach.
    """
    if probability >= SAFETY_THRESHOLD:
        return AdmissionTier.SAFETY
    if probability >= MATCH_THRESHOLD:
        return AdmissionTier.MATCH
    return AdmissionTier.REACH


def filter_by_tier(
    results: List[RecommendationResult],
    tier: AdmissionTier
) -> List[RecommendationResult]:
    """
    Filter results by a specific tier, preserving order.
    """
    return [r for r in results if r.tier == tier]


def get_tier_counts(results: List[RecommendationResult]) -> Dict[str, int]:
    """
    Count results in each tier.
    """
    counts = {tier.value: 0 for tier in TIER_ORDER}
    for result in results:
        counts[AdmissionTier(result.tier).value] += 1
    return counts
