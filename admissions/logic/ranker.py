"""
Ranker

Orders results for display and keeps the best few per tier.
"""

from typing import Dict, List
from .contracts import RecommendationResult
from .classifier import filter_by_tier
from .constants import AdmissionTier, MAX_RESULTS_PER_TIER, TIER_ORDER


def rank_results(
    results: List[RecommendationResult]
) -> List[RecommendationResult]:
    """
    Rank results by composite score (descending).

    Ties keep their catalog order.
    """
    return sorted(
        results,
        key=lambda x: x.composite_score,
        reverse=True
    )


def select_top_per_tier(
    results: List[RecommendationResult],
    max_per_tier: int = MAX_RESULTS_PER_TIER
) -> Dict[AdmissionTier, List[RecommendationResult]]:
    """
    Select the top N results in each tier.

    Args:
        results: Scored results, in any order
        max_per_tier: Maximum per tier

    Returns:
        Dict mapping tier to its best results, highest score first
    """
    ranked = rank_results(results)
    return {
        tier: filter_by_tier(ranked, tier)[:max_per_tier]
        for tier in TIER_ORDER
    }
