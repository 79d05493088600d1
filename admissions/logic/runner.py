"""
Engine Runner

Orchestrates one recommendation request:
1. Accepts an ApplicantProfile
2. Scores every catalog program via the engine
3. Ranks and keeps the top results per tier
4. Returns a RecommendationOutput

This is a pure orchestration layer - NO scoring math, NO catalog I/O.
"""

import logging
import time
import uuid
from typing import Any, Dict, Optional, Sequence

from .contracts import ApplicantProfile, ProgramRecord, RecommendationOutput
from .engine import generate_recommendations
from .classifier import get_tier_counts
from .ranker import select_top_per_tier
from .constants import AdmissionTier, MAX_RESULTS_PER_TIER

logger = logging.getLogger(__name__)


def run_recommendations(
    profile: ApplicantProfile,
    catalog: Sequence[ProgramRecord],
    max_per_tier: int = MAX_RESULTS_PER_TIER
) -> RecommendationOutput:
    """
    Main entry point: run full recommendation pipeline.

    Args:
        profile: Applicant's grade, extracurricular score and interests
        catalog: Programs to evaluate
        max_per_tier: Max results returned per tier

    Returns:
        RecommendationOutput with the top results per tier

    Raises:
        InvalidApplicantError: if the profile is out of range
    """
    request_id = str(uuid.uuid4())
    logger.info(
        f"🚀 Starting recommendation pipeline {request_id}: grade={profile.grade}, "
        f"ec={profile.extracurricular_score}, interests={profile.interest_categories}"
    )

    if not catalog:
        logger.warning("⚠️ Empty program catalog")
        return RecommendationOutput(
            request_id=request_id,
            total_programs_analyzed=0,
            tier_counts={tier.value: 0 for tier in AdmissionTier},
            warnings=["No programs available to analyze."],
        )

    start_time = time.perf_counter()

    results = generate_recommendations(
        profile.grade,
        profile.extracurricular_score,
        profile.interest_categories,
        catalog,
    )
    logger.info(f"📊 Programs scored: {len(results)}")

    tier_counts = get_tier_counts(results)
    logger.info(f"🏷️ Tier counts: {tier_counts}")

    by_tier = select_top_per_tier(results, max_per_tier)

    processing_time = (time.perf_counter() - start_time) * 1000

    output = RecommendationOutput(
        request_id=request_id,
        safety=by_tier[AdmissionTier.SAFETY],
        match=by_tier[AdmissionTier.MATCH],
        reach=by_tier[AdmissionTier.REACH],
        total_programs_analyzed=len(results),
        tier_counts=tier_counts,
        processing_time_ms=round(processing_time, 2),
        warnings=_generate_warnings(profile, tier_counts),
    )

    logger.info(f"✨ Recommendation pipeline complete ({processing_time:.2f}ms)")

    return output


def run_recommendations_from_dict(
    profile_data: Dict[str, Any],
    catalog: Sequence[ProgramRecord],
    max_per_tier: Optional[int] = None
) -> RecommendationOutput:
    """
    Convenience wrapper accepting dict instead of ApplicantProfile.
    """
    profile = ApplicantProfile(**profile_data)
    if max_per_tier is None:
        max_per_tier = MAX_RESULTS_PER_TIER
    return run_recommendations(profile, catalog, max_per_tier)


def _generate_warnings(profile: ApplicantProfile, tier_counts: Dict[str, int]) -> list:
    warnings = []

    if not profile.interest_categories:
        warnings.append(
            "No interest categories selected; every program received the low interest-alignment score."
        )

    for tier, count in tier_counts.items():
        if count == 0:
            warnings.append(f"No programs fell in the {tier} tier.")

    return warnings
