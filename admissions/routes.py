"""
Admission Recommendation API Routes

Exposes the admission probability engine via REST API.
Main endpoint: POST /recommendations
"""

import logging
from typing import Any, Dict, List, Tuple

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from .catalog import get_catalog
from .config import Settings, get_settings
from .logic.contracts import ApplicantProfile, ProgramCategory, ProgramRecord, RecommendationResult
from .logic.constants import (
    ENGINE_VERSION,
    GRADE_MIN,
    GRADE_MAX,
    EXTRACURRICULAR_MIN,
    EXTRACURRICULAR_MAX,
)
from .logic.engine import InvalidApplicantError
from .logic.runner import run_recommendations

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class RecommendationRequest(BaseModel):
    """Request body for recommendations endpoint."""
    grade: float = Field(
        ...,
        description="Applicant's average, 50-100",
        examples=[88.5],
    )
    extracurricularScore: float = Field(
        ...,
        description="Extracurricular strength, 0-1",
        examples=[0.65],
    )
    interestCategories: List[str] = Field(
        default_factory=list,
        description="Selected subject categories (at least one)",
        examples=[["Engineering", "Computer Science"]],
    )


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("", summary="Get admission recommendations")
@router.post("/", summary="Get admission recommendations", include_in_schema=False)
def get_recommendations(
    request: RecommendationRequest,
    catalog: Tuple[ProgramRecord, ...] = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """
    Estimate admission probability for every program in the catalog.

    **Request Body:**
    - `grade`: Applicant's average (50-100)
    - `extracurricularScore`: Extracurricular strength (0-1)
    - `interestCategories`: Subject categories of interest

    **Response:**
    - Top programs per tier (safety / match / reach), best first
    - Probability breakdown for each program
    """
    if not GRADE_MIN <= request.grade <= GRADE_MAX:
        raise HTTPException(
            status_code=400,
            detail=f"Grade must be a number between {GRADE_MIN:g} and {GRADE_MAX:g}."
        )
    if not EXTRACURRICULAR_MIN <= request.extracurricularScore <= EXTRACURRICULAR_MAX:
        raise HTTPException(
            status_code=400,
            detail=f"Extracurricular score must be between {EXTRACURRICULAR_MIN:g} and {EXTRACURRICULAR_MAX:g}."
        )
    if not request.interestCategories:
        raise HTTPException(
            status_code=400,
            detail="Must select at least one interest category."
        )

    try:
        try:
            profile = ApplicantProfile(
                grade=request.grade,
                extracurricular_score=request.extracurricularScore,
                interest_categories=request.interestCategories,
            )
            output = run_recommendations(profile, catalog, settings.max_per_tier)
        except (ValidationError, InvalidApplicantError) as e:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid applicant profile: {str(e)}"
            )

        return {
            "requestId": output.request_id,
            "reach": [_serialize_result(r) for r in output.reach],
            "match": [_serialize_result(r) for r in output.match],
            "safety": [_serialize_result(r) for r in output.safety],
            "totalProgramsAnalyzed": output.total_programs_analyzed,
            "tierCounts": output.tier_counts,
            "processingTimeMs": output.processing_time_ms,
            "warnings": output.warnings,
            "engineVersion": output.engine_version,
        }

    except HTTPException:
        raise
    except Exception:
        logger.exception("Recommendation request failed")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error."}
        )


@router.get("/categories", summary="List program categories")
def list_categories():
    """Subject categories accepted in `interestCategories`."""
    return {"categories": [c.value for c in ProgramCategory]}


def _serialize_result(result: RecommendationResult) -> Dict[str, Any]:
    """Convert RecommendationResult to the JSON shape the frontend reads."""
    explanation = result.explanation
    return {
        "university": result.university,
        "program": result.program,
        "category": result.category,
        "academicProbability": result.academic_probability,
        "bayesianProbability": result.bayesian_probability,
        "compositeScore": result.composite_score,
        "tier": result.tier,
        "estimatedCutoff": result.estimated_cutoff,
        "year": result.year,
        "explanation": {
            "mu": explanation.mu,
            "sigma": explanation.sigma,
            "zScore": explanation.z_score,
            "gaussianCDF": explanation.gaussian_cdf,
            "betaAlpha": explanation.beta_alpha,
            "betaBeta": explanation.beta_beta,
            "betaPosteriorMean": explanation.beta_posterior_mean,
            "effectiveSampleSize": explanation.effective_sample_size,
        },
    }


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Recommendation engine health check")
def health_check(catalog: Tuple[ProgramRecord, ...] = Depends(get_catalog)):
    """Check if recommendation engine is operational."""
    return {
        "status": "ok",
        "engine": "admission-odds",
        "version": ENGINE_VERSION,
        "programs": len(catalog),
    }
