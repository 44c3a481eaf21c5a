#!/usr/bin/env python3
"""
Compatibility analysis endpoint.
"""

import logging
from fastapi import APIRouter, Depends, Request

from core.scorer import CompatibilityService
from ..dependencies import get_compatibility_service
from ..models.requests import AnalysisRequest, payload_to_dict
from ..models.responses import MatchAnalysisResponse
from ..rate_limit import limiter, analysis_limit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/analysis", tags=["analysis"])


@router.post("", response_model=MatchAnalysisResponse)
@limiter.limit(analysis_limit)
def analyze_match(
    request: Request,
    body: AnalysisRequest,
    service: CompatibilityService = Depends(get_compatibility_service)
):
    """
    Score how well a candidate profile matches a job posting.

    Returns the overall score, strengths, weaknesses, a recommendation and
    the per-factor breakdown (skills, experience, location, salary).
    Missing jobData or personaData is rejected with 400.
    """
    result = service.analyze(
        payload_to_dict(body.job_data),
        payload_to_dict(body.persona_data)
    )
    return result.to_dict()
