#!/usr/bin/env python3
"""
Compatibility endpoints - rank and score roommate candidates.
"""

import uuid
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from ..config import get_config
from ..dependencies import get_compatibility_service, get_current_user_id
from ..services.compatibility_service import CompatibilityService
from ..models.requests import ScorePairRequest
from ..models.responses import CompatibilityScoreResponse, CompatibilityScoresResponse

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)

SCORING_LIMIT = get_config().rate_limits.scoring

router = APIRouter(tags=["compatibility"])


def add_rate_limit_handlers(app):
    """Add rate limit exception handlers to the FastAPI app."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "error": f"Rate limit exceeded: {exc.detail}",
            "type": "RateLimitExceeded"
        }
    )


@router.get(
    "/api/properties/{property_id}/compatibility",
    response_model=CompatibilityScoresResponse
)
@limiter.limit(SCORING_LIMIT)
def get_compatibility_scores(
    request: Request,
    property_id: uuid.UUID,
    profile_id: uuid.UUID = Query(..., description="Caller's own roommate profile"),
    min_score: Optional[int] = Query(default=None, ge=0, le=100, description="Minimum score filter"),
    top_k: Optional[int] = Query(default=None, ge=1, le=500, description="Maximum results to return"),
    user_id: uuid.UUID = Depends(get_current_user_id),
    service: CompatibilityService = Depends(get_compatibility_service)
):
    """
    Rank the other active roommates of a property against the caller.

    Uses the configured result policy (min_score, top_k) unless overridden
    by query parameters. Scores are sorted highest first.
    """
    results = service.get_compatibility_scores(
        property_id,
        profile_id,
        user_id,
        min_score=min_score,
        top_k=top_k
    )
    scores = [CompatibilityScoreResponse(**vars(r)) for r in results]
    return CompatibilityScoresResponse(
        property_id=property_id,
        subject_profile_id=profile_id,
        count=len(scores),
        scores=scores
    )


@router.post("/api/compatibility/score", response_model=CompatibilityScoreResponse)
@limiter.limit(SCORING_LIMIT)
def score_profiles(
    request: Request,
    body: ScorePairRequest,
    user_id: uuid.UUID = Depends(get_current_user_id),
    service: CompatibilityService = Depends(get_compatibility_service)
):
    """Score two profiles from the request body; nothing is stored."""
    result = service.score_pair(body.subject, body.candidate)
    return CompatibilityScoreResponse(**vars(result))
