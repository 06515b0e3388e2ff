"""POST /v1/score - alternative credit score calculator endpoint"""

import asyncio
import time
import logging
from dataclasses import asdict
from fastapi import APIRouter, HTTPException, Request

from altscore_gateway.api.v1.schemas import ScoreRequest, ScoreResponse
from altscore_gateway.api.dependencies import get_request_id
from altscore_gateway.config import settings
from altscore_gateway.domain.models import ApplicantProfile
from altscore_gateway.domain.scoring import compute_score
from altscore_gateway.infrastructure.observability.metrics import record_score
from altscore_gateway.infrastructure.observability.logging import log_score

router = APIRouter()


@router.post("/score", response_model=ScoreResponse)
async def calculate_score(request_body: ScoreRequest, request: Request):
    """
    Score the calculator form.

    Flow:
    1. Wait the cosmetic "calculating" delay
    2. Run the point-based score engine
    3. Record metrics and logs
    4. Return score, risk category, approval, advice and display factors
    """
    start_time = time.time()
    request_id = get_request_id(request)

    if settings.score_delay_seconds > 0:
        await asyncio.sleep(settings.score_delay_seconds)

    try:
        result = compute_score(ApplicantProfile(**request_body.model_dump()))
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_score(result.score, result.risk_category)
    log_score(request_id, result.score, result.risk_category, result.approved, duration_ms)

    return ScoreResponse(**asdict(result))
