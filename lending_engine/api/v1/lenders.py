"""POST /v1/lenders/risk-assessment - lender risk classification endpoint"""

import logging
import time

from fastapi import APIRouter, HTTPException, Request

from lending_engine.api.dependencies import get_request_id
from lending_engine.api.v1.schemas import LenderRiskRequest, LenderRiskResponse
from lending_engine.domain.exceptions import DomainException
from lending_engine.domain.risk import assess_lender_risk
from lending_engine.infrastructure.observability.logging import log_assessment
from lending_engine.infrastructure.observability.metrics import record_assessment, record_invalid_input

router = APIRouter()


@router.post("/lenders/risk-assessment", response_model=LenderRiskResponse)
def assess_lender(request_body: LenderRiskRequest, request: Request):
    """
    Classify a lender as low/medium/high risk.

    Callers store the resulting risk_level on investments placed with this
    lender; it is not recomputed later.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = assess_lender_risk(request_body.to_domain())
    except DomainException as e:
        record_invalid_input("assess_lender_risk")
        logging.warning(f"Invalid lender profile: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_assessment(result.risk_level.value)
    log_assessment(request_id, result.risk_level.value, result.risk_score, result.factors, duration_ms)

    return LenderRiskResponse(
        risk_level=result.risk_level,
        risk_score=result.risk_score,
        factors=result.factors,
    )
