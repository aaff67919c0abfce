"""POST /v1/portfolio/* - allocation, diversification and summary endpoints"""

import logging
import time

from fastapi import APIRouter, HTTPException, Request

from lending_engine.api.dependencies import get_request_id
from lending_engine.api.v1.schemas import (
    AllocationRequest,
    AllocationSchema,
    DiversificationResponse,
    PortfolioRequest,
    PortfolioSummaryResponse,
)
from lending_engine.domain.allocation import recommend_allocation
from lending_engine.domain.diversification import score_diversification
from lending_engine.domain.exceptions import DomainException
from lending_engine.domain.portfolio import summarize_portfolio
from lending_engine.infrastructure.observability.logging import log_diversification
from lending_engine.infrastructure.observability.metrics import (
    record_allocation,
    record_diversification,
    record_invalid_input,
)

router = APIRouter()


@router.post("/portfolio/allocation", response_model=AllocationSchema)
def get_allocation(request_body: AllocationRequest, request: Request):
    """Recommended split of capital across low/medium/high risk lenders"""
    try:
        allocation = recommend_allocation(request_body.total_amount, request_body.risk_tolerance)
    except DomainException as e:
        record_invalid_input("recommend_allocation")
        logging.warning(f"Invalid allocation input: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=422, detail=str(e))

    record_allocation(request_body.risk_tolerance.value)
    return AllocationSchema(low=allocation.low, medium=allocation.medium, high=allocation.high)


@router.post("/portfolio/diversification", response_model=DiversificationResponse)
def get_diversification(request_body: PortfolioRequest, request: Request):
    """
    Score how well an investor's placements are spread.

    Returns:
        0-100 score and recommendations to show the investor verbatim
    """
    start_time = time.time()
    request_id = get_request_id(request)
    investments = [inv.to_domain() for inv in request_body.investments]

    try:
        result = score_diversification(investments)
    except DomainException as e:
        record_invalid_input("score_diversification")
        logging.warning(f"Invalid portfolio: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_diversification(result.score)
    log_diversification(request_id, len(investments), result.score, len(result.recommendations), duration_ms)

    return DiversificationResponse(score=result.score, recommendations=result.recommendations)


@router.post("/portfolio/summary", response_model=PortfolioSummaryResponse)
def get_summary(request_body: PortfolioRequest, request: Request):
    investments = [inv.to_domain() for inv in request_body.investments]

    try:
        summary = summarize_portfolio(investments)
    except DomainException as e:
        record_invalid_input("summarize_portfolio")
        logging.warning(f"Invalid portfolio: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=422, detail=str(e))

    distribution = summary.risk_distribution
    return PortfolioSummaryResponse(
        total_invested=summary.total_invested,
        current_value=summary.current_value,
        total_returns=summary.total_returns,
        average_return=summary.average_return,
        active_investments=summary.active_investments,
        completed_investments=summary.completed_investments,
        risk_distribution=AllocationSchema(
            low=distribution.low,
            medium=distribution.medium,
            high=distribution.high,
        ),
        monthly_income=summary.monthly_income,
    )
