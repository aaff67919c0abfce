"""POST /v1/returns/* - investment return projections"""

import logging

from fastapi import APIRouter, HTTPException, Request

from lending_engine.api.dependencies import get_request_id
from lending_engine.api.v1.schemas import (
    ExpectedReturnRequest,
    ExpectedReturnResponse,
    ProjectionRequest,
    ProjectionResponse,
    RoiRequest,
    RoiResponse,
)
from lending_engine.domain.exceptions import DomainException
from lending_engine.domain.returns import calculate_roi, expected_return, project_future_value
from lending_engine.infrastructure.observability.metrics import record_invalid_input

router = APIRouter()


def _reject(operation: str, error: DomainException, request: Request) -> HTTPException:
    record_invalid_input(operation)
    logging.warning(f"Invalid {operation} input: {error}", extra={"request_id": get_request_id(request)})
    return HTTPException(status_code=422, detail=str(error))


@router.post("/returns/expected", response_model=ExpectedReturnResponse)
def get_expected_return(request_body: ExpectedReturnRequest, request: Request):
    """Interest earned on a single placement, compounded monthly"""
    try:
        earned = expected_return(
            request_body.amount,
            request_body.annual_rate_percent,
            request_body.duration_months,
        )
    except DomainException as e:
        raise _reject("expected_return", e, request)

    return ExpectedReturnResponse(expected_return=earned)


@router.post("/returns/roi", response_model=RoiResponse)
def get_roi(request_body: RoiRequest, request: Request):
    try:
        roi = calculate_roi(request_body.invested, request_body.returned)
    except DomainException as e:
        raise _reject("roi", e, request)

    return RoiResponse(roi_percent=roi)


@router.post("/returns/projection", response_model=ProjectionResponse)
def get_projection(request_body: ProjectionRequest, request: Request):
    """Future value of a monthly contribution plan"""
    try:
        projection = project_future_value(
            request_body.monthly_contribution,
            request_body.annual_rate_percent,
            request_body.years,
        )
    except DomainException as e:
        raise _reject("project_future_value", e, request)

    return ProjectionResponse(
        total_invested=projection.total_invested,
        projected_value=projection.projected_value,
        total_returns=projection.total_returns,
    )
