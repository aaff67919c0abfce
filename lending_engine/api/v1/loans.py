"""POST /v1/loans/* - monthly payment preview and repayment schedule"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from lending_engine.api.dependencies import get_request_id, get_settings
from lending_engine.api.v1.schemas import (
    AmortizationEntrySchema,
    PaymentRequest,
    PaymentResponse,
    ScheduleRequest,
    ScheduleResponse,
)
from lending_engine.config import Settings
from lending_engine.domain.amortization import generate_amortization_schedule, monthly_payment
from lending_engine.domain.exceptions import DomainException
from lending_engine.infrastructure.observability.metrics import record_invalid_input

router = APIRouter()


@router.post("/loans/payment", response_model=PaymentResponse)
def preview_payment(
    request_body: PaymentRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Estimated monthly payment shown while a borrower fills in the application.

    Missing principal or term yields a 0 payment rather than an error.
    """
    rate = request_body.annual_rate_percent
    if rate is None:
        rate = config.default_loan_rate_percent

    try:
        payment = monthly_payment(request_body.principal, request_body.term_months, rate)
    except DomainException as e:
        record_invalid_input("monthly_payment")
        logging.warning(f"Invalid payment input: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=422, detail=str(e))

    return PaymentResponse(monthly_payment=payment, annual_rate_percent=rate)


@router.post("/loans/schedule", response_model=ScheduleResponse)
def create_schedule(
    request_body: ScheduleRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Full amortization schedule for a loan.

    Returns:
        Monthly payment, total interest and one entry per month
    """
    rate = request_body.annual_rate_percent
    if rate is None:
        rate = config.default_loan_rate_percent

    try:
        entries = generate_amortization_schedule(
            request_body.principal,
            request_body.term_months,
            rate,
            start_date=request_body.start_date,
            first_due_months=config.schedule_first_due_months,
        )
    except DomainException as e:
        record_invalid_input("amortization_schedule")
        logging.warning(f"Invalid schedule input: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=422, detail=str(e))

    return ScheduleResponse(
        monthly_payment=entries[0].payment if entries else 0.0,
        total_interest=round(sum(entry.interest_portion for entry in entries), 2),
        entries=[
            AmortizationEntrySchema(
                period=entry.period,
                due_date=entry.due_date,
                payment=entry.payment,
                principal_portion=entry.principal_portion,
                interest_portion=entry.interest_portion,
                remaining_balance=entry.remaining_balance,
            )
            for entry in entries
        ],
    )
