"""Pydantic schemas for API request/response validation"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from lending_engine.domain.models import (
    Investment,
    InvestmentStatus,
    LenderInfo,
    LenderRiskProfile,
    RiskLevel,
    RiskTolerance,
)


class EngineModel(BaseModel):
    """Base schema: NaN/Infinity are never valid engine input"""

    model_config = ConfigDict(allow_inf_nan=False)


# Loans


class PaymentRequest(EngineModel):
    """Request body for POST /v1/loans/payment; unset fields preview a 0 payment"""

    principal: Optional[float] = Field(None, ge=0, description="Loan amount")
    term_months: Optional[int] = Field(None, gt=0, description="Number of monthly payments")
    annual_rate_percent: Optional[float] = Field(None, ge=0, description="Annual rate, defaults to the configured loan rate")


class PaymentResponse(BaseModel):
    monthly_payment: float
    annual_rate_percent: float


class ScheduleRequest(EngineModel):
    """Request body for POST /v1/loans/schedule"""

    principal: float = Field(..., ge=0)
    term_months: int = Field(..., gt=0, le=600)
    annual_rate_percent: Optional[float] = Field(None, ge=0)
    start_date: Optional[date] = None


class AmortizationEntrySchema(BaseModel):
    period: int
    due_date: date
    payment: float
    principal_portion: float
    interest_portion: float
    remaining_balance: float


class ScheduleResponse(BaseModel):
    monthly_payment: float
    total_interest: float
    entries: List[AmortizationEntrySchema]


# Returns


class ExpectedReturnRequest(EngineModel):
    amount: float = Field(..., ge=0)
    annual_rate_percent: float = Field(..., ge=0)
    duration_months: int = Field(..., ge=0)


class ExpectedReturnResponse(BaseModel):
    expected_return: float


class RoiRequest(EngineModel):
    invested: float = Field(..., ge=0)
    returned: float


class RoiResponse(BaseModel):
    roi_percent: float


class ProjectionRequest(EngineModel):
    monthly_contribution: float = Field(..., ge=0)
    annual_rate_percent: float = Field(..., ge=0)
    years: float = Field(..., ge=0)


class ProjectionResponse(BaseModel):
    total_invested: float
    projected_value: float
    total_returns: float


# Lenders


class LenderRiskRequest(EngineModel):
    """Request body for POST /v1/lenders/risk-assessment"""

    credit_score: float = Field(..., description="Typically 300-850")
    portfolio_size: float = Field(..., ge=0)
    default_rate: float = Field(..., ge=0, le=100, description="Percent")
    years_active: int = Field(..., ge=0)

    def to_domain(self) -> LenderRiskProfile:
        return LenderRiskProfile(
            credit_score=self.credit_score,
            portfolio_size=self.portfolio_size,
            default_rate=self.default_rate,
            years_active=self.years_active,
        )


class LenderRiskResponse(BaseModel):
    risk_level: RiskLevel
    risk_score: float
    factors: List[str]


# Portfolio


class AllocationRequest(EngineModel):
    total_amount: float = Field(..., ge=0)
    risk_tolerance: RiskTolerance


class AllocationSchema(BaseModel):
    low: float
    medium: float
    high: float


class LenderInfoSchema(EngineModel):
    name: str
    credit_score: float
    portfolio_size: float
    default_rate: float


class InvestmentSchema(EngineModel):
    """Investment record as persisted by the caller"""

    id: str | int
    investor_id: str | int
    lender_id: str | int
    amount: float = Field(..., ge=0)
    expected_return: float
    actual_return: Optional[float] = None
    duration: int = Field(..., gt=0, description="Months")
    status: InvestmentStatus
    start_date: date
    end_date: date
    risk_level: RiskLevel
    lender_info: LenderInfoSchema

    def to_domain(self) -> Investment:
        return Investment(
            id=self.id,
            investor_id=self.investor_id,
            lender_id=self.lender_id,
            amount=self.amount,
            expected_return=self.expected_return,
            actual_return=self.actual_return,
            duration=self.duration,
            status=self.status,
            start_date=self.start_date,
            end_date=self.end_date,
            risk_level=self.risk_level,
            lender_info=LenderInfo(**self.lender_info.model_dump()),
        )


class PortfolioRequest(EngineModel):
    investments: List[InvestmentSchema]


class DiversificationResponse(BaseModel):
    score: int
    recommendations: List[str]


class PortfolioSummaryResponse(BaseModel):
    total_invested: float
    current_value: float
    total_returns: float
    average_return: float
    active_investments: int
    completed_investments: int
    risk_distribution: AllocationSchema
    monthly_income: float
