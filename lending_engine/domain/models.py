"""Domain models - pure Python dataclasses representing engine inputs and outputs"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional

from lending_engine.domain.exceptions import UnknownCategoryError
from lending_engine.utils.date_utils import add_months


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, value: "RiskLevel | str") -> "RiskLevel":
        try:
            return cls(value)
        except ValueError:
            raise UnknownCategoryError(f"Unknown risk level: {value!r}") from None


class RiskTolerance(str, Enum):
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"

    @classmethod
    def parse(cls, value: "RiskTolerance | str") -> "RiskTolerance":
        try:
            return cls(value)
        except ValueError:
            raise UnknownCategoryError(f"Unknown risk tolerance: {value!r}") from None


class InvestmentStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    DEFAULTED = "defaulted"

    @classmethod
    def parse(cls, value: "InvestmentStatus | str") -> "InvestmentStatus":
        try:
            return cls(value)
        except ValueError:
            raise UnknownCategoryError(f"Unknown investment status: {value!r}") from None


@dataclass
class LenderInfo:
    """Snapshot of the lender's risk attributes at placement time"""

    name: str
    credit_score: float
    portfolio_size: float
    default_rate: float


@dataclass
class Investment:
    """Capital placed with a lender"""

    id: str | int
    investor_id: str | int
    lender_id: str | int
    amount: float
    expected_return: float
    duration: int  # months
    status: InvestmentStatus
    start_date: date
    end_date: date
    risk_level: RiskLevel
    lender_info: LenderInfo
    actual_return: Optional[float] = None  # unset until maturity

    def maturity_date(self) -> date:
        """start_date + duration months"""
        return add_months(self.start_date, self.duration)


@dataclass
class LenderRiskProfile:
    """Input to lender risk assessment"""

    credit_score: float
    portfolio_size: float
    default_rate: float  # percent, 0-100
    years_active: int


@dataclass
class RiskAssessmentResult:
    """Output of lender risk assessment (lower score = safer)"""

    risk_level: RiskLevel
    risk_score: float
    factors: List[str] = field(default_factory=list)


@dataclass
class PortfolioAllocation:
    """Currency amounts per risk bucket"""

    low: float
    medium: float
    high: float

    @property
    def total(self) -> float:
        return self.low + self.medium + self.high


@dataclass
class FutureValueProjection:
    """Result of projecting a stream of monthly contributions"""

    total_invested: float
    projected_value: float
    total_returns: float


@dataclass
class DiversificationResult:
    score: int
    recommendations: List[str] = field(default_factory=list)


@dataclass
class AmortizationEntry:
    """Single monthly payment in a loan repayment schedule"""

    period: int
    due_date: date
    payment: float
    principal_portion: float
    interest_portion: float
    remaining_balance: float


@dataclass
class PortfolioSummary:
    """Aggregate view of an investor's placements"""

    total_invested: float
    current_value: float
    total_returns: float
    average_return: float  # percent
    active_investments: int
    completed_investments: int
    risk_distribution: PortfolioAllocation
    monthly_income: float
