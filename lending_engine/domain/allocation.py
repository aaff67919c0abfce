"""Risk-tolerance driven capital allocation"""

from typing import Dict

from lending_engine.domain.models import PortfolioAllocation, RiskLevel, RiskTolerance
from lending_engine.domain.validation import require_non_negative

ALLOCATION_WEIGHTS: Dict[RiskTolerance, Dict[RiskLevel, float]] = {
    RiskTolerance.CONSERVATIVE: {RiskLevel.LOW: 0.70, RiskLevel.MEDIUM: 0.25, RiskLevel.HIGH: 0.05},
    RiskTolerance.MODERATE: {RiskLevel.LOW: 0.50, RiskLevel.MEDIUM: 0.35, RiskLevel.HIGH: 0.15},
    RiskTolerance.AGGRESSIVE: {RiskLevel.LOW: 0.30, RiskLevel.MEDIUM: 0.40, RiskLevel.HIGH: 0.30},
}


def recommend_allocation(total_amount: float, risk_tolerance: RiskTolerance | str) -> PortfolioAllocation:
    """
    Split capital across risk buckets using fixed weights per tolerance.

    Raises:
        UnknownCategoryError: risk_tolerance is not conservative/moderate/aggressive
        InvalidInputError: negative or non-finite total_amount
    """
    weights = ALLOCATION_WEIGHTS[RiskTolerance.parse(risk_tolerance)]
    total_amount = require_non_negative("total_amount", total_amount)

    return PortfolioAllocation(
        low=total_amount * weights[RiskLevel.LOW],
        medium=total_amount * weights[RiskLevel.MEDIUM],
        high=total_amount * weights[RiskLevel.HIGH],
    )
