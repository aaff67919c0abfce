"""Investor portfolio summary"""

from typing import Dict, List

from lending_engine.domain.models import (
    Investment,
    InvestmentStatus,
    PortfolioAllocation,
    PortfolioSummary,
    RiskLevel,
)
from lending_engine.domain.returns import calculate_roi
from lending_engine.domain.validation import require_finite, require_non_negative


def realized_return(investment: Investment) -> float:
    """
    Return booked for an investment so far.

    - actual_return when the caller has recorded one
    - full loss of principal for a default with nothing recovered
    - otherwise nothing yet
    """
    if investment.actual_return is not None:
        return require_finite("actual_return", investment.actual_return)
    if InvestmentStatus.parse(investment.status) is InvestmentStatus.DEFAULTED:
        return -investment.amount
    return 0.0


def summarize_portfolio(investments: List[Investment]) -> PortfolioSummary:
    """
    Aggregate totals, status counts, risk distribution and expected monthly income.

    monthly_income spreads each active investment's expected return evenly
    over its duration.
    """
    total_invested = 0.0
    total_returns = 0.0
    monthly_income = 0.0
    active = 0
    completed = 0
    by_risk: Dict[RiskLevel, float] = {level: 0.0 for level in RiskLevel}

    for inv in investments:
        amount = require_non_negative("amount", inv.amount)
        status = InvestmentStatus.parse(inv.status)

        total_invested += amount
        total_returns += realized_return(inv)
        by_risk[RiskLevel.parse(inv.risk_level)] += amount

        if status is InvestmentStatus.ACTIVE:
            active += 1
            if inv.duration > 0:
                monthly_income += require_finite("expected_return", inv.expected_return) / inv.duration
        elif status is InvestmentStatus.COMPLETED:
            completed += 1

    current_value = total_invested + total_returns

    return PortfolioSummary(
        total_invested=total_invested,
        current_value=current_value,
        total_returns=total_returns,
        average_return=calculate_roi(total_invested, current_value),
        active_investments=active,
        completed_investments=completed,
        risk_distribution=PortfolioAllocation(
            low=by_risk[RiskLevel.LOW],
            medium=by_risk[RiskLevel.MEDIUM],
            high=by_risk[RiskLevel.HIGH],
        ),
        monthly_income=monthly_income,
    )
