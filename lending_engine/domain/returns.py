"""Compound-interest projections for investors"""

from lending_engine.domain.exceptions import InvalidInputError
from lending_engine.domain.models import FutureValueProjection
from lending_engine.domain.validation import (
    finite_result,
    excess_growth,
    require_finite,
    require_non_negative,
)


def expected_return(amount: float, annual_rate_percent: float, duration_months: float) -> float:
    """
    Interest earned on a single placement with monthly compounding.

    amount * (1 + r)^n - amount,  r = annual_rate_percent / 100 / 12
    """
    amount = require_non_negative("amount", amount)
    monthly_rate = require_non_negative("annual_rate_percent", annual_rate_percent) / 100 / 12
    duration_months = require_non_negative("duration_months", duration_months)

    earned = amount * excess_growth(monthly_rate, duration_months)
    return finite_result("expected_return", earned)


def calculate_roi(invested: float, returned: float) -> float:
    """
    Return on investment as a percentage of the amount invested.

    Nothing invested means there is no meaningful ratio; 0.0 is returned.
    """
    invested = require_finite("invested", invested)
    returned = require_finite("returned", returned)

    if invested == 0:
        return 0.0
    if invested < 0:
        raise InvalidInputError(f"invested must not be negative, got {invested}")

    return finite_result("roi", (returned - invested) * 100 / invested)


def project_future_value(
    monthly_contribution: float,
    annual_rate_percent: float,
    years: float,
) -> FutureValueProjection:
    """
    Future value of equal monthly contributions (ordinary annuity).

    FV = C * ((1 + r)^m - 1) / r, with m = years * 12; a zero rate gives C * m.
    """
    monthly_contribution = require_non_negative("monthly_contribution", monthly_contribution)
    monthly_rate = require_non_negative("annual_rate_percent", annual_rate_percent) / 100 / 12
    months = require_non_negative("years", years) * 12

    excess = excess_growth(monthly_rate, months)
    if excess == 0:
        future_value = monthly_contribution * months
    else:
        future_value = monthly_contribution * excess / monthly_rate
    future_value = finite_result("project_future_value", future_value)

    total_invested = monthly_contribution * months

    return FutureValueProjection(
        total_invested=total_invested,
        projected_value=future_value,
        total_returns=future_value - total_invested,
    )
