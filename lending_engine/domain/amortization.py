"""Fixed-payment loan amortization used by the loan application preview"""

from datetime import date
from typing import List, Optional

from lending_engine.domain.exceptions import InvalidInputError
from lending_engine.domain.models import AmortizationEntry
from lending_engine.domain.validation import (
    finite_result,
    excess_growth,
    require_finite,
    require_non_negative,
)
from lending_engine.utils.date_utils import add_months


def _monthly_rate(annual_rate_percent: float) -> float:
    return require_non_negative("annual_rate_percent", annual_rate_percent) / 100 / 12


def _validate_term(term_months: float) -> float:
    term_months = require_finite("term_months", term_months)
    if term_months <= 0:
        raise InvalidInputError(f"term_months must be positive, got {term_months}")
    return term_months


def monthly_payment(
    principal: Optional[float],
    term_months: Optional[float],
    annual_rate_percent: float,
) -> float:
    """
    Fixed monthly payment for a loan.

    Standard annuity formula:
        P * r * (1 + r)^n / ((1 + r)^n - 1),  r = annual_rate_percent / 100 / 12

    A zero rate falls back to straight-line P / n. Unset principal or term
    returns 0 so the form can preview while the borrower is still typing.

    Raises:
        InvalidInputError: negative principal or rate, non-positive term,
            non-finite input
    """
    if principal is None or term_months is None:
        return 0.0

    principal = require_non_negative("principal", principal)
    term_months = _validate_term(term_months)
    monthly_rate = _monthly_rate(annual_rate_percent)

    excess = excess_growth(monthly_rate, term_months)
    if excess == 0:
        return principal / term_months

    payment = principal * (monthly_rate / excess) * (1 + excess)
    return finite_result("monthly_payment", payment)


def generate_amortization_schedule(
    principal: float,
    term_months: int,
    annual_rate_percent: float,
    start_date: date | None = None,
    first_due_months: int = 1,
) -> List[AmortizationEntry]:
    """
    Break a loan into monthly payments with principal/interest split.

    - Amounts rounded to cents
    - Interest for a period accrues on the balance outstanding at its start
    - Last payment absorbs rounding drift so the balance closes at exactly 0

    Args:
        principal: Amount borrowed
        term_months: Number of monthly payments
        annual_rate_percent: Nominal annual rate, e.g. 15 for 15%
        start_date: First due date (default: today + first_due_months)
        first_due_months: Offset used when start_date is not given

    Example:
        1000 over 3 months at 0% → [333.33, 333.33, 333.34]
    """
    term_months = _validate_term(term_months)
    if term_months != int(term_months):
        raise InvalidInputError(f"term_months must be a whole number of months, got {term_months}")
    term_months = int(term_months)

    principal = round(require_non_negative("principal", principal), 2)
    if principal == 0:
        return []

    if start_date is None:
        start_date = add_months(date.today(), first_due_months)

    monthly_rate = _monthly_rate(annual_rate_percent)
    payment = round(monthly_payment(principal, term_months, annual_rate_percent), 2)

    schedule = []
    balance = principal
    for period in range(1, term_months + 1):
        interest = round(balance * monthly_rate, 2)

        if period == term_months:
            principal_portion = balance
            amount = round(balance + interest, 2)
        else:
            principal_portion = min(round(payment - interest, 2), balance)
            amount = round(principal_portion + interest, 2)

        balance = round(balance - principal_portion, 2)

        schedule.append(
            AmortizationEntry(
                period=period,
                due_date=add_months(start_date, period - 1),
                payment=amount,
                principal_portion=principal_portion,
                interest_portion=interest,
                remaining_balance=balance,
            )
        )

    return schedule
