"""Unit tests for loan payment and amortization schedule"""

import math

import pytest
from datetime import date
from lending_engine.domain.amortization import generate_amortization_schedule, monthly_payment
from lending_engine.domain.exceptions import InvalidInputError


def test_monthly_payment_zero_rate_is_straight_line():
    """Test zero-rate fallback divides principal evenly"""
    assert monthly_payment(12000, 12, 0) == 1000


def test_monthly_payment_annuity_formula():
    """Test standard fixed-payment formula at 12% over a year"""
    # r = 0.01, (1.01)^12 = 1.126825...
    payment = monthly_payment(10000, 12, 12)
    assert payment == pytest.approx(888.49, abs=0.005)


@pytest.mark.parametrize("principal", [500, 10_000, 250_000])
@pytest.mark.parametrize("term_months", [1, 6, 36, 360])
@pytest.mark.parametrize("rate", [0, 0.5, 15, 36])
def test_monthly_payment_never_repays_less_than_principal(principal, term_months, rate):
    """Test interest is never negative across a grid of loans"""
    payment = monthly_payment(principal, term_months, rate)
    assert payment * term_months >= principal - 1e-6


def test_monthly_payment_unset_input_previews_zero():
    """Test form preview while fields are still empty"""
    assert monthly_payment(None, 12, 15) == 0
    assert monthly_payment(5000, None, 15) == 0
    assert monthly_payment(None, None, 15) == 0


@pytest.mark.parametrize(
    "principal,term_months,rate",
    [
        (1000, 0, 15),
        (1000, -6, 15),
        (-1000, 12, 15),
        (1000, 12, -1),
        (float("nan"), 12, 15),
        (1000, 12, float("inf")),
    ],
)
def test_monthly_payment_rejects_invalid_input(principal, term_months, rate):
    with pytest.raises(InvalidInputError):
        monthly_payment(principal, term_months, rate)


def test_monthly_payment_overflow_is_reported():
    """Test absurd rate/term does not leak inf or nan"""
    with pytest.raises(InvalidInputError):
        monthly_payment(1000, 100_000, 1_000_000)


def test_monthly_payment_is_deterministic():
    assert monthly_payment(25000, 48, 9.5) == monthly_payment(25000, 48, 9.5)


def test_schedule_zero_rate_last_payment_absorbs_remainder():
    """Test rounding drift lands on the final payment"""
    schedule = generate_amortization_schedule(1000, 3, 0, start_date=date(2024, 1, 1))

    assert [entry.payment for entry in schedule] == [333.33, 333.33, 333.34]
    assert all(entry.interest_portion == 0 for entry in schedule)
    assert schedule[-1].remaining_balance == 0


def test_schedule_principal_portions_sum_to_principal():
    schedule = generate_amortization_schedule(10000, 12, 12, start_date=date(2024, 1, 1))

    assert len(schedule) == 12
    assert schedule[0].interest_portion == 100.00  # 1% of 10,000
    assert schedule[0].principal_portion == pytest.approx(788.49, abs=0.005)
    assert schedule[0].remaining_balance == pytest.approx(9211.51, abs=0.005)
    assert sum(entry.principal_portion for entry in schedule) == pytest.approx(10000, abs=1e-6)
    assert schedule[-1].remaining_balance == 0


def test_schedule_interest_declines_each_period():
    schedule = generate_amortization_schedule(50000, 24, 18, start_date=date(2024, 1, 1))
    interest = [entry.interest_portion for entry in schedule]
    assert interest == sorted(interest, reverse=True)


def test_schedule_due_dates_clamp_to_month_end():
    """Test monthly due dates starting on the 31st"""
    schedule = generate_amortization_schedule(3000, 3, 10, start_date=date(2024, 1, 31))

    assert [entry.due_date for entry in schedule] == [
        date(2024, 1, 31),
        date(2024, 2, 29),
        date(2024, 3, 31),
    ]
    assert [entry.period for entry in schedule] == [1, 2, 3]


def test_schedule_zero_principal():
    assert generate_amortization_schedule(0, 12, 15) == []


def test_schedule_rejects_fractional_term():
    with pytest.raises(InvalidInputError):
        generate_amortization_schedule(1000, 2.5, 15)


def test_monthly_payment_tiny_rate_does_not_divide_by_zero():
    """Test (1 + r)^n - 1 keeps precision when r is near zero"""
    assert monthly_payment(12000, 12, 1e-15) == pytest.approx(1000, rel=1e-12)
    assert monthly_payment(12000, 12, 1e-9) == pytest.approx(1000, rel=1e-9)


@pytest.mark.parametrize("rate", [1e-15, 1e-12, 1e-9, 1e-6])
@pytest.mark.parametrize("principal,term_months", [(12000, 12), (250_000, 360), (500, 1)])
def test_monthly_payment_near_zero_rate_approaches_straight_line(rate, principal, term_months):
    """Test small positive rates behave like a hair above the zero-rate fallback"""
    payment = monthly_payment(principal, term_months, rate)
    straight_line = principal / term_months

    assert math.isfinite(payment)
    assert payment >= straight_line * (1 - 1e-12)
    assert payment * term_months >= principal * (1 - 1e-12)
    assert payment == pytest.approx(straight_line, rel=1e-5)


def test_schedule_tiny_rate_closes_balance():
    schedule = generate_amortization_schedule(1200, 12, 1e-12, start_date=date(2024, 1, 1))

    assert [entry.payment for entry in schedule] == [100.0] * 12
    assert schedule[-1].remaining_balance == 0
