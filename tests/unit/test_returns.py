"""Unit tests for return projections"""

import pytest
from lending_engine.domain.exceptions import InvalidInputError
from lending_engine.domain.returns import calculate_roi, expected_return, project_future_value


def test_expected_return_compounds_monthly():
    """Test 12% annual over 12 months compounds to 12.68%"""
    assert expected_return(1000, 12, 12) == pytest.approx(126.83, abs=0.005)


def test_expected_return_zero_rate_and_zero_duration():
    assert expected_return(1000, 0, 12) == 0
    assert expected_return(1000, 15, 0) == 0


def test_expected_return_rejects_negative_amount():
    with pytest.raises(InvalidInputError):
        expected_return(-1000, 12, 12)


def test_roi_percentage():
    assert calculate_roi(1000, 1150) == 15
    assert calculate_roi(2000, 1500) == -25


def test_roi_zero_invested_returns_zero():
    """Test division-by-zero guard"""
    assert calculate_roi(0, 500) == 0.0


def test_roi_rejects_nan():
    with pytest.raises(InvalidInputError):
        calculate_roi(float("nan"), 100)


def test_project_future_value_zero_rate_is_linear():
    projection = project_future_value(100, 0, 1)

    assert projection.total_invested == 1200
    assert projection.projected_value == 1200
    assert projection.total_returns == 0


def test_project_future_value_ordinary_annuity():
    """Test 100/month at 12% for a year: 100 * (1.01^12 - 1) / 0.01"""
    projection = project_future_value(100, 12, 1)

    assert projection.total_invested == 1200
    assert projection.projected_value == pytest.approx(1268.25, abs=0.005)
    assert projection.total_returns == pytest.approx(68.25, abs=0.005)


def test_project_future_value_overflow_is_reported():
    with pytest.raises(InvalidInputError):
        project_future_value(100, 1_000_000, 10_000)


def test_projections_are_deterministic():
    assert project_future_value(250, 8, 10) == project_future_value(250, 8, 10)
    assert expected_return(5000, 9, 18) == expected_return(5000, 9, 18)


@pytest.mark.parametrize("rate", [1e-15, 1e-12, 1e-9, 1e-6])
def test_project_future_value_near_zero_rate(rate):
    """Test a tiny rate projects roughly the linear total, never a loss"""
    projection = project_future_value(100, rate, 1)

    assert projection.projected_value == pytest.approx(1200, rel=1e-6)
    assert projection.total_returns >= -1e-9  # float noise only


def test_expected_return_tiny_rate_is_small_and_positive():
    earned = expected_return(1000, 1e-9, 12)

    # 1000 * 12 * (1e-9 / 1200)
    assert earned == pytest.approx(1e-8, rel=1e-6)
