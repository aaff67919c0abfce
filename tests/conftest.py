"""Pytest fixtures for testing"""

from datetime import date
from typing import Callable

import pytest
from fastapi.testclient import TestClient

from lending_engine.api.main import create_app
from lending_engine.domain.models import (
    Investment,
    InvestmentStatus,
    LenderInfo,
    RiskLevel,
)
from lending_engine.utils.date_utils import add_months


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def make_investment() -> Callable[..., Investment]:
    """Factory for Investment records with sensible defaults"""
    counter = {"next_id": 1}

    def _make(
        lender_id: int = 1,
        amount: float = 10_000,
        risk_level: RiskLevel | str = RiskLevel.MEDIUM,
        status: InvestmentStatus = InvestmentStatus.ACTIVE,
        duration: int = 12,
        expected_return: float = 1_200,
        actual_return: float | None = None,
    ) -> Investment:
        investment_id = counter["next_id"]
        counter["next_id"] += 1
        start = date(2024, 1, 15)
        return Investment(
            id=investment_id,
            investor_id=100,
            lender_id=lender_id,
            amount=amount,
            expected_return=expected_return,
            actual_return=actual_return,
            duration=duration,
            status=status,
            start_date=start,
            end_date=add_months(start, duration),
            risk_level=risk_level,
            lender_info=LenderInfo(
                name=f"Lender {lender_id}",
                credit_score=720,
                portfolio_size=750_000,
                default_rate=3.0,
            ),
        )

    return _make


@pytest.fixture
def investment_payload() -> Callable[..., dict]:
    """JSON body for an investment as sent by the dashboard"""

    def _payload(investment_id: int = 1, lender_id: int = 1, amount: float = 5_000, risk_level: str = "medium") -> dict:
        return {
            "id": investment_id,
            "investor_id": 100,
            "lender_id": lender_id,
            "amount": amount,
            "expected_return": 600,
            "actual_return": None,
            "duration": 12,
            "status": "active",
            "start_date": "2024-01-15",
            "end_date": "2025-01-15",
            "risk_level": risk_level,
            "lender_info": {
                "name": f"Lender {lender_id}",
                "credit_score": 700,
                "portfolio_size": 600_000,
                "default_rate": 4.0,
            },
        }

    return _payload
