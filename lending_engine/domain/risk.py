"""Lender risk assessment - weighted multi-factor scoring"""

from typing import List, Tuple

from lending_engine.domain.models import LenderRiskProfile, RiskAssessmentResult, RiskLevel
from lending_engine.domain.validation import require_finite

BASE_RISK_SCORE = 50

# (threshold, adjustment, factor) checked top-down; the last row is the fallback
# and its threshold is never compared
CREDIT_SCORE_TIERS: List[Tuple[float, int, str]] = [
    (750, -15, "Excellent credit score"),
    (650, -5, "Good credit score"),
    (float("-inf"), 10, "Below average credit score"),
]

PORTFOLIO_SIZE_TIERS: List[Tuple[float, int, str]] = [
    (1_000_000, -10, "Large portfolio"),
    (500_000, -5, "Medium portfolio"),
    (float("-inf"), 5, "Small portfolio"),
]

# Upper bounds: lower default rate is better
DEFAULT_RATE_TIERS: List[Tuple[float, int, str]] = [
    (2, -15, "Low default rate"),
    (5, -5, "Average default rate"),
    (float("inf"), 15, "High default rate"),
]

EXPERIENCE_TIERS: List[Tuple[float, int, str]] = [
    (5, -8, "Experienced lender"),
    (2, -3, "Moderate experience"),
    (float("-inf"), 5, "New to lending"),
]

LOW_RISK_MAX_SCORE = 30
MEDIUM_RISK_MAX_SCORE = 60


def _at_least(value: float, tiers: List[Tuple[float, int, str]]) -> Tuple[int, str]:
    for threshold, adjustment, factor in tiers[:-1]:
        if value >= threshold:
            return adjustment, factor
    _, adjustment, factor = tiers[-1]
    return adjustment, factor


def _at_most(value: float, tiers: List[Tuple[float, int, str]]) -> Tuple[int, str]:
    for threshold, adjustment, factor in tiers[:-1]:
        if value <= threshold:
            return adjustment, factor
    _, adjustment, factor = tiers[-1]
    return adjustment, factor


def classify_risk_score(risk_score: float) -> RiskLevel:
    """
    Map a risk score to a bucket.

    - score <= 30:      low
    - 30 < score <= 60: medium
    - score > 60:       high
    """
    if risk_score <= LOW_RISK_MAX_SCORE:
        return RiskLevel.LOW
    elif risk_score <= MEDIUM_RISK_MAX_SCORE:
        return RiskLevel.MEDIUM
    else:
        return RiskLevel.HIGH


def assess_lender_risk(profile: LenderRiskProfile) -> RiskAssessmentResult:
    """
    Score a lender starting from a neutral 50 and classify low/medium/high.

    Signals, always evaluated in this order (one factor each):
    - credit score:   >=750 -15, >=650 -5, else +10
    - portfolio size: >=1M -10, >=500k -5, else +5
    - default rate %: <=2 -15, <=5 -5, else +15
    - years active:   >=5 -8, >=2 -3, else +5

    The score is not clamped; only the classification thresholds matter.
    """
    signals = [
        _at_least(require_finite("credit_score", profile.credit_score), CREDIT_SCORE_TIERS),
        _at_least(require_finite("portfolio_size", profile.portfolio_size), PORTFOLIO_SIZE_TIERS),
        _at_most(require_finite("default_rate", profile.default_rate), DEFAULT_RATE_TIERS),
        _at_least(require_finite("years_active", profile.years_active), EXPERIENCE_TIERS),
    ]

    risk_score = BASE_RISK_SCORE + sum(adjustment for adjustment, _ in signals)
    factors = [factor for _, factor in signals]

    return RiskAssessmentResult(
        risk_level=classify_risk_score(risk_score),
        risk_score=risk_score,
        factors=factors,
    )
