"""Portfolio diversification score - lender spread, risk balance, amount consistency"""

import math
from collections import Counter
from typing import List

from lending_engine.domain.models import DiversificationResult, Investment, RiskLevel
from lending_engine.domain.validation import require_non_negative

# Component weights (sum to 100)
LENDER_WEIGHT = 40
RISK_BALANCE_WEIGHT = 30
AMOUNT_WEIGHT = 30

FULL_CREDIT_LENDER_COUNT = 10
MIN_LENDER_COUNT = 5
TARGET_MEDIUM_SHARE = 0.5
MAX_AMOUNT_VARIATION = 0.5

START_INVESTING = "Start investing to build diversification"
MORE_LENDERS = "Invest in more lenders to reduce concentration risk"
CONSISTENT_AMOUNTS = "Consider more consistent investment amounts"


def coefficient_of_variation(amounts: List[float]) -> float:
    """
    Population standard deviation divided by the mean.

    A zero mean (every amount is 0) has no dispersion, so 0.0 is returned.
    """
    mean = sum(amounts) / len(amounts)
    if mean == 0:
        return 0.0
    variance = sum((amount - mean) ** 2 for amount in amounts) / len(amounts)
    return math.sqrt(variance) / mean


def score_diversification(investments: List[Investment]) -> DiversificationResult:
    """
    Composite 0-100 diversification score with recommendations.

    Scoring:
    - 40 pts: distinct lenders, full credit at 10
    - 30 pts: medium-risk share of investment count close to 50%
    - 30 pts: 1 - coefficient of variation of amounts (floored at 0)

    The 50% medium-risk target is a fixed heuristic and applies to every
    investor regardless of their tolerance.
    """
    if not investments:
        return DiversificationResult(score=0, recommendations=[START_INVESTING])

    risk_levels = [RiskLevel.parse(inv.risk_level) for inv in investments]
    amounts = [require_non_negative("amount", inv.amount) for inv in investments]
    recommendations = []

    # Lender concentration
    unique_lenders = len({inv.lender_id for inv in investments})
    lender_score = min(unique_lenders / FULL_CREDIT_LENDER_COUNT, 1.0) * LENDER_WEIGHT
    if unique_lenders < MIN_LENDER_COUNT:
        recommendations.append(MORE_LENDERS)

    # Risk balance
    risk_counts = Counter(risk_levels)
    medium_share = risk_counts[RiskLevel.MEDIUM] / len(investments)
    risk_score = (1 - abs(TARGET_MEDIUM_SHARE - medium_share)) * RISK_BALANCE_WEIGHT

    # Amount consistency
    coefficient = coefficient_of_variation(amounts)
    amount_score = max(0.0, 1 - coefficient) * AMOUNT_WEIGHT
    if coefficient > MAX_AMOUNT_VARIATION:
        recommendations.append(CONSISTENT_AMOUNTS)

    total = lender_score + risk_score + amount_score

    # Round half up, not to even
    return DiversificationResult(score=math.floor(total + 0.5), recommendations=recommendations)
