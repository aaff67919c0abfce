"""Numeric guards shared by the engine calculators"""

import math

from lending_engine.domain.exceptions import InvalidInputError


def require_finite(name: str, value: float) -> float:
    """Reject NaN, infinities and non-numeric values"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    return float(value)


def require_non_negative(name: str, value: float) -> float:
    value = require_finite(name, value)
    if value < 0:
        raise InvalidInputError(f"{name} must not be negative, got {value}")
    return value


def finite_result(operation: str, value: float) -> float:
    """Make sure overflow never leaks NaN/inf to callers"""
    if not math.isfinite(value):
        raise InvalidInputError(f"{operation} produced a non-finite result; inputs are out of range")
    return value


def excess_growth(monthly_rate: float, months: float) -> float:
    """
    (1 + monthly_rate) ** months - 1 without cancellation for tiny rates.

    Raises InvalidInputError on overflow.
    """
    try:
        excess = math.expm1(months * math.log1p(monthly_rate))
    except OverflowError:
        raise InvalidInputError("Compounding overflowed; rate or term too large") from None
    return finite_result("compounding", excess)
