"""Eager input checks shared by the data model and the engines."""

from __future__ import annotations

import math

from .exceptions import InvalidParameterError, DegenerateRangeError

__all__ = [
    "require_finite",
    "require_positive",
    "require_non_negative",
    "require_increasing",
    "check_market_inputs",
]


def require_finite(field: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(field, f"must be a number, got {value!r}") from None
    if not math.isfinite(value):
        raise InvalidParameterError(field, f"must be finite, got {value}")
    return value


def require_positive(field: str, value: float) -> float:
    value = require_finite(field, value)
    if value <= 0:
        raise InvalidParameterError(field, f"must be positive, got {value}")
    return value


def require_non_negative(field: str, value: float) -> float:
    value = require_finite(field, value)
    if value < 0:
        raise InvalidParameterError(field, f"must be non-negative, got {value}")
    return value


def require_increasing(field: str, low: float, high: float) -> None:
    """Raise ``DegenerateRangeError`` unless ``high > low``."""
    if high <= low:
        raise DegenerateRangeError(
            field, f"must exceed its lower bound, got [{low}, {high}]"
        )


def check_market_inputs(S, K, T, r, sigma) -> tuple[float, float, float, float, float]:
    """Validate the five Black-Scholes inputs and return them as floats.

    ``T`` may be zero or negative here; the pricing engine treats that as
    expiry.
    """
    return (
        require_positive("spot_price", S),
        require_positive("strike_price", K),
        require_finite("time_to_maturity", T),
        require_finite("risk_free_rate", r),
        require_positive("volatility", sigma),
    )
