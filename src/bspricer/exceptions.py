"""Error types raised by the pricing engine.

All of them are raised synchronously to the immediate caller; nothing in the
engine retries or recovers.
"""

from __future__ import annotations

__all__ = [
    "BSPricerError",
    "InvalidParameterError",
    "DegenerateRangeError",
    "NumericOverflowError",
]


class BSPricerError(Exception):
    """Base class for every error raised by ``bspricer``."""


class InvalidParameterError(BSPricerError, ValueError):
    """A single input violates its domain (e.g. non-positive volatility)."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field} {message}")


class DegenerateRangeError(BSPricerError, ValueError):
    """A surface range has a non-positive span on one of its axes."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field} {message}")


class NumericOverflowError(BSPricerError, ArithmeticError):
    """A result is not representable as a finite float."""
