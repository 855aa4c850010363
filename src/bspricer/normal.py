# normal.py
# Standard-normal CDF and PDF.
# Both accept scalars *or* NumPy arrays; scalars come back as ``float``.

from __future__ import annotations
import math

import numpy as np
from scipy.special import erf

__all__ = ["cdf", "pdf"]

_SQRT_2 = math.sqrt(2.0)
_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def _unwrap(out: np.ndarray):
    return float(out) if out.ndim == 0 else out


def cdf(x):
    """P(Z <= x) for a standard normal Z, ``0.5 * (1 + erf(x / sqrt(2)))``.

    Saturates to exactly 0.0 / 1.0 far in the tails; NaN propagates.
    """
    x = np.asarray(x, dtype=float)
    return _unwrap(0.5 * (1.0 + erf(x / _SQRT_2)))


def pdf(x):
    """Standard normal density ``exp(-x**2 / 2) / sqrt(2 pi)``."""
    x = np.asarray(x, dtype=float)
    # x * x overflows to inf for |x| > ~1e154; exp(-inf) is the right 0.0
    with np.errstate(over="ignore"):
        return _unwrap(_INV_SQRT_2PI * np.exp(-0.5 * x * x))
