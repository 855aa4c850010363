# black_scholes.py
# Closed-form Black-Scholes prices and Greeks for European options (no dividends).

from __future__ import annotations
import logging
import math
from math import log, sqrt

from .core import OptionParameters, OptionType, PricingResult, GreeksResult, CALL
from .exceptions import InvalidParameterError, NumericOverflowError
from .normal import cdf, pdf
from .validation import check_market_inputs

__all__ = ["price", "price_option", "greeks", "greeks_option"]

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365
PER_PERCENT = 100


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _d1_d2(S, K, T, r, sigma):
    """d1, d2 for validated inputs with ``sigma * sqrt(T) > 0``.

    The ``sigma**2 T / 2`` term is written as ``rt / 2`` so huge
    volatilities do not overflow.
    """
    rt = sigma * sqrt(T)
    d1 = (log(S / K) + r * T) / rt + 0.5 * rt
    d2 = d1 - rt
    return d1, d2


def _discounted_strike(K, r, T) -> float:
    """``K * exp(-r T)``, or ``inf`` when that overflows a float."""
    try:
        k_disc = K * math.exp(-r * T)
    except OverflowError:
        k_disc = math.inf
    if math.isinf(k_disc):
        logger.warning(
            "discounted strike %g * exp(%g) overflows; result not representable",
            K, -r * T,
        )
    return k_disc


def _floor(x: float) -> float:
    # max() would turn NaN into 0.0
    return x if math.isnan(x) else max(0.0, x)


# ---------------------------------------------------------------------------
# Pricing
# ---------------------------------------------------------------------------
def price(S, K, T, r, sigma) -> PricingResult:
    """Black-Scholes call and put prices.

    ``T <= 0`` returns the intrinsic payoff.  When ``sigma * sqrt(T)``
    underflows to zero the deterministic limit ``max(0, S - K e^{-rT})`` /
    ``max(0, K e^{-rT} - S)`` is returned.  Both prices are floored at zero.
    When ``K * exp(-r T)`` overflows both prices are reported as ``inf``;
    check ``PricingResult.is_representable``.
    """
    S, K, T, r, sigma = check_market_inputs(S, K, T, r, sigma)
    if T <= 0:
        return PricingResult(call_price=max(0.0, S - K), put_price=max(0.0, K - S))

    k_disc = _discounted_strike(K, r, T)
    if math.isinf(k_disc):
        return PricingResult(call_price=math.inf, put_price=math.inf)

    if sigma * sqrt(T) == 0.0:
        return PricingResult(call_price=max(0.0, S - k_disc),
                             put_price=max(0.0, k_disc - S))

    d1, d2 = _d1_d2(S, K, T, r, sigma)
    call = S * cdf(d1) - k_disc * cdf(d2)
    put = k_disc * cdf(-d2) - S * cdf(-d1)
    return PricingResult(call_price=_floor(call), put_price=_floor(put))


def price_option(params: OptionParameters) -> PricingResult:
    return price(params.spot_price, params.strike_price, params.time_to_maturity,
                 params.risk_free_rate, params.volatility)


# ---------------------------------------------------------------------------
# Greeks
# ---------------------------------------------------------------------------
def greeks(S, K, T, r, sigma, kind=CALL) -> GreeksResult:
    """Analytical Greeks in display units.

    delta : dV/dS
    gamma : d2V/dS2 (same for calls and puts)
    theta : dV/dt per calendar day (annual value / 365)
    vega  : dV/dsigma per 1 vol point (absolute / 100)
    rho   : dV/dr per 1 rate point (absolute / 100)

    Requires ``T > 0``; at expiry gamma, theta and vega are singular.
    Raises ``NumericOverflowError`` when the discounted strike overflows.
    """
    S, K, T, r, sigma = check_market_inputs(S, K, T, r, sigma)
    kind = OptionType.parse(kind)
    if T <= 0:
        raise InvalidParameterError(
            "time_to_maturity", f"must be positive for sensitivities, got {T}"
        )
    sqrt_T = sqrt(T)
    if S * sigma * sqrt_T == 0.0:
        raise InvalidParameterError(
            "volatility",
            f"too small for sensitivities at maturity {T}, got {sigma}",
        )

    k_disc = _discounted_strike(K, r, T)
    if math.isinf(k_disc):
        raise NumericOverflowError(
            f"sensitivities not representable: K * exp(-rT) overflows "
            f"(K={K:g}, r={r:g}, T={T:g})"
        )

    d1, d2 = _d1_d2(S, K, T, r, sigma)
    n_d1 = pdf(d1)

    # Common
    gamma = n_d1 / (S * sigma * sqrt_T)
    vega = S * sqrt_T * n_d1
    decay = -S * sigma * n_d1 / (2.0 * sqrt_T)

    if kind == CALL:
        delta = cdf(d1)
        theta = decay - r * k_disc * cdf(d2)
        rho = T * k_disc * cdf(d2)
    else:
        delta = cdf(d1) - 1.0
        theta = decay + r * k_disc * cdf(-d2)
        rho = -T * k_disc * cdf(-d2)

    result = GreeksResult(
        delta=delta,
        gamma=gamma,
        theta=theta / DAYS_PER_YEAR,
        vega=vega / PER_PERCENT,
        rho=rho / PER_PERCENT,
    )
    if not all(math.isfinite(v) for v in result.as_dict().values()):
        raise NumericOverflowError(f"sensitivities not representable: {result}")
    return result


def greeks_option(params: OptionParameters) -> GreeksResult:
    return greeks(params.spot_price, params.strike_price, params.time_to_maturity,
                  params.risk_free_rate, params.volatility, params.option_type)
