from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .exceptions import InvalidParameterError
from .validation import (
    require_finite,
    require_positive,
    require_non_negative,
    require_increasing,
)


class OptionType(str, Enum):
    CALL = "call"
    PUT = "put"

    @classmethod
    def parse(cls, kind) -> "OptionType":
        """Accept an ``OptionType`` or one of ``call``/``put``/``c``/``p``."""
        if isinstance(kind, cls):
            return kind
        s = str(kind).strip().lower()
        if s in {"call", "c"}:
            return cls.CALL
        if s in {"put", "p"}:
            return cls.PUT
        raise InvalidParameterError("option_type", f"must be 'call' or 'put', got {kind!r}")


CALL = OptionType.CALL
PUT = OptionType.PUT

MIN_STEPS = 2
DEFAULT_STEPS = 10
DEFAULT_VOL_RANGE = (0.10, 0.40)
DEFAULT_SPOT_BAND = (0.7, 1.3)


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptionParameters:
    """The five Black-Scholes inputs plus the option type.

    Parameters
    ----------
    spot_price : float
        Current underlying price, > 0.
    strike_price : float
        Strike, > 0.
    time_to_maturity : float
        Years to expiry, >= 0 (0 means expiring now).
    risk_free_rate : float
        Continuously-compounded rate as a decimal; may be negative.
    volatility : float
        Annualised volatility as a decimal, > 0.
    option_type : OptionType
        Selects the Greeks formulas; prices always cover both sides.
    """
    spot_price: float
    strike_price: float
    time_to_maturity: float
    risk_free_rate: float
    volatility: float
    option_type: OptionType = CALL

    def __post_init__(self):
        # frozen, so coerce through object.__setattr__
        set_ = object.__setattr__
        set_(self, "spot_price", require_positive("spot_price", self.spot_price))
        set_(self, "strike_price", require_positive("strike_price", self.strike_price))
        set_(self, "time_to_maturity",
             require_non_negative("time_to_maturity", self.time_to_maturity))
        set_(self, "risk_free_rate", require_finite("risk_free_rate", self.risk_free_rate))
        set_(self, "volatility", require_positive("volatility", self.volatility))
        set_(self, "option_type", OptionType.parse(self.option_type))


@dataclass(frozen=True)
class SurfaceRange:
    """Mesh definition for a spot × volatility price surface.

    ``steps`` is the number of points per axis.  Values above the generator's
    ceiling are accepted here and clamped at generation time.
    """
    strike_price: float
    time_to_maturity: float
    risk_free_rate: float
    min_spot: float
    max_spot: float
    min_vol: float
    max_vol: float
    steps: int = DEFAULT_STEPS

    def __post_init__(self):
        set_ = object.__setattr__
        set_(self, "strike_price", require_positive("strike_price", self.strike_price))
        set_(self, "time_to_maturity",
             require_non_negative("time_to_maturity", self.time_to_maturity))
        set_(self, "risk_free_rate", require_finite("risk_free_rate", self.risk_free_rate))
        set_(self, "min_spot", require_positive("min_spot", self.min_spot))
        set_(self, "max_spot", require_finite("max_spot", self.max_spot))
        set_(self, "min_vol", require_positive("min_vol", self.min_vol))
        set_(self, "max_vol", require_finite("max_vol", self.max_vol))
        require_increasing("max_spot", self.min_spot, self.max_spot)
        require_increasing("max_vol", self.min_vol, self.max_vol)
        try:
            steps = int(self.steps)
            integral = steps == self.steps and not isinstance(self.steps, bool)
        except (TypeError, ValueError, OverflowError):
            integral = False
        if not integral:
            raise InvalidParameterError("steps", f"must be an integer, got {self.steps!r}")
        set_(self, "steps", steps)
        if self.steps < MIN_STEPS:
            raise InvalidParameterError("steps", f"must be at least {MIN_STEPS}, got {self.steps}")

    @classmethod
    def around_spot(
        cls,
        params: OptionParameters,
        *,
        spot_band: tuple[float, float] = DEFAULT_SPOT_BAND,
        vol_range: tuple[float, float] = DEFAULT_VOL_RANGE,
        steps: int = DEFAULT_STEPS,
    ) -> "SurfaceRange":
        """Range centred on ``params.spot_price``, as the heatmap view re-centres.

        Spot bounds are ``round(lo * S)`` and ``round(hi * S)``; strike,
        maturity and rate are taken from ``params``.
        """
        S = params.spot_price
        return cls(
            strike_price=params.strike_price,
            time_to_maturity=params.time_to_maturity,
            risk_free_rate=params.risk_free_rate,
            min_spot=float(round(spot_band[0] * S)),
            max_spot=float(round(spot_band[1] * S)),
            min_vol=vol_range[0],
            max_vol=vol_range[1],
            steps=steps,
        )


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PricingResult:
    call_price: float
    put_price: float

    @property
    def is_representable(self) -> bool:
        """False when either price overflowed to infinity (or is NaN)."""
        return bool(np.isfinite(self.call_price) and np.isfinite(self.put_price))


@dataclass(frozen=True)
class GreeksResult:
    """Black-Scholes sensitivities.

    Theta is per calendar day, vega per 1 vol point, rho per 1 rate point.
    """
    delta: float
    gamma: float
    theta: float
    vega: float
    rho: float

    def as_dict(self) -> dict[str, float]:
        return {"delta": self.delta, "gamma": self.gamma, "theta": self.theta,
                "vega": self.vega, "rho": self.rho}


@dataclass(frozen=True, eq=False)
class PriceSurface:
    """Call and put grids over a spot × volatility mesh.

    ``call_grid[i, j]`` is the call price at ``vol_axis[i]`` and
    ``spot_axis[j]``; both axes ascend.
    """
    call_grid: np.ndarray
    put_grid: np.ndarray
    spot_axis: np.ndarray
    vol_axis: np.ndarray

    @property
    def steps(self) -> int:
        return int(self.call_grid.shape[0])

    @property
    def call_max(self) -> float:
        return grid_max(self.call_grid)

    @property
    def put_max(self) -> float:
        return grid_max(self.put_grid)


def grid_max(grid) -> float:
    """Largest cell of a grid; 1.0 for an empty grid so it can divide safely."""
    grid = np.asarray(grid, dtype=float)
    if grid.size == 0:
        return 1.0
    return float(np.max(grid))
