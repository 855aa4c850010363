"""Spot × volatility price surfaces.

Re-prices the Black-Scholes formula on every point of a square mesh and
returns the call and put grids for heatmap rendering.  Rows follow
volatility, columns follow spot; both ascend.
"""

from __future__ import annotations

import logging

import numpy as np

from .black_scholes import price
from .core import (
    SurfaceRange, PriceSurface, grid_max,
    MIN_STEPS, DEFAULT_STEPS, DEFAULT_VOL_RANGE, DEFAULT_SPOT_BAND,
)
from .exceptions import NumericOverflowError

__all__ = [
    "MAX_STEPS",
    "MIN_STEPS",
    "DEFAULT_STEPS",
    "DEFAULT_VOL_RANGE",
    "DEFAULT_SPOT_BAND",
    "generate_surface",
    "grid_max",
]

logger = logging.getLogger(__name__)

MAX_STEPS = 20      # 20 x 20 = 400 evaluations per surface

_DECIMALS = 2


# ---------------------------------------------------------------------------
# Surface generation
# ---------------------------------------------------------------------------

def generate_surface(surface_range: SurfaceRange) -> PriceSurface:
    """Price calls and puts over the mesh described by ``surface_range``.

    Parameters
    ----------
    surface_range : SurfaceRange
        Strike, maturity and rate are held fixed; spot and volatility vary.
        ``steps`` above ``MAX_STEPS`` is clamped.

    Returns
    -------
    PriceSurface
        ``steps × steps`` grids, each cell rounded to 2 decimals.

    Raises
    ------
    NumericOverflowError
        If any cell price is not a finite number.
    """
    rng = surface_range
    steps = min(rng.steps, MAX_STEPS)
    if steps != rng.steps:
        logger.info("surface steps %d clamped to %d", rng.steps, steps)

    spot_step = (rng.max_spot - rng.min_spot) / (steps - 1)
    vol_step = (rng.max_vol - rng.min_vol) / (steps - 1)
    spot_axis = np.array([rng.min_spot + j * spot_step for j in range(steps)])
    vol_axis = np.array([rng.min_vol + i * vol_step for i in range(steps)])

    call_grid = np.empty((steps, steps))
    put_grid = np.empty((steps, steps))

    for i, vol in enumerate(vol_axis):
        for j, spot in enumerate(spot_axis):
            res = price(float(spot), rng.strike_price, rng.time_to_maturity,
                        rng.risk_free_rate, float(vol))
            if not res.is_representable:
                raise NumericOverflowError(
                    f"price not representable at spot={spot:g}, vol={vol:g} "
                    f"(r={rng.risk_free_rate:g}, T={rng.time_to_maturity:g})"
                )
            call_grid[i, j] = round(res.call_price, _DECIMALS)
            put_grid[i, j] = round(res.put_price, _DECIMALS)

    logger.debug(
        "generated %dx%d surface: spot [%g, %g], vol [%g, %g], K=%g",
        steps, steps, rng.min_spot, rng.max_spot, rng.min_vol, rng.max_vol,
        rng.strike_price,
    )
    return PriceSurface(
        call_grid=call_grid,
        put_grid=put_grid,
        spot_axis=spot_axis,
        vol_axis=vol_axis,
    )
