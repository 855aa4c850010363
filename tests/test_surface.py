"""Tests for spot x volatility price surfaces."""

import logging
import numpy as np
import pytest

from bspricer import (
    OptionParameters, SurfaceRange, price, generate_surface, grid_max,
    MAX_STEPS, InvalidParameterError, DegenerateRangeError, NumericOverflowError,
)

RANGE = SurfaceRange(strike_price=100.0, time_to_maturity=1.0, risk_free_rate=0.05,
                     min_spot=80.0, max_spot=120.0, min_vol=0.1, max_vol=0.4,
                     steps=10)


@pytest.fixture
def surface():
    return generate_surface(RANGE)


# ---------------------------------------------------------------------------
# Shape and axes
# ---------------------------------------------------------------------------
class TestShape:
    @pytest.mark.parametrize("n", [2, 3, 10, 20])
    def test_grid_is_n_by_n(self, n):
        rng = SurfaceRange(100.0, 1.0, 0.05, 80.0, 120.0, 0.1, 0.4, steps=n)
        surf = generate_surface(rng)
        assert surf.call_grid.shape == (n, n)
        assert surf.put_grid.shape == (n, n)
        assert surf.steps == n

    def test_axes_endpoints(self, surface):
        assert surface.vol_axis[0] == RANGE.min_vol
        assert surface.vol_axis[-1] == pytest.approx(RANGE.max_vol)
        assert surface.spot_axis[0] == RANGE.min_spot
        assert surface.spot_axis[-1] == pytest.approx(RANGE.max_spot)
        assert np.all(np.diff(surface.vol_axis) > 0)
        assert np.all(np.diff(surface.spot_axis) > 0)

    def test_steps_clamped(self, caplog):
        rng = SurfaceRange(100.0, 1.0, 0.05, 80.0, 120.0, 0.1, 0.4, steps=50)
        with caplog.at_level(logging.INFO, logger="bspricer.surface"):
            surf = generate_surface(rng)
        assert surf.call_grid.shape == (MAX_STEPS, MAX_STEPS)
        assert surf.spot_axis[-1] == pytest.approx(120.0)
        assert "clamped" in caplog.text


# ---------------------------------------------------------------------------
# Cell values
# ---------------------------------------------------------------------------
class TestCells:
    def test_cells_match_pricer(self, surface):
        n = RANGE.steps
        spot_step = (RANGE.max_spot - RANGE.min_spot) / (n - 1)
        vol_step = (RANGE.max_vol - RANGE.min_vol) / (n - 1)
        for i in range(n):
            vol = RANGE.min_vol + i * vol_step
            for j in range(n):
                spot = RANGE.min_spot + j * spot_step
                res = price(spot, RANGE.strike_price, RANGE.time_to_maturity,
                            RANGE.risk_free_rate, vol)
                assert surface.call_grid[i, j] == round(res.call_price, 2)
                assert surface.put_grid[i, j] == round(res.put_price, 2)

    def test_rounded_to_cents(self, surface):
        np.testing.assert_allclose(np.round(surface.call_grid, 2), surface.call_grid)
        np.testing.assert_allclose(np.round(surface.put_grid, 2), surface.put_grid)

    def test_all_finite_and_non_negative(self, surface):
        for grid in (surface.call_grid, surface.put_grid):
            assert np.all(np.isfinite(grid))
            assert np.all(grid >= 0.0)

    def test_monotone_along_axes(self, surface):
        # calls rise with spot, puts fall; both rise with vol
        assert np.all(np.diff(surface.call_grid, axis=1) >= 0)
        assert np.all(np.diff(surface.put_grid, axis=1) <= 0)
        assert np.all(np.diff(surface.call_grid, axis=0) >= 0)
        assert np.all(np.diff(surface.put_grid, axis=0) >= 0)

    def test_zero_maturity_is_intrinsic(self):
        rng = SurfaceRange(100.0, 0.0, 0.05, 80.0, 120.0, 0.1, 0.4, steps=5)
        surf = generate_surface(rng)
        expected_call = np.maximum(surf.spot_axis - 100.0, 0.0)
        for row in surf.call_grid:
            np.testing.assert_allclose(row, expected_call)

    def test_grid_max(self, surface):
        assert surface.call_max == surface.call_grid.max()
        assert surface.put_max == surface.put_grid.max()
        assert grid_max([]) == 1.0
        assert grid_max([[0.0, 0.0], [0.0, 0.0]]) == 0.0


# ---------------------------------------------------------------------------
# Range construction and errors
# ---------------------------------------------------------------------------
class TestRange:
    def test_around_spot_defaults(self):
        opt = OptionParameters(100.0, 105.0, 0.5, 0.03, 0.25)
        rng = SurfaceRange.around_spot(opt)
        assert (rng.min_spot, rng.max_spot) == (70.0, 130.0)
        assert (rng.min_vol, rng.max_vol) == (0.1, 0.4)
        assert rng.steps == 10
        assert rng.strike_price == 105.0
        assert rng.time_to_maturity == 0.5
        assert rng.risk_free_rate == 0.03

    def test_around_spot_rounds(self):
        opt = OptionParameters(42.5, 40.0, 1.0, 0.05, 0.2)
        rng = SurfaceRange.around_spot(opt, steps=4)
        assert rng.min_spot == 30.0   # round(29.75)
        assert rng.max_spot == 55.0   # round(55.25)

    @pytest.mark.parametrize("steps", [1, 0, -3])
    def test_too_few_steps(self, steps):
        with pytest.raises(InvalidParameterError) as exc:
            SurfaceRange(100.0, 1.0, 0.05, 80.0, 120.0, 0.1, 0.4, steps=steps)
        assert exc.value.field == "steps"

    @pytest.mark.parametrize("steps", [2.5, "10", True])
    def test_non_integer_steps(self, steps):
        with pytest.raises(InvalidParameterError):
            SurfaceRange(100.0, 1.0, 0.05, 80.0, 120.0, 0.1, 0.4, steps=steps)

    @pytest.mark.parametrize("spots, vols, field", [
        ((120.0, 80.0), (0.1, 0.4), "max_spot"),
        ((100.0, 100.0), (0.1, 0.4), "max_spot"),
        ((80.0, 120.0), (0.4, 0.1), "max_vol"),
        ((80.0, 120.0), (0.2, 0.2), "max_vol"),
    ])
    def test_degenerate_range(self, spots, vols, field):
        with pytest.raises(DegenerateRangeError) as exc:
            SurfaceRange(100.0, 1.0, 0.05, *spots, *vols, steps=5)
        assert exc.value.field == field

    @pytest.mark.parametrize("kwargs, field", [
        ({"min_spot": 0.0}, "min_spot"),
        ({"min_vol": 0.0}, "min_vol"),
        ({"strike_price": -5.0}, "strike_price"),
        ({"time_to_maturity": -1.0}, "time_to_maturity"),
    ])
    def test_invalid_fields(self, kwargs, field):
        base = dict(strike_price=100.0, time_to_maturity=1.0, risk_free_rate=0.05,
                    min_spot=80.0, max_spot=120.0, min_vol=0.1, max_vol=0.4, steps=5)
        base.update(kwargs)
        with pytest.raises(InvalidParameterError) as exc:
            SurfaceRange(**base)
        assert exc.value.field == field

    def test_overflow_raises(self):
        rng = SurfaceRange(100.0, 1.0, -1000.0, 80.0, 120.0, 0.1, 0.4, steps=3)
        with pytest.raises(NumericOverflowError):
            generate_surface(rng)
