"""Tests for heatmap colour mapping."""

import math
import pytest

from bspricer import color_for, heat_color, palette_color, CALL, PUT, InvalidParameterError
from bspricer.colors import CALL_PALETTE, PUT_PALETTE

LOW = "hsl(120, 70%, 40%)"
HIGH = "hsl(0, 70%, 48.5%)"


class TestHeatColor:
    @pytest.mark.parametrize("max_value", [0.01, 1.0, 57.3, 1e6])
    def test_endpoints(self, max_value):
        assert color_for(0.0, max_value) == LOW
        assert color_for(max_value, max_value) == HIGH

    def test_midpoint(self):
        assert heat_color(5.0, 10.0) == "hsl(60, 70%, 44.25%)"

    def test_zero_max_treated_as_one(self):
        assert heat_color(0.0, 0.0) == LOW
        assert heat_color(1.0, 0.0) == HIGH

    def test_clamped_above_max(self):
        assert heat_color(10.01, 10.0) == HIGH

    def test_clamped_below_zero(self):
        assert heat_color(-3.0, 10.0) == LOW

    def test_nan_rejected(self):
        with pytest.raises(InvalidParameterError):
            heat_color(math.nan, 10.0)


class TestPaletteColor:
    @pytest.mark.parametrize("kind, palette", [(CALL, CALL_PALETTE), (PUT, PUT_PALETTE)])
    def test_endpoints(self, kind, palette):
        assert palette_color(0.0, 25.0, kind) == palette[0]
        assert palette_color(25.0, 25.0, kind) == palette[-1]
        assert color_for(25.0, 25.0, kind) == palette[-1]

    def test_index_is_floored(self):
        # ratio 0.5 -> floor(0.5 * 11) = 5
        assert palette_color(5.0, 10.0, "call") == CALL_PALETTE[5]
        assert palette_color(5.0, 10.0, "put") == PUT_PALETTE[5]

    def test_negative_value_does_not_wrap(self):
        assert palette_color(-1.0, 10.0, PUT) == PUT_PALETTE[0]

    def test_palette_sizes(self):
        assert len(CALL_PALETTE) == len(PUT_PALETTE) == 12
