"""Value-to-colour mapping for heatmap cells.

Colours are returned as CSS strings so the rendering layer can use them
directly: ``hsl(...)`` for the continuous green-to-red scale and ``#rrggbb``
for the discrete call/put palettes.
"""

from __future__ import annotations

import math

from .core import OptionType, CALL
from .exceptions import InvalidParameterError

__all__ = [
    "CALL_PALETTE",
    "PUT_PALETTE",
    "heat_color",
    "palette_color",
    "color_for",
]

# Continuous scale: hue 120 (green) at the low end, 0 (red) at the high end.
HUE_LOW = 120.0
SATURATION = 70.0
LIGHTNESS_LOW = 40.0
LIGHTNESS_SPAN = 8.5

# Discrete palettes, ordered low -> high.
# calls: purple -> blue -> green -> yellow
CALL_PALETTE = (
    "#4A148C", "#6A1B9A", "#7B1FA2", "#9C27B0",
    "#3949AB", "#1E88E5", "#039BE5", "#00ACC1",
    "#00897B", "#43A047", "#7CB342", "#C0CA33",
)
# puts: green -> yellow
PUT_PALETTE = (
    "#1B5E20", "#2E7D32", "#388E3C", "#43A047",
    "#4CAF50", "#66BB6A", "#81C784", "#A5D6A7",
    "#C8E6C9", "#F0F4C3", "#E6EE9C", "#DCE775",
)


def _ratio(value: float, max_value: float) -> float:
    """``value / max_value`` clamped to [0, 1]; a zero max counts as 1."""
    if max_value == 0:
        max_value = 1.0
    ratio = value / max_value
    if math.isnan(ratio):
        raise InvalidParameterError("value", f"has no colour against max {max_value}, got {value}")
    return min(max(ratio, 0.0), 1.0)


def _fmt(x: float) -> str:
    return f"{x:.4g}"


def heat_color(value: float, max_value: float) -> str:
    """Green (low) to red (high) ``hsl()`` colour for a cell value."""
    ratio = _ratio(value, max_value)
    hue = HUE_LOW * (1.0 - ratio)
    lightness = LIGHTNESS_LOW + LIGHTNESS_SPAN * ratio
    return f"hsl({_fmt(hue)}, {_fmt(SATURATION)}%, {_fmt(lightness)}%)"


def palette_color(value: float, max_value: float, kind=CALL) -> str:
    """Pick from the call or put palette at ``floor(ratio * (size - 1))``."""
    palette = CALL_PALETTE if OptionType.parse(kind) == CALL else PUT_PALETTE
    index = math.floor(_ratio(value, max_value) * (len(palette) - 1))
    return palette[index]


def color_for(value: float, max_value: float, kind=None) -> str:
    """Colour for a heatmap cell.

    Without ``kind`` the continuous HSL scale is used; with ``kind`` the
    matching discrete palette.
    """
    if kind is None:
        return heat_color(value, max_value)
    return palette_color(value, max_value, kind)
