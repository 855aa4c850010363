# bspricer — Black-Scholes pricing, Greeks and price surfaces
# Public API

# Data model
from .core import (
    OptionType, CALL, PUT,
    OptionParameters, SurfaceRange,
    PricingResult, GreeksResult, PriceSurface,
)

# Errors
from .exceptions import (
    BSPricerError, InvalidParameterError, DegenerateRangeError,
    NumericOverflowError,
)

# Standard normal
from .normal import cdf, pdf

# Closed-form engine
from .black_scholes import price, price_option, greeks, greeks_option

# Surfaces
from .surface import generate_surface, grid_max, MAX_STEPS

# Heatmap colours
from .colors import color_for, heat_color, palette_color

__all__ = [
    # Data model
    "OptionType", "CALL", "PUT",
    "OptionParameters", "SurfaceRange",
    "PricingResult", "GreeksResult", "PriceSurface",
    # Errors
    "BSPricerError", "InvalidParameterError", "DegenerateRangeError",
    "NumericOverflowError",
    # Normal distribution
    "cdf", "pdf",
    # Engine
    "price", "price_option", "greeks", "greeks_option",
    # Surfaces
    "generate_surface", "grid_max", "MAX_STEPS",
    # Colours
    "color_for", "heat_color", "palette_color",
]

__version__ = "0.1.0"
