"""Chromalite: RGB / HSL / HSV color value conversions."""

from boundednumbers import BoundType

from .colors import ColorValue, parse
from .conversions import (
    unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    np_unit_rgb_to_hsl,
    np_unit_rgb_to_hsv,
    np_hsl_to_unit_rgb,
    np_hsv_to_unit_rgb,
    convert,
    np_convert,
)
from .errors import ParseError, InvalidSpace, ChannelOverflowWarning

__version__ = "1.0.0"

__all__ = [
    # color type
    "ColorValue",
    "parse",
    # conversions
    "unit_rgb_to_hsl",
    "unit_rgb_to_hsv",
    "hsl_to_unit_rgb",
    "hsv_to_unit_rgb",
    "np_unit_rgb_to_hsl",
    "np_unit_rgb_to_hsv",
    "np_hsl_to_unit_rgb",
    "np_hsv_to_unit_rgb",
    "convert",
    "np_convert",
    # errors
    "ParseError",
    "InvalidSpace",
    "ChannelOverflowWarning",
    # re-exported
    "BoundType",
    # version
    "__version__",
]
