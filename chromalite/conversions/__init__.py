"""
Chromalite Color Space Conversions
==================================

Pure conversion math between RGB, HSL and HSV, plus the hex / ``rgb(...)``
string codecs.

All HSL and HSV components are fractions: hue 1.0 is a full turn (360
degrees), saturation, lightness and value run from 0 to 1. The low-level
RGB functions work on unit fractions too; :func:`convert` and
:func:`np_convert` take RGB on the 0-255 scale.

Conversion Functions
-------------------

RGB → HSL / HSV:
    unit_rgb_to_hsl(r, g, b), np_unit_rgb_to_hsl(r, g, b)
    unit_rgb_to_hsv(r, g, b), np_unit_rgb_to_hsv(r, g, b)

HSL / HSV → RGB:
    hsl_to_unit_rgb(h, s, l), np_hsl_to_unit_rgb(h, s, l)
    hsv_to_unit_rgb(h, s, v), np_hsv_to_unit_rgb(h, s, v)

High-Level API
-------------
    convert(color, from_space, to_space)
    np_convert(color, from_space, to_space)

Examples
--------
>>> from chromalite.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> unit_rgb_to_hsl(1.0, 0.0, 0.0)
(0.0, 1.0, 0.5)
>>> hsl_to_unit_rgb(0.0, 1.0, 0.5)
(1.0, 0.0, 0.0)
"""

# RGB → HSL / HSV conversions
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv

# HSL / HSV → RGB conversions
from .to_rgb import (
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    np_hsl_to_unit_rgb,
    np_hsv_to_unit_rgb,
)

# String codecs
from .hex import parse_hex, parse_rgb_string, to_hex_string, to_rgb_string

# High-level API
from .wrapper import convert, np_convert, check_space

__all__ = [
    # RGB → HSL / HSV
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',

    # HSL / HSV → RGB
    'hsl_to_unit_rgb',
    'hsv_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'np_hsv_to_unit_rgb',

    # String codecs
    'parse_hex',
    'parse_rgb_string',
    'to_hex_string',
    'to_rgb_string',

    # High-level API
    'convert',
    'np_convert',
    'check_space',
]
