"""
Chromalite Color Classes
========================

:class:`ColorValue` is an immutable RGB color with parsers, serializers and
HSL / HSV transforms. Importing this package also attaches the HSL-space
adjustments from :mod:`chromalite.colors.adjust` (``darken``, ``lighten``,
``saturate``, ``contrast``, ``change_hsl`` and ``apply``) as methods.

Usage
-----
>>> from chromalite.colors import ColorValue
>>> gray = ColorValue.parse("#808080")
>>> gray.darken(1.0).to_hex_string()
'#000000'
>>> ColorValue.from_hsl(0.0, 1.0, 0.5).to_hex_string()
'#ff0000'

Notes
-----
- Channels are floats on the 0-255 scale, clamped on construction
- HSL / HSV components are fractions in [0, 1]
- ``parse`` is permissive and returns black for unrecognized input;
  pass ``strict=True`` or use ``from_hex`` / ``from_rgb_string`` to get a
  ParseError instead
"""

from .color_value import ColorValue, parse
from . import adjust  # noqa: F401  attaches the adjustment methods


__all__ = ['ColorValue', 'parse']
