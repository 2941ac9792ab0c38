from __future__ import annotations
import warnings
from typing import Any, Callable
from boundednumbers import clamp

from ..conversions.hex import parse_hex, parse_rgb_string, to_hex_string, to_rgb_string
from ..conversions.to_hsl import unit_rgb_to_hsl
from ..conversions.to_hsv import unit_rgb_to_hsv
from ..conversions.to_rgb import hsl_to_unit_rgb, hsv_to_unit_rgb
from ..errors import ChannelOverflowWarning, ParseError
from ..types.color_types import HSXTuple, RGBTuple, Scalar
from ..types.constants import CHANNEL_MAX, OVERFLOW_TOLERANCE


def _bounded_channel(name: str, value: Scalar) -> float:
    value = float(value)
    if value < -OVERFLOW_TOLERANCE or value > CHANNEL_MAX + OVERFLOW_TOLERANCE:
        warnings.warn(
            f"Channel {name}={value!r} is outside [0, {CHANNEL_MAX}]; clamping",
            ChannelOverflowWarning,
            stacklevel=3,
        )
    return float(clamp(value, 0.0, float(CHANNEL_MAX)))


class ColorValue:
    """
    An immutable RGB color.

    Channels are floats on the 0-255 scale and are clamped into that range on
    construction; anything clamped by more than floating-point noise raises a
    :class:`~chromalite.errors.ChannelOverflowWarning`. Every transform
    returns a new instance.

    >>> red = ColorValue.parse("#ff0000")
    >>> red.to_hsl()
    (0.0, 1.0, 0.5)
    >>> red.contrast().to_hex_string()
    '#00ffff'
    """

    __slots__ = ('_r', '_g', '_b', '_is_frozen')  # no __dict__ → immutability

    # Attached by chromalite.colors.adjust
    change_hsl: Callable[..., ColorValue]
    darken: Callable[..., ColorValue]
    lighten: Callable[..., ColorValue]
    saturate: Callable[..., ColorValue]
    contrast: Callable[..., ColorValue]
    apply: Callable[..., ColorValue]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: Scalar = 0, g: Scalar = 0, b: Scalar = 0) -> None:
        self._r = _bounded_channel("r", r)
        self._g = _bounded_channel("g", g)
        self._b = _bounded_channel("b", b)

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> float:
        return self._r

    @property
    def g(self) -> float:
        return self._g

    @property
    def b(self) -> float:
        return self._b

    @property
    def value(self) -> RGBTuple:
        return self._r, self._g, self._b

    def __iter__(self):
        return iter(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorValue):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"ColorValue(r={self._r!r}, g={self._g!r}, b={self._b!r})"

    # ------------------ PARSING ------------------
    @classmethod
    def from_hex(cls, text: str) -> ColorValue:
        """Build a color from ``#rrggbb``; raises :class:`ParseError` otherwise."""
        return cls(*parse_hex(text))

    @classmethod
    def from_rgb_string(cls, text: str) -> ColorValue:
        """Build a color from ``rgb(R, G, B)``; raises :class:`ParseError` otherwise."""
        return cls(*parse_rgb_string(text))

    @classmethod
    def parse(cls, text: Any, strict: bool = False) -> ColorValue:
        """
        Build a color from either string notation, picked by its prefix.

        Input that is neither ``#...`` nor ``rgb...`` (including non-strings)
        gives black, unless ``strict`` is set, in which case it raises
        :class:`ParseError`. A recognized prefix followed by a malformed body
        always raises.
        """
        if isinstance(text, str):
            stripped = text.strip()
            if stripped.startswith('#'):
                return cls.from_hex(stripped)
            if stripped[:3].lower() == 'rgb':
                return cls.from_rgb_string(stripped)

        if strict:
            raise ParseError(f"Unrecognized color {text!r}; expected '#rrggbb' or 'rgb(R, G, B)'")
        return cls()

    # ------------------ SERIALIZATION ------------------
    def to_hex_string(self) -> str:
        return to_hex_string(self._r, self._g, self._b)

    def to_rgb_string(self) -> str:
        return to_rgb_string(self._r, self._g, self._b)

    # ------------------ COLOR SPACES ------------------
    def to_unit_rgb(self) -> RGBTuple:
        return self._r / CHANNEL_MAX, self._g / CHANNEL_MAX, self._b / CHANNEL_MAX

    def to_hsl(self) -> HSXTuple:
        """(hue, saturation, lightness) as fractions in [0, 1]."""
        return unit_rgb_to_hsl(*self.to_unit_rgb())

    def to_hsv(self) -> HSXTuple:
        """(hue, saturation, value) as fractions in [0, 1]."""
        return unit_rgb_to_hsv(*self.to_unit_rgb())

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> ColorValue:
        """Build a color from HSL fractions. ``h`` wraps, so 1.0 equals 0.0."""
        r, g, b = hsl_to_unit_rgb(float(h), float(s), float(l))
        return cls(r * CHANNEL_MAX, g * CHANNEL_MAX, b * CHANNEL_MAX)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> ColorValue:
        """Build a color from HSV fractions. ``h`` wraps, so 1.0 equals 0.0."""
        r, g, b = hsv_to_unit_rgb(float(h), float(s), float(v))
        return cls(r * CHANNEL_MAX, g * CHANNEL_MAX, b * CHANNEL_MAX)


def parse(text: Any, strict: bool = False) -> ColorValue:
    """Module-level shortcut for :meth:`ColorValue.parse`."""
    return ColorValue.parse(text, strict=strict)
