from __future__ import annotations
from boundednumbers import BoundType, boundtype_to_function

from .color_value import ColorValue
from ..conversions.wrapper import check_space, convert
from ..types.color_types import ChannelFunction, HSXSpace
from ..types.constants import HSX_SPACES
from ..utils.num_utils import wrap_unit


def change_hsl(
    self: ColorValue,
    dh: float = 0,
    ds: float = 0,
    dl: float = 0,
    overflow: BoundType = BoundType.CLAMP,
) -> ColorValue:
    """
    Return a new color with the given deltas added to its HSL components.

    Hue always wraps cyclically (a full turn is 1.0). Saturation and
    lightness are bounded into [0, 1] with ``overflow``: the default clamps,
    ``BoundType.CYCLIC`` wraps them modulo 1, ``BoundType.BOUNCE`` reflects.

    Args:
        dh: Change in hue
        ds: Change in saturation
        dl: Change in lightness
        overflow: Strategy for saturation and lightness leaving [0, 1]
    """
    h, s, l = self.to_hsl()
    bound = boundtype_to_function[overflow]

    h = wrap_unit(h + dh)
    s = bound(s + ds, 0.0, 1.0)
    l = bound(l + dl, 0.0, 1.0)

    return ColorValue.from_hsl(h, s, l)


def darken(self: ColorValue, fraction: float = 0.1) -> ColorValue:
    """Move lightness toward 0 by ``fraction`` of itself; 1.0 gives black."""
    l = self.to_hsl()[2]
    return self.change_hsl(0, 0, -l * fraction)


def lighten(self: ColorValue, fraction: float = 0.1) -> ColorValue:
    """Move lightness toward 1 by ``fraction`` of the gap; 1.0 gives white."""
    l = self.to_hsl()[2]
    return self.change_hsl(0, 0, (1 - l) * fraction)


def saturate(self: ColorValue, fraction: float = 0.1) -> ColorValue:
    """Add ``fraction`` to saturation (an absolute delta, not relative)."""
    return self.change_hsl(0, fraction, 0)


def contrast(self: ColorValue, fraction: float = 1.0) -> ColorValue:
    """Rotate hue by half a turn times ``fraction``; 1.0 is the complement."""
    return self.change_hsl(0.5 * fraction, 0, 0)


def apply(
    self: ColorValue,
    h_fn: ChannelFunction,
    s_fn: ChannelFunction,
    x_fn: ChannelFunction,
    space: HSXSpace = "hsl",
) -> ColorValue:
    """
    Run one function per component in HSL or HSV space and rebuild the color.

    ``x_fn`` receives lightness for ``"hsl"`` and value for ``"hsv"``.

    >>> ColorValue(255, 0, 0).apply(lambda h: h + 1 / 3, lambda s: s, lambda x: x).to_hex_string()
    '#00ff00'

    Raises:
        InvalidSpace: if ``space`` is not ``"hsl"`` or ``"hsv"``
    """
    space = check_space(space, HSX_SPACES)

    h, s, x = convert(self.value, "rgb", space)
    rebuilt = (h_fn(h), s_fn(s), x_fn(x))

    if space == "hsl":
        return ColorValue.from_hsl(*rebuilt)
    return ColorValue.from_hsv(*rebuilt)


ColorValue.change_hsl = change_hsl
ColorValue.darken = darken
ColorValue.lighten = lighten
ColorValue.saturate = saturate
ColorValue.contrast = contrast
ColorValue.apply = apply
