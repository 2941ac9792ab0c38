import math
import numpy as np
from numpy import ndarray as NDArray
from ..types.color_types import RGBTuple
from ..types.constants import HUE_SECTORS

# Per sector, which of (chroma, x, 0) lands in r, g, b
_HSL_SECTOR_TABLE = (
    (0, 1, 2),
    (1, 0, 2),
    (2, 0, 1),
    (2, 1, 0),
    (1, 2, 0),
    (0, 2, 1),
)

# Per sector, which of (v, v1, v2, v3) lands in r, g, b
_HSV_SECTOR_TABLE = (
    (0, 3, 1),
    (2, 0, 1),
    (1, 0, 3),
    (1, 2, 0),
    (3, 1, 0),
    (0, 1, 2),
)


## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> RGBTuple:
    """
    Convert HSL fractions to RGB fractions.

    Hue is cyclic, so ``h == 1.0`` gives the same color as ``h == 0.0``.
    The result is not clamped; saturation or lightness outside [0, 1] can
    push channels out of range.

    Args:
        h: Hue fraction (1.0 == 360 degrees)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        (r, g, b) fractions
    """
    if s == 0:
        return l, l, l

    chroma = (1 - abs(2 * l - 1)) * s
    h_ = h * HUE_SECTORS
    sector = int(math.floor(h_)) % HUE_SECTORS
    x = chroma * (1 - abs((h_ % 2) - 1))

    if sector == 0:
        r, g, b = chroma, x, 0.0
    elif sector == 1:
        r, g, b = x, chroma, 0.0
    elif sector == 2:
        r, g, b = 0.0, chroma, x
    elif sector == 3:
        r, g, b = 0.0, x, chroma
    elif sector == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    m = l - chroma / 2
    return r + m, g + m, b + m


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL fractions to RGB fractions.

    Args:
        h, s, l: array-like or scalar fractions

    Returns:
        rgb: array of shape (..., 3), not clamped
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    chroma = (1 - np.abs(2 * l - 1)) * s
    h_ = h * HUE_SECTORS
    sector = np.floor(h_).astype(int) % HUE_SECTORS
    x = chroma * (1 - np.abs((h_ % 2) - 1))

    parts = np.stack([chroma, x, np.zeros(out_shape)])
    rgb = np.zeros(out_shape + (3,))
    for index, picks in enumerate(_HSL_SECTOR_TABLE):
        mask = sector == index
        for channel, pick in enumerate(picks):
            rgb[..., channel][mask] = parts[pick][mask]

    m = l - chroma / 2
    return rgb + m[..., np.newaxis]


## HSV to RGB conversions

def hsv_to_unit_rgb(h: float, s: float, v: float) -> RGBTuple:
    """
    Convert HSV fractions to RGB fractions.

    Args:
        h: Hue fraction (1.0 == 360 degrees)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        (r, g, b) fractions
    """
    if s == 0:
        return v, v, v

    h_ = h * HUE_SECTORS
    hi = math.floor(h_)
    f = h_ - hi

    v1 = v * (1 - s)
    v2 = v * (1 - s * f)
    v3 = v * (1 - s * (1 - f))

    sector = int(hi) % HUE_SECTORS
    if sector == 0:
        return v, v3, v1
    if sector == 1:
        return v2, v, v1
    if sector == 2:
        return v1, v, v3
    if sector == 3:
        return v1, v2, v
    if sector == 4:
        return v3, v1, v
    return v, v1, v2


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV fractions to RGB fractions.

    Args:
        h, s, v: array-like or scalar fractions

    Returns:
        rgb: array of shape (..., 3), not clamped
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    h_ = h * HUE_SECTORS
    hi = np.floor(h_)
    f = h_ - hi
    sector = hi.astype(int) % HUE_SECTORS

    parts = np.stack([
        v,
        v * (1 - s),
        v * (1 - s * f),
        v * (1 - s * (1 - f)),
    ])
    rgb = np.zeros(out_shape + (3,))
    for index, picks in enumerate(_HSV_SECTOR_TABLE):
        mask = sector == index
        for channel, pick in enumerate(picks):
            rgb[..., channel][mask] = parts[pick][mask]

    return rgb
