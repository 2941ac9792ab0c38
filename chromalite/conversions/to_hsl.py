import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.np_functions import cyclic_wrap_float as np_cyclic_wrap_float
from ..utils.num_utils import wrap_unit
from ..types.color_types import HSXTuple


def unit_rgb_to_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """
    Hue fraction of a chromatic color (``delta > 0``).

    Each channel gets a weighted distance from the maximum; the channel that
    *is* the maximum picks the sector. Ties resolve in r, g, b order.
    """
    dr = ((max_c - r) / 6 + delta / 2) / delta
    dg = ((max_c - g) / 6 + delta / 2) / delta
    db = ((max_c - b) / 6 + delta / 2) / delta

    if r == max_c:
        hue = db - dg
    elif g == max_c:
        hue = 1 / 3 + dr - db
    else:
        hue = 2 / 3 + dg - dr

    return wrap_unit(hue)


def np_unit_rgb_to_hue(r: NDArray, g: NDArray, b: NDArray, max_c: NDArray, delta: NDArray) -> NDArray:
    """Vectorized :func:`unit_rgb_to_hue`; achromatic entries get hue 0."""
    chromatic = delta > 0
    safe_delta = np.where(chromatic, delta, 1.0)

    dr = ((max_c - r) / 6 + delta / 2) / safe_delta
    dg = ((max_c - g) / 6 + delta / 2) / safe_delta
    db = ((max_c - b) / 6 + delta / 2) / safe_delta

    hue = np.where(
        r == max_c,
        db - dg,
        np.where(g == max_c, 1 / 3 + dr - db, 2 / 3 + dg - dr),
    )
    hue = np.where(chromatic, hue, 0.0)
    hue = np_cyclic_wrap_float(hue, 0.0, 1.0)
    return np.where(hue >= 1.0, 0.0, hue)


def unit_rgb_to_hsl(r: float, g: float, b: float) -> HSXTuple:
    """
    Convert RGB fractions to HSL fractions.

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        (hue, saturation, lightness), each in [0, 1]. Achromatic input
        reports hue 0 and saturation 0.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (min_c + max_c) / 2

    if delta == 0:
        return 0.0, 0.0, lightness

    if lightness < 0.5:
        saturation = delta / (2 * lightness)
    else:
        saturation = delta / (2 * (1 - lightness))

    return unit_rgb_to_hue(r, g, b, max_c, delta), saturation, lightness


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB fractions to HSL fractions.

    Args:
        r, g, b: array-like or scalar, [0, 1]

    Returns:
        hsl: array of shape (..., 3)
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (min_c + max_c) / 2

    saturation = np.zeros(out_shape)
    low = (delta > 0) & (lightness < 0.5)
    high = (delta > 0) & (lightness >= 0.5)
    saturation[low] = delta[low] / (2 * lightness[low])
    saturation[high] = delta[high] / (2 * (1 - lightness[high]))

    hue = np_unit_rgb_to_hue(r, g, b, max_c, delta)

    return np.stack([hue, saturation, lightness], axis=-1)
