import numpy as np
from numpy import ndarray as NDArray
from .to_hsl import unit_rgb_to_hue, np_unit_rgb_to_hue
from ..types.color_types import HSXTuple


def unit_rgb_to_hsv(r: float, g: float, b: float) -> HSXTuple:
    """
    Convert RGB fractions to HSV fractions.

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        (hue, saturation, value), each in [0, 1]
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    if delta == 0:
        return 0.0, 0.0, max_c

    return unit_rgb_to_hue(r, g, b, max_c, delta), delta / max_c, max_c


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB fractions to HSV fractions.

    Args:
        r, g, b: array-like or scalar, [0, 1]

    Returns:
        hsv: array of shape (..., 3)
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

    saturation = np.zeros(out_shape)
    mask = delta > 0
    saturation[mask] = delta[mask] / max_c[mask]

    hue = np_unit_rgb_to_hue(r, g, b, max_c, delta)

    return np.stack([hue, saturation, max_c], axis=-1)
