import numpy as np
from typing import Callable, Dict, Sequence, Tuple
from boundednumbers.np_functions import clamp as np_clamp

from .to_rgb import hsv_to_unit_rgb, hsl_to_unit_rgb, np_hsv_to_unit_rgb, np_hsl_to_unit_rgb
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl

from ..errors import InvalidSpace
from ..types.color_types import ColorSpace
from ..types.constants import CHANNEL_MAX, COLOR_SPACES

# Each space's components as unit fractions <-> RGB fractions
TO_UNIT_RGB: Dict[str, Callable[[float, float, float], Tuple[float, float, float]]] = {
    "hsl": hsl_to_unit_rgb,
    "hsv": hsv_to_unit_rgb,
}
FROM_UNIT_RGB: Dict[str, Callable[[float, float, float], Tuple[float, float, float]]] = {
    "hsl": unit_rgb_to_hsl,
    "hsv": unit_rgb_to_hsv,
}
NP_TO_UNIT_RGB: Dict[str, Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    "hsl": np_hsl_to_unit_rgb,
    "hsv": np_hsv_to_unit_rgb,
}
NP_FROM_UNIT_RGB: Dict[str, Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    "hsl": np_unit_rgb_to_hsl,
    "hsv": np_unit_rgb_to_hsv,
}


def check_space(space: str, allowed: Sequence[str] = COLOR_SPACES) -> str:
    """Return the lower-cased space name or raise :class:`InvalidSpace`."""
    if not isinstance(space, str) or space.lower() not in allowed:
        raise InvalidSpace(space, allowed)
    return space.lower()


def convert(
    color: Sequence[float],
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> Tuple[float, float, float]:
    """
    Convert one color between ``"rgb"`` (0-255 channels) and ``"hsl"`` /
    ``"hsv"`` (unit fractions).

    RGB output is left unclamped; :class:`~chromalite.ColorValue` does the
    clamping and reporting.
    """
    fs = check_space(from_space)
    ts = check_space(to_space)
    a, b, c = (float(v) for v in color)

    if fs == ts:
        return a, b, c

    if fs == "rgb":
        r, g, bl = a / CHANNEL_MAX, b / CHANNEL_MAX, c / CHANNEL_MAX
    else:
        r, g, bl = TO_UNIT_RGB[fs](a, b, c)

    if ts == "rgb":
        return r * CHANNEL_MAX, g * CHANNEL_MAX, bl * CHANNEL_MAX
    return FROM_UNIT_RGB[ts](r, g, bl)


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> np.ndarray:
    """
    Vectorized :func:`convert` over an array of shape (..., 3).

    RGB output is clamped to [0, 255].
    """
    fs = check_space(from_space)
    ts = check_space(to_space)
    color = np.asarray(color, dtype=float)

    if color.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {color.shape}")

    if fs == ts:
        return np_clamp(color, 0.0, CHANNEL_MAX) if ts == "rgb" else color.copy()

    if fs == "rgb":
        unit = color / CHANNEL_MAX
    else:
        unit = NP_TO_UNIT_RGB[fs](color[..., 0], color[..., 1], color[..., 2])

    if ts == "rgb":
        return np_clamp(unit * CHANNEL_MAX, 0.0, CHANNEL_MAX)
    return NP_FROM_UNIT_RGB[ts](unit[..., 0], unit[..., 1], unit[..., 2])
