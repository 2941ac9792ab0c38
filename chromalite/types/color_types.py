from __future__ import annotations
from typing import Callable, Literal, Tuple, Union

Scalar = Union[int, float]
RGBTuple = Tuple[float, float, float]
HSXTuple = Tuple[float, float, float]
ColorSpace = Literal["rgb", "hsl", "hsv"]
HSXSpace = Literal["hsl", "hsv"]
ChannelFunction = Callable[[float], float]
