"""
String codecs for RGB colors.

Two notations are understood: ``#rrggbb`` hex strings and CSS-like
``rgb(R, G, B)`` strings. Decoders return channel tuples on the 0-255 scale
and raise :class:`~chromalite.errors.ParseError` on anything malformed;
encoders round each channel half away from zero.
"""

import re
from typing import Tuple
from ..errors import ParseError
from ..types.constants import CHANNEL_MAX
from ..utils.num_utils import round_half_away

HEX_PATTERN = re.compile(r"#([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)
RGB_PATTERN = re.compile(r"rgb\s*\((.*)\)", re.IGNORECASE | re.DOTALL)


def parse_hex(text: str) -> Tuple[int, int, int]:
    """Decode ``#rrggbb`` (surrounding whitespace allowed) into three ints."""
    if not isinstance(text, str):
        raise ParseError(f"Expected a hex string, got {type(text).__name__}")

    match = HEX_PATTERN.fullmatch(text.strip())
    if match is None:
        raise ParseError(f"Invalid hex color {text!r}; expected '#rrggbb'")

    r, g, b = (int(group, 16) for group in match.groups())
    return r, g, b


def parse_rgb_string(text: str) -> Tuple[int, int, int]:
    """Decode ``rgb(R, G, B)`` into three ints in [0, 255]."""
    if not isinstance(text, str):
        raise ParseError(f"Expected an rgb string, got {type(text).__name__}")

    match = RGB_PATTERN.fullmatch(text.strip())
    if match is None:
        raise ParseError(f"Invalid rgb color {text!r}; expected 'rgb(R, G, B)'")

    parts = match.group(1).split(",")
    if len(parts) != 3:
        raise ParseError(f"Invalid rgb color {text!r}; expected 3 components, got {len(parts)}")

    channels = []
    for part in parts:
        try:
            channel = int(part.strip())
        except ValueError:
            raise ParseError(f"Invalid rgb component {part.strip()!r} in {text!r}") from None
        if not 0 <= channel <= CHANNEL_MAX:
            raise ParseError(f"rgb component {channel} in {text!r} is outside 0-{CHANNEL_MAX}")
        channels.append(channel)

    r, g, b = channels
    return r, g, b


def dec_to_hex(channel: float) -> str:
    """Two lowercase hex digits for a channel already inside [0, 255]."""
    return f"{round_half_away(channel):02x}"


def to_hex_string(r: float, g: float, b: float) -> str:
    return "#" + dec_to_hex(r) + dec_to_hex(g) + dec_to_hex(b)


def to_rgb_string(r: float, g: float, b: float) -> str:
    return f"rgb({round_half_away(r)}, {round_half_away(g)}, {round_half_away(b)})"
