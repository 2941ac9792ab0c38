"""Exceptions and warnings raised by chromalite."""


class ParseError(ValueError):
    """Raised when a hex or ``rgb(...)`` color string cannot be decoded."""


class InvalidSpace(ValueError):
    """Raised when a color space name is not one of the supported spaces."""

    def __init__(self, space, allowed=("hsl", "hsv")):
        self.space = space
        self.allowed = tuple(allowed)
        names = ", ".join(repr(a) for a in self.allowed)
        super().__init__(f"Invalid color space {space!r}; use one of {names}")


class ChannelOverflowWarning(UserWarning):
    """Emitted when an RGB channel falls outside [0, 255] and gets clamped."""
