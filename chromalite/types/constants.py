# No dependencies
CHANNEL_MAX = 255
HUE_SECTORS = 6

# Channels further than this outside [0, CHANNEL_MAX] are reported when clamped
OVERFLOW_TOLERANCE = 1e-6

HSX_SPACES = ("hsl", "hsv")
COLOR_SPACES = ("rgb",) + HSX_SPACES
