import math
from boundednumbers.functions import cyclic_wrap_float


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (127.5 -> 128, -0.5 -> -1)."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def wrap_unit(value: float) -> float:
    """Wrap a fraction cyclically into ``[0, 1)``."""
    wrapped = cyclic_wrap_float(value, 0.0, 1.0)
    # -1e-18 % 1.0 rounds up to exactly 1.0
    return 0.0 if wrapped >= 1.0 else wrapped
