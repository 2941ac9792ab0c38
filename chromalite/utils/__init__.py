from .num_utils import round_half_away, wrap_unit

__all__ = ["round_half_away", "wrap_unit"]
