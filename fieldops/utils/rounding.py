"""
Rounding helpers shared by the distance and payroll computations
"""
import math

from fieldops.constants import DECIMAL_PLACES


def round_half_up(value: float, places: int = DECIMAL_PLACES) -> float:
    """Round on the scaled value: floor(value * 10**places + 0.5) / 10**places."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor
