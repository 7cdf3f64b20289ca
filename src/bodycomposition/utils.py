import math
from decimal import Decimal, ROUND_HALF_UP


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]. NaN is pulled to the lower bound."""
    if math.isnan(value):
        return lo
    return max(lo, min(value, hi))


def round_half_away(value: float, digits: int = 1) -> float:
    """Round half away from zero at the given decimal scale. NaN and inf pass through."""
    if not math.isfinite(value):
        return value
    # str() gives the shortest repr, so 2.675 rounds as typed rather than as stored
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
