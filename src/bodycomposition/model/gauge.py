"""Linear [0, 1] gauge fractions for the progress bars. Not a medical scale."""
from __future__ import annotations

import math

from bodycomposition.config import GAUGE_SCALES, GaugeScale


def scale_fraction(value: float, scale: GaugeScale) -> float:
    """
    Map value linearly so scale.low -> 0 and scale.high -> 1, clamped at both ends.

    NaN propagates; the caller draws no bar for it.
    """
    if math.isnan(value):
        return math.nan
    fraction = (value - scale.low) / (scale.high - scale.low)
    return max(0.0, min(fraction, 1.0))


def gauge_fraction(metric: str, value: float) -> float:
    """Gauge fraction of a metric ("bmi" or "bri")."""
    try:
        scale = GAUGE_SCALES[metric]
    except KeyError:
        raise KeyError(f"No gauge scale for metric '{metric}'") from None
    return scale_fraction(value, scale)
