"""
Metric Engine
=============
Body Mass Index and Body Roundness Index.

    BMI = weight_kg / height_m^2
    BRI = 364.2 - 365.5 * sqrt(1 - ((waist / height) / pi)^2)     (Thomas et al., 2013)

Both functions accept scalars or numpy arrays. Scalars give back a plain
float. The only sentinel is NaN, returned when the height is not positive.
The form never lets the height drop below 140 cm, so that branch is
unreachable from the UI; it is kept so the functions stay total.

Values are returned at full precision. Rounding is a display concern, see
`round_half_away` and `bodycomposition.model.readout`.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy import typing as npt

from bodycomposition.model.inputs import NormalizedInputs

logger = logging.getLogger(__name__)

ArrayLike = Union[float, npt.NDArray[np.float64]]

BRI_OFFSET = 364.2
BRI_FACTOR = 365.5


@dataclass(frozen=True)
class Metrics:
    bmi: float
    bri: float

    def is_defined(self) -> bool:
        return math.isfinite(self.bmi) and math.isfinite(self.bri)


def _as_result(values: npt.NDArray[np.float64]) -> ArrayLike:
    return float(values) if values.ndim == 0 else values


def compute_bmi(weight_kg: ArrayLike, height_cm: ArrayLike) -> ArrayLike:
    """
    Body Mass Index in kg/m^2.

    Args:
        weight_kg: Body weight in kilograms.
        height_cm: Body height in centimetres.

    Returns:
        weight / (height in metres)^2, or NaN where the height is not positive.
    """
    weight = np.asarray(weight_kg, dtype=np.float64)
    height_m = np.asarray(height_cm, dtype=np.float64) / 100.0
    with np.errstate(divide="ignore", invalid="ignore"):
        bmi = np.where(height_m > 0.0, weight / (height_m * height_m), np.nan)
    return _as_result(bmi)


def bri_radicand(waist_cm: ArrayLike, height_cm: ArrayLike) -> ArrayLike:
    """
    The term under the square root of the BRI formula, clamped to [0, 1].

    Extreme waist-to-height ratios would make 1 - (r / pi)^2 negative.
    """
    waist = np.asarray(waist_cm, dtype=np.float64)
    height = np.asarray(height_cm, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        x = (waist / height) / np.pi
        inside = np.clip(1.0 - x * x, 0.0, 1.0)
    return _as_result(inside)


def compute_bri(waist_cm: ArrayLike, height_cm: ArrayLike) -> ArrayLike:
    """
    Body Roundness Index from the waist-to-height ratio.

    Args:
        waist_cm: Waist circumference in centimetres.
        height_cm: Body height in centimetres.

    Returns:
        364.2 - 365.5 * eccentricity, or NaN where the height is not positive.
    """
    height = np.asarray(height_cm, dtype=np.float64)
    eccentricity = np.sqrt(np.asarray(bri_radicand(waist_cm, height), dtype=np.float64))
    bri = np.where(height > 0.0, BRI_OFFSET - BRI_FACTOR * eccentricity, np.nan)
    return _as_result(bri)


def compute_metrics(inputs: NormalizedInputs) -> Metrics:
    """Compute both indices for one set of normalized inputs."""
    metrics = Metrics(
        bmi=float(compute_bmi(inputs.weight_kg, inputs.height_cm)),
        bri=float(compute_bri(inputs.waist_cm, inputs.height_cm)),
    )
    if not metrics.is_defined():
        logger.debug("Metrics undefined for %s", inputs)
    return metrics
