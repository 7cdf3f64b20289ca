"""
Configuration & Constants
=========================
This module serves as the central registry for input domains, display scales
and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (40 kg, 220 cm, ...) scattered
   throughout the model and the UI. The form widgets and the normalizer read
   the very same bounds.
2. Environment: Logging can be tuned without touching code through the
   BODYCOMPOSITION_LOG_LEVEL and BODYCOMPOSITION_LOG_FILE variables.

Exports:
    WEIGHT_DOMAIN, HEIGHT_DOMAIN, WAIST_DOMAIN (InputDomain): Input bounds.
    DEFAULT_INPUTS (dict): Initial form values.
    GAUGE_SCALES (dict): Display scale of each metric's gauge bar.
    DISPLAY_DECIMALS (dict): Rounding of each metric for display.
    LOG_LEVEL (int), LOG_FILE (str | None): Logging setup from the environment.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class InputDomain:
    """Valid range of one measurement, as offered by the form."""
    minimum: float
    maximum: float
    step: float
    unit: str

    def caption(self) -> str:
        return f"{self.minimum:g}–{self.maximum:g} {self.unit}"


@dataclass(frozen=True)
class GaugeScale:
    """Metric values mapped to an empty (low) and a full (high) gauge bar."""
    low: float
    high: float


# Input domains
WEIGHT_DOMAIN = InputDomain(minimum=40.0, maximum=200.0, step=0.1, unit="kg")
HEIGHT_DOMAIN = InputDomain(minimum=140.0, maximum=220.0, step=0.1, unit="cm")
WAIST_DOMAIN = InputDomain(minimum=50.0, maximum=150.0, step=0.1, unit="cm")

DEFAULT_INPUTS: dict[str, float] = {
    "weight_kg": 75.0,
    "height_cm": 175.0,
    "waist_cm": 85.0,
}

# Display
GAUGE_SCALES: dict[str, GaugeScale] = {
    "bmi": GaugeScale(low=15.0, high=40.0),
    "bri": GaugeScale(low=1.0, high=12.0),
}

DISPLAY_DECIMALS: dict[str, int] = {
    "bmi": 1,
    "bri": 2,
}

PLACEHOLDER_TEXT = "–"


# Logging, overridable from the environment
def _env_log_level(default: int = logging.INFO) -> int:
    name = os.environ.get("BODYCOMPOSITION_LOG_LEVEL", "").strip().upper()
    level = logging.getLevelName(name) if name else default
    # getLevelName returns "Level <name>" for unknown names
    return level if isinstance(level, int) else default


LOG_LEVEL: int = _env_log_level()
LOG_FILE: Optional[str] = os.environ.get("BODYCOMPOSITION_LOG_FILE") or None
