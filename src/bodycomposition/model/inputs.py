"""
Form Inputs (Normalizer)
========================
Value types for the three measurements and the clamping into their domains.

Classes:
    RawInputs: Values as entered in the form.
    NormalizedInputs: The same values, guaranteed to lie within their domains.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Optional

from bodycomposition.config import WEIGHT_DOMAIN, HEIGHT_DOMAIN, WAIST_DOMAIN, DEFAULT_INPUTS, InputDomain
from bodycomposition.utils import clamp

logger = logging.getLogger(__name__)


# Field name -> domain. Order matches the form layout.
DOMAINS: dict[str, InputDomain] = {
    "weight_kg": WEIGHT_DOMAIN,
    "height_cm": HEIGHT_DOMAIN,
    "waist_cm": WAIST_DOMAIN,
}


@dataclass(frozen=True)
class RawInputs:
    weight_kg: float = DEFAULT_INPUTS["weight_kg"]
    height_cm: float = DEFAULT_INPUTS["height_cm"]
    waist_cm: float = DEFAULT_INPUTS["waist_cm"]

    def with_field(self, name: str, value: float) -> RawInputs:
        """Return a copy with one measurement replaced."""
        if name not in DOMAINS:
            raise ValueError(f"Unknown input field '{name}'.")
        return replace(self, **{name: float(value)})


@dataclass(frozen=True)
class NormalizedInputs:
    weight_kg: float
    height_cm: float
    waist_cm: float


def clamp_field(name: str, value: float) -> float:
    """Clamp a single measurement into its domain."""
    domain = DOMAINS[name]
    return clamp(float(value), domain.minimum, domain.maximum)


def normalize(raw: RawInputs | NormalizedInputs) -> NormalizedInputs:
    """
    Clamp every measurement into its domain.

    Non-finite values are pulled toward the nearest bound (NaN to the lower
    one), so the result is always finite. Normalizing an already normalized
    value is a no-op.
    """
    values = {f.name: clamp_field(f.name, getattr(raw, f.name)) for f in fields(NormalizedInputs)}
    return NormalizedInputs(**values)


def coerce_entry(text: Optional[str]) -> float:
    """
    Turn the text of a number field into a float.

    Empty or unparsable entries become 0.0 (which the normalizer then lifts to
    the domain floor). A decimal comma is accepted.
    """
    if text is None:
        return 0.0
    cleaned = text.strip().replace(",", ".")
    if not cleaned:
        return 0.0
    try:
        return float(cleaned)
    except ValueError:
        logger.debug("Unparsable entry %r coerced to 0.", text)
        return 0.0
