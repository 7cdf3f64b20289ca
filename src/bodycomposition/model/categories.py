"""Category tables for BMI and BRI (Classifier)."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class Tone(StrEnum):
    """Severity of a category, ordered from neutral to alarming. Not a style."""
    DEFAULT = "default"
    SECONDARY = "secondary"
    WARNING = "warning"
    DESTRUCTIVE = "destructive"

    @property
    def severity(self) -> int:
        return list(Tone).index(self)

    # str ordering would be alphabetical; compare by severity instead
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Tone):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Tone):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Tone):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Tone):
            return NotImplemented
        return self.severity >= other.severity

    def badge_variant(self) -> Tone:
        """
        Closest tone for badge sets without a warning look.

        Toolkits whose badges only know default/secondary/destructive draw
        warnings as secondary.
        """
        if self is Tone.WARNING:
            return Tone.SECONDARY
        return self


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Category:
    label: str
    tone: Tone
    hint: str

    @property
    def is_placeholder(self) -> bool:
        return self == PLACEHOLDER


@dataclass(frozen=True)
class Bucket:
    """
    One row of a category table.

    `upper` is the exclusive upper bound; None marks the open-ended top bucket.
    """
    upper: float | None
    category: Category


PLACEHOLDER = Category(label="–", tone=Tone.SECONDARY, hint="")

BMI_BUCKETS: tuple[Bucket, ...] = (
    Bucket(18.5, Category("underweight", Tone.SECONDARY, "BMI < 18.5")),
    Bucket(25.0, Category("normal", Tone.DEFAULT, "18.5–24.9")),
    Bucket(30.0, Category("overweight", Tone.WARNING, "25.0–29.9")),
    Bucket(None, Category("obese", Tone.DESTRUCTIVE, "≥ 30")),
)

# BRI is a continuous index; its buckets are practical heuristics based on
# published typical ranges.
BRI_BUCKETS: tuple[Bucket, ...] = (
    Bucket(3.0, Category("very lean midsection", Tone.DEFAULT, "BRI < 3")),
    Bucket(5.0, Category("average", Tone.DEFAULT, "3–4.9")),
    Bucket(6.9, Category("elevated", Tone.WARNING, "5.0–6.8")),
    Bucket(12.0, Category("high", Tone.DESTRUCTIVE, "≥ 6.9")),
    Bucket(None, Category("very high", Tone.DESTRUCTIVE, "> 12")),
)

TABLES: dict[str, tuple[Bucket, ...]] = {
    "bmi": BMI_BUCKETS,
    "bri": BRI_BUCKETS,
}


def classify_value(value: float, buckets: tuple[Bucket, ...]) -> Category:
    """Return the first bucket whose upper bound lies above the value."""
    if not math.isfinite(value):
        return PLACEHOLDER
    for bucket in buckets:
        if bucket.upper is None or value < bucket.upper:
            return bucket.category
    # Tables always end with an open bucket
    raise ValueError("Category table has no open-ended top bucket.")


def classify_bmi(bmi: float) -> Category:
    return classify_value(bmi, BMI_BUCKETS)


def classify_bri(bri: float) -> Category:
    return classify_value(bri, BRI_BUCKETS)


def classify(metric: str, value: float) -> Category:
    """Classify by metric key ("bmi" or "bri")."""
    return classify_value(value, TABLES[metric])
