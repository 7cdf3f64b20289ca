"""
Readout
=======
Runs the whole pipeline for one set of form values and packs the results in
the shape the UI displays them:

    RawInputs -> normalize -> compute_metrics -> {classify, gauge_fraction}

Nothing is cached. Every call recomputes from scratch and yields the same
result for the same inputs.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from bodycomposition.config import DISPLAY_DECIMALS, PLACEHOLDER_TEXT
from bodycomposition.model.categories import Category, classify
from bodycomposition.model.gauge import gauge_fraction
from bodycomposition.model.inputs import RawInputs, NormalizedInputs, normalize
from bodycomposition.model.metrics import Metrics, compute_metrics
from bodycomposition.utils import round_half_away


@dataclass(frozen=True)
class MetricReadout:
    """Everything the UI shows for one metric."""
    key: str
    value: float
    category: Category
    gauge: float

    @property
    def rounded(self) -> float:
        return round_half_away(self.value, DISPLAY_DECIMALS[self.key])

    @property
    def text(self) -> str:
        if not math.isfinite(self.value):
            return PLACEHOLDER_TEXT
        return f"{self.rounded:.{DISPLAY_DECIMALS[self.key]}f}"

    @property
    def has_gauge(self) -> bool:
        return not math.isnan(self.gauge)


@dataclass(frozen=True)
class Evaluation:
    inputs: NormalizedInputs
    metrics: Metrics
    bmi: MetricReadout
    bri: MetricReadout


def read_metric(key: str, value: float) -> MetricReadout:
    return MetricReadout(
        key=key,
        value=value,
        category=classify(key, value),
        gauge=gauge_fraction(key, value),
    )


def evaluate(raw: RawInputs) -> Evaluation:
    """Normalize the inputs and derive both metric readouts."""
    inputs = normalize(raw)
    metrics = compute_metrics(inputs)
    return Evaluation(
        inputs=inputs,
        metrics=metrics,
        bmi=read_metric("bmi", metrics.bmi),
        bri=read_metric("bri", metrics.bri),
    )
