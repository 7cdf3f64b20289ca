"""Tests for the Gauge Mapper"""
import math

import pytest

from bodycomposition.config import GaugeScale
from bodycomposition.model.gauge import gauge_fraction, scale_fraction


class TestBMIGauge:

    @pytest.mark.parametrize("bmi, fraction", [
        (15.0, 0.0),
        (27.5, 0.5),
        (40.0, 1.0),
        (10.0, 0.0),
        (55.0, 1.0),
    ])
    def test_fraction(self, bmi, fraction):
        assert gauge_fraction("bmi", bmi) == pytest.approx(fraction)


class TestBRIGauge:

    @pytest.mark.parametrize("bri, fraction", [
        (1.0, 0.0),
        (6.5, 0.5),
        (12.0, 1.0),
        (0.2, 0.0),
        (30.0, 1.0),
    ])
    def test_fraction(self, bri, fraction):
        assert gauge_fraction("bri", bri) == pytest.approx(fraction)


class TestGaugeEdges:

    @pytest.mark.parametrize("metric", ["bmi", "bri"])
    def test_nan_propagates(self, metric):
        assert math.isnan(gauge_fraction(metric, math.nan))

    def test_unknown_metric(self):
        with pytest.raises(KeyError):
            gauge_fraction("whr", 0.5)

    def test_custom_scale(self):
        assert scale_fraction(3.0, GaugeScale(low=2.0, high=6.0)) == pytest.approx(0.25)
