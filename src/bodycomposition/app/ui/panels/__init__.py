"""Form panels: the measurement inputs and the per-metric result cards."""
from bodycomposition.app.ui.panels.inputs import InputPanel
from bodycomposition.app.ui.panels.metric_card import MetricCard

__all__ = ["InputPanel", "MetricCard"]
