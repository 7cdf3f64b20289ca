from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from bodycomposition.model.inputs import RawInputs, DOMAINS, clamp_field, coerce_entry
from bodycomposition.model.readout import Evaluation, evaluate

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Central state store of the form with signals for panel/card sync.

    The three raw measurements are the only state. Values are clamped into
    their domain on entry; everything else is recomputed from them.
    """
    inputs_changed = Signal(object)
    evaluation_changed = Signal(object)

    def __init__(self, inputs: RawInputs | None = None) -> None:
        super().__init__()
        self._inputs = inputs or RawInputs()
        self._evaluation = evaluate(self._inputs)

    @property
    def inputs(self) -> RawInputs:
        return self._inputs

    @property
    def evaluation(self) -> Evaluation:
        return self._evaluation

    def set_field(self, name: str, value: float) -> None:
        if name not in DOMAINS:
            raise ValueError(f"Unknown input field '{name}'.")
        new_inputs = self._inputs.with_field(name, clamp_field(name, value))
        self._apply(new_inputs)

    def set_entry(self, name: str, text: str) -> None:
        """Set a field from the text of a number entry (empty/invalid -> 0 -> domain floor)."""
        self.set_field(name, coerce_entry(text))

    def set_weight(self, weight_kg: float) -> None:
        self.set_field("weight_kg", weight_kg)

    def set_height(self, height_cm: float) -> None:
        self.set_field("height_cm", height_cm)

    def set_waist(self, waist_cm: float) -> None:
        self.set_field("waist_cm", waist_cm)

    def reset(self) -> None:
        self._apply(RawInputs())

    def _apply(self, new_inputs: RawInputs) -> None:
        if new_inputs == self._inputs:
            return
        self._inputs = new_inputs
        self._evaluation = evaluate(new_inputs)
        logger.debug(
            "Inputs %s -> BMI %s (%s), BRI %s (%s)",
            new_inputs,
            self._evaluation.bmi.text, self._evaluation.bmi.category.label,
            self._evaluation.bri.text, self._evaluation.bri.category.label,
        )
        self.inputs_changed.emit(self._inputs)
        self.evaluation_changed.emit(self._evaluation)
