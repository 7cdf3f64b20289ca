from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import Qt, QSignalBlocker, QT_TRANSLATE_NOOP, QCoreApplication
from PySide6.QtWidgets import (
    QWidget, QGridLayout, QGroupBox, QLabel, QLineEdit, QSlider, QSizePolicy, QVBoxLayout,
)

from bodycomposition.app.state import Store
from bodycomposition.app.ui.panels.base import BasePanel
from bodycomposition.config import InputDomain
from bodycomposition.model.inputs import DOMAINS
from bodycomposition.model.readout import Evaluation

FIELD_LABELS = {
    "weight_kg": QT_TRANSLATE_NOOP("Inputs", "Weight (kg)"),
    "height_cm": QT_TRANSLATE_NOOP("Inputs", "Height (cm)"),
    "waist_cm": QT_TRANSLATE_NOOP("Inputs", "Waist (cm)"),
}


@dataclass
class FieldRow:
    """Widgets of one measurement: a number entry and a slider kept in sync."""
    name: str
    domain: InputDomain
    entry: QLineEdit
    slider: QSlider

    @property
    def ticks_per_unit(self) -> int:
        # QSlider is integer-only
        return round(1.0 / self.domain.step)

    def to_ticks(self, value: float) -> int:
        return round(value * self.ticks_per_unit)

    def from_ticks(self, ticks: int) -> float:
        return ticks / self.ticks_per_unit

    def show(self, value: float) -> None:
        with QSignalBlocker(self.slider):
            self.slider.setValue(self.to_ticks(value))
        if not self.entry.hasFocus():
            self.entry.setText(f"{value:g}")


class InputPanel(BasePanel):
    """
    Panel with the three measurements.

    Each row: label, number entry, slider and the allowed range. Text entries
    go through the store's coercion (empty or invalid -> domain floor); slider
    moves are applied directly.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        box = QGroupBox(self.tr("Measurements"), self)
        root.addWidget(box)

        self.grid = QGridLayout(box)
        self.grid.setVerticalSpacing(8)
        self.rows: dict[str, FieldRow] = {}
        for column, (name, domain) in enumerate(DOMAINS.items()):
            self.rows[name] = self._add_field(column, name, domain)

        self._show_inputs()

    def _add_field(self, column: int, name: str, domain: InputDomain) -> FieldRow:
        label = QLabel(QCoreApplication.translate("Inputs", FIELD_LABELS[name]), self)
        self.grid.addWidget(label, 0, column)

        entry = QLineEdit(self)
        entry.setObjectName(name)
        entry.setAccessibleName(label.text())
        # No validator: empty, invalid and out-of-range text is coerced and clamped by the store
        entry.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.grid.addWidget(entry, 1, column)

        slider = QSlider(Qt.Orientation.Horizontal, self)
        slider.setAccessibleName(label.text())
        self.grid.addWidget(slider, 2, column)

        caption = QLabel(domain.caption(), self)
        caption.setStyleSheet("color: palette(mid); font-size: 11px;")
        self.grid.addWidget(caption, 3, column)

        row = FieldRow(name=name, domain=domain, entry=entry, slider=slider)
        slider.setRange(row.to_ticks(domain.minimum), row.to_ticks(domain.maximum))
        slider.setSingleStep(1)
        slider.setPageStep(row.ticks_per_unit)

        entry.editingFinished.connect(lambda r=row: self._on_entry_finished(r))
        slider.valueChanged.connect(lambda ticks, r=row: self._on_slider_moved(r, ticks))
        return row

    def _on_entry_finished(self, row: FieldRow) -> None:
        self.store.set_entry(row.name, row.entry.text())
        # Show the clamped value even if the store did not change
        row.entry.setText(f"{getattr(self.store.inputs, row.name):g}")

    def _on_slider_moved(self, row: FieldRow, ticks: int) -> None:
        self.store.set_field(row.name, row.from_ticks(ticks))

    def _show_inputs(self) -> None:
        inputs = self.store.inputs
        for name, row in self.rows.items():
            row.show(getattr(inputs, name))

    def refresh(self, evaluation: Evaluation) -> None:
        self._show_inputs()
