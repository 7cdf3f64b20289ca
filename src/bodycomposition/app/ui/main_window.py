"""
Main window of the calculator: measurements on top, one card per metric
below, then the formulas and a disclaimer.
"""
from __future__ import annotations

from datetime import datetime

from PySide6.QtCore import QSettings, Slot
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFrame, QStatusBar, QToolBar,
)

from bodycomposition.app.application import VISIBLE_APP_NAME
from bodycomposition.app.state import Store
from bodycomposition.app.ui.panels.inputs import InputPanel
from bodycomposition.app.ui.panels.metric_card import MetricCard
from bodycomposition.model.readout import Evaluation


def _separator(parent: QWidget) -> QFrame:
    line = QFrame(parent)
    line.setFrameShape(QFrame.Shape.HLine)
    line.setFrameShadow(QFrame.Shadow.Sunken)
    return line


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(900, 620)

        # Global store
        self.store = store or Store()
        warning_badge = QSettings().value("ui/warning_badge", True, type=bool)

        central = QWidget(self)
        root = QVBoxLayout(central)

        intro = QLabel(self.tr(
            "Enter your weight, height and waist circumference to get both a BMI and a BRI estimate."
        ), central)
        intro.setWordWrap(True)
        root.addWidget(intro)

        self.input_panel = InputPanel(self.store, parent=central)
        root.addWidget(self.input_panel)
        root.addWidget(_separator(central))

        cards = QHBoxLayout()
        self.bmi_card = MetricCard(
            self.store,
            key="bmi",
            title=self.tr("BMI"),
            description=self.tr("Weight relative to height"),
            caption=self.tr(
                "Colours: 18.5–24.9 normal, 25.0–29.9 overweight (amber), ≥ 30 obese (red)."
            ),
            warning_badge=warning_badge,
            parent=central,
        )
        self.bri_card = MetricCard(
            self.store,
            key="bri",
            title=self.tr("BRI"),
            description=self.tr('Midsection "roundness" (waist + height)'),
            caption=self.tr(
                "BRI is a continuous index (usually about 1–10). The larger it is, the rounder the midsection."
            ),
            warning_badge=warning_badge,
            parent=central,
        )
        cards.addWidget(self.bmi_card)
        cards.addWidget(self.bri_card)
        root.addLayout(cards)
        root.addWidget(_separator(central))

        formulas = QLabel(self.tr(
            "<b>Formulas</b>"
            "<ul>"
            "<li><b>BMI</b> = weight / (height_m)²</li>"
            "<li><b>BRI</b> = 364.2 − 365.5 × √(1 − ((waist / height) / π)²)</li>"
            "</ul>"
            "Note: these are population-level measures and do not replace a clinical assessment."
        ), central)
        formulas.setWordWrap(True)
        root.addWidget(formulas)
        root.addStretch(1)

        self.setCentralWidget(central)

        # ---- Toolbar + status bar ----
        toolbar = QToolBar(self.tr("Main"), self)
        toolbar.setMovable(False)
        self.addToolBar(toolbar)
        act_reset = QAction(self.tr("Reset"), self)
        act_reset.triggered.connect(self.store.reset)
        toolbar.addAction(act_reset)

        self.setStatusBar(QStatusBar(self))
        self.store.evaluation_changed.connect(self._on_evaluation_changed)

    @Slot(object)
    def _on_evaluation_changed(self, evaluation: Evaluation) -> None:
        self.statusBar().showMessage(
            self.tr("Updated {time}: BMI {bmi}, BRI {bri}").format(
                time=datetime.now().strftime('%H:%M:%S'),
                bmi=evaluation.bmi.text,
                bri=evaluation.bri.text,
            )
        )
