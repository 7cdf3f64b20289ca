from __future__ import annotations

from PySide6.QtCore import Qt, QCoreApplication
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QLabel, QProgressBar,
)

from bodycomposition.app.state import Store
from bodycomposition.app.ui.panels.base import BasePanel
from bodycomposition.model.categories import Tone
from bodycomposition.model.readout import Evaluation, MetricReadout

GAUGE_RESOLUTION = 1000

TONE_STYLES: dict[Tone, str] = {
    Tone.DEFAULT: "background-color: #18181b; color: white;",
    Tone.SECONDARY: "background-color: #e4e4e7; color: #18181b;",
    Tone.WARNING: "background-color: #f59e0b; color: #18181b;",
    Tone.DESTRUCTIVE: "background-color: #dc2626; color: white;",
}

BADGE_STYLE = "border-radius: 8px; padding: 2px 8px; font-weight: 600; {tone}"


class MetricCard(BasePanel):
    """
    Result card of one metric.

    Top: title, short description and a category badge.
    Below: the rounded value with the category's range hint, a gauge bar and a caption.
    """
    def __init__(
        self,
        store: Store,
        key: str,
        title: str,
        description: str,
        caption: str,
        warning_badge: bool = True,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(store, parent)
        self.key = key
        self.warning_badge = warning_badge

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        box = QGroupBox(title, self)
        root.addWidget(box)
        layout = QVBoxLayout(box)

        header = QHBoxLayout()
        self.description = QLabel(description, box)
        self.description.setWordWrap(True)
        header.addWidget(self.description, 1)
        self.badge = QLabel(box)
        self.badge.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header.addWidget(self.badge, 0, Qt.AlignmentFlag.AlignTop)
        layout.addLayout(header)

        value_row = QHBoxLayout()
        self.value_label = QLabel(box)
        font = QFont(self.value_label.font())
        if font.pointSizeF() > 0:
            font.setPointSizeF(font.pointSizeF() * 2.2)
        font.setBold(True)
        self.value_label.setFont(font)
        value_row.addWidget(self.value_label, 1, Qt.AlignmentFlag.AlignBottom)
        self.hint_label = QLabel(box)
        value_row.addWidget(self.hint_label, 0, Qt.AlignmentFlag.AlignBottom)
        layout.addLayout(value_row)

        self.gauge = QProgressBar(box)
        self.gauge.setRange(0, GAUGE_RESOLUTION)
        self.gauge.setTextVisible(False)
        self.gauge.setFixedHeight(8)
        layout.addWidget(self.gauge)

        self.caption = QLabel(caption, box)
        self.caption.setWordWrap(True)
        self.caption.setStyleSheet("color: palette(mid); font-size: 11px;")
        layout.addWidget(self.caption)

        self.refresh(store.evaluation)

    def _readout(self, evaluation: Evaluation) -> MetricReadout:
        return getattr(evaluation, self.key)

    def refresh(self, evaluation: Evaluation) -> None:
        readout = self._readout(evaluation)
        category = readout.category

        self.value_label.setText(readout.text)
        self.hint_label.setText(category.hint)
        self.badge.setText(QCoreApplication.translate("Categories", category.label))
        tone = category.tone if self.warning_badge else category.tone.badge_variant()
        self.badge.setStyleSheet(BADGE_STYLE.format(tone=TONE_STYLES[tone]))

        if readout.has_gauge:
            self.gauge.setValue(round(readout.gauge * GAUGE_RESOLUTION))
        else:
            self.gauge.reset()
