from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QWidget

from bodycomposition.app.state import Store
from bodycomposition.model.readout import Evaluation


class BasePanel(QWidget):
    """
    Base class for the form panels. Holds a reference to the store and
    re-renders on every evaluation change.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.store.evaluation_changed.connect(self._on_evaluation_changed)

    @Slot(object)
    def _on_evaluation_changed(self, evaluation: Evaluation) -> None:
        self.refresh(evaluation)

    # ---- abstract API for subclasses ----
    def refresh(self, evaluation: Evaluation) -> None:
        """Update the widgets from the current evaluation."""
        raise NotImplementedError("`refresh` must be implemented in subclass.")
