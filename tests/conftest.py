import os

import pytest

# Widgets are never shown in tests; keep Qt away from any display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole session, so widgets can be built offscreen."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def store(qapp):
    from bodycomposition.app.state import Store

    return Store()
