"""
Application Initialization
==========================
Run with: python -m bodycomposition

It acts as the "Dependency Injection" root:
1. Sets up logging.
2. Creates the Qt application.
3. Instantiates the Store (the three measurements).
4. Passes the Store into the Main Window and starts the event loop.
"""
from __future__ import annotations

import logging
import sys

from bodycomposition.app.application import create_app
from bodycomposition.app.state import Store
from bodycomposition.app.ui.main_window import MainWindow
from bodycomposition.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the application."""
    setup_logging()
    app = create_app()

    store = Store()
    logger.info("Starting with %s", store.inputs)

    win = MainWindow(store)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
