from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import logging
import sys
import os

logger = logging.getLogger(__name__)

ORG_ID = "bodycomposition"
APP_ID = "bmi-bri-calculator"
ORG_DOMAIN = "bodycomposition.local"

VISIBLE_APP_NAME = "BMI + BRI Calculator"


def create_app() -> QApplication:
    """
    Create and configure the QApplication instance.

    An already running instance is reused, so the form can also be embedded
    in a host application or built in tests.
    """
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    logger.debug("Qt application ready (%s).", QSettings().fileName())

    return app
