"""
Application factory.

Sets the identity QSettings uses to locate the settings file (window geometry
and grid visibility are the only persisted values) and returns the single
QApplication of the process.
"""
import os
import sys
from typing import Optional, Sequence

from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtWidgets import QApplication

ORG_ID = "mathcanvas"
APP_ID = "viewer"
ORG_DOMAIN = "mathcanvas.local"

VISIBLE_APP_NAME = "2-D Math Visualizer"


def create_app(argv: Optional[Sequence[str]] = None) -> QApplication:
    """Return the existing QApplication or create a configured one."""
    for key in ("QT_ENABLE_HIGHDPI_SCALING", "QT_AUTO_SCREEN_SCALE_FACTOR"):
        os.environ.setdefault(key, "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance()
    if app is None:
        app = QApplication(list(argv) if argv is not None else sys.argv)
    app.setApplicationDisplayName(QCoreApplication.translate("App", VISIBLE_APP_NAME))
    return app
