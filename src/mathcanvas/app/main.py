"""
GUI entry point (`mathcanvas` script, `python -m mathcanvas`).

The log level can be raised for a session with the MATHCANVAS_LOG_LEVEL
environment variable, e.g. MATHCANVAS_LOG_LEVEL=DEBUG shows every validation
error reported by the frame renderer.
"""
from __future__ import annotations

import os
import sys

from mathcanvas.app.application import create_app
from mathcanvas.app.ui.main_window import MainWindow
from mathcanvas.logging_config import setup_logging

LOG_LEVEL_ENV = "MATHCANVAS_LOG_LEVEL"


def main() -> int:
    setup_logging(level=os.environ.get(LOG_LEVEL_ENV, "INFO"))
    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
