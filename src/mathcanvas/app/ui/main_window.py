"""
Main window: wires the formula editor, the overlay toolbar and the canvas to
one `ViewerStore`.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QSettings, Slot
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QFileDialog, QMainWindow

from mathcanvas.app.application import VISIBLE_APP_NAME
from mathcanvas.app.state import ViewerStore
from mathcanvas.app.ui.workarea import WorkArea

logger = logging.getLogger(__name__)

SAMPLE_DOCUMENT = """\
Sine wave:
@{ y = sin(x) ; stroke=#1f77b4 ; width=2 }

Lissajous curve:
@{ x(t) = 3 cos(3t) | y(t) = 3 sin(2t) ; stroke=#d62728 ; width=1.5 }

Triangle:
@{ poly(1,1, 4,1, 2.5,3.5) ; stroke=#2ca02c ; width=2 ; fill=#2ca02c ; alpha=0.4 }
"""


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 900)

        self._settings = QSettings()

        # Per-window store
        self.store = ViewerStore()

        self.work_area = WorkArea(self.store, self)
        self.setCentralWidget(self.work_area)

        toolbar = self.work_area.toolbar
        editor = self.work_area.editor

        toolbar.zoom_requested.connect(self.store.set_zoom)
        toolbar.grid_toggled.connect(self.store.set_grid_visible)
        toolbar.reset_requested.connect(self.store.reset)
        toolbar.export_requested.connect(self.on_export)

        self.store.zoom_changed.connect(toolbar.set_zoom)
        self.store.error_text_changed.connect(toolbar.set_error_text)

        editor.textChanged.connect(lambda: self.store.set_text(editor.toPlainText()))

        self._restore_settings()
        editor.setPlainText(SAMPLE_DOCUMENT)

    # ---------- Export ----------

    @Slot()
    def on_export(self) -> None:
        path, _ = QFileDialog.getSaveFileName(
            self,
            self.tr("Export PNG"),
            "visualizer.png",
            self.tr("PNG image (*.png);;All Files (*)"),
        )
        if not path:
            return

        # The toolbar is not part of the exported picture
        toolbar = self.work_area.toolbar
        toolbar.hide()
        try:
            pixmap = self.work_area.grab()
        finally:
            toolbar.show()

        if pixmap.save(path, "PNG"):
            logger.info(f"Exported view to: {path}")
        else:
            logger.error(f"Failed to export view to: {path}")

    # ---------- Settings ----------

    def _restore_settings(self) -> None:
        geometry = self._settings.value("win/geo")
        if geometry is not None:
            self.restoreGeometry(geometry)
        grid_visible = self._settings.value("view/grid", True, type=bool)
        self.work_area.toolbar.grid_toggle.setChecked(grid_visible)
        self.store.set_grid_visible(grid_visible)

    def closeEvent(self, event: QCloseEvent) -> None:
        self._settings.setValue("win/geo", self.saveGeometry())
        self._settings.setValue("view/grid", self.store.context.grid_visible)
        super().closeEvent(event)
