from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import QPlainTextEdit, QSplitter, QVBoxLayout, QWidget

from mathcanvas.app.state import ViewerStore
from mathcanvas.app.ui.canvas import CurveCanvas
from mathcanvas.app.ui.toolbar import OverlayToolbar


class WorkArea(QWidget):
    """The main work area with a splitter between the formula editor and the canvas."""
    def __init__(self, store: ViewerStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        v = QVBoxLayout(self)
        v.setContentsMargins(0, 0, 0, 0)
        self.splitter = QSplitter(Qt.Orientation.Horizontal, self)
        self.splitter.setChildrenCollapsible(False)
        v.addWidget(self.splitter, 1)

        self.editor = QPlainTextEdit(self.splitter)
        self.editor.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        self.editor.setPlaceholderText(self.tr("@{ y = sin(x) ; stroke=#1f77b4 ; width=2 }"))

        render_pane = QWidget(self.splitter)
        rv = QVBoxLayout(render_pane)
        rv.setContentsMargins(0, 0, 0, 0)
        rv.setSpacing(0)
        self.toolbar = OverlayToolbar(render_pane)
        self.canvas = CurveCanvas(store, render_pane)
        rv.addWidget(self.toolbar, 0)
        rv.addWidget(self.canvas, 1)

        self.splitter.addWidget(self.editor)
        self.splitter.addWidget(render_pane)
        self.splitter.setStretchFactor(0, 0)
        self.splitter.setStretchFactor(1, 1)
