"""
Main Application Window
=======================
The primary GUI container that holds the Toolbar, the Canvas and the
Parameter panel.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the toolbar actions (Export, shape selection) and the
   widget signals to the controllers, and refreshes the views afterwards.
"""
import logging
from typing import Optional

from PySide6.QtCore import Qt, QMimeData, QByteArray
from PySide6.QtGui import QAction, QGuiApplication
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QScrollArea, QToolBar, QSizePolicy,
    QFileDialog, QMessageBox
)

from paramdraw.config import EXPORT_FILENAME, EXPORT_MIME_TYPE
from paramdraw.controller.interaction import InteractionController
from paramdraw.controller.param_editor import ParameterEditor
from paramdraw.model.io import IOManager
from paramdraw.model.shape_types import list_shape_types
from paramdraw.model.state import CanvasState
from paramdraw.view.panels.parameters import ParameterPanel
from paramdraw.view.widgets.canvas import DrawingCanvas
from paramdraw.view.widgets.shape_selector import ShapeSelector

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "ParamDraw"


class MainWindow(QMainWindow):
    def __init__(self, canvas_state: CanvasState) -> None:
        super().__init__()
        self.canvas_state: CanvasState = canvas_state
        self.shape_types = list_shape_types()

        self.controller = InteractionController(self.canvas_state)
        self.editor = ParameterEditor(self.canvas_state)

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(900, 700)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        # --- 1. CANVAS (scrolls when larger than the window) ---
        self.canvas_widget = DrawingCanvas(self.canvas_state, self.controller)
        scroll = QScrollArea()
        scroll.setWidget(self.canvas_widget)
        scroll.setAlignment(Qt.AlignmentFlag.AlignCenter)
        main_layout.addWidget(scroll, 1)

        # --- 2. PARAMETERS ---
        self.param_panel = ParameterPanel(self.editor)
        main_layout.addWidget(self.param_panel)

        # --- ACTIONS & TOOLBAR ---
        self.selector = ShapeSelector(self.shape_types)
        self._create_actions()
        self._create_toolbar()

        # --- SIGNAL CONNECTIONS ---
        self.selector.shape_type_chosen.connect(self.on_shape_type_chosen)
        self.canvas_widget.pressed.connect(self.param_panel.end_editing)
        self.canvas_widget.data_changed.connect(self.on_data_changed)
        self.param_panel.data_changed.connect(self.on_data_changed)

        self.statusBar().showMessage("Pick a shape, then click on the canvas to place it.")

    def _create_actions(self) -> None:
        self.act_export = QAction("Export", self)
        self.act_export.setShortcut("Ctrl+E")
        self.act_export.triggered.connect(self.on_export)

        self.act_copy_svg = QAction("Copy SVG", self)
        self.act_copy_svg.setShortcut("Ctrl+Shift+C")
        self.act_copy_svg.triggered.connect(self.on_copy_svg)

    def _create_toolbar(self) -> None:
        toolbar = QToolBar("Main", self)
        toolbar.setMovable(False)
        toolbar.addAction(self.act_export)
        toolbar.addAction(self.act_copy_svg)

        spacer = QWidget()
        spacer.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        toolbar.addWidget(spacer)
        toolbar.addWidget(self.selector)
        self.addToolBar(toolbar)

    # --- SLOTS ---

    def on_shape_type_chosen(self, index: int) -> None:
        self.controller.choose_shape_type(index)
        self.on_data_changed()

    def on_data_changed(self) -> None:
        """Refresh every view after the controllers touched the model."""
        self.canvas_widget.sync_size()
        self.canvas_widget.update()
        self.param_panel.load_from_state()
        self.selector.set_checked_index(self._pending_index())

    def on_export(self) -> None:
        directory = QFileDialog.getExistingDirectory(self, f"Export {EXPORT_FILENAME} to...")
        if not directory:
            return
        try:
            path = IOManager.export_svg(self.canvas_state, directory)
        except OSError as e:
            QMessageBox.critical(self, "Error", f"Could not export the drawing:\n{e}")
            return
        self.statusBar().showMessage(f"Exported to {path}", 5000)

    def on_copy_svg(self) -> None:
        markup = IOManager.build_svg(self.canvas_state)
        mime = QMimeData()
        mime.setData(EXPORT_MIME_TYPE, QByteArray(markup.encode("utf-8")))
        mime.setText(markup)
        QGuiApplication.clipboard().setMimeData(mime)
        self.statusBar().showMessage("SVG copied to clipboard.", 5000)

    def closeEvent(self, event, /) -> None:
        """Release the application-wide input listener before closing."""
        self.canvas_widget.teardown()
        event.accept()

    def _pending_index(self) -> Optional[int]:
        pending = self.controller.pending_shape_type
        if pending is None:
            return None
        return self.shape_types.index(pending)
