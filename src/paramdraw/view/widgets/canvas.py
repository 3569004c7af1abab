from __future__ import annotations

import math
from typing import TYPE_CHECKING

from PySide6.QtCore import Qt, Signal, QPointF
from PySide6.QtGui import QPainter, QPainterPath, QPen, QColor, QPolygonF, QMouseEvent, QPaintEvent
from PySide6.QtWidgets import QWidget

from paramdraw.config import STROKE_WIDTH, SELECTED_COLOR, UNSELECTED_COLOR
from paramdraw.controller.interaction import InteractionController, InteractionMode, PointerEvent
from paramdraw.model.geometry import hit_test, shape_outlines
from paramdraw.model.state import CanvasState
from paramdraw.view.widgets.release_filter import ApplicationReleaseSource

# QWIDGETSIZE_MAX, the largest size a widget accepts
MAX_WIDGET_SIZE = 16777215

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt


def polyline_to_path(points: npt.NDArray[np.float64]) -> QPainterPath:
    path = QPainterPath()
    path.addPolygon(QPolygonF([QPointF(float(x), float(y)) for x, y in points]))
    return path


class DrawingCanvas(QWidget):
    """
    The drawing surface: paints the canvas at its physical size and forwards
    mouse input to the interaction controller.
    """
    pressed = Signal()
    data_changed = Signal()

    def __init__(self, canvas: CanvasState, controller: InteractionController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.canvas = canvas
        self.controller = controller

        self.release_source = ApplicationReleaseSource(parent=self)
        self.controller.mount(self.release_source)

        self.setCursor(Qt.CursorShape.CrossCursor)
        # Clicking the canvas takes focus away from a parameter field
        self.setFocusPolicy(Qt.FocusPolicy.ClickFocus)
        self.sync_size()

    def sync_size(self) -> None:
        """Match the widget size to the canvas size in pixels."""
        dpi = self.controller.dpi
        width = min(math.ceil(self.canvas.width * dpi), MAX_WIDGET_SIZE)
        height = min(math.ceil(self.canvas.height * dpi), MAX_WIDGET_SIZE)
        self.setFixedSize(width, height)

    def teardown(self) -> None:
        self.controller.unmount()

    # ---- input ----

    def mousePressEvent(self, event: QMouseEvent) -> None:
        self.setFocus(Qt.FocusReason.MouseFocusReason)
        self.pressed.emit()
        pos = event.position()
        primary = event.button() == Qt.MouseButton.LeftButton
        dpi = self.controller.dpi
        target = hit_test(self.canvas, pos.x() / dpi, pos.y() / dpi) if primary else None
        self.controller.on_pointer_press(PointerEvent(pos.x(), pos.y(), target, primary=primary))
        self.data_changed.emit()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if self.controller.mode != InteractionMode.DRAGGING:
            return
        pos = event.position()
        self.controller.on_pointer_move(PointerEvent(pos.x(), pos.y()))
        self.data_changed.emit()

    # ---- painting ----

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), Qt.GlobalColor.white)

        dpi = self.controller.dpi
        painter.scale(dpi, dpi)
        painter.setBrush(Qt.BrushStyle.NoBrush)

        for i, shape in enumerate(self.canvas.shapes):
            color = SELECTED_COLOR if i == self.canvas.selected_index else UNSELECTED_COLOR
            pen = QPen(QColor(color))
            pen.setWidthF(STROKE_WIDTH)
            painter.setPen(pen)
            for outline in shape_outlines(shape):
                painter.drawPath(polyline_to_path(outline))

        painter.end()
