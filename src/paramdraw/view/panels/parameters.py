from __future__ import annotations

import logging
from typing import Hashable, Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout, QGroupBox, QFormLayout

from paramdraw.controller.param_editor import ParameterEditor
from paramdraw.view.widgets.numeric_input import ValidatedNumericInput

logger = logging.getLogger(__name__)


class ParameterPanel(QWidget):
    """Form of numeric inputs for the selected shape, or for the canvas size."""
    data_changed = Signal()

    def __init__(self, editor: ParameterEditor, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.editor = editor
        self.inputs: list[ValidatedNumericInput] = []
        self._binding: Optional[Hashable] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.box = QGroupBox(self)
        self.form = QFormLayout(self.box)
        layout.addWidget(self.box)

        self.load_from_state()

    def load_from_state(self) -> None:
        """
        Sync the form with the model. Rows are rebuilt only when the selection
        changes; otherwise values are refreshed in place so a field being typed
        into keeps its focus and text.
        """
        binding = self.editor.binding_key()
        if binding != self._binding:
            self._rebuild()
            self._binding = binding
            return
        for inp in self.inputs:
            inp.refresh()

    def end_editing(self) -> None:
        """Leave every field, e.g. when the user starts working on the canvas."""
        for inp in self.inputs:
            inp.end_edit()

    def _rebuild(self) -> None:
        while self.form.rowCount():
            self.form.removeRow(0)
        self.inputs = []

        shape = self.editor.canvas.selected_shape
        self.box.setTitle(shape.shape_type.name if shape else "Canvas")

        for field in self.editor.fields():
            inp = ValidatedNumericInput(field, self.box)
            inp.value_committed.connect(self._on_value_committed)
            self.form.addRow(f"{field.label}:", inp)
            self.inputs.append(inp)
        logger.debug(f"Parameter form rebuilt with {len(self.inputs)} fields.")

    def _on_value_committed(self, _value: float) -> None:
        self.data_changed.emit()
