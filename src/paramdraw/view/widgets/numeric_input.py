from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFocusEvent, QKeyEvent
from PySide6.QtWidgets import QLineEdit, QWidget, QSizePolicy

from paramdraw.controller.param_editor import NumericField


class ValidatedNumericInput(QLineEdit):
    """
    Line edit bound to a NumericField.

    While focused it shows exactly what was typed; valid numbers are committed
    on every keystroke. On focus loss it snaps back to the committed value.
    Up/Down arrows step the value like a spin box.
    """
    value_committed = Signal(float)

    def __init__(self, field: NumericField, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.field = field
        self.setText(field.display_text)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setAlignment(Qt.AlignmentFlag.AlignRight)
        # textEdited fires for user input only, not for setText()
        self.textEdited.connect(self._on_text_edited)

    def refresh(self) -> None:
        """Show the committed value unless the user is typing in this field."""
        if not self.field.has_focus:
            self.setText(self.field.display_text)

    def end_edit(self) -> None:
        """Drop the typed text and show the committed value, as on focus loss."""
        self.field.blur()
        self.setText(self.field.display_text)

    def focusInEvent(self, event: QFocusEvent) -> None:
        self.field.focus()
        super().focusInEvent(event)

    def focusOutEvent(self, event: QFocusEvent) -> None:
        self.end_edit()
        super().focusOutEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() in (Qt.Key.Key_Up, Qt.Key.Key_Down):
            self.field.step(1 if event.key() == Qt.Key.Key_Up else -1)
            self.setText(self.field.display_text)
            self.value_committed.emit(self.field.value)
            return
        super().keyPressEvent(event)

    def _on_text_edited(self, text: str) -> None:
        if self.field.edit(text):
            self.value_committed.emit(self.field.value)
