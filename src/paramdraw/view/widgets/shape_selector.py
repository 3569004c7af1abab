from __future__ import annotations

import os
from typing import Optional

from PySide6.QtCore import Qt, Signal, QSize
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QWidget, QHBoxLayout, QToolButton, QButtonGroup

from paramdraw.config import ICONS_PATH
from paramdraw.model.shape_types import ShapeTypeDefinition


class ShapeSelector(QWidget):
    """Row of checkable icon buttons, one per registered shape type."""
    shape_type_chosen = Signal(int)

    def __init__(self, shape_types: list[ShapeTypeDefinition], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.group = QButtonGroup(self)
        self.group.setExclusive(True)

        for i, shape_type in enumerate(shape_types):
            btn = QToolButton(self)
            btn.setCheckable(True)
            btn.setText(shape_type.name)
            btn.setToolTip(shape_type.name)
            btn.setIcon(QIcon(os.path.join(ICONS_PATH, shape_type.icon_ref)))
            btn.setIconSize(QSize(32, 32))
            btn.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonIconOnly)
            self.group.addButton(btn, i)
            layout.addWidget(btn)

        self.group.idClicked.connect(self.shape_type_chosen)

    def set_checked_index(self, index: Optional[int]) -> None:
        """Reflect the pending shape type; None clears every button."""
        if index is None:
            # An exclusive group refuses to uncheck its last button
            self.group.setExclusive(False)
            for btn in self.group.buttons():
                btn.setChecked(False)
            self.group.setExclusive(True)
        else:
            self.group.button(index).setChecked(True)

    def checked_index(self) -> Optional[int]:
        idx = self.group.checkedId()
        return None if idx == -1 else idx
