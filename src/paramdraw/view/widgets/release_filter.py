"""
Application-wide pointer release listener.

A drag that starts on the canvas must end even if the button is released
over another widget or outside the window, so releases are observed with an
event filter on the QApplication rather than on the canvas itself.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QEvent, Qt, QCoreApplication

from paramdraw.controller.interaction import ReleaseCallback

logger = logging.getLogger(__name__)


class ApplicationReleaseSource(QObject):
    """Installs one application event filter while it has listeners."""

    def __init__(self, app: Optional[QCoreApplication] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._app = app or QCoreApplication.instance()
        self._listeners: list[ReleaseCallback] = []
        self._installed = False

    def add_release_listener(self, callback: ReleaseCallback) -> None:
        self._listeners.append(callback)
        if not self._installed:
            self._app.installEventFilter(self)
            self._installed = True
            logger.debug("Application release filter installed.")

    def remove_release_listener(self, callback: ReleaseCallback) -> None:
        self._listeners.remove(callback)
        if not self._listeners and self._installed:
            self._app.removeEventFilter(self)
            self._installed = False
            logger.debug("Application release filter removed.")

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.MouseButtonRelease and event.button() == Qt.MouseButton.LeftButton:
            for callback in list(self._listeners):
                callback()
        # Never consume the event, other widgets still need it
        return False
