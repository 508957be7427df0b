# Rev 0.1.0
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

log = logging.getLogger(__name__)

DEFAULT_DISPLAY_MS = 5000


class NotificationCenter(QObject):
    """Single transient message slot; a new message replaces the old one and restarts the timer."""
    messageChanged = Signal(str)  # "" once dismissed

    def __init__(self, display_ms: int = DEFAULT_DISPLAY_MS, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._message: Optional[str] = None
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(display_ms)
        self._timer.timeout.connect(self.dismiss)

    @property
    def message(self) -> Optional[str]:
        return self._message

    def show(self, message: str) -> None:
        log.info("notify: %s", message)
        self._message = message
        self._timer.start()
        self.messageChanged.emit(message)

    def dismiss(self) -> None:
        self._timer.stop()
        if self._message is None:
            return
        self._message = None
        self.messageChanged.emit("")
