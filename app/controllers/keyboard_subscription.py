from __future__ import annotations

import logging
from typing import Callable

from PyQt6.QtCore import QEvent, QObject
from PyQt6.QtGui import QKeyEvent, QKeySequence
from PyQt6.QtWidgets import QApplication, QWidget

logger = logging.getLogger(__name__)


def key_name(event: QKeyEvent) -> str:
    """Portable text for the pressed key, e.g. 'Right', 'Left', 'PgDown'."""
    return QKeySequence(event.key()).toString()


class KeyboardSubscription(QObject):
    """Application-level key listener scoped to one window's lifetime.

    `activate()` installs the filter on the QApplication, `deactivate()`
    removes it. Both are idempotent. Only key presses aimed at `window` (or
    one of its descendants) are forwarded, so several mounted windows do not
    see each other's keys. A key is consumed when `on_key` returns True.
    """

    def __init__(self, window: QWidget, on_key: Callable[[str], bool]) -> None:
        super().__init__(window)
        self._window = window
        self._on_key = on_key
        self._app: QApplication | None = None

    @property
    def is_active(self) -> bool:
        return self._app is not None

    def activate(self) -> None:
        if self._app is not None:
            return
        app = QApplication.instance()
        if app is None:
            raise RuntimeError("KeyboardSubscription.activate() requires a QApplication")
        app.installEventFilter(self)
        self._app = app
        logger.debug("Keyboard subscription activated for %s", self._window.objectName())

    def deactivate(self) -> None:
        app, self._app = self._app, None
        if app is None:
            return
        try:
            app.removeEventFilter(self)
        except RuntimeError:
            # Application already torn down.
            pass
        logger.debug("Keyboard subscription released")

    def __enter__(self) -> KeyboardSubscription:
        self.activate()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.deactivate()

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if event.type() != QEvent.Type.KeyPress:
            return False
        if not self._targets_window(obj):
            return False
        try:
            return bool(self._on_key(key_name(event)))  # type: ignore[arg-type]
        except Exception:
            logger.exception("Key handler failed")
            return False

    def _targets_window(self, obj: QObject) -> bool:
        if not isinstance(obj, QWidget):
            return False
        try:
            return obj is self._window or self._window.isAncestorOf(obj)
        except RuntimeError:
            return False
