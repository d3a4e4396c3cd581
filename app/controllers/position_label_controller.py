from __future__ import annotations

from PyQt6.QtWidgets import QLabel, QWidget

from app.controllers.input_adapter import Affordances
from app.ui.utils.qt_find import find_child


class PositionLabelController:
    """Owns the `current / total` counter label."""

    def __init__(self, *, window: QWidget, label_name: str = "labelPosition") -> None:
        self._window = window
        self._label_name = label_name
        self._label: QLabel | None = None

    def wire(self) -> None:
        self._label = find_child(self._window, QLabel, self._label_name)

    def apply(self, affordances: Affordances) -> None:
        if self._label is None:
            return
        self._label.setText(affordances.position_text)
