from __future__ import annotations

import logging
from typing import Callable

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QPushButton, QWidget

from app.controllers.input_adapter import Affordances
from app.ui.utils.qt_find import require_child

logger = logging.getLogger(__name__)

_DOT_STYLE = (
    "QPushButton { background: rgba(255, 255, 255, 0.4); border: none; border-radius: 4px;"
    " min-width: 8px; max-width: 8px; min-height: 8px; max-height: 8px; }"
    "QPushButton:checked { background: #ffffff; min-width: 32px; max-width: 32px; }"
)


class IndicatorUiController:
    """Owns the row of position indicators (one per slide).

    Indicators are generated from the deck size, so every index they emit is
    valid by construction; the adapter still checks the range.
    """

    def __init__(
        self,
        *,
        window: QWidget,
        on_indicator: Callable[[int], object],
        frame_name: str = "frameIndicators",
    ) -> None:
        self._window = window
        self._on_indicator = on_indicator
        self._frame_name = frame_name
        self.indicators: list[QPushButton] = []

    def wire(self, count: int) -> None:
        frame = require_child(self._window, QFrame, self._frame_name)
        layout = frame.layout()
        if layout is None:
            layout = QHBoxLayout(frame)
            layout.setContentsMargins(0, 0, 0, 0)
            layout.setSpacing(8)

        for old in self.indicators:
            old.setParent(None)
        self.indicators = []

        for index in range(int(count)):
            dot = QPushButton(frame)
            dot.setObjectName(f"indicator_{index}")
            dot.setCheckable(True)
            dot.setCursor(Qt.CursorShape.PointingHandCursor)
            dot.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            dot.setToolTip(f"Slide {index + 1}")
            dot.setStyleSheet(_DOT_STYLE)
            dot.clicked.connect(lambda _checked=False, i=index: self._on_indicator(i))
            layout.addWidget(dot)
            self.indicators.append(dot)

        logger.debug("Built %d slide indicators", len(self.indicators))

    def apply(self, affordances: Affordances) -> None:
        for index, dot in enumerate(self.indicators):
            active = index == affordances.highlighted_indicator
            dot.setChecked(active)
            dot.setProperty("highlighted", active)
