from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from PyQt6.QtWidgets import QPushButton, QWidget

from app.controllers.input_adapter import Affordances

logger = logging.getLogger(__name__)


@dataclass
class BottomControls:
    """Discovers and wires the prev/next buttons of the navigation row.

    Responsibilities:
    - locate buttons (by objectName, falling back to their arrow text)
    - enforce stable objectNames (`buttonPrev` / `buttonNext`)
    - attach the injected handlers
    - apply the enabled state from the current Affordances

    This class does NOT implement navigation; callers inject handlers.
    """

    prev_button: QPushButton | None = field(default=None, init=False)
    next_button: QPushButton | None = field(default=None, init=False)

    def wire(
            self,
            window: QWidget,
            *,
            on_prev: Callable[[], object],
            on_next: Callable[[], object],
    ) -> None:
        mapping: dict[str, str] = {
            "◀": "buttonPrev",
            "▶": "buttonNext",
        }
        handlers: dict[str, Callable[[], object]] = {
            "buttonPrev": on_prev,
            "buttonNext": on_next,
        }

        try:
            buttons = list(window.findChildren(QPushButton))
        except (AttributeError, RuntimeError):
            return

        for btn in buttons:
            try:
                name = btn.objectName() or ""
                text = (btn.text() or "").strip()
            except (AttributeError, RuntimeError):
                continue

            if name not in handlers:
                if text not in mapping:
                    continue
                name = mapping[text]
                btn.setObjectName(name)

            if name == "buttonPrev":
                if self.prev_button is not None:
                    continue
                self.prev_button = btn
            else:
                if self.next_button is not None:
                    continue
                self.next_button = btn

            handler = handlers[name]
            btn.clicked.connect(lambda _checked=False, h=handler: h())

        if self.prev_button is None or self.next_button is None:
            logger.warning("Navigation buttons incomplete (prev=%s, next=%s)",
                           self.prev_button is not None, self.next_button is not None)

    def apply(self, affordances: Affordances) -> None:
        if self.prev_button is not None:
            self.prev_button.setEnabled(bool(affordances.backward_enabled))
        if self.next_button is not None:
            self.next_button.setEnabled(bool(affordances.forward_enabled))
