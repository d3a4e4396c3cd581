from __future__ import annotations

import logging
from typing import Iterable

from PyQt6.QtWidgets import QLabel, QPushButton, QWidget

from app.controllers.bottom_controls import BottomControls
from app.controllers.indicator_ui_controller import IndicatorUiController
from app.controllers.input_adapter import Affordances, InputAdapter
from app.controllers.keyboard_subscription import KeyboardSubscription
from app.controllers.position_label_controller import PositionLabelController
from app.domain.deck import Deck
from app.domain.navigation import DEFAULT_BACKWARD_KEYS, DEFAULT_FORWARD_KEYS
from app.ui.slide_surface import SlideSurface
from app.ui.utils.qt_find import find_child, require_child

logger = logging.getLogger(__name__)

_ARROWS = {"Left": "←", "Right": "→", "Up": "↑", "Down": "↓"}


def key_hint_text(forward_keys: Iterable[str], backward_keys: Iterable[str]) -> str:
    backward_keys = list(backward_keys)
    forward_keys = list(forward_keys)
    back = [_ARROWS.get(k, k) for k in backward_keys]
    fwd = [_ARROWS.get(k, k) for k in forward_keys]
    if set(backward_keys + forward_keys) <= set(_ARROWS):
        return f"Use {' '.join(back + fwd)} arrows to navigate"
    return f"Use {' / '.join(back)} and {' / '.join(fwd)} to navigate"


class MainWindowController:
    """Owns navigation wiring for one presentation window.

    Construction loads the deck into the InputAdapter; an empty deck raises
    DeckConfigurationError before any input is wired.
    """

    def __init__(
        self,
        window: QWidget,
        *,
        deck: Deck,
        forward_keys: Iterable[str] = DEFAULT_FORWARD_KEYS,
        backward_keys: Iterable[str] = DEFAULT_BACKWARD_KEYS,
    ) -> None:
        self.window = window
        self.deck = deck

        self.surface: SlideSurface = require_child(window, SlideSurface, "stackedSlides")
        self.adapter = InputAdapter(
            render=self.surface.show_slide,
            forward_keys=forward_keys,
            backward_keys=backward_keys,
        )

        self._bottom_controls = BottomControls()
        self._indicators = IndicatorUiController(window=window, on_indicator=self.adapter.on_indicator)
        self._position_label = PositionLabelController(window=window)
        self._keyboard = KeyboardSubscription(window, self.adapter.on_key)

        # Expose handles for tests that try controller attributes first
        self.next_button: QPushButton | None = None
        self.prev_button: QPushButton | None = None

        self._wire_controls()
        self.adapter.load_deck(len(deck))

    def _wire_controls(self) -> None:
        self._bottom_controls.wire(
            self.window,
            on_prev=self.adapter.on_backward,
            on_next=self.adapter.on_forward,
        )
        self.prev_button = self._bottom_controls.prev_button
        self.next_button = self._bottom_controls.next_button

        self._indicators.wire(len(self.deck))
        self._position_label.wire()

        hint = find_child(self.window, QLabel, "labelKeyHint")
        if hint is not None:
            hint.setText(key_hint_text(sorted(self.adapter.forward_keys), sorted(self.adapter.backward_keys)))

        self.adapter.add_listener(self._bottom_controls.apply)
        self.adapter.add_listener(self._indicators.apply)
        self.adapter.add_listener(self._position_label.apply)

    @property
    def indicators(self) -> list[QPushButton]:
        return list(self._indicators.indicators)

    @property
    def keyboard(self) -> KeyboardSubscription:
        return self._keyboard

    def affordances(self) -> Affordances | None:
        return self.adapter.affordances()

    def activate(self) -> None:
        self._keyboard.activate()

    def deactivate(self) -> None:
        self._keyboard.deactivate()
