"""Main window factory.

This module owns construction and UI wiring for the presentation window.

Public API:
- create_main_window(...): builds and returns the main window without starting the
  Qt event loop, enabling UI tests to instantiate the window headlessly.

Design notes:
- Entrypoint responsibilities (QApplication creation and app.exec()) stay in
  `main.py`.
- The deck is loaded here (from an explicit Deck, an explicit path, or the
  settings); an empty deck raises DeckConfigurationError to the caller and no
  window is returned.
- The keyboard listener follows the window's visibility: acquired on show,
  released on hide/close.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent, QHideEvent, QShowEvent
from PyQt6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QWidget,
)

from app.controllers.deck_repository import DeckRepository
from app.controllers.main_window_controller import MainWindowController
from app.domain.deck import Deck
from app.services.settings_store import SettingsStore
from app.ui.slide_surface import SlideSurface

logger = logging.getLogger(__name__)

_NAV_BUTTON_STYLE = (
    "QPushButton { background: rgba(255, 255, 255, 0.2); color: #ffffff; border: none;"
    " border-radius: 18px; min-width: 36px; min-height: 36px; font-size: 16px; }"
    "QPushButton:hover { background: rgba(255, 255, 255, 0.3); }"
    "QPushButton:disabled { color: #6b7280; }"
)


@dataclass(frozen=True)
class MainWindowHandles:
    """Optional handles that tests may need.

    Keep this small and stable; stored on the window as `window._handles`.
    """

    surface: Optional[SlideSurface] = None
    next_button: Optional[QPushButton] = None
    prev_button: Optional[QPushButton] = None
    position_label: Optional[QLabel] = None
    indicators: tuple[QPushButton, ...] = field(default_factory=tuple)


class DeckWindow(QWidget):
    """Top-level presentation window; ties keyboard scope to visibility."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("deckWindow")
        self._controller: MainWindowController | None = None

    def set_controller(self, controller: MainWindowController) -> None:
        self._controller = controller

    def showEvent(self, event: QShowEvent) -> None:  # noqa: N802 (Qt API)
        super().showEvent(event)
        if self._controller is not None:
            self._controller.activate()

    def hideEvent(self, event: QHideEvent) -> None:  # noqa: N802 (Qt API)
        if self._controller is not None:
            self._controller.deactivate()
        super().hideEvent(event)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 (Qt API)
        if self._controller is not None:
            self._controller.deactivate()
        super().closeEvent(event)


def _build_layout(window: QWidget, deck: Deck) -> None:
    """Surface fills the window; counter, nav row and hint float over it."""
    grid = QGridLayout(window)
    grid.setContentsMargins(0, 0, 0, 0)
    grid.setSpacing(0)

    surface = SlideSurface(deck, window)
    grid.addWidget(surface, 0, 0, 3, 3)

    position = QLabel("", window)
    position.setObjectName("labelPosition")
    position.setStyleSheet(
        "color: #ffffff; background: rgba(0, 0, 0, 0.3); border-radius: 10px; padding: 4px 12px; margin: 24px;"
    )
    grid.addWidget(position, 0, 2, Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignRight)

    nav = QFrame(window)
    nav.setObjectName("frameNavigation")
    nav_layout = QHBoxLayout(nav)
    nav_layout.setContentsMargins(0, 0, 0, 24)
    nav_layout.setSpacing(16)

    prev_btn = QPushButton("◀", nav)
    prev_btn.setObjectName("buttonPrev")
    prev_btn.setToolTip("Previous slide")
    next_btn = QPushButton("▶", nav)
    next_btn.setObjectName("buttonNext")
    next_btn.setToolTip("Next slide")
    for btn in (prev_btn, next_btn):
        btn.setStyleSheet(_NAV_BUTTON_STYLE)
        btn.setCursor(Qt.CursorShape.PointingHandCursor)

    indicators = QFrame(nav)
    indicators.setObjectName("frameIndicators")
    ind_layout = QHBoxLayout(indicators)
    ind_layout.setContentsMargins(0, 0, 0, 0)
    ind_layout.setSpacing(8)

    nav_layout.addWidget(prev_btn)
    nav_layout.addWidget(indicators)
    nav_layout.addWidget(next_btn)
    grid.addWidget(nav, 2, 1, Qt.AlignmentFlag.AlignBottom | Qt.AlignmentFlag.AlignHCenter)

    hint = QLabel("", window)
    hint.setObjectName("labelKeyHint")
    hint.setStyleSheet("color: rgba(255, 255, 255, 0.5); background: transparent; padding: 0 24px 24px 0;")
    grid.addWidget(hint, 2, 2, Qt.AlignmentFlag.AlignBottom | Qt.AlignmentFlag.AlignRight)

    # Overlays must stay above the stacked surface.
    for w in (position, nav, hint):
        w.raise_()


def _resolve_deck(deck: Deck | None, deck_path: str | Path | None, store: SettingsStore) -> Deck:
    if deck is not None:
        return deck
    path = Path(deck_path) if deck_path is not None else store.get_deck_path()
    return DeckRepository(data_path=path).load()


def create_main_window(
    *,
    deck: Deck | None = None,
    deck_path: str | Path | None = None,
    settings_path: str | Path | None = None,
    expose_handles: bool = True,
) -> DeckWindow:
    """Create and return the presentation window.

    This function must NOT call app.exec(). It may assume a QApplication exists.

    Args:
        deck: A ready-made deck. Takes precedence over `deck_path`.
        deck_path: YAML deck file. Defaults to the settings' `deck_path`, then
            `data/deck.yaml`.
        settings_path: Optional path to a settings.yaml.
        expose_handles: If True, attaches a small, stable set of UI handles for
            tests via `window._handles`.

    Raises:
        DeckConfigurationError: the deck has no slides.
    """
    store = SettingsStore(settings_path)
    resolved = _resolve_deck(deck, deck_path, store)
    win_settings = store.get_window()

    window = DeckWindow()
    window.setWindowTitle(win_settings.title)
    window.resize(win_settings.width, win_settings.height)
    _build_layout(window, resolved)

    try:
        controller = MainWindowController(
            window,
            deck=resolved,
            forward_keys=store.get_forward_keys(),
            backward_keys=store.get_backward_keys(),
        )
    except Exception:
        window.deleteLater()
        raise

    # Also the stable `window._controller` handle used by tests.
    window.set_controller(controller)

    if expose_handles:
        setattr(window, "_handles", MainWindowHandles(
            surface=controller.surface,
            next_button=controller.next_button,
            prev_button=controller.prev_button,
            position_label=window.findChild(QLabel, "labelPosition"),
            indicators=tuple(controller.indicators),
        ))

    logger.info("Presentation window ready: %d slides", len(resolved))
    return window
