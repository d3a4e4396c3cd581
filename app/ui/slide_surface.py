from __future__ import annotations

import logging

from PyQt6.QtWidgets import QStackedWidget, QWidget

from app.domain.deck import Deck
from app.ui.slide_view import SlideView

logger = logging.getLogger(__name__)


class SlideSurface(QStackedWidget):
    """Stacked pages, one SlideView per slide. `show_slide(i)` is the render call."""

    def __init__(self, deck: Deck, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("stackedSlides")
        for slide in deck.slides:
            self.addWidget(SlideView(slide, self))

    def show_slide(self, index: int) -> None:
        i = int(index)
        if not 0 <= i < self.count():
            logger.warning("show_slide(%d) ignored; surface has %d pages", i, self.count())
            return
        self.setCurrentIndex(i)

    def current_view(self) -> SlideView | None:
        w = self.currentWidget()
        return w if isinstance(w, SlideView) else None
