# tests/conftest.py
import os
from pathlib import Path
from typing import Callable

import pytest

# Headless Qt for CI; must be set before pytest-qt creates the QApplication.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from app.domain.deck import Deck, Slide, SlidePoint  # noqa: E402


def _make_deck(count: int) -> Deck:
    return Deck(tuple(
        Slide(
            title=f"Slide {i + 1}",
            points=(SlidePoint(heading=f"Point {i + 1}", body="body"),) if i % 2 else (),
        )
        for i in range(count)
    ))


@pytest.fixture
def make_deck() -> Callable[[int], Deck]:
    return _make_deck


@pytest.fixture
def deck12() -> Deck:
    return _make_deck(12)


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    """A settings file that does not exist yet: the store falls back to defaults."""
    return tmp_path / "settings.yaml"


@pytest.fixture
def window(qtbot, deck12, settings_path):
    from app.ui.main_window import create_main_window

    win = create_main_window(deck=deck12, settings_path=settings_path)
    qtbot.addWidget(win)
    win.show()
    qtbot.waitExposed(win, timeout=1000)
    yield win
    win.close()
