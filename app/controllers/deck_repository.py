from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

import yaml

from app.domain.deck import Deck, Slide, SlidePoint

logger = logging.getLogger(__name__)


def default_deck_path() -> Path:
    """Return <project_root>/data/deck.yaml.

    Assumes this file lives at: <root>/app/controllers/deck_repository.py
    """
    return Path(__file__).resolve().parents[2] / "data" / "deck.yaml"


class DeckRepository:
    """Load a slide deck from a YAML file.

    Supported YAML shapes (intentionally tolerant):

    1) A dict with a `slides` list
        slides:
          - title: Welcome
            points: [...]

    2) A bare list of slide mappings

    `points` entries may be mappings ({heading, body, badge}) or plain
    strings (used as the heading). Non-mapping slides are skipped. A missing
    or unreadable file yields an empty deck; refusing to present an empty
    deck is the navigation layer's job.
    """

    def __init__(self, *, data_path: Path | str | None = None) -> None:
        self._data_path = Path(data_path) if data_path is not None else default_deck_path()

    @property
    def data_path(self) -> Path:
        return self._data_path

    def load(self) -> Deck:
        data = self._read_yaml()
        slides: list[Slide] = []
        for position, raw in enumerate(self._iter_items(data)):
            slide = self._parse_slide(raw)
            if slide is None:
                logger.warning("Skipping malformed slide #%d in %s", position, self._data_path)
                continue
            slides.append(slide)
        logger.info("Loaded %d slides from %s", len(slides), self._data_path)
        return Deck(tuple(slides))

    def _read_yaml(self) -> Any:
        path = self._data_path
        if not path.exists() or not path.is_file():
            logger.warning("Deck file not found: %s", path)
            return None
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeError) as e:
            logger.warning("Failed to read deck file %s: %s", path, e)
            return None
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            logger.warning("Invalid YAML in deck file %s: %s", path, e)
            return None

    @staticmethod
    def _iter_items(container: Any) -> list[Any]:
        if isinstance(container, list):
            return container
        if isinstance(container, dict):
            v = container.get("slides")
            if isinstance(v, list):
                return v
        return []

    @staticmethod
    def _as_str(value: Any, default: str = "") -> str:
        if isinstance(value, str):
            return value.strip()
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return default

    @classmethod
    def _optional_str(cls, value: Any) -> str | None:
        s = cls._as_str(value)
        return s if s else None

    @classmethod
    def _parse_points(cls, raw: Any) -> tuple[SlidePoint, ...]:
        items: Iterable[Any] = raw if isinstance(raw, list) else []
        out: list[SlidePoint] = []
        for item in items:
            heading = cls._as_str(item)
            if heading:
                out.append(SlidePoint(heading=heading))
                continue
            if isinstance(item, dict):
                heading = cls._as_str(item.get("heading"))
                body = cls._as_str(item.get("body"))
                if heading or body:
                    out.append(SlidePoint(heading=heading, body=body, badge=cls._optional_str(item.get("badge"))))
        return tuple(out)

    def _parse_slide(self, raw: Any) -> Slide | None:
        if not isinstance(raw, dict):
            return None
        defaults = Slide(title="")
        code = raw.get("code")
        return Slide(
            title=self._as_str(raw.get("title")),
            subtitle=self._as_str(raw.get("subtitle")),
            icon=self._as_str(raw.get("icon")),
            background=self._as_str(raw.get("background"), defaults.background) or defaults.background,
            foreground=self._as_str(raw.get("foreground"), defaults.foreground) or defaults.foreground,
            points=self._parse_points(raw.get("points")),
            # Keep code indentation intact.
            code=code.rstrip() if isinstance(code, str) and code.strip() else None,
            footer=self._as_str(raw.get("footer")),
        )
