from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from app.domain.navigation import DEFAULT_BACKWARD_KEYS, DEFAULT_FORWARD_KEYS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowSettings:
    title: str = "Slide Deck"
    width: int = 1280
    height: int = 720
    fullscreen: bool = False


class SettingsStore:
    """YAML-backed, read-only application settings.

    Responsibilities:
      - Load settings.yaml (missing or broken files give defaults)
      - Provide typed helpers for the deck path, window, keys and log level

    Notes:
      - A relative `deck_path` resolves against the settings file's folder.
      - The current slide position is never stored here.
    """

    def __init__(self, settings_path: str | Path | None = None) -> None:
        if settings_path is None:
            # <project_root>/settings.yaml, next to main.py.
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        p = self._path
        if not p.exists():
            return {}
        try:
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeError, yaml.YAMLError) as e:
            logger.warning("Failed to load settings from %s: %s", p, e)
            return {}
        return data if isinstance(data, dict) else {}

    def get_deck_path(self) -> Path | None:
        value = self.load().get("deck_path")
        if not isinstance(value, str) or not value.strip():
            return None
        p = Path(value.strip()).expanduser()
        if not p.is_absolute():
            p = self._path.parent / p
        return p

    def get_log_level(self) -> str:
        value = self.load().get("log_level")
        if isinstance(value, str) and value.strip():
            return value.strip().upper()
        return "INFO"

    def get_window(self) -> WindowSettings:
        w = self.load().get("window") or {}
        if not isinstance(w, dict):
            w = {}
        defaults = WindowSettings()

        def _ival(key: str, default: int) -> int:
            try:
                v = w.get(key, default)
                if isinstance(v, (int, float)) and not isinstance(v, bool) and v > 0:
                    return int(v)
            except (TypeError, ValueError):
                pass
            return int(default)

        title = w.get("title")
        # Only a YAML boolean counts; a quoted "false" must not turn fullscreen on.
        fullscreen = w.get("fullscreen", defaults.fullscreen)
        return WindowSettings(
            title=title.strip() if isinstance(title, str) and title.strip() else defaults.title,
            width=_ival("width", defaults.width),
            height=_ival("height", defaults.height),
            fullscreen=fullscreen if isinstance(fullscreen, bool) else defaults.fullscreen,
        )

    def get_forward_keys(self) -> tuple[str, ...]:
        return self._get_keys("forward", DEFAULT_FORWARD_KEYS)

    def get_backward_keys(self) -> tuple[str, ...]:
        return self._get_keys("backward", DEFAULT_BACKWARD_KEYS)

    def _get_keys(self, direction: str, default: tuple[str, ...]) -> tuple[str, ...]:
        keys = self.load().get("keys") or {}
        if not isinstance(keys, dict):
            return default
        value = keys.get(direction)
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            return default
        out = tuple(str(v).strip() for v in value if isinstance(v, (str, int)) and str(v).strip())
        return out or default
