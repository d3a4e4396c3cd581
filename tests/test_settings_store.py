import subprocess
import sys
from pathlib import Path

import pytest

from app.services.settings_store import SettingsStore, WindowSettings


@pytest.fixture
def store(tmp_path: Path) -> SettingsStore:
    return SettingsStore(tmp_path / "settings.yaml")


def _write(store: SettingsStore, text: str) -> None:
    store.path.write_text(text, encoding="utf-8")


def test_missing_file_uses_defaults(store):
    assert store.load() == {}
    assert store.get_deck_path() is None
    assert store.get_log_level() == "INFO"
    assert store.get_window() == WindowSettings()
    assert store.get_forward_keys() == ("Right",)
    assert store.get_backward_keys() == ("Left",)


def test_broken_yaml_uses_defaults(store):
    _write(store, "window: [unclosed\n")
    assert store.load() == {}
    assert store.get_window() == WindowSettings()


def test_relative_deck_path_resolves_next_to_settings(store, tmp_path):
    _write(store, "deck_path: decks/talk.yaml\n")
    assert store.get_deck_path() == tmp_path / "decks" / "talk.yaml"


def test_absolute_deck_path_is_kept(store, tmp_path):
    target = tmp_path / "elsewhere" / "deck.yaml"
    _write(store, f"deck_path: {target}\n")
    assert store.get_deck_path() == target


def test_window_values_and_bad_sizes(store):
    _write(store, "window:\n  title: Talk\n  width: 800\n  height: -5\n  fullscreen: true\n")
    w = store.get_window()
    assert w.title == "Talk"
    assert w.width == 800
    assert w.height == WindowSettings().height
    assert w.fullscreen is True


def test_keys_accept_list_or_single_string(store):
    _write(store, "keys:\n  forward: [PgDown, Space]\n  backward: PgUp\n")
    assert store.get_forward_keys() == ("PgDown", "Space")
    assert store.get_backward_keys() == ("PgUp",)


def test_empty_key_list_falls_back_to_defaults(store):
    _write(store, "keys:\n  forward: []\n")
    assert store.get_forward_keys() == ("Right",)


def test_log_level_is_upper_cased(store):
    _write(store, "log_level: debug\n")
    assert store.get_log_level() == "DEBUG"


@pytest.mark.parametrize("value", ["'false'", "'true'", "'no'", "1", "yes please"])
def test_fullscreen_accepts_only_yaml_booleans(store, value):
    _write(store, f"window:\n  fullscreen: {value}\n")
    assert store.get_window().fullscreen is WindowSettings().fullscreen


def test_fullscreen_false_boolean(store):
    _write(store, "window:\n  fullscreen: false\n")
    assert store.get_window().fullscreen is False


def test_default_keys_come_from_domain(store):
    from app.domain.navigation import DEFAULT_BACKWARD_KEYS, DEFAULT_FORWARD_KEYS

    assert store.get_forward_keys() == DEFAULT_FORWARD_KEYS
    assert store.get_backward_keys() == DEFAULT_BACKWARD_KEYS


def test_settings_import_does_not_load_qt():
    # Fresh interpreter: this test session has already imported PyQt6.
    code = (
        "import sys\n"
        "import app.services.settings_store\n"
        "sys.exit(1 if any(m.startswith('PyQt6') for m in sys.modules) else 0)\n"
    )
    root = Path(__file__).resolve().parents[1]
    result = subprocess.run([sys.executable, "-c", code], cwd=root, capture_output=True, text=True)
    assert result.returncode == 0, result.stderr
