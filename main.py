import argparse
import logging
import os
import sys

from PyQt6.QtWidgets import QApplication, QMessageBox

from app.domain.navigation import DeckConfigurationError
from app.services.settings_store import SettingsStore
from app.ui.main_window import create_main_window

logger = logging.getLogger("slidedeck")


def _resolve_log_level(store: SettingsStore) -> int:
    """SLIDEDECK_LOG_LEVEL wins over settings `log_level`; unknown names give INFO."""
    level_name = (os.environ.get("SLIDEDECK_LOG_LEVEL") or store.get_log_level()).strip().upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        return logging.INFO
    return level


def _setup_logging(store: SettingsStore) -> None:
    logging.basicConfig(
        level=_resolve_log_level(store),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="slidedeck", description="Present a YAML slide deck.")
    parser.add_argument("deck", nargs="?", help="Deck YAML file (default: settings deck_path or data/deck.yaml)")
    parser.add_argument("--settings", default=None, help="Path to settings.yaml")
    # Unknown flags are left for Qt (e.g. -reverse).
    args, _qt_args = parser.parse_known_args(argv)
    return args


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(list(argv) if argv is not None else sys.argv[1:])
    app = QApplication.instance() or QApplication(sys.argv)

    store = SettingsStore(args.settings)
    _setup_logging(store)

    deck_path = os.path.abspath(os.path.expanduser(args.deck)) if args.deck else None
    try:
        window = create_main_window(deck_path=deck_path, settings_path=args.settings)
    except DeckConfigurationError as e:
        logger.error("Cannot start presentation: %s", e)
        QMessageBox.critical(None, "Slide Deck", f"Cannot start presentation:\n{e}")
        return 2

    if store.get_window().fullscreen:
        window.showFullScreen()
    else:
        window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
