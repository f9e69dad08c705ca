"""Application entry point and setup for the Queens puzzle."""

import logging
import sys

from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import QApplication

from queens.core.game import GameController
from queens.core.ledger import CompletionLedger
from queens.core.levels import LevelCatalog
from queens.core.settings import Settings
from queens.ui.main_window import MainWindow


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def build_controller(settings: Settings) -> GameController:
    """Wire the level catalog and completion ledger into a game controller."""
    catalog = LevelCatalog(settings.levels_dir)
    ledger = CompletionLedger(settings.ledger_path)
    logging.info("Completed puzzles are stored in %s", ledger.file_path)
    return GameController(catalog, ledger, settings.double_press_window_ms)


def run() -> None:
    """Initialize the application and start the main window."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app = QApplication(sys.argv)
    app.setApplicationName("Queens")
    app.setApplicationDisplayName("Queens Puzzle")

    app_font = QFont()
    # Emoji fonts as fallbacks so the crown and party glyphs render everywhere.
    app_font.setFamilies(
        [
            app_font.family(),
            "Noto Color Emoji",
            "Segoe UI Emoji",
            "Apple Color Emoji",
        ]
    )
    app_font.setPointSize(11)
    app.setFont(app_font)

    controller = build_controller(settings)

    window = MainWindow(controller)
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(min(900, geometry.width()), min(1000, geometry.height()))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
