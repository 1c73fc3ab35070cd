"""Application entry point and setup for the word game."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from wordgame.config import forced_target, load_words, log_level
from wordgame.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Initialize the application, load the word list, and start the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Word Game")
    app.setApplicationDisplayName("Word Game")

    words = load_words()
    logging.info(f"Loaded {len(words)} target words")

    window = MainWindow(words=words, target=forced_target())
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
