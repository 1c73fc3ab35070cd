from __future__ import annotations

import logging
import string
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from wordgame.core.game import Game, Key
from wordgame.core.words import WordRepository
from wordgame.ui.board_widgets import BoardWidget, KeyboardWidget
from wordgame.ui.colors import BoardColors
from wordgame.ui.result_overlay import ResultOverlay

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Board above an on-screen keyboard; forwards key events to a :class:`Game`.

    The window owns the single game instance and never touches its state
    directly: clicks and physical key presses become :class:`Key` events and
    every repaint reads a fresh snapshot.
    """

    def __init__(self, words: WordRepository, target: Optional[str] = None) -> None:
        super().__init__()
        self._words = words
        self._forced_target = target
        self._game = self._create_game()

        self._board: Optional[BoardWidget] = None
        self._keyboard: Optional[KeyboardWidget] = None
        self._overlay: Optional[ResultOverlay] = None

        self._build_ui()
        self._refresh()

    def _create_game(self) -> Game:
        if self._forced_target is not None:
            return Game(self._forced_target)
        return Game.new(self._words)

    def _build_ui(self) -> None:
        self.setWindowTitle("Word Game")
        central = QWidget()
        central.setStyleSheet(f"background: {BoardColors.BG};")
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 16, 24, 24)
        layout.setSpacing(16)

        title = QLabel(self._words.title)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {BoardColors.TEXT_MUTED}; font-size: 14px; font-weight: 600;")
        layout.addWidget(title, 0)

        self._board = BoardWidget()
        layout.addWidget(self._board, 1)

        self._keyboard = KeyboardWidget()
        self._keyboard.key_pressed.connect(self._on_key)
        layout.addWidget(self._keyboard, 0)

        self.setCentralWidget(central)

        self._overlay = ResultOverlay(central)
        self._overlay.new_game_requested.connect(self._new_game)
        self.resize(560, 760)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        key = self._key_from_event(event)
        if key is None:
            super().keyPressEvent(event)
            return
        self._on_key(key)

    @staticmethod
    def _key_from_event(event: QKeyEvent) -> Optional[Key]:
        if event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            return Key.ENTER
        if event.key() == Qt.Key.Key_Backspace:
            return Key.DELETE
        text = event.text().upper()
        if len(text) == 1 and text in string.ascii_uppercase:
            return Key.letter(text)
        return None

    def _on_key(self, key: Key) -> None:
        if self._game.is_over and key == Key.ENTER:
            if self._overlay is not None:
                self._overlay.hide()
            self._new_game()
            return
        if not self._game.press(key):
            return
        self._refresh()
        if self._game.is_over and self._overlay is not None:
            self._overlay.show_result(
                self._game.status,
                self._game.target or "",
                len(self._game.guesses),
            )

    def _new_game(self) -> None:
        # a forced target only applies to the first game
        self._forced_target = None
        logger.info("New game requested")
        self._game = self._create_game()
        self._refresh()

    def _refresh(self) -> None:
        snapshot = self._game.snapshot()
        if self._board is not None:
            self._board.set_snapshot(snapshot)
        if self._keyboard is not None:
            self._keyboard.set_overlay(snapshot.keyboard)
