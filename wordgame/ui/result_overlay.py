"""In-window overlay shown when a game is won or lost."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QEvent, Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from wordgame.core.game import GameStatus
from wordgame.ui.colors import BoardColors, hover_color


def _card_container(object_name: str = "resultContainer") -> QFrame:
    container = QFrame()
    container.setObjectName(object_name)
    container.setMinimumWidth(320)
    container.setMaximumWidth(420)
    container.setStyleSheet(
        f"""
        QFrame#{object_name} {{
            background: {BoardColors.OVERLAY_CARD};
            border-radius: 16px;
        }}
        """
    )
    shadow = QGraphicsDropShadowEffect(container)
    shadow.setBlurRadius(20)
    shadow.setOffset(0, 6)
    shadow.setColor(QColor(0, 0, 0, 60))
    container.setGraphicsEffect(shadow)
    return container


def _button_style(base: str) -> str:
    return f"""
        QPushButton {{
            background: {base};
            color: white;
            padding: 10px 16px;
            border: none;
            border-radius: 10px;
            font-weight: 700;
            font-size: 14px;
        }}
        QPushButton:hover {{ background: {hover_color(base)}; }}
    """


class ResultOverlay(QWidget):
    """Shows the outcome and the answer; ``new_game_requested`` fires on the button."""

    new_game_requested = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        overlay_bg = QWidget(self)
        overlay_bg.setStyleSheet("background: rgba(0, 0, 0, 0.45);")
        overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        overlay_bg.mousePressEvent = lambda e: self.hide()
        main_layout.addWidget(overlay_bg, 0, 0)

        container = _card_container()
        content = QVBoxLayout(container)
        content.setContentsMargins(28, 24, 28, 24)
        content.setSpacing(14)

        header = QHBoxLayout()
        self._title = QLabel()
        self._title.setStyleSheet(f"color: {BoardColors.OVERLAY_TEXT}; font-size: 20px; font-weight: 800;")
        header.addWidget(self._title, 0)
        header.addStretch(1)
        content.addLayout(header)

        self._message = QLabel()
        self._message.setStyleSheet(f"color: {BoardColors.OVERLAY_TEXT}; font-size: 14px;")
        self._message.setWordWrap(True)
        content.addWidget(self._message, 0)

        self._new_game_btn = QPushButton("New game")
        self._new_game_btn.setStyleSheet(_button_style(BoardColors.CORRECT))
        self._new_game_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self._new_game_btn.clicked.connect(lambda: (self.hide(), self.new_game_requested.emit()))
        content.addWidget(self._new_game_btn, 0)

        main_layout.addWidget(container, 0, 0, 1, 1, Qt.AlignCenter)
        self.hide()

    def show_result(self, status: GameStatus, target: str, guesses: int) -> None:
        if status is GameStatus.WON:
            self._title.setText("Solved!")
            plural = "guess" if guesses == 1 else "guesses"
            self._message.setText(f"You found {target} in {guesses} {plural}.")
        else:
            self._title.setText("Out of guesses")
            self._message.setText(f"The word was {target}.")
        self.show()
        self.raise_()

    def _update_geometry(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())

    def eventFilter(self, obj: QWidget, event: QEvent) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self._update_geometry()
        return super().eventFilter(obj, event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._update_geometry()
        parent = self.parentWidget()
        if parent is not None:
            parent.installEventFilter(self)

    def hideEvent(self, event) -> None:
        parent = self.parentWidget()
        if parent is not None:
            parent.removeEventFilter(self)
        super().hideEvent(event)
