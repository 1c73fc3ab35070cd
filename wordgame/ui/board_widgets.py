"""Game board grid and on-screen keyboard widgets."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from wordgame.core.game import MAX_GUESSES, WORD_LENGTH, GameSnapshot, Key
from wordgame.core.scoring import Validation
from wordgame.ui.colors import BoardColors, hover_color, pressed_color, validation_color
from wordgame.ui.models import KeyCap, build_keyboard


class BoardWidget(QWidget):
    """6x5 grid of tiles: scored (colored), typed (outlined), empty (dim)."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._snapshot: Optional[GameSnapshot] = None
        self.setMinimumSize(300, 360)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

    def set_snapshot(self, snapshot: GameSnapshot) -> None:
        self._snapshot = snapshot
        self.update()

    def paintEvent(self, event) -> None:
        """Paint every tile of the board from the current snapshot."""
        super().paintEvent(event)
        if self._snapshot is None:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        spacing = 8
        box_size = min(
            (self.width() - spacing * (WORD_LENGTH - 1)) // WORD_LENGTH,
            (self.height() - spacing * (MAX_GUESSES - 1)) // MAX_GUESSES,
            72,
        )
        box_size = max(box_size, 24)
        total_width = WORD_LENGTH * (box_size + spacing) - spacing
        total_height = MAX_GUESSES * (box_size + spacing) - spacing
        start_x = max(0, (self.width() - total_width) // 2)
        start_y = max(0, (self.height() - total_height) // 2)

        font = painter.font()
        font.setPointSize(max(10, int(box_size * 0.45)))
        font.setBold(True)
        painter.setFont(font)

        snap = self._snapshot
        for r, row in enumerate(snap.rows):
            for c, cell in enumerate(row):
                x = start_x + c * (box_size + spacing)
                y = start_y + r * (box_size + spacing)
                is_active = (
                    r == snap.current_row
                    and c == snap.current_column
                    and snap.target is None
                )
                if cell.validation is not Validation.UNKNOWN:
                    fill = QColor(validation_color(cell.validation))
                    painter.setBrush(fill)
                    painter.setPen(QPen(fill, 2))
                elif cell.value is not None:
                    painter.setBrush(QColor(BoardColors.EMPTY_TILE))
                    painter.setPen(QPen(QColor(BoardColors.TEXT_MUTED), 2))
                else:
                    painter.setBrush(QColor(BoardColors.EMPTY_TILE))
                    border = BoardColors.ACTIVE_BORDER if is_active else BoardColors.TILE_BORDER
                    painter.setPen(QPen(QColor(border), 2))
                painter.drawRoundedRect(x, y, box_size, box_size, 4, 4)
                if cell.value:
                    painter.setPen(QColor(BoardColors.TEXT))
                    painter.drawText(x, y, box_size, box_size, Qt.AlignCenter, cell.display)
        painter.end()


class KeyboardWidget(QWidget):
    """Clickable QWERTY keyboard whose letter keys show the best validation seen."""

    key_pressed = Signal(object)  # emits a Key

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._buttons: dict[Key, QPushButton] = {}
        self._build(build_keyboard({}))

    def _build(self, rows: list[list[KeyCap]]) -> None:
        grid = QGridLayout(self)
        grid.setSpacing(6)
        grid.setContentsMargins(0, 0, 0, 0)

        unit_scale = 2
        max_columns = max(sum(int(cap.width * unit_scale) for cap in row) for row in rows)
        for row_index, row in enumerate(rows):
            row_width = sum(int(cap.width * unit_scale) for cap in row)
            col = (max_columns - row_width) // 2
            for cap in row:
                span = int(cap.width * unit_scale)
                button = QPushButton(cap.label)
                button.setFocusPolicy(Qt.NoFocus)
                button.setMinimumHeight(52)
                button.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
                button.clicked.connect(lambda _checked=False, k=cap.key: self.key_pressed.emit(k))
                button.setStyleSheet(self._key_style(cap))
                grid.addWidget(button, row_index, col, 1, span)
                self._buttons[cap.key] = button
                col += span

        for column in range(max_columns):
            grid.setColumnStretch(column, 1)

    def set_overlay(self, overlay: dict[str, Validation]) -> None:
        """Recolor the keys from a keyboard overlay."""
        for row in build_keyboard(overlay):
            for cap in row:
                button = self._buttons.get(cap.key)
                if button is not None:
                    button.setStyleSheet(self._key_style(cap))

    @staticmethod
    def _key_style(cap: KeyCap) -> str:
        base = validation_color(cap.validation)
        font_px = 18 if cap.is_letter else 13
        return f"""
            QPushButton {{
                background: {base};
                color: {BoardColors.TEXT};
                border: none;
                border-radius: 4px;
                font-size: {font_px}px;
                font-weight: 700;
                padding: 4px;
            }}
            QPushButton:hover {{ background: {hover_color(base)}; }}
            QPushButton:pressed {{ background: {pressed_color(base)}; }}
        """
