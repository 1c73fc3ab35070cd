from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from wordgame.core.errors import InvalidInputError
from wordgame.core.scoring import Validation, keyboard_overlay, score_guess

if TYPE_CHECKING:
    import random

    from wordgame.core.words import WordRepository

logger = logging.getLogger(__name__)

WORD_LENGTH = 5
MAX_GUESSES = 6

_WORD_RE = re.compile(rf"[A-Z]{{{WORD_LENGTH}}}")
_LETTER_RE = re.compile(r"[A-Z]")


def validate_target(word: object) -> str:
    """Return ``word`` if it is a usable target, else raise InvalidInputError."""
    if not isinstance(word, str) or not _WORD_RE.fullmatch(word):
        raise InvalidInputError(
            f"target word must be {WORD_LENGTH} uppercase letters A-Z, got {word!r}"
        )
    return word


@dataclass(frozen=True)
class Letter:
    """One grid cell: an optional letter and its feedback."""

    value: Optional[str] = None
    validation: Validation = Validation.UNKNOWN

    @property
    def display(self) -> str:
        return self.value or ""


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class KeyKind(Enum):
    LETTER = "letter"
    ENTER = "enter"
    DELETE = "delete"


@dataclass(frozen=True)
class Key:
    """A key-press event coming from the presentation layer."""

    kind: KeyKind
    char: Optional[str] = None

    @classmethod
    def letter(cls, char: str) -> "Key":
        return cls(KeyKind.LETTER, char)


Key.ENTER = Key(KeyKind.ENTER)
Key.DELETE = Key(KeyKind.DELETE)


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a game, handed to whatever renders it."""

    rows: Tuple[Tuple[Letter, ...], ...]
    keyboard: Dict[str, Validation]
    current_row: int
    current_column: int
    status: GameStatus
    target: Optional[str] = None  # revealed only once the game is over


@dataclass
class _Grid:
    cells: List[List[Letter]] = field(
        default_factory=lambda: [[Letter() for _ in range(WORD_LENGTH)] for _ in range(MAX_GUESSES)]
    )

    def frozen(self) -> Tuple[Tuple[Letter, ...], ...]:
        return tuple(tuple(row) for row in self.cells)


class Game:
    """State of a single puzzle, mutated only through key presses.

    Preconditions on the ``press_*`` operations are soft: an event that does
    not apply in the current state (a letter on a full row, enter on a
    partial row, delete on an empty row, anything after the game is over)
    leaves the game untouched and returns ``False``. Only input that could
    never be valid raises :class:`InvalidInputError`.
    """

    def __init__(self, target: str) -> None:
        self._target = validate_target(target)
        self._grid = _Grid()
        self._current_row = 0
        self._current_column = 0
        self._status = GameStatus.IN_PROGRESS
        logger.info("New game started")

    @classmethod
    def new(cls, words: "WordRepository", rng: Optional["random.Random"] = None) -> "Game":
        """Start a game with a random target from ``words``."""
        return cls(words.random(rng))

    @property
    def current_row(self) -> int:
        return self._current_row

    @property
    def current_column(self) -> int:
        return self._current_column

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status is not GameStatus.IN_PROGRESS

    @property
    def target(self) -> Optional[str]:
        """The answer, or None while the game is still being played."""
        return self._target if self.is_over else None

    @property
    def rows(self) -> Tuple[Tuple[Letter, ...], ...]:
        return self._grid.frozen()

    @property
    def keyboard(self) -> Dict[str, Validation]:
        """Best validation per letter, derived from the scored rows."""
        return keyboard_overlay(self._grid.cells)

    @property
    def guesses(self) -> List[str]:
        """Scored guesses, oldest first."""
        scored = []
        for row in self._grid.cells:
            if row[0].validation is Validation.UNKNOWN:
                break
            scored.append("".join(cell.display for cell in row))
        return scored

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            rows=self.rows,
            keyboard=self.keyboard,
            current_row=self._current_row,
            current_column=self._current_column,
            status=self._status,
            target=self.target,
        )

    def press(self, key: Key) -> bool:
        """Apply one key event; returns False if it was rejected."""
        if key.kind is KeyKind.LETTER:
            return self.press_letter(key.char)
        if key.kind is KeyKind.ENTER:
            return self.press_enter()
        if key.kind is KeyKind.DELETE:
            return self.press_delete()
        raise InvalidInputError(f"unknown key event {key!r}")

    def press_letter(self, char: str) -> bool:
        if not isinstance(char, str) or not _LETTER_RE.fullmatch(char):
            raise InvalidInputError(f"letter must be a single character A-Z, got {char!r}")
        if self._rejected_when_over("letter"):
            return False
        if self._current_column == WORD_LENGTH:
            logger.debug("Letter %s rejected: row %d is full", char, self._current_row)
            return False

        self._grid.cells[self._current_row][self._current_column] = Letter(value=char)
        self._current_column += 1
        return True

    def press_delete(self) -> bool:
        if self._rejected_when_over("delete"):
            return False
        if self._current_column == 0:
            logger.debug("Delete rejected: row %d is empty", self._current_row)
            return False

        self._current_column -= 1
        self._grid.cells[self._current_row][self._current_column] = Letter()
        return True

    def press_enter(self) -> bool:
        if self._rejected_when_over("enter"):
            return False
        if self._current_column < WORD_LENGTH:
            logger.debug(
                "Enter rejected: row %d has %d of %d letters",
                self._current_row,
                self._current_column,
                WORD_LENGTH,
            )
            return False

        row = self._grid.cells[self._current_row]
        guess = "".join(cell.display for cell in row)
        validations = score_guess(guess, self._target)
        self._grid.cells[self._current_row] = [
            replace(cell, validation=validation) for cell, validation in zip(row, validations)
        ]

        if all(v is Validation.CORRECT for v in validations):
            self._status = GameStatus.WON
            logger.info("Game won in %d guess(es)", self._current_row + 1)
        elif self._current_row == MAX_GUESSES - 1:
            self._status = GameStatus.LOST
            logger.info("Game lost; the word was %s", self._target)
        else:
            self._current_row += 1
            self._current_column = 0
        return True

    def _rejected_when_over(self, event: str) -> bool:
        if self.is_over:
            logger.debug("%s rejected: game already %s", event.capitalize(), self._status.value)
            return True
        return False
