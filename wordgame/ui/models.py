"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from wordgame.core.game import Key, KeyKind
from wordgame.core.scoring import Validation

KEYBOARD_LAYOUT = ("QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM")


@dataclass
class KeyCap:
    """One on-screen key: what it sends, how it is labelled, how it is colored."""

    key: Key
    label: str
    validation: Validation = Validation.UNKNOWN
    width: float = 1.0

    @property
    def is_letter(self) -> bool:
        return self.key.kind is KeyKind.LETTER


def build_keyboard(overlay: Dict[str, Validation]) -> List[List[KeyCap]]:
    """Lay out the on-screen keyboard, coloring letter keys from ``overlay``.

    The last row is framed by Enter on the left and Delete on the right.
    """
    rows: List[List[KeyCap]] = []
    for letters in KEYBOARD_LAYOUT:
        rows.append(
            [
                KeyCap(
                    key=Key.letter(ch),
                    label=ch,
                    validation=overlay.get(ch, Validation.UNKNOWN),
                )
                for ch in letters
            ]
        )
    rows[-1].insert(0, KeyCap(key=Key.ENTER, label="ENTER", width=1.5))
    rows[-1].append(KeyCap(key=Key.DELETE, label="⌫", width=1.5))
    return rows
