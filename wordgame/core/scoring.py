from __future__ import annotations

import string
from collections import Counter
from enum import IntEnum
from typing import Dict, Iterable, List, Optional, Protocol

from wordgame.core.errors import InvalidInputError


class Validation(IntEnum):
    """Feedback for one letter, ordered by severity (``CORRECT`` is best)."""

    UNKNOWN = 0
    NOT_PRESENT = 1
    WRONG_PLACE = 2
    CORRECT = 3


class _ScoredCell(Protocol):
    value: Optional[str]
    validation: Validation


def score_guess(guess: str, target: str) -> List[Validation]:
    """Score ``guess`` against ``target`` letter by letter.

    Exact matches are marked first and consume one occurrence of their letter
    from the target; the remaining positions then take ``WRONG_PLACE`` while
    unmatched occurrences of that letter are left, ``NOT_PRESENT`` otherwise.
    A letter is therefore never credited more often than it occurs in the
    target.
    """
    if len(guess) != len(target):
        raise InvalidInputError(
            f"guess {guess!r} and target have different lengths ({len(guess)} != {len(target)})"
        )

    result = [Validation.UNKNOWN] * len(guess)
    remaining = Counter(target)

    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            result[i] = Validation.CORRECT
            remaining[g] -= 1

    for i, g in enumerate(guess):
        if result[i] is Validation.CORRECT:
            continue
        if remaining[g] > 0:
            result[i] = Validation.WRONG_PLACE
            remaining[g] -= 1
        else:
            result[i] = Validation.NOT_PRESENT

    return result


def merge_validation(a: Validation, b: Validation) -> Validation:
    """Return the more severe of two validations."""
    return max(a, b)


def keyboard_overlay(rows: Iterable[Iterable[_ScoredCell]]) -> Dict[str, Validation]:
    """Best validation seen per letter A-Z across every scored cell in ``rows``."""
    overlay = {letter: Validation.UNKNOWN for letter in string.ascii_uppercase}
    for row in rows:
        for cell in row:
            if cell.value is None or cell.validation is Validation.UNKNOWN:
                continue
            overlay[cell.value] = merge_validation(overlay[cell.value], cell.validation)
    return overlay
