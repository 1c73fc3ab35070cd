"""Exceptions raised by the word game core."""


class WordGameError(Exception):
    """Base class for word game errors."""


class InvalidInputError(WordGameError, ValueError):
    """A target word or key event that can never be valid (e.g. ``"NERD"`` or ``"7"``)."""
