"""Startup configuration read from the environment."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from wordgame.core.game import validate_target
from wordgame.core.words import WordRepository

logger = logging.getLogger(__name__)


def log_level() -> int:
    """Level named by ``WORDGAME_LOG_LEVEL``; INFO when unset or unknown."""
    name = os.environ.get("WORDGAME_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def load_words() -> WordRepository:
    """Load the bundled word list, or the file named by ``WORDGAME_WORDS``."""
    override = os.environ.get("WORDGAME_WORDS")
    if override:
        logger.info("Using word list: %s", override)
        return WordRepository(Path(override))
    return WordRepository()


def forced_target() -> Optional[str]:
    """Target from ``WORDGAME_TARGET``, validated the same way as any game target."""
    target = os.environ.get("WORDGAME_TARGET")
    if not target:
        return None
    return validate_target(target)
