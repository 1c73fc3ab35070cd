from __future__ import annotations

import random
import re
from pathlib import Path
from typing import List, Optional

import yaml

_WORD_RE = re.compile(r"[A-Z]{5}")


def default_words_path() -> Path:
    return Path(__file__).resolve().parent.parent / "data" / "words.yaml"


class WordRepository:
    """Pool of target words read from a YAML file with ``title`` and ``words`` keys."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else default_words_path()
        self.title, self._words = self._load_words()

    def all(self) -> List[str]:
        return list(self._words)

    def random(self, rng: Optional[random.Random] = None) -> str:
        return (rng or random).choice(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.strip().upper() in self._words

    def _load_words(self) -> tuple[str, List[str]]:
        if not self._path.exists():
            raise FileNotFoundError(f"Word list not found: {self._path}")

        name = self._path.name
        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{name}: expected YAML with 'title' and 'words'")
        title = raw.get("title")
        content = raw.get("words")
        if not title or not isinstance(title, str):
            raise ValueError(f"{name}: missing or invalid 'title'")
        if content is None:
            raise ValueError(f"{name}: missing 'words'")
        if isinstance(content, list):
            entries = [str(item).strip() for item in content if str(item).strip()]
        else:
            # allow words as a whitespace separated block
            entries = str(content).split()

        words: List[str] = []
        seen: set[str] = set()
        for entry in entries:
            word = entry.upper()
            if not _WORD_RE.fullmatch(word):
                raise ValueError(f"{name}: {entry!r} is not a five-letter word")
            if word not in seen:
                seen.add(word)
                words.append(word)
        if not words:
            raise ValueError(f"{name}: 'words' is empty")
        return title.strip(), words
