"""Tests for wordgame.config – environment configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from wordgame import config
from wordgame.core.errors import InvalidInputError


class TestForcedTarget:
    def test_unset(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("WORDGAME_TARGET", raising=False)
        assert config.forced_target() is None

    def test_empty(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WORDGAME_TARGET", "")
        assert config.forced_target() is None

    def test_valid(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WORDGAME_TARGET", "NERDY")
        assert config.forced_target() == "NERDY"

    def test_invalid(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WORDGAME_TARGET", "NERD")
        with pytest.raises(InvalidInputError):
            config.forced_target()


class TestLoadWords:
    def test_bundled(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("WORDGAME_WORDS", raising=False)
        assert len(config.load_words()) > 0

    def test_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        path = tmp_path / "mine.yaml"
        path.write_text("title: Mine\nwords: CRANE SLATE\n", encoding="utf-8")
        monkeypatch.setenv("WORDGAME_WORDS", str(path))
        words = config.load_words()
        assert words.title == "Mine"
        assert words.all() == ["CRANE", "SLATE"]

    def test_override_missing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WORDGAME_WORDS", str(tmp_path / "missing.yaml"))
        with pytest.raises(FileNotFoundError):
            config.load_words()


class TestLogLevel:
    def test_default_info(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("WORDGAME_LOG_LEVEL", raising=False)
        assert config.log_level() == logging.INFO

    def test_env_level_case_insensitive(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WORDGAME_LOG_LEVEL", "debug")
        assert config.log_level() == logging.DEBUG

    def test_unknown_level_falls_back(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WORDGAME_LOG_LEVEL", "chatty")
        assert config.log_level() == logging.INFO
