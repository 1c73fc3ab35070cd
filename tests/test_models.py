"""Tests for wordgame.ui.models – on-screen keyboard layout."""

from __future__ import annotations

import string

from wordgame.core.game import Key, KeyKind
from wordgame.core.scoring import Validation
from wordgame.ui.models import KEYBOARD_LAYOUT, KeyCap, build_keyboard


class TestKeyCap:
    def test_defaults(self):
        cap = KeyCap(key=Key.letter("A"), label="A")
        assert cap.validation is Validation.UNKNOWN
        assert cap.width == 1.0
        assert cap.is_letter

    def test_enter_is_not_letter(self):
        assert not KeyCap(key=Key.ENTER, label="ENTER").is_letter


class TestBuildKeyboard:
    def test_layout_covers_alphabet(self):
        assert sorted("".join(KEYBOARD_LAYOUT)) == list(string.ascii_uppercase)

    def test_row_lengths(self):
        rows = build_keyboard({})
        assert [len(r) for r in rows] == [10, 9, 9]

    def test_enter_and_delete_frame_last_row(self):
        last = build_keyboard({})[-1]
        assert last[0].key == Key.ENTER
        assert last[-1].key == Key.DELETE
        assert last[0].width > 1.0

    def test_letter_keys_send_their_letter(self):
        first = build_keyboard({})[0]
        assert [cap.key for cap in first] == [Key.letter(ch) for ch in "QWERTYUIOP"]
        assert all(cap.key.kind is KeyKind.LETTER for cap in first)

    def test_colors_from_overlay(self):
        overlay = {"Q": Validation.CORRECT, "Z": Validation.NOT_PRESENT}
        rows = build_keyboard(overlay)
        assert rows[0][0].validation is Validation.CORRECT
        assert rows[2][1].validation is Validation.NOT_PRESENT
        assert rows[1][0].validation is Validation.UNKNOWN

    def test_special_keys_stay_unknown(self):
        last = build_keyboard({"Z": Validation.CORRECT})[-1]
        assert last[0].validation is Validation.UNKNOWN
        assert last[-1].validation is Validation.UNKNOWN
