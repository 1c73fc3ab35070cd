"""Tests for wordgame.ui.colors – validation palette and color blending."""

from __future__ import annotations

import pytest

from wordgame.core.scoring import Validation
from wordgame.ui.colors import BoardColors, blend_hex, hover_color, pressed_color, validation_color


# ===========================================================================
# BoardColors / validation_color
# ===========================================================================

class TestValidationColor:
    @pytest.mark.parametrize("validation", list(Validation))
    def test_every_validation_has_hex(self, validation: Validation):
        color = validation_color(validation)
        assert color.startswith("#")
        assert len(color) == 7

    def test_distinct_colors(self):
        colors = {validation_color(v) for v in Validation}
        assert len(colors) == len(Validation)

    def test_correct_is_green(self):
        assert validation_color(Validation.CORRECT) == BoardColors.CORRECT

    def test_wrong_place_is_yellow(self):
        assert validation_color(Validation.WRONG_PLACE) == BoardColors.WRONG_PLACE


# ===========================================================================
# blend_hex – happy paths
# ===========================================================================

class TestBlendHexHappy:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint(self):
        result = blend_hex("#000000", "#FFFFFF", 0.5)
        r = int(result[1:3], 16)
        assert 126 <= r <= 128

    def test_same_color(self):
        assert blend_hex("#ABCDEF", "#ABCDEF", 0.5) == "#ABCDEF"


# ===========================================================================
# blend_hex – edge cases
# ===========================================================================

class TestBlendHexEdges:
    def test_t_clamped_below(self):
        assert blend_hex("#FF0000", "#0000FF", -1.0) == "#FF0000"

    def test_t_clamped_above(self):
        assert blend_hex("#FF0000", "#0000FF", 2.0) == "#0000FF"

    def test_short_hex_returns_a(self):
        assert blend_hex("#FFF", "#000000", 0.5) == "#FFF"

    def test_invalid_digits_return_a(self):
        assert blend_hex("#GGGGGG", "#000000", 0.5) == "#GGGGGG"

    def test_whitespace_stripped(self):
        assert blend_hex("  #000000 ", "#FFFFFF", 0.0) == "#000000"


# ===========================================================================
# hover / pressed shades
# ===========================================================================

class TestShades:
    def test_hover_is_lighter(self):
        base = BoardColors.CORRECT
        assert int(hover_color(base)[1:3], 16) > int(base[1:3], 16)

    def test_pressed_is_darker(self):
        base = BoardColors.CORRECT
        assert int(pressed_color(base)[3:5], 16) < int(base[3:5], 16)
