"""Board palette and color utilities for the UI."""

from wordgame.core.scoring import Validation


class BoardColors:
    """Dark board palette; tile colors follow the usual Wordle scheme."""

    BG = "#121213"
    TEXT = "#ffffff"
    TEXT_MUTED = "#818384"

    UNKNOWN = "#808080"
    NOT_PRESENT = "#333333"
    WRONG_PLACE = "#c9b458"
    CORRECT = "#6aaa64"

    EMPTY_TILE = "#1e1e1f"
    TILE_BORDER = "#3a3a3c"
    ACTIVE_BORDER = "#d7dadc"

    OVERLAY_CARD = "#ffffff"
    OVERLAY_TEXT = "#1a1a1b"


_VALIDATION_COLORS = {
    Validation.UNKNOWN: BoardColors.UNKNOWN,
    Validation.NOT_PRESENT: BoardColors.NOT_PRESENT,
    Validation.WRONG_PLACE: BoardColors.WRONG_PLACE,
    Validation.CORRECT: BoardColors.CORRECT,
}


def validation_color(validation: Validation) -> str:
    """Background color for a tile or key with the given validation."""
    return _VALIDATION_COLORS[validation]


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        r = int(ar + (br - ar) * t)
        g = int(ag + (bg - ag) * t)
        bl = int(ab + (bb - ab) * t)
        return f"#{r:02X}{g:02X}{bl:02X}"
    except ValueError:
        return a


def hover_color(hex_color: str) -> str:
    """Slightly lighter shade used for hovered keys."""
    return blend_hex(hex_color, "#ffffff", 0.15)


def pressed_color(hex_color: str) -> str:
    """Slightly darker shade used for pressed keys."""
    return blend_hex(hex_color, "#000000", 0.2)
