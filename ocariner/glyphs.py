"""GlyphSet: fixed box-drawing, note and arrow glyphs for the staff table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from ocariner.errors import GlyphDecodeError


class Glyph(Enum):
    """Closed set of cell categories the table can display."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"
    JUNCTION_RIGHT = "junction_right"
    JUNCTION_LEFT = "junction_left"
    JUNCTION_DOWN = "junction_down"
    JUNCTION_UP = "junction_up"
    JUNCTION_CROSS = "junction_cross"
    NOTE = "note"
    BLANK = "blank"
    ARROW_UP = "arrow_up"
    ARROW_UP_DOUBLE = "arrow_up_double"
    ARROW_UP_FILLED = "arrow_up_filled"


# ── UTF-8 byte sequences ─────────────────────────────────────────────────────

#: Box-drawing block U+2500..U+257F, plus the note (U+25C9) and arrows.
UTF8_BYTES: Final[dict[Glyph, bytes]] = {
    Glyph.VERTICAL: b"\xe2\x94\x82",         # │
    Glyph.HORIZONTAL: b"\xe2\x94\x80",       # ─
    Glyph.TOP_LEFT: b"\xe2\x94\x8c",         # ┌
    Glyph.TOP_RIGHT: b"\xe2\x94\x90",        # ┐
    Glyph.BOTTOM_LEFT: b"\xe2\x94\x94",      # └
    Glyph.BOTTOM_RIGHT: b"\xe2\x94\x98",     # ┘
    Glyph.JUNCTION_RIGHT: b"\xe2\x94\x9c",   # ├
    Glyph.JUNCTION_LEFT: b"\xe2\x94\xa4",    # ┤
    Glyph.JUNCTION_DOWN: b"\xe2\x94\xac",    # ┬
    Glyph.JUNCTION_UP: b"\xe2\x94\xb4",      # ┴
    Glyph.JUNCTION_CROSS: b"\xe2\x94\xbc",   # ┼
    Glyph.NOTE: b"\xe2\x97\x89",             # ◉
    Glyph.BLANK: b"\x20",
    Glyph.ARROW_UP: b"\xe2\x86\x91",         # ↑
    Glyph.ARROW_UP_DOUBLE: b"\xe2\x87\x91",  # ⇑
    Glyph.ARROW_UP_FILLED: b"\xe2\xac\x86",  # ⬆
}

#: Plain ASCII fallbacks for terminals without box-drawing fonts.
ASCII_GLYPHS: Final[dict[Glyph, str]] = {
    Glyph.VERTICAL: "|",
    Glyph.HORIZONTAL: "-",
    Glyph.TOP_LEFT: "+",
    Glyph.TOP_RIGHT: "+",
    Glyph.BOTTOM_LEFT: "+",
    Glyph.BOTTOM_RIGHT: "+",
    Glyph.JUNCTION_RIGHT: "+",
    Glyph.JUNCTION_LEFT: "+",
    Glyph.JUNCTION_DOWN: "+",
    Glyph.JUNCTION_UP: "+",
    Glyph.JUNCTION_CROSS: "+",
    Glyph.NOTE: "o",
    Glyph.BLANK: " ",
    Glyph.ARROW_UP: "^",
    Glyph.ARROW_UP_DOUBLE: "^",
    Glyph.ARROW_UP_FILLED: "^",
}

assert set(UTF8_BYTES) == set(Glyph), "every Glyph needs a UTF-8 sequence"
assert set(ASCII_GLYPHS) == set(Glyph), "every Glyph needs an ASCII fallback"


def glyph(category: Glyph, ascii_mode: bool = False) -> str:
    """
    Return the display string for a cell category.

    Args:
        category:   The cell category to draw.
        ascii_mode: Return the single-character ASCII fallback instead.

    Raises:
        GlyphDecodeError: If the stored byte constant is not valid UTF-8.
    """
    if ascii_mode:
        return ASCII_GLYPHS[category]

    raw = UTF8_BYTES[category]
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise GlyphDecodeError(f"Glyph {category.name} has malformed bytes {raw!r}.") from exc


@dataclass(frozen=True)
class GlyphSet:
    """A glyph lookup bound to one output mode, shared by renderer and player."""

    ascii_mode: bool = False

    def __call__(self, category: Glyph) -> str:
        return glyph(category, ascii_mode=self.ascii_mode)
