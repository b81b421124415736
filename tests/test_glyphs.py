"""Unit tests for the glyph lookup."""

import pytest

from ocariner.glyphs import Glyph, GlyphSet, glyph


@pytest.mark.parametrize("category", list(Glyph))
def test_every_glyph_is_non_empty_utf8(category: Glyph) -> None:
    text = glyph(category)
    assert text
    assert text.encode("utf-8").decode("utf-8") == text


def test_junction_left_bytes() -> None:
    assert glyph(Glyph.JUNCTION_LEFT).encode("utf-8") == bytes([0xE2, 0x94, 0xA4])


def test_bottom_right_is_not_horizontal() -> None:
    assert glyph(Glyph.BOTTOM_RIGHT) != glyph(Glyph.HORIZONTAL)


def test_blank_is_a_space() -> None:
    assert glyph(Glyph.BLANK) == " "


def test_box_drawing_glyphs_are_single_code_points() -> None:
    for category in Glyph:
        assert len(glyph(category)) == 1


@pytest.mark.parametrize("category", list(Glyph))
def test_ascii_mode_returns_single_ascii_char(category: Glyph) -> None:
    text = glyph(category, ascii_mode=True)
    assert len(text) == 1
    assert text.isascii()


def test_glyph_set_is_bound_to_its_mode() -> None:
    assert GlyphSet()(Glyph.NOTE) == "◉"
    assert GlyphSet(ascii_mode=True)(Glyph.NOTE) == "o"
