import pytest

from cellui.symbols import (
    BAR_HALF,
    BAR_NINE_LEVELS,
    BAR_THREE_LEVELS,
    BLOCK_THREE_LEVELS,
    BRAILLE_BLANK,
    DOT,
    LINE_DOUBLE,
    LINE_NORMAL,
    LINE_ROUNDED,
    LINE_THICK,
    Bars,
    Blocks,
    Lines,
    Marker,
    braille_dot,
    marker_char,
)


def test_dot_marker_uses_bullet():
    assert marker_char(Marker.DOT) == DOT == "•"


def test_block_marker_uses_lower_half_bar():
    assert marker_char(Marker.BLOCK) == "▄"
    assert marker_char(Marker.BLOCK) == BAR_HALF


def test_braille_marker_has_no_single_char():
    with pytest.raises(ValueError):
        marker_char(Marker.BRAILLE)


def test_non_marker_is_rejected():
    with pytest.raises(TypeError):
        marker_char("x")


@pytest.mark.parametrize("marker", [*Blocks, *Bars, *Lines])
def test_shape_markers_paint_their_own_char(marker):
    char = marker_char(marker)
    assert char == marker.value
    assert len(char) == 1


def test_specific_shape_markers():
    assert marker_char(Blocks.HALF) == "▌"
    assert marker_char(Bars.ONE_EIGHTH) == "▁"
    assert marker_char(Lines.ROUNDED_TOP_LEFT) == "╭"


def test_braille_dots_match_cell_layout():
    assert braille_dot(0, 0) == 0x0001
    assert braille_dot(1, 0) == 0x0008
    assert braille_dot(0, 3) == 0x0040
    assert braille_dot(1, 3) == 0x0080


def test_braille_dots_wrap_per_cell_and_are_distinct():
    bits = {braille_dot(x, y) for x in range(2) for y in range(4)}
    assert len(bits) == 8
    assert sum(bits) == 0xFF
    assert braille_dot(3, 6) == braille_dot(1, 2)
    assert chr(BRAILLE_BLANK | sum(bits)) == "⣿"


def test_braille_dot_rejects_negative():
    with pytest.raises(ValueError):
        braille_dot(-1, 0)


def test_rounded_lines_share_sides_with_normal():
    assert marker_char(Lines.VERTICAL) == LINE_ROUNDED.vertical == LINE_NORMAL.vertical
    assert marker_char(Lines.HORIZONTAL) == LINE_ROUNDED.horizontal == LINE_NORMAL.horizontal
    assert marker_char(Lines.ROUNDED_TOP_LEFT) == LINE_ROUNDED.top_left == "╭"
    assert marker_char(Lines.CROSS) == LINE_ROUNDED.cross == LINE_NORMAL.cross


def test_line_sets_corners():
    assert marker_char(Lines.TOP_LEFT) == LINE_NORMAL.top_left == "┌"
    assert marker_char(Lines.DOUBLE_BOTTOM_RIGHT) == LINE_DOUBLE.bottom_right == "╝"
    assert marker_char(Lines.THICK_VERTICAL) == LINE_THICK.vertical == "┃"


def test_three_level_sets_round_levels():
    assert marker_char(Blocks.FULL) == BLOCK_THREE_LEVELS.seven_eighths
    assert marker_char(Blocks.HALF) == BLOCK_THREE_LEVELS.one_quarter
    assert BLOCK_THREE_LEVELS.one_eighth == " "
    assert marker_char(Bars.HALF) == BAR_THREE_LEVELS.three_quarters


def test_nine_level_bars_are_all_distinct_except_empty():
    levels = [
        BAR_NINE_LEVELS.full,
        BAR_NINE_LEVELS.seven_eighths,
        BAR_NINE_LEVELS.three_quarters,
        BAR_NINE_LEVELS.five_eighths,
        BAR_NINE_LEVELS.half,
        BAR_NINE_LEVELS.three_eighths,
        BAR_NINE_LEVELS.one_quarter,
        BAR_NINE_LEVELS.one_eighth,
        BAR_NINE_LEVELS.empty,
    ]
    assert len(set(levels)) == 9
    assert levels == [marker_char(bar) for bar in Bars] + [" "]