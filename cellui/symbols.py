"""Symbols used to draw bars, blocks, lines and canvas markers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Union

BLOCK_FULL = "█"
BLOCK_SEVEN_EIGHTHS = "▉"
BLOCK_THREE_QUARTERS = "▊"
BLOCK_FIVE_EIGHTHS = "▋"
BLOCK_HALF = "▌"
BLOCK_THREE_EIGHTHS = "▍"
BLOCK_ONE_QUARTER = "▎"
BLOCK_ONE_EIGHTH = "▏"

BAR_FULL = "█"
BAR_SEVEN_EIGHTHS = "▇"
BAR_THREE_QUARTERS = "▆"
BAR_FIVE_EIGHTHS = "▅"
BAR_HALF = "▄"
BAR_THREE_EIGHTHS = "▃"
BAR_ONE_QUARTER = "▂"
BAR_ONE_EIGHTH = "▁"

LINE_VERTICAL = "│"
LINE_DOUBLE_VERTICAL = "║"
LINE_THICK_VERTICAL = "┃"

LINE_HORIZONTAL = "─"
LINE_DOUBLE_HORIZONTAL = "═"
LINE_THICK_HORIZONTAL = "━"

LINE_TOP_RIGHT = "┐"
LINE_ROUNDED_TOP_RIGHT = "╮"
LINE_DOUBLE_TOP_RIGHT = "╗"
LINE_THICK_TOP_RIGHT = "┓"

LINE_TOP_LEFT = "┌"
LINE_ROUNDED_TOP_LEFT = "╭"
LINE_DOUBLE_TOP_LEFT = "╔"
LINE_THICK_TOP_LEFT = "┏"

LINE_BOTTOM_RIGHT = "┘"
LINE_ROUNDED_BOTTOM_RIGHT = "╯"
LINE_DOUBLE_BOTTOM_RIGHT = "╝"
LINE_THICK_BOTTOM_RIGHT = "┛"

LINE_BOTTOM_LEFT = "└"
LINE_ROUNDED_BOTTOM_LEFT = "╰"
LINE_DOUBLE_BOTTOM_LEFT = "╚"
LINE_THICK_BOTTOM_LEFT = "┗"

LINE_VERTICAL_LEFT = "┤"
LINE_DOUBLE_VERTICAL_LEFT = "╣"
LINE_THICK_VERTICAL_LEFT = "┫"

LINE_VERTICAL_RIGHT = "├"
LINE_DOUBLE_VERTICAL_RIGHT = "╠"
LINE_THICK_VERTICAL_RIGHT = "┣"

LINE_HORIZONTAL_DOWN = "┬"
LINE_DOUBLE_HORIZONTAL_DOWN = "╦"
LINE_THICK_HORIZONTAL_DOWN = "┳"

LINE_HORIZONTAL_UP = "┴"
LINE_DOUBLE_HORIZONTAL_UP = "╩"
LINE_THICK_HORIZONTAL_UP = "┻"

LINE_CROSS = "┼"
LINE_DOUBLE_CROSS = "╬"
LINE_THICK_CROSS = "╋"

DOT = "•"

BRAILLE_BLANK = 0x2800
_BRAILLE_DOTS = (
    (0x0001, 0x0008),
    (0x0002, 0x0010),
    (0x0004, 0x0020),
    (0x0040, 0x0080),
)


@dataclass(frozen=True)
class _LevelSet:
    full: str
    seven_eighths: str
    three_quarters: str
    five_eighths: str
    half: str
    three_eighths: str
    one_quarter: str
    one_eighth: str
    empty: str


@dataclass(frozen=True)
class BlockSet(_LevelSet):
    """Horizontal partial blocks, from full to empty."""


@dataclass(frozen=True)
class BarSet(_LevelSet):
    """Vertical partial bars, from full to empty."""


BLOCK_THREE_LEVELS = BlockSet(
    full=BLOCK_FULL,
    seven_eighths=BLOCK_FULL,
    three_quarters=BLOCK_HALF,
    five_eighths=BLOCK_HALF,
    half=BLOCK_HALF,
    three_eighths=BLOCK_HALF,
    one_quarter=BLOCK_HALF,
    one_eighth=" ",
    empty=" ",
)

BLOCK_NINE_LEVELS = BlockSet(
    full=BLOCK_FULL,
    seven_eighths=BLOCK_SEVEN_EIGHTHS,
    three_quarters=BLOCK_THREE_QUARTERS,
    five_eighths=BLOCK_FIVE_EIGHTHS,
    half=BLOCK_HALF,
    three_eighths=BLOCK_THREE_EIGHTHS,
    one_quarter=BLOCK_ONE_QUARTER,
    one_eighth=BLOCK_ONE_EIGHTH,
    empty=" ",
)

BAR_THREE_LEVELS = BarSet(
    full=BAR_FULL,
    seven_eighths=BAR_FULL,
    three_quarters=BAR_HALF,
    five_eighths=BAR_HALF,
    half=BAR_HALF,
    three_eighths=BAR_HALF,
    one_quarter=BAR_HALF,
    one_eighth=" ",
    empty=" ",
)

BAR_NINE_LEVELS = BarSet(
    full=BAR_FULL,
    seven_eighths=BAR_SEVEN_EIGHTHS,
    three_quarters=BAR_THREE_QUARTERS,
    five_eighths=BAR_FIVE_EIGHTHS,
    half=BAR_HALF,
    three_eighths=BAR_THREE_EIGHTHS,
    one_quarter=BAR_ONE_QUARTER,
    one_eighth=BAR_ONE_EIGHTH,
    empty=" ",
)


@dataclass(frozen=True)
class LineSet:
    """Box-drawing characters for borders."""

    vertical: str
    horizontal: str
    top_right: str
    top_left: str
    bottom_right: str
    bottom_left: str
    vertical_left: str
    vertical_right: str
    horizontal_down: str
    horizontal_up: str
    cross: str


LINE_NORMAL = LineSet(
    vertical=LINE_VERTICAL,
    horizontal=LINE_HORIZONTAL,
    top_right=LINE_TOP_RIGHT,
    top_left=LINE_TOP_LEFT,
    bottom_right=LINE_BOTTOM_RIGHT,
    bottom_left=LINE_BOTTOM_LEFT,
    vertical_left=LINE_VERTICAL_LEFT,
    vertical_right=LINE_VERTICAL_RIGHT,
    horizontal_down=LINE_HORIZONTAL_DOWN,
    horizontal_up=LINE_HORIZONTAL_UP,
    cross=LINE_CROSS,
)

LINE_ROUNDED = replace(
    LINE_NORMAL,
    top_right=LINE_ROUNDED_TOP_RIGHT,
    top_left=LINE_ROUNDED_TOP_LEFT,
    bottom_right=LINE_ROUNDED_BOTTOM_RIGHT,
    bottom_left=LINE_ROUNDED_BOTTOM_LEFT,
)

LINE_DOUBLE = LineSet(
    vertical=LINE_DOUBLE_VERTICAL,
    horizontal=LINE_DOUBLE_HORIZONTAL,
    top_right=LINE_DOUBLE_TOP_RIGHT,
    top_left=LINE_DOUBLE_TOP_LEFT,
    bottom_right=LINE_DOUBLE_BOTTOM_RIGHT,
    bottom_left=LINE_DOUBLE_BOTTOM_LEFT,
    vertical_left=LINE_DOUBLE_VERTICAL_LEFT,
    vertical_right=LINE_DOUBLE_VERTICAL_RIGHT,
    horizontal_down=LINE_DOUBLE_HORIZONTAL_DOWN,
    horizontal_up=LINE_DOUBLE_HORIZONTAL_UP,
    cross=LINE_DOUBLE_CROSS,
)

LINE_THICK = LineSet(
    vertical=LINE_THICK_VERTICAL,
    horizontal=LINE_THICK_HORIZONTAL,
    top_right=LINE_THICK_TOP_RIGHT,
    top_left=LINE_THICK_TOP_LEFT,
    bottom_right=LINE_THICK_BOTTOM_RIGHT,
    bottom_left=LINE_THICK_BOTTOM_LEFT,
    vertical_left=LINE_THICK_VERTICAL_LEFT,
    vertical_right=LINE_THICK_VERTICAL_RIGHT,
    horizontal_down=LINE_THICK_HORIZONTAL_DOWN,
    horizontal_up=LINE_THICK_HORIZONTAL_UP,
    cross=LINE_THICK_CROSS,
)


class Marker(enum.Enum):
    """How points are plotted; a Blocks, Bars or Lines member is also a marker."""

    DOT = "dot"
    BLOCK = "block"
    BRAILLE = "braille"


class Blocks(enum.Enum):
    """One point per cell, drawn as a horizontal partial block."""

    FULL = BLOCK_FULL
    SEVEN_EIGHTHS = BLOCK_SEVEN_EIGHTHS
    THREE_QUARTERS = BLOCK_THREE_QUARTERS
    FIVE_EIGHTHS = BLOCK_FIVE_EIGHTHS
    HALF = BLOCK_HALF
    THREE_EIGHTHS = BLOCK_THREE_EIGHTHS
    ONE_QUARTER = BLOCK_ONE_QUARTER
    ONE_EIGHTH = BLOCK_ONE_EIGHTH


class Bars(enum.Enum):
    """One point per cell, drawn as a vertical partial bar."""

    FULL = BAR_FULL
    SEVEN_EIGHTHS = BAR_SEVEN_EIGHTHS
    THREE_QUARTERS = BAR_THREE_QUARTERS
    FIVE_EIGHTHS = BAR_FIVE_EIGHTHS
    HALF = BAR_HALF
    THREE_EIGHTHS = BAR_THREE_EIGHTHS
    ONE_QUARTER = BAR_ONE_QUARTER
    ONE_EIGHTH = BAR_ONE_EIGHTH


class Lines(enum.Enum):
    """One point per cell, drawn as a box-drawing character."""

    VERTICAL = LINE_VERTICAL
    DOUBLE_VERTICAL = LINE_DOUBLE_VERTICAL
    THICK_VERTICAL = LINE_THICK_VERTICAL

    HORIZONTAL = LINE_HORIZONTAL
    DOUBLE_HORIZONTAL = LINE_DOUBLE_HORIZONTAL
    THICK_HORIZONTAL = LINE_THICK_HORIZONTAL

    TOP_RIGHT = LINE_TOP_RIGHT
    DOUBLE_TOP_RIGHT = LINE_DOUBLE_TOP_RIGHT
    THICK_TOP_RIGHT = LINE_THICK_TOP_RIGHT
    ROUNDED_TOP_RIGHT = LINE_ROUNDED_TOP_RIGHT

    TOP_LEFT = LINE_TOP_LEFT
    DOUBLE_TOP_LEFT = LINE_DOUBLE_TOP_LEFT
    THICK_TOP_LEFT = LINE_THICK_TOP_LEFT
    ROUNDED_TOP_LEFT = LINE_ROUNDED_TOP_LEFT

    BOTTOM_RIGHT = LINE_BOTTOM_RIGHT
    DOUBLE_BOTTOM_RIGHT = LINE_DOUBLE_BOTTOM_RIGHT
    THICK_BOTTOM_RIGHT = LINE_THICK_BOTTOM_RIGHT
    ROUNDED_BOTTOM_RIGHT = LINE_ROUNDED_BOTTOM_RIGHT

    BOTTOM_LEFT = LINE_BOTTOM_LEFT
    DOUBLE_BOTTOM_LEFT = LINE_DOUBLE_BOTTOM_LEFT
    THICK_BOTTOM_LEFT = LINE_THICK_BOTTOM_LEFT
    ROUNDED_BOTTOM_LEFT = LINE_ROUNDED_BOTTOM_LEFT

    VERTICAL_LEFT = LINE_VERTICAL_LEFT
    DOUBLE_VERTICAL_LEFT = LINE_DOUBLE_VERTICAL_LEFT
    THICK_VERTICAL_LEFT = LINE_THICK_VERTICAL_LEFT

    VERTICAL_RIGHT = LINE_VERTICAL_RIGHT
    DOUBLE_VERTICAL_RIGHT = LINE_DOUBLE_VERTICAL_RIGHT
    THICK_VERTICAL_RIGHT = LINE_THICK_VERTICAL_RIGHT

    HORIZONTAL_DOWN = LINE_HORIZONTAL_DOWN
    DOUBLE_HORIZONTAL_DOWN = LINE_DOUBLE_HORIZONTAL_DOWN
    THICK_HORIZONTAL_DOWN = LINE_THICK_HORIZONTAL_DOWN

    HORIZONTAL_UP = LINE_HORIZONTAL_UP
    DOUBLE_HORIZONTAL_UP = LINE_DOUBLE_HORIZONTAL_UP
    THICK_HORIZONTAL_UP = LINE_THICK_HORIZONTAL_UP

    CROSS = LINE_CROSS
    DOUBLE_CROSS = LINE_DOUBLE_CROSS
    THICK_CROSS = LINE_THICK_CROSS


AnyMarker = Union[Marker, Blocks, Bars, Lines]


def marker_char(marker: AnyMarker) -> str:
    """Return the character a one-point-per-cell marker paints.

    Raises ValueError for the braille marker, which combines up to eight
    points in a cell and has no single character.
    """
    if isinstance(marker, (Blocks, Bars, Lines)):
        return marker.value
    if marker is Marker.DOT:
        return DOT
    if marker is Marker.BLOCK:
        return BAR_HALF
    if marker is Marker.BRAILLE:
        raise ValueError("the braille marker has no single character")
    raise TypeError(f"not a marker: {marker!r}")


def braille_dot(x: int, y: int) -> int:
    """Return the braille bit for point ``(x, y)``, taken within its 2x4 cell."""
    if x < 0 or y < 0:
        raise ValueError(f"coordinates must not be negative, got ({x}, {y})")
    return _BRAILLE_DOTS[y % 4][x % 2]