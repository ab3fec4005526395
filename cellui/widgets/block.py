"""A box with optional borders and a title, wrapping other widgets."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

from ..buffer import Buffer
from ..layout import Alignment, Rect
from ..style import Style
from ..symbols import LINE_DOUBLE, LINE_NORMAL, LINE_ROUNDED, LINE_THICK, LineSet
from ..text import Spans, SpansLike


class Borders(enum.Flag):
    """Which sides of a block show a border; members combine with ``|``."""

    NONE = 0
    TOP = 0b0001
    RIGHT = 0b0010
    BOTTOM = 0b0100
    LEFT = 0b1000
    ALL = TOP | RIGHT | BOTTOM | LEFT


class BorderType(enum.Enum):
    """The line style used to draw borders."""

    PLAIN = "plain"
    ROUNDED = "rounded"
    DOUBLE = "double"
    THICK = "thick"

    def line_symbols(self) -> LineSet:
        """Return the box-drawing characters for this border type."""
        return {
            BorderType.PLAIN: LINE_NORMAL,
            BorderType.ROUNDED: LINE_ROUNDED,
            BorderType.DOUBLE: LINE_DOUBLE,
            BorderType.THICK: LINE_THICK,
        }[self]


@dataclass
class Block:
    """A box that may show borders and a title on its top line.

    ``title`` accepts anything a line of spans can be built from.
    """

    title: Optional[SpansLike] = None
    title_alignment: Alignment = Alignment.LEFT
    borders: Borders = Borders.NONE
    border_style: Style = field(default_factory=Style)
    border_type: BorderType = BorderType.PLAIN
    style: Style = field(default_factory=Style)

    def __post_init__(self) -> None:
        if self.title is not None:
            self.title = Spans.coerce(self.title)

    def inner(self, area: Rect) -> Rect:
        """Return the area left inside the borders and below the title."""
        x, y, width, height = area.x, area.y, area.width, area.height
        if Borders.LEFT in self.borders:
            x = min(x + 1, area.right())
            width = max(width - 1, 0)
        if Borders.TOP in self.borders or self.title is not None:
            y = min(y + 1, area.bottom())
            height = max(height - 1, 0)
        if Borders.RIGHT in self.borders:
            width = max(width - 1, 0)
        if Borders.BOTTOM in self.borders:
            height = max(height - 1, 0)
        return Rect(x, y, width, height)

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the block's style, borders and title into ``buf``."""
        if area.area() == 0:
            return
        buf.set_style(area, self.style)
        symbols = self.border_type.line_symbols()

        def put(x: int, y: int, symbol: str) -> None:
            buf.get(x, y).set_symbol(symbol).set_style(self.border_style)

        if Borders.LEFT in self.borders:
            for y in range(area.top(), area.bottom()):
                put(area.left(), y, symbols.vertical)
        if Borders.TOP in self.borders:
            for x in range(area.left(), area.right()):
                put(x, area.top(), symbols.horizontal)
        if Borders.RIGHT in self.borders:
            for y in range(area.top(), area.bottom()):
                put(area.right() - 1, y, symbols.vertical)
        if Borders.BOTTOM in self.borders:
            for x in range(area.left(), area.right()):
                put(x, area.bottom() - 1, symbols.horizontal)

        if Borders.RIGHT | Borders.BOTTOM in self.borders:
            put(area.right() - 1, area.bottom() - 1, symbols.bottom_right)
        if Borders.RIGHT | Borders.TOP in self.borders:
            put(area.right() - 1, area.top(), symbols.top_right)
        if Borders.LEFT | Borders.BOTTOM in self.borders:
            put(area.left(), area.bottom() - 1, symbols.bottom_left)
        if Borders.LEFT | Borders.TOP in self.borders:
            put(area.left(), area.top(), symbols.top_left)

        if self.title is not None:
            title = self.title
            left_dx = 1 if Borders.LEFT in self.borders else 0
            right_dx = 1 if Borders.RIGHT in self.borders else 0
            title_area_width = max(area.width - left_dx - right_dx, 0)
            free = max(area.width - title.width(), 0)
            if self.title_alignment is Alignment.CENTER:
                title_dx = free // 2
            elif self.title_alignment is Alignment.RIGHT:
                title_dx = max(free - right_dx, 0)
            else:
                title_dx = left_dx
            buf.set_spans(area.left() + title_dx, area.top(), title, title_area_width)