"""A grid of styled cells and the diffing used to update the screen."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

from .layout import Rect
from .style import NO_MODIFIER, AnyColor, Color, Modifier, Style
from .text import Span, Spans, SpansLike, display_width, graphemes


@dataclass
class Cell:
    """One terminal cell: a grapheme with its colors and modifiers."""

    symbol: str = " "
    fg: AnyColor = Color.RESET
    bg: AnyColor = Color.RESET
    modifier: Modifier = NO_MODIFIER

    def set_symbol(self, symbol: str) -> "Cell":
        """Replace the symbol; returns the cell for chaining."""
        self.symbol = symbol
        return self

    def set_style(self, style: Style) -> "Cell":
        """Apply an incremental style; returns the cell for chaining."""
        if style.fg is not None:
            self.fg = style.fg
        if style.bg is not None:
            self.bg = style.bg
        combined = self.modifier | style.add_modifier
        self.modifier = Modifier(combined.value & ~style.sub_modifier.value)
        return self

    def style(self) -> Style:
        """Return the cell's look as a style."""
        return Style(fg=self.fg, bg=self.bg, add_modifier=self.modifier)

    def reset(self) -> None:
        """Return the cell to a blank, unstyled state."""
        self.symbol = " "
        self.fg = Color.RESET
        self.bg = Color.RESET
        self.modifier = NO_MODIFIER


@dataclass
class Buffer:
    """The desired content of an area of the terminal.

    ``content`` holds ``area.width * area.height`` cells in row-major order.
    Coordinates passed to the methods are global, offset by the area's origin.
    """

    area: Rect = field(default_factory=Rect)
    content: list[Cell] = field(default_factory=list)

    @classmethod
    def empty(cls, area: Rect) -> "Buffer":
        """Return a buffer of blank cells."""
        return cls.filled(area, Cell())

    @classmethod
    def filled(cls, area: Rect, cell: Cell) -> "Buffer":
        """Return a buffer whose cells are all copies of ``cell``."""
        return cls(area, [replace(cell) for _ in range(area.area())])

    @classmethod
    def with_lines(cls, lines: Iterable[str]) -> "Buffer":
        """Return a buffer at the origin holding the given lines."""
        lines = list(lines)
        width = max((display_width(line) for line in lines), default=0)
        buffer = cls.empty(Rect(0, 0, width, len(lines)))
        for y, line in enumerate(lines):
            buffer.set_string(0, y, line, Style())
        return buffer

    def index_of(self, x: int, y: int) -> int:
        """Return the content index of the cell at global ``(x, y)``.

        Raises IndexError when the position lies outside the area.
        """
        area = self.area
        if not (area.left() <= x < area.right() and area.top() <= y < area.bottom()):
            raise IndexError(
                f"Trying to access position outside the buffer: x={x}, y={y}, area={area!r}"
            )
        return (y - area.y) * area.width + (x - area.x)

    def pos_of(self, i: int) -> tuple[int, int]:
        """Return the global coordinates of the cell at content index ``i``.

        Raises IndexError when the index lies outside the content.
        """
        if not 0 <= i < len(self.content):
            raise IndexError(
                "Trying to get the coords of a cell outside the buffer: "
                f"i={i} len={len(self.content)}"
            )
        return self.area.x + i % self.area.width, self.area.y + i // self.area.width

    def get(self, x: int, y: int) -> Cell:
        """Return the cell at global ``(x, y)``; changes to it affect the buffer."""
        return self.content[self.index_of(x, y)]

    def set_string(self, x: int, y: int, string: str, style: Style) -> None:
        """Print a string starting at ``(x, y)``, clipped at the end of the line."""
        self.set_stringn(x, y, string, sys.maxsize, style)

    def set_stringn(
        self, x: int, y: int, string: str, width: int, style: Style
    ) -> tuple[int, int]:
        """Print at most ``width`` columns of a string, clipped at the end of the line.

        Returns the position just after the last printed grapheme.
        """
        index = self.index_of(x, y)
        x_offset = x
        max_offset = min(self.area.right(), width + x)
        for symbol in graphemes(string):
            symbol_width = display_width(symbol)
            if symbol_width == 0:
                continue
            if symbol_width > max(max_offset - x_offset, 0):
                break
            self.content[index].set_symbol(symbol).set_style(style)
            # Cells hidden behind a wide grapheme are blanked.
            for hidden in self.content[index + 1 : index + symbol_width]:
                hidden.reset()
            index += symbol_width
            x_offset += symbol_width
        return x_offset, y

    def set_spans(
        self, x: int, y: int, spans: SpansLike, width: int
    ) -> tuple[int, int]:
        """Print a line of spans within ``width`` columns; returns the end position."""
        remaining = width
        for span in Spans.coerce(spans):
            if remaining == 0:
                break
            end_x, _ = self.set_stringn(x, y, span.content, remaining, span.style)
            remaining = max(remaining - max(end_x - x, 0), 0)
            x = end_x
        return x, y

    def set_span(self, x: int, y: int, span: Span, width: int) -> tuple[int, int]:
        """Print a single span within ``width`` columns; returns the end position."""
        return self.set_stringn(x, y, span.content, width, span.style)

    def set_style(self, area: Rect, style: Style) -> None:
        """Apply a style to every cell of ``area``."""
        for y in range(area.top(), area.bottom()):
            for x in range(area.left(), area.right()):
                self.get(x, y).set_style(style)

    def resize(self, area: Rect) -> None:
        """Map the buffer onto ``area``, truncating or padding with blank cells."""
        length = area.area()
        if len(self.content) > length:
            del self.content[length:]
        else:
            self.content.extend(Cell() for _ in range(length - len(self.content)))
        self.area = area

    def reset(self) -> None:
        """Blank every cell."""
        for cell in self.content:
            cell.reset()

    def merge(self, other: "Buffer") -> None:
        """Grow to the union of both areas and copy ``other`` over this buffer."""
        area = self.area.union(other.area)
        content = [Cell() for _ in range(area.area())]
        for source in (self, other):
            for i, cell in enumerate(source.content):
                x, y = source.pos_of(i)
                content[(y - area.y) * area.width + (x - area.x)] = replace(cell)
        self.area = area
        self.content = content

    def diff(self, other: "Buffer") -> list[tuple[int, int, Cell]]:
        """Return the ``(x, y, cell)`` updates needed to turn this buffer into ``other``.

        Positions are relative to the area's origin. Buffers are assumed
        well formed: a wide grapheme is followed by blank cells, which are
        skipped, while cells overlapped by a previous wide grapheme are
        redrawn.
        """
        width = self.area.width
        updates: list[tuple[int, int, Cell]] = []
        invalidated = 0
        to_skip = 0
        for i, (current, previous) in enumerate(zip(other.content, self.content)):
            if (current != previous or invalidated > 0) and to_skip == 0:
                updates.append((i % width, i // width, current))
            current_width = display_width(current.symbol)
            to_skip = max(current_width - 1, 0)
            affected = max(current_width, display_width(previous.symbol))
            invalidated = max(max(affected, invalidated) - 1, 0)
        return updates


def _cell_with(symbol: str, style: Optional[Style] = None) -> Cell:
    cell = Cell(symbol)
    if style is not None:
        cell.set_style(style)
    return cell