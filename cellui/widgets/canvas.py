"""A widget for drawing shapes and labels at sub-cell resolution."""

from __future__ import annotations

import abc
import math
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, Union

from ..buffer import Buffer
from ..layout import Rect
from ..style import AnyColor, Color, Style
from ..symbols import BRAILLE_BLANK, AnyMarker, Marker, braille_dot, marker_char
from ..text import Spans, SpansLike
from .block import Block

_U16_MAX = 0xFFFF
_BRAILLE_BLANK_CHAR = chr(BRAILLE_BLANK)

Bounds = tuple[float, float]


def _to_index(value: float) -> int:
    """Convert a non-negative float to a grid index, saturating like a cast."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return _U16_MAX
    return int(value)


def _scale(offset: float, resolution: float, extent: float) -> int:
    numerator = offset * resolution
    if extent == 0:
        if numerator == 0 or math.isnan(numerator):
            return 0
        return _U16_MAX if numerator > 0 else 0
    return _to_index(numerator / extent)


class Shape(abc.ABC):
    """Something that can be drawn on a canvas."""

    @abc.abstractmethod
    def draw(self, painter: "Painter") -> None:
        """Paint the shape's points with ``painter``."""


@dataclass(frozen=True)
class _Layer:
    string: str
    colors: tuple[AnyColor, ...]


class _Grid(abc.ABC):
    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.colors: list[AnyColor] = [Color.RESET] * (width * height)

    @abc.abstractmethod
    def resolution(self) -> tuple[float, float]: ...

    @abc.abstractmethod
    def paint(self, x: int, y: int, color: AnyColor) -> None: ...

    @abc.abstractmethod
    def save(self) -> _Layer: ...

    @abc.abstractmethod
    def reset(self) -> None: ...


class _BrailleGrid(_Grid):
    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height)
        self.cells = [BRAILLE_BLANK] * (width * height)

    def resolution(self) -> tuple[float, float]:
        return self.width * 2.0 - 1.0, self.height * 4.0 - 1.0

    def save(self) -> _Layer:
        return _Layer("".join(map(chr, self.cells)), tuple(self.colors))

    def reset(self) -> None:
        self.cells = [BRAILLE_BLANK] * len(self.cells)
        self.colors = [Color.RESET] * len(self.colors)

    def paint(self, x: int, y: int, color: AnyColor) -> None:
        index = y // 4 * self.width + x // 2
        if index < len(self.cells):
            self.cells[index] |= braille_dot(x, y)
            self.colors[index] = color


class _CharGrid(_Grid):
    def __init__(self, width: int, height: int, cell_char: str) -> None:
        super().__init__(width, height)
        self.cells = [" "] * (width * height)
        self.cell_char = cell_char

    def resolution(self) -> tuple[float, float]:
        return self.width - 1.0, self.height - 1.0

    def save(self) -> _Layer:
        return _Layer("".join(self.cells), tuple(self.colors))

    def reset(self) -> None:
        self.cells = [" "] * len(self.cells)
        self.colors = [Color.RESET] * len(self.colors)

    def paint(self, x: int, y: int, color: AnyColor) -> None:
        index = y * self.width + x
        if index < len(self.cells):
            self.cells[index] = self.cell_char
            self.colors[index] = color


@dataclass
class Label:
    """Text printed on the canvas at a point in canvas coordinates."""

    x: float
    y: float
    spans: SpansLike

    def __post_init__(self) -> None:
        self.spans = Spans.coerce(self.spans)


class Context:
    """The state of a canvas while shapes are drawn on it."""

    def __init__(
        self,
        width: int,
        height: int,
        x_bounds: Sequence[float],
        y_bounds: Sequence[float],
        marker: AnyMarker,
    ) -> None:
        self.x_bounds: Bounds = (float(x_bounds[0]), float(x_bounds[1]))
        self.y_bounds: Bounds = (float(y_bounds[0]), float(y_bounds[1]))
        if marker is Marker.BRAILLE:
            self._grid: _Grid = _BrailleGrid(width, height)
        else:
            self._grid = _CharGrid(width, height, marker_char(marker))
        self._dirty = False
        self.layers: list[_Layer] = []
        self.labels: list[Label] = []

    def draw(self, shape: Shape) -> None:
        """Draw a shape on the current layer."""
        self._dirty = True
        shape.draw(Painter(self))

    def layer(self) -> None:
        """Save the current layer and start a new one above it."""
        self.layers.append(self._grid.save())
        self._grid.reset()
        self._dirty = False

    def print(self, x: float, y: float, spans: SpansLike) -> None:
        """Print text at ``(x, y)`` in canvas coordinates."""
        self.labels.append(Label(x, y, spans))

    def finish(self) -> None:
        """Save the current layer if anything was drawn on it."""
        if self._dirty:
            self.layer()


class Painter:
    """Maps canvas coordinates to grid points and paints them."""

    def __init__(self, context: Context) -> None:
        self._context = context
        self._resolution = context._grid.resolution()

    def get_point(self, x: float, y: float) -> Optional[tuple[int, int]]:
        """Return the grid point for ``(x, y)``, or None if it is out of bounds."""
        left, right = self._context.x_bounds
        bottom, top = self._context.y_bounds
        if x < left or x > right or y < bottom or y > top:
            return None
        width = abs(right - left)
        height = abs(top - bottom)
        if width == 0.0 or height == 0.0:
            return None
        return (
            _to_index((x - left) * self._resolution[0] / width),
            _to_index((top - y) * self._resolution[1] / height),
        )

    def paint(self, x: int, y: int, color: AnyColor) -> None:
        """Paint a grid point; points outside the grid are ignored."""
        self._context._grid.paint(x, y, color)


def _draw_line_low(
    painter: Painter, x1: int, y1: int, x2: int, y2: int, color: AnyColor
) -> None:
    dx = x2 - x1
    dy = abs(y2 - y1)
    d = 2 * dy - dx
    y = y1
    for x in range(x1, x2 + 1):
        painter.paint(x, y, color)
        if d > 0:
            y = max(y - 1, 0) if y1 > y2 else y + 1
            d -= 2 * dx
        d += 2 * dy


def _draw_line_high(
    painter: Painter, x1: int, y1: int, x2: int, y2: int, color: AnyColor
) -> None:
    dx = abs(x2 - x1)
    dy = y2 - y1
    d = 2 * dx - dy
    x = x1
    for y in range(y1, y2 + 1):
        painter.paint(x, y, color)
        if d > 0:
            x = max(x - 1, 0) if x1 > x2 else x + 1
            d -= 2 * dy
        d += 2 * dx


@dataclass
class Line(Shape):
    """A straight line from ``(x1, y1)`` to ``(x2, y2)``."""

    x1: float
    y1: float
    x2: float
    y2: float
    color: AnyColor = Color.RESET

    def draw(self, painter: Painter) -> None:
        start = painter.get_point(self.x1, self.y1)
        end = painter.get_point(self.x2, self.y2)
        if start is None or end is None:
            return
        (x1, y1), (x2, y2) = start, end
        dx, dy = abs(x2 - x1), abs(y2 - y1)
        if dx == 0:
            for y in range(min(y1, y2), max(y1, y2) + 1):
                painter.paint(x1, y, self.color)
        elif dy == 0:
            for x in range(min(x1, x2), max(x1, x2) + 1):
                painter.paint(x, y1, self.color)
        elif dy < dx:
            if x1 > x2:
                _draw_line_low(painter, x2, y2, x1, y1, self.color)
            else:
                _draw_line_low(painter, x1, y1, x2, y2, self.color)
        elif y1 > y2:
            _draw_line_high(painter, x2, y2, x1, y1, self.color)
        else:
            _draw_line_high(painter, x1, y1, x2, y2, self.color)


@dataclass
class Points(Shape):
    """A group of points; each is ``(x, y, drawn)`` and only drawn ones are painted."""

    coords: Sequence[tuple[float, float, bool]] = ()
    color: AnyColor = Color.RESET

    def draw(self, painter: Painter) -> None:
        for x, y, drawn in self.coords:
            if not drawn:
                continue
            point = painter.get_point(x, y)
            if point is not None:
                painter.paint(*point, self.color)


@dataclass
class Rectangle(Shape):
    """The outline of a rectangle with its lower left corner at ``(x, y)``."""

    x: float
    y: float
    width: float
    height: float
    color: AnyColor = Color.RESET

    def draw(self, painter: Painter) -> None:
        left, bottom = self.x, self.y
        right, top = self.x + self.width, self.y + self.height
        for line in (
            Line(left, bottom, left, top, self.color),
            Line(left, top, right, top, self.color),
            Line(right, bottom, right, top, self.color),
            Line(left, bottom, right, bottom, self.color),
        ):
            line.draw(painter)


@dataclass
class Canvas:
    """A widget that runs ``painter`` on a fresh context and renders the result.

    Braille markers give up to eight points per cell; other markers give one.
    """

    block: Optional[Block] = None
    x_bounds: Bounds = (0.0, 0.0)
    y_bounds: Bounds = (0.0, 0.0)
    painter: Optional[Callable[[Context], None]] = None
    background_color: AnyColor = Color.RESET
    marker: Union[AnyMarker] = Marker.BRAILLE

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the canvas into ``buf``."""
        if self.block is not None:
            canvas_area = self.block.inner(area)
            self.block.render(area, buf)
        else:
            canvas_area = area

        buf.set_style(canvas_area, Style().with_bg(self.background_color))

        if self.painter is None:
            return

        ctx = Context(
            canvas_area.width,
            canvas_area.height,
            self.x_bounds,
            self.y_bounds,
            self.marker,
        )
        self.painter(ctx)
        ctx.finish()

        width = canvas_area.width
        for layer in ctx.layers:
            for i, (ch, color) in enumerate(zip(layer.string, layer.colors)):
                if ch in (" ", _BRAILLE_BLANK_CHAR):
                    continue
                cell = buf.get(canvas_area.left() + i % width, canvas_area.top() + i // width)
                cell.set_symbol(ch)
                cell.fg = color

        left, right = self.x_bounds
        bottom, top = self.y_bounds
        x_extent = abs(right - left)
        y_extent = abs(top - bottom)
        x_resolution = canvas_area.width - 1.0
        y_resolution = canvas_area.height - 1.0
        for label in ctx.labels:
            if not (left <= label.x <= right and bottom <= label.y <= top):
                continue
            x = _scale(label.x - left, x_resolution, x_extent) + canvas_area.left()
            y = _scale(top - label.y, y_resolution, y_extent) + canvas_area.top()
            buf.set_spans(x, y, label.spans, max(canvas_area.right() - x, 0))