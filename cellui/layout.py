"""Rectangles and a constraint-based layout that splits them."""

from __future__ import annotations

import abc
import enum
import functools
import math
from dataclasses import dataclass, field, replace
from itertools import pairwise
from typing import Union

from .solver import WEAK, LinearConstraint, Relation, Solver, Variable

_U16_MAX = 0xFFFF


class Corner(enum.Enum):
    """A corner of a rectangle."""

    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM_LEFT = "bottom_left"


class Direction(enum.Enum):
    """The axis along which a layout splits its area."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Alignment(enum.Enum):
    """Horizontal alignment of content."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Constraint(abc.ABC):
    """A preferred size for one chunk of a layout."""

    @abc.abstractmethod
    def apply(self, length: int) -> int:
        """Return the size this constraint gives within ``length``."""

    @abc.abstractmethod
    def _size_constraint(self, size: Variable, total: int) -> LinearConstraint:
        """Return the weak solver constraint on a chunk's size."""


@dataclass(frozen=True)
class Percentage(Constraint):
    """A percentage of the available length."""

    value: int

    def apply(self, length: int) -> int:
        return (length * self.value // 100) & _U16_MAX

    def _size_constraint(self, size: Variable, total: int) -> LinearConstraint:
        return LinearConstraint(size, Relation.EQ, self.value * total / 100.0, WEAK)


@dataclass(frozen=True)
class Ratio(Constraint):
    """A fraction ``numerator / denominator`` of the available length."""

    numerator: int
    denominator: int

    def apply(self, length: int) -> int:
        return (self.numerator * length // self.denominator) & _U16_MAX

    def _size_constraint(self, size: Variable, total: int) -> LinearConstraint:
        return LinearConstraint(
            size, Relation.EQ, total * self.numerator / self.denominator, WEAK
        )


@dataclass(frozen=True)
class Length(Constraint):
    """A fixed length."""

    value: int

    def apply(self, length: int) -> int:
        return min(length, self.value)

    def _size_constraint(self, size: Variable, total: int) -> LinearConstraint:
        return LinearConstraint(size, Relation.EQ, self.value, WEAK)


@dataclass(frozen=True)
class Max(Constraint):
    """At most the given length."""

    value: int

    def apply(self, length: int) -> int:
        return min(length, self.value)

    def _size_constraint(self, size: Variable, total: int) -> LinearConstraint:
        return LinearConstraint(size, Relation.LE, self.value, WEAK)


@dataclass(frozen=True)
class Min(Constraint):
    """At least the given length."""

    value: int

    def apply(self, length: int) -> int:
        return max(length, self.value)

    def _size_constraint(self, size: Variable, total: int) -> LinearConstraint:
        return LinearConstraint(size, Relation.GE, self.value, WEAK)


@dataclass(frozen=True)
class Margin:
    """Space kept free on each side of an area."""

    vertical: int = 0
    horizontal: int = 0


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @staticmethod
    def new(x: int, y: int, width: int, height: int) -> "Rect":
        """Create a rect whose area fits in 16 bits, keeping the aspect ratio if clipped."""
        if width * height > _U16_MAX:
            aspect_ratio = width / height
            clipped_height = math.sqrt(_U16_MAX / aspect_ratio)
            clipped_width = clipped_height * aspect_ratio
            width, height = int(clipped_width), int(clipped_height)
        return Rect(x, y, width, height)

    def area(self) -> int:
        """Return the number of cells covered."""
        return self.width * self.height

    def left(self) -> int:
        return self.x

    def right(self) -> int:
        return min(self.x + self.width, _U16_MAX)

    def top(self) -> int:
        return self.y

    def bottom(self) -> int:
        return min(self.y + self.height, _U16_MAX)

    def inner(self, margin: Margin) -> "Rect":
        """Return the area left after removing the margin, or an empty rect."""
        if self.width < 2 * margin.horizontal or self.height < 2 * margin.vertical:
            return Rect()
        return Rect(
            self.x + margin.horizontal,
            self.y + margin.vertical,
            self.width - 2 * margin.horizontal,
            self.height - 2 * margin.vertical,
        )

    def union(self, other: "Rect") -> "Rect":
        """Return the smallest rect containing both."""
        x1 = min(self.x, other.x)
        y1 = min(self.y, other.y)
        x2 = max(self.x + self.width, other.x + other.width)
        y2 = max(self.y + self.height, other.y + other.height)
        return Rect(x1, y1, x2 - x1, y2 - y1)

    def intersection(self, other: "Rect") -> "Rect":
        """Return the overlapping part; empty when they do not overlap."""
        x1 = max(self.x, other.x)
        y1 = max(self.y, other.y)
        x2 = min(self.x + self.width, other.x + other.width)
        y2 = min(self.y + self.height, other.y + other.height)
        return Rect(x1, y1, max(x2 - x1, 0), max(y2 - y1, 0))

    def intersects(self, other: "Rect") -> bool:
        """Tell whether the two rects overlap."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


@dataclass(frozen=True)
class Layout:
    """Splits an area into chunks along one direction.

    By default the last chunk grows to fill the remaining space.
    """

    direction: Direction = Direction.VERTICAL
    constraints: tuple[Constraint, ...] = ()
    margin: Union[Margin, int] = field(default_factory=Margin)
    expand_to_fill: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "constraints", tuple(self.constraints))
        if isinstance(self.margin, int):
            object.__setattr__(self, "margin", Margin(self.margin, self.margin))

    def split(self, area: Rect) -> list[Rect]:
        """Return one rect per constraint, solved within ``area``."""
        return list(_split(area, self))


@dataclass(frozen=True, eq=False)
class _Element:
    x: Variable = field(default_factory=Variable)
    y: Variable = field(default_factory=Variable)
    width: Variable = field(default_factory=Variable)
    height: Variable = field(default_factory=Variable)


def _to_u16(value: float) -> int:
    if math.isnan(value) or math.copysign(1.0, value) < 0:
        return 0
    return min(int(value), _U16_MAX)


@functools.lru_cache(maxsize=1024)
def _split(area: Rect, layout: Layout) -> tuple[Rect, ...]:
    dest = area.inner(layout.margin)
    elements = [_Element() for _ in layout.constraints]
    horizontal = layout.direction is Direction.HORIZONTAL
    eq, le, ge = Relation.EQ, Relation.LE, Relation.GE

    ccs: list[LinearConstraint] = []
    for e in elements:
        ccs += [
            LinearConstraint(e.width, ge, 0),
            LinearConstraint(e.height, ge, 0),
            LinearConstraint(e.x, ge, dest.left()),
            LinearConstraint(e.y, ge, dest.top()),
            LinearConstraint(e.x + e.width, le, dest.right()),
            LinearConstraint(e.y + e.height, le, dest.bottom()),
        ]
    if elements:
        first = elements[0]
        if horizontal:
            ccs.append(LinearConstraint(first.x, eq, dest.left()))
        else:
            ccs.append(LinearConstraint(first.y, eq, dest.top()))
        if layout.expand_to_fill:
            last = elements[-1]
            if horizontal:
                ccs.append(LinearConstraint(last.x + last.width, eq, dest.right()))
            else:
                ccs.append(LinearConstraint(last.y + last.height, eq, dest.bottom()))

    if horizontal:
        for a, b in pairwise(elements):
            ccs.append(LinearConstraint(a.x + a.width, eq, b.x))
        for e, size in zip(elements, layout.constraints):
            ccs.append(LinearConstraint(e.y, eq, dest.y))
            ccs.append(LinearConstraint(e.height, eq, dest.height))
            ccs.append(size._size_constraint(e.width, dest.width))
    else:
        for a, b in pairwise(elements):
            ccs.append(LinearConstraint(a.y + a.height, eq, b.y))
        for e, size in zip(elements, layout.constraints):
            ccs.append(LinearConstraint(e.x, eq, dest.x))
            ccs.append(LinearConstraint(e.width, eq, dest.width))
            ccs.append(size._size_constraint(e.height, dest.height))

    solver = Solver()
    solver.add_constraints(ccs)
    results = [
        Rect(
            _to_u16(solver.value(e.x)),
            _to_u16(solver.value(e.y)),
            _to_u16(solver.value(e.width)),
            _to_u16(solver.value(e.height)),
        )
        for e in elements
    ]

    if layout.expand_to_fill and results:
        last = results[-1]
        if horizontal:
            results[-1] = replace(last, width=max(dest.right() - last.x, 0))
        else:
            results[-1] = replace(last, height=max(dest.bottom() - last.y, 0))
    return tuple(results)