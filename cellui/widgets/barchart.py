"""A widget showing several labelled bars side by side."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..buffer import Buffer
from ..layout import Rect
from ..style import Style
from ..symbols import BAR_NINE_LEVELS, BarSet
from ..text import display_width
from .block import Block


def _level_symbol(bar_set: BarSet, eighths: int) -> str:
    if eighths >= 8:
        return bar_set.full
    return (
        bar_set.empty,
        bar_set.one_eighth,
        bar_set.one_quarter,
        bar_set.three_eighths,
        bar_set.half,
        bar_set.five_eighths,
        bar_set.three_quarters,
        bar_set.seven_eighths,
    )[eighths]


@dataclass
class BarChart:
    """Bars for ``(label, value)`` pairs, values printed on them and labels below.

    A bar reaches full height at ``max_value``, or at the largest value in
    the data when no maximum is given.
    """

    data: Sequence[tuple[str, int]] = ()
    block: Optional[Block] = None
    bar_width: int = 1
    bar_gap: int = 1
    bar_set: BarSet = BAR_NINE_LEVELS
    bar_style: Style = field(default_factory=Style)
    value_style: Style = field(default_factory=Style)
    label_style: Style = field(default_factory=Style)
    style: Style = field(default_factory=Style)
    max_value: Optional[int] = None

    def __post_init__(self) -> None:
        self.data = tuple(self.data)

    @property
    def values(self) -> list[str]:
        """The text printed for each value."""
        return [str(value) for _, value in self.data]

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the chart into ``buf``."""
        buf.set_style(area, self.style)

        if self.block is not None:
            chart_area = self.block.inner(area)
            self.block.render(area, buf)
        else:
            chart_area = area

        if chart_area.height < 2:
            return

        top_value = self.max_value
        if top_value is None:
            top_value = max((value for _, value in self.data), default=0)
        step = self.bar_width + self.bar_gap
        shown = self.data[: min(chart_area.width // step, len(self.data))]
        bar_height = chart_area.height - 1
        remaining = [value * bar_height * 8 // max(top_value, 1) for _, value in shown]

        for j in reversed(range(bar_height)):
            for i, eighths in enumerate(remaining):
                symbol = _level_symbol(self.bar_set, eighths)
                x0 = chart_area.left() + i * step
                for x in range(x0, x0 + self.bar_width):
                    buf.get(x, chart_area.top() + j).set_symbol(symbol).set_style(
                        self.bar_style
                    )
                remaining[i] = max(eighths - 8, 0)

        for i, (label, value) in enumerate(shown):
            x0 = chart_area.left() + i * step
            if value != 0:
                value_label = str(value)
                width = display_width(value_label)
                if width < self.bar_width:
                    buf.set_string(
                        x0 + (self.bar_width - width) // 2,
                        chart_area.bottom() - 2,
                        value_label,
                        self.value_style,
                    )
            buf.set_stringn(
                x0, chart_area.bottom() - 1, label, self.bar_width, self.label_style
            )