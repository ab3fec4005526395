from cellui.buffer import Buffer
from cellui.layout import Rect
from cellui.style import Color, Modifier, Style
from cellui.symbols import BAR_NINE_LEVELS, BAR_THREE_LEVELS, LINE_NORMAL
from cellui.widgets.barchart import BarChart
from cellui.widgets.block import Block, Borders

DATA = [("B0", 0), ("B1", 2), ("B2", 4), ("B3", 3)]


def render(chart: BarChart, area: Rect) -> Buffer:
    buf = Buffer.empty(area)
    chart.render(area, buf)
    return buf


def test_values_are_decimal_strings():
    chart = BarChart(data=DATA)
    assert chart.values == [str(v) for _, v in DATA]


def test_full_cells_per_bar_match_values():
    area = Rect(0, 0, 8, 5)
    buf = render(BarChart(data=DATA, max_value=4), area)
    for i, (_, value) in enumerate(DATA):
        column = [buf.get(i * 2, y).symbol for y in range(4)]
        assert column.count(BAR_NINE_LEVELS.full) == value
        assert column.count(BAR_NINE_LEVELS.empty) == 4 - value


def test_bars_grow_from_the_bottom():
    area = Rect(0, 0, 8, 5)
    buf = render(BarChart(data=DATA, max_value=4), area)
    column = [buf.get(6, y).symbol for y in range(4)]
    assert column == [BAR_NINE_LEVELS.empty] + [BAR_NINE_LEVELS.full] * 3


def test_labels_are_truncated_to_bar_width():
    area = Rect(0, 0, 8, 5)
    buf = render(BarChart(data=DATA, max_value=4), area)
    assert [buf.get(i * 2, 4).symbol for i in range(4)] == [label[0] for label, _ in DATA]
    assert all(buf.get(i * 2 + 1, 4).symbol == " " for i in range(4))


def test_default_max_is_largest_value():
    area = Rect(0, 0, 8, 5)
    assert render(BarChart(data=DATA), area) == render(BarChart(data=DATA, max_value=4), area)


def test_partial_levels():
    area = Rect(0, 0, 2, 2)
    buf = render(BarChart(data=[("a", 1)], max_value=8), area)
    assert buf.get(0, 0).symbol == BAR_NINE_LEVELS.one_eighth
    three = render(BarChart(data=[("a", 1)], max_value=8, bar_set=BAR_THREE_LEVELS), area)
    assert three.get(0, 0).symbol == BAR_THREE_LEVELS.one_eighth


def test_value_label_centered_on_wide_bars():
    area = Rect(0, 0, 16, 5)
    value_style = Style().with_fg(Color.RED).add(Modifier.BOLD)
    buf = render(BarChart(data=DATA, max_value=4, bar_width=3, value_style=value_style), area)
    for i, (_, value) in enumerate(DATA):
        cell = buf.get(i * 4 + 1, 3)
        if value:
            assert cell.symbol == str(value)
            assert cell.fg == Color.RED
            assert Modifier.BOLD in cell.modifier
        else:
            assert cell.symbol == BAR_NINE_LEVELS.empty
    assert "".join(buf.get(x, 4).symbol for x in range(3)) == "B0 "


def test_bars_that_do_not_fit_are_dropped():
    area = Rect(0, 0, 4, 5)
    buf = render(BarChart(data=DATA, max_value=4), area)
    assert [buf.get(x, 4).symbol for x in range(4)] == ["B", " ", "B", " "]
    assert [buf.get(2, y).symbol for y in range(4)].count(BAR_NINE_LEVELS.full) == 2


def test_too_short_area_draws_only_style():
    area = Rect(0, 0, 8, 1)
    buf = render(BarChart(data=DATA, style=Style().with_bg(Color.GREEN)), area)
    assert all(cell.symbol == " " for cell in buf.content)
    assert all(cell.bg == Color.GREEN for cell in buf.content)


def test_bar_style_is_applied():
    area = Rect(0, 0, 8, 5)
    buf = render(BarChart(data=DATA, max_value=4, bar_style=Style().with_fg(Color.YELLOW)), area)
    assert buf.get(4, 0).fg == Color.YELLOW
    assert buf.get(4, 4).fg == Color.RESET


def test_block_wraps_the_chart():
    area = Rect(0, 0, 10, 7)
    chart = BarChart(data=DATA, max_value=4, block=Block(borders=Borders.ALL))
    buf = render(chart, area)
    assert buf.get(0, 0).symbol == LINE_NORMAL.top_left
    assert buf.get(9, 6).symbol == LINE_NORMAL.bottom_right
    inner = render(BarChart(data=DATA, max_value=4), Rect(1, 1, 8, 5))
    for y in range(1, 6):
        for x in range(1, 9):
            assert buf.get(x, y) == inner.get(x - 1 + 1, y)


def test_render_does_not_consume_block():
    chart = BarChart(data=DATA, block=Block(borders=Borders.ALL))
    first = render(chart, Rect(0, 0, 10, 7))
    second = render(chart, Rect(0, 0, 10, 7))
    assert first == second