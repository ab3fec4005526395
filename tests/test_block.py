import pytest

from cellui.buffer import Buffer
from cellui.layout import Alignment, Rect
from cellui.style import Color, Style
from cellui.symbols import LINE_DOUBLE, LINE_NORMAL, LINE_ROUNDED, LINE_THICK
from cellui.text import Span, Spans
from cellui.widgets.block import Block, BorderType, Borders


def row_text(buf: Buffer, y: int) -> str:
    return "".join(buf.get(x, y).symbol for x in range(buf.area.left(), buf.area.right()))


@pytest.mark.parametrize(
    "borders, area, expected",
    [
        (Borders.NONE, Rect(0, 0, 0, 0), Rect(0, 0, 0, 0)),
        (Borders.NONE, Rect(0, 0, 1, 1), Rect(0, 0, 1, 1)),
        (Borders.LEFT, Rect(0, 0, 0, 1), Rect(0, 0, 0, 1)),
        (Borders.LEFT, Rect(0, 0, 1, 1), Rect(1, 0, 0, 1)),
        (Borders.LEFT, Rect(0, 0, 2, 1), Rect(1, 0, 1, 1)),
        (Borders.TOP, Rect(0, 0, 1, 0), Rect(0, 0, 1, 0)),
        (Borders.TOP, Rect(0, 0, 1, 1), Rect(0, 1, 1, 0)),
        (Borders.TOP, Rect(0, 0, 1, 2), Rect(0, 1, 1, 1)),
        (Borders.RIGHT, Rect(0, 0, 0, 1), Rect(0, 0, 0, 1)),
        (Borders.RIGHT, Rect(0, 0, 1, 1), Rect(0, 0, 0, 1)),
        (Borders.RIGHT, Rect(0, 0, 2, 1), Rect(0, 0, 1, 1)),
        (Borders.BOTTOM, Rect(0, 0, 1, 0), Rect(0, 0, 1, 0)),
        (Borders.BOTTOM, Rect(0, 0, 1, 1), Rect(0, 0, 1, 0)),
        (Borders.BOTTOM, Rect(0, 0, 1, 2), Rect(0, 0, 1, 1)),
        (Borders.ALL, Rect(0, 0, 0, 0), Rect(0, 0, 0, 0)),
        (Borders.ALL, Rect(0, 0, 1, 1), Rect(1, 1, 0, 0)),
        (Borders.ALL, Rect(0, 0, 2, 2), Rect(1, 1, 0, 0)),
        (Borders.ALL, Rect(0, 0, 3, 3), Rect(1, 1, 1, 1)),
    ],
)
def test_inner_takes_into_account_the_borders(borders, area, expected):
    assert Block(borders=borders).inner(area) == expected


@pytest.mark.parametrize("alignment", list(Alignment))
def test_inner_takes_into_account_the_title(alignment):
    block = Block(title="Test", title_alignment=alignment)
    assert block.inner(Rect(0, 0, 0, 1)) == Rect(0, 1, 0, 0)


def test_all_is_the_union_of_the_sides():
    area = Rect(0, 0, 5, 4)
    sides = Borders.TOP | Borders.RIGHT | Borders.BOTTOM | Borders.LEFT
    assert Block(borders=sides).inner(area) == Block(borders=Borders.ALL).inner(area)
    assert Block(borders=Borders.ALL).inner(area) == Rect(1, 1, 3, 2)
    from_sides = Buffer.empty(area)
    Block(borders=sides).render(area, from_sides)
    from_all = Buffer.empty(area)
    Block(borders=Borders.ALL).render(area, from_all)
    assert from_sides == from_all


@pytest.mark.parametrize(
    "border_type, symbols",
    [
        (BorderType.PLAIN, LINE_NORMAL),
        (BorderType.ROUNDED, LINE_ROUNDED),
        (BorderType.DOUBLE, LINE_DOUBLE),
        (BorderType.THICK, LINE_THICK),
    ],
)
def test_line_symbols(border_type, symbols):
    assert border_type.line_symbols() == symbols


def test_title_is_coerced_to_spans():
    block = Block(title="My title")
    assert block.title == Spans([Span.raw("My title")])


def test_render_draws_corners_and_sides():
    area = Rect(0, 0, 8, 3)
    buf = Buffer.empty(area)
    Block(borders=Borders.ALL).render(area, buf)
    assert buf.get(0, 0).symbol == LINE_NORMAL.top_left
    assert buf.get(7, 0).symbol == LINE_NORMAL.top_right
    assert buf.get(0, 2).symbol == LINE_NORMAL.bottom_left
    assert buf.get(7, 2).symbol == LINE_NORMAL.bottom_right
    assert buf.get(0, 1).symbol == LINE_NORMAL.vertical
    assert buf.get(7, 1).symbol == LINE_NORMAL.vertical
    assert all(buf.get(x, 0).symbol == LINE_NORMAL.horizontal for x in range(1, 7))
    assert all(buf.get(x, 1).symbol == " " for x in range(1, 7))


def test_render_rounded_corners():
    area = Rect(0, 0, 4, 3)
    buf = Buffer.empty(area)
    Block(borders=Borders.ALL, border_type=BorderType.ROUNDED).render(area, buf)
    assert buf.get(0, 0).symbol == LINE_ROUNDED.top_left
    assert buf.get(3, 2).symbol == LINE_ROUNDED.bottom_right


def test_render_left_title_after_border():
    area = Rect(0, 0, 10, 3)
    buf = Buffer.empty(area)
    Block(title="Title", borders=Borders.ALL).render(area, buf)
    assert row_text(buf, 0)[1:6] == "Title"
    assert buf.get(0, 0).symbol == LINE_NORMAL.top_left
    assert buf.get(9, 0).symbol == LINE_NORMAL.top_right


def test_render_right_title_before_border():
    area = Rect(0, 0, 10, 3)
    buf = Buffer.empty(area)
    Block(title="abc", borders=Borders.ALL, title_alignment=Alignment.RIGHT).render(area, buf)
    assert row_text(buf, 0)[-4:-1] == "abc"
    assert buf.get(9, 0).symbol == LINE_NORMAL.top_right


def test_render_centered_title_is_balanced():
    area = Rect(0, 0, 9, 1)
    buf = Buffer.empty(area)
    Block(title="ab", title_alignment=Alignment.CENTER).render(area, buf)
    line = row_text(buf, 0)
    start = line.index("ab")
    left_pad = start
    right_pad = len(line) - start - 2
    assert abs(left_pad - right_pad) <= 1


def test_render_title_is_clipped_between_borders():
    area = Rect(0, 0, 5, 3)
    buf = Buffer.empty(area)
    Block(title="Longtitle", borders=Borders.ALL).render(area, buf)
    assert row_text(buf, 0)[1:4] == "Lon"
    assert buf.get(4, 0).symbol == LINE_NORMAL.top_right


def test_render_applies_styles():
    area = Rect(0, 0, 4, 3)
    buf = Buffer.empty(area)
    Block(
        borders=Borders.ALL,
        border_style=Style().with_fg(Color.RED),
        style=Style().with_bg(Color.BLUE),
    ).render(area, buf)
    assert buf.get(0, 0).fg == Color.RED
    assert buf.get(0, 0).bg == Color.BLUE
    assert buf.get(1, 1).fg == Color.RESET
    assert buf.get(1, 1).bg == Color.BLUE


def test_render_empty_area_changes_nothing():
    buf = Buffer.empty(Rect(0, 0, 4, 4))
    Block(title="x", borders=Borders.ALL).render(Rect(1, 1, 0, 3), buf)
    assert buf == Buffer.empty(Rect(0, 0, 4, 4))


def test_render_respects_area_offset():
    buf = Buffer.empty(Rect(0, 0, 6, 6))
    Block(borders=Borders.ALL).render(Rect(2, 2, 3, 3), buf)
    assert buf.get(2, 2).symbol == LINE_NORMAL.top_left
    assert buf.get(4, 4).symbol == LINE_NORMAL.bottom_right
    assert buf.get(1, 1).symbol == " "