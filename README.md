# cellui

cellui gives you the building blocks for drawing user interfaces in a terminal.
Widgets draw into a grid of styled cells called a `Buffer`. A `Terminal` keeps
the previous and the current frame, works out which cells changed, and sends
only those cells to a backend that you provide.

## Installation

```
pip install cellui
```

With the test dependencies:

```
pip install "cellui[test]"
```

## Modules

- `cellui.style`: the named colors in `Color`, plus `Rgb` and `Indexed`
  (each component or index must lie in 0..255, otherwise `ValueError` is
  raised). Also the `Modifier` flags (`BOLD`, `ITALIC`, `UNDERLINED`, and so on)
  and `Style`. A `Style` is an incremental change. `with_fg`, `with_bg`, `add`
  and `remove` each return a new style. `a.patch(b)` gives the same result as
  applying `a` and then `b`. `Style.reset()` resets every property.
- `cellui.text`: `Span` is text with a single style. `Spans` is one line of
  spans. `Text` holds several lines. `Spans.coerce` and `Text.coerce` accept
  plain strings, spans and lists. `graphemes(text)` splits a string into
  grapheme clusters. `display_width(text)` counts terminal columns: wide
  characters count as two and control characters as zero.
- `cellui.layout`: `Rect`, `Margin`, `Direction`, `Alignment`, `Corner`, and the
  constraints `Length`, `Percentage`, `Ratio`, `Min` and `Max`. `Layout.split`
  divides an area into one rect for each constraint. By default the last rect
  grows to fill the remaining space. Results are cached.
  `Rect.new` clips a width and height whose area would not fit in 16 bits, and
  it keeps the aspect ratio when it does so.
- `cellui.solver`: the linear constraint solver that `Layout` uses. It works
  with `Variable`, `Expression`, `LinearConstraint` and `Relation`, and with the
  strengths `REQUIRED`, `STRONG`, `MEDIUM` and `WEAK`. When required
  constraints conflict, it raises `UnsatisfiableConstraint`.
- `cellui.buffer`: `Cell` and `Buffer`. A `Buffer` supports:
  - `set_string` and `set_stringn`, which clip to the line and to a width
  - `set_span` and `set_spans`
  - `set_style` over an area
  - `resize`, `reset` and `merge`
  - `diff`, which returns the minimal list of `(x, y, cell)` updates
  
  `index_of` and `pos_of` raise `IndexError` outside the buffer.
- `cellui.symbols`: block, bar and box-drawing characters; the sets
  `BAR_NINE_LEVELS`, `BAR_THREE_LEVELS`, `BLOCK_NINE_LEVELS`,
  `BLOCK_THREE_LEVELS`, `LINE_NORMAL`, `LINE_ROUNDED`, `LINE_DOUBLE` and
  `LINE_THICK`; the canvas markers `Marker`, `Blocks`, `Bars` and `Lines`; and the
  helpers `marker_char` and `braille_dot`.
- `cellui.terminal`: `Backend` (an abstract base class), `Terminal`, `Frame`,
  `CompletedFrame` and `Viewport`. By default the viewport follows the size of
  the backend. `Viewport.fixed(area)` keeps the viewport at `area` instead.
- `cellui.widgets.block`: `Block` draws a box with `Borders` (which combine with
  `|`), a `BorderType`, styles and an aligned title. `Block.inner` returns the
  area that lies inside the borders and below the title.
- `cellui.widgets.barchart`: `BarChart` draws `(label, value)` pairs as vertical
  bars. It draws eighth-cell partial bars, prints each value inside its bar when
  the value fits, and prints the labels underneath.
- `cellui.widgets.canvas`: `Canvas` runs a painter function on a `Context`. You
  can draw the shapes `Line`, `Rectangle` and `Points`, or your own `Shape`
  subclasses, on braille or single-character grids. `Context.layer()` stacks
  layers, and `Context.print()` places text labels.

## Example: drawing into a buffer

```python
from cellui.buffer import Buffer
from cellui.layout import Direction, Layout, Length, Min, Rect
from cellui.style import Color, Style
from cellui.widgets.block import Block, Borders

area = Rect(0, 0, 20, 6)
buf = Buffer.empty(area)

top, bottom = Layout(
    direction=Direction.VERTICAL,
    constraints=[Length(3), Min(0)],
).split(area)

Block(title="Hello", borders=Borders.ALL).render(top, buf)
buf.set_string(1, bottom.top(), "world", Style().with_fg(Color.RED))
```

## Example: a canvas

```python
from cellui.buffer import Buffer
from cellui.layout import Rect
from cellui.style import Color
from cellui.widgets.canvas import Canvas, Line, Rectangle

def paint(ctx):
    ctx.draw(Line(0.0, 0.0, 10.0, 10.0, Color.WHITE))
    ctx.layer()
    ctx.draw(Rectangle(2.0, 2.0, 5.0, 5.0, Color.RED))
    ctx.print(1.0, 9.0, "label")

buf = Buffer.empty(Rect(0, 0, 20, 10))
Canvas(x_bounds=(0.0, 10.0), y_bounds=(0.0, 10.0), painter=paint).render(buf.area, buf)
```

## Terminals and backends

`Terminal` works with any subclass of `cellui.terminal.Backend`. A subclass
must implement these methods:

- `draw(updates)`: receives `(x, y, cell)` tuples, with positions relative to
  the viewport
- `hide_cursor`, `show_cursor`, `get_cursor` and `set_cursor`
- `clear`
- `size`: returns a `Rect`
- `flush`

```python
from cellui.terminal import Backend, Terminal
from cellui.layout import Rect
from cellui.widgets.block import Block, Borders

class MemoryBackend(Backend):
    def __init__(self, width, height):
        self.area = Rect(0, 0, width, height)
        self.cells = {}
        self.cursor = (0, 0)

    def draw(self, updates):
        for x, y, cell in updates:
            self.cells[(x, y)] = cell.symbol

    def hide_cursor(self): pass
    def show_cursor(self): pass
    def get_cursor(self): return self.cursor
    def set_cursor(self, x, y): self.cursor = (x, y)
    def clear(self): self.cells.clear()
    def size(self): return self.area
    def flush(self): pass

with Terminal(MemoryBackend(20, 3)) as terminal:
    terminal.draw(
        lambda frame: frame.render_widget(
            Block(title="Hi", borders=Borders.ALL), frame.size()
        )
    )
```

`Terminal.draw` hides the cursor after the frame is drawn. If the render
function calls `frame.set_cursor(x, y)`, the cursor is shown at that position
instead. When the terminal is closed, whether through `close()` or by leaving
the `with` block, the cursor is shown again if the terminal had hidden it.

## What this package does not do

cellui does not include a backend. It writes no escape sequences, does not
switch the terminal into raw mode or the alternate screen, and does not read
keyboard or mouse input. To get output on a real terminal, supply your own
`Backend`. The widgets available are `Block`, `BarChart` and `Canvas`. There are
no list, table, paragraph, gauge or chart widgets.

## Running the tests

```
pytest
```