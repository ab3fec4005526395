"""A double-buffered terminal that sends only changed cells to its backend."""

from __future__ import annotations

import abc
import enum
import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from .buffer import Buffer, Cell
from .layout import Rect


class Backend(abc.ABC):
    """The output device a terminal draws to."""

    @abc.abstractmethod
    def draw(self, updates: Iterable[tuple[int, int, Cell]]) -> None:
        """Write the given cells at their positions."""

    @abc.abstractmethod
    def hide_cursor(self) -> None:
        """Hide the cursor."""

    @abc.abstractmethod
    def show_cursor(self) -> None:
        """Show the cursor."""

    @abc.abstractmethod
    def get_cursor(self) -> tuple[int, int]:
        """Return the cursor position."""

    @abc.abstractmethod
    def set_cursor(self, x: int, y: int) -> None:
        """Move the cursor."""

    @abc.abstractmethod
    def clear(self) -> None:
        """Clear the screen."""

    @abc.abstractmethod
    def size(self) -> Rect:
        """Return the size of the screen."""

    @abc.abstractmethod
    def flush(self) -> None:
        """Make pending output visible."""


class ResizeBehavior(enum.Enum):
    """Whether the viewport follows the backend's size."""

    FIXED = "fixed"
    AUTO = "auto"


@dataclass
class Viewport:
    """The area of the screen a terminal draws to."""

    area: Rect
    resize_behavior: ResizeBehavior = ResizeBehavior.AUTO

    @staticmethod
    def fixed(area: Rect) -> "Viewport":
        """Return a viewport that keeps ``area`` whatever the backend's size."""
        return Viewport(area, ResizeBehavior.FIXED)


class Frame:
    """A consistent view of the terminal while one frame is rendered."""

    def __init__(self, terminal: "Terminal") -> None:
        self._terminal = terminal
        self.cursor_position: Optional[tuple[int, int]] = None

    def size(self) -> Rect:
        """Return the viewport area, fixed for the duration of the frame."""
        return self._terminal.viewport.area

    def render_widget(self, widget: Any, area: Rect) -> None:
        """Render a widget into the current buffer."""
        widget.render(area, self._terminal.current_buffer())

    def render_stateful_widget(self, widget: Any, area: Rect, state: Any) -> None:
        """Render a widget that reads and updates ``state``."""
        widget.render(area, self._terminal.current_buffer(), state)

    def set_cursor(self, x: int, y: int) -> None:
        """Show the cursor at ``(x, y)`` once the frame is drawn.

        Without this call the cursor is hidden after drawing.
        """
        self.cursor_position = (x, y)


@dataclass(frozen=True)
class CompletedFrame:
    """The buffer and area of the last drawn frame; valid until the next draw."""

    buffer: Buffer
    area: Rect


class Terminal:
    """Renders frames into a buffer and flushes the differences to a backend.

    Use as a context manager, or call ``close``, to restore the cursor.
    """

    def __init__(self, backend: Backend, viewport: Optional[Viewport] = None) -> None:
        if viewport is None:
            viewport = Viewport(backend.size(), ResizeBehavior.AUTO)
        self.backend = backend
        self.viewport = viewport
        self._buffers = [Buffer.empty(viewport.area), Buffer.empty(viewport.area)]
        self._current = 0
        self.hidden_cursor = False

    def __enter__(self) -> "Terminal":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_frame(self) -> Frame:
        """Return a frame for rendering into the current buffer."""
        return Frame(self)

    def current_buffer(self) -> Buffer:
        """Return the buffer being rendered into."""
        return self._buffers[self._current]

    @property
    def _previous_buffer(self) -> Buffer:
        return self._buffers[1 - self._current]

    def flush(self) -> None:
        """Send the difference between the previous and current buffer to the backend."""
        updates = self._previous_buffer.diff(self.current_buffer())
        self.backend.draw(updates)

    def resize(self, area: Rect) -> None:
        """Resize both buffers and the viewport, then clear the screen."""
        for buffer in self._buffers:
            buffer.resize(area)
        self.viewport.area = area
        self.clear()

    def autoresize(self) -> None:
        """Follow the backend's size, unless the viewport is fixed."""
        if self.viewport.resize_behavior is ResizeBehavior.AUTO:
            size = self.size()
            if size != self.viewport.area:
                self.resize(size)

    def draw(self, render: Callable[[Frame], None]) -> CompletedFrame:
        """Render a frame with ``render``, flush it and prepare for the next one."""
        self.autoresize()

        frame = self.get_frame()
        render(frame)
        cursor_position = frame.cursor_position

        self.flush()

        if cursor_position is None:
            self.hide_cursor()
        else:
            self.show_cursor()
            self.set_cursor(*cursor_position)

        self._previous_buffer.reset()
        self._current = 1 - self._current

        self.backend.flush()
        return CompletedFrame(buffer=self._previous_buffer, area=self.viewport.area)

    def hide_cursor(self) -> None:
        self.backend.hide_cursor()
        self.hidden_cursor = True

    def show_cursor(self) -> None:
        self.backend.show_cursor()
        self.hidden_cursor = False

    def get_cursor(self) -> tuple[int, int]:
        return self.backend.get_cursor()

    def set_cursor(self, x: int, y: int) -> None:
        self.backend.set_cursor(x, y)

    def clear(self) -> None:
        """Clear the screen and force a full redraw on the next draw."""
        self.backend.clear()
        self._previous_buffer.reset()

    def size(self) -> Rect:
        """Return the backend's actual size."""
        return self.backend.size()

    def close(self) -> None:
        """Show the cursor again if it was hidden; failures are reported on stderr."""
        if self.hidden_cursor:
            try:
                self.show_cursor()
            except OSError as err:
                print(f"Failed to show the cursor: {err}", file=sys.stderr)