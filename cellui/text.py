"""Styled text: single-style spans, lines of spans and multi-line text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Union

import regex
from wcwidth import wcwidth

from .style import Style

_GRAPHEME = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters."""
    return _GRAPHEME.findall(text)


def display_width(text: str) -> int:
    """Return the number of terminal columns the text occupies.

    Control characters count as zero columns.
    """
    return sum(max(wcwidth(ch), 0) for ch in text)


def _lines(content: str) -> list[str]:
    """Split on line feeds, dropping one trailing empty line and any trailing CR."""
    if not content:
        return []
    parts = content.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


@dataclass(frozen=True)
class StyledGrapheme:
    """A grapheme together with its resolved style."""

    symbol: str
    style: Style


@dataclass
class Span:
    """A string in which every grapheme has the same style."""

    content: str
    style: Style = field(default_factory=Style)

    @classmethod
    def raw(cls, content: str) -> "Span":
        """Create an unstyled span."""
        return cls(content, Style())

    @classmethod
    def styled(cls, content: str, style: Style) -> "Span":
        """Create a span with a style."""
        return cls(content, style)

    def width(self) -> int:
        """Return the display width of the content."""
        return display_width(self.content)

    def styled_graphemes(self, base_style: Style) -> Iterator[StyledGrapheme]:
        """Yield each grapheme with ``base_style`` patched by this span's style."""
        style = base_style.patch(self.style)
        for symbol in graphemes(self.content):
            if symbol != "\n":
                yield StyledGrapheme(symbol, style)

    def __str__(self) -> str:
        return self.content


SpansLike = Union[str, Span, "Spans", Iterable[Span]]


@dataclass
class Spans:
    """A single line made of spans, each with its own style."""

    spans: list[Span] = field(default_factory=list)

    @classmethod
    def coerce(cls, value: SpansLike) -> "Spans":
        """Build a line from a string, a span, a list of spans or a line."""
        if isinstance(value, Spans):
            return value
        if isinstance(value, str):
            return cls([Span.raw(value)])
        if isinstance(value, Span):
            return cls([value])
        spans = list(value)
        if not all(isinstance(span, Span) for span in spans):
            raise TypeError("expected an iterable of Span")
        return cls(spans)

    def width(self) -> int:
        """Return the display width of the whole line."""
        return sum(span.width() for span in self.spans)

    def __iter__(self) -> Iterator[Span]:
        return iter(self.spans)

    def __len__(self) -> int:
        return len(self.spans)

    def __str__(self) -> str:
        return "".join(span.content for span in self.spans)


TextLike = Union[str, Span, Spans, "Text", Iterable[Spans]]


@dataclass
class Text:
    """Text spread over several lines, each made of styled spans."""

    lines: list[Spans] = field(default_factory=list)

    @classmethod
    def raw(cls, content: str) -> "Text":
        """Create unstyled text, one line per line of ``content``."""
        return cls([Spans.coerce(line) for line in _lines(content)])

    @classmethod
    def styled(cls, content: str, style: Style) -> "Text":
        """Create text with every span patched by ``style``."""
        text = cls.raw(content)
        text.patch_style(style)
        return text

    @classmethod
    def coerce(cls, value: TextLike) -> "Text":
        """Build text from a string, a span, a line, lines or text."""
        if isinstance(value, Text):
            return value
        if isinstance(value, str):
            return cls.raw(value)
        if isinstance(value, Span):
            return cls([Spans([value])])
        if isinstance(value, Spans):
            return cls([value])
        lines = list(value)
        if not all(isinstance(line, Spans) for line in lines):
            raise TypeError("expected an iterable of Spans")
        return cls(lines)

    def width(self) -> int:
        """Return the widest line's display width."""
        return max((line.width() for line in self.lines), default=0)

    def height(self) -> int:
        """Return the number of lines."""
        return len(self.lines)

    def patch_style(self, style: Style) -> None:
        """Patch every span's style with ``style``, in place."""
        for line in self.lines:
            for span in line.spans:
                span.style = span.style.patch(style)

    def extend(self, lines: Iterable[Spans]) -> None:
        """Append lines, such as those of another text."""
        self.lines.extend(lines)

    def __iter__(self) -> Iterator[Spans]:
        return iter(self.lines)