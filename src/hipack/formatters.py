"""Punctuation strategies for compact and pretty output.

A formatter only decides how containers open and close and how items and
keys are separated. Scalars never pass through it.
"""

from typing import Protocol

from .constants import COLON, COLON_SPACE, COMMA, DEFAULT_INDENT, NEWLINE, SPACE
from .types import Depth
from .writer import SinkWriter


class Formatter(Protocol):
    def begin_container(self, writer: SinkWriter, opening: str) -> None: ...

    def end_container(self, writer: SinkWriter, closing: str) -> None: ...

    def key_value_separator(self, writer: SinkWriter) -> None: ...

    def item_separator(self, writer: SinkWriter, first: bool) -> None: ...


class CompactFormatter:
    """Single-line output with no inserted whitespace."""

    def begin_container(self, writer: SinkWriter, opening: str) -> None:
        writer.write(opening)

    def end_container(self, writer: SinkWriter, closing: str) -> None:
        writer.write(closing)

    def key_value_separator(self, writer: SinkWriter) -> None:
        writer.write(COLON)

    def item_separator(self, writer: SinkWriter, first: bool) -> None:
        if not first:
            writer.write(COMMA)


class PrettyFormatter:
    """One item per line, nested containers indented.

    Items are separated by a newline alone, there are no commas.

    Args:
        indent: Number of spaces per indentation level
    """

    def __init__(self, indent: int = DEFAULT_INDENT) -> None:
        self.indent = indent
        self.depth: Depth = 0

    def _newline(self, writer: SinkWriter) -> None:
        writer.write(NEWLINE + SPACE * (self.indent * self.depth))

    def begin_container(self, writer: SinkWriter, opening: str) -> None:
        self.depth += 1
        writer.write(opening)
        self._newline(writer)

    def end_container(self, writer: SinkWriter, closing: str) -> None:
        self.depth -= 1
        self._newline(writer)
        writer.write(closing)

    def key_value_separator(self, writer: SinkWriter) -> None:
        writer.write(COLON_SPACE)

    def item_separator(self, writer: SinkWriter, first: bool) -> None:
        if not first:
            self._newline(writer)
