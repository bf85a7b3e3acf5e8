"""Checked output writer with a position cursor."""

import errno
import io
from typing import Any, Tuple

from .errors import HiPackEncodingError, HiPackIOError


class SinkWriter:
    """Writes text to a byte or text sink, tracking where output has reached.

    Every write is checked: a failing sink raises ``HiPackIOError`` and text
    that cannot be UTF-8 encoded raises ``HiPackEncodingError``. Nothing is
    buffered, so bytes written before a failure stay in the sink.
    """

    def __init__(self, sink: Any) -> None:
        self.sink = sink
        self._text_sink = isinstance(sink, io.TextIOBase)
        self.offset = 0
        self.line = 1
        self.column = 1

    def write(self, text: str) -> None:
        """Write text to the sink.

        Args:
            text: Text to write
        """
        if not text:
            return
        try:
            data = text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise HiPackEncodingError(exc, text) from exc

        try:
            if self._text_sink:
                self.sink.write(text)
            else:
                self._write_all(data)
        except (OSError, ValueError) as exc:
            raise HiPackIOError(exc) from exc

        self._advance(data)

    def _write_all(self, data: bytes) -> None:
        while data:
            written = self.sink.write(data)
            if written is None:
                # Non-blocking raw streams return None when nothing was accepted
                if isinstance(self.sink, io.RawIOBase):
                    raise BlockingIOError(errno.EAGAIN, "sink would block")
                return
            if written >= len(data):
                return
            if written == 0:
                raise OSError("sink accepted no bytes")
            data = data[written:]

    def _advance(self, data: bytes) -> None:
        self.offset += len(data)
        newlines = data.count(b"\n")
        if newlines:
            self.line += newlines
            self.column = len(data) - data.rfind(b"\n")
        else:
            self.column += len(data)

    def position(self) -> Tuple[int, int, int]:
        """Return the (offset, line, column) of the next byte to be written."""
        return self.offset, self.line, self.column
