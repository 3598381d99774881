"""Pull-based byte sources with a single byte of pushback."""

from __future__ import annotations

from typing import IO
from typing import Any
from typing import Final

from ._errors import EndOfStreamError

NEWLINE: Final = 0x0A


class ByteSource:
    """Sequential byte reader with exactly one slot of pushback.

    Subclasses only supply ``_next_byte``. Cursor bookkeeping and the
    pushback slot live here, so every source behaves identically.
    """

    def __init__(self) -> None:
        self._pending: int | None = None
        self.pos = 0
        self.lineno = 1
        self.colno = 1
        self._prev_colno = 1

    def _next_byte(self) -> int | None:
        raise NotImplementedError

    def read_byte(self) -> int:
        """Returns the next byte.

        Raises:
            EndOfStreamError: if the source is exhausted
        """
        if self._pending is not None:
            byte = self._pending
            self._pending = None
        else:
            fetched = self._next_byte()
            if fetched is None:
                raise EndOfStreamError(
                    "Unexpected end of input", self.pos, self.lineno, self.colno
                )
            byte = fetched

        self.pos += 1
        if byte == NEWLINE:
            self._prev_colno = self.colno
            self.lineno += 1
            self.colno = 1
        else:
            self.colno += 1
        return byte

    def unread(self, byte: int) -> None:
        """Pushes back the byte that was just read.

        Args:
            byte: The byte returned by the most recent ``read_byte`` call
        """
        if self._pending is not None:
            raise RuntimeError("pushback slot already occupied")

        self._pending = byte
        self.pos -= 1
        if byte == NEWLINE:
            self.lineno -= 1
            self.colno = self._prev_colno
        else:
            self.colno -= 1

    def peek(self) -> int | None:
        """Returns the next byte without consuming it, or None at the end."""
        try:
            byte = self.read_byte()
        except EndOfStreamError:
            return None
        self.unread(byte)
        return byte


class BufferSource(ByteSource):
    """Byte source over an in-memory buffer."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        super().__init__()
        self.data: Final = bytes(data)
        self._cursor = 0

    def _next_byte(self) -> int | None:
        if self._cursor >= len(self.data):
            return None
        byte = self.data[self._cursor]
        self._cursor += 1
        return byte


class StreamSource(ByteSource):
    """Byte source over a readable stream, fetched in chunks.

    Text streams are accepted too; their chunks are encoded as UTF-8.
    """

    def __init__(self, stream: IO[Any], buffer_size: int = 8192) -> None:
        super().__init__()
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size: Final = buffer_size
        self._chunk = b""
        self._cursor = 0
        self._eof = False

    def _fill(self) -> bool:
        if self._eof:
            return False

        chunk = self.stream.read(self.buffer_size)
        if not chunk:
            self._eof = True
            return False
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")

        self._chunk = chunk
        self._cursor = 0
        return True

    def _next_byte(self) -> int | None:
        if self._cursor >= len(self._chunk) and not self._fill():
            return None
        byte = self._chunk[self._cursor]
        self._cursor += 1
        return byte


def as_source(obj: Any) -> ByteSource:
    """Wraps raw input in the matching byte source.

    Args:
        obj: A ByteSource, a bytes-like buffer, a str, or a readable stream

    Returns:
        A ByteSource positioned at the start of the input
    """
    if isinstance(obj, ByteSource):
        return obj
    if isinstance(obj, str):
        return BufferSource(obj.encode("utf-8"))
    if isinstance(obj, bytes | bytearray | memoryview):
        return BufferSource(obj)
    if hasattr(obj, "read"):
        return StreamSource(obj)

    msg = f"cannot read JSON from {type(obj).__name__}"
    raise TypeError(msg)
