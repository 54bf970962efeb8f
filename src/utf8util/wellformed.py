"""UTF-8 well-formedness checks for byte buffers and binary streams.

Well-formed means exactly what a conforming encoder can produce (Unicode 6.0,
D92): overlong forms, encoded surrogates (U+D800..U+DFFF) and code points
above U+10FFFF are all rejected, so the answer equals
``data.decode("utf-8").encode("utf-8") == data`` without decoding anything.

Both entry points share one state machine.  It reads from a small byte
source that can skip ASCII runs in bulk and hand out the (at most three)
trailing bytes of a multi-byte sequence.
"""

from __future__ import annotations

import io
import logging
import re
from typing import IO

from utf8util._utils import (
    DEFAULT_BUFFER_SIZE,
    _validate_positive_int,
    check_position_indexes,
)

logger = logging.getLogger(__name__)

_HIGH_BYTE = re.compile(b"[\x80-\xff]")


def is_well_formed(
    data: bytes | bytearray | memoryview, offset: int = 0, length: int | None = None
) -> bool:
    """Return whether ``data[offset:offset + length]`` is well-formed UTF-8.

    The window is checked on its own, so this can be ``False`` even when
    the whole buffer is well-formed (the window may cut a sequence in two).

    :param data: Any object supporting the buffer protocol.
    :param offset: Index of the first byte to check.
    :param length: Number of bytes to check; ``None`` means up to the end.
    :returns: ``True`` if the window is well-formed UTF-8.
    :raises IndexOutOfRangeError: If the window does not lie within *data*.
    """
    view = memoryview(data).cast("B")
    size = len(view)
    end = size if length is None else offset + length
    check_position_indexes(offset, end, size)

    # Pure ASCII windows never reach the state machine.
    match = _HIGH_BYTE.search(view, offset, end)
    if match is None:
        return True
    return _is_well_formed_slow_path(_SliceSource(view, match.start(), end, offset))


def is_well_formed_stream(
    stream: IO[bytes], buffer_size: int = DEFAULT_BUFFER_SIZE
) -> bool:
    """Return whether the rest of *stream* is well-formed UTF-8.

    The stream is read in chunks of at most *buffer_size* bytes (via
    ``read1`` when the stream has it) and checking stops at the first
    malformed sequence, so up to one chunk past the offending byte may be
    consumed.  The stream is never closed.  Errors raised by the stream
    propagate unchanged.

    :param stream: A binary file-like object.
    :param buffer_size: Size of each read from *stream*.
    :returns: ``True`` if every remaining byte forms well-formed UTF-8.
    :raises TypeError: If *stream* is a text stream.
    """
    _validate_positive_int(buffer_size, "buffer_size")
    if isinstance(stream, io.TextIOBase):
        msg = "stream must be opened in binary mode"
        raise TypeError(msg)
    return _is_well_formed_slow_path(_StreamSource(stream, buffer_size))


class _SliceSource:
    """Bounded byte source over a memoryview window, without copying."""

    __slots__ = ("_base", "_end", "_pos", "_view")

    def __init__(self, view: memoryview, start: int, end: int, base: int) -> None:
        self._view = view
        self._pos = start
        self._end = end
        self._base = base

    @property
    def consumed(self) -> int:
        return self._pos - self._base

    def next_non_ascii(self) -> int | None:
        """Consume bytes up to and including the next byte >= 0x80."""
        match = _HIGH_BYTE.search(self._view, self._pos, self._end)
        if match is None:
            self._pos = self._end
            return None
        self._pos = match.end()
        return self._view[match.start()]

    def read(self, size: int) -> bytes | memoryview:
        """Return the next *size* bytes, or fewer at the end of the window."""
        start = self._pos
        self._pos = min(start + size, self._end)
        return self._view[start : self._pos]


class _StreamSource:
    """Byte source that reads a stream in chunks into a per-call buffer."""

    __slots__ = ("_buffer_size", "_chunk", "_consumed", "_pos", "_read")

    def __init__(self, stream: IO[bytes], buffer_size: int) -> None:
        self._read = getattr(stream, "read1", stream.read)
        self._buffer_size = buffer_size
        self._chunk = b""
        self._pos = 0
        self._consumed = 0

    @property
    def consumed(self) -> int:
        return self._consumed + self._pos

    def _refill(self) -> bool:
        chunk = self._read(self._buffer_size)
        if chunk is None:
            msg = "stream returned no data; non-blocking streams are not supported"
            raise ValueError(msg)
        if isinstance(chunk, str):
            msg = "stream must return bytes, not str"
            raise TypeError(msg)
        self._consumed += self._pos
        self._chunk = chunk
        self._pos = 0
        return bool(chunk)

    def next_non_ascii(self) -> int | None:
        """Consume bytes up to and including the next byte >= 0x80."""
        while True:
            match = _HIGH_BYTE.search(self._chunk, self._pos)
            if match is not None:
                self._pos = match.end()
                return self._chunk[match.start()]
            self._pos = len(self._chunk)
            if not self._refill():
                return None

    def read(self, size: int) -> bytes:
        """Return the next *size* bytes, or fewer if the stream ends first."""
        data = self._chunk[self._pos : self._pos + size]
        self._pos += len(data)
        while len(data) < size and self._refill():
            more = self._chunk[: size - len(data)]
            self._pos = len(more)
            data += more
        return data


def _reject(
    source: _SliceSource | _StreamSource, seq_bytes: int, reason: str
) -> bool:
    logger.debug("malformed UTF-8 at byte %d: %s", source.consumed - seq_bytes, reason)
    return False


def _is_well_formed_slow_path(source: _SliceSource | _StreamSource) -> bool:  # noqa: PLR0911, PLR0912
    while True:
        lead = source.next_non_ascii()
        if lead is None:
            return True

        if lead < 0xE0:
            # Two-byte form.  0x80-0xBF is a stray trailing byte and
            # 0xC0-0xC1 can only start an overlong encoding of ASCII.
            if lead < 0xC2:
                return _reject(source, 1, f"invalid lead byte 0x{lead:02X}")
            tail = source.read(1)
            if len(tail) < 1:
                return _reject(source, 1 + len(tail), "truncated 2-byte sequence")
            if not 0x80 <= tail[0] <= 0xBF:
                return _reject(source, 2, "invalid trailing byte")

        elif lead < 0xF0:
            # Three-byte form.
            tail = source.read(2)
            if len(tail) < 2:
                return _reject(source, 1 + len(tail), "truncated 3-byte sequence")
            second = tail[0]
            if not 0x80 <= second <= 0xBF or not 0x80 <= tail[1] <= 0xBF:
                return _reject(source, 3, "invalid trailing byte")
            # Overlong: the 5 most significant payload bits must not all be zero.
            if lead == 0xE0 and second < 0xA0:
                return _reject(source, 3, "overlong 3-byte encoding")
            if lead == 0xED and second >= 0xA0:
                return _reject(source, 3, "encoded surrogate code point")

        else:
            # Four-byte form.
            tail = source.read(3)
            if len(tail) < 3:
                return _reject(source, 1 + len(tail), "truncated 4-byte sequence")
            second = tail[0]
            if (
                not 0x80 <= second <= 0xBF
                or not 0x80 <= tail[1] <= 0xBF
                or not 0x80 <= tail[2] <= 0xBF
            ):
                return _reject(source, 4, "invalid trailing byte")
            # Plane must be 1..16: F0 needs 90-BF, F4 needs 80-8F, F5+ never.
            if lead > 0xF4:
                return _reject(source, 4, f"invalid lead byte 0x{lead:02X}")
            if lead == 0xF0 and second < 0x90:
                return _reject(source, 4, "overlong 4-byte encoding")
            if lead == 0xF4 and second > 0x8F:
                return _reject(source, 4, "code point above U+10FFFF")
