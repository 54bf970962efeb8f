"""Internal shared utilities for utf8util."""

from __future__ import annotations

import io

from utf8util.errors import IndexOutOfRangeError

#: Largest encoded length :func:`~utf8util.encoded_length` reports by default
#: (the maximum of a signed 32-bit integer).
MAX_ENCODED_LENGTH: int = 2**31 - 1

#: Buffer size used when wrapping an unbuffered stream.
DEFAULT_BUFFER_SIZE: int = io.DEFAULT_BUFFER_SIZE

#: Inclusive bounds of the UTF-16 surrogate range.
MIN_SURROGATE: int = 0xD800
MAX_SURROGATE: int = 0xDFFF
MIN_LOW_SURROGATE: int = 0xDC00

#: Largest UTF-16 code unit.
MAX_CODE_UNIT: int = 0xFFFF


def check_position_indexes(start: int, end: int, size: int) -> None:
    """Raise :class:`IndexOutOfRangeError` unless ``0 <= start <= end <= size``."""
    if start < 0 or end < start or end > size:
        raise IndexOutOfRangeError(start, end, size)


def _validate_positive_int(value: int, name: str) -> None:
    """Raise ValueError if *value* is not a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"{name} must be a positive integer"
        raise ValueError(msg)
