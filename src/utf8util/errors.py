"""Exceptions raised by utf8util.

Every exception derives from :class:`Utf8Error` and from the built-in type a
caller would naturally catch, so ``except ValueError`` keeps working for code
that does not know about this package.
"""

from __future__ import annotations


class Utf8Error(Exception):
    """Base class for all utf8util errors."""


class MalformedInputError(Utf8Error, ValueError):
    """The code-unit sequence contains an unpaired surrogate."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Unpaired surrogate at index {index}")


class LengthOverflowError(Utf8Error, OverflowError):
    """The UTF-8 length does not fit in the requested integer range."""

    def __init__(self, computed: int, limit: int) -> None:
        self.computed = computed
        self.limit = limit
        super().__init__(f"UTF-8 length {computed} does not fit in {limit}")


class IndexOutOfRangeError(Utf8Error, IndexError):
    """An ``offset``/``length`` window does not lie within its buffer."""

    def __init__(self, start: int, end: int, size: int) -> None:
        self.start = start
        self.end = end
        self.size = size
        if start < 0 or start > size:
            msg = _bad_position_msg(start, size, "start index")
        elif end < 0 or end > size:
            msg = _bad_position_msg(end, size, "end index")
        else:
            msg = f"end index ({end}) must not be less than start index ({start})"
        super().__init__(msg)


def _bad_position_msg(index: int, size: int, desc: str) -> str:
    if index < 0:
        return f"{desc} ({index}) must not be negative"
    return f"{desc} ({index}) must not be greater than size ({size})"
