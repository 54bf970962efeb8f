"""UTF-8 encoded length of text and UTF-16 code units, computed without encoding."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from utf8util._utils import (
    MAX_CODE_UNIT,
    MAX_ENCODED_LENGTH,
    MAX_SURROGATE,
    MIN_LOW_SURROGATE,
    MIN_SURROGATE,
    _validate_positive_int,
)
from utf8util.errors import LengthOverflowError, MalformedInputError

logger = logging.getLogger(__name__)


def encoded_length(
    sequence: str | Sequence[int], max_length: int = MAX_ENCODED_LENGTH
) -> int:
    """Return the number of bytes in the UTF-8 encoded form of *sequence*.

    For a ``str`` without surrogates this equals ``len(text.encode("utf-8"))``
    but never builds the encoded bytes.  Any other sequence is read as UTF-16
    code units, where a high surrogate followed by a low surrogate counts as
    one four-byte code point.

    :param sequence: A ``str``, or an indexable sequence of UTF-16 code units
        (``list[int]``, ``array("H")``, ...).
    :param max_length: Largest length the caller can represent.  Defaults to
        the maximum of a signed 32-bit integer.
    :returns: The UTF-8 byte count.
    :raises MalformedInputError: If *sequence* contains an unpaired surrogate.
    :raises LengthOverflowError: If the length exceeds *max_length*.
    :raises ValueError: If a code unit lies outside ``0..0xFFFF``.
    """
    _validate_positive_int(max_length, "max_length")
    if isinstance(sequence, str):
        utf8_length = _text_length(sequence)
    else:
        utf8_length = _code_unit_length(sequence)
    if utf8_length > max_length:
        raise LengthOverflowError(utf8_length, max_length)
    return utf8_length


def _code_unit_length(units: Sequence[int]) -> int:
    utf16_length = len(units)
    utf8_length = utf16_length
    i = 0

    # Leading ASCII run: one byte each, already counted.
    while i < utf16_length and 0 <= units[i] < 0x80:
        i += 1

    # Two-byte range until the first unit that needs three bytes.
    while i < utf16_length:
        c = units[i]
        if c < 0x800:
            if c >= 0x80:
                utf8_length += 1
            elif c < 0:
                _raise_bad_code_unit(c, i)
        else:
            utf8_length += _general_length(units, i)
            break
        i += 1

    return utf8_length


def _general_length(units: Sequence[int], start: int) -> int:
    """Return the bytes beyond one-per-unit needed for ``units[start:]``."""
    utf16_length = len(units)
    extra = 0
    i = start
    while i < utf16_length:
        c = units[i]
        if c < 0x800:
            if c >= 0x80:
                extra += 1
            elif c < 0:
                _raise_bad_code_unit(c, i)
        elif c > MAX_CODE_UNIT:
            _raise_bad_code_unit(c, i)
        else:
            extra += 2
            if MIN_SURROGATE <= c <= MAX_SURROGATE:
                # A well-formed pair decodes to something other than the unit itself.
                if _code_point_at(units, i) == c:
                    logger.debug("unpaired surrogate 0x%04X at index %d", c, i)
                    raise MalformedInputError(i)
                # Pair is 4 bytes over 2 units; skip the low surrogate.
                i += 1
        i += 1
    return extra


def _code_point_at(units: Sequence[int], i: int) -> int:
    c = units[i]
    if MIN_SURROGATE <= c < MIN_LOW_SURROGATE and i + 1 < len(units):
        low = units[i + 1]
        if MIN_LOW_SURROGATE <= low <= MAX_SURROGATE:
            return 0x10000 + ((c - MIN_SURROGATE) << 10) + (low - MIN_LOW_SURROGATE)
    return c


def _text_length(text: str) -> int:
    if text.isascii():
        return len(text)
    utf8_length = len(text)
    for i, char in enumerate(text):
        c = ord(char)
        if c < 0x80:
            continue
        if c < 0x800:
            utf8_length += 1
        elif c <= MAX_CODE_UNIT:
            if MIN_SURROGATE <= c <= MAX_SURROGATE:
                # A str holds code points, so a surrogate here is never paired.
                logger.debug("unpaired surrogate U+%04X at index %d", c, i)
                raise MalformedInputError(i)
            utf8_length += 2
        else:
            utf8_length += 3
    return utf8_length


def _raise_bad_code_unit(value: int, index: int) -> None:
    msg = f"code unit at index {index} is out of range [0, 0xFFFF]: {value}"
    raise ValueError(msg)
