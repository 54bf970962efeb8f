"""Fast UTF-8 length computation and strict well-formedness checking."""

from __future__ import annotations

from utf8util._utils import MAX_ENCODED_LENGTH
from utf8util.errors import (
    IndexOutOfRangeError,
    LengthOverflowError,
    MalformedInputError,
    Utf8Error,
)
from utf8util.length import encoded_length
from utf8util.wellformed import is_well_formed, is_well_formed_stream

__version__ = "1.0.0"
__all__ = [
    "MAX_ENCODED_LENGTH",
    "IndexOutOfRangeError",
    "LengthOverflowError",
    "MalformedInputError",
    "Utf8Error",
    "encoded_length",
    "is_well_formed",
    "is_well_formed_stream",
]
