"""Packed integer decoder.

This module provides decode() and the helpers that inspect a packed integer
inside a possibly larger buffer.
"""

from __future__ import annotations

from typing import Sequence

from ..exceptions import EmptyInputError, TruncatedInputError
from ..utils.arrays import require_non_null
from .layout import LENGTH_BITS_SHIFT, OFFSET_VALUE, VALUE_MASK


def _byte_at(data: Sequence[int], index: int) -> int:
    byte = data[index]
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"Element at index {index} is not a byte: {byte}")
    return byte


def _leading_byte(data: Sequence[int], offset: int) -> int:
    if offset < 0 or offset >= len(data):
        raise IndexError(f"Offset {offset} outside buffer of {len(data)} bytes")
    return _byte_at(data, offset)


def expected_length(data: Sequence[int], offset: int = 0) -> int:
    """Get the length of the packed integer starting at ``offset``.

    Only the leading byte is read; the caller is responsible for checking that
    the buffer actually holds that many bytes.

    Args:
        data: Buffer in which the packed integer resides
        offset: Index of the packed integer's leading byte

    Returns:
        Expected length in bytes (1 to 4)

    Raises:
        NullInputError: If data is None
        IndexError: If offset does not point into data
        ValueError: If the leading element is outside 0..255
    """
    require_non_null(data, "data")

    return (_leading_byte(data, offset) >> LENGTH_BITS_SHIFT) + 1


def decode(data: Sequence[int], offset: int = 0) -> int:
    """Convert a packed integer in a possibly larger buffer to an integer.

    Bytes before ``offset`` and after the end of the packed integer are
    ignored.

    Args:
        data: Buffer in which the packed integer resides
        offset: Index of the packed integer's leading byte

    Returns:
        Decoded integer (0 to 1,077,952,575)

    Raises:
        NullInputError: If data is None
        EmptyInputError: If data has zero length
        TruncatedInputError: If data ends before the packed integer does
        IndexError: If offset does not point into data
        ValueError: If an element of a non-bytes buffer is outside 0..255

    Example:
        >>> decode(b"\\x41\\x00")
        320
        >>> decode(b"\\xff\\x41\\x00\\xff", 1)
        320
    """
    require_non_null(data, "data")

    if len(data) == 0:
        raise EmptyInputError("Buffer must have a length greater than 0")

    length = expected_length(data, offset)

    if offset + length > len(data):
        raise TruncatedInputError(
            f"Buffer is too short for packed integer: need {length} bytes at offset "
            f"{offset}, have {len(data) - offset}"
        )

    value = data[offset] & VALUE_MASK

    for i in range(offset + 1, offset + length):
        value = ((value << 8) | _byte_at(data, i)) + OFFSET_VALUE

    return value


def to_display_string(data: Sequence[int]) -> str:
    """Decode a packed integer at offset 0 and render it in base 10.

    Raises:
        Any error raised by decode()
    """
    return str(decode(data))
