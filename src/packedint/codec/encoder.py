"""Packed integer encoder.

This module provides the encode() function that converts an integer into its
shortest packed byte representation.
"""

from __future__ import annotations

from ..exceptions import OutOfRangeError
from ..utils.arrays import copy_of
from .layout import (
    BORROW_ADJUST,
    BYTE_MASK,
    LENGTH_BITS_SHIFT,
    MAX_LENGTH,
    MAX_VALUE,
    OFFSET_VALUE,
)


def check_value(value: int) -> None:
    """Validate that ``value`` can be represented as a packed integer.

    Raises:
        TypeError: If value is not an int (bools are rejected)
        OutOfRangeError: If value is negative or larger than MAX_VALUE
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Packed integer value must be an int, got {type(value).__name__}")
    if value < 0:
        raise OutOfRangeError(f"Integer must not be negative, got {value}")
    if value > MAX_VALUE:
        raise OutOfRangeError(
            f"Integer too large for packed integer: {value} (max: {MAX_VALUE})"
        )


def encode_one_digit(remaining: int) -> tuple[int, int]:
    """Split the least significant excess-64 digit off ``remaining``.

    The result satisfies ``((new_remaining << 8) | digit) + 64 == remaining``,
    which is exactly the step the decoder performs for each trailing byte.
    A low byte below 64 cannot be expressed as ``raw + 64`` on its own, so it
    borrows one from the higher digits.

    Args:
        remaining: Value still to be encoded (must be >= 64)

    Returns:
        Tuple of (digit, new_remaining), with digit in 0..255

    Raises:
        ValueError: If remaining is below 64

    Example:
        >>> encode_one_digit(286)
        (222, 0)
        >>> encode_one_digit(320)
        (0, 1)
    """
    if remaining < OFFSET_VALUE:
        raise ValueError(f"No digit to split off below {OFFSET_VALUE}, got {remaining}")

    digit = remaining & BYTE_MASK
    remaining >>= 8

    if digit >= OFFSET_VALUE:
        digit -= OFFSET_VALUE
    else:
        digit += BORROW_ADJUST
        remaining -= 1

    return digit, remaining


def encode(value: int) -> bytes:
    """Convert an integer into a packed unsigned integer.

    Digits are written from the end of a 4-byte scratch buffer towards its
    start. Whatever is left after the last digit (always below 64) becomes the
    leading byte, with the number of trailing digits folded into its top two
    bits as the length tag.

    Args:
        value: Integer to encode (0 to 1,077,952,575 inclusive)

    Returns:
        Packed integer, 1 to 4 bytes

    Raises:
        TypeError: If value is not an int
        OutOfRangeError: If value is negative or larger than 1,077,952,575

    Example:
        >>> encode(64)
        b'@\\x00'
        >>> encode(320).hex()
        '4100'
    """
    check_value(value)

    result = bytearray(MAX_LENGTH)
    index = MAX_LENGTH - 1
    remaining = value

    while remaining >= OFFSET_VALUE:
        result[index], remaining = encode_one_digit(remaining)
        index -= 1

    group_count = MAX_LENGTH - 1 - index
    result[index] = remaining | (group_count << LENGTH_BITS_SHIFT)

    return copy_of(result, index, MAX_LENGTH - index)
