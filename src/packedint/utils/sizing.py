"""Packed integer size calculation utilities.

This module answers "how many bytes will this take" without encoding
anything.
"""

from __future__ import annotations

from ..codec.encoder import check_value
from ..codec.layout import LENGTH_BITS_SHIFT, MAX_LENGTH, OFFSET_VALUE


def _build_length_ranges() -> dict[int, tuple[int, int]]:
    # Largest value of each length follows the decode recurrence with every
    # digit at its maximum: 63, then (prev << 8 | 0xFF) + 64.
    ranges: dict[int, tuple[int, int]] = {}
    low = 0
    high = (1 << LENGTH_BITS_SHIFT) - 1
    for length in range(1, MAX_LENGTH + 1):
        ranges[length] = (low, high)
        low = high + 1
        high = ((high << 8) | 0xFF) + OFFSET_VALUE
    return ranges


LENGTH_RANGES: dict[int, tuple[int, int]] = _build_length_ranges()


def value_range(length: int) -> tuple[int, int]:
    """Return the inclusive range of values encoded with ``length`` bytes.

    Args:
        length: Encoded length in bytes (1-4)

    Returns:
        Tuple of (smallest, largest) value

    Raises:
        ValueError: If length is not 1-4

    Example:
        >>> value_range(2)
        (64, 16447)
    """
    if length not in LENGTH_RANGES:
        raise ValueError(f"length must be 1-{MAX_LENGTH}, got {length}")
    return LENGTH_RANGES[length]


def encoded_size(value: int) -> int:
    """Calculate the packed size of ``value`` in bytes.

    Args:
        value: Integer to size (0 to 1,077,952,575 inclusive)

    Returns:
        Size in bytes (1-4)

    Raises:
        TypeError: If value is not an int
        OutOfRangeError: If value is negative or larger than 1,077,952,575

    Example:
        >>> encoded_size(63)
        1
        >>> encoded_size(64)
        2
    """
    check_value(value)

    for length, (_, high) in LENGTH_RANGES.items():
        if value <= high:
            return length

    return MAX_LENGTH
