"""Helpers for buffers holding several consecutive packed integers."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from ..utils.arrays import require_non_null
from .decoder import decode, expected_length
from .encoder import encode


def decode_next(data: Sequence[int], offset: int = 0) -> tuple[int, int]:
    """Decode one packed integer and return where the next one starts.

    Args:
        data: Buffer holding packed integers
        offset: Index of the packed integer's leading byte

    Returns:
        Tuple of (value, next_offset)

    Raises:
        Any error raised by decode()
    """
    value = decode(data, offset)
    return value, offset + expected_length(data, offset)


def encode_sequence(values: Iterable[int]) -> bytes:
    """Encode each value and concatenate the packed integers.

    Example:
        >>> encode_sequence([1, 64, 320]).hex()
        '0140004100'
    """
    result = bytearray()
    for value in values:
        result.extend(encode(value))
    return bytes(result)


def iter_decode(data: Sequence[int], offset: int = 0) -> Iterator[int]:
    """Yield consecutive packed integers until the buffer is exhausted.

    Raises:
        NullInputError: If data is None
        TruncatedInputError: If the buffer ends inside a packed integer
    """
    require_non_null(data, "data")

    while offset < len(data):
        value, offset = decode_next(data, offset)
        yield value


def decode_sequence(data: Sequence[int], offset: int = 0) -> list[int]:
    """Decode every packed integer from ``offset`` to the end of the buffer.

    Example:
        >>> decode_sequence(bytes.fromhex("0140004100"))
        [1, 64, 320]
    """
    return list(iter_decode(data, offset))
