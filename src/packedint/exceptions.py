"""Exception hierarchy for packedint.

All exceptions inherit from PackedIntegerError so callers can catch any
packedint-specific failure with a single ``except`` clause. Codec errors also
carry an :class:`ErrorKind` so they can be classified without isinstance
chains.
"""

from __future__ import annotations

import enum
from typing import ClassVar, Optional


class ErrorKind(enum.Enum):
    """Closed set of codec failure kinds."""

    OUT_OF_RANGE = "out_of_range"
    NULL_INPUT = "null_input"
    EMPTY_INPUT = "empty_input"
    TRUNCATED_INPUT = "truncated_input"


class PackedIntegerError(Exception):
    """Base exception for all packedint errors."""

    kind: ClassVar[Optional[ErrorKind]] = None


class EncodeError(PackedIntegerError):
    """Raised when a value cannot be converted to a packed integer."""

    pass


class OutOfRangeError(EncodeError, ValueError):
    """Raised when a value is negative or larger than the packed maximum.

    Examples:
        - encode(-1)
        - encode(1_077_952_576)
    """

    kind = ErrorKind.OUT_OF_RANGE


class DecodeError(PackedIntegerError):
    """Raised when a buffer cannot be read as a packed integer."""

    pass


class NullInputError(DecodeError, TypeError):
    """Raised when ``None`` is passed where a byte buffer is required."""

    kind = ErrorKind.NULL_INPUT


class EmptyInputError(DecodeError, ValueError):
    """Raised when decoding a zero-length buffer."""

    kind = ErrorKind.EMPTY_INPUT


class TruncatedInputError(DecodeError, ValueError):
    """Raised when the buffer is shorter than its length tag promises.

    Examples:
        - Only the first byte of a 2-byte encoding was received
        - A sequence of packed integers ends in the middle of a value
    """

    kind = ErrorKind.TRUNCATED_INPUT

