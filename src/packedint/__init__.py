"""packedint: Packed Integer Codec

Converts integers between 0 and 1,077,952,575 to and from a compact 1 to 4
byte encoding. The two most significant bits of the first byte hold the
encoded length minus one; the remaining bits hold the value as big-endian
excess-64 digits.

Quick Start:
    >>> from packedint import decode, encode
    >>> encode(320).hex()
    '4100'
    >>> decode(b"\\xff\\x41\\x00", 1)
    320

Length ranges:
    1 byte:  0 - 63
    2 bytes: 64 - 16,447
    3 bytes: 16,448 - 4,210,751
    4 bytes: 4,210,752 - 1,077,952,575
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import (
    MAX_LENGTH,
    MAX_VALUE,
    decode,
    decode_next,
    decode_sequence,
    encode,
    encode_one_digit,
    encode_sequence,
    expected_length,
    iter_decode,
    to_display_string,
)
from .exceptions import (
    DecodeError,
    EmptyInputError,
    EncodeError,
    ErrorKind,
    NullInputError,
    OutOfRangeError,
    PackedIntegerError,
    TruncatedInputError,
)
from .models import PackedIntField, PackedUInt, PackedValue
from .utils import LENGTH_RANGES, encoded_size, value_range

__all__ = [
    # Core API
    "encode",
    "decode",
    "expected_length",
    "to_display_string",
    "encode_one_digit",
    "MAX_VALUE",
    "MAX_LENGTH",
    # Streams
    "decode_next",
    "encode_sequence",
    "iter_decode",
    "decode_sequence",
    # Exceptions
    "ErrorKind",
    "PackedIntegerError",
    "EncodeError",
    "OutOfRangeError",
    "DecodeError",
    "NullInputError",
    "EmptyInputError",
    "TruncatedInputError",
    # Models
    "PackedValue",
    "PackedIntField",
    "PackedUInt",
    # Sizing
    "LENGTH_RANGES",
    "encoded_size",
    "value_range",
    # Version
    "__version__",
]
