"""Packed integer codec.

This module provides conversion between integers in the range
0 to 1,077,952,575 and their 1 to 4 byte packed representation.
"""

from __future__ import annotations

from .decoder import decode, expected_length, to_display_string
from .encoder import encode, encode_one_digit
from .layout import MAX_LENGTH, MAX_VALUE
from .stream import decode_next, decode_sequence, encode_sequence, iter_decode

__all__ = [
    "encode",
    "encode_one_digit",
    "decode",
    "expected_length",
    "to_display_string",
    "decode_next",
    "encode_sequence",
    "iter_decode",
    "decode_sequence",
    "MAX_LENGTH",
    "MAX_VALUE",
]
