"""Constants describing the packed integer byte layout.

The first byte carries the length tag (encoded length - 1) in its two most
significant bits and the most significant value digit in the low six bits.
Every following byte is an excess-64 digit.
"""

from __future__ import annotations

OFFSET_VALUE = 0x40

MAX_VALUE = 0x40404040 - 1

MAX_LENGTH = 4

LENGTH_BITS_SHIFT = 6

# Low six bits of the leading byte
VALUE_MASK = OFFSET_VALUE - 1

BYTE_MASK = 0xFF

# Added to a digit below OFFSET_VALUE when it borrows from the next digit
BORROW_ADJUST = 0x100 - OFFSET_VALUE
