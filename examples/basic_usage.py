#!/usr/bin/env python3
"""Basic usage example for packedint.

This example demonstrates:
1. Encoding integers to packed bytes
2. Decoding them back, including from inside a larger buffer
3. Handling errors
"""

from __future__ import annotations

from packedint import (
    LENGTH_RANGES,
    PackedIntegerError,
    decode,
    decode_sequence,
    encode,
    encode_sequence,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("packedint Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Encoding values of every length...")
    for length, (low, high) in LENGTH_RANGES.items():
        print(f"   {length} byte(s): {low:>13,} -> {encode(low).hex():<8}  "
              f"{high:>13,} -> {encode(high).hex()}")
    print()

    print("2. Decoding at an offset...")
    buffer = b"\xaa" + encode(320) + b"\xbb"
    print(f"   buffer {buffer.hex()} at offset 1 -> {decode(buffer, 1)}")
    values = [1, 64, 70_000]
    print(f"   sequence {values} -> {encode_sequence(values).hex()}"
          f" -> {decode_sequence(encode_sequence(values))}")
    print()

    print("3. Errors...")
    for bad in (lambda: encode(-1), lambda: decode(encode(1000)[:1]), lambda: decode(b"")):
        try:
            bad()
        except PackedIntegerError as e:
            print(f"   {type(e).__name__} ({e.kind.value}): {e}")


if __name__ == "__main__":
    main()
