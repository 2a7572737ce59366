"""Argument guards and array helpers shared by the codec modules."""

from __future__ import annotations

from typing import Any, Sequence

from ..exceptions import NullInputError


def require_non_null(obj: Any, name: str) -> None:
    """Raise NullInputError if ``obj`` is None.

    Args:
        obj: Argument to check
        name: Argument name used in the error message

    Raises:
        NullInputError: If ``obj`` is None
    """
    if obj is None:
        raise NullInputError(f"{name} must not be None")


def copy_of(data: Sequence[int], start: int, length: int) -> bytes:
    """Copy ``length`` bytes of ``data`` starting at ``start``.

    Unlike plain slicing this never returns a short result: the whole range
    must lie inside ``data``.

    Args:
        data: Source buffer
        start: Index of the first byte to copy
        length: Number of bytes to copy

    Returns:
        New bytes object holding the copied range

    Raises:
        NullInputError: If ``data`` is None
        ValueError: If ``start`` or ``length`` is negative
        IndexError: If the range extends past the end of ``data``
    """
    require_non_null(data, "data")

    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start + length > len(data):
        raise IndexError(
            f"Range {start}..{start + length} exceeds buffer of {len(data)} bytes"
        )

    return bytes(data[start : start + length])
