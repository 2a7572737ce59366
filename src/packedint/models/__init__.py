"""Pydantic modeling for packed integer values."""

from __future__ import annotations

from .base import PackedValue
from .fields import PackedIntField, PackedUInt

__all__ = [
    "PackedValue",
    "PackedIntField",
    "PackedUInt",
]
