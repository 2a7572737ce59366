"""Utility functions for packedint.

This module provides argument guards and size calculation.
"""

from __future__ import annotations

from .arrays import copy_of, require_non_null
from .sizing import LENGTH_RANGES, encoded_size, value_range

__all__ = [
    # Guards
    "copy_of",
    "require_non_null",
    # Sizing functions
    "LENGTH_RANGES",
    "encoded_size",
    "value_range",
]
