"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from packedint import MAX_VALUE

# (largest value of a length, smallest value of the next length)
LENGTH_BOUNDARIES = [
    (63, 64),
    (16_447, 16_448),
    (4_210_751, 4_210_752),
]


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return b"Hello, packed world!"


@pytest.fixture
def max_value() -> int:
    """Largest encodable value."""
    return MAX_VALUE


@pytest.fixture(params=LENGTH_BOUNDARIES, ids=["1-2", "2-3", "3-4"])
def length_boundary(request: pytest.FixtureRequest) -> tuple[int, int]:
    """Pair of values on either side of a length change."""
    return request.param
