"""Unit tests for pydantic models and field types."""

from __future__ import annotations

import pytest
from pydantic import BaseModel, ValidationError

from packedint import MAX_VALUE, PackedIntField, PackedUInt, PackedValue, TruncatedInputError


class Record(BaseModel):
    """Model using the packed field helpers."""

    record_id: PackedUInt
    length: int = PackedIntField(default=0, description="Payload length")


class TestFields:
    """Test PackedUInt and PackedIntField."""

    def test_valid(self) -> None:
        """Test values inside the range are accepted."""
        record = Record(record_id=MAX_VALUE, length=10)

        assert record.record_id == MAX_VALUE
        assert record.length == 10

    def test_default(self) -> None:
        """Test Field() keyword arguments are passed through."""
        assert Record(record_id=1).length == 0

    @pytest.mark.parametrize("value", [-1, MAX_VALUE + 1])
    def test_annotated_out_of_range(self, value: int) -> None:
        """Test PackedUInt bounds."""
        with pytest.raises(ValidationError):
            Record(record_id=value)

    @pytest.mark.parametrize("value", [-1, MAX_VALUE + 1])
    def test_field_out_of_range(self, value: int) -> None:
        """Test PackedIntField bounds."""
        with pytest.raises(ValidationError):
            Record(record_id=0, length=value)


class TestPackedValue:
    """Test the PackedValue model."""

    def test_to_bytes(self) -> None:
        """Test encoding the held value."""
        assert PackedValue(value=320).to_bytes() == b"\x41\x00"

    def test_from_bytes(self) -> None:
        """Test decoding, with and without an offset."""
        assert PackedValue.from_bytes(b"\x41\x00").value == 320
        assert PackedValue.from_bytes(b"\x00\x41\x00", 1).value == 320

    def test_from_bytes_truncated(self) -> None:
        """Test decode errors propagate."""
        with pytest.raises(TruncatedInputError):
            PackedValue.from_bytes(b"\x41")

    def test_encoded_size(self) -> None:
        """Test the size helper."""
        assert PackedValue(value=63).encoded_size() == 1
        assert PackedValue(value=64).encoded_size() == 2

    def test_out_of_range(self) -> None:
        """Test construction enforces the packed range."""
        with pytest.raises(ValidationError):
            PackedValue(value=MAX_VALUE + 1)

    def test_strict(self) -> None:
        """Test values are not coerced from other types."""
        with pytest.raises(ValidationError):
            PackedValue(value="12")  # type: ignore[arg-type]
        with pytest.raises(ValidationError):
            PackedValue(value=True)

    def test_frozen(self) -> None:
        """Test instances are immutable and hashable."""
        packed = PackedValue(value=5)

        with pytest.raises(ValidationError):
            packed.value = 6  # type: ignore[misc]
        assert hash(packed) == hash(PackedValue(value=5))

    def test_extra_forbidden(self) -> None:
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            PackedValue(value=1, other=2)  # type: ignore[call-arg]
