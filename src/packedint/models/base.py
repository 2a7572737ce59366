"""Pydantic value model for a single packed integer."""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict

from ..codec.decoder import decode
from ..codec.encoder import encode
from ..codec.layout import MAX_VALUE
from ..utils.sizing import encoded_size
from .fields import PackedIntField


class PackedValue(BaseModel):
    """A validated packed integer value.

    Example:
        >>> PackedValue(value=320).to_bytes().hex()
        '4100'
        >>> PackedValue.from_bytes(b"\\x41\\x00").value
        320
    """

    model_config = ConfigDict(
        # Reject bools and numeric strings instead of coercing them
        strict=True,
        frozen=True,
        extra="forbid",
    )

    value: int = PackedIntField(description=f"Unsigned integer, 0 to {MAX_VALUE}")

    def to_bytes(self) -> bytes:
        """Return the packed encoding of the value."""
        return encode(self.value)

    def encoded_size(self) -> int:
        """Return the packed size in bytes."""
        return encoded_size(self.value)

    @classmethod
    def from_bytes(cls, data: Sequence[int], offset: int = 0) -> PackedValue:
        """Decode a packed integer from ``data`` at ``offset``.

        Raises:
            Any error raised by decode()
        """
        return cls(value=decode(data, offset))
