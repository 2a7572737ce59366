"""Pydantic field types for values that will be packed.

Declaring a model field with these types rejects out-of-range values at
model construction, before they ever reach encode().
"""

from __future__ import annotations

from typing import Annotated, Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

from ..codec.layout import MAX_VALUE

PackedUInt = Annotated[int, Field(ge=0, le=MAX_VALUE)]


def PackedIntField(**kwargs: Any) -> FieldInfo:
    """Create an integer field limited to the packed integer range.

    This is a convenience wrapper around Pydantic's Field() that sets
    ge=0 and le=1,077,952,575.

    Args:
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Record(BaseModel):
        ...     length: int = PackedIntField(description="Payload length")
    """
    return cast(FieldInfo, Field(ge=0, le=MAX_VALUE, **kwargs))
