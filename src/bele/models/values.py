"""Tagged unsigned integer values for width-dispatching writers.

A plain Python int carries no width, so callers pick one explicitly by
wrapping the value in U32 or U64. Range checks run at construction time.
"""

from __future__ import annotations

from typing import ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field

from ..order import UINT32_SIZE, UINT64_SIZE


class UnsignedValue(BaseModel):
    """Base class for tagged unsigned values.

    Subclasses set ``width`` (encoded size in bytes) and constrain ``value``.
    """

    model_config = ConfigDict(
        # No silent coercion from float/str
        strict=True,
        frozen=True,
        extra="forbid",
    )

    width: ClassVar[int]

    value: int

    def __init__(self, value: int, /) -> None:
        super().__init__(value=value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


class U32(UnsignedValue):
    """Unsigned 32-bit value, encoded as 4 bytes.

    Example:
        >>> U32(1).width
        4
    """

    width: ClassVar[int] = UINT32_SIZE

    value: int = Field(ge=0, le=0xFFFFFFFF)


class U64(UnsignedValue):
    """Unsigned 64-bit value, encoded as 8 bytes."""

    width: ClassVar[int] = UINT64_SIZE

    value: int = Field(ge=0, le=0xFFFFFFFFFFFFFFFF)


UnsignedInt = Union[U32, U64]
