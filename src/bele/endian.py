"""Codec objects with a fixed byte order.

``big`` and ``little`` bind every reader and writer to one byte order, so
protocol code can pick an order once per format instead of per call:

    >>> from bele import big, little
    >>> big.uint16(b"\\x01\\x00")
    256
    >>> little.uint32(bytes([1, 0, 0, 0]))
    1
"""

from __future__ import annotations

from dataclasses import dataclass

from .codec.decoder import (
    BytesLike,
    read_float64,
    read_uint16,
    read_uint24,
    read_uint32,
    read_uint64,
)
from .codec.encoder import (
    WritableBuffer,
    pack_float64,
    pack_uint16,
    pack_uint24,
    pack_uint32,
    pack_uint64,
    put_float64,
    put_uint16,
    put_uint24,
    put_uint32,
    put_uint64,
)
from .codec.stream import BinaryWriter, write_to_stream, write_uint24_to_stream
from .models.values import UnsignedInt
from .order import ByteOrder


@dataclass(frozen=True)
class Endian:
    """Readers and writers bound to one byte order.

    Attributes:
        order: Byte order used by every method. Accepts a ByteOrder or any
            alias understood by ByteOrder.parse ("be", "<", "network", ...).
    """

    order: ByteOrder = ByteOrder.BIG

    def __post_init__(self) -> None:
        """Normalize and validate the byte order."""
        # frozen dataclass: bypass __setattr__ to store the parsed member
        object.__setattr__(self, "order", ByteOrder.parse(self.order))

    # Readers
    def uint16(self, buf: BytesLike) -> int:
        return read_uint16(buf, self.order)

    def uint24(self, buf: BytesLike) -> int:
        return read_uint24(buf, self.order)

    def uint32(self, buf: BytesLike) -> int:
        return read_uint32(buf, self.order)

    def uint64(self, buf: BytesLike) -> int:
        return read_uint64(buf, self.order)

    def float64(self, buf: BytesLike) -> float:
        return read_float64(buf, self.order)

    # Buffer writers
    def put_uint16(self, buf: WritableBuffer, value: int) -> None:
        put_uint16(buf, value, self.order)

    def put_uint24(self, buf: WritableBuffer, value: int) -> None:
        put_uint24(buf, value, self.order)

    def put_uint32(self, buf: WritableBuffer, value: int) -> None:
        put_uint32(buf, value, self.order)

    def put_uint64(self, buf: WritableBuffer, value: int) -> None:
        put_uint64(buf, value, self.order)

    def put_float64(self, buf: WritableBuffer, value: float) -> None:
        put_float64(buf, value, self.order)

    def pack_uint16(self, value: int) -> bytes:
        return pack_uint16(value, self.order)

    def pack_uint24(self, value: int) -> bytes:
        return pack_uint24(value, self.order)

    def pack_uint32(self, value: int) -> bytes:
        return pack_uint32(value, self.order)

    def pack_uint64(self, value: int) -> bytes:
        return pack_uint64(value, self.order)

    def pack_float64(self, value: float) -> bytes:
        return pack_float64(value, self.order)

    # Stream writers
    def write_uint24(self, stream: BinaryWriter, value: int) -> None:
        """Write a 3-byte unsigned integer to stream."""
        write_uint24_to_stream(stream, value, self.order)

    def write(self, stream: BinaryWriter, value: UnsignedInt) -> None:
        """Write a U32 or U64 to stream in its declared width."""
        write_to_stream(stream, value, self.order)


big = Endian(ByteOrder.BIG)
little = Endian(ByteOrder.LITTLE)
