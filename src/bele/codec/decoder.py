"""Decoders for fixed-width unsigned integers and doubles.

Each reader consumes exactly the leading W bytes of a bytes-like buffer and
ignores anything after them. The buffer is never modified.
"""

from __future__ import annotations

import struct
from typing import Union

from ..exceptions import DecodeError, InsufficientBufferError
from ..order import (
    FLOAT64_SIZE,
    UINT16_SIZE,
    UINT24_SIZE,
    UINT32_SIZE,
    UINT64_SIZE,
    ByteOrder,
)

BytesLike = Union[bytes, bytearray, memoryview]


def _leading(buf: BytesLike, width: int, what: str) -> memoryview:
    """Return a read-only view of the first ``width`` bytes of ``buf``.

    Raises:
        DecodeError: If buf is not a bytes-like object
        InsufficientBufferError: If buf holds fewer than width bytes
    """
    try:
        view = memoryview(buf).cast("B")
    except TypeError as e:
        raise DecodeError(f"{what} requires a bytes-like buffer, got {type(buf).__name__}") from e

    if view.nbytes < width:
        raise InsufficientBufferError(width, view.nbytes, what)

    return view[:width].toreadonly()


def _read_uint(buf: BytesLike, width: int, order: ByteOrder | str, what: str) -> int:
    view = _leading(buf, width, what)
    return int.from_bytes(view, ByteOrder.parse(order).value, signed=False)


def read_uint16(buf: BytesLike, order: ByteOrder | str = ByteOrder.BIG) -> int:
    """Read an unsigned 16-bit integer from the first 2 bytes of buf.

    Args:
        buf: Bytes-like buffer holding at least 2 bytes
        order: Byte order of the encoded value (default: big-endian)

    Returns:
        Integer in range 0-65535

    Raises:
        InsufficientBufferError: If buf holds fewer than 2 bytes

    Example:
        >>> read_uint16(b"\\x0c\\x22")
        3106
        >>> read_uint16(b"\\x0c\\x22", ByteOrder.LITTLE)
        8716
    """
    return _read_uint(buf, UINT16_SIZE, order, "uint16")


def read_uint24(buf: BytesLike, order: ByteOrder | str = ByteOrder.BIG) -> int:
    """Read an unsigned 24-bit integer from the first 3 bytes of buf.

    Python has no native 24-bit type; the result is a plain int below 2**24.

    Example:
        >>> read_uint24(bytes([12, 34, 56]))
        795192
    """
    return _read_uint(buf, UINT24_SIZE, order, "uint24")


def read_uint32(buf: BytesLike, order: ByteOrder | str = ByteOrder.BIG) -> int:
    """Read an unsigned 32-bit integer from the first 4 bytes of buf."""
    return _read_uint(buf, UINT32_SIZE, order, "uint32")


def read_uint64(buf: BytesLike, order: ByteOrder | str = ByteOrder.BIG) -> int:
    """Read an unsigned 64-bit integer from the first 8 bytes of buf."""
    return _read_uint(buf, UINT64_SIZE, order, "uint64")


def read_float64(buf: BytesLike, order: ByteOrder | str = ByteOrder.BIG) -> float:
    """Read an IEEE-754 double from the first 8 bytes of buf.

    The 8 bytes are taken as an unsigned 64-bit pattern in the given order and
    reinterpreted bit-for-bit, so NaN payloads and signed zeros survive.

    Args:
        buf: Bytes-like buffer holding at least 8 bytes
        order: Byte order of the encoded value (default: big-endian)

    Returns:
        Decoded float

    Raises:
        InsufficientBufferError: If buf holds fewer than 8 bytes

    Example:
        >>> read_float64(bytes.fromhex("406fe00000000000"))
        255.0
    """
    bits = _read_uint(buf, FLOAT64_SIZE, order, "float64")
    return struct.unpack(">d", bits.to_bytes(FLOAT64_SIZE, "big"))[0]
