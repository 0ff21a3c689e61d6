"""Encoders for fixed-width unsigned integers and doubles.

The ``pack_*`` functions return a fresh ``bytes`` object of exactly the
value's width. The ``put_*`` functions write the same bytes into the start
of a caller-owned mutable buffer, leaving every byte past the width alone.
"""

from __future__ import annotations

import struct
from typing import Union

from ..exceptions import EncodeError, InsufficientBufferError
from ..order import (
    FLOAT64_SIZE,
    UINT16_SIZE,
    UINT24_SIZE,
    UINT32_SIZE,
    UINT64_SIZE,
    ByteOrder,
)

WritableBuffer = Union[bytearray, memoryview]


def _check_uint(value: int, width: int, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodeError(f"{what} requires an int, got {type(value).__name__}")
    max_value = (1 << (8 * width)) - 1
    if value < 0 or value > max_value:
        raise EncodeError(f"Value {value} out of range for {what} (0 to {max_value})")


def _pack_uint(value: int, width: int, order: ByteOrder | str, what: str) -> bytes:
    _check_uint(value, width, what)
    return value.to_bytes(width, ByteOrder.parse(order).value, signed=False)


def _put(buf: WritableBuffer, data: bytes, what: str) -> None:
    """Copy data over the leading bytes of buf.

    The length check happens before any byte is written.
    """
    try:
        view = memoryview(buf)
    except TypeError as e:
        raise EncodeError(f"{what} requires a writable buffer, got {type(buf).__name__}") from e

    with view:
        if view.readonly:
            raise EncodeError(f"{what} requires a writable buffer, got read-only {type(buf).__name__}")
        with view.cast("B") as target:
            if target.nbytes < len(data):
                raise InsufficientBufferError(len(data), target.nbytes, what)
            target[: len(data)] = data


def pack_uint16(value: int, order: ByteOrder | str = ByteOrder.BIG) -> bytes:
    """Encode an unsigned 16-bit integer as 2 bytes.

    Example:
        >>> pack_uint16(3106)
        b'\\x0c"'
    """
    return _pack_uint(value, UINT16_SIZE, order, "uint16")


def pack_uint24(value: int, order: ByteOrder | str = ByteOrder.BIG) -> bytes:
    """Encode an unsigned 24-bit integer as 3 bytes."""
    return _pack_uint(value, UINT24_SIZE, order, "uint24")


def pack_uint32(value: int, order: ByteOrder | str = ByteOrder.BIG) -> bytes:
    """Encode an unsigned 32-bit integer as 4 bytes."""
    return _pack_uint(value, UINT32_SIZE, order, "uint32")


def pack_uint64(value: int, order: ByteOrder | str = ByteOrder.BIG) -> bytes:
    """Encode an unsigned 64-bit integer as 8 bytes."""
    return _pack_uint(value, UINT64_SIZE, order, "uint64")


def pack_float64(value: float, order: ByteOrder | str = ByteOrder.BIG) -> bytes:
    """Encode a float as 8 IEEE-754 double-precision bytes.

    Raises:
        EncodeError: If value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise EncodeError(f"float64 requires a float, got {type(value).__name__}")
    try:
        return struct.pack(ByteOrder.parse(order).struct_prefix + "d", value)
    except OverflowError as e:
        raise EncodeError(f"Value {value} out of range for float64") from e


def put_uint16(buf: WritableBuffer, value: int, order: ByteOrder | str = ByteOrder.BIG) -> None:
    """Write an unsigned 16-bit integer into buf[0:2]."""
    _put(buf, pack_uint16(value, order), "uint16")


def put_uint24(buf: WritableBuffer, value: int, order: ByteOrder | str = ByteOrder.BIG) -> None:
    """Write an unsigned 24-bit integer into buf[0:3].

    Args:
        buf: Mutable buffer holding at least 3 bytes
        value: Integer in range 0 to 2**24 - 1
        order: Byte order to write in (default: big-endian)

    Raises:
        EncodeError: If value is out of range or buf is read-only
        InsufficientBufferError: If buf holds fewer than 3 bytes

    Example:
        >>> out = bytearray(3)
        >>> put_uint24(out, 795192)
        >>> list(out)
        [12, 34, 56]
    """
    _put(buf, pack_uint24(value, order), "uint24")


def put_uint32(buf: WritableBuffer, value: int, order: ByteOrder | str = ByteOrder.BIG) -> None:
    """Write an unsigned 32-bit integer into buf[0:4].

    Args:
        buf: Mutable buffer holding at least 4 bytes
        value: Integer in range 0 to 2**32 - 1
        order: Byte order to write in (default: big-endian)

    Raises:
        EncodeError: If value is out of range or buf is read-only
        InsufficientBufferError: If buf holds fewer than 4 bytes
    """
    _put(buf, pack_uint32(value, order), "uint32")


def put_uint64(buf: WritableBuffer, value: int, order: ByteOrder | str = ByteOrder.BIG) -> None:
    """Write an unsigned 64-bit integer into buf[0:8]."""
    _put(buf, pack_uint64(value, order), "uint64")


def put_float64(buf: WritableBuffer, value: float, order: ByteOrder | str = ByteOrder.BIG) -> None:
    """Write an IEEE-754 double into buf[0:8]."""
    _put(buf, pack_float64(value, order), "float64")
