"""bele: Byte-Order Codec

Helpers for reading and writing fixed-width unsigned integers and IEEE-754
doubles in big-endian or little-endian byte order, for binary network and
file formats that mix both.

Key Features:
- uint16 / uint24 / uint32 / uint64 / float64 readers over any bytes-like buffer
- In-place buffer writers with explicit length checks
- Single-call stream writers with width chosen by tagged U32 / U64 values
- ``big`` / ``little`` codec objects with the byte order pre-bound

Quick Start:
    >>> import io
    >>> from bele import ByteOrder, U32, big, read_uint24, write_to_stream
    >>>
    >>> read_uint24(bytes([12, 34, 56]))
    795192
    >>> big.uint16(b"\\x0c\\x22")
    3106
    >>> out = io.BytesIO()
    >>> write_to_stream(out, U32(1), ByteOrder.LITTLE)
    >>> out.getvalue()
    b'\\x01\\x00\\x00\\x00'
"""

from __future__ import annotations

from .codec import (
    BinaryWriter,
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
    read_float64,
    read_uint16,
    read_uint24,
    read_uint32,
    read_uint64,
    write_to_stream,
    write_uint24_to_stream,
)
from .endian import Endian, big, little
from .exceptions import (
    BeleError,
    DecodeError,
    EncodeError,
    InsufficientBufferError,
    ShortWriteError,
)
from .models import U32, U64, UnsignedInt
from .order import ByteOrder

__version__ = "0.1.0"

__all__ = [
    # Byte order
    "ByteOrder",
    "Endian",
    "big",
    "little",
    # Decoders
    "read_uint16",
    "read_uint24",
    "read_uint32",
    "read_uint64",
    "read_float64",
    # Buffer encoders
    "put_uint16",
    "put_uint24",
    "put_uint32",
    "put_uint64",
    "put_float64",
    "pack_uint16",
    "pack_uint24",
    "pack_uint32",
    "pack_uint64",
    "pack_float64",
    # Stream encoders
    "BinaryWriter",
    "write_uint24_to_stream",
    "write_to_stream",
    # Tagged values
    "U32",
    "U64",
    "UnsignedInt",
    # Exceptions
    "BeleError",
    "EncodeError",
    "DecodeError",
    "InsufficientBufferError",
    "ShortWriteError",
    # Version
    "__version__",
]
