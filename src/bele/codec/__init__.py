"""Byte-order codec functions.

This module provides readers for fixed-width unsigned integers and doubles,
buffer writers, and stream writers, each parameterized by byte order.
"""

from __future__ import annotations

from .decoder import read_float64, read_uint16, read_uint24, read_uint32, read_uint64
from .encoder import (
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
from .stream import BinaryWriter, write_to_stream, write_uint24_to_stream

__all__ = [
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
]
