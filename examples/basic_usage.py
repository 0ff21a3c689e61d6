#!/usr/bin/env python3
"""Basic usage example for bele.

This example demonstrates:
1. Reading integers and doubles in both byte orders
2. Writing into a pre-allocated buffer
3. Writing tagged values to a stream
4. Handling short buffers
"""

from __future__ import annotations

import io

from bele import (
    U32,
    U64,
    ByteOrder,
    InsufficientBufferError,
    put_uint32,
    read_float64,
    read_uint24,
    read_uint32,
    write_to_stream,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bele Basic Usage Example")
    print("=" * 60)
    print()

    raw = bytes([12, 34, 56, 78])

    print("1. Reading the same bytes in both orders...")
    print(f"   Bytes:        {raw.hex(' ')}")
    print(f"   uint24 BE:    {read_uint24(raw)}")
    print(f"   uint32 BE:    {read_uint32(raw, ByteOrder.BIG)}")
    print(f"   uint32 LE:    {read_uint32(raw, ByteOrder.LITTLE)}")
    print(f"   float64 BE:   {read_float64(bytes.fromhex('406fe00000000000'))}")
    print()

    print("2. Writing into a buffer...")
    buf = bytearray(6)
    put_uint32(buf, 0xDEADBEEF, ByteOrder.LITTLE)
    print(f"   Buffer:       {buf.hex(' ')}")
    print()

    print("3. Writing tagged values to a stream...")
    out = io.BytesIO()
    write_to_stream(out, U32(1))
    write_to_stream(out, U64(1), ByteOrder.LITTLE)
    print(f"   Stream:       {out.getvalue().hex(' ')} ({len(out.getvalue())} bytes)")
    print()

    print("4. Short buffers fail loudly...")
    try:
        read_uint32(b"\x01\x02")
    except InsufficientBufferError as e:
        print(f"   {type(e).__name__}: {e}")
    print()


if __name__ == "__main__":
    main()
