#!/usr/bin/env python3
"""Mixed-endian header parsing with bele.

FLV tag headers use big-endian 24-bit fields, while an RTMP chunk's message
stream id is little-endian. This example builds and parses both.

FLV tag header (11 bytes):
    [type: 1] [data size: BE24] [timestamp: BE24] [timestamp ext: 1] [stream id: BE24]
"""

from __future__ import annotations

import io
from dataclasses import dataclass

from bele import big, little

FLV_TAG_HEADER_SIZE = 11


@dataclass
class FlvTagHeader:
    tag_type: int
    data_size: int
    timestamp: int
    stream_id: int = 0

    def to_bytes(self) -> bytes:
        out = io.BytesIO()
        out.write(bytes([self.tag_type]))
        big.write_uint24(out, self.data_size)
        # Low 24 bits first, then the high byte as an extension
        big.write_uint24(out, self.timestamp & 0xFFFFFF)
        out.write(bytes([(self.timestamp >> 24) & 0xFF]))
        big.write_uint24(out, self.stream_id)
        return out.getvalue()

    @classmethod
    def from_bytes(cls, data: bytes) -> FlvTagHeader:
        view = memoryview(data)
        timestamp = big.uint24(view[4:]) | (view[7] << 24)
        return cls(
            tag_type=view[0],
            data_size=big.uint24(view[1:]),
            timestamp=timestamp,
            stream_id=big.uint24(view[8:]),
        )


def main() -> None:
    """Run the mixed-endian example."""
    print("=" * 60)
    print("bele Mixed-Endian Header Example")
    print("=" * 60)
    print()

    header = FlvTagHeader(tag_type=9, data_size=4096, timestamp=0x01234567)
    encoded = header.to_bytes()
    print(f"FLV tag header:  {encoded.hex(' ')} ({len(encoded)} bytes)")
    assert len(encoded) == FLV_TAG_HEADER_SIZE

    decoded = FlvTagHeader.from_bytes(encoded)
    print(f"Decoded:         {decoded}")
    assert decoded == header

    # RTMP type-0 chunk header stores the message stream id little-endian
    chunk_tail = bytearray(4)
    little.put_uint32(chunk_tail, 1)
    print(f"RTMP stream id:  {chunk_tail.hex(' ')} -> {little.uint32(chunk_tail)}")
    print()


if __name__ == "__main__":
    main()
