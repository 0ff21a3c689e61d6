"""Stream writers for encoded values.

Each writer packs the value into one local buffer and hands it to a single
``stream.write`` call. Errors raised by the stream propagate unchanged; a
write that reports fewer bytes than the width, or returns None because a
non-blocking stream would block, raises ShortWriteError.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from ..exceptions import ShortWriteError
from ..models.values import U32, U64, UnsignedInt
from ..order import ByteOrder
from .encoder import _pack_uint, pack_uint24

logger = logging.getLogger(__name__)


class BinaryWriter(Protocol):
    """Anything with a binary ``write`` (BytesIO, files, socket files)."""

    def write(self, data: bytes, /) -> Optional[int]: ...


def _write_all(stream: BinaryWriter, data: bytes) -> None:
    try:
        written = stream.write(data)
    except Exception:
        logger.debug("Stream write of %d bytes to %r failed", len(data), stream, exc_info=True)
        raise

    # Non-blocking raw writers return None when nothing could be written
    if written is None:
        logger.debug("Stream %r would block: 0 of %d bytes written", stream, len(data))
        raise ShortWriteError(len(data), 0)
    if written != len(data):
        logger.debug("Short write to %r: %d of %d bytes", stream, written, len(data))
        raise ShortWriteError(len(data), written)


def write_uint24_to_stream(
    stream: BinaryWriter, value: int, order: ByteOrder | str = ByteOrder.BIG
) -> None:
    """Write an unsigned 24-bit integer to a stream as exactly 3 bytes.

    Args:
        stream: Binary writer to append to
        value: Integer in range 0 to 2**24 - 1
        order: Byte order to write in (default: big-endian)

    Raises:
        EncodeError: If value is out of range
        ShortWriteError: If the stream accepted fewer than 3 bytes
        Exception: Whatever the stream raises, untranslated

    Example:
        >>> out = io.BytesIO()
        >>> write_uint24_to_stream(out, 795192)
        >>> out.getvalue()
        b'\\x0c"8'
    """
    _write_all(stream, pack_uint24(value, order))


def write_to_stream(
    stream: BinaryWriter, value: UnsignedInt, order: ByteOrder | str = ByteOrder.BIG
) -> None:
    """Write a tagged unsigned integer to a stream in its declared width.

    ``U32`` values are written as 4 bytes and ``U64`` values as 8 bytes.

    Args:
        stream: Binary writer to append to
        value: U32 or U64 value
        order: Byte order to write in (default: big-endian)

    Raises:
        TypeError: If value is not a U32 or U64
        ShortWriteError: If the stream accepted fewer bytes than the width
        Exception: Whatever the stream raises, untranslated

    Example:
        >>> out = io.BytesIO()
        >>> write_to_stream(out, U32(1), ByteOrder.LITTLE)
        >>> out.getvalue()
        b'\\x01\\x00\\x00\\x00'
    """
    if not isinstance(value, (U32, U64)):
        raise TypeError(
            f"write_to_stream requires U32 or U64, got {type(value).__name__}. "
            f"Wrap plain ints to choose a width, e.g. U32(x)"
        )
    _write_all(stream, _pack_uint(value.value, value.width, order, f"uint{value.width * 8}"))
