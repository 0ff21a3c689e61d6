"""Property-based tests using hypothesis."""

from __future__ import annotations

import io
import math

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from bele import ByteOrder, U32, U64, write_to_stream, write_uint24_to_stream
from bele.codec.decoder import read_float64, read_uint16, read_uint24, read_uint32, read_uint64
from bele.codec.encoder import (
    pack_float64,
    pack_uint16,
    pack_uint24,
    pack_uint32,
    pack_uint64,
    put_uint24,
    put_uint32,
)

orders = st.sampled_from([ByteOrder.BIG, ByteOrder.LITTLE])

UINT_CODECS = [
    pytest.param(pack_uint16, read_uint16, 2, id="uint16"),
    pytest.param(pack_uint24, read_uint24, 3, id="uint24"),
    pytest.param(pack_uint32, read_uint32, 4, id="uint32"),
    pytest.param(pack_uint64, read_uint64, 8, id="uint64"),
]


class TestUintProperties:
    """Property-based tests for integer widths."""

    @pytest.mark.parametrize(("pack", "read", "width"), UINT_CODECS)
    @given(data=st.data(), order=orders)
    def test_encode_decode_roundtrip(self, pack, read, width: int, data, order) -> None:
        """Test decode(encode(v)) == v."""
        value = data.draw(st.integers(min_value=0, max_value=(1 << (8 * width)) - 1))
        encoded = pack(value, order)

        assert len(encoded) == width
        assert read(encoded, order) == value

    @pytest.mark.parametrize(("pack", "read", "width"), UINT_CODECS)
    @given(data=st.data(), order=orders)
    def test_decode_encode_roundtrip(self, pack, read, width: int, data, order) -> None:
        """Test encode(decode(b)) == b."""
        raw = data.draw(st.binary(min_size=width, max_size=width))
        assert pack(read(raw, order), order) == raw

    @pytest.mark.parametrize(("pack", "read", "width"), UINT_CODECS)
    @given(data=st.data())
    def test_orders_are_mirror_images(self, pack, read, width: int, data) -> None:
        """Test little-endian bytes are big-endian bytes reversed."""
        raw = data.draw(st.binary(min_size=width, max_size=width))
        assert read(raw, ByteOrder.LITTLE) == read(raw[::-1], ByteOrder.BIG)

    @given(
        value=st.integers(min_value=0, max_value=0xFFFFFFFF),
        order=orders,
        tail=st.binary(max_size=8),
    )
    def test_put_preserves_tail(self, value: int, order, tail: bytes) -> None:
        """Test put writes exactly 4 bytes and leaves the rest alone."""
        buf = bytearray(4) + bytearray(tail)
        put_uint32(buf, value, order)

        assert read_uint32(buf, order) == value
        assert bytes(buf[4:]) == tail

    @given(value=st.integers(min_value=0, max_value=0xFFFFFF), order=orders)
    def test_put_matches_stream(self, value: int, order) -> None:
        """Test buffer and stream forms produce identical bytes."""
        buf = bytearray(3)
        put_uint24(buf, value, order)

        out = io.BytesIO()
        write_uint24_to_stream(out, value, order)

        assert out.getvalue() == bytes(buf)


class TestFloatProperties:
    """Property-based tests for float64."""

    @given(value=st.floats(allow_nan=False), order=orders)
    def test_encode_decode_roundtrip(self, value: float, order) -> None:
        """Test doubles survive bit-for-bit."""
        decoded = read_float64(pack_float64(value, order), order)

        assert decoded == value
        assert math.copysign(1.0, decoded) == math.copysign(1.0, value)

    @given(raw=st.binary(min_size=8, max_size=8), order=orders)
    def test_decode_encode_roundtrip(self, raw: bytes, order) -> None:
        """Test non-NaN bit patterns survive decode then encode."""
        value = read_float64(raw, order)
        assume(not math.isnan(value))

        assert pack_float64(value, order) == raw


class TestStreamProperties:
    """Property-based tests for tagged stream writes."""

    @given(value=st.integers(min_value=0, max_value=0xFFFFFFFF), order=orders)
    def test_u32_stream_roundtrip(self, value: int, order) -> None:
        """Test U32 writes decode back with read_uint32."""
        out = io.BytesIO()
        write_to_stream(out, U32(value), order)

        assert read_uint32(out.getvalue(), order) == value

    @given(value=st.integers(min_value=0, max_value=0xFFFFFFFFFFFFFFFF), order=orders)
    def test_u64_stream_roundtrip(self, value: int, order) -> None:
        """Test U64 writes decode back with read_uint64."""
        out = io.BytesIO()
        write_to_stream(out, U64(value), order)

        assert len(out.getvalue()) == 8
        assert read_uint64(out.getvalue(), order) == value
