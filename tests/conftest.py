"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io
import os
from typing import Iterator

import pytest


class NoneWriter:
    """Raw stream that would block, returning None from every write."""

    def write(self, data: bytes) -> None:
        return None


class ShortWriter:
    """Stream that accepts at most ``limit`` bytes per write call."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.chunks: list[bytes] = []

    def write(self, data: bytes) -> int:
        accepted = bytes(data[: self.limit])
        self.chunks.append(accepted)
        return len(accepted)


class BrokenWriter:
    """Stream whose writes always fail like a closed pipe."""

    def __init__(self) -> None:
        self.calls = 0

    def write(self, data: bytes) -> int:
        self.calls += 1
        raise BrokenPipeError(32, "Broken pipe")


class CountingWriter:
    """Stream that records each write call."""

    def __init__(self) -> None:
        self.calls: list[bytes] = []

    def write(self, data: bytes) -> int:
        self.calls.append(bytes(data))
        return len(data)


@pytest.fixture
def out() -> io.BytesIO:
    """Empty in-memory output stream."""
    return io.BytesIO()


@pytest.fixture
def sample_bytes() -> bytes:
    """Leading bytes used throughout the decode examples."""
    return bytes([12, 34, 56, 78])


@pytest.fixture
def short_writer() -> ShortWriter:
    """Stream that accepts only 2 bytes per write."""
    return ShortWriter(limit=2)


@pytest.fixture
def broken_writer() -> BrokenWriter:
    """Stream that fails every write."""
    return BrokenWriter()


@pytest.fixture
def counting_writer() -> CountingWriter:
    """Stream that records write calls."""
    return CountingWriter()


@pytest.fixture
def none_writer() -> NoneWriter:
    """Stream that reports every write as would-block."""
    return NoneWriter()


@pytest.fixture
def full_pipe() -> Iterator[io.FileIO]:
    """Non-blocking write end of an OS pipe with no room left."""
    read_fd, write_fd = os.pipe()
    os.set_blocking(write_fd, False)
    raw = io.FileIO(write_fd, "wb")
    try:
        while raw.write(b"\x00" * 65536) is not None:
            pass
        yield raw
    finally:
        raw.close()
        os.close(read_fd)
