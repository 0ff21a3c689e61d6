"""Exception hierarchy for bele.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BeleError for easy catching of any bele-specific error.
"""

from __future__ import annotations


class BeleError(Exception):
    """Base exception for all bele errors."""

    pass


class EncodeError(BeleError):
    """Raised when encoding a value fails.

    Examples:
        - Value out of range for the target width (e.g. 2**24 as uint24)
        - Destination buffer is read-only
        - Stream accepted fewer bytes than the encoded width
    """

    pass


class DecodeError(BeleError):
    """Raised when decoding raw bytes fails.

    Examples:
        - Truncated input (insufficient bytes for the width)
        - Input is not a bytes-like object
    """

    pass


class InsufficientBufferError(EncodeError, DecodeError):
    """Raised when a buffer holds fewer bytes than a value's width.

    This always indicates a caller bug: the buffer is left untouched.

    Attributes:
        required: Number of bytes the operation needs
        available: Number of bytes the buffer holds
    """

    def __init__(self, required: int, available: int, what: str = "value") -> None:
        self.required = required
        self.available = available
        super().__init__(
            f"Buffer too short for {what}: need {required} bytes, got {available} bytes"
        )


class ShortWriteError(EncodeError):
    """Raised when a stream accepts only part of an encoded value.

    Attributes:
        expected: Number of bytes handed to the stream
        written: Number of bytes the stream reported as written
    """

    def __init__(self, expected: int, written: int) -> None:
        self.expected = expected
        self.written = written
        super().__init__(f"Short write: stream accepted {written} of {expected} bytes")
