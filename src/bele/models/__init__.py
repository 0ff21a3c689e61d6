"""Value models for bele."""

from __future__ import annotations

from .values import U32, U64, UnsignedInt, UnsignedValue

__all__ = [
    "U32",
    "U64",
    "UnsignedInt",
    "UnsignedValue",
]
