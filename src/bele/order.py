"""Byte order selection and value widths.

Big-endian places the most-significant byte first (network order);
little-endian places the least-significant byte first.
"""

from __future__ import annotations

import enum
from typing import Literal

# Encoded widths in bytes
UINT16_SIZE = 2
UINT24_SIZE = 3
UINT32_SIZE = 4
UINT64_SIZE = 8
FLOAT64_SIZE = 8

_ALIASES = {
    "big": "big",
    "be": "big",
    ">": "big",
    "!": "big",
    "network": "big",
    "little": "little",
    "le": "little",
    "<": "little",
}


class ByteOrder(str, enum.Enum):
    """Byte order of an encoded value.

    Members are ``str`` subclasses whose value is the name accepted by
    ``int.from_bytes`` / ``int.to_bytes``.

    Example:
        >>> ByteOrder.BIG.value
        'big'
        >>> ByteOrder.parse("LE") is ByteOrder.LITTLE
        True
    """

    BIG = "big"
    LITTLE = "little"

    @property
    def struct_prefix(self) -> Literal[">", "<"]:
        """Return the matching ``struct`` format prefix."""
        return ">" if self is ByteOrder.BIG else "<"

    @classmethod
    def parse(cls, name: str | ByteOrder) -> ByteOrder:
        """Resolve a byte order from a member or a textual alias.

        Args:
            name: A ByteOrder, or one of "big", "be", ">", "!", "network",
                "little", "le", "<" (case-insensitive)

        Returns:
            The matching ByteOrder

        Raises:
            ValueError: If the name is not a known byte order
        """
        if isinstance(name, ByteOrder):
            return name
        key = str(name).strip().lower()
        if key not in _ALIASES:
            raise ValueError(f"Unknown byte order: {name!r}. Must be 'big' or 'little'")
        return cls(_ALIASES[key])
