"""Decode and encode CLI commands."""

from __future__ import annotations

from typing import Callable, Union

from ..codec.decoder import read_float64, read_uint16, read_uint24, read_uint32, read_uint64
from ..codec.encoder import pack_float64, pack_uint16, pack_uint24, pack_uint32, pack_uint64
from ..exceptions import DecodeError, EncodeError
from ..order import ByteOrder

Number = Union[int, float]

READERS: dict[str, Callable[..., Number]] = {
    "uint16": read_uint16,
    "uint24": read_uint24,
    "uint32": read_uint32,
    "uint64": read_uint64,
    "float64": read_float64,
}

PACKERS: dict[str, Callable[..., bytes]] = {
    "uint16": pack_uint16,
    "uint24": pack_uint24,
    "uint32": pack_uint32,
    "uint64": pack_uint64,
    "float64": pack_float64,
}


def parse_hex(text: str) -> bytes:
    """Parse hex input, tolerating an 0x prefix and spaces/colons between bytes.

    Raises:
        DecodeError: If text is not valid hex
    """
    cleaned = text.strip()
    if cleaned[:2].lower() == "0x":
        cleaned = cleaned[2:]
    cleaned = cleaned.replace(":", "").replace(" ", "")
    try:
        return bytes.fromhex(cleaned)
    except ValueError as e:
        raise DecodeError(f"Invalid hex input: {text!r}") from e


def parse_value(text: str, type_name: str) -> Number:
    """Parse a decimal (or 0x/0o/0b prefixed) value for the given type.

    Raises:
        EncodeError: If text is not a number of the right kind
    """
    try:
        if type_name == "float64":
            return float(text)
        return int(text, 0)
    except ValueError as e:
        raise EncodeError(f"Invalid {type_name} value: {text!r}") from e


def decode_hex(text: str, type_name: str, order: ByteOrder | str) -> str:
    """Decode hex bytes as type_name and return the value as text.

    Example:
        >>> decode_hex("0c22", "uint16", "big")
        '3106'
    """
    value = READERS[type_name](parse_hex(text), order)
    return repr(value) if isinstance(value, float) else str(value)


def encode_value(text: str, type_name: str, order: ByteOrder | str) -> str:
    """Encode a value as type_name and return lowercase hex.

    Example:
        >>> encode_value("1", "uint32", "little")
        '01000000'
    """
    return PACKERS[type_name](parse_value(text, type_name), order).hex()
