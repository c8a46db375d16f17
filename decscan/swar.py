"""Word-at-a-time helpers for recognising and decoding ASCII digits."""

from __future__ import annotations

from typing import Sequence, Union

_U32 = (1 << 32) - 1
_U64 = (1 << 64) - 1

CharSeq = Union[str, bytes, bytearray, Sequence[int]]


def is_integer(c: str) -> bool:
    """Return True if ``c`` is one of the ASCII digits 0-9."""
    return len(c) == 1 and "0" <= c <= "9"


def byteswap64(value: int) -> int:
    """Reverse the byte order of a 64-bit unsigned integer."""
    return int.from_bytes((value & _U64).to_bytes(8, "little"), "big")


def byteswap32(value: int) -> int:
    """Reverse the byte order of a 32-bit unsigned integer."""
    return int.from_bytes((value & _U32).to_bytes(4, "little"), "big")


def _low_bytes(chars: CharSeq, count: int) -> bytes:
    if len(chars) < count:
        raise ValueError(f"need at least {count} characters, got {len(chars)}")
    return bytes(
        (c if isinstance(c, int) else ord(c)) & 0xFF for c in chars[:count]
    )


def read8_to_u64(chars: CharSeq) -> int:
    """Pack the first eight characters, truncated to bytes, little-endian."""
    return int.from_bytes(_low_bytes(chars, 8), "little")


def read4_to_u32(chars: CharSeq) -> int:
    """Pack the first four characters, truncated to bytes, little-endian."""
    return int.from_bytes(_low_bytes(chars, 4), "little")


def parse_eight_digits_unrolled(value: int) -> int:
    """Decode eight packed ASCII digits into their integer value."""
    mask = 0x000000FF000000FF
    mul1 = 0x000F424000000064
    mul2 = 0x0000271000000001
    value = (value - 0x3030303030303030) & _U64
    value = (value * 10 + (value >> 8)) & _U64
    value = ((((value & mask) * mul1) + (((value >> 16) & mask) * mul2)) & _U64) >> 32
    return value & _U32


def is_made_of_eight_digits_fast(value: int) -> bool:
    """Return True if all eight packed bytes are ASCII digits."""
    high = ((value + 0x4646464646464646) & _U64) | ((value - 0x3030303030303030) & _U64)
    return not high & 0x8080808080808080


def is_made_of_four_digits_fast(value: int) -> bool:
    """Return True if all four packed bytes are ASCII digits."""
    high = ((value + 0x46464646) & _U32) | ((value - 0x30303030) & _U32)
    return not high & 0x80808080


def parse_four_digits_unrolled(value: int) -> int:
    """Decode four packed ASCII digits into their integer value."""
    value = (value - 0x30303030) & _U32
    value = (value * 10 + (value >> 8)) & _U32
    return ((((value & 0x00FF00FF) * 0x00640001) & _U32) >> 16) & 0xFFFF