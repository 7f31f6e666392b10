"""Fixed-width bit rotations, byte swaps and word-order conversions."""

from __future__ import annotations

import struct

__all__ = [
    "rotl32",
    "rotr32",
    "rotl64",
    "rotr64",
    "bswap32",
    "bswap64",
    "ctz",
    "swap_words32",
    "swap_words64",
]

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _rotl(value: int, count: int, width: int, mask: int) -> int:
    value &= mask
    count %= width
    return ((value << count) | (value >> (width - count))) & mask


def rotl32(value: int, count: int) -> int:
    """Rotate a 32-bit word left by ``count`` bits."""
    return _rotl(value, count, 32, _MASK32)


def rotr32(value: int, count: int) -> int:
    """Rotate a 32-bit word right by ``count`` bits."""
    return _rotl(value, -count, 32, _MASK32)


def rotl64(value: int, count: int) -> int:
    """Rotate a 64-bit word left by ``count`` bits."""
    return _rotl(value, count, 64, _MASK64)


def rotr64(value: int, count: int) -> int:
    """Rotate a 64-bit word right by ``count`` bits."""
    return _rotl(value, -count, 64, _MASK64)


def bswap32(value: int) -> int:
    """Reverse the byte order of a 32-bit word."""
    return int.from_bytes((value & _MASK32).to_bytes(4, "little"), "big")


def bswap64(value: int) -> int:
    """Reverse the byte order of a 64-bit word."""
    return int.from_bytes((value & _MASK64).to_bytes(8, "little"), "big")


def ctz(value: int) -> int:
    """Return the index of the lowest set bit of a 32-bit word (0 for zero)."""
    value &= _MASK32
    if value == 0:
        return 0
    return (value & -value).bit_length() - 1


def _swap_words(data: bytes, size: int, code: str) -> bytes:
    raw = bytes(data)
    if len(raw) % size:
        raise ValueError(f"data length {len(raw)} is not a multiple of {size}")
    count = len(raw) // size
    return struct.pack(f">{count}{code}", *struct.unpack(f"<{count}{code}", raw))


def swap_words32(data: bytes) -> bytes:
    """Reverse the byte order inside every 4-byte word of ``data``."""
    return _swap_words(data, 4, "I")


def swap_words64(data: bytes) -> bytes:
    """Reverse the byte order inside every 8-byte word of ``data``."""
    return _swap_words(data, 8, "Q")