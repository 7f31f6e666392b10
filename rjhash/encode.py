"""Byte obfuscation: bit order reversed and every bit inverted."""

from __future__ import annotations

__all__ = ["rj_encode", "rj_decode"]


def _reverse_bits(byte: int) -> int:
    return int(f"{byte:08b}"[::-1], 2)


_ENCODE = bytes(0xFF ^ _reverse_bits(b) for b in range(256))
_DECODE = bytes(_reverse_bits(0xFF ^ b) for b in range(256))


def rj_encode(data: bytes) -> bytes:
    """Reverse the bit order of each byte and invert it."""
    return bytes(data).translate(_ENCODE)


def rj_decode(data: bytes) -> bytes:
    """Undo :func:`rj_encode`."""
    return bytes(data).translate(_DECODE)