"""CRC-16/XMODEM (polynomial 0x1021, initial value 0, no reflection)."""

from __future__ import annotations

__all__ = ["crc16"]

_POLY = 0x1021


def _build_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte << 8
        for _ in range(8):
            crc = ((crc << 1) ^ _POLY) if crc & 0x8000 else (crc << 1)
        table.append(crc & 0xFFFF)
    return tuple(table)


_TABLE = _build_table()


def crc16(data: bytes) -> int:
    """Return the CRC-16/XMODEM checksum of ``data``."""
    crc = 0
    for byte in memoryview(data).cast("B"):
        crc = ((crc << 8) & 0xFFFF) ^ _TABLE[((crc >> 8) ^ byte) & 0xFF]
    return crc