"""A modified Tiger variant: altered initial state and key-schedule constant."""

from __future__ import annotations

import struct
from collections.abc import Iterator

from .tiger_sbox_high import T3, T4
from .tiger_sbox_low import T1, T2

__all__ = ["RjTiger", "rj_tiger"]

_MASK64 = 0xFFFFFFFFFFFFFFFF
_BLOCK_SIZE = 64

_INITIAL_STATE = (0x158E427AC96B03DF, 0xF025C13B8E9DA784, 0xB690AB45C3E21B74)
_SCHEDULE_IN = 0xA5A5B5A5A5A5A7A5
_SCHEDULE_OUT = 0x0123456789ABCDEF


def _round(a: int, b: int, c: int, x: int, mul: int) -> tuple[int, int, int]:
    c ^= x
    a = (
        a
        - (
            T1[c & 0xFF]
            ^ T2[(c >> 16) & 0xFF]
            ^ T3[(c >> 32) & 0xFF]
            ^ T4[(c >> 48) & 0xFF]
        )
    ) & _MASK64
    b = (
        b
        + (
            T4[(c >> 8) & 0xFF]
            ^ T3[(c >> 24) & 0xFF]
            ^ T2[(c >> 40) & 0xFF]
            ^ T1[(c >> 56) & 0xFF]
        )
    ) & _MASK64
    b = (b * mul) & _MASK64
    return a, b, c


def _pass(a: int, b: int, c: int, x: list[int], mul: int) -> tuple[int, int, int]:
    regs = [a, b, c]
    for step, word in enumerate(x):
        i, j, k = step % 3, (step + 1) % 3, (step + 2) % 3
        regs[i], regs[j], regs[k] = _round(regs[i], regs[j], regs[k], word, mul)
    return regs[0], regs[1], regs[2]


def _key_schedule(x: list[int]) -> list[int]:
    x0, x1, x2, x3, x4, x5, x6, x7 = x
    x0 = (x0 - (x7 ^ _SCHEDULE_IN)) & _MASK64
    x1 ^= x0
    x2 = (x2 + x1) & _MASK64
    x3 = (x3 - (x2 ^ ((~x1 << 19) & _MASK64))) & _MASK64
    x4 ^= x3
    x5 = (x5 + x4) & _MASK64
    x6 = (x6 - (x5 ^ ((~x4 & _MASK64) >> 23))) & _MASK64
    x7 ^= x6
    x0 = (x0 + x7) & _MASK64
    x1 = (x1 - (x0 ^ ((~x7 << 19) & _MASK64))) & _MASK64
    x2 ^= x1
    x3 = (x3 + x2) & _MASK64
    x4 = (x4 - (x3 ^ ((~x2 & _MASK64) >> 23))) & _MASK64
    x5 ^= x4
    x6 = (x6 + x5) & _MASK64
    x7 = (x7 - (x6 ^ _SCHEDULE_OUT)) & _MASK64
    return [x0, x1, x2, x3, x4, x5, x6, x7]


def _compress(state: tuple[int, ...], words: tuple[int, ...]) -> tuple[int, ...]:
    a, b, c = state
    x = list(words)
    a, b, c = _pass(a, b, c, x, 5)
    x = _key_schedule(x)
    c, a, b = _pass(c, a, b, x, 7)
    x = _key_schedule(x)
    b, c, a = _pass(b, c, a, x, 9)
    return (
        a ^ state[0],
        (b - state[1]) & _MASK64,
        (c + state[2]) & _MASK64,
    )


def _absorb(state: tuple[int, ...], data: bytes) -> tuple[int, ...]:
    blocks: Iterator[tuple[int, ...]] = struct.iter_unpack("<8Q", data)
    for words in blocks:
        state = _compress(state, words)
    return state


def _padding(length: int, tiger2: bool) -> bytes:
    marker = b"\x80" if tiger2 else b"\x01"
    zeros = b"\x00" * ((55 - length) % _BLOCK_SIZE)
    return marker + zeros + struct.pack("<Q", (length * 8) & _MASK64)


class RjTiger:
    """Incremental hasher for the modified Tiger variant, in the hashlib style.

    With ``tiger2`` set, the message is padded with 0x80 instead of 0x01.
    """

    name = "rj_tiger"
    digest_size = 24
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"", tiger2: bool = False) -> None:
        self.tiger2 = bool(tiger2)
        self._state = _INITIAL_STATE
        self._buffer = bytearray()
        self._length = 0
        self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        chunk = bytes(memoryview(data))
        self._buffer.extend(chunk)
        self._length += len(chunk)
        full = len(self._buffer) - len(self._buffer) % _BLOCK_SIZE
        if full:
            self._state = _absorb(self._state, bytes(self._buffer[:full]))
            del self._buffer[:full]

    def digest(self) -> bytes:
        """Return the digest of everything fed so far, leaving the state intact."""
        tail = bytes(self._buffer) + _padding(self._length, self.tiger2)
        return struct.pack("<3Q", *_absorb(self._state, tail))

    def hexdigest(self) -> str:
        """Return the digest as lowercase hexadecimal."""
        return self.digest().hex()

    def copy(self) -> RjTiger:
        """Return an independent copy of this hasher."""
        clone = type(self).__new__(type(self))
        clone.tiger2 = self.tiger2
        clone._state = self._state
        clone._buffer = bytearray(self._buffer)
        clone._length = self._length
        return clone


def rj_tiger(data: bytes, tiger2: bool = False) -> bytes:
    """Return the modified Tiger digest of ``data``."""
    return RjTiger(data, tiger2=tiger2).digest()