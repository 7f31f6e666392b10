"""A modified SHA-1 variant: altered initial state, constants and round layout."""

from __future__ import annotations

import itertools
import struct
from collections.abc import Iterator

from .bitops import rotl32

__all__ = ["RjSHA1", "rj_sha1"]

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_BLOCK_SIZE = 64

_INITIAL_STATE = (0x32075416, 0xF8DAE9BC, 0x73541260, 0x8ACB9DFE, 0xFD0C2E1B)


def _choose(b: int, c: int, d: int) -> int:
    return ((c ^ d) & b) ^ d


def _parity(b: int, c: int, d: int) -> int:
    return b ^ c ^ d


def _majority(b: int, c: int, d: int) -> int:
    return (b & c) | (b & d) | (c & d)


def _compress(state: tuple[int, ...], words: tuple[int, ...]) -> tuple[int, ...]:
    schedule = list(words)
    for _ in range(64):
        schedule.append(
            rotl32(schedule[-3] ^ schedule[-8] ^ schedule[-14] ^ schedule[-16], 1)
        )

    # The second phase mixes in the first byte of the raw block.
    first_byte = words[0] >> 24
    phases = (
        (20, _choose, -0x5D6AA4D4),
        (20, _parity, 0x16AE9DEB + first_byte),
        (21, _majority, -0x34032E48),
        (19, _parity, -0x5CD39E93),
    )

    a, b, c, d, e = state
    stream = iter(schedule)
    for count, func, constant in phases:
        for word in itertools.islice(stream, count):
            temp = (rotl32(a, 5) + func(b, c, d) + e + word + constant) & _MASK32
            a, b, c, d, e = temp, a, rotl32(b, 30), c, d

    return (
        (state[0] + a + 1) & _MASK32,
        (state[1] + b) & _MASK32,
        (state[2] + c) & _MASK32,
        (state[3] + d) & _MASK32,
        (state[4] + e) & _MASK32,
    )


def _absorb(state: tuple[int, ...], data: bytes) -> tuple[int, ...]:
    blocks: Iterator[tuple[int, ...]] = struct.iter_unpack(">16I", data)
    for words in blocks:
        state = _compress(state, words)
    return state


def _padding(length: int) -> bytes:
    zeros = b"\x00" * ((55 - length) % _BLOCK_SIZE)
    return b"\x80" + zeros + struct.pack(">Q", (length * 8) & _MASK64)


class RjSHA1:
    """Incremental hasher for the modified SHA-1 variant, in the hashlib style."""

    name = "rj_sha1"
    digest_size = 20
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
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
        tail = bytes(self._buffer) + _padding(self._length)
        return struct.pack(">5I", *_absorb(self._state, tail))

    def hexdigest(self) -> str:
        """Return the digest as lowercase hexadecimal."""
        return self.digest().hex()

    def copy(self) -> RjSHA1:
        """Return an independent copy of this hasher."""
        clone = type(self).__new__(type(self))
        clone._state = self._state
        clone._buffer = bytearray(self._buffer)
        clone._length = self._length
        return clone


def rj_sha1(data: bytes) -> bytes:
    """Return the modified SHA-1 digest of ``data``."""
    return RjSHA1(data).digest()