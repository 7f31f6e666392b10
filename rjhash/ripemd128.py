"""A modified RIPEMD-128 variant: altered initial state, step constants and feed-forward."""

from __future__ import annotations

import struct
from collections.abc import Callable, Iterator

from .bitops import rotl32

__all__ = ["RjRIPEMD128", "rj_ripemd128"]

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_BLOCK_SIZE = 64

_INITIAL_STATE = (0x10257436, 0xA8BD9CFE, 0x9EFCAD8B, 0x12375460)


def _xor(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def _select(x: int, y: int, z: int) -> int:
    return (x & y) | (~x & z & _MASK32)


def _or_not(x: int, y: int, z: int) -> int:
    return ((x | (~y & _MASK32)) ^ z) & _MASK32


def _select_z(x: int, y: int, z: int) -> int:
    return (x & z) | (y & ~z & _MASK32)


_Round = tuple[
    Callable[[int, int, int], int],
    int,
    int,
    tuple[int, ...],
    tuple[int, ...],
    dict[int, int],
]

# Each round: function, default additive constant, first state word of the
# line, message word order, rotation amounts, and the steps whose additive
# constant departs from the default.
_ROUNDS: tuple[_Round, ...] = (
    (
        _xor, 2, 0,
        (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
        (11, 14, 15, 12, 5, 8, 7, 9, 11, 13, 14, 15, 6, 7, 9, 8),
        {},
    ),
    (
        _select, 0x325B99A1, 0,
        (7, 4, 13, 1, 10, 6, 15, 3, 12, 0, 9, 5, 2, 14, 11, 8),
        (7, 6, 8, 13, 11, 9, 7, 15, 7, 12, 15, 9, 11, 7, 13, 12),
        {1: 2, 7: -0x43234E07, 9: 2, 15: 2},
    ),
    (
        _or_not, 0x1BAED69C, 0,
        (3, 10, 14, 4, 9, 15, 8, 1, 2, 7, 0, 6, 13, 11, 5, 12),
        (11, 13, 6, 7, 14, 9, 13, 15, 14, 8, 13, 6, 5, 12, 7, 5),
        {11: 0x325B99A1, 13: -0x43234E06},
    ),
    (
        _select_z, 0xBCDCB1F9, 0,
        (1, 9, 11, 10, 0, 8, 12, 4, 13, 3, 7, 15, 14, 5, 6, 2),
        (11, 12, 14, 15, 14, 15, 9, 8, 9, 14, 5, 6, 8, 6, 5, 12),
        {
            2: 0x325B99A1,
            5: 0xBCDCB1F9 + 2,
            9: 0x1BAED69C,
            11: 2,
            15: -0x43234E04,
        },
    ),
    (
        _select_z, 0x5A82798A, 4,
        (5, 14, 7, 0, 9, 2, 11, 4, 13, 6, 15, 8, 1, 10, 3, 12),
        (8, 9, 9, 11, 13, 15, 15, 5, 7, 7, 8, 11, 14, 14, 12, 6),
        {6: 0x325B99A1, 10: -0x43234E07, 14: -0x43234E04},
    ),
    (
        _or_not, 0x41D42D5D, 4,
        (6, 11, 3, 7, 0, 13, 5, 10, 14, 15, 8, 12, 4, 9, 1, 2),
        (9, 13, 15, 7, 12, 8, 9, 11, 7, 7, 12, 7, 6, 15, 13, 11),
        {6: -0x43234E07, 7: -0x43234E03, 14: 0x325B99A1},
    ),
    (
        _select, 0x30ED3F68, 4,
        (15, 5, 1, 3, 7, 14, 6, 9, 11, 8, 12, 2, 10, 0, 4, 13),
        (9, 7, 15, 11, 8, 6, 6, 14, 12, 13, 5, 14, 13, 13, 7, 5),
        {6: -0x43234E02, 9: 0x5A82798A, 14: 0x41D42D5D},
    ),
    (
        _xor, 2, 4,
        (8, 6, 4, 1, 3, 11, 15, 0, 5, 12, 2, 13, 9, 7, 10, 14),
        (15, 5, 8, 11, 14, 14, 6, 14, 6, 9, 12, 9, 12, 5, 15, 8),
        {1: -0x43234E02},
    ),
)


def _build_steps() -> tuple[tuple, ...]:
    steps = []
    for func, default, base, words, rots, overrides in _ROUNDS:
        for position, (word, rot) in enumerate(zip(words, rots)):
            offset = -position % 4
            target, x, y, z = (base + (offset + k) % 4 for k in range(4))
            constant = overrides.get(position, default) & _MASK32
            steps.append((target, x, y, z, func, word, constant, rot))
    return tuple(steps)


_STEPS = _build_steps()


def _compress(state: tuple[int, ...], w: tuple[int, ...]) -> tuple[int, ...]:
    wv = list(state) * 2
    for target, x, y, z, func, word, constant, rot in _STEPS:
        total = wv[target] + func(wv[x], wv[y], wv[z]) + w[word] + constant
        wv[target] = rotl32(total & _MASK32, rot)

    h0, h1, h2, h3 = state
    return (
        (wv[7] + wv[2] + h1) & _MASK32,
        (h2 + wv[3] + wv[4]) & _MASK32,
        (h3 + wv[0] + wv[5] + 1) & _MASK32,
        (h0 + wv[1] + wv[6]) & _MASK32,
    )


def _absorb(state: tuple[int, ...], data: bytes) -> tuple[int, ...]:
    blocks: Iterator[tuple[int, ...]] = struct.iter_unpack("<16I", data)
    for words in blocks:
        state = _compress(state, words)
    return state


def _padding(length: int) -> bytes:
    zeros = b"\x00" * ((55 - length) % _BLOCK_SIZE)
    return b"\x80" + zeros + struct.pack("<Q", (length * 8) & _MASK64)


class RjRIPEMD128:
    """Incremental hasher for the modified RIPEMD-128 variant, in the hashlib style."""

    name = "rj_ripemd128"
    digest_size = 16
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
        return struct.pack("<4I", *_absorb(self._state, tail))

    def hexdigest(self) -> str:
        """Return the digest as lowercase hexadecimal."""
        return self.digest().hex()

    def copy(self) -> RjRIPEMD128:
        """Return an independent copy of this hasher."""
        clone = type(self).__new__(type(self))
        clone._state = self._state
        clone._buffer = bytearray(self._buffer)
        clone._length = self._length
        return clone


def rj_ripemd128(data: bytes) -> bytes:
    """Return the modified RIPEMD-128 digest of ``data``."""
    return RjRIPEMD128(data).digest()