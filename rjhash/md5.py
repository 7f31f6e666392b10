"""A modified MD5 variant: altered initial state, constants and step offsets."""

from __future__ import annotations

import struct
from collections.abc import Iterator

from .bitops import rotl32

__all__ = ["RjMD5", "rj_md5"]

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_BLOCK_SIZE = 64

_INITIAL_STATE = (0x50137246, 0x8ACF9DBE, 0xC9EFACED, 0x25647013)


def _f(x: int, y: int, z: int) -> int:
    return ((y ^ z) & x) ^ z


def _g(x: int, y: int, z: int) -> int:
    return (x & z) | (y & ~z & _MASK32)


def _h(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def _i(x: int, y: int, z: int) -> int:
    return y ^ ((x | ~z) & _MASK32)


# Marks the one step whose additive constant depends on the block itself.
_BLOCK_DEPENDENT = None

_ROUNDS = (
    (
        _f,
        2,
        (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
        (7, 12, 17, 22),
        (
            0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
            0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
            0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
            0x6B901122, 0xFD987163, 0xA679438E, 0x49B40821,
        ),
    ),
    (
        _g,
        -2,
        (1, 6, 11, 0, 5, 10, 15, 4, 9, 14, 3, 8, 13, 2, 7, 12),
        (5, 9, 14, 20),
        (
            0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
            0xD62F105D, 0x02442453, 0xD8A1E681, 0xE7D3FBC8,
            0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
            0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
        ),
    ),
    (
        _h,
        -1,
        (5, 8, 11, 14, 1, 4, 7, 10, 13, 0, 3, 6, 9, 12, 15, 2),
        (5, 11, 16, 23),
        (
            0xFFFA3492, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
            0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
            0x289B7EC6, 0xEAA127FA, 0xD4EF3085, _BLOCK_DEPENDENT,
            0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
        ),
    ),
    (
        _i,
        1,
        (0, 7, 14, 5, 12, 3, 10, 1, 8, 15, 6, 13, 4, 11, 2, 9),
        (6, 10, 15, 19),
        (
            0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
            0x655659C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
            0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
            0xF7537E82, 0xBD3AF335, 0x2AD7D2BB, 0xEB866391,
        ),
    ),
)

_STEPS = tuple(
    (func, index, shifts[position % 4], constant, delta)
    for func, delta, indices, shifts, constants in _ROUNDS
    for position, (index, constant) in enumerate(zip(indices, constants))
)


def _compress(state: tuple[int, ...], x: tuple[int, ...]) -> tuple[int, ...]:
    a, b, c, d = state
    for func, index, shift, constant, delta in _STEPS:
        if constant is _BLOCK_DEPENDENT:
            constant = ((x[2] >> 8) & 0xFF) + 0x4881D05
        rotated = rotl32((a + func(b, c, d) + x[index] + constant) & _MASK32, shift)
        a, b, c, d = d, (rotated + b + delta) & _MASK32, b, c
    return tuple((s + v) & _MASK32 for s, v in zip(state, (a, b, c, d)))


def _absorb(state: tuple[int, ...], data: bytes) -> tuple[int, ...]:
    blocks: Iterator[tuple[int, ...]] = struct.iter_unpack("<16I", data)
    for words in blocks:
        state = _compress(state, words)
    return state


def _padding(length: int) -> bytes:
    zeros = b"\x00" * ((55 - length) % _BLOCK_SIZE)
    return b"\x80" + zeros + struct.pack("<Q", (length * 8) & _MASK64)


class RjMD5:
    """Incremental hasher for the modified MD5 variant, in the hashlib style."""

    name = "rj_md5"
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

    def copy(self) -> RjMD5:
        """Return an independent copy of this hasher."""
        clone = type(self).__new__(type(self))
        clone._state = self._state
        clone._buffer = bytearray(self._buffer)
        clone._length = self._length
        return clone


def rj_md5(data: bytes) -> bytes:
    """Return the modified MD5 digest of ``data``."""
    return RjMD5(data).digest()