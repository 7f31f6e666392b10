import pytest
from hypothesis import given
from hypothesis import strategies as st

from rjhash.bitops import (
    bswap32,
    bswap64,
    ctz,
    rotl32,
    rotl64,
    rotr32,
    rotr64,
    swap_words32,
    swap_words64,
)

u32 = st.integers(min_value=0, max_value=0xFFFFFFFF)
u64 = st.integers(min_value=0, max_value=0xFFFFFFFFFFFFFFFF)


def test_bswap32_example():
    assert bswap32(0x01020304) == 0x04030201


def test_bswap64_example():
    assert bswap64(0x0102030405060708) == 0x0807060504030201


@given(u32)
def test_bswap32_involution(value):
    assert bswap32(bswap32(value)) == value


@given(u64)
def test_bswap64_involution(value):
    assert bswap64(bswap64(value)) == value


@given(u32, st.integers(min_value=0, max_value=31))
def test_rot32_round_trip(value, count):
    assert rotr32(rotl32(value, count), count) == value
    assert rotl32(value, count) < 2**32


@given(u64, st.integers(min_value=0, max_value=63))
def test_rot64_round_trip(value, count):
    assert rotr64(rotl64(value, count), count) == value
    assert rotl64(value, count) < 2**64


@given(u32)
def test_rotl32_full_turn(value):
    assert rotl32(value, 32) == value
    assert rotl32(value, 8) == rotr32(value, 24)


def test_rotl32_wraps_top_bit():
    assert rotl32(0x80000000, 1) == 1


def test_rotr64_wraps_low_bit():
    assert rotr64(1, 1) == 0x8000000000000000


@pytest.mark.parametrize("bit", range(32))
def test_ctz_single_bit(bit):
    assert ctz(1 << bit) == bit


@given(st.integers(min_value=1, max_value=0xFFFFFFFF))
def test_ctz_invariant(value):
    index = ctz(value)
    assert (value >> index) & 1 == 1
    assert value & ((1 << index) - 1) == 0


def test_ctz_zero():
    assert ctz(0) == 0


def test_swap_words32_example():
    data = bytes([1, 2, 3, 4, 5, 6, 7, 8])
    assert swap_words32(data) == bytes([4, 3, 2, 1, 8, 7, 6, 5])


def test_swap_words64_example():
    data = bytes(range(1, 9))
    assert swap_words64(data) == bytes(range(8, 0, -1))


@given(st.binary().map(lambda b: b[: len(b) - len(b) % 8]))
def test_swap_words_involution(data):
    assert swap_words32(swap_words32(data)) == data
    assert swap_words64(swap_words64(data)) == data
    assert len(swap_words32(data)) == len(data)


def test_swap_words32_rejects_partial_word():
    with pytest.raises(ValueError):
        swap_words32(b"\x01\x02\x03")


def test_swap_words64_rejects_partial_word():
    with pytest.raises(ValueError):
        swap_words64(b"\x00" * 12)