import pytest
from hypothesis import given
from hypothesis import strategies as st

from rjhash.crc16 import crc16


def test_check_value():
    assert crc16(b"123456789") == 0x31C3


def test_empty():
    assert crc16(b"") == 0


def test_accepts_bytearray_and_memoryview():
    expected = crc16(b"123456789")
    assert crc16(bytearray(b"123456789")) == expected
    assert crc16(memoryview(b"123456789")) == expected


def test_rejects_text():
    with pytest.raises(TypeError):
        crc16("123456789")


@given(st.binary())
def test_result_is_16_bit(data):
    assert 0 <= crc16(data) <= 0xFFFF


@given(st.binary())
def test_appending_checksum_gives_zero(data):
    checksum = crc16(data)
    assert crc16(data + checksum.to_bytes(2, "big")) == 0


@given(st.binary(min_size=1), st.integers(min_value=0, max_value=7))
def test_single_bit_flip_changes_checksum(data, bit):
    flipped = bytearray(data)
    flipped[0] ^= 1 << bit
    assert crc16(bytes(flipped)) != crc16(data)