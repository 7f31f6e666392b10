from hypothesis import given
from hypothesis import strategies as st

from rjhash.encode import rj_decode, rj_encode


def test_encode_zero_byte():
    assert rj_encode(b"\x00") == b"\xff"


def test_encode_low_bit():
    assert rj_encode(b"\x01") == b"\x7f"


def test_empty():
    assert rj_encode(b"") == b""
    assert rj_decode(b"") == b""


@given(st.binary())
def test_round_trip(data):
    assert rj_decode(rj_encode(data)) == data
    assert rj_encode(rj_decode(data)) == data


@given(st.binary())
def test_length_preserved(data):
    assert len(rj_encode(data)) == len(data)


@given(st.binary())
def test_encode_is_involution(data):
    assert rj_encode(rj_encode(data)) == data


@given(st.binary())
def test_decode_matches_encode(data):
    assert rj_decode(data) == rj_encode(data)


def test_encode_is_bijection_on_bytes():
    everything = bytes(range(256))
    assert sorted(rj_encode(everything)) == list(range(256))


def test_accepts_bytearray():
    assert rj_encode(bytearray(b"abc")) == rj_encode(b"abc")