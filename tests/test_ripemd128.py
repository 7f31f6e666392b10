import hashlib

import pytest
from hypothesis import given, strategies as st

from rjhash.ripemd128 import RjRIPEMD128, rj_ripemd128


def test_digest_size():
    assert len(rj_ripemd128(b"")) == 16
    assert len(rj_ripemd128(b"a" * 1000)) == 16


def test_hexdigest_matches_digest():
    hasher = RjRIPEMD128(b"abc")
    assert hasher.hexdigest() == hasher.digest().hex()
    assert len(hasher.hexdigest()) == 32


def test_chunked_updates_match_one_shot():
    hasher = RjRIPEMD128()
    hasher.update(b"hello")
    hasher.update(b" ")
    hasher.update(b"world")
    assert hasher.digest() == rj_ripemd128(b"hello world")
    assert hasher.digest() != rj_ripemd128(b"")


def test_differs_from_standard_md5_shape():
    # Different inputs give different digests and the value is not plain MD5.
    first = rj_ripemd128(b"abc")
    second = rj_ripemd128(b"abd")
    assert first != second
    assert first != hashlib.md5(b"abc").digest()


@pytest.mark.parametrize("length", [0, 1, 55, 56, 63, 64, 65, 119, 120, 128, 200])
def test_padding_boundaries_incremental(length):
    data = bytes(i % 251 for i in range(length))
    hasher = RjRIPEMD128()
    for byte in data:
        hasher.update(bytes([byte]))
    assert hasher.digest() == rj_ripemd128(data)


def test_boundary_lengths_distinct():
    digests = {rj_ripemd128(b"\x00" * n) for n in (55, 56, 63, 64, 65)}
    assert len(digests) == 5


def test_digest_does_not_change_state():
    hasher = RjRIPEMD128(b"part one")
    before = hasher.digest()
    assert hasher.digest() == before
    hasher.update(b" part two")
    assert hasher.digest() == rj_ripemd128(b"part one part two")


def test_copy_is_independent():
    hasher = RjRIPEMD128(b"x" * 70)
    clone = hasher.copy()
    clone.update(b"more")
    assert hasher.digest() == rj_ripemd128(b"x" * 70)
    assert clone.digest() == rj_ripemd128(b"x" * 70 + b"more")


def test_accepts_bytearray_and_memoryview():
    data = b"buffer input" * 10
    assert rj_ripemd128(bytearray(data)) == rj_ripemd128(data)
    assert rj_ripemd128(memoryview(data)) == rj_ripemd128(data)


def test_rejects_str():
    with pytest.raises(TypeError):
        RjRIPEMD128().update("text")


def test_attributes():
    assert RjRIPEMD128.digest_size == 16
    assert RjRIPEMD128.block_size == 64
    assert RjRIPEMD128().name == "rj_ripemd128"


@given(st.binary(max_size=300), st.integers(min_value=0, max_value=300))
def test_split_anywhere(data, cut):
    cut = min(cut, len(data))
    hasher = RjRIPEMD128(data[:cut])
    hasher.update(data[cut:])
    assert hasher.digest() == rj_ripemd128(data)