import hashlib

import pytest
from hypothesis import given
from hypothesis import strategies as st

from rjhash.md5 import RjMD5, rj_md5


SAMPLE = bytes(range(256)) * 3


def test_digest_length_and_hex_form():
    hasher = RjMD5(b"abc")
    digest = hasher.digest()
    assert len(digest) == 16
    assert hasher.hexdigest() == digest.hex()
    assert len(hasher.hexdigest()) == 32


def test_not_the_standard_md5():
    data = b"The quick brown fox jumps over the lazy dog"
    result = rj_md5(data)
    assert len(result) == 16
    assert result != hashlib.md5(data).digest()


def test_empty_input_not_standard():
    assert rj_md5(b"") != hashlib.md5(b"").digest()
    assert rj_md5(b"") == RjMD5().digest()


@pytest.mark.parametrize("split", [0, 1, 3, 55, 56, 63, 64, 65, 127, 128, 700])
def test_chunked_update_matches_one_shot(split):
    hasher = RjMD5()
    hasher.update(SAMPLE[:split])
    hasher.update(SAMPLE[split:])
    assert hasher.digest() == rj_md5(SAMPLE)


@given(st.binary(max_size=300), st.data())
def test_any_split_gives_same_digest(data, draw):
    cut = draw.draw(st.integers(min_value=0, max_value=len(data)))
    hasher = RjMD5(data[:cut])
    hasher.update(data[cut:])
    assert hasher.digest() == rj_md5(data)


def test_byte_by_byte_update():
    hasher = RjMD5()
    for value in SAMPLE[:150]:
        hasher.update(bytes([value]))
    assert hasher.digest() == rj_md5(SAMPLE[:150])


def test_digest_does_not_disturb_state():
    hasher = RjMD5(b"first part ")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b"second part")
    assert hasher.digest() == rj_md5(b"first part second part")


def test_copy_is_independent():
    original = RjMD5(SAMPLE[:70])
    clone = original.copy()
    clone.update(b"more")
    assert original.digest() == rj_md5(SAMPLE[:70])
    assert clone.digest() == rj_md5(SAMPLE[:70] + b"more")


def test_lengths_around_padding_boundaries_are_distinct():
    digests = {rj_md5(b"\x00" * length) for length in range(0, 140)}
    assert len(digests) == 140


def test_accepts_bytes_like_objects():
    expected = rj_md5(SAMPLE[:100])
    assert rj_md5(bytearray(SAMPLE[:100])) == expected
    assert rj_md5(memoryview(SAMPLE)[:100]) == expected


def test_rejects_text():
    with pytest.raises(TypeError):
        RjMD5().update("text")