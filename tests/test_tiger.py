import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from rjhash.tiger import RjTiger, rj_tiger


@pytest.mark.parametrize("length", [0, 1, 55, 56, 63, 64, 65, 127, 128, 200])
def test_digest_size(length):
    assert len(rj_tiger(bytes(length))) == 24


def test_chunked_updates_match_one_shot():
    data = b"The quick brown fox jumps over the lazy dog"
    hasher = RjTiger()
    hasher.update(data[:10])
    hasher.update(data[10:])
    assert hasher.digest() == rj_tiger(data)
    assert hasher.digest() != rj_tiger(b"")


def test_different_inputs_differ():
    assert rj_tiger(b"abc") != rj_tiger(b"abd")


def test_tiger2_padding_changes_result():
    assert rj_tiger(b"abc", tiger2=True) != rj_tiger(b"abc", tiger2=False)


def test_padding_boundary_lengths_differ():
    digests = {rj_tiger(bytes(n)) for n in (54, 55, 56, 57, 63, 64)}
    assert len(digests) == 6


def test_empty_input_differs_from_standard_tiger():
    # Standard Tiger/192 of the empty string; the variant must not match it.
    standard = bytes.fromhex("3293ac630c13f0245f92bbb1766e16167a4e58492dde73f3")
    digest = rj_tiger(b"")
    assert digest == RjTiger().digest()
    assert len(digest) == len(standard)
    assert digest != standard


def test_hexdigest_matches_digest():
    hasher = RjTiger(b"hello world")
    assert hasher.hexdigest() == hasher.digest().hex()
    assert len(hasher.hexdigest()) == 48


def test_digest_does_not_change_state():
    hasher = RjTiger(b"some data")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b" more")
    assert hasher.digest() == rj_tiger(b"some data more")


def test_copy_is_independent():
    hasher = RjTiger(b"prefix", tiger2=True)
    clone = hasher.copy()
    clone.update(b"suffix")
    assert hasher.digest() == rj_tiger(b"prefix", tiger2=True)
    assert clone.digest() == rj_tiger(b"prefixsuffix", tiger2=True)


def test_update_accepts_bytearray_and_memoryview():
    data = b"x" * 100
    hasher = RjTiger()
    hasher.update(bytearray(data[:30]))
    hasher.update(memoryview(data[30:]))
    assert hasher.digest() == rj_tiger(data)


def test_update_rejects_text():
    with pytest.raises(TypeError):
        RjTiger().update("text")


@settings(max_examples=30, deadline=None)
@given(
    data=st.binary(max_size=300),
    cut=st.integers(min_value=0, max_value=300),
    tiger2=st.booleans(),
)
def test_incremental_matches_one_shot(data, cut, tiger2):
    cut = min(cut, len(data))
    hasher = RjTiger(tiger2=tiger2)
    hasher.update(data[:cut])
    hasher.update(data[cut:])
    assert hasher.digest() == rj_tiger(data, tiger2=tiger2)


@settings(max_examples=20, deadline=None)
@given(data=st.binary(min_size=1, max_size=150))
def test_byte_by_byte_matches_one_shot(data):
    hasher = RjTiger()
    for value in data:
        hasher.update(bytes([value]))
    assert hasher.digest() == rj_tiger(data)