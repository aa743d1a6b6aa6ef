import pytest

from hwhash import siphash as streaming
from hwhash.siphash_v2 import BlockSipHashState, siphash, siphash13

KEY = (0x0706050403020100, 0x0F0E0D0C0B0A0908)
DEAD_KEY = (0xDEADBEEFDEAF10CC, 0xDEADBEEFDEAF10CC)


def test_reference_vector_fifteen_bytes():
    assert siphash(KEY, bytes(range(15))) == 0xA129CA6149BE45E5


@pytest.mark.parametrize("size", range(0, 70))
def test_matches_streaming_siphash(size):
    data = bytes((i * 13 + 1) & 0xFF for i in range(size))
    assert siphash(KEY, data) == streaming.siphash(KEY, data)
    assert siphash13(DEAD_KEY, data) == streaming.siphash13(DEAD_KEY, data)


def test_block_updates_then_tail():
    data = bytes(range(45))
    state = BlockSipHashState(KEY)
    state.update(data[:8])
    state.update(data[8:24])
    assert state.finalize(data[24:]) == siphash(KEY, data)


def test_finalize_without_tail():
    data = bytes(range(32))
    state = BlockSipHashState(KEY, 1, 3)
    state.update(data)
    assert state.finalize() == siphash13(KEY, data)


def test_update_requires_whole_words():
    state = BlockSipHashState(KEY)
    with pytest.raises(ValueError):
        state.update(b"12345")


def test_invalid_key():
    with pytest.raises(ValueError):
        siphash((1, 2, 3), b"")


def test_invalid_rounds():
    with pytest.raises(ValueError):
        BlockSipHashState(KEY, 2, 0)