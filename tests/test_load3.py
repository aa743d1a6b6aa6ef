import pytest

from hwhash.load3 import (
    load_none,
    load_read_before,
    load_read_before_and_return,
    load_unordered,
)

BUF = bytes(range(0x10, 0x30))


@pytest.mark.parametrize("offset", [4, 8, 13])
@pytest.mark.parametrize("size", [0, 1, 2, 3])
def test_read_before_and_return_matches_last_four_bytes(offset, size):
    expected = int.from_bytes(BUF[offset + size - 4:offset + size], "little")
    assert load_read_before_and_return(BUF, offset, size) == expected


@pytest.mark.parametrize("offset", [4, 8, 13])
@pytest.mark.parametrize("size", [0, 1, 2, 3])
def test_read_before_strips_preceding_bytes(offset, size):
    assert load_read_before(BUF, offset, size) == load_none(BUF, offset, size)


@pytest.mark.parametrize("offset", [0, 5, 20])
@pytest.mark.parametrize("size", [0, 1, 2, 3])
def test_load_none_is_little_endian_slice(offset, size):
    expected = int.from_bytes(BUF[offset:offset + size], "little")
    assert load_none(BUF, offset, size) == expected


def test_load_none_pinned_value():
    assert load_none(b"\x01\x02\x03", 0, 3) == 0x030201


def test_unordered_zero_size_is_zero():
    assert load_unordered(BUF, 3, 0) == 0


def test_unordered_three_bytes_is_in_order():
    assert load_unordered(BUF, 7, 3) == load_none(BUF, 7, 3)


def test_unordered_one_byte_is_repeated():
    assert load_unordered(b"\xab", 0, 1) == load_none(b"\xab\xab\xab", 0, 3)


def test_unordered_two_bytes_duplicates_second():
    data = b"\x11\x22"
    assert load_unordered(data, 0, 2) == load_none(b"\x11\x22\x22", 0, 3)


def test_unordered_fits_in_24_bits():
    for size in range(4):
        assert load_unordered(b"\xff\xff\xff", 0, size) < (1 << 24)


def test_accepts_bytearray_and_memoryview():
    expected = load_none(BUF, 2, 3)
    assert load_none(bytearray(BUF), 2, 3) == expected
    assert load_none(memoryview(BUF), 2, 3) == expected


@pytest.mark.parametrize(
    "func", [load_none, load_unordered, load_read_before, load_read_before_and_return]
)
def test_invalid_size_raises(func):
    with pytest.raises(ValueError):
        func(BUF, 8, 4)


@pytest.mark.parametrize("func", [load_none, load_unordered])
def test_out_of_range_raises(func):
    with pytest.raises(ValueError):
        func(b"\x00\x01", 1, 3)


def test_read_before_needs_preceding_bytes():
    with pytest.raises(ValueError):
        load_read_before_and_return(b"\x00\x01\x02\x03", 1, 1)