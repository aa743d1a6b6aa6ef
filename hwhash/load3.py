"""Loading of the final 0..3 bytes of a message under several policies.

Each policy reads from ``buffer`` starting at ``offset`` and covers
``size_mod4`` valid bytes. The policies differ in which extra bytes they may
touch and in how the valid bytes are arranged in the returned integer.
"""

from __future__ import annotations

__all__ = [
    "load_read_before_and_return",
    "load_read_before",
    "load_unordered",
    "load_none",
]


def _view(buffer) -> memoryview:
    return memoryview(buffer).cast("B")


def _check(view: memoryview, offset: int, size_mod4: int) -> None:
    if not 0 <= size_mod4 <= 3:
        raise ValueError(f"size_mod4 must be in 0..3, got {size_mod4}")
    if offset < 0 or offset + size_mod4 > len(view):
        raise ValueError("requested bytes lie outside the buffer")


def load_read_before_and_return(buffer, offset: int, size_mod4: int) -> int:
    """Return the 4 bytes ending at ``offset + size_mod4`` as a little-endian u32.

    Up to four bytes preceding ``offset`` are read and occupy the
    least-significant positions; the buffer must hold them.
    """
    view = _view(buffer)
    _check(view, offset, size_mod4)
    end = offset + size_mod4
    start = end - 4
    if start < 0:
        raise ValueError("not enough bytes before the offset to read 4 bytes")
    return int.from_bytes(view[start:end], "little")


def load_read_before(buffer, offset: int, size_mod4: int) -> int:
    """Return the ``size_mod4`` valid bytes in little-endian order, upper bytes zero.

    Like :func:`load_read_before_and_return` this reads preceding bytes, but
    shifts them out of the result.
    """
    last4 = load_read_before_and_return(buffer, offset, size_mod4)
    return last4 >> (32 - size_mod4 * 8)


def load_unordered(buffer, offset: int, size_mod4: int) -> int:
    """Return the valid bytes in the order fixed by HighwayHash length padding.

    Bytes at indices 0, ``size_mod4 >> 1`` and ``size_mod4 - 1`` are placed in
    the three least-significant bytes; zero when ``size_mod4`` is zero.
    """
    view = _view(buffer)
    _check(view, offset, size_mod4)
    if size_mod4 == 0:
        return 0
    first = view[offset]
    middle = view[offset + (size_mod4 >> 1)]
    last = view[offset + size_mod4 - 1]
    return first | (middle << 8) | (last << 16)


def load_none(buffer, offset: int, size_mod4: int) -> int:
    """Return exactly the ``size_mod4`` bytes at ``offset`` in little-endian order."""
    view = _view(buffer)
    _check(view, offset, size_mod4)
    return int.from_bytes(view[offset:offset + size_mod4], "little")