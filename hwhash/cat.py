"""Incremental HighwayHash over data appended in arbitrary pieces.

The result equals the one-shot HighwayHash of the concatenated data,
however it was split into pieces.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .core import PACKET_SIZE, HighwayHashState

__all__ = [
    "HighwayHashCat",
    "highwayhash_cat64",
    "highwayhash_cat128",
    "highwayhash_cat256",
]


def _byte_view(data) -> memoryview:
    return memoryview(data).cast("B")


class HighwayHashCat:
    """Accumulates appended bytes and hashes them in 32-byte packets.

    The digest methods do not change the accumulated state, so more data
    may be appended after taking a digest.
    """

    __slots__ = ("_state", "_buffer")

    def __init__(self, key: Sequence[int]) -> None:
        self._state = HighwayHashState(key)
        self._buffer = bytearray()

    def append(self, data) -> None:
        """Append a bytes-like object to the message."""
        view = _byte_view(data)
        pos = 0
        if self._buffer:
            take = min(PACKET_SIZE - len(self._buffer), len(view))
            self._buffer += view[:take]
            pos = take
            if len(self._buffer) == PACKET_SIZE:
                self._state.update_packet(self._buffer)
                self._buffer.clear()
            if pos == len(view):
                return
        full_end = pos + (len(view) - pos) // PACKET_SIZE * PACKET_SIZE
        for start in range(pos, full_end, PACKET_SIZE):
            self._state.update_packet(view[start:start + PACKET_SIZE])
        self._buffer += view[full_end:]

    def copy(self) -> "HighwayHashCat":
        """Return an independent copy of this accumulator."""
        clone = HighwayHashCat.__new__(HighwayHashCat)
        clone._state = self._state.copy()
        clone._buffer = bytearray(self._buffer)
        return clone

    def _finishing_state(self) -> HighwayHashState:
        state = self._state.copy()
        if self._buffer:
            state.update_remainder(bytes(self._buffer))
        return state

    def digest64(self) -> int:
        """Return the 64-bit hash of everything appended so far."""
        return self._finishing_state().finalize64()

    def digest128(self) -> tuple[int, int]:
        """Return the 128-bit hash as two 64-bit lanes."""
        return self._finishing_state().finalize128()

    def digest256(self) -> tuple[int, int, int, int]:
        """Return the 256-bit hash as four 64-bit lanes."""
        return self._finishing_state().finalize256()


def _cat(key: Sequence[int], fragments: Iterable) -> HighwayHashCat:
    cat = HighwayHashCat(key)
    for fragment in fragments:
        cat.append(fragment)
    return cat


def highwayhash_cat64(key: Sequence[int], fragments: Iterable) -> int:
    """Return the 64-bit hash of the concatenation of ``fragments``."""
    return _cat(key, fragments).digest64()


def highwayhash_cat128(key: Sequence[int], fragments: Iterable) -> tuple[int, int]:
    """Return the 128-bit hash of the concatenation of ``fragments``."""
    return _cat(key, fragments).digest128()


def highwayhash_cat256(
    key: Sequence[int], fragments: Iterable
) -> tuple[int, int, int, int]:
    """Return the 256-bit hash of the concatenation of ``fragments``."""
    return _cat(key, fragments).digest256()