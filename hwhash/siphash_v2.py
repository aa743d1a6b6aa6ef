"""Block-oriented SipHash: intermediate updates take whole 8-byte words.

Produces the same values as :mod:`hwhash.siphash`; only the streaming
interface is narrower.
"""

from __future__ import annotations

import struct
from typing import Sequence

from .siphash import _byte_view, _check_rounds, _digest, _finish, _initial_lanes

__all__ = ["BlockSipHashState", "siphash", "siphash13"]


class BlockSipHashState:
    """SipHash-c-d state fed with data whose length is a multiple of 8.

    Any tail of fewer than 8 bytes is handed to :meth:`finalize`.
    """

    __slots__ = ("_v", "_length", "c_rounds", "d_rounds")

    def __init__(self, key: Sequence[int], c_rounds: int = 2, d_rounds: int = 4) -> None:
        self.c_rounds = _check_rounds(c_rounds, "c_rounds")
        self.d_rounds = _check_rounds(d_rounds, "d_rounds")
        self._v = _initial_lanes(key)
        self._length = 0

    def update(self, data) -> None:
        """Absorb data whose length is a multiple of 8 bytes."""
        view = _byte_view(data)
        if len(view) % 8:
            raise ValueError(f"update needs a multiple of 8 bytes, got {len(view)}")
        self._length += len(view)
        v = self._v
        for (word,) in struct.iter_unpack("<Q", view):
            v = _digest(v, word, self.c_rounds)
        self._v = v

    def finalize(self, data=b"") -> int:
        """Absorb ``data`` of any length and return the 64-bit hash."""
        view = _byte_view(data)
        whole = len(view) // 8 * 8
        self.update(view[:whole])
        tail = view[whole:]
        length = self._length + len(tail)
        last = int.from_bytes(tail, "little") | ((length & 0xFF) << 56)
        return _finish(self._v, last, self.c_rounds, self.d_rounds)


def siphash(key: Sequence[int], data) -> int:
    """Return SipHash-2-4 of ``data`` under a two-lane ``key``."""
    return BlockSipHashState(key).finalize(data)


def siphash13(key: Sequence[int], data) -> int:
    """Return SipHash-1-3 of ``data`` under a two-lane ``key``."""
    return BlockSipHashState(key, 1, 3).finalize(data)