"""Streaming SipHash with configurable compression and finalization rounds.

Data may be fed in pieces of any size; the result equals the one-shot hash
of the concatenated data.
"""

from __future__ import annotations

import struct
from typing import Sequence

__all__ = [
    "SipHashState",
    "key_from_bytes",
    "siphash",
    "siphash13",
]

_MASK64 = (1 << 64) - 1

_IV = (
    0x736F6D6570736575,
    0x646F72616E646F6D,
    0x6C7967656E657261,
    0x7465646279746573,
)

_Lanes = tuple[int, int, int, int]


def _rotl(x: int, bits: int) -> int:
    return ((x << bits) | (x >> (64 - bits))) & _MASK64


def _sip_rounds(v: _Lanes, rounds: int) -> _Lanes:
    v0, v1, v2, v3 = v
    for _ in range(rounds):
        v0 = (v0 + v1) & _MASK64
        v2 = (v2 + v3) & _MASK64
        v1 = _rotl(v1, 13) ^ v0
        v3 = _rotl(v3, 16) ^ v2
        v0 = _rotl(v0, 32)
        v2 = (v2 + v1) & _MASK64
        v0 = (v0 + v3) & _MASK64
        v1 = _rotl(v1, 17) ^ v2
        v3 = _rotl(v3, 21) ^ v0
        v2 = _rotl(v2, 32)
    return v0, v1, v2, v3


def _digest(v: _Lanes, word: int, rounds: int) -> _Lanes:
    v0, v1, v2, v3 = v
    v0, v1, v2, v3 = _sip_rounds((v0, v1, v2, v3 ^ word), rounds)
    return v0 ^ word, v1, v2, v3


def _finish(v: _Lanes, last_word: int, c_rounds: int, d_rounds: int) -> int:
    v0, v1, v2, v3 = _digest(v, last_word, c_rounds)
    v0, v1, v2, v3 = _sip_rounds((v0, v1, v2 ^ 0xFF, v3), d_rounds)
    return v0 ^ v1 ^ v2 ^ v3


def _check_key(key: Sequence[int]) -> tuple[int, int]:
    lanes = tuple(key)
    if len(lanes) != 2:
        raise ValueError(f"key must have 2 lanes, got {len(lanes)}")
    for lane in lanes:
        if not isinstance(lane, int) or not 0 <= lane <= _MASK64:
            raise ValueError("key lanes must be integers in 0..2**64-1")
    return lanes  # type: ignore[return-value]


def _check_rounds(value: int, name: str) -> int:
    if not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return value


def _initial_lanes(key: Sequence[int]) -> _Lanes:
    k0, k1 = _check_key(key)
    return k0 ^ _IV[0], k1 ^ _IV[1], k0 ^ _IV[2], k1 ^ _IV[3]


def _byte_view(data) -> memoryview:
    return memoryview(data).cast("B")


def key_from_bytes(data) -> tuple[int, int]:
    """Build a two-lane key from 16 bytes read in little-endian order.

    A ``str`` is taken as its Latin-1 encoding.
    """
    raw = data.encode("latin-1") if isinstance(data, str) else _byte_view(data).tobytes()
    if len(raw) != 16:
        raise ValueError(f"key must be 16 bytes, got {len(raw)}")
    return struct.unpack("<2Q", raw)


class SipHashState:
    """Incremental SipHash-c-d; defaults to SipHash-2-4.

    :meth:`finalize` does not change the state, so more data may be added
    after taking a hash.
    """

    __slots__ = ("_v", "_length", "_pending", "c_rounds", "d_rounds")

    def __init__(self, key: Sequence[int], c_rounds: int = 2, d_rounds: int = 4) -> None:
        self.c_rounds = _check_rounds(c_rounds, "c_rounds")
        self.d_rounds = _check_rounds(d_rounds, "d_rounds")
        self._v = _initial_lanes(key)
        self._length = 0
        self._pending = bytearray()

    def update(self, data) -> None:
        """Absorb a bytes-like object of any length."""
        view = _byte_view(data)
        self._length += len(view)
        pos = 0
        if self._pending:
            take = min(8 - len(self._pending), len(view))
            self._pending += view[:take]
            pos = take
            if len(self._pending) < 8:
                return
            self._v = _digest(self._v, int.from_bytes(self._pending, "little"), self.c_rounds)
            self._pending.clear()
        end = pos + (len(view) - pos) // 8 * 8
        v = self._v
        for (word,) in struct.iter_unpack("<Q", view[pos:end]):
            v = _digest(v, word, self.c_rounds)
        self._v = v
        self._pending += view[end:]

    def copy(self) -> "SipHashState":
        """Return an independent copy of this state."""
        clone = SipHashState.__new__(SipHashState)
        clone.c_rounds = self.c_rounds
        clone.d_rounds = self.d_rounds
        clone._v = self._v
        clone._length = self._length
        clone._pending = bytearray(self._pending)
        return clone

    def finalize(self) -> int:
        """Return the 64-bit hash of everything absorbed so far."""
        last = int.from_bytes(self._pending, "little") | ((self._length & 0xFF) << 56)
        return _finish(self._v, last, self.c_rounds, self.d_rounds)


def siphash(key: Sequence[int], data) -> int:
    """Return SipHash-2-4 of ``data`` under a two-lane ``key``."""
    state = SipHashState(key)
    state.update(data)
    return state.finalize()


def siphash13(key: Sequence[int], data) -> int:
    """Return SipHash-1-3 of ``data`` under a two-lane ``key``."""
    state = SipHashState(key, 1, 3)
    state.update(data)
    return state.finalize()