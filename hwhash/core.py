"""HighwayHash: a keyed 64/128/256-bit pseudorandom function."""

from __future__ import annotations

import struct
from typing import Sequence

from .load3 import load_read_before_and_return, load_unordered

__all__ = [
    "HighwayHashState",
    "highwayhash64",
    "highwayhash128",
    "highwayhash256",
]

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1

PACKET_SIZE = 32

_INIT0 = (
    0xDBE6D5D5FE4CCE2F,
    0xA4093822299F31D0,
    0x13198A2E03707344,
    0x243F6A8885A308D3,
)
_INIT1 = (
    0x3BD39E10CB0EF593,
    0xC0ACF169B5F18A8C,
    0xBE5466CF34E90C6C,
    0x452821E638D01377,
)


def _rotate64_by32(x: int) -> int:
    return ((x >> 32) | (x << 32)) & _MASK64


def _rotate32_by(x: int, count: int) -> int:
    def rot(half: int) -> int:
        return ((half << count) | (half >> (32 - count))) & _MASK32

    return rot(x & _MASK32) | (rot(x >> 32) << 32)


def _zipper_merge(v1: int, v0: int) -> tuple[int, int]:
    """Return the (add1, add0) contributions of the byte shuffle of v1:v0."""
    add0 = (
        (((v0 & 0xFF000000) | (v1 & 0xFF00000000)) >> 24)
        | (((v0 & 0xFF0000000000) | (v1 & 0xFF000000000000)) >> 16)
        | (v0 & 0xFF0000)
        | ((v0 & 0xFF00) << 32)
        | ((v1 & 0xFF00000000000000) >> 8)
        | ((v0 << 56) & _MASK64)
    )
    add1 = (
        (((v1 & 0xFF000000) | (v0 & 0xFF00000000)) >> 24)
        | (v1 & 0xFF0000)
        | ((v1 & 0xFF0000000000) >> 16)
        | ((v1 & 0xFF00) << 24)
        | ((v0 & 0xFF000000000000) >> 8)
        | ((v1 & 0xFF) << 48)
        | (v0 & 0xFF00000000000000)
    )
    return add1, add0


def _modular_reduction(a3_unmasked: int, a2: int, a1: int, a0: int) -> tuple[int, int]:
    """Reduce a 256-bit number by x^128 + x^2 + x; returns (m1, m0)."""
    a3 = a3_unmasked & 0x3FFFFFFFFFFFFFFF
    m1 = a1 ^ (((a3 << 1) | (a2 >> 63)) & _MASK64) ^ (((a3 << 2) | (a2 >> 62)) & _MASK64)
    m0 = a0 ^ ((a2 << 1) & _MASK64) ^ ((a2 << 2) & _MASK64)
    return m1, m0


def _as_bytes(data) -> bytes:
    return memoryview(data).tobytes()


def _check_key(key: Sequence[int]) -> tuple[int, int, int, int]:
    lanes = tuple(key)
    if len(lanes) != 4:
        raise ValueError(f"key must have 4 lanes, got {len(lanes)}")
    for lane in lanes:
        if not isinstance(lane, int) or not 0 <= lane <= _MASK64:
            raise ValueError("key lanes must be integers in 0..2**64-1")
    return lanes  # type: ignore[return-value]


class HighwayHashState:
    """Low-level HighwayHash state: feed 32-byte packets, then a remainder.

    The finalize methods mix the state further, so each may be called once;
    use :meth:`copy` to finalize more than one way.
    """

    __slots__ = ("v0", "v1", "mul0", "mul1")

    def __init__(self, key: Sequence[int]) -> None:
        self.reset(key)

    def reset(self, key: Sequence[int]) -> None:
        """Initialise the state from a key of four 64-bit lanes."""
        lanes = _check_key(key)
        self.mul0 = list(_INIT0)
        self.mul1 = list(_INIT1)
        self.v0 = [m ^ k for m, k in zip(_INIT0, lanes)]
        self.v1 = [m ^ _rotate64_by32(k) for m, k in zip(_INIT1, lanes)]

    def copy(self) -> "HighwayHashState":
        """Return an independent copy of this state."""
        clone = HighwayHashState.__new__(HighwayHashState)
        clone.v0 = list(self.v0)
        clone.v1 = list(self.v1)
        clone.mul0 = list(self.mul0)
        clone.mul1 = list(self.mul1)
        return clone

    def _update(self, lanes: Sequence[int]) -> None:
        v0, v1, mul0, mul1 = self.v0, self.v1, self.mul0, self.mul1
        for i, lane in enumerate(lanes):
            v1[i] = (v1[i] + mul0[i] + lane) & _MASK64
            mul0[i] ^= ((v1[i] & _MASK32) * (v0[i] >> 32)) & _MASK64
            v0[i] = (v0[i] + mul1[i]) & _MASK64
            mul1[i] ^= ((v0[i] & _MASK32) * (v1[i] >> 32)) & _MASK64
        for hi, lo, src, dst in ((1, 0, v1, v0), (3, 2, v1, v0), (1, 0, v0, v1), (3, 2, v0, v1)):
            add1, add0 = _zipper_merge(src[hi], src[lo])
            dst[hi] = (dst[hi] + add1) & _MASK64
            dst[lo] = (dst[lo] + add0) & _MASK64

    def update_packet(self, packet) -> None:
        """Absorb exactly 32 bytes."""
        raw = _as_bytes(packet)
        if len(raw) != PACKET_SIZE:
            raise ValueError(f"packet must be {PACKET_SIZE} bytes, got {len(raw)}")
        self._update(struct.unpack("<4Q", raw))

    def update_remainder(self, data) -> None:
        """Absorb the final 1..31 bytes of a message."""
        raw = _as_bytes(data)
        size = len(raw)
        if not 1 <= size < PACKET_SIZE:
            raise ValueError(f"remainder must be 1..31 bytes, got {size}")
        pair = ((size << 32) + size) & _MASK64
        self.v0 = [(v + pair) & _MASK64 for v in self.v0]
        self.v1 = [_rotate32_by(v, size) for v in self.v1]

        head = size & ~3
        size_mod4 = size & 3
        packet = bytearray(PACKET_SIZE)
        packet[:head] = raw[:head]
        if size & 16:
            last4 = load_read_before_and_return(raw, head, size_mod4)
            packet[28:32] = last4.to_bytes(4, "little")
        else:
            last3 = load_unordered(raw, head, size_mod4)
            packet[16:24] = last3.to_bytes(8, "little")
        self.update_packet(packet)

    def _permute_and_update(self) -> None:
        v0 = self.v0
        self._update([_rotate64_by32(v0[i]) for i in (2, 3, 0, 1)])

    def finalize64(self) -> int:
        """Return the 64-bit hash."""
        for _ in range(4):
            self._permute_and_update()
        return (self.v0[0] + self.v1[0] + self.mul0[0] + self.mul1[0]) & _MASK64

    def finalize128(self) -> tuple[int, int]:
        """Return the 128-bit hash as two 64-bit lanes."""
        for _ in range(6):
            self._permute_and_update()
        v0, v1, mul0, mul1 = self.v0, self.v1, self.mul0, self.mul1
        return (
            (v0[0] + mul0[0] + v1[2] + mul1[2]) & _MASK64,
            (v0[1] + mul0[1] + v1[3] + mul1[3]) & _MASK64,
        )

    def finalize256(self) -> tuple[int, int, int, int]:
        """Return the 256-bit hash as four 64-bit lanes."""
        for _ in range(10):
            self._permute_and_update()
        v0, v1, mul0, mul1 = self.v0, self.v1, self.mul0, self.mul1

        def total(a: list[int], b: list[int], i: int) -> int:
            return (a[i] + b[i]) & _MASK64

        h1, h0 = _modular_reduction(
            total(v1, mul1, 1), total(v1, mul1, 0), total(v0, mul0, 1), total(v0, mul0, 0)
        )
        h3, h2 = _modular_reduction(
            total(v1, mul1, 3), total(v1, mul1, 2), total(v0, mul0, 3), total(v0, mul0, 2)
        )
        return h0, h1, h2, h3


def _process_all(data, key: Sequence[int]) -> HighwayHashState:
    raw = _as_bytes(data)
    state = HighwayHashState(key)
    full = len(raw) - len(raw) % PACKET_SIZE
    view = memoryview(raw)
    for start in range(0, full, PACKET_SIZE):
        state.update_packet(view[start:start + PACKET_SIZE])
    if full != len(raw):
        state.update_remainder(view[full:])
    return state


def highwayhash64(data, key: Sequence[int]) -> int:
    """Return the 64-bit HighwayHash of ``data`` under ``key``."""
    return _process_all(data, key).finalize64()


def highwayhash128(data, key: Sequence[int]) -> tuple[int, int]:
    """Return the 128-bit HighwayHash of ``data`` as two 64-bit lanes."""
    return _process_all(data, key).finalize128()


def highwayhash256(data, key: Sequence[int]) -> tuple[int, int, int, int]:
    """Return the 256-bit HighwayHash of ``data`` as four 64-bit lanes."""
    return _process_all(data, key).finalize256()