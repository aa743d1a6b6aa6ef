"""Identifiers for instruction-set targets and helpers over sets of them.

A target set is an integer whose bits are :class:`Target` values; each
target occupies a distinct power of two.
"""

from __future__ import annotations

from enum import IntFlag
from typing import Iterator

__all__ = ["Target", "target_name", "foreach_target"]


class Target(IntFlag):
    """Instruction-set targets, one bit each."""

    PORTABLE = 1
    SSE41 = 2
    AVX2 = 4
    VSX = 8
    NEON = 16


_NAMES = {
    Target.PORTABLE: "Portable",
    Target.SSE41: "SSE41",
    Target.AVX2: "AVX2",
    Target.VSX: "VSX",
    Target.NEON: "NEON",
}


def _check_bits(bits: int) -> int:
    value = int(bits)
    if value < 0:
        raise ValueError(f"target bits must be non-negative, got {value}")
    return value


def target_name(bits: int) -> str | None:
    """Return the short name of a single target bit.

    Returns ``None`` when no bit, several bits or an unknown bit is set.
    """
    value = _check_bits(bits)
    for target, name in _NAMES.items():
        if value == target:
            return name
    return None


def foreach_target(bits: int) -> Iterator[int]:
    """Yield each set bit of ``bits`` as its own value, lowest first."""
    value = _check_bits(bits)
    while value:
        lowest = value & -value
        yield lowest
        value &= ~lowest