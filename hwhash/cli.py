"""Command line: print the HighwayHash of a text, or a SipHash demonstration."""

from __future__ import annotations

import os
import struct
import sys
from typing import Sequence

from .cat import HighwayHashCat
from .core import highwayhash64
from .siphash import SipHashState, key_from_bytes, siphash

__all__ = ["main"]

_HIGHWAY_KEY = (1, 2, 3, 4)

_DEMO_VALUES = (1.23, 1.43, 78.0, 232.23, 90.0, 23.12, 44.8)
_DEMO_TEXT = "This is a test for hashing wide strings"
_DEMO_KEY_TEXT = "0123456789ABCDEF"
_DEMO_LANE = 0xDEADBEEFDEAF10CC
_DEMO_VECTOR_KEY = (0x0706050403020100, 0x0F0E0D0C0B0A0908)

_USAGE = "Please provide 1 argument with a text to hash"


def _hash_text(text: str) -> None:
    data = os.fsencode(text)
    print(f"Hash   : {highwayhash64(data, _HIGHWAY_KEY)}")
    cat = HighwayHashCat(_HIGHWAY_KEY)
    cat.append(data)
    print(f"HashCat: {cat.digest64()}")


def _sip_demo() -> None:
    doubles = struct.pack(f"<{len(_DEMO_VALUES)}d", *_DEMO_VALUES)
    wide = _DEMO_TEXT.encode("utf-32-le")

    hasher = SipHashState(key_from_bytes(_DEMO_KEY_TEXT))
    for chunk in (doubles, doubles, wide):
        hasher.update(chunk)
    print(hasher.finalize())

    lane_key = (_DEMO_LANE, _DEMO_LANE)
    print(siphash(lane_key, doubles))
    print(siphash(lane_key, doubles))

    message = struct.pack("<2Q", *_DEMO_VECTOR_KEY)[:15]
    print(format(siphash(_DEMO_VECTOR_KEY, message), "x"))


def main(argv: Sequence[str] | None = None) -> int:
    """Hash one text argument, or run the SipHash demo with ``--sip-demo``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args == ["--sip-demo"]:
        _sip_demo()
        return 0
    if len(args) != 1:
        print(_USAGE)
        return 1
    _hash_text(args[0])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())