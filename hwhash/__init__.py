"""HighwayHash and SipHash keyed hash functions in pure Python."""

__version__ = "0.1.0"

__all__ = ["cat", "cli", "core", "load3", "siphash", "siphash_v2", "targets"]