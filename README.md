# hwhash

Keyed hash functions in pure Python, with no dependencies outside the
standard library:

- **HighwayHash**: a keyed pseudorandom function producing 64-, 128- or
  256-bit results.
- **SipHash-2-4** and **SipHash-1-3**: short-input keyed hashes, one-shot
  and streaming, with the number of rounds configurable.

Input is any bytes-like object. Results are unsigned integers (64-bit) or
tuples of 64-bit unsigned integers (128- and 256-bit).

## Installation

```
pip install hwhash
```

Python 3.10 or newer is required.

## HighwayHash

A HighwayHash key is a sequence of four integers in `0..2**64-1`; anything
else raises `ValueError`. Use your own key so that your hashes differ from
everyone else's.

```python
from hwhash.core import highwayhash64, highwayhash128, highwayhash256

key = (1, 2, 3, 4)
data = b"Hello world!"

h64 = highwayhash64(data, key)     # int
h128 = highwayhash128(data, key)   # tuple of two 64-bit ints
h256 = highwayhash256(data, key)   # tuple of four 64-bit ints
print(f"{h64:016x}")
```

### Streaming

When the data arrives in pieces, use `hwhash.cat.HighwayHashCat`. Appending
pieces one after another gives the same result as hashing their
concatenation in one call, however the data was split.

```python
from hwhash.cat import HighwayHashCat

hasher = HighwayHashCat((1, 2, 3, 4))
hasher.append(b"Hello")
hasher.append(b" world!")
print(f"{hasher.digest64():016x}")
```

`digest64`, `digest128` and `digest256` leave the hasher unchanged, so you
can keep appending afterwards; `copy()` gives an independent hasher that
shares the data appended so far.

For fragments already in hand there are one-call helpers:

```python
from hwhash.cat import highwayhash_cat64

highwayhash_cat64((1, 2, 3, 4), [b"Hello", b" ", b"world!"])
```

`highwayhash_cat128` and `highwayhash_cat256` return the wider results.

### Low-level state

`hwhash.core.HighwayHashState` exposes the algorithm step by step:

- `update_packet(packet)` absorbs exactly 32 bytes;
- `update_remainder(data)` absorbs the final 1 to 31 bytes (other sizes
  raise `ValueError`);
- `finalize64()`, `finalize128()` or `finalize256()` return the hash.

Finalizing mixes the state further, so call only one of them, and `copy()`
the state first if you need more than one result. `reset(key)` starts over
with a new key.

`hwhash.load3` holds the helpers used to gather the last 0 to 3 bytes of a
message (`load_read_before_and_return`, `load_read_before`,
`load_unordered`, `load_none`); each takes a buffer, an offset and a count
in `0..3`.

## SipHash

A SipHash key is a sequence of two integers in `0..2**64-1`.
`key_from_bytes` builds one from 16 bytes read in little-endian order; a
`str` is taken as its Latin-1 encoding.

```python
from hwhash.siphash import key_from_bytes, siphash, siphash13

key = key_from_bytes(bytes(range(16)))
siphash(key, b"message")     # SipHash-2-4
siphash13(key, b"message")   # SipHash-1-3
```

Streaming with pieces of any size:

```python
from hwhash.siphash import SipHashState

state = SipHashState(key)          # SipHash-2-4; SipHashState(key, 1, 3) for 1-3
state.update(b"mes")
state.update(b"sage")
state.finalize()
```

`finalize()` leaves the state unchanged, so more data may follow; `copy()`
branches off an independent state.

`hwhash.siphash_v2.BlockSipHashState` is a narrower variant: its `update`
accepts only data whose length is a multiple of 8 bytes (otherwise
`ValueError`), and `finalize(data)` takes the final piece of any length and
returns the hash. The module's `siphash` and `siphash13` give the same
values as those in `hwhash.siphash`.

## Instruction-set targets

`hwhash.targets` names the instruction-set targets HighwayHash
implementations are known by. `Target` is an `IntFlag` with one bit per
target (`PORTABLE`, `SSE41`, `AVX2`, `VSX`, `NEON`); `target_name(bits)`
returns the short name of a single bit, or `None` for zero, several or
unknown bits; `foreach_target(bits)` yields each set bit, lowest first.

## Command line

```
hwhash "Hello world!"
```

hashes the text with the example key `(1, 2, 3, 4)`, once in one call and
once through `HighwayHashCat`, and prints both 64-bit results in decimal.
Called with anything other than one argument it prints a usage line and
exits with status 1.

```
hwhash --sip-demo
```

prints a few SipHash-2-4 values: a streamed hash of packed doubles and a
UTF-32 string, two one-shot hashes, and a 15-byte test vector in hex.

## What this package does not do

There is one pure-Python implementation of each hash. The names in
`hwhash.targets` are labels only: nothing detects the CPU or selects a
faster implementation, and the package is far slower than native code.
There are no benchmarking tools.

## Running the tests

```
pip install "hwhash[test]"
pytest
```